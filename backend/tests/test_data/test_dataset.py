"""Tests for CSV dataset loading."""

from __future__ import annotations

import pytest

from glyphgrid.data.dataset import COLUMNS, load_dataset, parse_csv
from glyphgrid.errors import InvalidDataError
from tests.conftest import SAMPLE_CSV


def test_parse_sample():
    ds = parse_csv(SAMPLE_CSV)
    assert len(ds) == 12
    assert ds.values.shape == (12, 5)
    assert ds.raw_row(0) == (12.4, 3.1, 88.0, 7.25, 0.42)


def test_record_keeps_original_text():
    ds = parse_csv(SAMPLE_CSV)
    assert ds.record(2) == [
        ("column0", "18.9"),
        ("column1", "1.2"),
        ("column2", "71.3"),
        ("column3", "9.6"),
        ("column4", "0.13"),
    ]


def test_header_order_is_free():
    ds = parse_csv("column4,column3,column2,column1,column0\n5,4,3,2,1\n")
    # Values are stored in canonical column order, records in header order
    assert ds.raw_row(0) == (1.0, 2.0, 3.0, 4.0, 5.0)
    assert [name for name, _ in ds.record(0)] == list(reversed(COLUMNS))


def test_blank_lines_skipped():
    ds = parse_csv("column0,column1,column2,column3,column4\n1,2,3,4,5\n\n2,3,4,5,6\n")
    assert len(ds) == 2


def test_malformed_cell_fails_fast():
    with pytest.raises(InvalidDataError, match="line 3"):
        parse_csv("column0,column1,column2,column3,column4\n1,2,3,4,5\n1,2,abc,4,5\n")


def test_empty_cell_is_not_zero():
    with pytest.raises(InvalidDataError):
        parse_csv("column0,column1,column2,column3,column4\n1,2,,4,5\n")


def test_non_finite_rejected():
    with pytest.raises(InvalidDataError):
        parse_csv("column0,column1,column2,column3,column4\n1,2,nan,4,5\n")


def test_missing_column():
    with pytest.raises(InvalidDataError, match="missing"):
        parse_csv("column0,column1,column2,column3\n1,2,3,4\n")


def test_unexpected_column():
    with pytest.raises(InvalidDataError):
        parse_csv("column0,column1,column2,column3,column4,extra\n1,2,3,4,5,6\n")


def test_short_row():
    with pytest.raises(InvalidDataError, match="expected 5 cells"):
        parse_csv("column0,column1,column2,column3,column4\n1,2,3,4\n")


def test_empty_text():
    with pytest.raises(InvalidDataError):
        parse_csv("")


def test_header_only():
    with pytest.raises(InvalidDataError, match="no rows"):
        parse_csv("column0,column1,column2,column3,column4\n")


def test_load_from_disk(sample_csv_path):
    ds = load_dataset(sample_csv_path)
    assert len(ds) == 12


def test_load_missing_file(tmp_path):
    with pytest.raises(InvalidDataError, match="cannot read"):
        load_dataset(tmp_path / "nope.csv")


def test_load_invalid_utf8(tmp_path):
    path = tmp_path / "latin1.csv"
    path.write_bytes(b"column0,column1,column2,column3,column4\n1,2,3,4,\xff\n")
    with pytest.raises(InvalidDataError, match="cannot read dataset"):
        load_dataset(path)
