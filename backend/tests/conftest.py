"""Shared test fixtures."""

from __future__ import annotations

import pytest

from glyphgrid.data.dataset import Dataset, parse_csv
from glyphgrid.engine.noise import PerlinNoise
from glyphgrid.session import GridSession


# column0 ramps 0..4, every other column is constant
RAMP_CSV = """column0,column1,column2,column3,column4
0,1,2,3,4
1,1,2,3,4
2,1,2,3,4
3,1,2,3,4
4,1,2,3,4
"""

SAMPLE_CSV = """column0,column1,column2,column3,column4
12.4,3.1,88.0,7.25,0.42
5.0,7.8,64.5,2.0,0.91
18.9,1.2,71.3,9.6,0.13
9.3,5.5,92.1,4.4,0.67
14.7,6.9,55.8,1.1,0.35
3.2,2.4,80.2,8.3,0.78
11.1,8.6,68.9,5.7,0.05
16.5,4.0,99.4,3.3,0.56
7.8,9.3,59.1,6.8,0.29
20.0,0.7,76.6,0.4,0.88
10.6,6.1,84.7,9.9,0.61
2.5,3.8,62.3,2.7,0.17
"""

# Default viewport used by session fixtures: 9 columns at item 110 + padding 18
VIEWPORT = (1280, 800)


@pytest.fixture
def ramp_dataset() -> Dataset:
    return parse_csv(RAMP_CSV)


@pytest.fixture
def sample_dataset() -> Dataset:
    return parse_csv(SAMPLE_CSV)


@pytest.fixture
def sample_csv_path(tmp_path):
    path = tmp_path / "dataset.csv"
    path.write_text(SAMPLE_CSV, encoding="utf-8")
    return path


@pytest.fixture
def session(sample_dataset) -> GridSession:
    s = GridSession(sample_dataset, noise=PerlinNoise(seed=7))
    s.render(*VIEWPORT)
    return s
