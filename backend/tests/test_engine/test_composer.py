"""Tests for glyph composition."""

from __future__ import annotations

import pytest

from glyphgrid.engine.canvas import RecordingCanvas
from glyphgrid.engine.composer import (
    LIGHT_STROKE,
    EyeStyle,
    MouthStyle,
    compose_glyph,
    compute_parity,
    decimal_flags,
    fract,
    remap,
    ring_outline,
    round_half_up,
)
from glyphgrid.engine.noise import ConstantNoise, PerlinNoise
from glyphgrid.engine.palette import select_palette

SIZE = 99.0
MID = (0.5, 0.5, 0.5, 0.5, 0.5)
EVEN_RAW = (1.0, 1.0, 1.0, 2.0, 1.0)
ODD_RAW = (1.0, 1.0, 1.0, 2.0, 0.0)
PALETTE = select_palette(0)


def _compose(normalized=MID, raw=EVEN_RAW, index=0, noise=None, palette=PALETTE):
    canvas = RecordingCanvas()
    traits = compose_glyph(canvas, normalized, raw, SIZE, index, palette, noise or ConstantNoise(0.5))
    return canvas, traits


def _of_kind(canvas: RecordingCanvas, kind: str):
    return [op for op in canvas.ops if op.kind == kind]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def test_remap_is_unclamped():
    assert remap(0.5, 0, 1, 10, 20) == 15
    assert remap(2.0, 0, 1, 0, 10) == 20
    assert remap(1.0, 0.7, 1.2, 0.7, 1.3) == pytest.approx(1.06)


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(3.5) == 4
    assert round_half_up(-2.5) == -2
    assert round_half_up(0.49) == 0


def test_fract():
    assert fract(3.25) == pytest.approx(0.25)
    assert fract(0.0) == 0.0


def test_parity():
    assert compute_parity(EVEN_RAW) == 0
    assert compute_parity(ODD_RAW) == 1
    assert compute_parity((-1.2, -3.3, 0, 0, 0)) == 0
    assert compute_parity((2.6, 0, 0, 0, 0)) == 1


def test_parity_survives_sign_flip():
    rows = [(1.2, 3.7, -4.1, 0.3, 9.9), (0.1, 0.2, 0.3, 0.4, 7.6), (10, 11, 12, 13, 14)]
    for raw in rows:
        assert compute_parity(raw) == compute_parity([-v for v in raw])


def test_decimal_flags():
    assert decimal_flags((0.56, 0.5, 0.25, 0.0, 1.0)) == (True, False, False, False, False)
    assert decimal_flags((0.57, 0.58, 0.59, 0.66, 0.99)) == (True, True, True, True, True)


# ---------------------------------------------------------------------------
# Frame
# ---------------------------------------------------------------------------

def test_single_balanced_frame():
    canvas, _ = _compose()
    assert canvas.ops[0].kind == "push"
    assert canvas.ops[-1].kind == "pop"
    assert canvas.depth == 0
    depth = 0
    for op in canvas.ops[:-1]:
        depth += {"push": 1, "pop": -1}.get(op.kind, 0)
        assert depth >= 1


def test_frame_rotation_and_scale():
    canvas, _ = _compose(normalized=(1.0, 0.5, 0.5, 0.5, 0.5), noise=ConstantNoise(1.0))
    assert canvas.ops[1].kind == "rotate"
    assert canvas.ops[1].args == (pytest.approx(8.0),)
    assert canvas.ops[2].kind == "scale"
    assert canvas.ops[2].args == (pytest.approx(1.25),)


# ---------------------------------------------------------------------------
# Determinism
# ---------------------------------------------------------------------------

def test_deterministic():
    norm = (0.13, 0.77, 0.42, 0.9, 0.05)
    raw = (3.2, 7.7, 4.1, 8.9, 0.3)
    a, _ = _compose(norm, raw, index=17, noise=PerlinNoise(seed=5))
    b, _ = _compose(norm, raw, index=17, noise=PerlinNoise(seed=5))
    assert a.ops == b.ops


def test_row_index_changes_output():
    a, _ = _compose(index=1, noise=PerlinNoise())
    b, _ = _compose(index=2, noise=PerlinNoise())
    assert a.ops != b.ops


# ---------------------------------------------------------------------------
# Parity & colors
# ---------------------------------------------------------------------------

def test_even_parity_keeps_palette():
    canvas, traits = _compose(raw=EVEN_RAW)
    assert traits.parity == 0
    head, fringe = canvas.shapes()[:2]
    assert head.kind == "ellipse"
    assert head.style.fill == PALETTE.background
    assert fringe.kind == "rect"
    assert fringe.style.fill == PALETTE.accent


def test_odd_parity_inverts_roles():
    canvas, traits = _compose(normalized=(0.0, 0.0, 0.5, 0.5, 0.5), raw=ODD_RAW)
    assert traits.parity == 1
    assert traits.colors.stroke == LIGHT_STROKE
    head, fringe = canvas.shapes()[:2]
    assert head.style.fill == PALETTE.accent.lerp(PALETTE.accent2, 0.4)
    assert fringe.style.fill == PALETTE.accent2
    # DOTS eyes are filled with the stroke color
    eyes = _of_kind(canvas, "ellipse")[1:3]
    assert all(e.style.fill == LIGHT_STROKE for e in eyes)
    collar = canvas.shapes()[-1]
    assert collar.style.fill == PALETTE.accent2.lerp(PALETTE.background, 0.3)


def test_head_geometry():
    canvas, _ = _compose()
    head = canvas.shapes()[0]
    cx, cy, w, h = head.args
    assert (cx, cy) == (0, 0)
    assert w == pytest.approx(SIZE * 0.9)
    assert h == pytest.approx(SIZE * remap(0.5, 0.7, 1.2, 0.7, 1.3))


# ---------------------------------------------------------------------------
# Fragments
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("n3,count", [(0.0, 2), (0.5, 4), (1.0, 6)])
def test_fragment_count(n3, count):
    canvas, traits = _compose(normalized=(0.5, 0.5, 0.5, n3, 0.5))
    assert traits.fragment_count == count
    assert len(_of_kind(canvas, "triangle")) == count // 2


def test_fragment_placement():
    canvas, _ = _compose()
    translates = _of_kind(canvas, "translate")
    # Four fragments, then no marks for MID
    assert len(translates) == 4
    for t in translates:
        assert t.args[0] == pytest.approx(0.13 * SIZE)
        assert t.args[1] == 0
    rotations = [op.args[0] for op in _of_kind(canvas, "rotate")]
    # frame, head tilt, 4 fragments, collar
    assert rotations[2:6] == pytest.approx([45.0, 135.0, 225.0, 315.0])


# ---------------------------------------------------------------------------
# Eyes
# ---------------------------------------------------------------------------

def test_eye_style_lines():
    canvas, traits = _compose()
    assert traits.eye_style is EyeStyle.LINES
    lines = _of_kind(canvas, "line")
    assert len(lines) == 2
    assert lines[0].style.stroke_width == pytest.approx(4.0)
    dx = SIZE * remap(0.5, 0, 1, 0.18, 0.32)
    y = -SIZE * remap(0.5, 0, 1, 0.08, 0.18)
    assert lines[0].args == pytest.approx((-dx - 6, y, -dx + 6, y))
    assert lines[1].args == pytest.approx((dx - 6, y, dx + 6, y))


def test_eye_style_dots():
    canvas, traits = _compose(normalized=(0.0, 0.0, 0.5, 0.5, 0.5))
    assert traits.eye_style is EyeStyle.DOTS
    assert len(_of_kind(canvas, "ellipse")) == 3
    assert not _of_kind(canvas, "line")


def test_eye_style_bars():
    canvas, traits = _compose(normalized=(0.1, 0.1, 0.5, 0.5, 0.5))
    assert traits.eye_style is EyeStyle.BARS
    # fringe + 2 fragment rects + 2 eyes + collar
    assert len(_of_kind(canvas, "rect")) == 6


# ---------------------------------------------------------------------------
# Mouth
# ---------------------------------------------------------------------------

def test_mouth_smile_arc():
    canvas, traits = _compose(normalized=(0.5, 0.5, 0.5, 0.5, 1.0))
    assert traits.mouth_style is MouthStyle.ARC
    (arc,) = _of_kind(canvas, "arc")
    w = SIZE * remap(0.5, 0, 1, 0.18, 0.56)
    assert arc.args == pytest.approx((0, SIZE * 0.25, w, w * 0.4, 0, 216.0))
    assert arc.style.fill is None
    assert arc.style.stroke == PALETTE.stroke


def test_mouth_concave_arc():
    canvas, _ = _compose(normalized=(0.5, 0.5, 0.5, 0.5, 0.0))
    (arc,) = _of_kind(canvas, "arc")
    assert arc.args[4:] == pytest.approx((180.0, -36.0))


def test_mouth_zigzag():
    raw = (1.0, 1.0, 1.0, 3.0, 0.0)
    canvas, traits = _compose(raw=raw)
    assert traits.mouth_style is MouthStyle.ZIGZAG
    assert not _of_kind(canvas, "arc")
    zig = [op for op in _of_kind(canvas, "polyline") if not op.closed]
    assert len(zig) == 1
    points = zig[0].args[0]
    assert len(points) == 5
    base = SIZE * 0.25
    assert [y for _, y in points] == pytest.approx([base - 6, base + 6, base - 6, base + 6, base - 6])
    w = SIZE * remap(0.5, 0, 1, 0.18, 0.56)
    assert points[0][0] == pytest.approx(-w / 2)
    assert points[-1][0] == pytest.approx(w / 2)


def test_mouth_negative_odd_raw_is_zigzag():
    _, traits = _compose(raw=(0.0, 0.0, 0.0, -3.0, 0.0))
    assert traits.mouth_style is MouthStyle.ZIGZAG


# ---------------------------------------------------------------------------
# Marks
# ---------------------------------------------------------------------------

def test_no_marks_when_flags_clear():
    _, traits = _compose()
    assert traits.mark_count == 0


def test_all_marks():
    canvas, traits = _compose(normalized=(0.57, 0.58, 0.59, 0.66, 0.99))
    assert traits.mark_count == 5
    small_dots = [e for e in _of_kind(canvas, "ellipse") if e.args[2] == pytest.approx(SIZE * 0.06)]
    assert len(small_dots) == 3
    small_rects = [r for r in _of_kind(canvas, "rect") if r.args[2] == pytest.approx(SIZE * 0.08)]
    assert len(small_rects) == 2


# ---------------------------------------------------------------------------
# Rings & collar
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("n1,count", [(0.0, 1), (0.5, 2), (1.0, 4)])
def test_ring_count(n1, count):
    canvas, traits = _compose(normalized=(0.5, n1, 0.5, 0.5, 0.5))
    assert traits.ring_count == count
    rings = [op for op in _of_kind(canvas, "polyline") if op.closed]
    assert len(rings) == count
    assert all(op.smooth and len(op.args[0]) == 26 for op in rings)


def test_ring_ripple():
    points = ring_outline(SIZE * 0.6, 0.0, 0)
    assert points[0] == pytest.approx((SIZE * 0.6, 0.0))
    other = ring_outline(SIZE * 0.6, 0.0, 5)
    assert points != other


def test_collar_is_last_shape():
    canvas, _ = _compose()
    collar = canvas.shapes()[-1]
    assert collar.kind == "rect"
    assert collar.args == pytest.approx((0, SIZE * 0.52, SIZE * 0.28, SIZE * 0.12, 10))


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

def test_wrong_vector_length():
    with pytest.raises(ValueError):
        _compose(normalized=(0.5, 0.5))


def test_non_positive_size():
    with pytest.raises(ValueError):
        compose_glyph(RecordingCanvas(), MID, EVEN_RAW, 0, 0, PALETTE, ConstantNoise())


def test_first_fragment_offset_follows_row_noise():
    noise = PerlinNoise(seed=0)
    offsets = set()
    for index in range(8):
        canvas, _ = _compose(index=index, noise=noise)
        first = _of_kind(canvas, "translate")[0]
        assert first.args[0] == pytest.approx(remap(noise(index), 0, 1, -0.12, 0.38) * SIZE)
        offsets.add(round(first.args[0], 6))
    assert len(offsets) > 4
