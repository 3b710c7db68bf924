"""Unit tests for fill patterns.

Tests cover:
- Filler registry and lookup
- Each pattern's operation structure
- Cross-hatch as the union of two hachure passes
- Empty and degenerate polygons
"""

import math

import pytest

from roughsketch.config import DrawConfig, FillerConfig, FillStyle
from roughsketch.core.fillers import (
    FILLERS,
    CrossHatchFiller,
    DashedFiller,
    DotDashFiller,
    DotFiller,
    Filler,
    HachureFiller,
    NoFiller,
    SolidFiller,
    ZigZagFiller,
    ZigZagLineFiller,
    create_filler,
)
from roughsketch.core.scanline import MIN_HACHURE_GAP, hachure_lines
from roughsketch.domain import OpSetType, OpType, Point
from roughsketch.exceptions import FillError, UnknownFillStyleError

SQUARE = [Point(0.0, 0.0), Point(100.0, 0.0), Point(100.0, 100.0), Point(0.0, 100.0)]


def exact_filler_config(**changes) -> FillerConfig:
    """Filler configuration whose strokes follow the scan segments exactly."""
    draw_config = DrawConfig(roughness=0.0, bowing=0.0, disable_multi_stroke=True)
    return FillerConfig(draw_config=draw_config, **changes)


def stroke_segments(op_set) -> list[tuple[Point, Point]]:
    """Pair each move with the end of the stroke that follows it."""
    ops = list(op_set)
    return [
        (ops[i].data[0], ops[i + 1].end)
        for i in range(len(ops) - 1)
        if ops[i].op == OpType.MOVE and ops[i + 1].op == OpType.CURVE_TO
    ]


class TestRegistry:
    """Tests for the filler registry."""

    def test_every_style_registered(self) -> None:
        assert set(FILLERS) == set(FillStyle)
        for style, filler_cls in FILLERS.items():
            assert filler_cls.style is style
            assert issubclass(filler_cls, Filler)

    def test_create_by_enum_and_string(self) -> None:
        assert isinstance(create_filler(FillStyle.HACHURE), HachureFiller)
        assert isinstance(create_filler("cross_hatch"), CrossHatchFiller)

    def test_create_passes_config(self) -> None:
        config = FillerConfig(hachure_gap=3.0)
        assert create_filler("dots", config).config is config

    def test_unknown_style(self) -> None:
        with pytest.raises(UnknownFillStyleError) as exc_info:
            create_filler("stipple")
        assert exc_info.value.style == "stipple"
        assert isinstance(exc_info.value, FillError)

    def test_base_filler_not_implemented(self) -> None:
        with pytest.raises(NotImplementedError):
            Filler().fill(SQUARE)


class TestSimpleFillers:
    """Tests for the empty and solid fillers."""

    def test_no_filler(self) -> None:
        op_set = NoFiller().fill(SQUARE)
        assert op_set.is_empty

    def test_solid_filler(self) -> None:
        op_set = SolidFiller(exact_filler_config()).fill(SQUARE)
        assert op_set.type == OpSetType.FILL_PATH
        assert op_set.end_points() == SQUARE


class TestHachureFiller:
    """Tests for HachureFiller."""

    def test_one_stroke_per_segment(self) -> None:
        config = exact_filler_config(hachure_gap=10.0, hachure_angle=0.0)
        op_set = HachureFiller(config).fill(SQUARE)
        assert op_set.type == OpSetType.FILL_SKETCH
        segments = stroke_segments(op_set)
        assert len(segments) == 9
        for start, end in segments:
            assert start.y == pytest.approx(end.y)
            assert {round(start.x, 6), round(end.x, 6)} == {0.0, 100.0}

    def test_double_stroke_by_default(self) -> None:
        config = FillerConfig(hachure_gap=10.0, hachure_angle=0.0)
        op_set = HachureFiller(config).fill(SQUARE)
        assert len(op_set) == 9 * 4

    def test_uses_own_draw_config(self) -> None:
        """Test that filling advances the filler's randomizer only."""
        fill_draw = DrawConfig(seed=5)
        config = FillerConfig(draw_config=fill_draw)
        HachureFiller(config).fill(SQUARE)
        fresh = DrawConfig(seed=5)
        assert fill_draw.randomizer.next() != fresh.randomizer.next()


class TestCrossHatchFiller:
    """Tests for CrossHatchFiller."""

    def test_union_of_two_passes(self) -> None:
        config = exact_filler_config(hachure_gap=12.0, hachure_angle=20.0)
        op_set = CrossHatchFiller(config).fill(SQUARE)

        expected = hachure_lines(SQUARE, 12.0, 20.0) + hachure_lines(SQUARE, 12.0, 110.0)
        actual = stroke_segments(op_set)
        assert len(actual) == len(expected)
        for (start, end), line in zip(actual, expected):
            assert start.x == pytest.approx(line.source.x)
            assert start.y == pytest.approx(line.source.y)
            assert end.x == pytest.approx(line.target.x)
            assert end.y == pytest.approx(line.target.y)


class TestZigZagFiller:
    """Tests for ZigZagFiller."""

    def test_single_continuous_stroke(self) -> None:
        config = exact_filler_config(hachure_gap=10.0, hachure_angle=0.0)
        op_set = ZigZagFiller(config).fill(SQUARE)
        ops = list(op_set)
        assert ops[0].op == OpType.MOVE
        assert all(op.op == OpType.CURVE_TO for op in ops[1:])
        # 9 scan segments plus 8 connecting jogs
        assert len(ops) == 1 + 17

    def test_alternating_direction(self) -> None:
        config = exact_filler_config(hachure_gap=10.0, hachure_angle=0.0)
        ops = list(ZigZagFiller(config).fill(SQUARE))
        ends = [ops[0].data[0]] + [op.end for op in ops[1:]]
        # Scan segments run left-right, then right-left
        assert ends[1].x - ends[0].x == pytest.approx(100.0)
        assert ends[3].x - ends[2].x == pytest.approx(-100.0)
        # Jog between them is one gap long
        assert ends[2].y - ends[1].y == pytest.approx(10.0)
        assert ends[2].x == pytest.approx(ends[1].x)

    def test_two_passes_when_multi_stroke(self) -> None:
        config = FillerConfig(hachure_gap=10.0, hachure_angle=0.0)
        ops = list(ZigZagFiller(config).fill(SQUARE))
        assert sum(1 for op in ops if op.op == OpType.MOVE) == 2


class TestZigZagLineFiller:
    """Tests for ZigZagLineFiller."""

    def test_teeth(self) -> None:
        config = exact_filler_config(hachure_gap=15.0, hachure_angle=0.0, zigzag_offset=5.0)
        op_set = ZigZagLineFiller(config).fill(SQUARE)
        segments = stroke_segments(op_set)
        # Lines every 20 units, 10 teeth of two strokes each per line
        assert len(segments) == 4 * 10 * 2
        rise_start, rise_end = segments[0]
        assert rise_end.x - rise_start.x == pytest.approx(5.0)
        assert rise_end.y - rise_start.y == pytest.approx(5.0)


class TestDashedFiller:
    """Tests for DashedFiller."""

    def test_dash_lengths_and_centering(self) -> None:
        config = exact_filler_config(
            hachure_gap=50.0, hachure_angle=0.0, dash_offset=15.0, dash_gap=2.0
        )
        segments = stroke_segments(DashedFiller(config).fill(SQUARE))
        # One scan line of length 100 holds 5 dashes of 15 + 2
        assert len(segments) == 5
        for start, end in segments:
            assert math.dist(start.to_tuple(), end.to_tuple()) == pytest.approx(15.0)
        first_start = min(s.x for s, _ in segments)
        last_end = max(e.x for _, e in segments)
        assert first_start == pytest.approx(100.0 - last_end)

    def test_short_segment_has_no_dashes(self) -> None:
        config = exact_filler_config(hachure_gap=5.0, dash_offset=50.0)
        tiny = [Point(0.0, 0.0), Point(10.0, 0.0), Point(10.0, 10.0), Point(0.0, 10.0)]
        assert DashedFiller(config).fill(tiny).is_empty


class TestDotFiller:
    """Tests for DotFiller."""

    def test_dot_count_and_size(self) -> None:
        config = exact_filler_config(hachure_gap=30.0, hachure_angle=0.0, fill_weight=2.0)
        op_set = DotFiller(config).fill(SQUARE)
        moves = [op for op in op_set if op.op == OpType.MOVE]
        # 3 scan lines of length 100, 3 dots each
        assert len(moves) == 9
        for op in op_set:
            for point in op.data:
                assert 0.0 - 1.0 - 1e-9 <= point.x <= 100.0 + 1.0 + 1e-9

    def test_dots_are_small_circles(self) -> None:
        config = exact_filler_config(hachure_gap=60.0, hachure_angle=0.0, fill_weight=4.0)
        op_set = DotFiller(config).fill(SQUARE)
        ops = list(op_set)
        assert ops
        center = Point(50.0, 60.0)
        for op in ops:
            assert math.dist(op.end.to_tuple(), center.to_tuple()) == pytest.approx(2.0)


class TestDotDashFiller:
    """Tests for DotDashFiller."""

    def test_alternates_dash_and_dot(self) -> None:
        config = exact_filler_config(
            hachure_gap=50.0, hachure_angle=0.0, dash_offset=15.0, dash_gap=5.0, fill_weight=2.0
        )
        ops = list(DotDashFiller(config).fill(SQUARE))
        assert ops[0].op == OpType.MOVE
        dash_end = ops[1].end
        assert dash_end.x - ops[0].data[0].x == pytest.approx(15.0)
        # The next mark is a dot: a run of curves around one center
        dot_moves = [op for op in ops[2:] if op.op == OpType.MOVE]
        assert len(dot_moves) >= 1


@pytest.mark.parametrize("style", list(FillStyle))
class TestDegeneratePolygons:
    """Every filler returns an empty set for degenerate polygons."""

    def test_empty_polygon(self, style: FillStyle) -> None:
        assert create_filler(style).fill([]).is_empty

    def test_single_point(self, style: FillStyle) -> None:
        assert create_filler(style).fill([Point(3.0, 3.0)]).is_empty

    def test_collinear_points(self, style: FillStyle) -> None:
        line = [Point(0.0, 0.0), Point(50.0, 0.0), Point(100.0, 0.0)]
        assert create_filler(style).fill(line).is_empty


class TestMinimumSpacing:
    """Pattern spacings below the minimum gap are raised to it."""

    def test_hachure_gap_floor(self) -> None:
        tiny = HachureFiller(exact_filler_config(hachure_gap=1e-6, hachure_angle=0.0))
        floor = HachureFiller(exact_filler_config(hachure_gap=MIN_HACHURE_GAP, hachure_angle=0.0))
        unit = [Point(0.0, 0.0), Point(1.0, 0.0), Point(1.0, 1.0), Point(0.0, 1.0)]
        assert tiny.fill(unit) == floor.fill(unit)

    def test_dash_period_floor(self) -> None:
        config = exact_filler_config(
            hachure_gap=50.0, hachure_angle=0.0, dash_offset=1e-6, dash_gap=0.0
        )
        segments = stroke_segments(DashedFiller(config).fill(SQUARE))
        # One scan line of length 100
        assert 0 < len(segments) <= math.floor(100.0 / MIN_HACHURE_GAP)

    def test_dot_dash_period_floor(self) -> None:
        config = exact_filler_config(
            hachure_gap=50.0, hachure_angle=0.0, dash_offset=1e-6, dash_gap=0.0
        )
        moves = [op for op in DotDashFiller(config).fill(SQUARE) if op.op == OpType.MOVE]
        assert 0 < len(moves) <= math.floor(100.0 / MIN_HACHURE_GAP)

    def test_dot_spacing_floor(self) -> None:
        config = exact_filler_config(hachure_gap=1e-6, hachure_angle=0.0, fill_weight=0.05)
        unit = [Point(0.0, 0.0), Point(1.0, 0.0), Point(1.0, 1.0), Point(0.0, 1.0)]
        moves = [op for op in DotFiller(config).fill(unit) if op.op == OpType.MOVE]
        # At most 9 scan lines with at most 10 dots each
        assert 0 < len(moves) <= 9 * 10

    def test_zigzag_tooth_floor(self) -> None:
        config = exact_filler_config(hachure_gap=50.0, hachure_angle=0.0, zigzag_offset=1e-6)
        segments = stroke_segments(ZigZagLineFiller(config).fill(SQUARE))
        lines = hachure_lines(SQUARE, 50.0 + 1e-6, 0.0)
        teeth_per_line = round(100.0 / (2 * MIN_HACHURE_GAP))
        assert len(segments) <= len(lines) * teeth_per_line * 2
