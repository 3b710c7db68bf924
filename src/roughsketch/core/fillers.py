"""Fill patterns built on the scanline hachure engine.

Each filler turns a polygon into a single operation set. All of them except
the solid and empty fillers start from the same raw material, the interior
segments returned by ``hachure_lines``, and differ only in how they stroke
those segments.

Fill strokes are perturbed with the filler's own DrawConfig so the fill and
the outline of a shape do not share a random sequence.

Every spacing a pattern steps by (scan gap, dash period, dot spacing, tooth
width) is at least ``MIN_HACHURE_GAP``.
"""

import math
from collections.abc import Sequence
from typing import ClassVar

from roughsketch.config import DrawConfig, FillerConfig, FillStyle
from roughsketch.core.paths import double_line, ellipse, line_ops, solid_fill_polygon
from roughsketch.core.scanline import MIN_HACHURE_GAP, hachure_lines
from roughsketch.domain import Line, Op, OpSet, OpSetType, Point
from roughsketch.exceptions import UnknownFillStyleError


def _unit(segment: Line) -> tuple[float, float, float]:
    """Return (length, ux, uy) for a segment of non-zero length."""
    length = segment.length
    return (
        length,
        (segment.target.x - segment.source.x) / length,
        (segment.target.y - segment.source.y) / length,
    )


def _along(segment: Line, distance: float, ux: float, uy: float) -> Point:
    return Point(segment.source.x + distance * ux, segment.source.y + distance * uy)


def _stroke(a: Point, b: Point, config: DrawConfig) -> list[Op]:
    return double_line(a.x, a.y, b.x, b.y, config)


class Filler:
    """Base class for fill patterns.

    Subclasses implement ``fill``; ``style`` is the FillStyle they are
    registered under.
    """

    style: ClassVar[FillStyle]

    def __init__(self, config: FillerConfig | None = None) -> None:
        self.config = config or FillerConfig()

    @property
    def draw_config(self) -> DrawConfig:
        """Perturbation settings for fill strokes."""
        return self.config.draw_config

    def fill(self, points: Sequence[Point]) -> OpSet:
        """Build the fill operations for a polygon.

        Args:
            points: Polygon vertices; degenerate polygons yield an empty set

        Returns:
            Operation set for the fill
        """
        raise NotImplementedError(f"{type(self).__name__} does not implement fill")

    def segments(self, points: Sequence[Point], angle: float | None = None) -> list[Line]:
        """Interior scan segments at the configured gap."""
        if angle is None:
            angle = self.config.hachure_angle
        return hachure_lines(points, self.config.hachure_gap, angle)

    def _sketch(self, ops: list[Op]) -> OpSet:
        return OpSet(OpSetType.FILL_SKETCH, tuple(ops))


class NoFiller(Filler):
    """Leaves the interior empty."""

    style = FillStyle.NONE

    def fill(self, points: Sequence[Point]) -> OpSet:
        return OpSet(OpSetType.FILL_SKETCH)


class SolidFiller(Filler):
    """Paints the interior as one filled region."""

    style = FillStyle.SOLID

    def fill(self, points: Sequence[Point]) -> OpSet:
        return solid_fill_polygon(points, self.draw_config)


class HachureFiller(Filler):
    """Parallel rough lines at the hachure angle."""

    style = FillStyle.HACHURE

    def fill(self, points: Sequence[Point]) -> OpSet:
        ops: list[Op] = []
        for segment in self.segments(points):
            ops.extend(_stroke(segment.source, segment.target, self.draw_config))
        return self._sketch(ops)


class CrossHatchFiller(Filler):
    """Two hachure passes, the second turned by 90 degrees."""

    style = FillStyle.CROSS_HATCH

    def fill(self, points: Sequence[Point]) -> OpSet:
        angle = self.config.hachure_angle
        ops: list[Op] = []
        for segment in self.segments(points, angle) + self.segments(points, angle + 90):
            ops.extend(_stroke(segment.source, segment.target, self.draw_config))
        return self._sketch(ops)


class ZigZagFiller(Filler):
    """One continuous stroke sweeping back and forth across the polygon.

    Every other scan segment is walked in reverse and consecutive segments
    are joined end to start, so the pen never lifts.
    """

    style = FillStyle.ZIGZAG

    def fill(self, points: Sequence[Point]) -> OpSet:
        vertices: list[Point] = []
        for i, segment in enumerate(self.segments(points)):
            if i % 2:
                segment = segment.reversed()
            vertices.extend((segment.source, segment.target))

        if len(vertices) < 2:
            return self._sketch([])

        config = self.draw_config
        passes = [False] if config.disable_multi_stroke else [False, True]
        ops: list[Op] = []
        for overlay in passes:
            for i, (a, b) in enumerate(zip(vertices, vertices[1:])):
                ops.extend(line_ops(a.x, a.y, b.x, b.y, config, move=i == 0, overlay=overlay))
        return self._sketch(ops)


class ZigZagLineFiller(Filler):
    """Saw-tooth strokes running along each scan segment.

    Scan lines are spaced by the hachure gap plus the tooth width, and every
    tooth is ``zigzag_offset`` wide and high.
    """

    style = FillStyle.ZIGZAG_LINE

    def fill(self, points: Sequence[Point]) -> OpSet:
        tooth = max(self.config.zigzag_offset, MIN_HACHURE_GAP)
        lines = hachure_lines(
            points, self.config.hachure_gap + tooth, self.config.hachure_angle
        )

        ops: list[Op] = []
        for segment in lines:
            length, ux, uy = _unit(segment)
            count = round(length / (2 * tooth))
            for i in range(count):
                start = _along(segment, i * 2 * tooth, ux, uy)
                end = _along(segment, (i + 1) * 2 * tooth, ux, uy)
                peak = Point(start.x + tooth * (ux - uy), start.y + tooth * (uy + ux))
                ops.extend(_stroke(start, peak, self.draw_config))
                ops.extend(_stroke(peak, end, self.draw_config))
        return self._sketch(ops)


class DashedFiller(Filler):
    """Scan segments broken into dashes, centered on each segment."""

    style = FillStyle.DASHED

    def fill(self, points: Sequence[Point]) -> OpSet:
        dash = self.config.dash_offset
        gap = self.config.dash_gap
        step = max(dash + gap, MIN_HACHURE_GAP)

        ops: list[Op] = []
        for segment in self.segments(points):
            length, ux, uy = _unit(segment)
            count = math.floor(length / step)
            start_offset = (length + gap - count * step) / 2
            for i in range(count):
                head = start_offset + i * step
                ops.extend(
                    _stroke(
                        _along(segment, head, ux, uy),
                        _along(segment, head + dash, ux, uy),
                        self.draw_config,
                    )
                )
        return self._sketch(ops)


def _dot(center: Point, filler: Filler) -> list[Op]:
    """Small rough circle whose diameter is the fill weight."""
    radius = filler.config.fill_weight / 2
    return list(ellipse(center.x, center.y, radius, radius, filler.draw_config).op_set.ops)


class DotFiller(Filler):
    """Dots spaced one hachure gap apart along each scan segment."""

    style = FillStyle.DOTS

    def fill(self, points: Sequence[Point]) -> OpSet:
        gap = max(self.config.hachure_gap, MIN_HACHURE_GAP)
        config = self.draw_config

        ops: list[Op] = []
        for segment in self.segments(points):
            length, ux, uy = _unit(segment)
            count = max(math.ceil(length / gap) - 1, 0)
            head = (length - (count - 1) * gap) / 2
            for i in range(count):
                sample = _along(segment, head + i * gap, ux, uy)
                center = Point(
                    sample.x + config.offset_symmetric(gap / 4),
                    sample.y + config.offset_symmetric(gap / 4),
                )
                ops.extend(_dot(center, self))
        return self._sketch(ops)


class DotDashFiller(Filler):
    """Alternating dashes and dots along each scan segment."""

    style = FillStyle.DOT_DASH

    def fill(self, points: Sequence[Point]) -> OpSet:
        dash = self.config.dash_offset
        gap = self.config.dash_gap
        step = max(dash + gap, MIN_HACHURE_GAP)

        ops: list[Op] = []
        for segment in self.segments(points):
            length, ux, uy = _unit(segment)
            count = math.floor(length / step)
            start_offset = (length + gap - count * step) / 2
            for i in range(count):
                head = start_offset + i * step
                if i % 2 == 0:
                    ops.extend(
                        _stroke(
                            _along(segment, head, ux, uy),
                            _along(segment, head + dash, ux, uy),
                            self.draw_config,
                        )
                    )
                else:
                    ops.extend(_dot(_along(segment, head + dash / 2, ux, uy), self))
        return self._sketch(ops)


FILLERS: dict[FillStyle, type[Filler]] = {
    filler.style: filler
    for filler in (
        NoFiller,
        SolidFiller,
        HachureFiller,
        CrossHatchFiller,
        ZigZagFiller,
        ZigZagLineFiller,
        DashedFiller,
        DotFiller,
        DotDashFiller,
    )
}


def create_filler(style: FillStyle | str, config: FillerConfig | None = None) -> Filler:
    """Instantiate the filler registered for ``style``.

    Args:
        style: Fill style or its string value
        config: Filler configuration (defaults when omitted)

    Returns:
        Filler instance

    Raises:
        UnknownFillStyleError: If no filler is registered for the style
    """
    try:
        fill_style = FillStyle(style)
    except ValueError as e:
        raise UnknownFillStyleError(str(style)) from e

    return FILLERS[fill_style](config)
