"""Shape generator.

The Generator is the entry point of the library: each method takes shape
parameters and returns a Drawable holding the fill set (if any) followed by
the outline set.
"""

from collections.abc import Sequence

from roughsketch.config import DrawConfig
from roughsketch.core import paths
from roughsketch.core.fillers import Filler, NoFiller
from roughsketch.core.geometry import EPSILON, distinct_points, signed_area
from roughsketch.domain import Drawable, Op, OpSet, OpSetType, Point
from roughsketch.utils.logging import GenerationLogger


class Generator:
    """Produce sketchy drawables for the standard primitives.

    The outline is perturbed by ``config``; the interior is produced by
    ``filler`` with its own perturbation settings. Both randomizers advance
    with every call, so identical calls return different (but repeatable)
    output unless ``reset()`` is called in between.

    Example:
        >>> gen = Generator(DrawConfig(roughness=0, bowing=0))
        >>> drawable = gen.rectangle(0, 0, 100, 50)
        >>> drawable.shape
        'rectangle'
    """

    def __init__(
        self,
        config: DrawConfig | None = None,
        filler: Filler | None = None,
        logger: GenerationLogger | None = None,
    ) -> None:
        self.config = config or DrawConfig()
        self.filler = filler or NoFiller()
        self._logger = logger

    def reset(self) -> None:
        """Rewind both the outline and fill randomizers to their seeds."""
        self.config.reset()
        self.filler.draw_config.reset()

    def line(self, x1: float, y1: float, x2: float, y2: float) -> Drawable:
        """Single rough line from (x1, y1) to (x2, y2)."""
        return self._drawable("line", [paths.line(x1, y1, x2, y2, self.config)])

    def rectangle(self, x: float, y: float, width: float, height: float) -> Drawable:
        """Closed, filled rectangle with its top-left corner at (x, y)."""
        points = [
            Point(x, y),
            Point(x + width, y),
            Point(x + width, y + height),
            Point(x, y + height),
        ]
        if abs(width) <= EPSILON or abs(height) <= EPSILON:
            self._degenerate("rectangle", "zero width or height")
        return self._filled("rectangle", points, paths.polygon(points, self.config))

    def ellipse(self, cx: float, cy: float, rx: float, ry: float) -> Drawable:
        """Closed, filled ellipse centered at (cx, cy) with radii rx and ry.

        The fill follows the core ring of the sampled outline so both share
        the same phase.
        """
        return self._ellipse("ellipse", cx, cy, rx, ry)

    def circle(self, cx: float, cy: float, radius: float) -> Drawable:
        """Closed, filled circle centered at (cx, cy)."""
        return self._ellipse("circle", cx, cy, radius, radius)

    def linear_path(self, points: Sequence[Point]) -> Drawable:
        """Open polyline through ``points``."""
        if len(points) < 2:
            self._degenerate("linear_path", "fewer than two points")
        return self._drawable("linear_path", [paths.linear_path(points, False, self.config)])

    def polygon(self, points: Sequence[Point]) -> Drawable:
        """Closed, filled polygon through ``points``."""
        if len(distinct_points(points)) < 3 or abs(signed_area(points)) <= EPSILON:
            self._degenerate("polygon", "zero area")
        return self._filled("polygon", list(points), paths.polygon(points, self.config))

    def arc(
        self,
        cx: float,
        cy: float,
        rx: float,
        ry: float,
        start: float,
        stop: float,
        closed: bool = False,
    ) -> Drawable:
        """Elliptical arc from ``start`` to ``stop`` radians.

        Closed arcs are joined to the center and filled like a pie slice.
        """
        if abs(rx) <= EPSILON or abs(ry) <= EPSILON:
            self._degenerate("arc", "zero radius")
            return self._drawable("arc", [self._center_only(cx, cy)])

        outline = paths.arc(cx, cy, rx, ry, start, stop, closed, True, self.config)
        if outline.is_empty:
            self._degenerate("arc", "zero span")
        if not closed:
            return self._drawable("arc", [outline])

        polygon = paths.arc_polygon(cx, cy, rx, ry, start, stop, self.filler.draw_config)
        return self._filled("arc", polygon, outline)

    def curve_path(self, points: Sequence[Point]) -> Drawable:
        """Open smooth curve through ``points``."""
        if len(points) < 2:
            self._degenerate("curve", "fewer than two points")
        return self._drawable("curve", [paths.curve(points, self.config)])

    def _filled(self, shape: str, polygon: Sequence[Point], outline: OpSet) -> Drawable:
        fill = self.filler.fill(polygon)
        sets = [outline] if fill.is_empty else [fill, outline]
        return self._drawable(shape, sets)

    def _center_only(self, cx: float, cy: float) -> OpSet:
        return OpSet(OpSetType.PATH, (Op.move(Point(cx, cy)),))

    def _drawable(self, shape: str, sets: list[OpSet]) -> Drawable:
        drawable = Drawable(shape=shape, options=self.config, sets=tuple(sets))
        if self._logger is not None:
            self._logger.log_drawable(drawable)
        return drawable

    def _degenerate(self, shape: str, reason: str) -> None:
        if self._logger is not None:
            self._logger.log_degenerate(shape, reason)

    def _ellipse(self, shape: str, cx: float, cy: float, rx: float, ry: float) -> Drawable:
        if abs(rx) <= EPSILON or abs(ry) <= EPSILON:
            self._degenerate(shape, "zero radius")
            return self._drawable(shape, [self._center_only(cx, cy)])

        result = paths.ellipse(cx, cy, rx, ry, self.config)
        return self._filled(shape, list(result.core_points), result.op_set)
