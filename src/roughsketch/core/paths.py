"""Perturbed path construction.

This module builds the hand-drawn operation sequences for each primitive:
- Straight segments drawn as slightly bowed cubics, traced twice
- Smooth curves fitted through perturbed control points
- Ellipses and arcs sampled at a size-dependent angular step
- Polygon and linear paths built from consecutive segments

Every random displacement goes through the DrawConfig offset functions, so a
roughness of 0 reproduces the exact analytic shape.
"""

import math
from collections.abc import Sequence

from roughsketch.config import DrawConfig
from roughsketch.core.geometry import EPSILON, distinct_points, signed_area
from roughsketch.domain import EllipseParams, EllipseResult, Op, OpSet, OpSetType, Point

TWO_PI = 2 * math.pi

# Bounds on the number of samples per full ellipse turn
MIN_ELLIPSE_STEPS = 4
MAX_ELLIPSE_STEPS = 720


def _roughness_gain(length: float) -> float:
    """Damp roughness for long lines so they do not wobble excessively."""
    if length < 200:
        return 1.0
    if length > 500:
        return 0.4
    return -0.0016668 * length + 1.233334


def _jitter(point: Point, offset: float, config: DrawConfig) -> Point:
    return Point(
        point.x + config.offset_symmetric(offset),
        point.y + config.offset_symmetric(offset),
    )


def line_ops(
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    config: DrawConfig,
    move: bool,
    overlay: bool,
) -> list[Op]:
    """Build one perturbed stroke from (x1, y1) to (x2, y2).

    The stroke is a single cubic whose control points sit at a random
    "diverge point" along the segment, displaced sideways by the bowing
    factor. The overlay pass uses half the randomness of the first pass.

    Args:
        x1: Start x
        y1: Start y
        x2: End x
        y2: End y
        config: Draw configuration supplying roughness and randomness
        move: Emit a move to the (perturbed) start point first
        overlay: Whether this is the second, tighter pass

    Returns:
        Operations for the stroke
    """
    length_sq = (x1 - x2) ** 2 + (y1 - y2) ** 2
    length = math.sqrt(length_sq)
    gain = _roughness_gain(length)

    offset = config.max_randomness_offset
    if offset * offset * 100 > length_sq:
        offset = length / 10
    spread = offset / 2 if overlay else offset

    diverge_point = 0.2 + config.randomizer.next() * 0.2
    mid_disp_x = config.bowing * config.max_randomness_offset * (y2 - y1) / 200
    mid_disp_y = config.bowing * config.max_randomness_offset * (x1 - x2) / 200
    mid_disp_x = config.offset_symmetric(mid_disp_x, gain)
    mid_disp_y = config.offset_symmetric(mid_disp_y, gain)

    def rand() -> float:
        return config.offset_symmetric(spread, gain)

    ops: list[Op] = []
    if move:
        ops.append(Op.move(Point(x1 + rand(), y1 + rand())))

    ops.append(
        Op.curve_to(
            Point(
                mid_disp_x + x1 + (x2 - x1) * diverge_point + rand(),
                mid_disp_y + y1 + (y2 - y1) * diverge_point + rand(),
            ),
            Point(
                mid_disp_x + x1 + 2 * (x2 - x1) * diverge_point + rand(),
                mid_disp_y + y1 + 2 * (y2 - y1) * diverge_point + rand(),
            ),
            Point(x2 + rand(), y2 + rand()),
        )
    )
    return ops


def double_line(x1: float, y1: float, x2: float, y2: float, config: DrawConfig) -> list[Op]:
    """Draw a segment twice with independent perturbation, like a hand re-tracing it."""
    ops = line_ops(x1, y1, x2, y2, config, move=True, overlay=False)
    if not config.disable_multi_stroke:
        ops.extend(line_ops(x1, y1, x2, y2, config, move=True, overlay=True))
    return ops


def curve_ops(points: Sequence[Point], config: DrawConfig) -> list[Op]:
    """Fit a chain of cubics through ``points``.

    The first and last points only shape the tangents at the ends; the drawn
    curve runs from ``points[1]`` to ``points[-2]``. Curve tightness scales
    the tangents: 0 gives a Catmull-Rom spline, 1 straight segments.
    """
    count = len(points)
    ops: list[Op] = []

    if count > 3:
        s = 1 - config.curve_tightness
        ops.append(Op.move(points[1]))
        for i in range(1, count - 2):
            prev_pt, cur, nxt, after = points[i - 1], points[i], points[i + 1], points[i + 2]
            ops.append(
                Op.curve_to(
                    Point(
                        cur.x + (s * nxt.x - s * prev_pt.x) / 6,
                        cur.y + (s * nxt.y - s * prev_pt.y) / 6,
                    ),
                    Point(
                        nxt.x + (s * cur.x - s * after.x) / 6,
                        nxt.y + (s * cur.y - s * after.y) / 6,
                    ),
                    nxt,
                )
            )
    elif count == 3:
        ops.append(Op.move(points[1]))
        ops.append(Op.curve_to(points[1], points[2], points[2]))
    elif count == 2:
        a, b = points
        ops.extend(line_ops(a.x, a.y, b.x, b.y, config, move=True, overlay=True))

    return ops


def curve_with_offset(points: Sequence[Point], offset: float, config: DrawConfig) -> list[Op]:
    """Perturb ``points`` and fit a curve through them.

    The end points are duplicated so the fitted curve reaches them.
    """
    if not points:
        return []

    perturbed = [_jitter(points[0], offset, config), _jitter(points[0], offset, config)]
    for i in range(1, len(points)):
        perturbed.append(_jitter(points[i], offset, config))
        if i == len(points) - 1:
            perturbed.append(_jitter(points[i], offset, config))

    return curve_ops(perturbed, config)


def line(x1: float, y1: float, x2: float, y2: float, config: DrawConfig) -> OpSet:
    """Outline of a single straight line."""
    return OpSet(OpSetType.PATH, tuple(double_line(x1, y1, x2, y2, config)))


def linear_path(points: Sequence[Point], close: bool, config: DrawConfig) -> OpSet:
    """Outline through consecutive points, optionally closed back to the first.

    Two points degrade to a single line and fewer produce an empty path.
    """
    count = len(points)
    if count > 2:
        ops: list[Op] = []
        for a, b in zip(points, points[1:]):
            ops.extend(double_line(a.x, a.y, b.x, b.y, config))
        if close:
            last, first = points[-1], points[0]
            ops.extend(double_line(last.x, last.y, first.x, first.y, config))
        return OpSet(OpSetType.PATH, tuple(ops))

    if count == 2:
        a, b = points
        return line(a.x, a.y, b.x, b.y, config)

    return OpSet(OpSetType.PATH)


def polygon(points: Sequence[Point], config: DrawConfig) -> OpSet:
    """Closed outline through ``points``."""
    return linear_path(points, True, config)


def curve(points: Sequence[Point], config: DrawConfig) -> OpSet:
    """Smooth open curve through ``points``, traced twice."""
    if len(points) < 2:
        return OpSet(OpSetType.PATH)

    ops = curve_with_offset(points, 1 * (1 + config.roughness * 0.2), config)
    if not config.disable_multi_stroke:
        ops.extend(curve_with_offset(points, 1.5 * (1 + config.roughness * 0.22), config))
    return OpSet(OpSetType.PATH, tuple(ops))


def generate_ellipse_params(rx: float, ry: float, config: DrawConfig) -> EllipseParams:
    """Choose the angular step and blended radii for an ellipse.

    Larger ellipses get more samples, never fewer than ``curve_step_count``
    and never outside [MIN_ELLIPSE_STEPS, MAX_ELLIPSE_STEPS]. The radii are
    pulled off target by up to ``1 - curve_fitting`` of their size.

    Args:
        rx: Horizontal radius
        ry: Vertical radius
        config: Draw configuration

    Returns:
        EllipseParams with increment and perturbed radii
    """
    rx = abs(rx)
    ry = abs(ry)

    psq = math.sqrt(TWO_PI * math.sqrt((rx * rx + ry * ry) / 2))
    step_count = math.ceil(
        max(config.curve_step_count, (config.curve_step_count / math.sqrt(200)) * psq)
    )
    step_count = min(max(step_count, MIN_ELLIPSE_STEPS), MAX_ELLIPSE_STEPS)
    increment = TWO_PI / step_count

    curve_fit_randomness = 1 - config.curve_fitting
    rx += config.offset_symmetric(rx * curve_fit_randomness)
    ry += config.offset_symmetric(ry * curve_fit_randomness)

    return EllipseParams(increment=increment, rx=rx, ry=ry)


def compute_ellipse_points(
    increment: float,
    cx: float,
    cy: float,
    rx: float,
    ry: float,
    offset: float,
    overlap: float,
    config: DrawConfig,
) -> tuple[list[Point], list[Point]]:
    """Sample the outline ring and the core ring of an ellipse.

    Both rings come from the same angular sweep. At roughness 0 the outline
    ring is sampled four times finer than the core ring and every point lies
    on the ellipse. Otherwise the sweep starts at a random phase, each sample
    is displaced by up to ``offset``, and a few extra points past the start
    make the stroke overlap its beginning like a hand-drawn loop.

    Returns:
        Tuple of (all_points, core_points)
    """
    core_points: list[Point] = []
    all_points: list[Point] = []

    if config.roughness == 0:
        fine = increment / 4
        count = round(TWO_PI / fine)
        all_points.append(Point(cx + rx * math.cos(-fine), cy + ry * math.sin(-fine)))
        for i in range(count + 1):
            angle = i * fine
            point = Point(cx + rx * math.cos(angle), cy + ry * math.sin(angle))
            all_points.append(point)
            if i % 4 == 0:
                core_points.append(point)
        all_points.append(Point(cx + rx * math.cos(0), cy + ry * math.sin(0)))
        all_points.append(Point(cx + rx * math.cos(fine), cy + ry * math.sin(fine)))
        return all_points, core_points

    def osym() -> float:
        return config.offset_symmetric(offset)

    rad_offset = config.offset_symmetric(0.5) - math.pi / 2
    all_points.append(
        Point(
            osym() + cx + 0.9 * rx * math.cos(rad_offset - increment),
            osym() + cy + 0.9 * ry * math.sin(rad_offset - increment),
        )
    )

    for i in range(round(TWO_PI / increment)):
        angle = rad_offset + i * increment
        point = Point(
            osym() + cx + rx * math.cos(angle),
            osym() + cy + ry * math.sin(angle),
        )
        core_points.append(point)
        all_points.append(point)

    all_points.append(
        Point(
            osym() + cx + rx * math.cos(rad_offset + TWO_PI + overlap * 0.5),
            osym() + cy + ry * math.sin(rad_offset + TWO_PI + overlap * 0.5),
        )
    )
    all_points.append(
        Point(
            osym() + cx + 0.98 * rx * math.cos(rad_offset + overlap),
            osym() + cy + 0.98 * ry * math.sin(rad_offset + overlap),
        )
    )
    all_points.append(
        Point(
            osym() + cx + 0.9 * rx * math.cos(rad_offset + overlap * 0.5),
            osym() + cy + 0.9 * ry * math.sin(rad_offset + overlap * 0.5),
        )
    )
    return all_points, core_points


def ellipse_with_params(
    cx: float, cy: float, params: EllipseParams, config: DrawConfig
) -> EllipseResult:
    """Sample and outline an ellipse with precomputed parameters."""
    overlap = params.increment * config.offset(0.1, config.offset(0.4, 1))
    all_points, core_points = compute_ellipse_points(
        params.increment, cx, cy, params.rx, params.ry, 1, overlap, config
    )
    ops = curve_ops(all_points, config)

    if not config.disable_multi_stroke:
        second_pass, _ = compute_ellipse_points(
            params.increment, cx, cy, params.rx, params.ry, 1.5, 0, config
        )
        ops.extend(curve_ops(second_pass, config))

    return EllipseResult(
        core_points=tuple(core_points),
        all_points=tuple(all_points),
        op_set=OpSet(OpSetType.PATH, tuple(ops)),
    )


def ellipse(cx: float, cy: float, rx: float, ry: float, config: DrawConfig) -> EllipseResult:
    """Sample and outline an ellipse centered at (cx, cy) with radii rx, ry."""
    params = generate_ellipse_params(rx, ry, config)
    return ellipse_with_params(cx, cy, params, config)


def _normalize_arc(start: float, stop: float) -> tuple[float, float]:
    """Shift the arc so it starts at a non-negative angle; cap it at a full turn."""
    if start < 0:
        turns = math.ceil(-start / TWO_PI)
        start += turns * TWO_PI
        stop += turns * TWO_PI
    if stop - start > TWO_PI:
        start, stop = 0.0, TWO_PI
    return start, stop


def _arc_ops(
    increment: float,
    cx: float,
    cy: float,
    rx: float,
    ry: float,
    start: float,
    stop: float,
    offset: float,
    config: DrawConfig,
) -> list[Op]:
    def osym() -> float:
        return config.offset_symmetric(offset)

    rad_offset = start + config.offset_symmetric(0.1)
    points = [
        Point(
            osym() + cx + 0.9 * rx * math.cos(rad_offset - increment),
            osym() + cy + 0.9 * ry * math.sin(rad_offset - increment),
        )
    ]

    i = 0
    while rad_offset + i * increment <= stop:
        angle = rad_offset + i * increment
        points.append(
            Point(
                osym() + cx + rx * math.cos(angle),
                osym() + cy + ry * math.sin(angle),
            )
        )
        i += 1

    end = Point(cx + rx * math.cos(stop), cy + ry * math.sin(stop))
    points.append(end)
    points.append(end)
    return curve_ops(points, config)


def arc(
    cx: float,
    cy: float,
    rx: float,
    ry: float,
    start: float,
    stop: float,
    closed: bool,
    rough_closure: bool,
    config: DrawConfig,
) -> OpSet:
    """Outline an elliptical arc from ``start`` to ``stop`` radians.

    Closed arcs are joined to the center like a pie slice, either with rough
    double lines or with plain line-tos.

    Args:
        cx: Center x
        cy: Center y
        rx: Horizontal radius
        ry: Vertical radius
        start: Start angle in radians
        stop: Stop angle in radians
        closed: Join the ends to the center
        rough_closure: Draw the closing radii as rough lines
        config: Draw configuration

    Returns:
        Outline operation set; empty when the arc spans no angle
    """
    rx = abs(rx)
    ry = abs(ry)
    rx += config.offset_symmetric(rx * 0.01)
    ry += config.offset_symmetric(ry * 0.01)
    start, stop = _normalize_arc(start, stop)

    if stop - start <= EPSILON:
        return OpSet(OpSetType.PATH)

    ellipse_inc = TWO_PI / config.curve_step_count
    arc_inc = min(ellipse_inc / 2, (stop - start) / 2)

    ops = _arc_ops(arc_inc, cx, cy, rx, ry, start, stop, 1, config)
    if not config.disable_multi_stroke:
        ops.extend(_arc_ops(arc_inc, cx, cy, rx, ry, start, stop, 1.5, config))

    if closed:
        start_x, start_y = cx + rx * math.cos(start), cy + ry * math.sin(start)
        stop_x, stop_y = cx + rx * math.cos(stop), cy + ry * math.sin(stop)
        if rough_closure:
            ops.extend(double_line(cx, cy, start_x, start_y, config))
            ops.extend(double_line(cx, cy, stop_x, stop_y, config))
        else:
            ops.append(Op.line_to(Point(cx, cy)))
            ops.append(Op.line_to(Point(start_x, start_y)))

    return OpSet(OpSetType.PATH, tuple(ops))


def arc_polygon(
    cx: float,
    cy: float,
    rx: float,
    ry: float,
    start: float,
    stop: float,
    config: DrawConfig,
) -> list[Point]:
    """Polygon covering a closed arc: the sampled rim followed by the center."""
    rx = abs(rx)
    ry = abs(ry)
    rx += config.offset_symmetric(rx * 0.01)
    ry += config.offset_symmetric(ry * 0.01)
    start, stop = _normalize_arc(start, stop)

    if stop - start <= EPSILON:
        return []

    steps = max(1, math.ceil(config.curve_step_count))
    increment = (stop - start) / steps
    points = [
        Point(cx + rx * math.cos(start + i * increment), cy + ry * math.sin(start + i * increment))
        for i in range(steps + 1)
    ]
    points.append(Point(cx, cy))
    return points


def solid_fill_polygon(points: Sequence[Point], config: DrawConfig) -> OpSet:
    """Fill-path set tracing the polygon with slightly perturbed vertices.

    Polygons with fewer than three distinct vertices or no area produce an
    empty set.
    """
    vertices = distinct_points(points)
    if len(vertices) < 3 or abs(signed_area(vertices)) <= EPSILON:
        return OpSet(OpSetType.FILL_PATH)

    offset = config.max_randomness_offset
    ops = [Op.move(_jitter(vertices[0], offset, config))]
    ops.extend(Op.line_to(_jitter(vertex, offset, config)) for vertex in vertices[1:])
    return OpSet(OpSetType.FILL_PATH, tuple(ops))
