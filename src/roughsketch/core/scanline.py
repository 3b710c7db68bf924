"""Scanline hachure engine.

Probing lines are stepped across a polygon at a fixed angle and gap, and the
part of each probe inside the polygon is reported as a segment. Instead of
rotating the polygon, every point is projected onto a scan frame:

- frame x: distance along the hachure direction
- frame y: distance across it, so every probing line has constant frame y

Crossings themselves are computed in world space with the line-intersection
primitive, so the output points carry no rotation round-off.
"""

from collections.abc import Sequence

from roughsketch.core.geometry import EPSILON, direction, distinct_points, line_intersection
from roughsketch.domain import Edge, IntersectionInfo, Line, Point

# Smallest spacing between probing lines; finer gaps are raised to it
MIN_HACHURE_GAP = 0.1


def _frame(point: Point, ux: float, uy: float) -> tuple[float, float]:
    """Project a world point onto the scan frame defined by unit vector (ux, uy)."""
    along = point.x * ux + point.y * uy
    across = point.y * ux - point.x * uy
    return along, across


def build_edge_table(points: Sequence[Point], angle: float) -> list[Edge]:
    """Convert polygon sides into scan-frame edges.

    The polygon is treated as closed. Sides running parallel to the probing
    lines can never be crossed properly and are left out.

    Args:
        points: Polygon vertices (closing duplicate optional)
        angle: Hachure angle in degrees

    Returns:
        Edges sorted by (y_min, x, y_max)
    """
    vertices = distinct_points(points)
    if len(vertices) < 3:
        return []

    ux, uy = direction(angle)
    edges: list[Edge] = []

    for i, source in enumerate(vertices):
        target = vertices[(i + 1) % len(vertices)]
        sx, sy = _frame(source, ux, uy)
        tx, ty = _frame(target, ux, uy)

        if abs(ty - sy) <= EPSILON:
            continue

        if sy > ty:
            sx, sy, tx, ty = tx, ty, sx, sy

        edges.append(
            Edge(
                y_min=sy,
                y_max=ty,
                x=sx,
                slope=(tx - sx) / (ty - sy),
                source=source,
                target=target,
            )
        )

    edges.sort(key=lambda e: (e.y_min, e.x, e.y_max))
    return edges


def _pair_crossings(crossings: list[IntersectionInfo]) -> list[Line]:
    """Pair sorted crossings into inside spans using the even-odd rule."""
    if len(crossings) % 2:
        crossings = crossings[:-1]

    spans: list[Line] = []
    for enter, leave in zip(crossings[0::2], crossings[1::2]):
        if leave.distance - enter.distance > EPSILON:
            spans.append(Line(enter.point, leave.point))
    return spans


def hachure_lines(points: Sequence[Point], gap: float, angle: float) -> list[Line]:
    """Compute the interior segments of parallel probing lines.

    Probes sit at ``y_min + k * gap`` for k >= 1 while strictly below the
    polygon's far extent, measured perpendicular to the lines. Each probe is
    intersected with the edges that are active at its height; crossings are
    sorted along the probe and paired even-odd, so self-intersecting polygons
    fill by parity.

    Args:
        points: Polygon vertices
        gap: Distance between neighbouring lines; gaps below
            ``MIN_HACHURE_GAP`` are raised to it and non-positive gaps yield
            nothing
        angle: Line direction in degrees; 0 gives horizontal lines

    Returns:
        Segments in probe order, each running along the hachure direction.
        Empty for degenerate polygons.

    Examples:
        >>> square = [Point(0.0, 0.0), Point(1.0, 0.0), Point(1.0, 1.0), Point(0.0, 1.0)]
        >>> hachure_lines(square, 0.5, 0.0)
        [Line(source=Point(x=0.0, y=0.5), target=Point(x=1.0, y=0.5))]
    """
    if gap <= 0:
        return []
    gap = max(gap, MIN_HACHURE_GAP)

    vertices = distinct_points(points)
    edges = build_edge_table(vertices, angle)
    if not edges:
        return []

    ux, uy = direction(angle)
    along = [_frame(p, ux, uy)[0] for p in vertices]
    # Probes overshoot the polygon so end crossings are never at t = 0 or 1
    start_along = min(along) - 1
    end_along = max(along) + 1

    y_min = edges[0].y_min
    y_max = max(e.y_max for e in edges)

    lines: list[Line] = []
    active: list[Edge] = []
    next_edge = 0
    k = 1
    y = y_min + gap

    while y < y_max:
        while next_edge < len(edges) and edges[next_edge].y_min <= y:
            active.append(edges[next_edge])
            next_edge += 1
        active = [e for e in active if e.covers(y)]

        # Frame (a, y) maps back to world a*u + y*v with v = (-uy, ux)
        probe_start = Point(start_along * ux - y * uy, start_along * uy + y * ux)
        probe_end = Point(end_along * ux - y * uy, end_along * uy + y * ux)

        crossings = []
        for edge in active:
            info = line_intersection(probe_start, probe_end, edge.source, edge.target)
            if info is not None:
                crossings.append(info)
        crossings.sort(key=lambda c: c.distance)

        lines.extend(_pair_crossings(crossings))

        k += 1
        y = y_min + k * gap

    return lines
