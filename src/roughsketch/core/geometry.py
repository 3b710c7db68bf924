"""Geometric operations shared by the path generator and the filler engine.

This module provides core mathematical utilities for:
- Line intersection (the primitive behind scanline fills)
- Segment length and polygon area
- Point list cleanup and bounding boxes
- Direction vectors for hachure angles

All functions are pure and stateless.
"""

import math
from collections.abc import Sequence

from roughsketch.domain import IntersectionInfo, Point

# Shared tolerance for parallelism and degenerate extents
EPSILON = 1e-9


def line_intersection(p1: Point, p2: Point, p3: Point, p4: Point) -> IntersectionInfo | None:
    """Intersect the line through p1-p2 with the line through p3-p4.

    Solves the 2x2 system for both parametric positions. The intersection is
    reported even when it falls outside either segment; callers check the
    returned parameters against the extents they care about.

    Args:
        p1: Start of the first (probing) segment
        p2: End of the first segment
        p3: Start of the second segment
        p4: End of the second segment

    Returns:
        IntersectionInfo with the point, the signed distance from p1 along
        p1->p2 and both parameters, or None when the lines are parallel,
        coincident or degenerate

    Examples:
        >>> info = line_intersection(
        ...     Point(0.0, 0.0), Point(10.0, 10.0), Point(0.0, 10.0), Point(10.0, 0.0)
        ... )
        >>> info.point
        Point(x=5.0, y=5.0)
    """
    dx1 = p2.x - p1.x
    dy1 = p2.y - p1.y
    dx2 = p4.x - p3.x
    dy2 = p4.y - p3.y

    # Cross product of the two directions
    denom = dx1 * dy2 - dy1 * dx2

    if abs(denom) < EPSILON:
        return None

    ox = p3.x - p1.x
    oy = p3.y - p1.y
    t = (ox * dy2 - oy * dx2) / denom
    u = (ox * dy1 - oy * dx1) / denom

    point = Point(p1.x + t * dx1, p1.y + t * dy1)
    distance = t * math.hypot(dx1, dy1)

    return IntersectionInfo(point=point, distance=distance, t=t, u=u)


def line_length(p1: Point, p2: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(p2.x - p1.x, p2.y - p1.y)


def distinct_points(points: Sequence[Point]) -> list[Point]:
    """Drop consecutive duplicates, including a closing copy of the first point.

    Args:
        points: Polygon or path vertices

    Returns:
        Vertices with no two neighbours (cyclically) equal
    """
    result: list[Point] = []
    for point in points:
        if not result or line_length(result[-1], point) > EPSILON:
            result.append(point)

    while len(result) > 1 and line_length(result[0], result[-1]) <= EPSILON:
        result.pop()

    return result


def bounding_box(points: Sequence[Point]) -> tuple[float, float, float, float]:
    """Calculate bounding box of a point list.

    Returns:
        Tuple of (min_x, min_y, max_x, max_y); all zero for an empty list
    """
    if not points:
        return (0.0, 0.0, 0.0, 0.0)

    xs = [p.x for p in points]
    ys = [p.y for p in points]
    return (min(xs), min(ys), max(xs), max(ys))


def direction(angle: float) -> tuple[float, float]:
    """Unit vector pointing at ``angle`` degrees.

    Multiples of 90 degrees produce exact axis vectors so that axis-aligned
    edges stay exactly parallel to axis-aligned probing lines.
    """
    quarter, remainder = divmod(angle % 360.0, 90.0)
    if remainder == 0.0:
        return [(1.0, 0.0), (0.0, 1.0), (-1.0, 0.0), (0.0, -1.0)][int(quarter) % 4]

    radians = math.radians(angle)
    return math.cos(radians), math.sin(radians)


def signed_area(points: Sequence[Point]) -> float:
    """Calculate signed area of a polygon using the shoelace formula.

    Positive for counter-clockwise vertex order in a y-up frame, negative for
    clockwise. Collinear or degenerate polygons have zero area.
    """
    if len(points) < 3:
        return 0.0

    area = 0.0
    n = len(points)
    for i in range(n):
        j = (i + 1) % n
        area += points[i].x * points[j].y
        area -= points[j].x * points[i].y

    return area / 2.0
