"""Core geometric value types.

This module defines the small value types shared by the path generator and
the filler engine:
- Point: A 2D point
- Line: A straight segment between two points
- Edge: One polygon side expressed in scanline terms
- IntersectionInfo: Result of intersecting two lines
"""

import math
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=data["x"], y=data["y"])


@dataclass(frozen=True, slots=True)
class Line:
    """A straight segment from ``source`` to ``target``."""

    source: Point
    target: Point

    @property
    def length(self) -> float:
        """Euclidean length of the segment."""
        return math.hypot(self.target.x - self.source.x, self.target.y - self.source.y)

    def reversed(self) -> "Line":
        """Return the same segment walked from target to source."""
        return Line(self.target, self.source)


@dataclass(frozen=True, slots=True)
class Edge:
    """One polygon side prepared for scanline crossing tests.

    Coordinates are expressed in the scan frame, where probing lines are
    horizontal: ``y`` runs across the probing lines and ``x`` along them.
    The original world-space endpoints are kept for exact intersection; the
    scan reads only ``y_min``, ``y_max`` and ``x`` (for ordering) and takes
    crossings from the world-space endpoints. ``slope`` and ``x_at`` give the
    frame position of a crossing for callers inspecting an edge table.

    Attributes:
        y_min: Lower end of the edge's vertical extent
        y_max: Upper end of the edge's vertical extent
        x: Frame x at ``y_min``
        slope: dx/dy of the edge in the scan frame
        source: World-space start point
        target: World-space end point
    """

    y_min: float
    y_max: float
    x: float
    slope: float
    source: Point
    target: Point

    def x_at(self, y: float) -> float:
        """Frame x where the edge crosses frame height ``y``."""
        return self.x + (y - self.y_min) * self.slope

    def covers(self, y: float) -> bool:
        """Check whether a probing line at ``y`` crosses this edge.

        The range is half-open so that a vertex shared by two edges is
        counted once when the outline passes through it and zero or two
        times at a local extremum.
        """
        return self.y_min <= y < self.y_max


@dataclass(frozen=True, slots=True)
class IntersectionInfo:
    """Intersection of two lines.

    Attributes:
        point: Intersection point
        distance: Signed distance from the first line's start along its direction
        t: Parametric position on the first segment (0 at start, 1 at end)
        u: Parametric position on the second segment
    """

    point: Point
    distance: float
    t: float
    u: float

    def within_segments(self, tolerance: float = 0.0) -> bool:
        """Check whether the point lies inside both segments' extents."""
        return (
            -tolerance <= self.t <= 1 + tolerance
            and -tolerance <= self.u <= 1 + tolerance
        )
