"""Ellipse sampling types."""

import math
from dataclasses import dataclass

from roughsketch.domain.ops import OpSet
from roughsketch.domain.primitives import Point


@dataclass(frozen=True, slots=True)
class EllipseParams:
    """Radii and angular step used to sample an ellipse.

    Attributes:
        increment: Angle between consecutive samples, in radians
        rx: Horizontal radius after curve-fitting blend
        ry: Vertical radius after curve-fitting blend
    """

    increment: float
    rx: float
    ry: float

    @property
    def step_count(self) -> int:
        """Number of samples covering one full turn."""
        return max(1, round(2 * math.pi / self.increment))


@dataclass(frozen=True, slots=True)
class EllipseResult:
    """Sampled ellipse.

    Attributes:
        core_points: Reduced ring used as the fill polygon
        all_points: Full ring the outline curve is fitted through
        op_set: Outline operations
    """

    core_points: tuple[Point, ...]
    all_points: tuple[Point, ...]
    op_set: OpSet
