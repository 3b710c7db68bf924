"""Domain models for roughsketch.

This module contains the value types shared by the generator, the filler
engine and renderers. All models are designed to be:

- Immutable (frozen dataclasses), except the Randomizer
- Serializable to plain dictionaries
- Independent of any drawing surface

Key classes:
- Point, Line: Basic geometry
- Edge: Polygon side in scanline terms
- IntersectionInfo: Result of the line-intersection primitive
- Op, OpSet, Drawable: Drawing operations and their containers
- EllipseParams, EllipseResult: Ellipse sampling
- Randomizer: Seeded random source with reset
"""

from roughsketch.domain.ellipse import EllipseParams, EllipseResult
from roughsketch.domain.ops import Drawable, Op, OpSet, OpSetType, OpType
from roughsketch.domain.primitives import Edge, IntersectionInfo, Line, Point
from roughsketch.domain.randomizer import Randomizer

__all__: list[str] = [
    # Enums
    "OpType",
    "OpSetType",
    # Geometry
    "Point",
    "Line",
    "Edge",
    "IntersectionInfo",
    # Operations
    "Op",
    "OpSet",
    "Drawable",
    # Ellipse sampling
    "EllipseParams",
    "EllipseResult",
    # Randomness
    "Randomizer",
]
