"""Core algorithms for roughsketch.

This module contains the core algorithms for:

- Geometry operations (line intersection, signed area, bounding boxes)
- Perturbed path construction (lines, curves, ellipses, arcs, polygons)
- Scanline hachure (interior segments of parallel probing lines)
- Fill patterns built on the hachure segments
- Shape generation (the Generator)

All functions except the Generator's methods are stateless apart from the
randomizer carried by the DrawConfig they receive.

Key functions:
- line_intersection: Intersect two lines, reporting parameters on both
- hachure_lines: Interior segments of a polygon at a given gap and angle
- create_filler: Look up a filler by fill style

Key classes:
- Generator: Produces Drawables for the standard primitives
- Filler: Base class of the fill patterns
"""

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
from roughsketch.core.generator import Generator
from roughsketch.core.geometry import (
    EPSILON,
    bounding_box,
    direction,
    distinct_points,
    line_intersection,
    line_length,
    signed_area,
)
from roughsketch.core.scanline import build_edge_table, hachure_lines

__all__ = [
    # Geometry
    "EPSILON",
    "bounding_box",
    "direction",
    "distinct_points",
    "line_intersection",
    "line_length",
    "signed_area",
    # Scanline
    "build_edge_table",
    "hachure_lines",
    # Fillers
    "FILLERS",
    "Filler",
    "NoFiller",
    "SolidFiller",
    "HachureFiller",
    "CrossHatchFiller",
    "ZigZagFiller",
    "ZigZagLineFiller",
    "DashedFiller",
    "DotFiller",
    "DotDashFiller",
    "create_filler",
    # Generator
    "Generator",
]
