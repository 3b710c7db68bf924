"""Output layer for roughsketch.

This module paints drawables to SVG using fonttools pens. It is the only
place that knows about a concrete drawing surface; the core produces
renderer-agnostic operation sets.

Key classes:
- SvgRenderer: Paint drawables as SVG path elements and documents

Key functions:
- draw_op_set: Replay an operation set onto any fonttools-style pen
"""

from roughsketch.io.svg import SvgRenderer, draw_op_set

__all__ = [
    "SvgRenderer",
    "draw_op_set",
]
