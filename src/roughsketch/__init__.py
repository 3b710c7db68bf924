"""roughsketch - Hand-drawn looking vector shapes.

roughsketch turns lines, rectangles, ellipses, arcs, polygons and curves into
sequences of slightly perturbed drawing operations, and fills their interiors
with hachure, cross-hatch, zig-zag, dashed, dotted or solid patterns. Output
is renderer-agnostic; an SVG painter and a command line tool are included.

Example:
    $ roughsketch draw rectangle 10 10 200 100 --fill hachure > box.svg
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
