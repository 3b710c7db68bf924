"""SVG painter for drawables.

Operation sets are replayed through fontTools pens: SVGPathPen serializes the
path data and BoundsPen measures the extent used for the document viewBox.
Any other object implementing the pen protocol (moveTo, lineTo, curveTo,
closePath, endPath) can be driven the same way with ``draw_op_set``.
"""

from collections.abc import Iterable
from typing import Any
from xml.sax.saxutils import quoteattr

from fontTools.pens.boundsPen import BoundsPen
from fontTools.pens.svgPathPen import SVGPathPen

from roughsketch.config import RenderConfig
from roughsketch.domain import Drawable, OpSet, OpSetType, OpType


def _format_number(value: float) -> str:
    """Format a coordinate with at most two decimals and no trailing zeros."""
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def draw_op_set(op_set: OpSet, pen: Any) -> None:
    """Replay an operation set onto a fontTools-style pen.

    Fill-path sets are closed; outline and sketch sets are left open. Each
    move starts a new sub-path.

    Args:
        op_set: Operations to replay
        pen: Object implementing the pen protocol
    """
    open_path = False
    for op in op_set:
        if op.op is OpType.MOVE:
            if open_path:
                pen.endPath()
            pen.moveTo(op.data[0].to_tuple())
            open_path = True
        elif op.op is OpType.LINE_TO:
            pen.lineTo(op.data[0].to_tuple())
        elif op.op is OpType.CURVE_TO:
            pen.curveTo(*(p.to_tuple() for p in op.data))

    if open_path:
        if op_set.type is OpSetType.FILL_PATH:
            pen.closePath()
        else:
            pen.endPath()


class SvgRenderer:
    """Paint drawables as SVG path elements.

    Fill-path sets are filled with the fill color, fill-sketch sets are
    stroked with the fill color at the fill weight, and outline sets are
    stroked with the stroke color. Fills are always painted before outlines.
    """

    def __init__(self, config: RenderConfig | None = None) -> None:
        self.config = config or RenderConfig()

    def path_data(self, op_set: OpSet) -> str:
        """Serialize an operation set to SVG path data."""
        pen = SVGPathPen(None, ntos=_format_number)
        draw_op_set(op_set, pen)
        return pen.getCommands()

    def _attributes(self, set_type: OpSetType) -> dict[str, str]:
        if set_type is OpSetType.FILL_PATH:
            return {"stroke": "none", "fill": self.config.fill}
        if set_type is OpSetType.FILL_SKETCH:
            return {
                "stroke": self.config.fill,
                "stroke-width": _format_number(self.config.fill_weight),
                "fill": "none",
            }
        return {
            "stroke": self.config.stroke,
            "stroke-width": _format_number(self.config.stroke_width),
            "fill": "none",
        }

    def render(self, drawable: Drawable) -> list[str]:
        """Render one drawable to a list of ``<path>`` elements."""
        fills = [s for s in drawable.sets if s.type is not OpSetType.PATH]
        outlines = drawable.sets_of_type(OpSetType.PATH)

        elements = []
        for op_set in fills + outlines:
            if op_set.is_empty:
                continue
            attributes = {"d": self.path_data(op_set), **self._attributes(op_set.type)}
            rendered = " ".join(f"{name}={quoteattr(value)}" for name, value in attributes.items())
            elements.append(f"<path {rendered}/>")
        return elements

    def to_svg(self, drawables: Iterable[Drawable], padding: float = 10.0) -> str:
        """Build a standalone SVG document containing all drawables.

        Args:
            drawables: Drawables in painting order
            padding: Margin added around the combined bounds

        Returns:
            SVG document text
        """
        drawables = list(drawables)
        pen = BoundsPen(None)
        for drawable in drawables:
            for op_set in drawable.sets:
                draw_op_set(op_set, pen)

        min_x, min_y, max_x, max_y = pen.bounds or (0.0, 0.0, 0.0, 0.0)
        min_x -= padding
        min_y -= padding
        width = max_x - min_x + padding
        height = max_y - min_y + padding

        view_box = " ".join(_format_number(v) for v in (min_x, min_y, width, height))
        lines = [
            f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="{view_box}" '
            f'width="{_format_number(width)}" height="{_format_number(height)}">'
        ]
        for drawable in drawables:
            lines.extend(f"  {element}" for element in self.render(drawable))
        lines.append("</svg>")
        return "\n".join(lines) + "\n"
