from html import escape
from typing import List

from .builder import TreeLayout
from .core import LayoutConfig, TreeStyle, format_number as num
from .edge import Edge
from .node import Node

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
XHTML_NAMESPACE = "http://www.w3.org/1999/xhtml"
ARROWHEAD_ID = "arrowhead"


class SvgCanvas:
    """Serializes a ``TreeLayout`` into a standalone SVG document.

    Edges are written before nodes so boxes are painted over the connector
    lines. Node text is an XHTML block inside a ``foreignObject``.
    """

    def __init__(self, style: TreeStyle, config: LayoutConfig) -> None:
        self.style = style
        self.config = config

    def render(self, layout: TreeLayout) -> str:
        parts: List[str] = [
            f'<svg xmlns="{SVG_NAMESPACE}" width="{num(layout.width)}" height="{num(layout.height)}">',
            self._defs(),
        ]
        if self.style.background != "none":
            parts.append(f'<rect width="100%" height="100%" style="fill:{self.style.background};"/>')
        parts.extend(self._edge(edge) for edge in layout.edges)
        parts.extend(self._node(node) for node in layout.nodes)
        parts.append("</svg>")
        return "\n".join(parts) + "\n"

    def _defs(self) -> str:
        return (
            "<defs>"
            f'<marker id="{ARROWHEAD_ID}" markerWidth="10" markerHeight="7" refX="10" refY="3.5" orient="auto">'
            f'<polygon points="0 0, 10 3.5, 0 7" style="fill:{self.style.stroke};"/>'
            "</marker>"
            "</defs>"
        )

    def _edge(self, edge: Edge) -> str:
        style = self.style
        return (
            f'<path d="{edge.path_data}" '
            f'style="fill:none;stroke:{style.stroke};stroke-width:{num(style.stroke_width)};'
            f'marker-end:url(#{ARROWHEAD_ID});"/>'
        )

    def _node(self, node: Node) -> str:
        style = self.style
        config = self.config
        rect = node.rect
        width, height = num(rect.width), num(rect.height)

        rows: List[str] = []
        for line in node.lines:
            key = f"{escape(line.key)}:" if line.key else ""
            rows.append(
                '<div style="display:flex;">'
                f'<span class="json-key" style="margin-right:5px;color:{style.key_color};">{key}</span>'
                f'<span class="json-value" style="color:{style.value_color};">{escape(line.value)}</span>'
                "</div>"
            )

        block_style = (
            f"font-family:{escape(config.font.family)};"
            f"font-size:{num(config.font.size)}px;"
            f"line-height:{num(config.line_height)}px;"
            f"padding:{num(config.padding)}px;"
            "box-sizing:border-box;"
        )
        radius = num(style.corner_radius)
        return (
            f'<g id="{node.element_id}" transform="translate({num(rect.x)}, {num(rect.y)})">'
            f'<rect width="{width}" height="{height}" rx="{radius}" ry="{radius}" '
            f'style="fill:{style.node_fill};stroke:{style.stroke};stroke-width:{num(style.stroke_width)}"/>'
            f'<foreignObject width="{width}" height="{height}">'
            f'<div xmlns="{XHTML_NAMESPACE}" style="{block_style}">'
            + "".join(rows)
            + "</div></foreignObject></g>"
        )
