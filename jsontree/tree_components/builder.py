import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional, Set, Tuple

from ..errors import CyclicStructureError
from .core import LayoutConfig, Rectangle
from .edge import Edge
from .metrics import TextMetrics
from .node import Node
from .placer import Placer
from .sizing import SizeEstimator, is_array, is_object, key_text

logger = logging.getLogger(__name__)


@dataclass
class TreeLayout:

    nodes: List[Node]
    edges: List[Edge]
    max_x: float
    max_y: float
    margin: float

    @property
    def width(self) -> float:
        return self.max_x + self.margin

    @property
    def height(self) -> float:
        return self.max_y + self.margin

    def node(self, node_id: int) -> Node:
        return self.nodes[node_id]

    def children_of(self, node_id: int) -> List[Node]:
        return [node for node in self.nodes if node.parent_id == node_id]


@dataclass
class LayoutContext:
    """Mutable workspace of a single ``TreeBuilder.build`` call."""

    placer: Placer
    nodes: List[Node] = field(default_factory=list)
    edges: List[Edge] = field(default_factory=list)
    next_id: int = 0
    max_x: float = 0
    max_y: float = 0
    ancestors: Set[int] = field(default_factory=set)

    def allocate_id(self) -> int:
        node_id = self.next_id
        self.next_id += 1
        return node_id

    def extend_bounds(self, x: float, y: float) -> None:
        self.max_x = max(self.max_x, x)
        self.max_y = max(self.max_y, y)

    def enter(self, value: Any, path: str) -> None:
        marker = id(value)
        if marker in self.ancestors:
            raise CyclicStructureError(path)
        self.ancestors.add(marker)

    def leave(self, value: Any) -> None:
        self.ancestors.discard(id(value))


class TreeBuilder:
    """Lays out a JSON value as a left-to-right tree of boxes.

    Every value becomes a node placed at ``(x, y)`` and pushed down by the
    ``Placer`` if it would overlap an earlier node. Object and array members
    are laid out one column further right, ``horizontal_gap`` past the
    parent's right edge, in key/index order. An array member is represented
    by a one-line summary node whose children are the array elements.

    Example::
        layout = TreeBuilder(LayoutConfig(), MonospaceMetrics()).build({"a": [1, 2]})
        # layout.nodes: root, "a (2)" summary, 1, 2
    """

    def __init__(self, config: LayoutConfig, metrics: TextMetrics) -> None:
        self.config = config
        self.estimator = SizeEstimator(config, metrics)

    def build(self, value: Any) -> TreeLayout:
        context = LayoutContext(placer=Placer(self.config.vertical_buffer))
        x, y = self.config.origin
        self._visit(value, x, y, None, context, "")

        logger.debug(
            "Laid out %d nodes and %d edges within (%s, %s).",
            len(context.nodes),
            len(context.edges),
            context.max_x,
            context.max_y,
        )
        return TreeLayout(
            nodes=context.nodes,
            edges=context.edges,
            max_x=context.max_x,
            max_y=context.max_y,
            margin=self.config.canvas_margin,
        )

    def _visit(
        self,
        value: Any,
        x: float,
        y: float,
        parent: Optional[Node],
        context: LayoutContext,
        path: str,
    ) -> Tuple[Node, float]:
        container = is_object(value) or is_array(value)
        if container:
            context.enter(value, path)

        size = self.estimator.estimate(value)
        adjusted_y = context.placer.place(x, y, size.width, size.height)
        node = Node(
            id=context.allocate_id(),
            rect=Rectangle(x, adjusted_y, size.width, size.height),
            lines=size.lines,
            parent_id=parent.id if parent is not None else None,
        )
        context.nodes.append(node)
        if parent is not None:
            context.edges.append(Edge(parent.id, node.id, parent.rect.center, node.rect.left_center))

        child_x = node.rect.right + self.config.horizontal_gap
        cursor = adjusted_y
        bottom = node.rect.bottom

        if is_object(value):
            gap = self.config.sibling_gap
            for key, member in value.items():
                label = key_text(key)
                member_path = f"{path}/{label}"
                if is_array(member):
                    cursor, member_bottom = self._visit_array_member(
                        member, label, node, child_x, cursor, context, member_path
                    )
                elif is_object(member):
                    child, member_bottom = self._visit(member, child_x, cursor, node, context, member_path)
                    cursor = max(cursor + child.rect.height + gap, member_bottom + gap)
                else:
                    continue
                bottom = max(bottom, member_bottom)

        if container:
            context.leave(value)

        context.extend_bounds(node.rect.right, max(cursor, node.rect.bottom))
        return node, bottom

    def _visit_array_member(
        self,
        items: Any,
        label: str,
        parent: Node,
        x: float,
        cursor: float,
        context: LayoutContext,
        path: str,
    ) -> Tuple[float, float]:
        context.enter(items, path)
        summary_value = {f"{label} ({len(items)})": "Array"}
        summary, summary_bottom = self._visit(summary_value, x, cursor, parent, context, path)
        element_x = summary.rect.right + self.config.horizontal_gap
        bottom = max(summary_bottom, self._visit_elements(items, summary, element_x, cursor, context, path))
        context.leave(items)
        return self._advance(cursor, len(items), bottom), bottom

    def _visit_elements(
        self,
        items: Any,
        parent: Node,
        x: float,
        cursor: float,
        context: LayoutContext,
        path: str,
    ) -> float:
        step = self.config.item_step
        bottom = cursor
        for index, item in enumerate(items):
            _, item_bottom = self._visit(item, x, cursor + index * step, parent, context, f"{path}/{index}")
            bottom = max(bottom, item_bottom)
        return bottom

    def _advance(self, cursor: float, count: int, bottom: float) -> float:
        gap = self.config.sibling_gap
        return max(cursor + count * self.config.item_step + gap, bottom + gap)
