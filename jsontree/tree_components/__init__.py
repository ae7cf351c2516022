from .core import FontSpec, LayoutConfig, Line, NodeSize, Rectangle, TreeStyle
from .metrics import FixedWidthMetrics, MonospaceMetrics, NullMetrics, TextMetrics, resolve_metrics
from .sizing import SizeEstimator, encode_scalar
from .placer import Placer
from .node import Node
from .edge import Edge
from .builder import LayoutContext, TreeBuilder, TreeLayout
from .canvas import SvgCanvas

__all__ = [
    "FontSpec",
    "LayoutConfig",
    "Line",
    "NodeSize",
    "Rectangle",
    "TreeStyle",
    "TextMetrics",
    "MonospaceMetrics",
    "FixedWidthMetrics",
    "NullMetrics",
    "resolve_metrics",
    "SizeEstimator",
    "encode_scalar",
    "Placer",
    "Node",
    "Edge",
    "LayoutContext",
    "TreeBuilder",
    "TreeLayout",
    "SvgCanvas",
]
