from .json_tree import *
from .errors import *

__version__ = "0.1.0"
__all__ = [
    "JsonTree",
    "generate_json_tree",
    "LayoutConfig",
    "FontSpec",
    "TreeStyle",
    "TreeLayout",
    "Node",
    "Edge",
    "Rectangle",
    "JsonTreeError",
    "ConfigurationError",
    "CyclicStructureError",
    "UnsupportedValueError",
    "InputError",
]
