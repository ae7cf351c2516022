import json
import math
from collections.abc import Mapping
from typing import Any, List

from ..errors import UnsupportedValueError
from .core import LayoutConfig, Line, NodeSize
from .metrics import TextMetrics


def is_object(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def encode_scalar(value: Any) -> str:
    """Return the JSON text of a scalar: ``true``, ``null``, ``1.5``, ``"text"``."""
    if isinstance(value, float) and not math.isfinite(value):
        return "null"
    if value is None or isinstance(value, (bool, int, float, str)):
        return json.dumps(value, ensure_ascii=False)
    raise UnsupportedValueError(f"Unsupported JSON value type: {type(value)!r}")


def key_text(key: Any) -> str:
    if isinstance(key, str):
        return key
    return encode_scalar(key)


def array_label(items: Any) -> str:
    return f"Array ({len(items)})"


def describe_member(value: Any) -> str:
    if is_array(value):
        return array_label(value)
    if is_object(value):
        return "{}"
    return encode_scalar(value)


class SizeEstimator:

    def __init__(self, config: LayoutConfig, metrics: TextMetrics) -> None:
        self.config = config
        self.metrics = metrics

    def lines_for(self, value: Any) -> List[Line]:
        if is_array(value):
            return [Line("", array_label(value))]
        if is_object(value):
            return [Line(key_text(key), describe_member(member)) for key, member in value.items()]
        return [Line("", encode_scalar(value))]

    def estimate(self, value: Any) -> NodeSize:
        lines = self.lines_for(value)
        padding = self.config.padding
        font = self.config.font

        # An empty object has no lines; its box is padding only.
        text_width = max((self.metrics.measure(line.text, font) for line in lines), default=0)
        width = text_width + padding * 2
        height = len(lines) * self.config.line_height + padding * 2
        return NodeSize(width=width, height=height, lines=tuple(lines))
