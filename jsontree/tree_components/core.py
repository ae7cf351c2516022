from dataclasses import dataclass, field
from typing import Tuple

from ..errors import ConfigurationError


@dataclass(frozen=True)
class FontSpec:

    family: str = "monospace"
    size: float = 12

    @property
    def css(self) -> str:
        return f"{format_number(self.size)}px {self.family}"


@dataclass(frozen=True)
class Line:

    key: str
    value: str

    @property
    def text(self) -> str:
        return f"{self.key}: {self.value}"


@dataclass(frozen=True)
class NodeSize:

    width: float
    height: float
    lines: Tuple[Line, ...]


@dataclass(frozen=True)
class Rectangle:

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Tuple[float, float]:
        return self.x + self.width / 2, self.y + self.height / 2

    @property
    def left_center(self) -> Tuple[float, float]:
        return self.x, self.y + self.height / 2

    def overlaps(self, other: "Rectangle") -> bool:
        return (
            self.x < other.right
            and self.right > other.x
            and self.y < other.bottom
            and self.bottom > other.y
        )


@dataclass
class LayoutConfig:
    """Numeric constants of the layout.

    Every distance is in canvas units (pixels in the rendered markup).
    Array elements are stacked ``line_height + array_item_spacing`` apart and
    consecutive members of one node are separated by ``sibling_gap``.
    """

    padding: float = 10
    line_height: float = 18
    font: FontSpec = field(default_factory=FontSpec)
    horizontal_gap: float = 100
    vertical_buffer: float = 10
    array_item_spacing: float = 30
    sibling_gap: float = 50
    origin: Tuple[float, float] = (50, 50)
    canvas_margin: float = 150

    def __post_init__(self) -> None:
        for name in (
            "padding",
            "horizontal_gap",
            "vertical_buffer",
            "array_item_spacing",
            "sibling_gap",
            "canvas_margin",
        ):
            value = getattr(self, name)
            if not _is_number(value):
                raise ConfigurationError(f"{name} must be a number.")
            if value < 0:
                raise ConfigurationError(f"{name} must not be negative.")

        if not _is_number(self.line_height) or self.line_height <= 0:
            raise ConfigurationError("line_height must be a positive number.")

        if not isinstance(self.font, FontSpec):
            raise ConfigurationError("font must be a FontSpec instance.")
        if not _is_number(self.font.size) or self.font.size <= 0:
            raise ConfigurationError("font size must be a positive number.")
        if not isinstance(self.font.family, str) or not self.font.family.strip():
            raise ConfigurationError("font family must be a non-empty string.")

        if (
            not isinstance(self.origin, tuple)
            or len(self.origin) != 2
            or not all(_is_number(v) for v in self.origin)
        ):
            raise ConfigurationError("origin must be an (x, y) tuple of numbers.")

    @property
    def item_step(self) -> float:
        return self.line_height + self.array_item_spacing


@dataclass(frozen=True)
class TreeStyle:

    node_fill: str = "#f6f8fa"
    stroke: str = "#475872"
    stroke_width: float = 1
    corner_radius: float = 5
    key_color: str = "#475872"
    value_color: str = "#1f2328"
    background: str = "none"

    @classmethod
    def for_theme(cls, theme: str) -> "TreeStyle":
        key = theme.lower().strip()
        if key in {"light", "default"}:
            return cls()
        if key in {"dark", "night"}:
            return cls(
                node_fill="#161b22",
                stroke="#8b949e",
                key_color="#79c0ff",
                value_color="#e6edf3",
                background="#0d1117",
            )
        raise ValueError(f"Unknown theme: {theme}")


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def format_number(value: float) -> str:
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text
