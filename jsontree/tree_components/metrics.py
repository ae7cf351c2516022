import logging
from typing import Protocol, Union, runtime_checkable

from wcwidth import wcwidth

from ..errors import ConfigurationError
from .core import FontSpec

logger = logging.getLogger(__name__)

# Advance of one monospace cell relative to the font size (600/1000 em).
MONOSPACE_ADVANCE = 0.6


@runtime_checkable
class TextMetrics(Protocol):
    def measure(self, text: str, font: FontSpec) -> float: ...


class MonospaceMetrics:
    """Width of ``text`` as rendered in a monospace face.

    Each glyph occupies the number of terminal cells ``wcwidth`` reports for
    it (two for wide CJK and emoji glyphs, at least one otherwise).
    """

    def __init__(self, advance: float = MONOSPACE_ADVANCE) -> None:
        self.advance = advance

    def cells(self, text: str) -> int:
        return sum(max(wcwidth(char), 1) for char in text)

    def measure(self, text: str, font: FontSpec) -> float:
        return self.cells(text) * font.size * self.advance


class FixedWidthMetrics:
    def __init__(self, advance: float = MONOSPACE_ADVANCE) -> None:
        self.advance = advance

    def measure(self, text: str, font: FontSpec) -> float:
        return len(text) * font.size * self.advance


class NullMetrics:
    def measure(self, text: str, font: FontSpec) -> float:
        return 0.0


_METRICS_ALIASES = {
    "wcwidth": MonospaceMetrics,
    "monospace": MonospaceMetrics,
    "fixed": FixedWidthMetrics,
    "none": NullMetrics,
}


def resolve_metrics(metrics: Union[str, TextMetrics, None]) -> TextMetrics:
    if metrics is None:
        logger.debug("No text metrics available, node widths fall back to padding only.")
        return NullMetrics()
    if isinstance(metrics, str):
        factory = _METRICS_ALIASES.get(metrics.lower().strip())
        if factory is None:
            choices = ", ".join(sorted(_METRICS_ALIASES))
            raise ConfigurationError(f"Unknown text metrics '{metrics}'. Choose one of: {choices}.")
        return factory()
    if not isinstance(metrics, TextMetrics):
        raise ConfigurationError("metrics must be a name or an object with a measure(text, font) method.")
    return metrics
