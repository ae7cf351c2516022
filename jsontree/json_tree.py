from typing import Any, Optional, Union

from .errors import ConfigurationError
from .tree_components import (
    Edge,
    FontSpec,
    LayoutConfig,
    Node,
    Rectangle,
    SvgCanvas,
    TextMetrics,
    TreeBuilder,
    TreeLayout,
    TreeStyle,
    resolve_metrics,
)


class JsonTree:

    def __init__(
        self,
        value: Any,
        *,
        config: Optional[LayoutConfig] = None,
        style: Optional[Union[str, TreeStyle]] = None,
        metrics: Union[str, TextMetrics, None] = "wcwidth",
    ) -> None:
        if config is not None and not isinstance(config, LayoutConfig):
            raise ConfigurationError("config must be a LayoutConfig instance.")
        self.value = value
        self.config = config or LayoutConfig()

        if isinstance(style, TreeStyle):
            self.style = style
        else:
            theme = style or "light"
            if not isinstance(theme, str):
                raise ConfigurationError("style must be a theme name or TreeStyle instance.")
            try:
                self.style = TreeStyle.for_theme(theme)
            except ValueError as exc:
                raise ConfigurationError(str(exc)) from exc

        self.metrics = resolve_metrics(metrics)

    def layout(self) -> TreeLayout:
        return TreeBuilder(self.config, self.metrics).build(self.value)

    def render(self, layout: Optional[TreeLayout] = None) -> str:
        return SvgCanvas(self.style, self.config).render(layout if layout is not None else self.layout())

    def __str__(self) -> str:
        return self.render()


def generate_json_tree(value: Any, **kwargs: Any) -> str:
    return JsonTree(value, **kwargs).render()


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
]
