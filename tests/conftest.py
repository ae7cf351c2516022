"""Shared fixtures: a deterministic text metric and a default builder."""

from __future__ import annotations

import pytest

from jsontree.tree_components import FontSpec, LayoutConfig, SizeEstimator, TreeBuilder


class CharMetrics:
    """Ten units per character, independent of the font."""

    def measure(self, text: str, font: FontSpec) -> float:
        return len(text) * 10


@pytest.fixture
def char_metrics() -> CharMetrics:
    return CharMetrics()


@pytest.fixture
def config() -> LayoutConfig:
    return LayoutConfig()


@pytest.fixture
def estimator(config: LayoutConfig, char_metrics: CharMetrics) -> SizeEstimator:
    return SizeEstimator(config, char_metrics)


@pytest.fixture
def builder(config: LayoutConfig, char_metrics: CharMetrics) -> TreeBuilder:
    """A fresh TreeBuilder with default constants and 10-unit characters."""
    return TreeBuilder(config, char_metrics)
