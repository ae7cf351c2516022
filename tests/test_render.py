"""Tests for SVG serialization and the public facade."""

from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest

from jsontree import JsonTree, LayoutConfig, TreeStyle, generate_json_tree
from jsontree.tree_components import Edge, SvgCanvas
from jsontree.tree_components.core import format_number

SVG = "{http://www.w3.org/2000/svg}"


@pytest.fixture
def nested_svg(char_metrics) -> str:
    return JsonTree({"a": {"b": 1}, "list": [1, 2]}, metrics=char_metrics).render()


class TestFormatNumber:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(12.0, "12"), (100, "100"), (0, "0"), (152.5, "152.5"), (1 / 3, "0.33"), (-0.001, "0")],
    )
    def test_trailing_zeros_dropped(self, value: float, expected: str) -> None:
        assert format_number(value) == expected


class TestEdgePath:
    def test_cubic_curve_with_horizontal_midpoints(self) -> None:
        edge = Edge(0, 1, (10, 20), (110, 60))
        assert edge.control_points == ((60, 20), (60, 60))
        assert edge.path_data == "M10,20 C60,20 60,60 110,60"


class TestSvgDocument:
    def test_well_formed(self, nested_svg: str) -> None:
        root = ET.fromstring(nested_svg)
        assert root.tag == f"{SVG}svg"

    def test_declared_size_matches_layout(self, char_metrics) -> None:
        tree = JsonTree({"a": {"b": 1}}, metrics=char_metrics)
        layout = tree.layout()
        root = ET.fromstring(tree.render(layout))
        assert root.get("width") == format_number(layout.width)
        assert root.get("height") == format_number(layout.height)

    def test_arrowhead_marker_defined_once(self, nested_svg: str) -> None:
        root = ET.fromstring(nested_svg)
        markers = root.findall(f"{SVG}defs/{SVG}marker")
        assert [marker.get("id") for marker in markers] == ["arrowhead"]
        assert nested_svg.count("url(#arrowhead)") == 4

    def test_edges_before_nodes(self, nested_svg: str) -> None:
        root = ET.fromstring(nested_svg)
        tags = [child.tag for child in root if child.tag != f"{SVG}defs"]
        first_group = tags.index(f"{SVG}g")
        assert tags[:first_group] == [f"{SVG}path"] * first_group
        assert f"{SVG}path" not in tags[first_group:]

    def test_one_group_per_node(self, nested_svg: str) -> None:
        root = ET.fromstring(nested_svg)
        ids = [group.get("id") for group in root.findall(f"{SVG}g")]
        assert ids == [f"node-{i}" for i in range(5)]

    def test_node_group_positioned_and_rounded(self, char_metrics) -> None:
        svg = JsonTree(42, metrics=char_metrics).render()
        root = ET.fromstring(svg)
        group = root.find(f"{SVG}g")
        assert group.get("transform") == "translate(50, 50)"
        rect = group.find(f"{SVG}rect")
        assert (rect.get("width"), rect.get("height")) == ("60", "38")
        assert rect.get("rx") == "5"

    def test_key_value_spans(self, char_metrics) -> None:
        svg = JsonTree({"name": "Ana"}, metrics=char_metrics).render()
        assert '<span class="json-key"' in svg
        assert ">name:</span>" in svg
        assert ">&quot;Ana&quot;</span>" in svg

    def test_keyless_line_has_empty_key_span(self, char_metrics) -> None:
        svg = JsonTree(7, metrics=char_metrics).render()
        assert "></span><span class=\"json-value\"" in svg
        assert ">7</span>" in svg

    def test_text_is_escaped(self, char_metrics) -> None:
        svg = JsonTree({"<k>": "a & <b>"}, metrics=char_metrics).render()
        ET.fromstring(svg)
        assert "&lt;k&gt;:" in svg
        assert "&quot;a &amp; &lt;b&gt;&quot;" in svg

    def test_font_settings_in_block_style(self, char_metrics) -> None:
        config = LayoutConfig()
        svg = SvgCanvas(TreeStyle(), config).render(JsonTree(1, metrics=char_metrics).layout())
        assert "font-family:monospace;font-size:12px;line-height:18px;padding:10px;" in svg

    def test_dark_theme_background(self, char_metrics) -> None:
        light = JsonTree(1, metrics=char_metrics).render()
        dark = JsonTree(1, style="dark", metrics=char_metrics).render()
        assert 'height="100%"' not in light
        assert 'height="100%"' in dark
        assert TreeStyle.for_theme("dark").node_fill in dark


class TestFacade:
    def test_generate_json_tree(self, char_metrics) -> None:
        svg = generate_json_tree({"a": [1]}, metrics=char_metrics)
        assert svg.startswith("<svg ")
        assert svg.rstrip().endswith("</svg>")

    def test_str_renders(self, char_metrics) -> None:
        tree = JsonTree({"a": 1}, metrics=char_metrics)
        assert str(tree) == tree.render()

    def test_default_metrics_use_wcwidth(self) -> None:
        narrow = JsonTree("ab").layout().nodes[0].rect.width
        wide = JsonTree("日本").layout().nodes[0].rect.width
        assert wide > narrow

    def test_unavailable_metrics_still_render(self) -> None:
        tree = JsonTree({"key": "value", "child": {"x": 1}}, metrics=None)
        layout = tree.layout()
        assert all(node.rect.width == 20 for node in layout.nodes)
        ET.fromstring(tree.render(layout))
