"""Tests for standalone SVG document rendering (lxml)."""

from __future__ import annotations

import pytest
from lxml import etree

from mgnrega_map.models.path_result import PathResult
from mgnrega_map.models.projection import ProjectionParameters
from mgnrega_map.rendering.svg_document import (
    SVG_NAMESPACE,
    SvgStyle,
    render_map_svg,
    render_svg,
)

NS = {"svg": SVG_NAMESPACE}


def _parse(document: bytes) -> etree._Element:
    return etree.fromstring(document)


class TestRenderSvg:
    """Serialising already generated paths."""

    def test_document_root(self) -> None:
        root = _parse(render_svg([], width=800, height=900))
        assert root.tag == f"{{{SVG_NAMESPACE}}}svg"
        assert root.get("width") == "800"
        assert root.get("height") == "900"
        assert root.get("viewBox") == "0 0 800 900"

    def test_xml_declaration(self) -> None:
        document = render_svg([], width=10, height=10)
        assert document.startswith(b"<?xml version='1.0' encoding='UTF-8'?>")

    def test_empty_paths_skipped(self) -> None:
        paths = [
            PathResult(id=0, name="Pune", path="M 1 1 L 2 2 Z"),
            PathResult(id=1, name="Mumbai", path=""),
        ]
        root = _parse(render_svg(paths, width=800, height=900))
        elements = root.findall("svg:g/svg:path", NS)
        assert [e.get("data-id") for e in elements] == ["0"]
        assert elements[0].get("d") == "M 1 1 L 2 2 Z"

    def test_title_and_data_name(self) -> None:
        paths = [PathResult(id=3, name="Nagpur", path="M 1 1 Z")]
        path = _parse(render_svg(paths, width=800, height=900)).find("svg:g/svg:path", NS)
        assert path.get("data-name") == "Nagpur"
        assert path.find("svg:title", NS).text == "Nagpur"

    def test_unnamed_path_has_no_title(self) -> None:
        paths = [PathResult(id=0, name="", path="M 1 1 Z")]
        path = _parse(render_svg(paths, width=800, height=900)).find("svg:g/svg:path", NS)
        assert path.get("data-name") is None
        assert path.find("svg:title", NS) is None

    def test_fills_case_insensitive(self) -> None:
        paths = [
            PathResult(id=0, name="Pune", path="M 1 1 Z"),
            PathResult(id=1, name="Thane", path="M 2 2 Z"),
        ]
        root = _parse(render_svg(paths, width=800, height=900, fills={"PUNE": "#a50f15"}))
        fills = [e.get("fill") for e in root.findall("svg:g/svg:path", NS)]
        assert fills == ["#a50f15", "#3498db"]

    def test_style_applied_to_group(self) -> None:
        style = SvgStyle(stroke="#ffffff", stroke_width=0.5, fill_opacity=1.0)
        group = _parse(render_svg([], width=8, height=9, style=style)).find("svg:g", NS)
        assert group.get("class") == "features"
        assert group.get("stroke") == "#ffffff"
        assert group.get("stroke-width") == "0.5"
        assert group.get("fill-opacity") == "1"

    def test_labels_drawn_once_per_name(self) -> None:
        paths = [
            PathResult(id=0, name="Maharashtra", path="M 1 1 Z"),
            PathResult(id=1, name="Maharashtra", path="M 2 2 Z"),
            PathResult(id=2, name="Goa", path="M 3 3 Z"),
            PathResult(id=3, name="", path="M 4 4 Z"),
        ]
        anchors = {0: (100.0, 200.5), 1: (110.0, 210.0), 2: None, 3: (5.0, 5.0)}
        root = _parse(render_svg(paths, width=800, height=900, anchors=anchors))
        texts = root.findall("svg:g[@class='labels']/svg:text", NS)
        assert [t.text for t in texts] == ["Maharashtra"]
        assert (texts[0].get("x"), texts[0].get("y")) == ("100", "200.5")

    def test_no_label_group_without_anchors(self) -> None:
        paths = [PathResult(id=0, name="Goa", path="M 1 1 Z")]
        root = _parse(render_svg(paths, width=8, height=9))
        assert root.find("svg:g[@class='labels']", NS) is None


class TestRenderMapSvg:
    """Features straight to a document."""

    def test_sample_document(
        self,
        sample_features: list[dict[str, object]],
        maharashtra_params: ProjectionParameters,
    ) -> None:
        root = _parse(
            render_map_svg(sample_features, maharashtra_params, width=800, height=900)
        )
        paths = root.findall("svg:g/svg:path", NS)
        assert [p.get("data-id") for p in paths] == ["0", "1", "2"]
        assert paths[1].get("d").count("M") == 3
        assert root.find("svg:g[@class='labels']", NS) is None

    def test_labels_with_district_names(
        self,
        sample_features: list[dict[str, object]],
        maharashtra_params: ProjectionParameters,
    ) -> None:
        root = _parse(
            render_map_svg(
                sample_features,
                maharashtra_params,
                width=800,
                height=900,
                name_keys=("district", "dtname", "NAME_2"),
                show_labels=True,
            )
        )
        texts = root.findall("svg:g[@class='labels']/svg:text", NS)
        # Mumbai has no geometry, so no anchor
        assert [t.text for t in texts] == ["Pune", "Ratnagiri", "Nagpur"]
        for text in texts:
            assert 0 <= float(text.get("x")) <= 800
            assert 0 <= float(text.get("y")) <= 900

    def test_fills_by_name(
        self,
        sample_features: list[dict[str, object]],
        maharashtra_params: ProjectionParameters,
    ) -> None:
        root = _parse(
            render_map_svg(
                sample_features,
                maharashtra_params,
                width=800,
                height=900,
                fills={"nagpur": "#16a34a"},
            )
        )
        fills = {p.get("data-name"): p.get("fill") for p in root.findall("svg:g/svg:path", NS)}
        assert fills["Nagpur"] == "#16a34a"
        assert fills["Maharashtra"] == "#3498db"

    @pytest.mark.parametrize("show_labels", [True, False])
    def test_polar_centre_renders_empty_map(
        self, sample_features: list[dict[str, object]], show_labels: bool
    ) -> None:
        params = ProjectionParameters(scale=1.0, center_lon=0.0, center_lat=-90.0)
        root = _parse(
            render_map_svg(sample_features, params, width=800, height=900, show_labels=show_labels)
        )
        assert root.findall("svg:g/svg:path", NS) == []
        assert root.find("svg:g[@class='labels']", NS) is None
