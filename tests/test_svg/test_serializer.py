"""Tests for SVG serialization."""

import xml.etree.ElementTree as ET

import pytest
from svgpathtools import parse_path

from hmatrix.engine.pipeline import build_scene
from hmatrix.models.matrix import MatrixData
from hmatrix.models.scene import PathSegment, Rotate, Translate
from hmatrix.svg.serializer import (
    format_path,
    format_points,
    format_transform,
    render_svg,
)
from tests.conftest import CLUSTERED_DOC, EDGES_DOC, SIMPLE_DOC, make_doc

NS = {"svg": "http://www.w3.org/2000/svg"}


def _render(doc: dict) -> ET.Element:
    return ET.fromstring(render_svg(build_scene(MatrixData.model_validate(doc))))


def test_format_points():
    assert format_points(((1.0, 0.5), (0.5, 1.0))) == "1,0.5 0.5,1"


def test_format_transform():
    assert format_transform(()) == ""
    assert format_transform((Translate(-0.25, 0.0),)) == "translate(-0.25,0)"
    assert (
        format_transform((Translate(-2.0, 0), Rotate(-45.0, 1.0, 1.5)))
        == "translate(-2,0) rotate(-45 1,1.5)"
    )


def test_format_path():
    segments = (
        PathSegment("M", ((0.0, 0.0),)),
        PathSegment("L", ((1.0, 0.5),)),
        PathSegment("C", ((1.0, 1.0), (2.0, 1.0), (2.0, 2.0))),
    )
    assert format_path(segments) == "M0,0L1,0.5C1,1,2,1,2,2"


def test_root_attributes():
    root = _render(SIMPLE_DOC)
    assert root.tag == "{http://www.w3.org/2000/svg}svg"
    assert root.get("width") == "1000"
    assert root.get("height") == "1000"
    assert root.get("viewBox") == "-0.25 -0.5 5.25 5.5"


def test_heatmap_group():
    root = _render(SIMPLE_DOC)
    heatmap = root.find("svg:g[@id='heatmap']", NS)
    polygons = heatmap.findall("svg:polygon", NS)
    assert len(polygons) == 3
    assert polygons[0].get("points") == "1,0.5 0.5,1 1,1.5 1.5,1"
    assert polygons[0].get("fill") == "#fff"
    assert polygons[0].get("class") == "n1 n0"
    assert polygons[0].get("transform") is None


def test_labels_and_colorbar():
    root = _render(SIMPLE_DOC)
    texts = root.findall(".//svg:text", NS)
    assert [t.text for t in texts] == ["A", "B", "C", "0", "1"]
    assert texts[0].get("class") == "l0"
    assert texts[0].get("dominant-baseline") == "central"
    assert texts[3].get("text-anchor") == "start"
    assert texts[4].get("text-anchor") == "end"
    assert texts[3].get("transform") == "translate(-2,0) rotate(-45 1,1)"


def test_cluster_transforms_emitted():
    root = _render(CLUSTERED_DOC)
    polygons = root.find("svg:g[@id='heatmap']", NS).findall("svg:polygon", NS)
    assert polygons[1].get("transform") == "translate(-0.25,-0.25)"
    label = root.find(".//svg:text[@class='l0']", NS)
    assert label.get("transform") == "translate(0,-0.5)"


def test_edge_paths():
    root = _render(EDGES_DOC)
    paths = root.findall(".//svg:path", NS)
    assert len(paths) == 3
    assert paths[0].get("class") == "line e0 e3"
    assert paths[0].get("opacity") == "1"
    path = parse_path(paths[0].get("d"))
    assert path.start == pytest.approx(complex(6.5, 0.5))
    assert path.end == pytest.approx(complex(6.5, 3.5))


def test_no_edge_group_without_edges():
    markup = render_svg(build_scene(MatrixData.model_validate(SIMPLE_DOC)))
    assert "<path" not in markup


def test_no_colorbar_with_long_palette():
    root = _render(make_doc(SIMPLE_DOC, value_colors=["#1", "#2", "#3", "#4"]))
    assert len(root.findall(".//svg:polygon", NS)) == 3
    assert len(root.findall(".//svg:text", NS)) == 3


def test_text_is_escaped():
    root = _render(make_doc(SIMPLE_DOC, labels=["<A&B>", 'say "hi"', "C"]))
    texts = root.findall(".//svg:text", NS)
    assert texts[0].text == "<A&B>"
    assert texts[1].text == 'say "hi"'


def test_styles_embedded():
    markup = render_svg(build_scene(MatrixData.model_validate(SIMPLE_DOC)))
    assert "<![CDATA[" in markup
    assert "stroke-width: 0.05;" in markup
    assert render_svg(build_scene(MatrixData.model_validate(SIMPLE_DOC)), styles={}).count(
        "<style"
    ) == 0
