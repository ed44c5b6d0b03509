"""Test SVG document emission.

Tests for raster2svg.vectorize.svg_writer:
    - Header carries width/height, XML declaration and SVG 1.1 DOCTYPE
    - Path data: M/L/Z per contour, empty contours skipped
    - Style: rgb fill, alpha/255 opacity, no stroke
    - Shapes with no contours emit nothing
    - Output parses as XML
"""

import xml.etree.ElementTree as ET

from raster2svg.vectorize import svg_writer

SVG_NS = "{http://www.w3.org/2000/svg}"


def test_header():
    header = svg_writer.svg_header(12, 34)
    assert header.startswith('<?xml version="1.0" encoding="UTF-8" standalone="no"?>\n')
    assert '<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.1//EN"' in header
    assert "http://www.w3.org/Graphics/SVG/1.1/DTD/svg11.dtd" in header
    assert '<svg width="12" height="34"' in header
    assert 'version="1.1"' in header


def test_path_data_multiple_contours():
    d = svg_writer.path_data([
        [(0, 0), (0, 3), (3, 3), (3, 0)],
        [(1, 1), (2, 1), (2, 2), (1, 2)],
    ])
    assert d == (
        " M 0,0 L 0,3 L 3,3 L 3,0 Z"
        " M 1,1 L 2,1 L 2,2 L 1,2 Z"
    )


def test_path_data_skips_empty_contours():
    assert svg_writer.path_data([[], [(0, 0), (0, 1), (1, 1), (1, 0)], []]) == (
        " M 0,0 L 0,1 L 1,1 L 1,0 Z"
    )
    assert svg_writer.path_data([]) == ""


def test_format_opacity():
    assert svg_writer.format_opacity(255) == "1"
    assert svg_writer.format_opacity(128) == "0.501961"
    assert svg_writer.format_opacity(51) == "0.2"


def test_fill_style():
    assert svg_writer.fill_style((10, 20, 30, 255)) == (
        "fill:rgb(10,20,30); fill-opacity:1; stroke:none;"
    )


def test_render_path_empty():
    assert svg_writer.render_path((1, 2, 3, 255), []) == ""
    assert svg_writer.render_path((1, 2, 3, 255), [[]]) == ""


def test_render_svg_empty_document():
    doc = svg_writer.render_svg(0, 0, [])
    assert doc == svg_writer.svg_header(0, 0) + "</svg>\n"


def test_render_svg_one_path_per_shape():
    square = [(0, 0), (0, 1), (1, 1), (1, 0)]
    doc = svg_writer.render_svg(2, 1, [
        ((255, 0, 0, 255), [square]),
        ((255, 0, 0, 255), [[(1, 0), (1, 1), (2, 1), (2, 0)]]),
        ((0, 0, 255, 128), []),
    ])
    root = ET.fromstring(doc.encode("utf-8"))
    assert root.tag == f"{SVG_NS}svg"
    assert root.get("width") == "2"
    assert root.get("height") == "1"

    paths = root.findall(f"{SVG_NS}path")
    assert len(paths) == 2
    assert paths[0].get("d") == " M 0,0 L 0,1 L 1,1 L 1,0 Z"
    assert paths[0].get("style") == "fill:rgb(255,0,0); fill-opacity:1; stroke:none;"
    assert doc.endswith("</svg>\n")
