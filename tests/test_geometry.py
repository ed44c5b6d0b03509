"""Test corner-lattice polygon helpers.

Tests for raster2svg.utils.geometry:
    - signed_area: orientation sign, degenerate inputs
    - contours_area: outer minus holes
    - contour_edges: expansion of collapsed segments, rejection of diagonals
    - polyline_bbox
"""

import pytest

from raster2svg.utils import geometry

SQUARE_CCW = [(0, 0), (0, 1), (1, 1), (1, 0)]


def test_signed_area_orientation():
    assert geometry.signed_area(SQUARE_CCW) == 1.0
    assert geometry.signed_area(list(reversed(SQUARE_CCW))) == -1.0


def test_signed_area_degenerate():
    assert geometry.signed_area([]) == 0.0
    assert geometry.signed_area([(0, 0), (3, 0)]) == 0.0


def test_signed_area_rectangle():
    assert geometry.signed_area([(2, 1), (2, 4), (7, 4), (7, 1)]) == 15.0


def test_contours_area_with_hole():
    outer = [(0, 0), (0, 3), (3, 3), (3, 0)]
    hole = [(1, 1), (2, 1), (2, 2), (1, 2)]
    assert geometry.contours_area([outer, hole]) == 8.0


def test_contour_edges_expands_runs():
    edges = geometry.contour_edges([(0, 0), (0, 2), (1, 2), (1, 0)])
    assert edges == [
        ((0, 0), (0, 1)), ((0, 1), (0, 2)),
        ((0, 2), (1, 2)),
        ((1, 2), (1, 1)), ((1, 1), (1, 0)),
        ((1, 0), (0, 0)),
    ]


def test_contour_edges_rejects_diagonal():
    with pytest.raises(ValueError, match="axis-aligned"):
        geometry.contour_edges([(0, 0), (1, 1), (0, 1)])


def test_contours_edge_set():
    edges = geometry.contours_edge_set([SQUARE_CCW, [(5, 5), (5, 6), (6, 6), (6, 5)]])
    assert len(edges) == 8


def test_polyline_bbox():
    assert geometry.polyline_bbox([(3, 4), (1, 9), (2, 0)]) == (1, 0, 3, 9)
    with pytest.raises(ValueError):
        geometry.polyline_bbox([])
