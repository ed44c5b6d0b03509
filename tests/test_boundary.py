"""Test boundary edge extraction.

Tests for raster2svg.vectorize.boundary:
    - Single pixel: four oriented edges around the unit square
    - Shared sides between member pixels produce no edges
    - Same-color pixel of another region still bounds the region
    - Holes contribute inner edges with opposite winding
    - Every lattice point is balanced (in-degree == out-degree)
"""

from collections import Counter

from raster2svg.vectorize.boundary import region_edges
from raster2svg.vectorize.segment import Region, iter_regions, segment_regions

RED = (255, 0, 0, 255)


def test_single_pixel_edges():
    edges = region_edges(Region(RED, frozenset({(0, 0)})))
    assert edges == {
        ((0, 0), (0, 1)),
        ((0, 1), (1, 1)),
        ((1, 1), (1, 0)),
        ((1, 0), (0, 0)),
    }


def test_single_pixel_offset():
    edges = region_edges(Region(RED, frozenset({(3, 2)})))
    assert ((3, 2), (3, 3)) in edges
    assert ((4, 2), (3, 2)) in edges
    assert len(edges) == 4


def test_horizontal_pair_drops_shared_side():
    edges = region_edges(Region(RED, frozenset({(0, 0), (1, 0)})))
    assert len(edges) == 6
    assert ((1, 1), (1, 0)) not in edges
    assert ((1, 0), (1, 1)) not in edges


def test_same_color_other_region_is_outside(make_grid, palette):
    grid = make_grid(["R.", ".R"])
    first, second = segment_regions(grid)[palette["R"]]
    assert len(region_edges(first)) == 4
    assert len(region_edges(second)) == 4
    # Both squares meet at corner (1, 1) but keep separate edge sets
    assert region_edges(first).isdisjoint(region_edges(second))


def test_ring_has_inner_edges(make_grid, palette):
    grid = make_grid(["RRR", "R.R", "RRR"])
    (ring,) = segment_regions(grid)[palette["R"]]
    edges = region_edges(ring)
    assert len(edges) == 12 + 4
    # Hole loop runs opposite to the outer loop
    assert ((1, 1), (2, 1)) in edges
    assert ((2, 1), (2, 2)) in edges


def test_vertices_balanced(random_grid):
    for region in iter_regions(segment_regions(random_grid)):
        edges = region_edges(region)
        out_deg = Counter(a for a, _ in edges)
        in_deg = Counter(b for _, b in edges)
        assert out_deg == in_deg
        for (x0, y0), (x1, y1) in edges:
            assert abs(x1 - x0) + abs(y1 - y0) == 1
