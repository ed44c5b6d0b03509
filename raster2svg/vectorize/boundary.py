"""Boundary edge extraction on the corner lattice.

Every side of a member pixel whose neighbor (in that direction) is not a
member of the same region becomes one unit edge. Membership is region
identity: a same-color pixel of a different connected region still counts as
outside, and so does anything beyond the grid border.

Edges are oriented so the region lies on the same side of every edge,
giving loops that run counter-clockwise on screen around filled area and
clockwise around holes.
"""

from typing import Set, Tuple

from .segment import Point, Region

Edge = Tuple[Point, Point]

# neighbor offset → (edge start offset, edge end offset) relative to pixel (x, y)
SIDE_EDGES = (
    ((-1, 0), ((0, 0), (0, 1))),   # west side, walks down
    ((0, 1), ((0, 1), (1, 1))),    # south side, walks right
    ((1, 0), ((1, 1), (1, 0))),    # east side, walks up
    ((0, -1), ((1, 0), (0, 0))),   # north side, walks left
)


def region_edges(region: Region) -> Set[Edge]:
    """Compute the unit boundary edges of one region.

    Parameters
    ----------
    region : Region
        Region whose pixel set defines membership

    Returns
    -------
    Set[Edge]
        Oriented edges ((x0, y0), (x1, y1)), endpoints one unit apart
    """
    members = region.pixels
    edges: Set[Edge] = set()
    for x, y in members:
        for (dx, dy), ((sx, sy), (ex, ey)) in SIDE_EDGES:
            if (x + dx, y + dy) not in members:
                edges.add(((x + sx, y + sy), (x + ex, y + ey)))
    return edges
