"""Edge joining: oriented unit edges → closed contours.

Walks a region's edge set into closed vertex loops. From the current point
the walk tries the four directions in a fixed priority order and follows the
first edge still unused. Where the boundary touches itself at a lattice
corner (two regions-worth of edges meeting diagonally) the priority order is
the only tie-breaker, so a self-touching region may come out as one pinched
loop instead of two.

Straight runs collapse to their end points unless keep_every_point is set.
Seeds are taken in sorted edge order, which keeps the output reproducible.
"""

from typing import List, Sequence, Set, Tuple

from .boundary import Edge
from .segment import Point

Contour = List[Point]

# South, east, north, west in the image frame (+Y down)
DIRECTION_PRIORITY = ((0, 1), (1, 0), (0, -1), (-1, 0))


def join_edges(edges: Set[Edge], keep_every_point: bool = False) -> List[Contour]:
    """Join unit edges into closed contours.

    Parameters
    ----------
    edges : Set[Edge]
        Oriented unit edges of one region (not modified)
    keep_every_point : bool
        Keep every lattice point instead of collapsing straight runs,
        default False

    Returns
    -------
    List[Contour]
        Closed loops, closing point omitted. Every input edge is used by
        exactly one contour.
    """
    remaining = set(edges)
    contours: List[Contour] = []

    for seed in sorted(edges):
        if seed not in remaining:
            continue
        remaining.discard(seed)

        start, current = seed
        piece = [start, current]
        last_dir = (current[0] - start[0], current[1] - start[1])

        while current != start:
            for direction in DIRECTION_PRIORITY:
                nxt = (current[0] + direction[0], current[1] + direction[1])
                if (current, nxt) in remaining:
                    break
            else:
                break

            remaining.discard((current, nxt))
            if not keep_every_point and direction == last_dir:
                piece.pop()
            piece.append(nxt)
            last_dir = direction
            current = nxt

        if len(piece) > 1 and piece[0] == piece[-1]:
            piece.pop()
            if not keep_every_point:
                piece = _drop_straight_start(piece)
        contours.append(piece)

    return contours


def _drop_straight_start(piece: Contour) -> Contour:
    """Remove the first point if it lies inside a straight run of the loop."""
    if len(piece) < 3:
        return piece
    prev, first, second = piece[-1], piece[0], piece[1]
    if _same_direction(prev, first, second):
        return piece[1:]
    return piece


def _same_direction(a: Point, b: Point, c: Point) -> bool:
    """True when a → b and b → c point the same axis-aligned way."""
    d1 = (_sign(b[0] - a[0]), _sign(b[1] - a[1]))
    d2 = (_sign(c[0] - b[0]), _sign(c[1] - b[1]))
    return d1 == d2


def _sign(v: int) -> int:
    return (v > 0) - (v < 0)


def contour_lengths(contours: Sequence[Contour]) -> Tuple[int, ...]:
    """Vertex count of each contour, for logging and statistics."""
    return tuple(len(c) for c in contours)
