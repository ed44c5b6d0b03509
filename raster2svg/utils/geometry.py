"""Polygon helpers on the pixel corner lattice.

Provides:
    - Signed area of a closed contour (shoelace formula)
    - Total area of a region's contour list (holes subtract)
    - Expansion of a collapsed contour back into unit lattice edges
    - Bounding box of a point list

All coordinates are integer corner-lattice points in the image frame
(top-left origin, +Y down). Orientation follows the boundary winding used by
the tracer: loops that run counter-clockwise on screen (outer boundaries)
have positive area, hole loops negative.
"""

from typing import Iterable, List, Sequence, Set, Tuple

Point = Tuple[int, int]
Edge = Tuple[Point, Point]


def signed_area(contour: Sequence[Point]) -> float:
    """Signed area enclosed by a closed contour.

    Parameters
    ----------
    contour : Sequence[Point]
        Closed loop, closing point omitted

    Returns
    -------
    float
        Positive for screen counter-clockwise loops, negative for clockwise,
        0.0 for fewer than three points

    Notes
    -----
    Shoelace formula with the y axis pointing down:
    A = ½ Σ (x[i+1]·y[i] − x[i]·y[i+1])
    """
    n = len(contour)
    if n < 3:
        return 0.0
    total = 0
    for i in range(n):
        x0, y0 = contour[i]
        x1, y1 = contour[(i + 1) % n]
        total += x1 * y0 - x0 * y1
    return total / 2.0


def contours_area(contours: Iterable[Sequence[Point]]) -> float:
    """Sum of signed areas; equals the pixel count of a traced region."""
    return sum(signed_area(c) for c in contours)


def contour_edges(contour: Sequence[Point]) -> List[Edge]:
    """Expand a closed contour into its unit lattice edges.

    Parameters
    ----------
    contour : Sequence[Point]
        Closed loop of axis-aligned segments, closing point omitted.
        Segments may span several lattice units.

    Returns
    -------
    List[Edge]
        Unit edges in walk order

    Raises
    ------
    ValueError
        If two consecutive points are not axis-aligned
    """
    edges = []
    n = len(contour)
    for i in range(n):
        x0, y0 = contour[i]
        x1, y1 = contour[(i + 1) % n]
        if x0 != x1 and y0 != y1:
            raise ValueError(f"Segment {contour[i]} → {contour[(i + 1) % n]} is not axis-aligned")
        steps = abs(x1 - x0) + abs(y1 - y0)
        if steps == 0:
            continue
        dx = (x1 - x0) // steps
        dy = (y1 - y0) // steps
        x, y = x0, y0
        for _ in range(steps):
            edges.append(((x, y), (x + dx, y + dy)))
            x, y = x + dx, y + dy
    return edges


def contours_edge_set(contours: Iterable[Sequence[Point]]) -> Set[Edge]:
    """Union of contour_edges() over several contours."""
    result: Set[Edge] = set()
    for contour in contours:
        result.update(contour_edges(contour))
    return result


def polyline_bbox(points: Iterable[Point]) -> Tuple[int, int, int, int]:
    """Bounding box (x_min, y_min, x_max, y_max) of a point list.

    Raises
    ------
    ValueError
        If points is empty
    """
    points = list(points)
    if not points:
        raise ValueError("Cannot compute bounding box of an empty point list")
    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    return min(xs), min(ys), max(xs), max(ys)
