"""Region segmentation: flood fill of opaque pixels.

Partitions the non-transparent pixels of a grid into maximal 4-connected
regions of exactly one color (alpha included). Fully transparent pixels
(alpha == 0) belong to no region.

Scan order is x outer, y inner; it only decides the order of regions in the
result, never their membership. Each pixel is marked visited when it is
enqueued, so the whole pass is O(W × H).
"""

from collections import deque
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterator, List, Tuple

import numpy as np

from .pixels import Color, grid_size, pack_colors, unpack_color

Point = Tuple[int, int]

NEIGHBOR_OFFSETS = ((1, 0), (0, 1), (-1, 0), (0, -1))


@dataclass(frozen=True)
class Region:
    """One connected same-color piece of the image.

    Attributes
    ----------
    color : Color
        (r, g, b, a), shared by every member pixel, a > 0
    pixels : FrozenSet[Point]
        Member pixel coordinates (x, y)
    """
    color: Color
    pixels: FrozenSet[Point]

    def __len__(self) -> int:
        return len(self.pixels)

    def __contains__(self, point) -> bool:
        return point in self.pixels


def segment_regions(grid: np.ndarray) -> Dict[Color, List[Region]]:
    """Group opaque pixels into 4-connected same-color regions.

    Parameters
    ----------
    grid : np.ndarray
        Pixel grid, shape (H, W, 4), dtype uint8

    Returns
    -------
    Dict[Color, List[Region]]
        Regions keyed by color, colors in first-seen scan order, regions of
        one color in scan order. Empty for zero-sized or fully transparent
        grids.
    """
    width, height = grid_size(grid)
    regions: Dict[Color, List[Region]] = {}
    if width == 0 or height == 0:
        return regions

    # Nested Python lists index far faster than numpy scalars in the fill loop
    packed = pack_colors(grid).tolist()
    visited = [[False] * width for _ in range(height)]

    for x in range(width):
        for y in range(height):
            if visited[y][x]:
                continue
            key = packed[y][x]
            if key & 0xFF == 0:
                continue

            visited[y][x] = True
            queue = deque([(x, y)])
            piece = []
            while queue:
                px, py = queue.popleft()
                piece.append((px, py))
                for dx, dy in NEIGHBOR_OFFSETS:
                    nx, ny = px + dx, py + dy
                    if nx < 0 or nx >= width or ny < 0 or ny >= height:
                        continue
                    if visited[ny][nx] or packed[ny][nx] != key:
                        continue
                    visited[ny][nx] = True
                    queue.append((nx, ny))

            color = unpack_color(key)
            regions.setdefault(color, []).append(Region(color, frozenset(piece)))

    return regions


def iter_regions(regions: Dict[Color, List[Region]]) -> Iterator[Region]:
    """Yield every region of a segmentation in emission order."""
    for pieces in regions.values():
        yield from pieces
