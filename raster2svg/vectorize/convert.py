"""Pixel grid (or image file) → SVG text.

Composes the pipeline stages:
    grid → segment_regions → region_edges → join_edges → render_svg

Public API:
    vectorize_grid(grid, keep_every_point=False) → VectorizedImage
    rgba_to_svg(grid, keep_every_point=False) → str
    convert_file_to_svg(path, keep_every_point=False) → str

Conversions are pure and independent: a grid in, a string out, nothing cached
between calls, so callers may run them concurrently.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple, Union

import numpy as np

from ..utils import geometry
from .boundary import region_edges
from .contours import Contour, contour_lengths, join_edges
from .pixels import Color, grid_size, load_rgba, to_pixel_grid
from .segment import Region, iter_regions, segment_regions
from .svg_writer import render_svg

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TracedRegion:
    """A region together with its traced outline."""
    region: Region
    contours: List[Contour]

    @property
    def color(self) -> Color:
        return self.region.color

    @property
    def area(self) -> float:
        """Signed area enclosed by the contours (equals the pixel count)."""
        return geometry.contours_area(self.contours)


@dataclass
class VectorizedImage:
    """Intermediate result of one conversion, before serialization."""
    width: int
    height: int
    regions: List[TracedRegion] = field(default_factory=list)

    @property
    def contour_count(self) -> int:
        return sum(len(r.contours) for r in self.regions)

    @property
    def vertex_count(self) -> int:
        return sum(len(c) for r in self.regions for c in r.contours)

    @property
    def longest_contour(self) -> int:
        """Vertex count of the largest contour, 0 when nothing was traced."""
        return max(
            (n for r in self.regions for n in contour_lengths(r.contours)),
            default=0,
        )

    @property
    def bbox(self) -> Optional[Tuple[int, int, int, int]]:
        """Lattice bounding box of all traced vertices, None for an empty trace."""
        vertices = [p for r in self.regions for c in r.contours for p in c]
        if not vertices:
            return None
        return geometry.polyline_bbox(vertices)

    def to_svg(self) -> str:
        """Serialize as an SVG 1.1 document."""
        return render_svg(
            self.width,
            self.height,
            ((r.color, r.contours) for r in self.regions),
        )


def vectorize_grid(grid: np.ndarray, keep_every_point: bool = False) -> VectorizedImage:
    """Trace every region of a pixel grid.

    Parameters
    ----------
    grid : np.ndarray
        (H, W, 4) RGBA or (H, W, 3) RGB, uint8-compatible
    keep_every_point : bool
        Keep collinear lattice points in the contours, default False

    Returns
    -------
    VectorizedImage
        Canvas size plus one TracedRegion per region, in emission order
    """
    grid = to_pixel_grid(grid)
    width, height = grid_size(grid)

    segmented = segment_regions(grid)
    traced = [
        TracedRegion(region, join_edges(region_edges(region), keep_every_point))
        for region in iter_regions(segmented)
    ]

    result = VectorizedImage(width, height, traced)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Traced %dx%d grid: %d colors, %d regions, %d contours, %d vertices "
            "(longest contour %d, bbox %s)",
            width, height, len(segmented), len(traced),
            result.contour_count, result.vertex_count,
            result.longest_contour, result.bbox,
        )
    return result


def rgba_to_svg(grid: np.ndarray, keep_every_point: bool = False) -> str:
    """Convert a pixel grid to SVG text (see vectorize_grid)."""
    return vectorize_grid(grid, keep_every_point).to_svg()


def convert_file_to_svg(path: Union[str, Path], keep_every_point: bool = False) -> str:
    """Decode an image file and convert it to SVG text.

    Raises
    ------
    ImageDecodeError
        If the image cannot be decoded
    """
    return rgba_to_svg(load_rgba(path), keep_every_point)
