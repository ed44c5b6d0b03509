"""raster2svg: flat-color raster to SVG vectorization.

This package converts images with transparency into SVG documents made of
flat-color filled paths, one path per connected same-color region.

Architecture layers (strict one-way dependency):
    scripts/ → raster2svg/vectorize/ → raster2svg/utils/

Key invariants:
    - Regions are 4-connected and color-exact (alpha included)
    - Fully transparent pixels (alpha == 0) are never traced
    - Geometry lives on the pixel corner lattice (image frame, +Y down)
    - Output paths are axis-aligned polylines, no curve fitting
    - YAML-only configs
"""

__version__ = "1.0.0"
