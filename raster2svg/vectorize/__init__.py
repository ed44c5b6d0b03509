"""Raster → SVG vectorization pipeline.

Modules:
    - pixels: Pixel grid type, image decoding (Pillow) and array coercion
    - segment: Flood fill of opaque pixels into 4-connected same-color regions
    - boundary: Unit boundary edges of a region on the corner lattice
    - contours: Edge set → closed vertex loops with collinear collapse
    - svg_writer: SVG 1.1 document emission, one path per region
    - convert: Composition of the stages above (grid or file → SVG text)
    - batch: File enumeration, worker pool dispatch, per-file failure isolation

Workflow:
    1. Decode PNG → (H, W, 4) uint8 grid
    2. Segment regions (color, pixel set)
    3. Extract each region's edges
    4. Join edges into contours
    5. Emit SVG text and write it next to the source image

Stages 2–5 are pure functions of the grid; no state survives a conversion.
"""
