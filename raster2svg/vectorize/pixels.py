"""Pixel grid type and image decoding.

A pixel grid is a numpy array of shape (H, W, 4), dtype uint8, channels
(R, G, B, A). Indexing is grid[y, x]. The pipeline never mutates a grid.

Decoding uses Pillow; every mode (P, LA, RGB, ...) is converted to RGBA so
palette transparency and missing alpha channels behave uniformly.
"""

from pathlib import Path
from typing import Tuple, Union

import numpy as np
from PIL import Image

Color = Tuple[int, int, int, int]


class ImageDecodeError(RuntimeError):
    """Raised when an input image cannot be opened or decoded."""

    pass


def load_rgba(path: Union[str, Path]) -> np.ndarray:
    """Decode an image file into an RGBA pixel grid.

    Parameters
    ----------
    path : Union[str, Path]
        Path to image file (any format Pillow reads)

    Returns
    -------
    np.ndarray
        Pixel grid, shape (H, W, 4), dtype uint8

    Raises
    ------
    ImageDecodeError
        If the file is missing, unreadable or not a valid image
    """
    path = Path(path)
    try:
        with Image.open(path) as img:
            rgba = img.convert('RGBA')
            return np.array(rgba, dtype=np.uint8)
    except (OSError, ValueError, EOFError, SyntaxError, Image.DecompressionBombError) as e:
        raise ImageDecodeError(f"Failed to decode image {path}: {e}") from e


def to_pixel_grid(arr: np.ndarray) -> np.ndarray:
    """Coerce an array into a read-only (H, W, 4) uint8 pixel grid.

    Parameters
    ----------
    arr : np.ndarray
        (H, W, 4) RGBA or (H, W, 3) RGB; RGB gets an opaque alpha channel.
        Integer values outside [0, 255] are rejected.

    Returns
    -------
    np.ndarray
        Grid view (or copy) flagged non-writeable

    Raises
    ------
    ValueError
        If the shape or value range is not a pixel grid
    """
    arr = np.asarray(arr)
    if arr.ndim != 3 or arr.shape[2] not in (3, 4):
        raise ValueError(f"Expected pixel grid of shape (H, W, 4) or (H, W, 3), got {arr.shape}")

    if arr.dtype != np.uint8:
        if arr.size and (arr.min() < 0 or arr.max() > 255):
            raise ValueError("Pixel grid values must lie in [0, 255]")
        arr = arr.astype(np.uint8)

    if arr.shape[2] == 3:
        alpha = np.full(arr.shape[:2] + (1,), 255, dtype=np.uint8)
        arr = np.concatenate([arr, alpha], axis=2)

    grid = arr.view()
    grid.flags.writeable = False
    return grid


def grid_size(grid: np.ndarray) -> Tuple[int, int]:
    """Return (width, height) of a pixel grid."""
    return int(grid.shape[1]), int(grid.shape[0])


def pack_colors(grid: np.ndarray) -> np.ndarray:
    """Pack RGBA channels into one uint32 per pixel (R in the high byte).

    Two pixels have equal packed values iff all four channels match.
    """
    g = grid.astype(np.uint32)
    return (g[..., 0] << 24) | (g[..., 1] << 16) | (g[..., 2] << 8) | g[..., 3]


def unpack_color(packed: int) -> Color:
    """Inverse of pack_colors() for a single value."""
    return (
        (packed >> 24) & 0xFF,
        (packed >> 16) & 0xFF,
        (packed >> 8) & 0xFF,
        packed & 0xFF,
    )
