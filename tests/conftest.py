"""Shared test fixtures: synthetic pixel grids and PNG writers."""

from pathlib import Path
from typing import Callable, Dict, Sequence

import numpy as np
import pytest
from PIL import Image

CLEAR = (0, 0, 0, 0)
RED = (255, 0, 0, 255)
GREEN = (0, 255, 0, 255)
BLUE = (0, 0, 255, 255)
HALF_RED = (255, 0, 0, 128)


def grid_from_rows(rows: Sequence[str], palette: Dict[str, tuple]) -> np.ndarray:
    """Build an (H, W, 4) grid from ASCII rows, one character per pixel."""
    height = len(rows)
    width = len(rows[0]) if rows else 0
    grid = np.zeros((height, width, 4), dtype=np.uint8)
    for y, row in enumerate(rows):
        assert len(row) == width, "ragged rows"
        for x, ch in enumerate(row):
            grid[y, x] = palette[ch]
    return grid


@pytest.fixture
def palette() -> Dict[str, tuple]:
    """Character → RGBA mapping used by grid_from_rows()."""
    return {".": CLEAR, "R": RED, "G": GREEN, "B": BLUE, "h": HALF_RED}


@pytest.fixture
def make_grid(palette) -> Callable[[Sequence[str]], np.ndarray]:
    """Factory: ASCII rows → pixel grid."""
    def _make(rows: Sequence[str]) -> np.ndarray:
        return grid_from_rows(rows, palette)
    return _make


@pytest.fixture
def random_grid() -> np.ndarray:
    """Seeded 24×17 grid drawn from a small palette (transparent included)."""
    rng = np.random.default_rng(1234)
    colors = np.array([CLEAR, RED, GREEN, BLUE, HALF_RED], dtype=np.uint8)
    idx = rng.integers(0, len(colors), size=(17, 24))
    return colors[idx]


@pytest.fixture
def write_png(tmp_path) -> Callable[..., Path]:
    """Factory: save a grid as an RGBA PNG under tmp_path."""
    def _write(grid: np.ndarray, name: str = "image.png", directory: Path = None) -> Path:
        directory = directory or tmp_path
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / name
        Image.fromarray(np.asarray(grid, dtype=np.uint8)).save(path)
        return path
    return _write
