"""Filesystem helpers: atomic writes, YAML loading, input listing.

SVG output goes through atomic_write_text(): the document is written to a
sibling "<name>.tmp", fsynced, then renamed over the target, so a reader (or
a crashed batch) never sees a half-written file.

Usage:
    from raster2svg.utils import fs
    fs.atomic_write_text(Path("logo.svg"), svg_text)
    raw = fs.load_yaml("configs/vectorize_v1.yaml")
    pngs = fs.list_files("assets", ".png")
"""

import os
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml


def ensure_dir(p: Union[str, Path]) -> Path:
    """mkdir -p; returns the directory as a Path."""
    p = Path(p)
    p.mkdir(parents=True, exist_ok=True)
    return p


def atomic_write_bytes(path: Union[str, Path], data: bytes, tmp_suffix: str = ".tmp") -> None:
    """Replace path with data in one rename.

    Parameters
    ----------
    path : Union[str, Path]
        Destination; parent directories are created
    data : bytes
        Complete file contents
    tmp_suffix : str
        Appended to the destination name for the staging file

    Raises
    ------
    RuntimeError
        If staging or renaming fails; the staging file is removed first
    """
    path = Path(path)
    ensure_dir(path.parent)
    staging = path.with_name(path.name + tmp_suffix)

    try:
        with open(staging, 'wb') as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        # Same directory, so the rename cannot cross filesystems
        os.replace(staging, path)
    except OSError as e:
        staging.unlink(missing_ok=True)
        raise RuntimeError(f"Failed to write {path} atomically: {e}") from e


def atomic_write_text(path: Union[str, Path], text: str, encoding: str = "utf-8") -> None:
    """Text flavour of atomic_write_bytes()."""
    atomic_write_bytes(path, text.encode(encoding))


def load_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    """Parse a YAML file with yaml.safe_load.

    Returns
    -------
    Dict[str, Any]
        Parsed document; {} for an empty file. A non-mapping document is
        returned as-is and left for the caller to reject.

    Raises
    ------
    FileNotFoundError
        If path does not exist
    yaml.YAMLError
        If the document is malformed; the message names the file
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"YAML file not found: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"Failed to parse YAML file {path}: {e}") from e
    return {} if data is None else data


def list_files(root: Union[str, Path], suffix: str) -> List[Path]:
    """Regular files directly inside root with the given suffix.

    The suffix comparison ignores case (".png" matches "LOGO.PNG").
    Subdirectories are not descended into. Result is sorted by path.
    """
    suffix = suffix.lower()
    return sorted(
        entry for entry in Path(root).iterdir()
        if entry.is_file() and entry.suffix.lower() == suffix
    )
