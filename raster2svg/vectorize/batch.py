"""Batch conversion: input enumeration, worker pool, per-file isolation.

Input is either a single image (must carry the raster extension) or a
directory, in which case every regular file directly inside it with the
raster extension is converted. Each output is written next to its source
with the vector extension substituted (logo.png → logo.svg).

Failures stay local to their file: a decode error or a failed write is
logged and counted, and the remaining files still convert. Only usage errors
(missing path, wrong extension) stop a run before any work starts.

Public API:
    collect_input_files(input_path, raster_ext=".png") → List[Path]
    output_path_for(path, vector_ext=".svg") → Path
    convert_one(path, keep_every_point=False, vector_ext=".svg") → FileResult
    convert_batch(files, workers=None, pool="thread", ...) → BatchStats
    run(input_path, cfg) → exit code
"""

import contextvars
import logging
import os
from concurrent.futures import Executor, Future, ProcessPoolExecutor, ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from ..utils import fs
from ..utils.logging_config import pop_context, push_context
from ..utils.validators import VectorizeV1
from .convert import convert_file_to_svg
from .pixels import ImageDecodeError

logger = logging.getLogger(__name__)


class UsageError(ValueError):
    """Raised when the requested input cannot be processed at all."""

    pass


@dataclass(frozen=True)
class FileResult:
    """Outcome of converting one file."""
    source: Path
    output: Path
    ok: bool
    error: Optional[str] = None


@dataclass
class BatchStats:
    """Summary of a batch run."""
    total: int = 0
    succeeded: int = 0
    failed: int = 0
    failures: List[Tuple[Path, str]] = field(default_factory=list)

    def record(self, result: FileResult) -> None:
        self.total += 1
        if result.ok:
            self.succeeded += 1
        else:
            self.failed += 1
            self.failures.append((result.source, result.error or "unknown error"))


def collect_input_files(
    input_path: Union[str, Path],
    raster_ext: str = ".png"
) -> List[Path]:
    """Resolve the input argument into the list of files to convert.

    Parameters
    ----------
    input_path : Union[str, Path]
        A raster file or a directory
    raster_ext : str
        Expected input extension including the dot (case-insensitive)

    Returns
    -------
    List[Path]
        Files to convert, sorted by name; may be empty for a directory

    Raises
    ------
    UsageError
        If the path does not exist, or is a file without raster_ext
    """
    input_path = Path(input_path)
    if not input_path.exists():
        raise UsageError(f"Path does not exist: {input_path}")

    if input_path.is_file():
        if input_path.suffix.lower() != raster_ext.lower():
            raise UsageError(
                f"The provided file is not a {raster_ext.lstrip('.').upper()}: {input_path}"
            )
        return [input_path]

    if input_path.is_dir():
        logger.info("Processing directory: %s", input_path)
        return fs.list_files(input_path, raster_ext)

    raise UsageError(f"Path is neither a file nor a directory: {input_path}")


def output_path_for(path: Union[str, Path], vector_ext: str = ".svg") -> Path:
    """Sibling output path with the vector extension substituted."""
    return Path(path).with_suffix(vector_ext)


def convert_one(
    path: Union[str, Path],
    keep_every_point: bool = False,
    vector_ext: str = ".svg"
) -> FileResult:
    """Convert one image and write its SVG next to it.

    Never raises for decode or write failures; they come back as a failed
    FileResult so one bad file cannot abort a batch.
    """
    path = Path(path)
    output = output_path_for(path, vector_ext)

    push_context(file=path.name)
    try:
        logger.debug("Converting %s", path)
        try:
            svg = convert_file_to_svg(path, keep_every_point)
        except ImageDecodeError as e:
            logger.error("Failed to convert %s: %s", path, e)
            return FileResult(path, output, ok=False, error=str(e))

        try:
            fs.atomic_write_text(output, svg)
        except RuntimeError as e:
            logger.error("Failed to write %s: %s", output, e)
            return FileResult(path, output, ok=False, error=str(e))

        logger.info("Success: %s", output.name)
        return FileResult(path, output, ok=True)
    finally:
        pop_context(keys=["file"])


def _make_executor(pool: str, workers: int) -> Executor:
    if pool == "thread":
        return ThreadPoolExecutor(max_workers=workers, thread_name_prefix="raster2svg")
    if pool == "process":
        return ProcessPoolExecutor(max_workers=workers)
    raise ValueError(f"Unknown pool kind: {pool}. Use 'thread' or 'process'.")


def _submit(executor: Executor, pool: str, fn, *args) -> Future:
    """Submit fn(*args); thread tasks run in a copy of the caller's context.

    Pool threads start with empty contextvars, so without the copy the
    logging fields pushed by the caller (app=...) are missing. A Context
    cannot be pickled; process tasks are submitted as-is.
    """
    if pool == "thread":
        return executor.submit(contextvars.copy_context().run, fn, *args)
    return executor.submit(fn, *args)


def convert_batch(
    files: Sequence[Union[str, Path]],
    *,
    workers: Optional[int] = None,
    pool: str = "thread",
    keep_every_point: bool = False,
    vector_ext: str = ".svg"
) -> BatchStats:
    """Convert many files on a worker pool.

    Parameters
    ----------
    files : Sequence[Union[str, Path]]
        Input images
    workers : int, optional
        Pool size; None uses os.cpu_count()
    pool : str
        "thread" or "process"
    keep_every_point : bool
        Forwarded to the contour joiner
    vector_ext : str
        Output extension including the dot

    Returns
    -------
    BatchStats
        Counts and (source, error) pairs; results recorded in input order
    """
    stats = BatchStats()
    if not files:
        logger.warning("No input files to convert")
        return stats

    workers = min(workers or os.cpu_count() or 1, len(files))
    logger.info("Converting %d file(s) with %d %s worker(s)", len(files), workers, pool)

    with _make_executor(pool, workers) as executor:
        futures = [
            _submit(executor, pool, convert_one, Path(f), keep_every_point, vector_ext)
            for f in files
        ]
        for f, future in zip(files, futures):
            try:
                result = future.result()
            except Exception as e:
                # Anything convert_one did not anticipate (e.g. a crashed worker process)
                logger.exception("Unexpected failure converting %s", f)
                result = FileResult(Path(f), output_path_for(f, vector_ext), ok=False, error=repr(e))
            stats.record(result)

    logger.info(
        "Converted %d/%d file(s), %d failed",
        stats.succeeded, stats.total, stats.failed,
    )
    return stats


def run(input_path: Union[str, Path], cfg: VectorizeV1) -> int:
    """Collect inputs and convert them according to cfg.

    Returns
    -------
    int
        0 when every file converted, 1 when any file failed

    Raises
    ------
    UsageError
        Propagated from collect_input_files() before any conversion starts
    """
    files = collect_input_files(input_path, cfg.raster_ext)
    stats = convert_batch(
        files,
        workers=cfg.workers,
        pool=cfg.pool,
        keep_every_point=cfg.keep_every_point,
        vector_ext=cfg.vector_ext,
    )
    return 1 if stats.failed > 0 else 0
