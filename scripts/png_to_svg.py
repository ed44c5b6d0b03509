#!/usr/bin/env python3
"""Convert PNG images with transparency into flat-color SVG documents.

Every 4-connected region of identical color (alpha included) becomes one
filled SVG path; fully transparent pixels are left empty.

Supports two inputs:
    1. Single file: logo.png → logo.svg (file must have the raster extension)
    2. Directory: every *.png directly inside it → sibling *.svg

Usage:
    # Convert every PNG in the current directory
    python scripts/png_to_svg.py

    # Single file, keep every lattice point
    python scripts/png_to_svg.py assets/logo.png --keep-every-point

    # Directory with 8 worker processes and a JSON log file
    python scripts/png_to_svg.py assets/ --workers 8 --process-pool \\
                                 --log-file outputs/logs/png_to_svg.log --json-logs
"""
import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from raster2svg.utils import validators
from raster2svg.utils.logging_config import get_logger, install_excepthook, setup_logging, shutdown
from raster2svg.vectorize.batch import UsageError, run


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Vectorize PNG images into flat-color SVG paths",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Output:
  Each input <name>.png is written as <name>.svg in the same directory.
  Existing SVG files are overwritten atomically.

Exit status:
  0  every file converted
  1  usage error (missing path, not a PNG, bad config) or any file failed
""",
    )
    parser.add_argument(
        "input",
        type=Path,
        nargs="?",
        default=Path("."),
        help="Input file or directory (default: current directory)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="vectorize.v1 YAML config (default: built-in settings)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Number of parallel workers (default: config value or CPU count)",
    )
    parser.add_argument(
        "--process-pool",
        action="store_true",
        help="Use worker processes instead of threads",
    )
    parser.add_argument(
        "--keep-every-point",
        action="store_true",
        help="Keep collinear lattice points instead of merging straight runs",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Also write logs to this file",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Emit logs as JSON lines",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def load_settings(args: argparse.Namespace) -> validators.VectorizeV1:
    """Merge the YAML config (if any) with command-line overrides."""
    if args.config is not None:
        cfg = validators.load_vectorize_config(args.config)
    else:
        cfg = validators.default_vectorize_config()

    overrides = {}
    if args.workers is not None:
        overrides["workers"] = args.workers
    if args.process_pool:
        overrides["pool"] = "process"
    if args.keep_every_point:
        overrides["keep_every_point"] = True

    log_overrides = {}
    if args.verbose:
        log_overrides["level"] = "DEBUG"
    if args.log_file:
        log_overrides["file"] = args.log_file
    if args.json_logs:
        log_overrides["json_format"] = True
    if log_overrides:
        overrides["logging"] = cfg.logging.model_copy(update=log_overrides)

    if not overrides:
        return cfg
    # Re-validate so overrides obey the same bounds as the YAML
    return validators.VectorizeV1(**{**cfg.model_dump(), **overrides})


def main(argv=None) -> int:
    """CLI entrypoint for PNG → SVG conversion."""
    args = build_parser().parse_args(argv)

    try:
        cfg = load_settings(args)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    setup_logging(
        log_level=cfg.logging.level,
        log_file=cfg.logging.file,
        json=cfg.logging.json_format,
        color=cfg.logging.color,
        context={"app": "png_to_svg"},
    )
    install_excepthook()
    logger = get_logger("png_to_svg")
    logger.debug("Settings: %s", cfg.model_dump())

    try:
        return run(args.input, cfg)
    except UsageError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        shutdown()


if __name__ == "__main__":
    sys.exit(main())
