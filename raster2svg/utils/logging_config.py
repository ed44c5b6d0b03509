"""Logging setup shared by the png_to_svg script and the batch runner.

Every record is rendered either as a human line or as one JSON object, with
the fields of the current logging context (see push_context) merged in. The
batch runner tags each record with the file being converted, so interleaved
output from parallel workers stays attributable.

Public API:
    setup_logging(log_level="INFO", log_file=None, *, json=False, ...)
    get_logger(name)
    push_context(**fields) / pop_context(keys=None) / get_context()
    install_excepthook()
    shutdown()

Line formats:
    human  2025-10-28T13:45:12.345Z | INFO     | app=png_to_svg file=logo.png | Success: logo.svg
    json   {"t": "2025-10-28T13:45:12.345000+00:00", "lvl": "INFO", "name": "...", "pid": 4242,
            "msg": "Success: logo.svg", "app": "png_to_svg", "file": "logo.png"}

Calling setup_logging() again replaces the handlers it installed before and
leaves any other root handlers (pytest's, an embedding application's) alone.
"""

import contextvars
import json
import logging
import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

_fields: contextvars.ContextVar = contextvars.ContextVar('raster2svg_log_fields', default={})

_owned_handlers: List[logging.Handler] = []

LEVEL_COLORS = {
    'DEBUG': '\033[36m',
    'INFO': '\033[32m',
    'WARNING': '\033[33m',
    'ERROR': '\033[31m',
    'CRITICAL': '\033[35m',
}
COLOR_RESET = '\033[0m'

FORMAT_MODES = ("human", "json")

# Held at WARNING; Pillow logs each image plugin it tries at DEBUG
QUIET_LOGGERS = ("PIL",)


class ContextFormatter(logging.Formatter):
    """Render records with the active context fields.

    Parameters
    ----------
    fmt_mode : str
        "human" for pipe-separated lines, "json" for one object per line
    use_color : bool
        Color the level name; only honored when stderr is a terminal

    Timestamps are always UTC.
    """

    def __init__(self, fmt_mode: str = "human", use_color: bool = True):
        super().__init__()
        if fmt_mode not in FORMAT_MODES:
            raise ValueError(f"Unknown format mode: {fmt_mode}. Use 'human' or 'json'.")
        self.fmt_mode = fmt_mode
        self.use_color = use_color and sys.stderr.isatty()

    def format(self, record: logging.LogRecord) -> str:
        fields = _fields.get()
        when = datetime.fromtimestamp(record.created, tz=timezone.utc)

        if self.fmt_mode == "json":
            payload = {
                't': when.isoformat(),
                'lvl': record.levelname,
                'name': record.name,
                'pid': os.getpid(),
                'msg': record.getMessage(),
                **fields,
            }
            if record.exc_info:
                payload['exc'] = self.formatException(record.exc_info)
            return json.dumps(payload, default=str)

        level = f"{record.levelname:<8}"
        if self.use_color:
            level = LEVEL_COLORS.get(record.levelname, '') + level + COLOR_RESET
        stamp = when.strftime('%Y-%m-%dT%H:%M:%S.') + f"{when.microsecond // 1000:03d}Z"

        columns = [stamp, level]
        if fields:
            columns.append(' '.join(f"{key}={value}" for key, value in fields.items()))
        columns.append(record.getMessage())
        text = ' | '.join(columns)

        if record.exc_info:
            text = f"{text}\n{self.formatException(record.exc_info)}"
        return text


def _create_file_handler(log_file: str, json_format: bool) -> logging.Handler:
    """UTF-8 file handler, uncolored; parent directories are created."""
    Path(log_file).parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file, encoding='utf-8')
    handler.setFormatter(ContextFormatter("json" if json_format else "human", use_color=False))
    return handler


def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    *,
    json: bool = False,
    color: bool = True,
    to_stderr: bool = True,
    context: Optional[Dict[str, Any]] = None,
) -> List[logging.Handler]:
    """Install console and file handlers on the root logger.

    Also routes warnings.warn() through logging and holds QUIET_LOGGERS at
    WARNING.

    Parameters
    ----------
    log_level : str
        Root level name, case-insensitive
    log_file : str, optional
        Also write records here; parent directories are created
    json : bool
        JSON lines instead of human lines, on every handler
    color : bool
        Colored level names on a terminal console
    to_stderr : bool
        Install the console handler, default True
    context : dict, optional
        Fields pushed onto the logging context, e.g. {"app": "png_to_svg"}

    Returns
    -------
    List[logging.Handler]
        The handlers now installed
    """
    root = logging.getLogger()
    while _owned_handlers:
        stale = _owned_handlers.pop()
        root.removeHandler(stale)
        stale.close()

    root.setLevel(getattr(logging, log_level.upper()))

    if to_stderr:
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(ContextFormatter("json" if json else "human", color))
        _owned_handlers.append(console)
    if log_file:
        _owned_handlers.append(_create_file_handler(log_file, json))
    for handler in _owned_handlers:
        root.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.captureWarnings(True)
    if context:
        push_context(**context)

    return list(_owned_handlers)


def get_logger(name: str) -> logging.Logger:
    """Named logger; handlers come from setup_logging() on the root."""
    return logging.getLogger(name)


def push_context(**fields) -> None:
    """Attach fields to every record logged from the current context.

    Batch thread workers run in a copy of the submitting context, so fields
    pushed before a batch (app=...) reach their records; file=<name> is
    pushed inside each task.
    """
    _fields.set({**_fields.get(), **fields})


def pop_context(keys: Optional[Iterable[str]] = None) -> None:
    """Drop the given context fields, or all of them when keys is None."""
    if keys is None:
        _fields.set({})
        return
    drop = set(keys)
    _fields.set({k: v for k, v in _fields.get().items() if k not in drop})


def get_context() -> Dict[str, Any]:
    return dict(_fields.get())


def install_excepthook() -> None:
    """Log uncaught exceptions at CRITICAL; Ctrl-C keeps the default hook."""
    def _hook(exc_type, exc_value, exc_tb):
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_tb)
            return
        logging.getLogger(__name__).critical(
            "Uncaught exception", exc_info=(exc_type, exc_value, exc_tb)
        )

    sys.excepthook = _hook


def shutdown() -> None:
    """Flush and close every handler before the process exits."""
    logging.shutdown()
