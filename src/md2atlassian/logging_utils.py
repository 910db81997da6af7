"""Logging setup for the md2atlassian command line tool.

Library modules only create module loggers and the package adds a
NullHandler; handlers are installed here, by the CLI.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

_CONSOLE_FORMAT = "%(levelname)s: %(message)s"
_TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
_TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(log_level: int | str) -> int:
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    return level if isinstance(level, int) else logging.INFO


def _make_formatter(trace_mode: bool) -> logging.Formatter:
    if trace_mode:
        return logging.Formatter(_TRACE_FORMAT, datefmt=_TRACE_DATE_FORMAT)
    return logging.Formatter(_CONSOLE_FORMAT)


def _open_log_file(log_file: str, level: int, formatter: logging.Formatter) -> Optional[logging.Handler]:
    try:
        handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    except OSError as exc:
        logging.getLogger(__name__).warning("Could not create log file %s: %s", log_file, exc)
        return None
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Install console (and optionally file) handlers on the root logger.

    Existing root handlers are replaced, so calling this twice does not
    duplicate output. Messages go to stderr to keep stdout free for the
    converted markup.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name (e.g., "INFO"). Unknown names
        fall back to INFO.
    log_file : str, optional
        Path of a file that receives the same messages. A file that cannot
        be opened is reported as a warning and skipped.
    trace_mode : bool, default False
        Include timestamps and logger names, which makes the per-stage
        timings from ``debug_timer`` readable.

    Returns
    -------
    logging.Logger
        The configured root logger

    """
    level = _resolve_level(log_level)
    formatter = _make_formatter(trace_mode)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = _open_log_file(log_file, level, formatter)
        if file_handler is not None:
            root_logger.addHandler(file_handler)
            root_logger.info("Logging to file: %s", log_file)

    return root_logger
