#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command-line interface for md2atlassian.

Usage::

    md2atlassian [INPUT [OUTPUT]] [-l {jira,confluence}] [-m DELTA] [-t] [-e]

Input defaults to stdin and output to stdout.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from md2atlassian.api import convert
from md2atlassian.cli.builder import (
    EXIT_SUCCESS,
    create_parser,
    get_exit_code_for_exception,
)
from md2atlassian.cli.editor import edit_markdown
from md2atlassian.exceptions import FileAccessError, FileNotFoundError, Md2AtlassianError, OutputWriteError
from md2atlassian.logging_utils import configure_logging
from md2atlassian.options.atlassian import AtlassianRendererOptions

logger = logging.getLogger(__name__)


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Parsed command-line arguments

    """
    # --trace takes highest precedence, then --verbose, then --log-level
    if parsed_args.trace:
        log_level = logging.DEBUG
    elif parsed_args.verbose and parsed_args.log_level == "WARNING":
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, parsed_args.log_level.upper())

    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _read_input(input_path: str | None) -> bytes:
    if input_path is None or input_path == "-":
        return sys.stdin.buffer.read()

    path = Path(input_path)
    if not path.is_file():
        raise FileNotFoundError(input_path)
    try:
        return path.read_bytes()
    except OSError as e:
        raise FileAccessError(input_path, original_error=e) from e


def _write_output(text: str, output_path: str | None) -> None:
    if output_path is None or output_path == "-":
        sys.stdout.write(text)
        sys.stdout.flush()
        return

    try:
        Path(output_path).write_text(text, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(output_path, original_error=e) from e


def main(args: list[str] | None = None) -> int:
    """Execute the CLI entry point.

    Parameters
    ----------
    args : list of str, optional
        Arguments to parse (defaults to ``sys.argv[1:]``)

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    try:
        if parsed_args.editor:
            initial = _read_input(parsed_args.input) if parsed_args.input else b""
            source = edit_markdown(initial)
        else:
            source = _read_input(parsed_args.input)

        options = AtlassianRendererOptions(dialect=parsed_args.language, details_mode=parsed_args.details)
        markup = convert(
            source,
            heading_delta=parsed_args.modify_headers,
            emit_toc=parsed_args.toc,
            options=options,
        )
        _write_output(markup, parsed_args.output)
    except (Md2AtlassianError, OSError) as e:
        logger.debug("Conversion failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    return EXIT_SUCCESS


__all__ = ["main", "create_parser"]
