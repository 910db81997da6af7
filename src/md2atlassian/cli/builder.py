#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Argument parser construction and exit codes for the md2atlassian CLI."""

from __future__ import annotations

import argparse

from md2atlassian.constants import (
    DEFAULT_DETAILS_MODE,
    DEFAULT_DIALECT,
    DEFAULT_HEADING_DELTA,
    DETAILS_MODES,
    DIALECT_NAMES,
)
from md2atlassian.exceptions import FileError, OutputWriteError, ValidationError

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_USAGE_ERROR = 2
EXIT_FILE_ERROR = 3


def get_version() -> str:
    """Get the installed version of md2atlassian."""
    from md2atlassian import __version__

    return __version__


def create_parser() -> argparse.ArgumentParser:
    """Build the command line parser.

    Returns
    -------
    argparse.ArgumentParser
        Parser for ``md2atlassian [INPUT [OUTPUT]]``

    """
    parser = argparse.ArgumentParser(
        prog="md2atlassian",
        description="Convert Markdown to Jira or Confluence wiki markup.",
        epilog="""Examples:
  md2atlassian README.md                      # Confluence markup on stdout
  md2atlassian -l jira -t notes.md notes.txt  # Jira markup with a {toc}
  cat doc.md | md2atlassian -m 1              # demote every heading by one
  md2atlassian -e                             # write Markdown in $EDITOR first
""",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument("input", nargs="?", metavar="INPUT", help="Markdown file to convert (default: stdin)")
    parser.add_argument("output", nargs="?", metavar="OUTPUT", help="File to write (default: stdout)")

    parser.add_argument(
        "--language",
        "-l",
        choices=DIALECT_NAMES,
        default=DEFAULT_DIALECT,
        help=f"Target wiki dialect (default: {DEFAULT_DIALECT})",
    )
    parser.add_argument(
        "--modify-headers",
        "-m",
        type=int,
        default=DEFAULT_HEADING_DELTA,
        metavar="DELTA",
        help="Add DELTA to every heading level, clamped to 1-6 (negative values promote headings)",
    )
    parser.add_argument("--toc", "-t", action="store_true", help="Emit a table of contents macro before the content")
    parser.add_argument(
        "--editor",
        "-e",
        action="store_true",
        help="Compose the Markdown in $VISUAL/$EDITOR before converting (INPUT, if given, is loaded first)",
    )
    parser.add_argument(
        "--details",
        choices=DETAILS_MODES,
        default=DEFAULT_DETAILS_MODE,
        help="How <details> blocks are rendered: raw passthrough or an {expand} macro "
        f"(default: {DEFAULT_DETAILS_MODE})",
    )

    # Logging and verbosity options
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output with detailed logging (equivalent to --log-level DEBUG)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Set logging level for debugging (default: WARNING). Overrides --verbose if both are specified.",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        metavar="PATH",
        help="Write log messages to specified file in addition to console output",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Enable trace mode with timestamps and per-stage timing information",
    )
    parser.add_argument("--version", "-V", action="version", version=f"md2atlassian {get_version()}")

    return parser


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to a CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, (FileError, OutputWriteError, OSError)):
        return EXIT_FILE_ERROR

    if isinstance(exception, ValidationError):
        return EXIT_USAGE_ERROR

    return EXIT_ERROR
