#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Interactive editing of the Markdown source before conversion."""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
import tempfile
from pathlib import Path
from typing import Mapping, Optional

from md2atlassian.constants import DEFAULT_EDITOR, EDITOR_ENV_VARS
from md2atlassian.exceptions import FileAccessError

logger = logging.getLogger(__name__)


def resolve_editor_command(environ: Optional[Mapping[str, str]] = None) -> list[str]:
    """Return the editor command from $VISUAL or $EDITOR, falling back to vi.

    The variable may carry arguments (``code --wait``), so it is split the
    way a shell would split it.

    """
    environ = os.environ if environ is None else environ
    for name in EDITOR_ENV_VARS:
        value = environ.get(name, "").strip()
        if value:
            return shlex.split(value)
    return [DEFAULT_EDITOR]


def edit_markdown(initial_text: bytes = b"", environ: Optional[Mapping[str, str]] = None) -> bytes:
    """Open a temporary ``.md`` file in the user's editor and return what was saved.

    Parameters
    ----------
    initial_text : bytes, default b""
        Content to pre-fill the file with
    environ : Mapping, optional
        Environment to read the editor from (defaults to ``os.environ``)

    Returns
    -------
    bytes
        File content after the editor exits

    Raises
    ------
    FileAccessError
        If the editor cannot be started or exits with a non-zero status

    """
    command = resolve_editor_command(environ)
    fd, temp_name = tempfile.mkstemp(suffix=".md", prefix="md2atlassian-")
    temp_path = Path(temp_name)
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(initial_text)

        logger.debug("Launching editor: %s %s", " ".join(command), temp_path)
        try:
            result = subprocess.run([*command, str(temp_path)], check=False)
        except OSError as e:
            raise FileAccessError(
                str(temp_path), message=f"Could not start editor {command[0]!r}: {e}", original_error=e
            ) from e

        if result.returncode != 0:
            raise FileAccessError(
                str(temp_path), message=f"Editor {command[0]!r} exited with status {result.returncode}"
            )

        return temp_path.read_bytes()
    finally:
        temp_path.unlink(missing_ok=True)
