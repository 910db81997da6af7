#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2atlassian/utils/escape.py
"""Atlassian wiki markup escaping utilities.

Only punctuation that the renderer would otherwise make ambiguous is
escaped. Code block bodies and raw HTML never pass through these helpers.

"""

from __future__ import annotations

import re

from md2atlassian.constants import CODE_SPAN_ESCAPES, SEPARATOR_ESCAPE_CHARS, TEXT_ESCAPE_CHARS, TEXT_MARKER_CHARS

_MARKER = "[" + re.escape(TEXT_MARKER_CHARS) + "]"

# A marker opens a span when no letter or digit precedes it and a non-space
# follows; it closes one when a non-space precedes it and no letter or digit
# follows. Markers inside words (snake_case, well-known) are left alone.
_MARKER_PATTERN = rf"(?<![^\W_]){_MARKER}(?=\S)|(?<=\S){_MARKER}(?![^\W_])"

_TEXT_ESCAPE_RE = re.compile(rf"[{re.escape(TEXT_ESCAPE_CHARS)}]|{_MARKER_PATTERN}")
_SEPARATED_ESCAPE_RE = re.compile(rf"[{re.escape(TEXT_ESCAPE_CHARS + SEPARATOR_ESCAPE_CHARS)}]|{_MARKER_PATTERN}")

# Line starts the wiki parser reads as block markup: list markers, headings,
# quotes and horizontal rules
_BLOCK_START_RE = re.compile(r"^(?=(?:[*#-]+|h[1-6]\.|bq\.)[ \t]|-{4,}[ \t]*$)", re.MULTILINE)


def escape_wiki_text(text: str, context: str = "text") -> str:
    r"""Escape characters in a plain text run that would be read as markup.

    Curly braces open macros and square brackets open links in both
    dialects, so they are always backslash-escaped. The inline formatting
    markers ``* _ - + ^ ~`` are escaped where they could open or close a
    span. Inside table cells and link text the pipe character is escaped as
    well, because it separates cells and link parts.

    Parameters
    ----------
    text : str
        Text to escape
    context : {"text", "table", "link"}, default "text"
        Rendering context of the text run

    Returns
    -------
    str
        Escaped text

    Examples
    --------
        >>> escape_wiki_text("use {braces} and [brackets]")
        'use \\{braces\\} and \\[brackets\\]'
        >>> escape_wiki_text("*not bold* but snake_case")
        '\\*not bold\\* but snake_case'
        >>> escape_wiki_text("a|b", context="table")
        'a\\|b'

    """
    if not text:
        return text

    pattern = _TEXT_ESCAPE_RE if context == "text" else _SEPARATED_ESCAPE_RE
    return pattern.sub(lambda match: "\\" + match.group(0), text)


def escape_block_start(text: str) -> str:
    r"""Escape line starts that the wiki would read as block markup.

    Applied to rendered paragraph text, so a paragraph reading
    ``# not a list`` or ``h1. not a heading`` stays a paragraph.

    Examples
    --------
        >>> escape_block_start("# not a list")
        '\\# not a list'
        >>> escape_block_start("h2. text")
        '\\h2. text'

    """
    return _BLOCK_START_RE.sub(r"\\", text)


def escape_code_span(code: str) -> str:
    r"""Escape the body of a ``{{monospace}}`` span.

    Braces become HTML entities so the span cannot close early or open a
    macro, asterisks are backslash-escaped so they do not toggle bold, and a
    leading hyphen is escaped because it would otherwise start strikethrough.

    Parameters
    ----------
    code : str
        Raw code span content

    Returns
    -------
    str
        Escaped content

    Examples
    --------
        >>> escape_code_span("rm -rf ./*.ext")
        'rm -rf ./\\*.ext'
        >>> escape_code_span("-r")
        '\\-r'

    """
    result = code
    for char, escaped in CODE_SPAN_ESCAPES:
        result = result.replace(char, escaped)
    if result.startswith("-"):
        result = "\\" + result
    return result


__all__ = [
    "escape_wiki_text",
    "escape_block_start",
    "escape_code_span",
]
