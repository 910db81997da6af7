#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2atlassian/utils/languages.py
"""Code block language alias resolution.

Fence info strings in Markdown are written loosely (``console``, ``sh``,
``JS``). The Atlassian ``{code}`` macro only highlights a fixed set of
languages, so tags are normalized through the static table in
:data:`md2atlassian.constants.LANGUAGE_ALIASES`.

Examples
--------
    >>> resolve_language("console")
    'bash'
    >>> resolve_language("JS")
    'javascript'
    >>> resolve_language("brainfuck")
    'brainfuck'

"""

from __future__ import annotations

from md2atlassian.constants import LANGUAGE_ALIASES


def resolve_language(tag: str | None) -> str:
    """Return the canonical highlighter token for a fence language tag.

    Matching ignores case and repeated whitespace. Tags with no entry in the alias
    table are returned unchanged, so authors keep what they typed.

    Parameters
    ----------
    tag : str or None
        Language tag from the opening fence

    Returns
    -------
    str
        Canonical token, or the original tag (``""`` for None)

    """
    if not tag:
        return ""

    return LANGUAGE_ALIASES.get(" ".join(tag.lower().split()), tag)


def language_from_info_string(info_string: str | None) -> str | None:
    """Pick the language tag out of a fence info string.

    The whole string is used when it is a known alias (``visual basic``,
    ``java fx``); otherwise the first word is taken, as CommonMark does.

    Examples
    --------
        >>> language_from_info_string("java fx")
        'java fx'
        >>> language_from_info_string("python title=demo.py")
        'python'

    """
    if not info_string or not info_string.strip():
        return None

    info_string = info_string.strip()
    if " ".join(info_string.lower().split()) in LANGUAGE_ALIASES:
        return info_string
    return info_string.split(maxsplit=1)[0]


def is_canonical_language(tag: str) -> bool:
    """Check whether a tag is already a canonical highlighter token."""
    return LANGUAGE_ALIASES.get(tag) == tag


__all__ = [
    "resolve_language",
    "language_from_info_string",
    "is_canonical_language",
]
