#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Utility helpers shared by the parser, transforms and renderer."""

from md2atlassian.utils.escape import escape_block_start, escape_code_span, escape_wiki_text
from md2atlassian.utils.languages import is_canonical_language, language_from_info_string, resolve_language
from md2atlassian.utils.text import make_unique_slug, slugify

__all__ = [
    "escape_block_start",
    "escape_code_span",
    "escape_wiki_text",
    "is_canonical_language",
    "language_from_info_string",
    "resolve_language",
    "make_unique_slug",
    "slugify",
]
