#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for md2atlassian.

This module centralizes the hardcoded values used across the library.

Constants are organized by category:
1. Type Definitions - All Literal types and type aliases
2. Conversion Behavior - Defaults for the pipeline and CLI
3. Code Languages - The static highlighter alias table
4. Escaping - Characters reserved by the Atlassian wiki syntax
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Literal, Mapping

# =============================================================================
# Type Definitions - All Literal Types and Type Aliases
# =============================================================================

DialectName = Literal["jira", "confluence"]
DetailsMode = Literal["passthrough", "expand"]
RawHtmlTag = Literal["details", "summary", "other"]

DIALECT_NAMES: tuple[str, ...] = ("jira", "confluence")
DETAILS_MODES: tuple[str, ...] = ("passthrough", "expand")

# =============================================================================
# Conversion Behavior
# =============================================================================

DEFAULT_DIALECT: DialectName = "confluence"
DEFAULT_HEADING_DELTA = 0
DEFAULT_EMIT_TOC = False
DEFAULT_DETAILS_MODE: DetailsMode = "passthrough"
DEFAULT_ESCAPE_TEXT = True
DEFAULT_PARSE_TABLES = True
DEFAULT_PARSE_STRIKETHROUGH = True
DEFAULT_HEADING_ID_SEPARATOR = "-"

MIN_HEADING_LEVEL = 1
MAX_HEADING_LEVEL = 6

# Raw HTML tags captured verbatim by the block scanner
RAW_HTML_BLOCK_TAGS: tuple[str, ...] = ("details", "summary")

# Fallback chain for the interactive editor (-e/--editor)
EDITOR_ENV_VARS: tuple[str, ...] = ("VISUAL", "EDITOR")
DEFAULT_EDITOR = "vi"

# =============================================================================
# Code Languages
# =============================================================================

# Languages the Jira/Confluence {code} macro highlights natively.
CANONICAL_CODE_LANGUAGES: tuple[str, ...] = (
    "actionscript3",
    "applescript",
    "bash",
    "c#",
    "c++",
    "css",
    "coldfusion",
    "delphi",
    "diff",
    "erlang",
    "groovy",
    "xml",
    "java",
    "jfx",
    "javascript",
    "php",
    "text",
    "powershell",
    "python",
    "ruby",
    "sql",
    "sass",
    "scala",
    "vb",
    "yaml",
)

_CODE_LANGUAGE_ALIAS_GROUPS: dict[str, tuple[str, ...]] = {
    "actionscript3": ("as3", "actionscript"),
    "applescript": ("osascript",),
    "bash": ("console", "shell", "zsh", "sh"),
    "c#": ("csharp",),
    "c++": ("cpp",),
    "coldfusion": ("cfm", "cfml", "coldfusion html"),
    "delphi": ("pascal", "objectpascal"),
    "diff": ("udiff",),
    "xml": ("html",),
    "jfx": ("java fx",),
    "javascript": ("js", "node"),
    "php": ("inc",),
    "powershell": ("posh",),
    "python": ("py", "python3", "py3"),
    "ruby": ("jruby", "macruby", "rake", "rb", "rbx"),
    "sass": ("scss", "less", "stylus"),
    "vb": ("visual basic", "vb.net", "vbnet"),
}


def _build_language_aliases() -> Mapping[str, str]:
    table = {language: language for language in CANONICAL_CODE_LANGUAGES}
    for canonical, aliases in _CODE_LANGUAGE_ALIAS_GROUPS.items():
        for alias in aliases:
            table[alias] = canonical
    return MappingProxyType(table)


# Lower-case alias -> canonical highlighter token. Read-only.
LANGUAGE_ALIASES: Mapping[str, str] = _build_language_aliases()

# =============================================================================
# Escaping
# =============================================================================

# Characters in plain text runs that would open macros or links
TEXT_ESCAPE_CHARS = "{}[]"

# Inline formatting markers (strong, emphasis, strike, inserted, super- and
# subscript), escaped where they could open or close a span
TEXT_MARKER_CHARS = "*_-+^~"

# Additional characters escaped inside table cells and link text
SEPARATOR_ESCAPE_CHARS = "|"

# Replacements applied inside {{monospace}} spans
CODE_SPAN_ESCAPES: tuple[tuple[str, str], ...] = (
    ("{", "&#123;"),
    ("}", "&#125;"),
    ("*", "\\*"),
)
