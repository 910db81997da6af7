#  Copyright (c) 2025 Tom Villani, Ph.D.

# md2atlassian/options/markdown.py
"""Configuration options for Markdown parsing."""

from __future__ import annotations

from dataclasses import dataclass, field

from md2atlassian.constants import (
    DEFAULT_HEADING_ID_SEPARATOR,
    DEFAULT_PARSE_STRIKETHROUGH,
    DEFAULT_PARSE_TABLES,
)
from md2atlassian.options.base import BaseParserOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for Markdown-to-AST parsing.

    Parameters
    ----------
    parse_tables : bool, default True
        Recognize GFM pipe tables
    parse_strikethrough : bool, default True
        Recognize GFM ``~~strikethrough~~``
    heading_id_separator : str, default "-"
        Separator used inside heading slugs and before duplicate counters

    Examples
    --------
        >>> options = MarkdownParserOptions(parse_tables=False)
        >>> parser = MarkdownToAstConverter(options)

    """

    parse_tables: bool = field(
        default=DEFAULT_PARSE_TABLES, metadata={"help": "Parse GFM pipe tables", "importance": "core"}
    )
    parse_strikethrough: bool = field(
        default=DEFAULT_PARSE_STRIKETHROUGH,
        metadata={"help": "Parse ~~strikethrough~~ text", "importance": "core"},
    )
    heading_id_separator: str = field(
        default=DEFAULT_HEADING_ID_SEPARATOR,
        metadata={"help": "Separator used in generated heading ids", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate the heading id separator.

        Raises
        ------
        ValueError
            If the separator is empty

        """
        super().__post_init__()
        if not self.heading_id_separator:
            raise ValueError("heading_id_separator must be a non-empty string")
