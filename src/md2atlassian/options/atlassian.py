#  Copyright (c) 2025 Tom Villani, Ph.D.

# md2atlassian/options/atlassian.py
"""Configuration options for Atlassian wiki markup rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

from md2atlassian.constants import (
    DEFAULT_DETAILS_MODE,
    DEFAULT_DIALECT,
    DEFAULT_ESCAPE_TEXT,
    DETAILS_MODES,
    DIALECT_NAMES,
    DetailsMode,
    DialectName,
)
from md2atlassian.options.base import BaseRendererOptions


@dataclass(frozen=True)
class AtlassianRendererOptions(BaseRendererOptions):
    """Configuration options for AST-to-Atlassian rendering.

    Parameters
    ----------
    dialect : {"jira", "confluence"}, default "confluence"
        Target wiki syntax
    details_mode : {"passthrough", "expand"}, default "passthrough"
        How ``<details>`` blocks are emitted:
        - "passthrough": the raw HTML verbatim
        - "expand": an ``{expand}`` macro titled with the ``<summary>`` text
    escape_text : bool, default True
        Backslash-escape characters in plain text that the wiki syntax
        would otherwise read as macro or link delimiters

    Examples
    --------
        >>> options = AtlassianRendererOptions(dialect="jira")
        >>> renderer = AtlassianRenderer(options)

    """

    dialect: DialectName = field(
        default=DEFAULT_DIALECT,
        metadata={"help": "Target dialect: jira or confluence", "choices": DIALECT_NAMES, "importance": "core"},
    )
    details_mode: DetailsMode = field(
        default=DEFAULT_DETAILS_MODE,
        metadata={
            "help": "How <details> blocks are rendered: passthrough or expand",
            "choices": DETAILS_MODES,
            "importance": "advanced",
        },
    )
    escape_text: bool = field(
        default=DEFAULT_ESCAPE_TEXT,
        metadata={"help": "Escape wiki delimiters in plain text", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate choice fields.

        Raises
        ------
        ValueError
            If dialect or details_mode is not a known value

        """
        super().__post_init__()
        if self.dialect not in DIALECT_NAMES:
            raise ValueError(f"dialect must be one of {DIALECT_NAMES}, got {self.dialect!r}")
        if self.details_mode not in DETAILS_MODES:
            raise ValueError(f"details_mode must be one of {DETAILS_MODES}, got {self.details_mode!r}")
