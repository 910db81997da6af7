#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for md2atlassian parsing and rendering.

Each stage has its own frozen Options dataclass.
"""

from md2atlassian.options.atlassian import AtlassianRendererOptions
from md2atlassian.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from md2atlassian.options.markdown import MarkdownParserOptions

__all__ = [
    "CloneFrozenMixin",
    "BaseParserOptions",
    "BaseRendererOptions",
    "MarkdownParserOptions",
    "AtlassianRendererOptions",
]
