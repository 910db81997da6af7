#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers turning the md2atlassian AST into wiki markup."""

from md2atlassian.renderers.atlassian import AtlassianRenderer
from md2atlassian.renderers.base import BaseRenderer, InlineContentMixin
from md2atlassian.renderers.dialects import ConfluenceDialect, Dialect, JiraDialect, get_dialect

__all__ = [
    "AtlassianRenderer",
    "BaseRenderer",
    "InlineContentMixin",
    "Dialect",
    "JiraDialect",
    "ConfluenceDialect",
    "get_dialect",
]
