#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Parsers turning source documents into the md2atlassian AST."""

from md2atlassian.parsers.base import BaseParser
from md2atlassian.parsers.markdown import MarkdownToAstConverter, markdown_to_ast, split_raw_html_segments

__all__ = ["BaseParser", "MarkdownToAstConverter", "markdown_to_ast", "split_raw_html_segments"]
