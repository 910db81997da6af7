#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2atlassian/renderers/atlassian.py
"""Atlassian wiki markup rendering from AST.

This module provides the AtlassianRenderer class which walks a Document
and produces Jira or Confluence wiki markup. Everything that differs between
the two products lives in a Dialect object; the renderer itself only
decides structure, escaping and spacing.

"""

from __future__ import annotations

import logging
import re
from typing import Optional

from md2atlassian.ast.nodes import (
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    RawHtmlBlock,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
    TocMarker,
)
from md2atlassian.ast.visitors import NodeVisitor
from md2atlassian.options.atlassian import AtlassianRendererOptions
from md2atlassian.renderers.base import BaseRenderer, InlineContentMixin
from md2atlassian.renderers.dialects import Dialect, get_dialect
from md2atlassian.utils.escape import escape_block_start, escape_code_span, escape_wiki_text
from md2atlassian.utils.languages import is_canonical_language, resolve_language

logger = logging.getLogger(__name__)

_DETAILS_RE = re.compile(
    r"^\s*<details\b[^>]*(?<!/)>(?P<body>.*?)(?:</details\s*>\s*)?$", re.IGNORECASE | re.DOTALL
)
_SUMMARY_RE = re.compile(r"^\s*<summary\b[^>]*>(?P<title>.*?)</summary\s*>", re.IGNORECASE | re.DOTALL)


class AtlassianRenderer(NodeVisitor, InlineContentMixin, BaseRenderer):
    """Render AST nodes to Jira or Confluence wiki markup.

    Blocks are separated by one blank line and the output always ends with
    exactly one newline. Rendering is deterministic.

    Parameters
    ----------
    options : AtlassianRendererOptions or None, default = None
        Rendering options (dialect, details handling, escaping)

    Examples
    --------
        >>> from md2atlassian.ast import Document, Heading, Text
        >>> doc = Document(children=[Heading(level=1, content=[Text(content="Title")])])
        >>> AtlassianRenderer(AtlassianRendererOptions(dialect="jira")).render_to_string(doc)
        'h1. Title\\n'

    """

    _separate_after = (Code,)

    def __init__(self, options: AtlassianRendererOptions | None = None):
        """Initialize the renderer with options."""
        BaseRenderer._validate_options_type(options, AtlassianRendererOptions, "atlassian")
        options = options or AtlassianRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: AtlassianRendererOptions = options
        self.dialect: Dialect = get_dialect(options.dialect)
        self._output: list[str] = []
        self._list_markers: list[str] = []
        self._in_table: bool = False
        self._in_link: bool = False
        self._single_line_depth: int = 0

    def render_to_string(self, doc: Document) -> str:
        """Render a document AST to wiki markup.

        Parameters
        ----------
        doc : Document
            The document node to render

        Returns
        -------
        str
            Wiki markup ending in a single newline

        """
        self._output = []
        self._list_markers = []
        self._in_table = False
        self._in_link = False
        self._single_line_depth = 0

        doc.accept(self)

        result = "".join(self._output).rstrip("\n")
        return result + "\n"

    def _render_blocks(self, blocks: list[Node]) -> str:
        saved_output = self._output
        rendered = []
        for block in blocks:
            self._output = []
            block.accept(self)
            text = "".join(self._output)
            if text:
                rendered.append(text)
        self._output = saved_output
        return "\n\n".join(rendered)

    def visit_document(self, node: Document) -> None:
        """Render a Document node."""
        self._output.append(self._render_blocks(node.children))

    def visit_heading(self, node: Heading) -> None:
        """Render a Heading node."""
        self._single_line_depth += 1
        try:
            text = self._render_inline_content(node.content)
        finally:
            self._single_line_depth -= 1
        self._output.append(self.dialect.heading(node.level, text))

    def visit_paragraph(self, node: Paragraph) -> None:
        """Render a Paragraph node.

        Line starts that would read as list, heading or rule markup are
        escaped when text escaping is on.

        """
        text = self._render_inline_content(node.content)
        if self.options.escape_text:
            text = escape_block_start(text)
        self._output.append(text)

    def visit_code_block(self, node: CodeBlock) -> None:
        """Render a CodeBlock node.

        The language tag is resolved through the alias table; the code
        itself is emitted verbatim.

        """
        language = resolve_language(node.language)
        if language and not is_canonical_language(language):
            logger.debug("Passing through unknown code language %r", language)
        self._output.append(self.dialect.code_block(node.content, language))

    def visit_block_quote(self, node: BlockQuote) -> None:
        """Render a BlockQuote node."""
        self._output.append(self.dialect.block_quote(self._render_blocks(node.children)))

    def visit_list(self, node: List) -> None:
        """Render a List node.

        Nested lists stack their markers, so a numbered list inside a bullet
        list uses ``*#``.

        """
        self._list_markers.append("#" if node.ordered else "*")
        lines = []
        for item in node.items:
            saved_output = self._output
            self._output = []
            item.accept(self)
            lines.append("".join(self._output))
            self._output = saved_output
        self._list_markers.pop()
        self._output.append("\n".join(lines))

    def visit_list_item(self, node: ListItem) -> None:
        """Render a ListItem node.

        Wiki list items are a single line, so the item's leading text goes
        on the marker line and any further blocks follow on their own lines.

        """
        markers = "".join(self._list_markers)
        children = list(node.children)
        text = ""
        if children and isinstance(children[0], Paragraph):
            text = self._render_inline_content(children.pop(0).content)

        parts = [self.dialect.list_item(markers, text)]
        for child in children:
            saved_output = self._output
            self._output = []
            child.accept(self)
            rendered = "".join(self._output)
            self._output = saved_output
            if rendered:
                parts.append(rendered)
        self._output.append("\n".join(parts))

    def visit_table(self, node: Table) -> None:
        """Render a Table node."""
        rows = []
        if node.header is not None:
            rows.append(node.header)
        rows.extend(node.rows)

        lines = []
        for row in rows:
            saved_output = self._output
            self._output = []
            row.accept(self)
            lines.append("".join(self._output))
            self._output = saved_output
        self._output.append("\n".join(lines))

    def visit_table_row(self, node: TableRow) -> None:
        """Render a TableRow node with ``||`` header or ``|`` body cells."""
        cells = []
        for cell in node.cells:
            saved_output = self._output
            self._output = []
            cell.accept(self)
            cells.append("".join(self._output))
            self._output = saved_output
        self._output.append(self.dialect.table_row(cells, header=node.is_header))

    def visit_table_cell(self, node: TableCell) -> None:
        """Render a TableCell node.

        Empty cells get a single space so adjacent separators do not merge.

        """
        self._in_table = True
        self._single_line_depth += 1
        try:
            content = self._render_inline_content(node.content)
        finally:
            self._in_table = False
            self._single_line_depth -= 1
        self._output.append(content or " ")

    def visit_thematic_break(self, node: ThematicBreak) -> None:
        """Render a ThematicBreak node."""
        self._output.append(self.dialect.thematic_break())

    def visit_raw_html_block(self, node: RawHtmlBlock) -> None:
        """Render a RawHtmlBlock node.

        The content is emitted verbatim unless ``details_mode`` is "expand",
        in which case ``<details>`` blocks become the expand macro.

        """
        if self.options.details_mode == "expand" and node.tag == "details":
            expanded = self._render_details_as_expand(node.content)
            if expanded is not None:
                self._output.append(expanded)
                return
        self._output.append(node.content)

    def _render_details_as_expand(self, content: str) -> Optional[str]:
        match = _DETAILS_RE.match(content)
        if match is None:
            logger.debug("Could not split <details> block, passing it through")
            return None

        body = match.group("body")
        title = None
        summary = _SUMMARY_RE.match(body)
        if summary is not None:
            title = " ".join(summary.group("title").split())
            body = body[summary.end() :]

        return self.dialect.expand(body.strip(), title=title)

    def visit_toc_marker(self, node: TocMarker) -> None:
        """Render a TocMarker node as the dialect's native TOC macro."""
        self._output.append(self.dialect.toc())

    def visit_text(self, node: Text) -> None:
        """Render a Text node."""
        text = node.content
        if self.options.escape_text:
            if self._in_link:
                context = "link"
            elif self._in_table:
                context = "table"
            else:
                context = "text"
            text = escape_wiki_text(text, context=context)
        self._output.append(text)

    def visit_emphasis(self, node: Emphasis) -> None:
        """Render an Emphasis node."""
        self._output.append(self.dialect.emphasis(self._render_inline_content(node.content)))

    def visit_strong(self, node: Strong) -> None:
        """Render a Strong node."""
        self._output.append(self.dialect.strong(self._render_inline_content(node.content)))

    def visit_strikethrough(self, node: Strikethrough) -> None:
        """Render a Strikethrough node."""
        self._output.append(self.dialect.strikethrough(self._render_inline_content(node.content)))

    def visit_code(self, node: Code) -> None:
        """Render a Code node."""
        self._output.append(self.dialect.code_span(escape_code_span(node.content)))

    def visit_link(self, node: Link) -> None:
        """Render a Link node."""
        self._in_link = True
        try:
            text = self._render_inline_content(node.content)
        finally:
            self._in_link = False
        self._output.append(self.dialect.link(text, node.url))

    def visit_image(self, node: Image) -> None:
        """Render an Image node."""
        self._output.append(self.dialect.image(node.url, node.alt_text, node.title))

    def visit_line_break(self, node: LineBreak) -> None:
        """Render a LineBreak node."""
        if node.soft:
            self._output.append(self.dialect.soft_break())
        else:
            # Headings, table cells and list items must stay on one line
            single_line = self._single_line_depth > 0 or bool(self._list_markers)
            self._output.append(self.dialect.hard_break(single_line=single_line))
