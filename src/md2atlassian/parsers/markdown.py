#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2atlassian/parsers/markdown.py
"""Markdown to AST converter.

The input is first split by a line scanner into Markdown segments and raw
HTML segments. ``<details>`` and ``<summary>`` blocks are captured verbatim
by tag balance so their content is never interpreted as Markdown; the
Markdown segments are tokenized with mistune and converted to AST nodes.

"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Optional

import mistune

from md2atlassian.ast import (
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
)
from md2atlassian.constants import RAW_HTML_BLOCK_TAGS
from md2atlassian.options.markdown import MarkdownParserOptions
from md2atlassian.parsers.base import BaseParser, ParserInput
from md2atlassian.transforms.builtin import AddHeadingIdsTransform, clamp_heading_level
from md2atlassian.utils.languages import language_from_info_string

logger = logging.getLogger(__name__)

_LINE_RE = re.compile(r"[^\n]*\n|[^\n]+\Z")
_FENCE_OPEN_RE = re.compile(r"^ {0,3}(?P<fence>`{3,}|~{3,})(?P<info>[^\n]*)$")
_FENCE_CLOSE_RE = re.compile(r"^ {0,3}(?P<fence>`{3,}|~{3,})[ \t]*$")
_RAW_OPEN_RE = re.compile(r"^ {0,3}<(?P<tag>%s)(?=[\s/>]|$)" % "|".join(RAW_HTML_BLOCK_TAGS), re.IGNORECASE)
_TAG_OPEN_RES = {tag: re.compile(r"<%s(?=[\s/>]|$)(?![^<>]*/>)" % tag, re.IGNORECASE) for tag in RAW_HTML_BLOCK_TAGS}
_TAG_CLOSE_RES = {tag: re.compile(r"</%s\s*>" % tag, re.IGNORECASE) for tag in RAW_HTML_BLOCK_TAGS}


@dataclass
class _Segment:
    """A run of input lines handled one way."""

    text: str
    raw_tag: Optional[str] = None
    unterminated: bool = False


def _tag_balance(line: str, tag: str) -> int:
    return len(_TAG_OPEN_RES[tag].findall(line)) - len(_TAG_CLOSE_RES[tag].findall(line))


def split_raw_html_segments(text: str) -> list[_Segment]:
    """Split document text into Markdown segments and raw HTML segments.

    Outside fenced code, a line that starts (after at most three spaces of
    indent) with ``<details`` or ``<summary`` opens a raw segment. It runs
    until the number of opening tags minus closing tags of the same name
    returns to zero; the whole closing line belongs to the segment. A
    self-closing tag (``<details/>``) counts as neither. End of input closes
    an unterminated segment.

    The scanner does not track list structure, so a ``<details>`` line
    indented under a list item still starts a top-level raw segment and
    splits the list around it. A multi-line raw block cannot sit on a
    single-line wiki list item either way.

    Parameters
    ----------
    text : str
        Normalized document text

    Returns
    -------
    list of _Segment
        Segments in input order; ``raw_tag`` is None for Markdown segments

    """
    segments: list[_Segment] = []
    markdown_lines: list[str] = []
    fence: Optional[str] = None
    lines = _LINE_RE.findall(text)
    index = 0

    def flush_markdown() -> None:
        if markdown_lines:
            segments.append(_Segment(text="".join(markdown_lines)))
            markdown_lines.clear()

    while index < len(lines):
        line = lines[index]
        bare = line.rstrip("\n")

        if fence is not None:
            close = _FENCE_CLOSE_RE.match(bare)
            if close and close.group("fence")[0] == fence[0] and len(close.group("fence")) >= len(fence):
                fence = None
            markdown_lines.append(line)
            index += 1
            continue

        opening = _FENCE_OPEN_RE.match(bare)
        if opening and not (opening.group("fence")[0] == "`" and "`" in opening.group("info")):
            fence = opening.group("fence")
            markdown_lines.append(line)
            index += 1
            continue

        raw_open = _RAW_OPEN_RE.match(bare)
        if raw_open is None:
            markdown_lines.append(line)
            index += 1
            continue

        flush_markdown()
        tag = raw_open.group("tag").lower()
        depth = 0
        raw_lines: list[str] = []
        while index < len(lines):
            raw_lines.append(lines[index])
            depth += _tag_balance(lines[index], tag)
            index += 1
            if depth <= 0:
                break

        unterminated = depth > 0
        if unterminated:
            logger.debug("Unterminated <%s> block closed at end of input", tag)
        content = "".join(raw_lines)
        if content.endswith("\n"):
            content = content[:-1]
        segments.append(_Segment(text=content, raw_tag=tag, unterminated=unterminated))

    if fence is not None:
        logger.debug("Unterminated %s code fence closed at end of input", fence)
    flush_markdown()
    return segments


class MarkdownToAstConverter(BaseParser):
    r"""Convert Markdown to AST representation.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
    Basic parsing:

        >>> converter = MarkdownToAstConverter()
        >>> doc = converter.parse("# Hello\\n\\nThis is **bold**.")

    Without GFM tables:

        >>> converter = MarkdownToAstConverter(MarkdownParserOptions(parse_tables=False))
        >>> doc = converter.parse(markdown_text)

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the Markdown parser with options."""
        BaseParser._validate_options_type(options, MarkdownParserOptions, "markdown")
        options = options or MarkdownParserOptions()
        super().__init__(options)
        self.options: MarkdownParserOptions = options

    def parse(self, input_data: ParserInput) -> Document:
        """Parse Markdown input into AST Document.

        Parameters
        ----------
        input_data : str, bytes, Path or file-like
            Markdown input to parse

        Returns
        -------
        Document
            AST document node with heading ids assigned

        Raises
        ------
        ParseFailure
            If the input is not valid UTF-8

        """
        markdown_content = self._load_text_content(input_data)

        plugins = []
        if self.options.parse_strikethrough:
            plugins.append("strikethrough")
        if self.options.parse_tables:
            plugins.append("table")
        markdown = mistune.create_markdown(plugins=plugins, renderer=None)

        children: list[Node] = []
        for segment in split_raw_html_segments(markdown_content):
            if segment.raw_tag is not None:
                metadata = {"unterminated": True} if segment.unterminated else {}
                raw = RawHtmlBlock(
                    content=segment.text, tag=segment.raw_tag, metadata=metadata  # type: ignore[arg-type]
                )
                children.append(raw)
                continue

            tokens, _state = markdown.parse(segment.text)
            if isinstance(tokens, list):
                children.extend(self._process_tokens(tokens))

        logger.debug("Parsed %d top-level blocks", len(children))
        document = Document(children=children)
        id_transform = AddHeadingIdsTransform(separator=self.options.heading_id_separator)
        return id_transform.transform(document)  # type: ignore[return-value]

    def _process_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process a list of mistune block tokens into AST nodes."""
        nodes: list[Node] = []
        for token in tokens:
            node = self._process_token(token)
            if node is not None:
                nodes.append(node)
        return nodes

    def _process_token(self, token: dict[str, Any]) -> Node | None:
        """Process a single mistune block token.

        Parameters
        ----------
        token : dict
            Mistune token dictionary with 'type' and other fields

        Returns
        -------
        Node or None
            Resulting AST node, or None for tokens with no output
            (blank lines, link reference definitions)

        """
        token_type = token.get("type", "")

        if token_type == "heading":
            return self._process_heading(token)
        elif token_type in ("paragraph", "block_text"):
            # block_text is used for tight list items
            return Paragraph(content=self._process_inline_tokens(token.get("children", [])))
        elif token_type == "block_code":
            return self._process_code_block(token)
        elif token_type == "block_quote":
            return BlockQuote(children=self._process_tokens(token.get("children", [])))
        elif token_type == "list":
            return self._process_list(token)
        elif token_type == "table":
            return self._process_table(token)
        elif token_type == "thematic_break":
            return ThematicBreak()
        elif token_type == "block_html":
            return RawHtmlBlock(content=token.get("raw", "").rstrip("\n"), tag="other")

        return None

    def _process_heading(self, token: dict[str, Any]) -> Heading:
        attrs = token.get("attrs", {})
        level = attrs.get("level", 1) if isinstance(attrs, dict) else 1
        if not isinstance(level, int):
            level = 1

        content = self._process_inline_tokens(token.get("children", []))
        return Heading(level=clamp_heading_level(level), content=content)

    def _process_code_block(self, token: dict[str, Any]) -> CodeBlock:
        """Process code block token.

        The language is the whole fence info string when that is a known
        alias, otherwise its first word. It is kept as written; alias
        resolution happens at render time.

        """
        code_content = token.get("raw", "")
        if code_content.endswith("\n"):
            code_content = code_content[:-1]

        attrs = token.get("attrs", {})
        info_string = attrs.get("info") if isinstance(attrs, dict) else None

        metadata: dict[str, Any] = {}
        language = None
        if info_string and info_string.strip():
            info_string = info_string.strip()
            metadata["info_string"] = info_string
            language = language_from_info_string(info_string)

        return CodeBlock(content=code_content, language=language, metadata=metadata)

    def _process_list(self, token: dict[str, Any]) -> List:
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}

        items = [
            ListItem(children=self._process_tokens(child.get("children", [])))
            for child in token.get("children", [])
            if isinstance(child, dict) and child.get("type") == "list_item"
        ]
        return List(ordered=bool(attrs.get("ordered", False)), items=items, start=attrs.get("start") or 1)

    def _process_table(self, token: dict[str, Any]) -> Table:
        """Process table token.

        mistune puts header cells directly under ``table_head`` and body
        cells under ``table_body`` -> ``table_row``.

        """
        header = None
        rows = []

        for part in token.get("children", []):
            part_type = part.get("type", "")
            if part_type == "table_head":
                header = TableRow(cells=self._process_cells(part.get("children", [])), is_header=True)
            elif part_type == "table_body":
                for row_token in part.get("children", []):
                    rows.append(TableRow(cells=self._process_cells(row_token.get("children", []))))

        return Table(header=header, rows=rows)

    def _process_cells(self, cell_tokens: list[dict[str, Any]]) -> list[TableCell]:
        return [
            TableCell(content=self._process_inline_tokens(cell.get("children", [])))
            for cell in cell_tokens
            if cell.get("type") == "table_cell"
        ]

    def _process_inline_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process inline tokens.

        Parameters
        ----------
        tokens : list of dict
            Inline token dictionaries

        Returns
        -------
        list of Node
            Inline AST nodes, with adjacent text runs merged

        """
        nodes: list[Node] = []
        for token in tokens:
            node = self._process_inline_token(token)
            if node is None:
                continue
            # mistune splits text at backslash escapes and inline HTML
            if isinstance(node, Text) and nodes and isinstance(nodes[-1], Text):
                nodes[-1] = Text(content=nodes[-1].content + node.content)
            else:
                nodes.append(node)
        return nodes

    def _handle_text_token(self, token: dict[str, Any]) -> Text:
        return Text(content=token.get("raw", ""))

    def _handle_strong_token(self, token: dict[str, Any]) -> Strong:
        return Strong(content=self._process_inline_tokens(token.get("children", [])))

    def _handle_emphasis_token(self, token: dict[str, Any]) -> Emphasis:
        return Emphasis(content=self._process_inline_tokens(token.get("children", [])))

    def _handle_strikethrough_token(self, token: dict[str, Any]) -> Strikethrough:
        return Strikethrough(content=self._process_inline_tokens(token.get("children", [])))

    def _handle_codespan_token(self, token: dict[str, Any]) -> Code:
        return Code(content=token.get("raw", ""))

    def _handle_link_token(self, token: dict[str, Any]) -> Link:
        """Handle link token."""
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        return Link(
            url=attrs.get("url", ""),
            content=self._process_inline_tokens(token.get("children", [])),
            title=attrs.get("title"),
        )

    def _handle_image_token(self, token: dict[str, Any]) -> Image:
        """Handle image token.

        Alt text lives in the children, which may themselves be formatted.

        """
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        return Image(
            url=attrs.get("url", ""),
            alt_text=_flatten_inline_text(token.get("children", [])),
            title=attrs.get("title"),
        )

    def _handle_linebreak_token(self, token: dict[str, Any]) -> LineBreak:
        return LineBreak(soft=False)

    def _handle_softbreak_token(self, token: dict[str, Any]) -> LineBreak:
        return LineBreak(soft=True)

    def _handle_inline_html_token(self, token: dict[str, Any]) -> Text:
        """Keep inline HTML as literal text."""
        return Text(content=token.get("raw", ""))

    def _process_inline_token(self, token: dict[str, Any]) -> Node | None:
        token_type = token.get("type", "")

        handler_map: dict[str, Any] = {
            "text": self._handle_text_token,
            "strong": self._handle_strong_token,
            "emphasis": self._handle_emphasis_token,
            "codespan": self._handle_codespan_token,
            "link": self._handle_link_token,
            "image": self._handle_image_token,
            "linebreak": self._handle_linebreak_token,
            "softbreak": self._handle_softbreak_token,
            "strikethrough": self._handle_strikethrough_token,
            "inline_html": self._handle_inline_html_token,
        }

        handler = handler_map.get(token_type)
        if handler:
            return handler(token)
        return None


def _flatten_inline_text(tokens: list[dict[str, Any]]) -> str:
    parts = []
    for token in tokens:
        if not isinstance(token, dict):
            continue
        if token.get("type") in ("text", "codespan", "inline_html"):
            parts.append(token.get("raw", ""))
        elif token.get("type") in ("softbreak", "linebreak"):
            parts.append(" ")
        else:
            parts.append(_flatten_inline_text(token.get("children", [])))
    return "".join(parts)


def markdown_to_ast(markdown_content: ParserInput, options: MarkdownParserOptions | None = None) -> Document:
    r"""Convert Markdown to AST.

    Convenience function that creates a converter and parses the markdown
    in one step.

    Parameters
    ----------
    markdown_content : str, bytes, Path or file-like
        Markdown text to parse
    options : MarkdownParserOptions or None, default = None
        Parser configuration

    Returns
    -------
    Document
        AST document node

    Examples
    --------
    >>> doc = markdown_to_ast("# Hello\\n\\nWorld")
    >>> len(doc.children)
    2

    """
    converter = MarkdownToAstConverter(options)
    return converter.parse(markdown_content)
