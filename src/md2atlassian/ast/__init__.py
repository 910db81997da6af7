#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2atlassian/ast/__init__.py
"""Abstract Syntax Tree (AST) module for document representation.

The parser produces a Document tree, the transforms rewrite it and the
renderer walks it to produce wiki markup.

- nodes: AST node classes representing document structure
- visitors: Visitor pattern implementation for AST traversal
- transforms: NodeTransformer base class and tree helpers
- utils: Text extraction helpers

Examples
--------
    >>> from md2atlassian.ast import Document, Heading, Text
    >>> doc = Document(children=[Heading(level=1, content=[Text(content="Title")])])

"""

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
    TocEntry,
    TocMarker,
    get_node_children,
    replace_node_children,
)
from md2atlassian.ast.transforms import NodeTransformer, iter_headings
from md2atlassian.ast.utils import extract_text
from md2atlassian.ast.visitors import NodeVisitor

__all__ = [
    "Node",
    "Document",
    "Heading",
    "Paragraph",
    "CodeBlock",
    "BlockQuote",
    "List",
    "ListItem",
    "Table",
    "TableRow",
    "TableCell",
    "ThematicBreak",
    "RawHtmlBlock",
    "TocEntry",
    "TocMarker",
    "Text",
    "Emphasis",
    "Strong",
    "Strikethrough",
    "Code",
    "Link",
    "Image",
    "LineBreak",
    "get_node_children",
    "replace_node_children",
    "NodeVisitor",
    "NodeTransformer",
    "iter_headings",
    "extract_text",
]
