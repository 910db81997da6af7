#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2atlassian/ast/transforms.py
"""AST transformation utilities.

NodeTransformer rebuilds a tree node by node, so subclasses only override
the visit_* methods for the node types they change. The input tree is
never mutated.

Examples
--------
    >>> class UppercaseTransformer(NodeTransformer):
    ...     def visit_text(self, node):
    ...         return Text(content=node.content.upper())
    >>> new_doc = UppercaseTransformer().transform(doc)

"""

from __future__ import annotations

import copy
from dataclasses import replace

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
    get_node_children,
    replace_node_children,
)
from md2atlassian.ast.visitors import NodeVisitor


class NodeTransformer(NodeVisitor):
    """Base class for transforming AST nodes.

    Visit methods return a new node, or None to remove the node from its
    parent. The default implementation of every visit method copies the
    node and transforms its children.

    """

    def transform(self, node: Node) -> Node | None:
        """Transform an AST node.

        Parameters
        ----------
        node : Node
            Node to transform

        Returns
        -------
        Node or None
            Transformed node or None to remove

        """
        return node.accept(self)

    def _transform_children(self, children: list[Node]) -> list[Node]:
        result = []
        for child in children:
            transformed = self.transform(child)
            if transformed is not None:
                result.append(transformed)
        return result

    def _generic_transform(self, node: Node) -> Node:
        """Copy a node, transforming its children.

        Parameters
        ----------
        node : Node
            Node to transform

        Returns
        -------
        Node
            Transformed node with children replaced

        """
        children = get_node_children(node)
        if not children:
            # Leaf node - copy so the result never shares metadata with the input
            return replace(node, metadata=node.metadata.copy())  # type: ignore[type-var]

        return replace_node_children(node, self._transform_children(children))

    def visit_document(self, node: Document) -> Document:
        """Transform a Document node."""
        return Document(children=self._transform_children(node.children), metadata=node.metadata.copy())

    def visit_heading(self, node: Heading) -> Heading:
        """Transform a Heading node."""
        return Heading(
            level=node.level,
            content=self._transform_children(node.content),
            id=node.id,
            metadata=node.metadata.copy(),
        )

    def visit_paragraph(self, node: Paragraph) -> Paragraph:
        """Transform a Paragraph node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_code_block(self, node: CodeBlock) -> CodeBlock:
        """Transform a CodeBlock node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_block_quote(self, node: BlockQuote) -> BlockQuote:
        """Transform a BlockQuote node."""
        return BlockQuote(children=self._transform_children(node.children), metadata=node.metadata.copy())

    def visit_list(self, node: List) -> List:
        """Transform a List node."""
        return List(
            ordered=node.ordered,
            items=self._transform_children(node.items),  # type: ignore[arg-type]
            start=node.start,
            metadata=node.metadata.copy(),
        )

    def visit_list_item(self, node: ListItem) -> ListItem:
        """Transform a ListItem node."""
        return ListItem(children=self._transform_children(node.children), metadata=node.metadata.copy())

    def visit_table(self, node: Table) -> Table:
        """Transform a Table node."""
        return Table(
            rows=self._transform_children(node.rows),  # type: ignore[arg-type]
            header=self.transform(node.header) if node.header else None,  # type: ignore[arg-type]
            metadata=node.metadata.copy(),
        )

    def visit_table_row(self, node: TableRow) -> TableRow:
        """Transform a TableRow node."""
        return TableRow(
            cells=self._transform_children(node.cells),  # type: ignore[arg-type]
            is_header=node.is_header,
            metadata=node.metadata.copy(),
        )

    def visit_table_cell(self, node: TableCell) -> TableCell:
        """Transform a TableCell node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_thematic_break(self, node: ThematicBreak) -> ThematicBreak:
        """Transform a ThematicBreak node."""
        return ThematicBreak(metadata=node.metadata.copy())

    def visit_raw_html_block(self, node: RawHtmlBlock) -> RawHtmlBlock:
        """Transform a RawHtmlBlock node."""
        return RawHtmlBlock(content=node.content, tag=node.tag, metadata=node.metadata.copy())

    def visit_toc_marker(self, node: TocMarker) -> TocMarker:
        """Transform a TocMarker node."""
        return TocMarker(entries=copy.deepcopy(node.entries), metadata=node.metadata.copy())

    def visit_text(self, node: Text) -> Text:
        """Transform a Text node."""
        return Text(content=node.content, metadata=node.metadata.copy())

    def visit_emphasis(self, node: Emphasis) -> Emphasis:
        """Transform an Emphasis node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_strong(self, node: Strong) -> Strong:
        """Transform a Strong node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_strikethrough(self, node: Strikethrough) -> Strikethrough:
        """Transform a Strikethrough node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_code(self, node: Code) -> Code:
        """Transform a Code node."""
        return Code(content=node.content, metadata=node.metadata.copy())

    def visit_link(self, node: Link) -> Link:
        """Transform a Link node."""
        return Link(
            url=node.url,
            content=self._transform_children(node.content),
            title=node.title,
            metadata=node.metadata.copy(),
        )

    def visit_image(self, node: Image) -> Image:
        """Transform an Image node."""
        return Image(url=node.url, alt_text=node.alt_text, title=node.title, metadata=node.metadata.copy())

    def visit_line_break(self, node: LineBreak) -> LineBreak:
        """Transform a LineBreak node."""
        return LineBreak(soft=node.soft, metadata=node.metadata.copy())


def iter_headings(node: Node) -> list[Heading]:
    """Collect headings in document order (pre-order walk).

    Parameters
    ----------
    node : Node
        Root of the subtree to search

    Returns
    -------
    list of Heading
        Headings found anywhere below ``node``, including inside block
        quotes and list items

    """
    found: list[Heading] = []
    stack: list[Node] = [node]
    while stack:
        current = stack.pop()
        if isinstance(current, Heading):
            found.append(current)
            continue
        stack.extend(reversed(get_node_children(current)))
    return found
