#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2atlassian/ast/utils.py
"""Utility functions for working with AST nodes."""

from __future__ import annotations

from typing import Union

from md2atlassian.ast.nodes import Code, Image, Node, Text, get_node_children


def extract_text(node_or_nodes: Union[Node, list[Node]], joiner: str = " ") -> str:
    """Extract plain text from a node or list of nodes.

    Text and code span content is collected recursively; image alt text is
    included as well so a heading made of an image still has readable text.

    Parameters
    ----------
    node_or_nodes : Node or list of Node
        A single node or list of nodes to extract text from
    joiner : str, default = " "
        String used to join the text of sibling nodes. Use "" for heading
        text and slug generation.

    Returns
    -------
    str
        Concatenated text content

    Examples
    --------
        >>> extract_text([Text(content="My "), Code(content="api")], joiner="")
        'My api'

    """
    if isinstance(node_or_nodes, list):
        return joiner.join(extract_text(node, joiner) for node in node_or_nodes)

    node = node_or_nodes
    if isinstance(node, (Text, Code)):
        return node.content
    if isinstance(node, Image):
        return node.alt_text

    return joiner.join(extract_text(child, joiner) for child in get_node_children(node))
