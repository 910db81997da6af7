#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2atlassian/transforms/builtin.py
"""Built-in transforms applied by the conversion pipeline.

Available Transforms
--------------------
- AddHeadingIdsTransform: Generate unique anchor ids for headings
- HeadingOffsetTransform: Shift heading levels, clamped to 1-6
- InsertTocMarkerTransform: Prepend a table-of-contents marker

Every transform returns a new tree; the input document is left untouched.

Examples
--------
Offset headings by 2 levels:

    >>> transform = HeadingOffsetTransform(offset=2)
    >>> new_doc = transform.transform(doc)

Request a table of contents:

    >>> new_doc = InsertTocMarkerTransform().transform(doc)

"""

from __future__ import annotations

import logging

from md2atlassian.ast.nodes import Document, Heading, Node, TocEntry, TocMarker
from md2atlassian.ast.transforms import NodeTransformer, iter_headings
from md2atlassian.ast.utils import extract_text
from md2atlassian.constants import DEFAULT_HEADING_ID_SEPARATOR, MAX_HEADING_LEVEL, MIN_HEADING_LEVEL
from md2atlassian.exceptions import TransformError
from md2atlassian.utils.text import make_unique_slug, slugify

logger = logging.getLogger(__name__)


def clamp_heading_level(level: int) -> int:
    """Clamp a heading level into the 1-6 range."""
    return max(MIN_HEADING_LEVEL, min(MAX_HEADING_LEVEL, level))


class HeadingOffsetTransform(NodeTransformer):
    """Shift every heading level by a signed offset.

    Levels that would leave the 1-6 range are clamped to the nearest bound,
    so no offset ever fails. Heading text and ids are preserved.

    Parameters
    ----------
    offset : int, default = 0
        Amount to add to each level (negative promotes headings)

    Examples
    --------
        >>> HeadingOffsetTransform(offset=-3).transform(doc)  # h2 -> h1, h5 -> h2

    """

    def __init__(self, offset: int = 0):
        """Initialize with the level offset."""
        self.offset = offset

    def visit_heading(self, node: Heading) -> Heading:
        """Return a copy of the heading with its level shifted and clamped."""
        new_level = clamp_heading_level(node.level + self.offset)
        if new_level != node.level + self.offset:
            logger.debug("Clamped heading level %d%+d to %d", node.level, self.offset, new_level)
        return Heading(
            level=new_level,
            content=self._transform_children(node.content),
            id=node.id,
            metadata=node.metadata.copy(),
        )


class AddHeadingIdsTransform(NodeTransformer):
    """Generate and add unique ids to heading nodes.

    Ids are slugified from the heading's plain text. The first heading with
    a given slug keeps it bare; later duplicates get ``-2``, ``-3`` and so
    on. Headings that already carry an id keep it, but it still counts
    towards uniqueness.

    Parameters
    ----------
    separator : str, default = "-"
        Separator for multi-word slugs and duplicate counters

    Examples
    --------
        >>> new_doc = AddHeadingIdsTransform().transform(document)
        >>> # "My Heading", "My Heading" -> "my-heading", "my-heading-2"

    """

    def __init__(self, separator: str = DEFAULT_HEADING_ID_SEPARATOR):
        """Initialize with the slug separator."""
        self.separator = separator
        self._id_counts: dict[str, int] = {}

    def transform(self, node: Node) -> Node | None:
        """Assign ids across the tree rooted at ``node``."""
        if isinstance(node, Document):
            self._id_counts = {}
        return super().transform(node)

    def visit_heading(self, node: Heading) -> Heading:
        """Return a copy of the heading with its id filled in."""
        if node.id:
            heading_id = make_unique_slug(node.id, self._id_counts, separator=self.separator)
        else:
            text = extract_text(node.content, joiner="")
            heading_id = make_unique_slug(slugify(text, separator=self.separator), self._id_counts, self.separator)

        return Heading(
            level=node.level,
            content=self._transform_children(node.content),
            id=heading_id,
            metadata=node.metadata.copy(),
        )


class InsertTocMarkerTransform(NodeTransformer):
    """Prepend a TocMarker listing the document's headings.

    Headings are collected in document order, including those nested in
    block quotes and list items. The marker is inserted at index 0 even when
    the document has no headings, because the target wiki's native macro
    discovers headings on its own.

    Raises
    ------
    TransformError
        If applied to anything other than a Document

    """

    def transform(self, node: Node) -> Node | None:
        """Return a new document with the TOC marker prepended."""
        if not isinstance(node, Document):
            raise TransformError(
                f"Table of contents can only be inserted into a Document, got {type(node).__name__}",
                transform_name="InsertTocMarkerTransform",
            )
        return self.visit_document(node)

    def visit_document(self, node: Document) -> Document:
        """Build the entry list and prepend the marker."""
        entries = [
            TocEntry(level=heading.level, text=extract_text(heading.content, joiner=""), id=heading.id)
            for heading in iter_headings(node)
        ]
        logger.debug("Inserting table of contents marker with %d entries", len(entries))
        # Children are copied unchanged; only the document itself is checked
        children = NodeTransformer().visit_document(node).children
        return Document(children=[TocMarker(entries=entries), *children], metadata=node.metadata.copy())
