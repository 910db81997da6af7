#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for AST nodes and tree helpers."""

import pytest

from md2atlassian.ast import (
    BlockQuote,
    Code,
    Document,
    Emphasis,
    Heading,
    Image,
    List,
    ListItem,
    Paragraph,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    extract_text,
    get_node_children,
    iter_headings,
    replace_node_children,
)


@pytest.mark.unit
class TestHeading:
    """Tests for Heading validation."""

    @pytest.mark.parametrize("level", [1, 2, 3, 4, 5, 6])
    def test_valid_levels(self, level):
        """Test levels 1-6 are accepted."""
        assert Heading(level=level).level == level

    @pytest.mark.parametrize("level", [0, 7, -1, 100])
    def test_invalid_levels_raise(self, level):
        """Test levels outside 1-6 are rejected."""
        with pytest.raises(ValueError):
            Heading(level=level)

    def test_id_defaults_to_none(self):
        """Test headings start without an id."""
        assert Heading(level=1).id is None


@pytest.mark.unit
class TestNodeChildren:
    """Tests for get_node_children and replace_node_children."""

    def test_container_children(self):
        """Test block containers expose their children."""
        para = Paragraph(content=[Text(content="x")])
        assert get_node_children(Document(children=[para])) == [para]
        assert get_node_children(BlockQuote(children=[para])) == [para]

    def test_list_children_are_items(self):
        """Test lists expose their items."""
        item = ListItem(children=[])
        assert get_node_children(List(ordered=False, items=[item])) == [item]

    def test_table_children_include_header(self):
        """Test table children list the header first."""
        header = TableRow(cells=[TableCell(content=[Text(content="h")])], is_header=True)
        row = TableRow(cells=[TableCell(content=[Text(content="c")])])
        assert get_node_children(Table(header=header, rows=[row])) == [header, row]

    def test_leaf_has_no_children(self):
        """Test leaf nodes have no children."""
        assert get_node_children(Text(content="x")) == []
        assert get_node_children(Code(content="x")) == []

    def test_replace_children_returns_copy(self):
        """Test replace_node_children leaves the original untouched."""
        original = Paragraph(content=[Text(content="a")])
        replaced = replace_node_children(original, [Text(content="b")])
        assert original.content[0].content == "a"  # type: ignore[attr-defined]
        assert replaced.content[0].content == "b"  # type: ignore[attr-defined]

    def test_replace_table_children_rejects_non_rows(self):
        """Test tables only accept rows as children."""
        with pytest.raises(ValueError):
            replace_node_children(Table(), [Text(content="x")])


@pytest.mark.unit
class TestTreeHelpers:
    """Tests for extract_text and iter_headings."""

    def test_extract_text_nested(self):
        """Test text is collected through inline containers."""
        nodes = [Text(content="My "), Strong(content=[Emphasis(content=[Text(content="big ")])]), Code(content="api")]
        assert extract_text(nodes, joiner="") == "My big api"

    def test_extract_text_includes_image_alt(self):
        """Test image alt text is part of the extracted text."""
        assert extract_text(Image(url="u", alt_text="logo")) == "logo"

    def test_iter_headings_preorder(self):
        """Test headings are found in document order, including nested ones."""
        first = Heading(level=1, content=[Text(content="A")])
        nested = Heading(level=2, content=[Text(content="B")])
        last = Heading(level=3, content=[Text(content="C")])
        doc = Document(
            children=[
                first,
                BlockQuote(children=[nested]),
                List(ordered=False, items=[ListItem(children=[last])]),
            ]
        )
        assert iter_headings(doc) == [first, nested, last]
