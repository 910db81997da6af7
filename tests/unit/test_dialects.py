#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the wiki markup dialects."""

import pytest

from md2atlassian.exceptions import ValidationError
from md2atlassian.renderers.dialects import ConfluenceDialect, JiraDialect, get_dialect


@pytest.mark.unit
class TestGetDialect:
    """Tests for dialect lookup."""

    @pytest.mark.parametrize(
        "name,expected",
        [("jira", JiraDialect), ("confluence", ConfluenceDialect), ("JIRA", JiraDialect)],
    )
    def test_known_names(self, name, expected):
        """Test names resolve case-insensitively."""
        assert isinstance(get_dialect(name), expected)

    @pytest.mark.parametrize("name", ["markdown", "", None])
    def test_unknown_name(self, name):
        """Test unknown dialects raise ValidationError."""
        with pytest.raises(ValidationError) as exc_info:
            get_dialect(name)  # type: ignore[arg-type]
        assert exc_info.value.parameter_name == "dialect"


@pytest.mark.unit
class TestDialectMarkup:
    """Tests for the markup pieces produced by each dialect."""

    def test_code_block_open(self):
        """Test the two code macro forms."""
        assert JiraDialect().code_block_open("sql") == "{code:sql}"
        assert ConfluenceDialect().code_block_open("sql") == "{code:language=sql}"
        assert JiraDialect().code_block_open("") == "{code}"
        assert ConfluenceDialect().code_block_open("") == "{code}"

    def test_heading(self):
        """Test heading markup."""
        assert JiraDialect().heading(3, "Setup") == "h3. Setup"

    def test_list_item(self):
        """Test stacked list markers."""
        assert ConfluenceDialect().list_item("*#", "item") == "*# item"

    def test_table_rows(self):
        """Test header and body row separators."""
        dialect = JiraDialect()
        assert dialect.table_row(["a", "b"], header=True) == "||a||b||"
        assert dialect.table_row(["c", "d"]) == "|c|d|"

    def test_expand(self):
        """Test the expand macro with and without a title."""
        dialect = ConfluenceDialect()
        assert dialect.expand("body", title="More") == "{expand|title=More}\nbody\n{expand}"
        assert dialect.expand("body") == "{expand}\nbody\n{expand}"

    def test_confluence_image_title_only(self):
        """Test an image with a title but no alt text."""
        assert ConfluenceDialect().image("a.png", "", "T") == "!a.png|title=T!"
