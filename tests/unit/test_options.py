#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the options dataclasses."""

import dataclasses

import pytest

from md2atlassian.options import AtlassianRendererOptions, MarkdownParserOptions


@pytest.mark.unit
class TestAtlassianRendererOptions:
    """Tests for AtlassianRendererOptions."""

    def test_defaults(self):
        """Test the default configuration."""
        options = AtlassianRendererOptions()
        assert options.dialect == "confluence"
        assert options.details_mode == "passthrough"
        assert options.escape_text is True

    def test_frozen(self):
        """Test options cannot be modified in place."""
        options = AtlassianRendererOptions()
        with pytest.raises(dataclasses.FrozenInstanceError):
            options.dialect = "jira"  # type: ignore[misc]

    def test_create_updated(self):
        """Test create_updated returns a modified copy."""
        options = AtlassianRendererOptions()
        updated = options.create_updated(dialect="jira", details_mode="expand")
        assert updated.dialect == "jira"
        assert updated.details_mode == "expand"
        assert options.dialect == "confluence"

    @pytest.mark.parametrize("field_name,value", [("dialect", "markdown"), ("details_mode", "collapse")])
    def test_invalid_choice(self, field_name, value):
        """Test unknown choices are rejected."""
        with pytest.raises(ValueError):
            AtlassianRendererOptions(**{field_name: value})

    def test_create_updated_validates(self):
        """Test validation also runs for updated copies."""
        with pytest.raises(ValueError):
            AtlassianRendererOptions().create_updated(dialect="wiki")


@pytest.mark.unit
class TestMarkdownParserOptions:
    """Tests for MarkdownParserOptions."""

    def test_defaults(self):
        """Test the default configuration."""
        options = MarkdownParserOptions()
        assert options.parse_tables is True
        assert options.parse_strikethrough is True
        assert options.heading_id_separator == "-"

    def test_empty_separator_rejected(self):
        """Test an empty id separator is rejected."""
        with pytest.raises(ValueError):
            MarkdownParserOptions(heading_id_separator="")
