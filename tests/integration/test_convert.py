#  Copyright (c) 2025 Tom Villani, Ph.D.
"""End-to-end tests for the conversion pipeline."""

import re
from pathlib import Path

import pytest

from md2atlassian import convert, render, to_ast
from md2atlassian.ast import Heading, RawHtmlBlock, TocMarker
from md2atlassian.exceptions import ParseFailure, ValidationError
from md2atlassian.options import AtlassianRendererOptions

pytestmark = pytest.mark.integration


class TestScenarios:
    """Reference conversions."""

    def test_console_fence_confluence(self):
        """Test a console fence becomes a bash code macro in Confluence."""
        result = convert("# Title\n\ncode:\n\n```console\necho hi\n```\n", dialect="confluence")
        assert result == "h1. Title\n\ncode:\n\n{code:language=bash}\necho hi\n{code}\n"
        assert "console" not in result

    def test_heading_delta_jira(self):
        """Test a level 2 heading shifted by 2 renders as h4."""
        assert convert("## Sub\n", dialect="jira", heading_delta=2) == "h4. Sub\n"

    def test_heading_delta_clamped(self):
        """Test a large negative delta clamps to h1."""
        assert convert("# Top\n", dialect="jira", heading_delta=-10) == "h1. Top\n"

    def test_toc_before_headings(self):
        """Test the TOC macro precedes all headings and order is kept."""
        result = convert("# A\n\n# B\n", emit_toc=True)
        assert result == "{toc}\n\nh1. A\n\nh1. B\n"

    def test_toc_with_content_blocks(self):
        """Test the TOC option works on documents with paragraphs and lists."""
        result = convert("# A\n\ntext\n\n- item\n\n> quote\n", dialect="jira", emit_toc=True)
        assert result == "{toc}\n\nh1. A\n\ntext\n\n* item\n\n{quote}\nquote\n{quote}\n"

    def test_whitespace_only(self):
        """Test blank input renders as an empty document."""
        assert convert("  \n\n\t\n") == "\n"
        assert to_ast("   ").children == []

    @pytest.mark.parametrize("dialect", ["jira", "confluence"])
    def test_details_verbatim(self, dialect):
        """Test Markdown inside details is not converted."""
        source = "<details>\n<summary>Why</summary>\n\n**bold** and `code`\n</details>\n"
        assert convert(source, dialect=dialect) == source


class TestLiteralText:
    """Tests for Markdown text that must not turn into wiki markup."""

    def test_escaped_asterisks_stay_literal(self):
        """Test escaped emphasis markers do not become bold."""
        assert convert("\\*not bold\\*", dialect="jira") == "\\*not bold\\*\n"

    def test_escaped_hash_is_not_a_list(self):
        """Test a paragraph starting with an escaped hash stays a paragraph."""
        assert convert("\\# not a list", dialect="jira") == "\\# not a list\n"

    def test_pipe_in_link_text(self):
        """Test a pipe in link text does not split the link."""
        assert convert("[a|b](http://x)", dialect="jira") == "[a\\|b|http://x]\n"

    def test_identifiers_untouched(self):
        """Test markers inside words are left alone."""
        assert convert("call snake_case and well-known", dialect="jira") == "call snake_case and well-known\n"

    def test_hard_break_in_list_item(self):
        """Test a hard break keeps the list item on one line."""
        assert convert("- one  \n  two\n", dialect="jira") == "* one\\\\ two\n"

    @pytest.mark.parametrize(
        "source,expected",
        [
            ("```visual basic\nx\n```", "{code:vb}\nx\n{code}\n"),
            ("```java fx\nx\n```", "{code:jfx}\nx\n{code}\n"),
            ("```python title=demo.py\nx\n```", "{code:python}\nx\n{code}\n"),
        ],
    )
    def test_info_string_languages(self, source, expected):
        """Test multi-word and attributed info strings map to the right language."""
        assert convert(source, dialect="jira") == expected


class TestConvertApi:
    """Tests for the public convert/to_ast/render functions."""

    def test_default_dialect_is_confluence(self):
        """Test the default dialect."""
        assert convert("```py\nx\n```") == "{code:language=python}\nx\n{code}\n"

    def test_options_dialect_used(self):
        """Test options.dialect applies when no dialect argument is given."""
        options = AtlassianRendererOptions(dialect="jira")
        assert convert("```py\nx\n```", options=options) == "{code:python}\nx\n{code}\n"

    def test_dialect_argument_overrides_options(self):
        """Test an explicit dialect wins over the options."""
        options = AtlassianRendererOptions(dialect="jira", details_mode="expand")
        result = convert("<details>\nbody\n</details>", dialect="Confluence", options=options)
        assert result == "{expand}\nbody\n{expand}\n"

    def test_unknown_dialect(self):
        """Test an unknown dialect raises ValidationError."""
        with pytest.raises(ValidationError):
            convert("# A", dialect="markdown")

    def test_invalid_utf8(self):
        """Test undecodable bytes raise ParseFailure with a position."""
        with pytest.raises(ParseFailure) as exc_info:
            convert(b"abc\xfe")
        assert exc_info.value.position == 3

    def test_path_input(self, tmp_path):
        """Test a Path is read as a file."""
        path = tmp_path / "doc.md"
        path.write_bytes("# Café\r\n".encode("utf-8"))
        assert convert(Path(path), dialect="jira") == "h1. Café\n"

    def test_to_ast_then_render(self):
        """Test the two-step API matches convert."""
        source = "# A\n\n## B\n\ntext\n"
        document = to_ast(source, heading_delta=1, emit_toc=True)
        assert isinstance(document.children[0], TocMarker)
        assert [entry.level for entry in document.children[0].entries] == [2, 3]
        assert render(document, "jira") == convert(source, "jira", heading_delta=1, emit_toc=True)

    def test_heading_ids_unique(self):
        """Test duplicate headings get distinct ids."""
        document = to_ast("# Intro\n\n# Intro\n\n# Intro\n")
        ids = [node.id for node in document.children if isinstance(node, Heading)]
        assert ids == ["intro", "intro-2", "intro-3"]

    def test_unterminated_details_recovered(self):
        """Test an unterminated details block runs to end of input."""
        document = to_ast("text\n\n<details>\n# not a heading\n")
        block = document.children[-1]
        assert isinstance(block, RawHtmlBlock)
        assert block.metadata == {"unterminated": True}
        assert convert("text\n\n<details>\n# not a heading\n") == "text\n\n<details>\n# not a heading\n"

    def test_unterminated_fence_recovered(self):
        """Test an unterminated fence runs to end of input."""
        assert convert("```\nstill code", dialect="jira") == "{code}\nstill code\n{code}\n"


class TestSampleDocument:
    """Full document conversion."""

    def test_jira(self, sample_markdown):
        """Test the sample document in Jira markup."""
        expected = (
            "h1. Project\n"
            "\n"
            "Intro with _emphasis_, *strong* and {{code}} .\n"
            "\n"
            "h2. Install\n"
            "\n"
            "{code:bash}\n"
            "$ pip install project\n"
            "{code}\n"
            "\n"
            "* one\n"
            "* two\n"
            "\n"
            "<details>\n"
            "<summary>More</summary>\n"
            "\n"
            "Hidden **markdown**\n"
            "</details>\n"
        )
        assert convert(sample_markdown, dialect="jira") == expected

    def test_every_heading_token_in_range(self, sample_markdown):
        """Test rendered heading levels stay within 1-6."""
        for delta in (-7, 7):
            result = convert(sample_markdown, heading_delta=delta)
            levels = [int(level) for level in re.findall(r"^h(\d+)\. ", result, flags=re.MULTILINE)]
            assert levels and all(1 <= level <= 6 for level in levels)
