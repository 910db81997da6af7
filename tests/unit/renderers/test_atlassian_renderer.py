#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the Atlassian wiki markup renderer."""

import io

import pytest

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
from md2atlassian.exceptions import InvalidOptionsError, OutputWriteError
from md2atlassian.options import AtlassianRendererOptions, MarkdownParserOptions
from md2atlassian.renderers import AtlassianRenderer


def _render(doc, dialect="confluence", **kwargs):
    options = AtlassianRendererOptions(dialect=dialect, **kwargs)
    return AtlassianRenderer(options).render_to_string(doc)


def _para(*content):
    return Paragraph(content=list(content))


@pytest.mark.unit
class TestDocumentLayout:
    """Tests for block separation and trailing newlines."""

    def test_empty_document(self):
        """Test an empty document renders as a single newline."""
        assert _render(Document()) == "\n"

    def test_blocks_separated_by_blank_line(self):
        """Test blocks are joined with one blank line."""
        doc = Document(
            children=[
                Heading(level=1, content=[Text(content="Title")]),
                _para(Text(content="Body")),
                ThematicBreak(),
            ]
        )
        assert _render(doc) == "h1. Title\n\nBody\n\n----\n"

    def test_renderer_is_reusable(self):
        """Test per-call state is reset between renders."""
        doc = Document(children=[_para(Text(content="x"))])
        renderer = AtlassianRenderer()
        assert renderer.render_to_string(doc) == renderer.render_to_string(doc)

    def test_wrong_options_type(self):
        """Test passing parser options to the renderer fails."""
        with pytest.raises(InvalidOptionsError):
            AtlassianRenderer(MarkdownParserOptions())  # type: ignore[arg-type]


@pytest.mark.unit
class TestCodeBlocks:
    """Tests for the {code} macro in both dialects."""

    @pytest.mark.parametrize(
        "dialect,expected",
        [
            ("jira", "{code:bash}\necho hi\n{code}\n"),
            ("confluence", "{code:language=bash}\necho hi\n{code}\n"),
        ],
    )
    def test_alias_resolved(self, dialect, expected):
        """Test a console fence is emitted as bash."""
        doc = Document(children=[CodeBlock(content="echo hi", language="console")])
        assert _render(doc, dialect) == expected

    def test_no_language(self):
        """Test a fence without a tag uses the bare macro."""
        doc = Document(children=[CodeBlock(content="x = 1")])
        assert _render(doc, "jira") == "{code}\nx = 1\n{code}\n"

    def test_unknown_language_passthrough(self):
        """Test an unknown tag is kept as written."""
        doc = Document(children=[CodeBlock(content="fn main() {}", language="rust")])
        assert _render(doc, "confluence") == "{code:language=rust}\nfn main() {}\n{code}\n"

    def test_empty_code_block(self):
        """Test an empty body does not produce a blank line."""
        doc = Document(children=[CodeBlock(content="", language="python")])
        assert _render(doc, "jira") == "{code:python}\n{code}\n"

    def test_content_never_escaped(self):
        """Test braces and brackets inside code are verbatim."""
        doc = Document(children=[CodeBlock(content="a = {'k': [1]}", language="py")])
        assert _render(doc, "jira") == "{code:python}\na = {'k': [1]}\n{code}\n"


@pytest.mark.unit
class TestInlineMarkup:
    """Tests for inline nodes."""

    def test_emphasis_strong_strike(self):
        """Test the three inline styles."""
        doc = Document(
            children=[
                _para(
                    Emphasis(content=[Text(content="a")]),
                    Text(content=" "),
                    Strong(content=[Text(content="b")]),
                    Text(content=" "),
                    Strikethrough(content=[Text(content="c")]),
                )
            ]
        )
        assert _render(doc) == "_a_ *b* -c-\n"

    def test_link_with_text(self):
        """Test a link renders as [text|url]."""
        doc = Document(children=[_para(Link(url="https://x.org", content=[Text(content="site")]))])
        assert _render(doc) == "[site|https://x.org]\n"

    def test_link_without_text(self):
        """Test a link without text renders as [url]."""
        doc = Document(children=[_para(Link(url="https://x.org", content=[]))])
        assert _render(doc) == "[https://x.org]\n"

    def test_image_confluence_title(self):
        """Test Confluence keeps the image title."""
        doc = Document(children=[_para(Image(url="a.png", alt_text="Logo", title="Our logo"))])
        assert _render(doc, "confluence") == "!a.png|alt=Logo,title=Our logo!\n"

    def test_image_jira_drops_title(self):
        """Test Jira only carries the alt text."""
        doc = Document(children=[_para(Image(url="a.png", alt_text="Logo", title="Our logo"))])
        assert _render(doc, "jira") == "!a.png|alt=Logo!\n"

    def test_bare_image(self):
        """Test an image without attributes."""
        doc = Document(children=[_para(Image(url="a.png"))])
        assert _render(doc, "jira") == "!a.png!\n"

    def test_line_breaks(self):
        """Test hard breaks become newlines and soft breaks spaces."""
        doc = Document(
            children=[
                _para(
                    Text(content="a"),
                    LineBreak(soft=True),
                    Text(content="b"),
                    LineBreak(soft=False),
                    Text(content="c"),
                )
            ]
        )
        assert _render(doc) == "a b\nc\n"


@pytest.mark.unit
class TestEscaping:
    """Tests for escaping of reserved punctuation."""

    def test_text_braces_and_brackets(self):
        """Test macro and link openers in plain text are escaped."""
        doc = Document(children=[_para(Text(content="use {x} and [y]"))])
        assert _render(doc) == "use \\{x\\} and \\[y\\]\n"

    def test_escape_disabled(self):
        """Test escaping can be turned off."""
        doc = Document(children=[_para(Text(content="{x}"))])
        assert _render(doc, escape_text=False) == "{x}\n"

    def test_code_span_escapes(self):
        """Test braces, asterisks and a leading hyphen inside code spans."""
        doc = Document(children=[_para(Code(content="-r {a}*"))])
        assert _render(doc) == "{{\\-r &#123;a&#125;\\*}}\n"

    def test_space_after_code_span(self):
        """Test a space separates a code span from following punctuation."""
        doc = Document(children=[_para(Text(content="run "), Code(content="ls"), Text(content="."))])
        assert _render(doc) == "run {{ls}} .\n"

    def test_no_double_space_after_code_span(self):
        """Test no space is added when whitespace already follows."""
        doc = Document(children=[_para(Code(content="ls"), Text(content=" now"))])
        assert _render(doc) == "{{ls}} now\n"

    def test_pipe_escaped_only_in_tables(self):
        """Test the cell separator is escaped inside cells only."""
        doc = Document(
            children=[
                _para(Text(content="a|b")),
                Table(rows=[TableRow(cells=[TableCell(content=[Text(content="a|b")])])]),
            ]
        )
        assert _render(doc) == "a|b\n\n|a\\|b|\n"

    def test_pipe_escaped_in_link_text(self):
        """Test a pipe in link text cannot split the link."""
        doc = Document(children=[_para(Link(url="http://x", content=[Text(content="a|b")]))])
        assert _render(doc, "jira") == "[a\\|b|http://x]\n"

    def test_span_markers_in_text(self):
        """Test literal asterisks do not turn into bold."""
        doc = Document(children=[_para(Text(content="*not bold*"))])
        assert _render(doc, "jira") == "\\*not bold\\*\n"

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("# not a list", "\\# not a list\n"),
            ("h1. not a heading", "\\h1. not a heading\n"),
            ("bq. not a quote", "\\bq. not a quote\n"),
        ],
    )
    def test_paragraph_block_start_escaped(self, text, expected):
        """Test a paragraph cannot start with block markup."""
        doc = Document(children=[_para(Text(content=text))])
        assert _render(doc, "jira") == expected

    def test_block_start_kept_without_escaping(self):
        """Test block starts are left alone when escaping is off."""
        doc = Document(children=[_para(Text(content="# raw"))])
        assert _render(doc, escape_text=False) == "# raw\n"


@pytest.mark.unit
class TestLists:
    """Tests for list rendering."""

    def test_bullet_list(self):
        """Test a flat bullet list."""
        doc = Document(
            children=[
                List(
                    ordered=False,
                    items=[
                        ListItem(children=[_para(Text(content="one"))]),
                        ListItem(children=[_para(Text(content="two"))]),
                    ],
                )
            ]
        )
        assert _render(doc) == "* one\n* two\n"

    def test_nested_markers_stack(self):
        """Test a numbered list inside a bullet list uses *#."""
        inner = List(ordered=True, items=[ListItem(children=[_para(Text(content="sub"))])])
        doc = Document(
            children=[List(ordered=False, items=[ListItem(children=[_para(Text(content="top")), inner])])]
        )
        assert _render(doc, "jira") == "* top\n*# sub\n"

    def test_item_with_code_block(self):
        """Test blocks after the first paragraph follow on their own lines."""
        item = ListItem(children=[_para(Text(content="step")), CodeBlock(content="make", language="sh")])
        doc = Document(children=[List(ordered=True, items=[item])])
        assert _render(doc, "jira") == "# step\n{code:bash}\nmake\n{code}\n"


@pytest.mark.unit
class TestContainers:
    """Tests for quotes and tables."""

    def test_block_quote(self):
        """Test the quote macro wraps the body."""
        doc = Document(children=[BlockQuote(children=[_para(Text(content="a")), _para(Text(content="b"))])])
        assert _render(doc) == "{quote}\na\n\nb\n{quote}\n"

    def test_table(self):
        """Test header and body rows use different separators."""
        header = TableRow(
            cells=[TableCell(content=[Text(content="Name")]), TableCell(content=[Text(content="Value")])],
            is_header=True,
        )
        body = TableRow(cells=[TableCell(content=[Text(content="a")]), TableCell(content=[])])
        doc = Document(children=[Table(header=header, rows=[body])])
        assert _render(doc) == "||Name||Value||\n|a| |\n"

    def test_hard_break_in_table_cell(self):
        """Test a hard break inside a cell does not end the row."""
        cell = TableCell(content=[Text(content="a"), LineBreak(soft=False), Text(content="b")])
        doc = Document(children=[Table(rows=[TableRow(cells=[cell])])])
        assert _render(doc) == "|a\\\\ b|\n"

    def test_hard_break_in_list_item(self):
        """Test a hard break inside a list item does not end the item."""
        item = ListItem(children=[_para(Text(content="one"), LineBreak(soft=False), Text(content="two"))])
        doc = Document(children=[List(ordered=False, items=[item])])
        assert _render(doc, "jira") == "* one\\\\ two\n"

    def test_hard_break_in_heading(self):
        """Test a hard break inside a heading keeps it on one line."""
        heading = Heading(level=1, content=[Text(content="a"), LineBreak(soft=False), Text(content="b")])
        assert _render(Document(children=[heading]), "jira") == "h1. a\\\\ b\n"


@pytest.mark.unit
class TestTocAndRawHtml:
    """Tests for the TOC macro and raw HTML handling."""

    @pytest.mark.parametrize("dialect", ["jira", "confluence"])
    def test_toc_macro(self, dialect):
        """Test the TOC marker renders as the native macro."""
        doc = Document(children=[TocMarker(), Heading(level=1, content=[Text(content="A")])])
        assert _render(doc, dialect) == "{toc}\n\nh1. A\n"

    @pytest.mark.parametrize("dialect", ["jira", "confluence"])
    def test_details_verbatim(self, dialect):
        """Test raw HTML is emitted without conversion."""
        content = "<details>\n<summary>More</summary>\n\n**bold** {x}\n</details>"
        doc = Document(children=[RawHtmlBlock(content=content, tag="details")])
        assert _render(doc, dialect) == content + "\n"

    def test_details_expand(self):
        """Test expand mode converts details into the expand macro."""
        content = "<details>\n<summary>More  info</summary>\n\nHidden text\n</details>"
        doc = Document(children=[RawHtmlBlock(content=content, tag="details")])
        assert _render(doc, details_mode="expand") == "{expand|title=More info}\nHidden text\n{expand}\n"

    def test_details_expand_without_summary(self):
        """Test a details block without a summary gets an untitled macro."""
        doc = Document(children=[RawHtmlBlock(content="<details>body</details>", tag="details")])
        assert _render(doc, "jira", details_mode="expand") == "{expand}\nbody\n{expand}\n"

    def test_expand_leaves_other_blocks(self):
        """Test non-details raw blocks still pass through in expand mode."""
        doc = Document(children=[RawHtmlBlock(content="<div>x</div>", tag="other")])
        assert _render(doc, details_mode="expand") == "<div>x</div>\n"

    @pytest.mark.parametrize("content", ["<details/>", "<details />"])
    def test_self_closing_details_passthrough(self, content):
        """Test a self-closing details tag is not turned into an expand macro."""
        doc = Document(children=[RawHtmlBlock(content=content, tag="details")])
        assert _render(doc, "jira", details_mode="expand") == content + "\n"


@pytest.mark.unit
class TestRenderOutput:
    """Tests for BaseRenderer.render output targets."""

    def test_render_to_path(self, tmp_path):
        """Test writing to a file path."""
        target = tmp_path / "out.txt"
        AtlassianRenderer().render(Document(children=[_para(Text(content="ü"))]), target)
        assert target.read_text(encoding="utf-8") == "ü\n"

    def test_render_to_binary_stream(self, tmp_path):
        """Test writing to a binary stream encodes UTF-8."""
        target = tmp_path / "out.txt"
        with open(target, "wb") as handle:
            AtlassianRenderer().render(Document(children=[_para(Text(content="ü"))]), handle)
        assert target.read_bytes() == "ü\n".encode("utf-8")

    def test_render_to_text_stream(self):
        """Test writing to a text stream."""
        buffer = io.StringIO()
        AtlassianRenderer().render(Document(), buffer)
        assert buffer.getvalue() == "\n"

    def test_unwritable_path(self, tmp_path):
        """Test a missing directory raises OutputWriteError."""
        with pytest.raises(OutputWriteError):
            AtlassianRenderer().render(Document(), tmp_path / "missing" / "out.txt")
