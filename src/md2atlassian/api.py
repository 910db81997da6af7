"""The exported API functions for Markdown to Atlassian conversion."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/md2atlassian/api.py
import logging
from typing import Optional

from md2atlassian.ast.nodes import Document
from md2atlassian.constants import DEFAULT_DIALECT, DEFAULT_EMIT_TOC, DEFAULT_HEADING_DELTA, DIALECT_NAMES
from md2atlassian.exceptions import ValidationError
from md2atlassian.options.atlassian import AtlassianRendererOptions
from md2atlassian.options.markdown import MarkdownParserOptions
from md2atlassian.parsers.base import ParserInput
from md2atlassian.parsers.markdown import MarkdownToAstConverter
from md2atlassian.renderers.atlassian import AtlassianRenderer
from md2atlassian.transforms.builtin import HeadingOffsetTransform, InsertTocMarkerTransform
from md2atlassian.utils.timing import debug_timer

logger = logging.getLogger(__name__)


def _normalize_dialect(dialect: str) -> str:
    normalized = dialect.lower() if isinstance(dialect, str) else dialect
    if normalized not in DIALECT_NAMES:
        raise ValidationError(
            f"Unknown dialect {dialect!r}; expected one of {', '.join(DIALECT_NAMES)}",
            parameter_name="dialect",
            parameter_value=dialect,
        )
    return normalized


def to_ast(
    source: ParserInput,
    *,
    heading_delta: int = DEFAULT_HEADING_DELTA,
    emit_toc: bool = DEFAULT_EMIT_TOC,
    parser_options: Optional[MarkdownParserOptions] = None,
) -> Document:
    """Parse Markdown and apply the heading and TOC passes.

    Parameters
    ----------
    source : str, bytes, Path or file-like
        Markdown document
    heading_delta : int, default 0
        Signed amount added to every heading level (clamped to 1-6)
    emit_toc : bool, default False
        Prepend a table-of-contents marker
    parser_options : MarkdownParserOptions, optional
        Parser configuration

    Returns
    -------
    Document
        Transformed document tree

    Raises
    ------
    ParseFailure
        If the input is not valid UTF-8

    Examples
    --------
        >>> doc = to_ast("## Title", heading_delta=-1)
        >>> doc.children[0].level
        1

    """
    with debug_timer(logger, "Parsing"):
        document = MarkdownToAstConverter(parser_options).parse(source)

    if heading_delta:
        document = HeadingOffsetTransform(offset=heading_delta).transform(document)  # type: ignore[assignment]
    if emit_toc:
        document = InsertTocMarkerTransform().transform(document)  # type: ignore[assignment]
    return document


def render(
    document: Document,
    dialect: Optional[str] = None,
    *,
    options: Optional[AtlassianRendererOptions] = None,
) -> str:
    """Render a document tree as Atlassian wiki markup.

    Parameters
    ----------
    document : Document
        Tree to render
    dialect : {"jira", "confluence"}, optional
        Target dialect; overrides ``options.dialect`` when given
    options : AtlassianRendererOptions, optional
        Renderer configuration

    Returns
    -------
    str
        Markup ending in exactly one newline

    Raises
    ------
    ValidationError
        If the dialect name is unknown

    """
    options = options or AtlassianRendererOptions()
    if dialect is not None:
        options = options.create_updated(dialect=_normalize_dialect(dialect))

    with debug_timer(logger, f"Rendering ({options.dialect})"):
        return AtlassianRenderer(options).render_to_string(document)


def convert(
    markdown: ParserInput,
    dialect: Optional[str] = None,
    heading_delta: int = DEFAULT_HEADING_DELTA,
    emit_toc: bool = DEFAULT_EMIT_TOC,
    options: Optional[AtlassianRendererOptions] = None,
    *,
    parser_options: Optional[MarkdownParserOptions] = None,
) -> str:
    """Convert Markdown to Jira or Confluence wiki markup.

    Parameters
    ----------
    markdown : str, bytes, Path or file-like
        Markdown document
    dialect : {"jira", "confluence"}, optional
        Target dialect. Defaults to ``options.dialect``, which itself
        defaults to "confluence".
    heading_delta : int, default 0
        Signed amount added to every heading level (clamped to 1-6)
    emit_toc : bool, default False
        Emit the dialect's ``{toc}`` macro before the content
    options : AtlassianRendererOptions, optional
        Renderer configuration
    parser_options : MarkdownParserOptions, optional
        Parser configuration

    Returns
    -------
    str
        Wiki markup ending in exactly one newline

    Raises
    ------
    ParseFailure
        If the input is not valid UTF-8
    ValidationError
        If the dialect name is unknown

    Examples
    --------
        >>> convert("```js\\nx\\n```", dialect="jira")
        '{code:javascript}\\nx\\n{code}\\n'
        >>> convert("# A\\n", heading_delta=2)
        'h3. A\\n'

    """
    if dialect is not None:
        dialect = _normalize_dialect(dialect)
    elif options is None:
        dialect = DEFAULT_DIALECT

    document = to_ast(markdown, heading_delta=heading_delta, emit_toc=emit_toc, parser_options=parser_options)
    return render(document, dialect, options=options)
