"""md2atlassian - convert Markdown to Jira and Confluence wiki markup.

The conversion runs as a short pipeline over a document tree:

1. The Markdown parser (mistune plus a raw ``<details>`` scanner) builds a
   Document and assigns unique heading ids.
2. ``HeadingOffsetTransform`` shifts heading levels, clamped to 1-6.
3. ``InsertTocMarkerTransform`` optionally prepends a table of contents.
4. ``AtlassianRenderer`` emits Jira or Confluence markup through a dialect
   object, resolving code languages through a static alias table.

Examples
--------
    >>> from md2atlassian import convert
    >>> convert("# Title\\n\\n```sh\\nls\\n```", dialect="jira")
    'h1. Title\\n\\n{code:bash}\\nls\\n{code}\\n'

Working with the tree directly:

    >>> from md2atlassian import render, to_ast
    >>> doc = to_ast("## Notes", heading_delta=-1, emit_toc=True)
    >>> render(doc, "confluence")
    '{toc}\\n\\nh1. Notes\\n'

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import logging

__version__ = "0.3.0"

from md2atlassian.api import convert, render, to_ast  # noqa: E402
from md2atlassian.exceptions import (  # noqa: E402
    Md2AtlassianError,
    ParseFailure,
    ParsingError,
    RenderingError,
    TransformError,
    ValidationError,
)
from md2atlassian.options import AtlassianRendererOptions, MarkdownParserOptions  # noqa: E402

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "convert",
    "to_ast",
    "render",
    "AtlassianRendererOptions",
    "MarkdownParserOptions",
    "Md2AtlassianError",
    "ValidationError",
    "ParsingError",
    "ParseFailure",
    "RenderingError",
    "TransformError",
]
