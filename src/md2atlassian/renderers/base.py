#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2atlassian/renderers/base.py
"""Base classes for AST renderers.

This module defines the abstract base class for renderers that turn the
md2atlassian AST into output text, plus the inline rendering helper shared
by text-based renderers.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from md2atlassian.ast import Document
from md2atlassian.ast.nodes import Node
from md2atlassian.exceptions import InvalidOptionsError, OutputWriteError
from md2atlassian.options.base import BaseRendererOptions


class BaseRenderer(ABC):
    """Abstract base class for AST renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def render_to_string(self, doc: Document) -> str:
        """Render the AST to a string.

        Parameters
        ----------
        doc : Document
            AST Document node to render

        Returns
        -------
        str
            Rendered document

        """
        raise NotImplementedError

    def render(self, doc: Document, output: Union[str, Path, IO[str], IO[bytes]]) -> None:
        """Render the AST and write it to a path or file-like object.

        Parameters
        ----------
        doc : Document
            AST Document node to render
        output : str, Path, or file-like
            Output destination

        Raises
        ------
        OutputWriteError
            If the output file cannot be written

        """
        self.write_text_output(self.render_to_string(doc), output)

    @staticmethod
    def write_text_output(text: str, output: Union[str, Path, IO[str], IO[bytes]]) -> None:
        """Write rendered text as UTF-8 to a path or file-like object."""
        if isinstance(output, (str, Path)):
            try:
                Path(output).write_text(text, encoding="utf-8")
            except OSError as e:
                raise OutputWriteError(str(output), original_error=e) from e
        elif hasattr(output, "mode") and "b" in output.mode:
            output.write(text.encode("utf-8"))  # type: ignore[arg-type]
        else:
            output.write(text)  # type: ignore[arg-type]


class InlineContentMixin:
    """Mixin providing inline content rendering for text-based renderers.

    The implementing class must have:
    - An ``_output`` attribute (list[str]) for accumulating output
    - Visitor methods that append to ``_output``

    Nodes listed in ``_separate_after`` are followed by a single space when
    the next rendered piece does not already start with whitespace.

    Examples
    --------
        >>> class MyRenderer(NodeVisitor, InlineContentMixin, BaseRenderer):
        ...     def visit_emphasis(self, node):
        ...         content = self._render_inline_content(node.content)
        ...         self._output.append(f"_{content}_")

    """

    _output: list[str]
    _separate_after: tuple[type[Node], ...] = ()

    def _render_inline_content(self, content: list[Node]) -> str:
        """Render a list of inline nodes to text.

        Parameters
        ----------
        content : list of Node
            Inline nodes to render

        Returns
        -------
        str
            Rendered inline content as a string

        """
        saved_output = self._output
        pieces: list[str] = []
        previous: Node | None = None

        for node in content:
            self._output = []
            node.accept(self)
            piece = "".join(self._output)
            if (
                previous is not None
                and isinstance(previous, self._separate_after)
                and piece
                and not piece[0].isspace()
            ):
                pieces.append(" ")
            pieces.append(piece)
            previous = node

        self._output = saved_output
        return "".join(pieces)
