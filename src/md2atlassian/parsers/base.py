#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2atlassian/parsers/base.py
"""Base classes for document parsers.

This module defines the abstract base class for parsers that turn source
text into the md2atlassian AST, together with the input loading shared by
all of them.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from md2atlassian.ast import Document
from md2atlassian.exceptions import InvalidOptionsError, ParseFailure, ValidationError
from md2atlassian.options.base import BaseParserOptions

logger = logging.getLogger(__name__)

ParserInput = Union[str, bytes, Path, IO[bytes], IO[str]]


class BaseParser(ABC):
    """Abstract base class for document parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    Notes
    -----
    ``parse()`` accepts:
    - str: the document text itself (never interpreted as a path)
    - bytes: UTF-8 encoded document text
    - Path: a file to read as UTF-8
    - file-like object in text or binary mode

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Parameters
        ----------
        options : BaseParserOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        parser_name : str
            Name of the parser (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, input_data: ParserInput) -> Document:
        """Parse the input document into an AST.

        Parameters
        ----------
        input_data : str, bytes, Path or file-like
            The input document to parse

        Returns
        -------
        Document
            AST Document node representing the parsed document structure

        Raises
        ------
        ParseFailure
            If the input cannot be decoded as UTF-8 text

        """
        raise NotImplementedError

    @staticmethod
    def _load_text_content(input_data: ParserInput) -> str:
        """Load document text from the supported input types.

        Line endings are normalized to ``\\n``.

        Parameters
        ----------
        input_data : str, bytes, Path or file-like
            Input data to load

        Returns
        -------
        str
            Document text

        Raises
        ------
        ParseFailure
            If bytes are not valid UTF-8, or text holds code points that
            cannot be encoded as UTF-8 (lone surrogates)
        ValidationError
            If the input type is not supported

        """
        if isinstance(input_data, str):
            text = input_data
        elif isinstance(input_data, bytes):
            text = _decode_utf8(input_data)
        elif isinstance(input_data, Path):
            text = _decode_utf8(input_data.read_bytes())
        elif hasattr(input_data, "read"):
            data = input_data.read()
            text = _decode_utf8(data) if isinstance(data, bytes) else data
        else:
            raise ValidationError(
                f"Unsupported input type: {type(input_data).__name__}",
                parameter_name="input_data",
                parameter_value=input_data,
            )

        try:
            text.encode("utf-8")
        except UnicodeEncodeError as e:
            raise ParseFailure(
                f"Input contains a code point that is not valid UTF-8 at position {e.start}",
                position=e.start,
                original_error=e,
            ) from e

        if text.startswith("\ufeff"):
            text = text[1:]
        return text.replace("\r\n", "\n").replace("\r", "\n")


def _decode_utf8(data: bytes) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        logger.debug("Undecodable input byte at offset %d", e.start)
        raise ParseFailure(
            f"Input is not valid UTF-8 (offending byte at offset {e.start})",
            position=e.start,
            original_error=e,
        ) from e
