#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2atlassian/renderers/dialects.py
"""Jira and Confluence wiki markup dialects.

A Dialect turns already-rendered pieces of a node into markup. Most of the
syntax is shared by both products; the dialects differ in how the ``{code}``
macro takes its language and in which image attributes they accept.

Examples
--------
    >>> get_dialect("jira").code_block("print(1)", "python")
    '{code:python}\\nprint(1)\\n{code}'
    >>> get_dialect("confluence").code_block("print(1)", "python")
    '{code:language=python}\\nprint(1)\\n{code}'

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from md2atlassian.exceptions import ValidationError


class Dialect(ABC):
    """Markup rules for one Atlassian wiki syntax."""

    name: str = ""

    @abstractmethod
    def code_block_open(self, language: str) -> str:
        """Return the opening ``{code}`` macro for a resolved language ("" for none)."""

    @abstractmethod
    def image(self, url: str, alt_text: str, title: Optional[str]) -> str:
        """Return the image markup."""

    def heading(self, level: int, text: str) -> str:
        return f"h{level}. {text}"

    def code_block(self, content: str, language: str) -> str:
        """Wrap code in the ``{code}`` macro, leaving the content verbatim."""
        opening = self.code_block_open(language)
        if not content:
            return f"{opening}\n{{code}}"
        return f"{opening}\n{content}\n{{code}}"

    def toc(self) -> str:
        return "{toc}"

    def emphasis(self, text: str) -> str:
        return f"_{text}_"

    def strong(self, text: str) -> str:
        return f"*{text}*"

    def strikethrough(self, text: str) -> str:
        return f"-{text}-"

    def code_span(self, code: str) -> str:
        return f"{{{{{code}}}}}"

    def link(self, text: str, url: str) -> str:
        if not text:
            return f"[{url}]"
        return f"[{text}|{url}]"

    def list_item(self, markers: str, text: str) -> str:
        return f"{markers} {text}"

    def thematic_break(self) -> str:
        return "----"

    def block_quote(self, body: str) -> str:
        return f"{{quote}}\n{body}\n{{quote}}"

    def table_row(self, cells: list[str], header: bool = False) -> str:
        separator = "||" if header else "|"
        return separator + separator.join(cells) + separator

    def hard_break(self, single_line: bool = False) -> str:
        # A newline would end the table row, list item or heading
        return "\\\\ " if single_line else "\n"

    def soft_break(self) -> str:
        return " "

    def expand(self, body: str, title: Optional[str] = None) -> str:
        opening = f"{{expand|title={title}}}" if title else "{expand}"
        return f"{opening}\n{body}\n{{expand}}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class JiraDialect(Dialect):
    """Jira wiki markup."""

    name = "jira"

    def code_block_open(self, language: str) -> str:
        return f"{{code:{language}}}" if language else "{code}"

    def image(self, url: str, alt_text: str, title: Optional[str]) -> str:
        # Jira's image macro has no title attribute
        if alt_text:
            return f"!{url}|alt={alt_text}!"
        return f"!{url}!"


class ConfluenceDialect(Dialect):
    """Confluence wiki markup."""

    name = "confluence"

    def code_block_open(self, language: str) -> str:
        return f"{{code:language={language}}}" if language else "{code}"

    def image(self, url: str, alt_text: str, title: Optional[str]) -> str:
        attributes = []
        if alt_text:
            attributes.append(f"alt={alt_text}")
        if title:
            attributes.append(f"title={title}")
        if attributes:
            return f"!{url}|{','.join(attributes)}!"
        return f"!{url}!"


_DIALECTS: dict[str, type[Dialect]] = {
    JiraDialect.name: JiraDialect,
    ConfluenceDialect.name: ConfluenceDialect,
}


def get_dialect(name: str) -> Dialect:
    """Look up a dialect by name.

    Parameters
    ----------
    name : str
        "jira" or "confluence" (case-insensitive)

    Returns
    -------
    Dialect
        A new dialect instance

    Raises
    ------
    ValidationError
        If the name is not a known dialect

    """
    dialect_class = _DIALECTS.get(name.lower()) if isinstance(name, str) else None
    if dialect_class is None:
        raise ValidationError(
            f"Unknown dialect {name!r}; expected one of {', '.join(sorted(_DIALECTS))}",
            parameter_name="dialect",
            parameter_value=name,
        )
    return dialect_class()


__all__ = ["Dialect", "JiraDialect", "ConfluenceDialect", "get_dialect"]
