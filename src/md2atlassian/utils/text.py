#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2atlassian/utils/text.py
"""Text processing utilities for heading ids.

Functions
---------
slugify : Convert heading text to an anchor slug
make_unique_slug : Disambiguate repeated slugs with a numeric suffix

Examples
--------
    >>> slugify("My Heading Title")
    'my-heading-title'
    >>> seen = {}
    >>> make_unique_slug("intro", seen)
    'intro'
    >>> make_unique_slug("intro", seen)
    'intro-2'

"""

from __future__ import annotations

import re
import unicodedata

DEFAULT_SLUG = "section"


def make_unique_slug(slug: str, seen_slugs: dict[str, int], separator: str = "-") -> str:
    """Generate a unique slug, appending a counter to duplicates.

    The first occurrence of a slug is returned bare; later occurrences get
    suffixes starting at 2. A generated ``intro-2`` is itself recorded, so
    a heading literally titled "Intro 2" that comes afterwards becomes
    ``intro-2-2`` instead of colliding.

    Parameters
    ----------
    slug : str
        Base slug to make unique
    seen_slugs : dict[str, int]
        Occurrence counts keyed by slug (mutated in-place)
    separator : str, default = "-"
        Separator placed before the numeric suffix

    Returns
    -------
    str
        Unique slug

    """
    if slug not in seen_slugs:
        seen_slugs[slug] = 1
        return slug

    count = seen_slugs[slug]
    while True:
        count += 1
        candidate = f"{slug}{separator}{count}"
        if candidate not in seen_slugs:
            break

    seen_slugs[slug] = count
    seen_slugs[candidate] = 1
    return candidate


def slugify(text: str, *, max_length: int = 100, separator: str = "-") -> str:
    """Create a GitHub-style anchor slug from text.

    Parameters
    ----------
    text : str
        Heading text
    max_length : int, default = 100
        Maximum slug length
    separator : str, default = "-"
        Separator between words

    Returns
    -------
    str
        Lower-case slug, ``"section"`` when nothing usable remains

    """
    normalized = unicodedata.normalize("NFD", text)
    normalized = "".join(char for char in normalized if unicodedata.category(char) != "Mn")

    slug = normalized.lower()
    slug = re.sub(r"[\s_]+", separator, slug)

    escaped_sep = re.escape(separator)
    slug = re.sub(rf"[^a-z0-9\-{escaped_sep}]", "", slug)
    slug = re.sub(rf"(?:{escaped_sep})+", separator, slug)
    slug = slug.strip(separator)

    if not slug:
        slug = DEFAULT_SLUG

    if len(slug) > max_length:
        slug = slug[:max_length].rstrip(separator)

    return slug


__all__ = [
    "slugify",
    "make_unique_slug",
]
