"""
Core data types for the Drudge feed.

This module defines the records passed between the pipeline stages:
- Article: One headline link extracted from the page
- CacheEntry: The single cached document together with its fetch time
- SectionSpec: A named or column-addressed region of the page
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx
from bs4 import BeautifulSoup

from .errors import InvalidColumn

# Parsed page markup. Never mutated after parsing.
Document = BeautifulSoup

MIN_COLUMN = 1
MAX_COLUMN = 3


def check_column(index: object) -> int:
    """Return index if it is a valid column number, else raise InvalidColumn."""
    if isinstance(index, bool) or not isinstance(index, int):
        raise InvalidColumn(index)
    if index < MIN_COLUMN or index > MAX_COLUMN:
        raise InvalidColumn(index)
    return index


@dataclass(frozen=True)
class Article:
    """A headline linked from the page.

    Attributes:
        headline: The link text used on the page. It is likely not the
            linked article's actual headline.
        url: The article URL as linked to by the page
        image: The image shown next to the link, if there is one
    """

    headline: str
    url: httpx.URL
    image: httpx.URL | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "headline": self.headline,
            "url": str(self.url),
            "image": str(self.image) if self.image is not None else None,
        }


@dataclass(frozen=True)
class CacheEntry:
    """Contents of the cache slot.

    If document is None the entry is empty and fetched_at carries no meaning.
    Entries are replaced whole, never modified.
    """

    document: Document | None = None
    fetched_at: float = 0.0

    @property
    def empty(self) -> bool:
        return self.document is None


EMPTY_ENTRY = CacheEntry()


@dataclass(frozen=True)
class SectionSpec:
    """A region of the page to extract articles from.

    Exactly one of name (an element id) or column (an index in [1, 3]) is set.
    """

    name: str | None = None
    column: int | None = None
    title: str = ""

    @classmethod
    def named(cls, name: str, title: str | None = None) -> SectionSpec:
        return cls(name=name, title=title or name)

    @classmethod
    def for_column(cls, index: int) -> SectionSpec:
        index = check_column(index)
        return cls(column=index, title=f"Column {index}")

    @classmethod
    def parse(cls, token: str, top_id: str) -> SectionSpec:
        """Map a CLI section token to a spec.

        "top" selects the top stories region, an integer selects a column
        and "#some_id" selects the element with that id.

        Raises:
            InvalidColumn: For an integer outside [1, 3]
            ValueError: For any other token

        Examples:
            >>> SectionSpec.parse("2", "app_topstories").column
            2
            >>> SectionSpec.parse("top", "app_topstories").name
            'app_topstories'
        """
        token = token.strip()
        if token.lower() == "top":
            return cls.named(top_id, title="Top")
        if token.lstrip("+-").isdigit():
            return cls.for_column(int(token))
        if token.startswith("#") and len(token) > 1:
            return cls.named(token[1:])
        raise ValueError(f"unknown section: {token!r}")

    @property
    def is_column(self) -> bool:
        return self.column is not None

    def describe(self) -> str:
        if self.is_column:
            return f"column {self.column}"
        return f"#{self.name}"
