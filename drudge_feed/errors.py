"""
Error types raised by the Drudge feed core.

Every failure is surfaced to the immediate caller as one of these types.
Nothing is retried internally; a stale cache entry is not an error.
"""

from __future__ import annotations


class DrudgeError(Exception):
    """Base class for all errors raised by drudge_feed."""


class FetchError(DrudgeError):
    """The page could not be retrieved (network failure or non-2xx status)."""

    def __init__(self, url: str, message: str, status_code: int | None = None):
        super().__init__(f"failed to fetch {url}: {message}")
        self.url = url
        self.status_code = status_code


class ParseError(DrudgeError):
    """The response body could not be parsed into a document."""


class SectionNotFound(DrudgeError):
    """The requested region does not exist in the current document."""

    def __init__(self, section: str):
        super().__init__(f"section not found: {section}")
        self.section = section


class InvalidColumn(DrudgeError, ValueError):
    """A column index outside [1, 3] was requested."""

    def __init__(self, index: object):
        super().__init__(f"bad column number: {index!r} (expected 1, 2 or 3)")
        self.index = index


class MalformedURL(DrudgeError):
    """A link target or image source is not a syntactically valid URL."""

    def __init__(self, value: str, reason: str):
        super().__init__(f"malformed URL {value!r}: {reason}")
        self.value = value
