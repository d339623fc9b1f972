"""
Document source backed by the time-bounded cache.

get() returns the cached document while it is fresh. Otherwise it fetches
the page, parses it and stores the result. Concurrent callers that all see
an empty or stale cache each fetch independently; the cache keeps whichever
store lands last.
"""

from __future__ import annotations

import logging
from typing import Protocol

from bs4 import BeautifulSoup, FeatureNotFound, ParserRejectedMarkup

from .cache import TimedCache
from .config import SourceConfig
from .errors import ParseError
from .fetcher import FetchResult, PageFetcher
from .types import Document

logger = logging.getLogger("drudge_feed.source")


class Fetcher(Protocol):
    def fetch(self, url: str) -> FetchResult: ...


def parse_document(content: bytes | str, parser: str = "html.parser", encoding: str | None = None) -> Document:
    """Parse a response body into a document tree.

    Raises:
        ParseError: If the body is empty, cannot be decoded, or the parser
            rejects it or is not installed
    """
    if not content or not content.strip():
        raise ParseError("empty response body")
    try:
        if isinstance(content, bytes):
            return BeautifulSoup(content, parser, from_encoding=encoding)
        return BeautifulSoup(content, parser)
    except FeatureNotFound as exc:
        raise ParseError(f"parser {parser!r} is not available: {exc}") from exc
    except (ParserRejectedMarkup, UnicodeDecodeError, LookupError) as exc:
        raise ParseError(f"{type(exc).__name__}: {exc}") from exc


class DocumentSource:
    """Provides the current parsed page, fetching it when the cache is empty.

    Attributes:
        cfg: Source settings (URL, parser backend)
        cache: The shared single-slot cache
        fetcher: Transport used on a cache miss
    """

    def __init__(
        self,
        cfg: SourceConfig,
        cache: TimedCache | None = None,
        fetcher: Fetcher | None = None,
    ):
        self.cfg = cfg
        self.cache = cache if cache is not None else TimedCache()
        self.fetcher = fetcher if fetcher is not None else PageFetcher(cfg)

    def get(self) -> Document:
        """Return the current document.

        Raises:
            FetchError: On transport failure
            ParseError: On malformed markup
        """
        cached = self.cache.load()
        if cached is not None:
            logger.debug("cache hit for %s", self.cfg.url)
            return cached

        logger.info("fetching %s", self.cfg.url)
        result = self.fetcher.fetch(self.cfg.url)
        document = parse_document(result.content, self.cfg.parser, result.encoding)
        self.cache.store(document, self.cache.now())
        return document
