"""
Client for reading headlines from the Drudge Report.

A DrudgeClient caches the parsed page it fetches. The cache is refreshed
once the configured TTL (an hour by default) has passed since the last
fetch. The client is safe for concurrent use.
"""

from __future__ import annotations

import logging

from .cache import TimedCache
from .config import AppConfig
from .extractor import extract_articles
from .fetcher import PageFetcher
from .locator import SectionLocator
from .logging_utils import log_event
from .source import DocumentSource, Fetcher
from .types import Article, SectionSpec

logger = logging.getLogger("drudge_feed")


class DrudgeClient:
    def __init__(
        self,
        cfg: AppConfig | None = None,
        source: DocumentSource | None = None,
        fetcher: Fetcher | None = None,
    ):
        self.cfg = cfg if cfg is not None else AppConfig()
        if source is None:
            source = DocumentSource(
                self.cfg.source,
                cache=TimedCache(ttl=self.cfg.cache.ttl_seconds),
                fetcher=fetcher if fetcher is not None else PageFetcher(self.cfg.source),
            )
        self.source = source
        self.locator = SectionLocator(self.cfg.sections)

    def top(self) -> list[Article]:
        """Articles in the top section of the page, including the main headline."""
        return self.section(SectionSpec.named(self.cfg.sections.top_id, title="Top"))

    def column(self, index: int) -> list[Article]:
        """Articles in one of the three columns.

        Raises:
            InvalidColumn: If index is not in [1, 3]
        """
        return self.section(SectionSpec.for_column(index))

    def section(self, spec: SectionSpec) -> list[Article]:
        # Validate the address before touching the network.
        self.locator.matcher(spec)
        document = self.source.get()
        root = self.locator.locate(document, spec)
        articles = extract_articles(root, self.locator.stop_marker(spec))
        log_event(
            logger,
            "extracted section",
            section=spec.describe(),
            articles=len(articles),
            images=sum(1 for a in articles if a.image is not None),
        )
        return articles
