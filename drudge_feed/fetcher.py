"""
HTTP page fetching with httpx.

A single unparameterized GET against the configured page address. Any
transport failure or non-success status is reported as FetchError; nothing
is retried here.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging

import httpx

from .config import SourceConfig
from .errors import FetchError

logger = logging.getLogger("drudge_feed.fetcher")


@dataclass
class FetchResult:
    """Result of a successful HTTP fetch.

    Attributes:
        url: The URL that was requested
        status_code: HTTP status code of the final response
        content: The raw response body
        encoding: Character encoding declared by the response, if any
    """

    url: str
    status_code: int
    content: bytes
    encoding: str | None = None


class PageFetcher:
    """Fetches the page with a synchronous httpx client.

    The client follows redirects and respects system proxy settings when
    trust_env is enabled. A transport may be supplied to replace the network,
    e.g. an httpx.MockTransport in tests.
    """

    def __init__(self, cfg: SourceConfig, transport: httpx.BaseTransport | None = None):
        self.cfg = cfg
        self._transport = transport

    def fetch(self, url: str) -> FetchResult:
        """Fetch a URL.

        Args:
            url: The URL to fetch

        Returns:
            FetchResult with the response body

        Raises:
            FetchError: On network failure or a status outside 2xx
        """
        headers = {"User-Agent": self.cfg.user_agent}
        try:
            with httpx.Client(
                timeout=self.cfg.timeout_seconds,
                headers=headers,
                follow_redirects=True,
                trust_env=self.cfg.trust_env,
                transport=self._transport,
            ) as client:
                resp = client.get(url)
        except httpx.HTTPError as exc:
            raise FetchError(url, f"{type(exc).__name__}: {exc}") from exc

        if not resp.is_success:
            raise FetchError(
                url,
                f"HTTP {resp.status_code} {resp.reason_phrase}",
                status_code=resp.status_code,
            )

        logger.debug("GET %s -> %s (%d bytes)", url, resp.status_code, len(resp.content))
        return FetchResult(
            url=url,
            status_code=resp.status_code,
            content=resp.content,
            encoding=resp.charset_encoding,
        )
