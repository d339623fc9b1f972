"""
Single-slot, time-bounded document cache.

The slot holds one immutable CacheEntry. Every operation swaps the whole
entry, so readers observe either a complete prior store or the empty state.
Expiry is checked lazily on read; there are no background timers.
"""

from __future__ import annotations

import threading
import time
from typing import Callable

from .types import EMPTY_ENTRY, CacheEntry, Document

DEFAULT_TTL_SECONDS = 60 * 60


class TimedCache:
    """Holds at most one parsed document and the time it was fetched.

    Safe for concurrent load/store from multiple threads. No ordering is
    guaranteed between concurrent stores: the last writer wins.

    Attributes:
        ttl: Maximum age in seconds before a stored document is stale
    """

    def __init__(
        self,
        ttl: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.time,
    ):
        self.ttl = ttl
        self._clock = clock
        self._entry: CacheEntry = EMPTY_ENTRY
        self._lock = threading.Lock()

    def now(self) -> float:
        return self._clock()

    def load(self) -> Document | None:
        """Return the cached document, or None if empty or stale.

        A stale entry is cleared so later loads see the empty state directly.
        """
        with self._lock:
            entry = self._entry
        if entry.empty:
            return None

        if self._clock() - entry.fetched_at > self.ttl:
            with self._lock:
                # Only clear the entry judged stale, not a newer concurrent store.
                if self._entry is entry:
                    self._entry = EMPTY_ENTRY
            return None

        return entry.document

    def store(self, document: Document, fetched_at: float | None = None) -> None:
        entry = CacheEntry(
            document=document,
            fetched_at=self._clock() if fetched_at is None else fetched_at,
        )
        with self._lock:
            self._entry = entry

    def clear(self) -> None:
        with self._lock:
            self._entry = EMPTY_ENTRY

    def snapshot(self) -> CacheEntry:
        """Current entry, without checking its age."""
        with self._lock:
            return self._entry
