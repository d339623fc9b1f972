"""Tests for the single-slot timed cache."""

from __future__ import annotations

import threading

from drudge_feed.cache import DEFAULT_TTL_SECONDS, TimedCache


def test_fresh_cache_is_empty(clock):
    cache = TimedCache(clock=clock)

    assert cache.load() is None
    assert cache.snapshot().empty


def test_default_ttl_is_one_hour():
    assert TimedCache().ttl == DEFAULT_TTL_SECONDS == 3600


def test_load_returns_stored_document_within_ttl(clock):
    cache = TimedCache(clock=clock)
    doc = object()
    cache.store(doc, clock.now)

    assert cache.load() is doc
    clock.now += 1800
    assert cache.load() is doc
    clock.now += 1800  # exactly one hour old
    assert cache.load() is doc


def test_load_returns_none_after_ttl_and_clears_slot(clock):
    cache = TimedCache(clock=clock)
    cache.store(object(), clock.now)

    clock.now += 3600.001
    assert cache.load() is None
    assert cache.snapshot().empty

    # Rewinding the clock does not resurrect the cleared entry.
    clock.now -= 1000
    assert cache.load() is None


def test_store_defaults_to_current_clock_time(clock):
    cache = TimedCache(ttl=10, clock=clock)
    doc = object()
    clock.now = 500.0
    cache.store(doc)

    assert cache.snapshot().fetched_at == 500.0
    clock.now = 511.0
    assert cache.load() is None


def test_later_store_replaces_earlier(clock):
    cache = TimedCache(clock=clock)
    first, second = object(), object()
    cache.store(first, clock.now)
    cache.store(second, clock.now)

    assert cache.load() is second


def test_clear_empties_slot(clock):
    cache = TimedCache(clock=clock)
    cache.store(object(), clock.now)
    cache.clear()

    assert cache.load() is None


def test_concurrent_load_and_store_never_see_partial_entry():
    cache = TimedCache()
    docs = [object() for _ in range(8)]
    seen: list[object] = []
    errors: list[BaseException] = []

    def writer(doc):
        for _ in range(500):
            cache.store(doc)

    def reader():
        try:
            for _ in range(500):
                entry = cache.snapshot()
                if not entry.empty:
                    assert entry.document in docs
                    assert entry.fetched_at > 0
                value = cache.load()
                if value is not None:
                    seen.append(value)
        except BaseException as exc:  # noqa: BLE001
            errors.append(exc)

    threads = [threading.Thread(target=writer, args=(doc,)) for doc in docs]
    threads += [threading.Thread(target=reader) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert errors == []
    assert all(value in docs for value in seen)
    assert cache.load() in docs
