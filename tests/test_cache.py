import time

import pytest

from pokedexcli.cache import Cache


@pytest.mark.parametrize(
    ("key", "value"),
    [
        ("https://example.com", b"testdata"),
        ("https://example.com/path", b"moretestdata"),
    ],
)
def test_add_get(key, value):
    cache = Cache(5)
    try:
        cache.add(key, value)
        assert cache.get(key) == value
    finally:
        cache.close()


def test_get_missing_key_returns_none():
    with Cache(5) as cache:
        cache.add("https://example.com", b"testdata")
        assert cache.get("https://example.com/other") is None


def test_add_replaces_existing_value():
    with Cache(5) as cache:
        cache.add("https://example.com", b"first")
        cache.add("https://example.com", b"second")
        assert cache.get("https://example.com") == b"second"


def test_reap_loop_removes_stale_entries():
    cache = Cache(0.005)
    try:
        cache.add("https://example.com", b"testdata")
        assert cache.get("https://example.com") == b"testdata"

        deadline = time.monotonic() + 2.0
        while cache.get("https://example.com") is not None and time.monotonic() < deadline:
            time.sleep(0.005)

        assert cache.get("https://example.com") is None
    finally:
        cache.close()


def test_entries_survive_within_interval():
    with Cache(5) as cache:
        cache.add("https://example.com", b"testdata")
        time.sleep(0.02)
        assert cache.get("https://example.com") == b"testdata"


@pytest.mark.parametrize("interval", [0, -1])
def test_non_positive_interval_rejected(interval):
    with pytest.raises(ValueError):
        Cache(interval)


def test_context_manager_returns_cache():
    with Cache(5) as cache:
        cache.add("k", b"v")
        assert cache.get("k") == b"v"