# tests/test_cache.py

import logging

import pytest

from calendrical.schemas.cache import DEFAULT_CACHE_SIZE, StartOfYearCache


class _Counter:
    def __init__(self):
        self.calls = []

    def __call__(self, y):
        self.calls.append(y)
        return 365 * (y - 1)


def test_size_must_be_a_power_of_two():
    for size in (0, -4, 3, 1000):
        with pytest.raises(ValueError):
            StartOfYearCache(_Counter(), size)
    assert StartOfYearCache(_Counter()).size == DEFAULT_CACHE_SIZE


def test_second_read_is_a_hit():
    compute = _Counter()
    cache = StartOfYearCache(compute, 8)
    assert cache.get(5) == 1460
    assert cache.get(5) == 1460
    assert compute.calls == [5]
    assert (cache.hits, cache.misses) == (1, 1)


def test_colliding_years_overwrite_the_slot():
    compute = _Counter()
    cache = StartOfYearCache(compute, 8)
    assert cache.index_of(3) == cache.index_of(11) == cache.index_of(-5)
    cache.get(3)
    cache.get(11)
    assert cache.get(3) == 730
    assert compute.calls == [3, 11, 3]
    assert cache.misses == 3


def test_negative_years_are_cached():
    compute = _Counter()
    cache = StartOfYearCache(compute, 4)
    assert cache.index_of(-1) == 3
    assert cache.get(-1) == -730
    assert cache.get(-1) == -730
    assert compute.calls == [-1]


def test_stats_are_logged(caplog):
    cache = StartOfYearCache(_Counter(), 2)
    cache.get(0)
    cache.get(0)
    with caplog.at_level(logging.DEBUG, logger="calendrical.schemas.cache"):
        assert cache.stats() == (1, 1)
    assert "hits=1" in caplog.text
