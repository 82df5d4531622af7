"""
calendrical.schemas.cache
-------------------------
Fixed-size memo arena for the start of a year.

Slots are (tag, value) pairs indexed by year modulo the size of the arena,
the tag being the year itself. A read whose tag does not match recomputes
the value and overwrites the slot; slots are never cleared otherwise. The
arena only ever trades time for memory: results are the same with or
without it.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

logger = logging.getLogger(__name__)

DEFAULT_CACHE_SIZE = 1 << 10

# Tag of an empty slot. Not a valid year for any supported range.
_EMPTY = None


class StartOfYearCache:
    def __init__(self, compute: Callable[[int], int], size: int = DEFAULT_CACHE_SIZE) -> None:
        if size <= 0 or size & (size - 1):
            raise ValueError("size must be a positive power of two")
        self._compute = compute
        self._mask = size - 1
        self._slots: List[Tuple[Optional[int], int]] = [(_EMPTY, 0)] * size
        self.hits = 0
        self.misses = 0

    @property
    def size(self) -> int:
        return self._mask + 1

    def index_of(self, y: int) -> int:
        # Python's & on a negative int behaves like Euclidean modulo here.
        return y & self._mask

    def get(self, y: int) -> int:
        i = self.index_of(y)
        tag, value = self._slots[i]
        if tag == y:
            self.hits += 1
            return value
        self.misses += 1
        value = self._compute(y)
        self._slots[i] = (y, value)
        return value

    def stats(self) -> Tuple[int, int]:
        logger.debug("start-of-year cache size=%s hits=%s misses=%s", self.size, self.hits, self.misses)
        return self.hits, self.misses


class StartOfYearCaching:
    """
    Mixin memoizing get_start_of_year of the next class in the MRO.

    The arena is created on first use, one per schema instance.
    """

    cache_size: int = DEFAULT_CACHE_SIZE
    _start_of_year_cache: Optional[StartOfYearCache] = None

    @property
    def start_of_year_cache(self) -> StartOfYearCache:
        cache = self._start_of_year_cache
        if cache is None:
            cache = StartOfYearCache(super().get_start_of_year, self.cache_size)
            self._start_of_year_cache = cache
        return cache

    def get_start_of_year(self, y: int) -> int:
        return self.start_of_year_cache.get(y)
