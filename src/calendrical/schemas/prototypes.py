"""
calendrical.schemas.prototypes
------------------------------
Generic (slow) implementations of the search algorithms of a schema.

The mixins below only rely on the primitive metadata of a schema
(count_days_in_month, count_days_in_year, count_months_in_year and the
min_* lower bounds). A concrete schema inherits them and shadows whichever
operations it knows a closed form for.

Costs:
- get_start_of_year, get_start_of_year_in_months: O(|y|).
- get_year: O(|y|) with the "linear" search, a few steps from a close
  first guess with the "guess" search when year lengths barely vary.
"""

from __future__ import annotations

from typing import Literal, Optional, Tuple

from ..core.types import MonthParts, Range
from .base import DEFAULT_SUPPORTED_YEARS, CalendricalSchema, RegularSchema
from .cache import StartOfYearCaching

YearSearch = Literal["linear", "guess"]


class PrototypalSchema:
    """Day-based searches (mixin, place before the schema base class)."""

    year_search: YearSearch = "guess"

    def count_days_in_year(self, y: int) -> int:
        return sum(self.count_days_in_month(y, m) for m in range(1, self.count_months_in_year(y) + 1))

    def count_days_in_year_before_month(self, y: int, m: int) -> int:
        return sum(self.count_days_in_month(y, i) for i in range(1, m))

    def get_start_of_year(self, y: int) -> int:
        if y < 1:
            return -sum(self.count_days_in_year(i) for i in range(y, 1))
        return sum(self.count_days_in_year(i) for i in range(1, y))

    def get_year(self, days_since_epoch: int) -> int:
        if self.year_search == "linear":
            return self._get_year_linear(days_since_epoch)
        return self._get_year_from_guess(days_since_epoch)

    def _get_year_linear(self, days_since_epoch: int) -> int:
        if days_since_epoch < 0:
            y = 0
            start = -self.count_days_in_year(0)
            while days_since_epoch < start:
                y -= 1
                start -= self.count_days_in_year(y)
            return y

        y = 1
        start = 0
        while True:
            end = start + self.count_days_in_year(y)
            if days_since_epoch < end:
                return y
            y += 1
            start = end

    def _get_year_from_guess(self, days_since_epoch: int) -> int:
        # A year has at least min_days_in_year days, hence the guess is never
        # below the true year for days >= 0 and never above it otherwise.
        y = 1 + days_since_epoch // self.min_days_in_year
        start = self.get_start_of_year(y)
        if days_since_epoch >= 0:
            while days_since_epoch < start:
                y -= 1
                start -= self.count_days_in_year(y)
        else:
            while days_since_epoch >= start + self.count_days_in_year(y):
                start += self.count_days_in_year(y)
                y += 1
        return y

    def get_month(self, y: int, doy: int) -> Tuple[int, int]:
        # Same idea as for the year: a guess based on the shortest possible
        # month is never below the true month.
        m = min(1 + (doy - 1) // self.min_days_in_month, self.count_months_in_year(y))
        before = self.count_days_in_year_before_month(y, m)
        while doy <= before:
            m -= 1
            before -= self.count_days_in_month(y, m)
        return m, doy - before


class PrototypalMonths:
    """Month-based searches for schemas without a fixed number of months per year."""

    def get_start_of_year_in_months(self, y: int) -> int:
        if y < 1:
            return -sum(self.count_months_in_year(i) for i in range(y, 1))
        return sum(self.count_months_in_year(i) for i in range(1, y))

    def get_month_parts(self, months_since_epoch: int) -> MonthParts:
        y = 1 + months_since_epoch // self.min_months_in_year
        start = self.get_start_of_year_in_months(y)
        if months_since_epoch >= 0:
            while months_since_epoch < start:
                y -= 1
                start -= self.count_months_in_year(y)
        else:
            while months_since_epoch >= start + self.count_months_in_year(y):
                start += self.count_months_in_year(y)
                y += 1
        return MonthParts(y, 1 + months_since_epoch - start)


class RegularSchemaPrototype(PrototypalSchema, RegularSchema):
    pass


class NonRegularSchemaPrototype(PrototypalMonths, PrototypalSchema, CalendricalSchema):
    def is_regular(self) -> Tuple[bool, int]:
        return False, 0


class PrototypeOf(NonRegularSchemaPrototype):
    """
    Forget every closed form of a schema but its primitive metadata.

    Only the leap rule, the month lengths, the month counts and the lower
    bounds are taken from the wrapped schema; everything else goes through
    the generic searches. Useful to check a closed form against the
    prototype algorithms.
    """

    def __init__(
        self,
        schema: CalendricalSchema,
        *,
        year_search: YearSearch = "guess",
        supported_years: Optional[Range] = None,
    ) -> None:
        super().__init__(
            min_days_in_year=schema.min_days_in_year,
            min_days_in_month=schema.min_days_in_month,
            min_months_in_year=schema.min_months_in_year,
            supported_years=supported_years or schema.supported_years,
        )
        self.schema = schema
        self.year_search = year_search
        self.name = f"prototype:{schema.name}"

    def __repr__(self) -> str:
        return f"PrototypeOf({self.schema!r}, year_search={self.year_search!r})"

    def is_regular(self) -> Tuple[bool, int]:
        return self.schema.is_regular()

    def is_leap_year(self, y: int) -> bool:
        return self.schema.is_leap_year(y)

    def is_intercalary_month(self, y: int, m: int) -> bool:
        return self.schema.is_intercalary_month(y, m)

    def is_intercalary_day(self, y: int, m: int, d: int) -> bool:
        return self.schema.is_intercalary_day(y, m, d)

    def is_supplementary_day(self, y: int, m: int, d: int) -> bool:
        return self.schema.is_supplementary_day(y, m, d)

    def count_months_in_year(self, y: int) -> int:
        return self.schema.count_months_in_year(y)

    def count_days_in_month(self, y: int, m: int) -> int:
        return self.schema.count_days_in_month(y, m)


class CachedPrototypeOf(StartOfYearCaching, PrototypeOf):
    """PrototypeOf with its O(|y|) start of year memoized."""


__all__ = [
    "DEFAULT_SUPPORTED_YEARS",
    "PrototypalSchema",
    "PrototypalMonths",
    "RegularSchemaPrototype",
    "NonRegularSchemaPrototype",
    "PrototypeOf",
    "CachedPrototypeOf",
]
