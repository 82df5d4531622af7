"""
calendrical.arithmetic.base
---------------------------
Calendar-safe offsetting of dates.

Additions of months or years use the truncation policy: when the target
day does not exist, the result is the last day of the target month and the
number of days cut off is reported as the roundoff, a non-negative int.
Interpreting the roundoff differently (overspill, exact) is left to the
caller, see arithmetic.datemath.

The arithmetic requires a complete segment, made of whole years. Every
result is checked against it; leaving it raises CalendarOverflowError.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Tuple

from ..core.errors import PreconditionError
from ..core.types import DateParts, MonthParts, OrdinalParts
from ..segment import CalendricalSegment


class CalendricalArithmetic(ABC):
    def __init__(self, segment: CalendricalSegment) -> None:
        if segment is None:
            raise PreconditionError("A segment is required")
        # The fast paths only check years, so the segment must be made of whole years.
        if not segment.is_complete:
            raise PreconditionError(f"{segment!r} is not complete")
        self.segment = segment
        self.schema = segment.schema
        self.years_validator = segment.years_validator
        self.days_validator = segment.days_validator

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.segment!r})"

    # ---------------------------------------------------------
    # Operations on DateParts
    # ---------------------------------------------------------
    @abstractmethod
    def add_years(self, y: int, m: int, d: int, years: int) -> Tuple[DateParts, int]:
        """(y + years, m, d) with truncation, and the roundoff."""

    def add_months_to_date(self, y: int, m: int, d: int, months: int) -> Tuple[DateParts, int]:
        target = self.add_months(y, m, months)
        return self._truncate(target.year, target.month, d)

    def add_days_to_date(self, y: int, m: int, d: int, days: int) -> DateParts:
        dom = d + days
        if 1 <= dom <= self.schema.min_days_in_month or 1 <= dom <= self.schema.count_days_in_month(y, m):
            return DateParts(y, m, dom)
        days_since_epoch = self.add_days(self.schema.count_days_since_epoch(y, m, d), days)
        return self.schema.get_date_parts(days_since_epoch)

    def next_day(self, y: int, m: int, d: int) -> DateParts:
        sch = self.schema
        if d < sch.min_days_in_month or d < sch.count_days_in_month(y, m):
            return DateParts(y, m, d + 1)
        if m < sch.count_months_in_year(y):
            return DateParts(y, m + 1, 1)
        self.years_validator.check_upper_bound(y + 1)
        return DateParts(y + 1, 1, 1)

    def previous_day(self, y: int, m: int, d: int) -> DateParts:
        sch = self.schema
        if d > 1:
            return DateParts(y, m, d - 1)
        if m > 1:
            return DateParts(y, m - 1, sch.count_days_in_month(y, m - 1))
        self.years_validator.check_lower_bound(y - 1)
        m = sch.count_months_in_year(y - 1)
        return DateParts(y - 1, m, sch.count_days_in_month(y - 1, m))

    # ---------------------------------------------------------
    # Operations on OrdinalParts
    # ---------------------------------------------------------
    def add_years_ordinal(self, y: int, doy: int, years: int) -> Tuple[OrdinalParts, int]:
        y1 = y + years
        self.years_validator.check_overflow(y1)
        days_in_year = self.schema.count_days_in_year(y1)
        roundoff = max(0, doy - days_in_year)
        return OrdinalParts(y1, days_in_year if roundoff > 0 else doy), roundoff

    def add_days_ordinal(self, y: int, doy: int, days: int) -> OrdinalParts:
        n = doy + days
        if 1 <= n <= self.schema.min_days_in_year or 1 <= n <= self.schema.count_days_in_year(y):
            return OrdinalParts(y, n)
        days_since_epoch = self.add_days(self.schema.count_days_since_epoch_ordinal(y, doy), days)
        return self.schema.get_ordinal_parts(days_since_epoch)

    # ---------------------------------------------------------
    # Operations on MonthParts
    # ---------------------------------------------------------
    @abstractmethod
    def add_months(self, y: int, m: int, months: int) -> MonthParts:
        """Exact addition, no rounding involved."""

    def add_years_to_month(self, y: int, m: int, years: int) -> Tuple[MonthParts, int]:
        """(y + years, m) with truncation; the roundoff counts months."""
        y1 = y + years
        self.years_validator.check_overflow(y1)
        months_in_year = self.schema.count_months_in_year(y1)
        if m > months_in_year:
            return MonthParts(y1, months_in_year), m - months_in_year
        return MonthParts(y1, m), 0

    @abstractmethod
    def count_months_between(self, start: MonthParts, end: MonthParts) -> int: ...

    # ---------------------------------------------------------
    # Operations on day counts
    # ---------------------------------------------------------
    def add_days(self, days_since_epoch: int, days: int) -> int:
        result = days_since_epoch + days
        self.days_validator.check_overflow(result)
        return result

    # ---------------------------------------------------------
    # Helpers
    # ---------------------------------------------------------
    def _truncate(self, y: int, m: int, d: int) -> Tuple[DateParts, int]:
        days_in_month = self.schema.count_days_in_month(y, m)
        roundoff = max(0, d - days_in_month)
        return DateParts(y, m, days_in_month if roundoff > 0 else d), roundoff
