"""
calendrical.arithmetic.plain
----------------------------
Arithmetic for schemas whose number of months varies from year to year.

Month additions go through the count of months since the epoch. Adding
years to a month missing from the target year (the thirteenth month of an
embolismic year, say) lands on the last month of the target year.
"""

from __future__ import annotations

from typing import Tuple

from ..core.types import CalendricalProfile, DateParts, MonthParts
from ..schemas.base import LUNISOLAR_MIN_DAYS_IN_MONTH, require_profile
from ..segment import CalendricalSegment
from .base import CalendricalArithmetic


class PlainArithmetic(CalendricalArithmetic):
    def add_months(self, y: int, m: int, months: int) -> MonthParts:
        months_since_epoch = self.schema.count_months_since_epoch(y, m) + months
        parts = self.schema.get_month_parts(months_since_epoch)
        self.years_validator.check_overflow(parts.year)
        return parts

    def count_months_between(self, start: MonthParts, end: MonthParts) -> int:
        sch = self.schema
        return sch.count_months_since_epoch(end.year, end.month) \
            - sch.count_months_since_epoch(start.year, start.month)

    def add_years(self, y: int, m: int, d: int, years: int) -> Tuple[DateParts, int]:
        y1 = y + years
        self.years_validator.check_overflow(y1)

        sch = self.schema
        months_in_year = sch.count_months_in_year(y1)
        if m <= months_in_year:
            return self._truncate(y1, m, d)

        # The days of month m and of the months between the last month of
        # y1 and m (counted in the starting year) are all lost.
        roundoff = d
        for i in range(months_in_year + 1, m):
            roundoff += sch.count_days_in_month(y, i)
        days_in_month = sch.count_days_in_month(y1, months_in_year)
        roundoff += max(0, d - days_in_month)
        return DateParts(y1, months_in_year, days_in_month), roundoff


class LunisolarArithmetic(PlainArithmetic):
    def __init__(self, segment: CalendricalSegment) -> None:
        require_profile(segment.schema, CalendricalProfile.LUNISOLAR)
        super().__init__(segment)

    def _truncate(self, y: int, m: int, d: int) -> Tuple[DateParts, int]:
        if d <= LUNISOLAR_MIN_DAYS_IN_MONTH:
            return DateParts(y, m, d), 0
        return super()._truncate(y, m, d)
