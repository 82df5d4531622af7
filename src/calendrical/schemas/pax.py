"""
calendrical.schemas.pax
-----------------------
Pax calendar: 13 months of 28 days; a leap year inserts the one-week month
Pax between the twelfth month and December, which becomes the fourteenth
month.

Leap years: years ending in 99, and years whose last two digits are a
multiple of 6 (00 included) except the multiples of 400.

The year searches are the generic ones. The month of a day of the year and
the start of the year, counted in days or in months, have closed forms.
"""

from __future__ import annotations

from typing import Tuple

from ..core.types import Range
from .prototypes import NonRegularSchemaPrototype

DAYS_PER_WEEK = 7
DAYS_PER_COMMON_YEAR = 364
SUPPORTED_YEARS = Range(1, 999_999)


class PaxSchema(NonRegularSchemaPrototype):
    name = "pax"

    def __init__(self, *, supported_years: Range = SUPPORTED_YEARS) -> None:
        super().__init__(
            min_days_in_year=DAYS_PER_COMMON_YEAR,
            min_days_in_month=DAYS_PER_WEEK,
            min_months_in_year=13,
            supported_years=supported_years,
        )

    def is_leap_year(self, y: int) -> bool:
        Y = y % 100
        return Y == 99 or (Y % 6 == 0 and (Y != 0 or y % 400 != 0))

    def is_intercalary_month(self, y: int, m: int) -> bool:
        return m == 13 and self.is_leap_year(y)

    def count_months_in_year(self, y: int) -> int:
        return 14 if self.is_leap_year(y) else 13

    def count_days_in_year(self, y: int) -> int:
        return DAYS_PER_COMMON_YEAR + DAYS_PER_WEEK if self.is_leap_year(y) else DAYS_PER_COMMON_YEAR

    def count_days_in_month(self, y: int, m: int) -> int:
        return DAYS_PER_WEEK if m == 13 and self.is_leap_year(y) else 28

    def count_days_in_year_before_month(self, y: int, m: int) -> int:
        return 343 if m == 14 else 28 * (m - 1)

    def count_weeks_in_year(self, y: int) -> int:
        return 53 if self.is_leap_year(y) else 52

    def _count_leap_years_before(self, y: int) -> int:
        y -= 1
        C, Y = divmod(y, 100)
        return 18 * C - (C >> 2) + Y // 6 + Y // 99

    def get_start_of_year(self, y: int) -> int:
        return DAYS_PER_COMMON_YEAR * (y - 1) + DAYS_PER_WEEK * self._count_leap_years_before(y)

    def get_start_of_year_in_months(self, y: int) -> int:
        return 13 * (y - 1) + self._count_leap_years_before(y)

    def get_month(self, y: int, doy: int) -> Tuple[int, int]:
        if doy > 343 and self.is_leap_year(y):
            return 14, doy - 343
        d0y = doy - 1
        m = min(1 + d0y // 28, 13)
        return m, doy - 28 * (m - 1)
