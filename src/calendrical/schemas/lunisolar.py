"""
calendrical.schemas.lunisolar
-----------------------------
A purely arithmetical lunisolar calendar used to exercise the lunisolar
code paths: a 4-year cycle whose last year is embolismic.

Months alternate 30 and 29 days; a common year has 12 months (354 days),
a leap year adds a thirteenth month of 30 days (384 days).
"""

from __future__ import annotations

from typing import Tuple

from ..core.types import MonthParts, Range
from .base import DEFAULT_SUPPORTED_YEARS, LUNISOLAR_MIN_DAYS_IN_YEAR, CalendricalSchema

DAYS_PER_COMMON_YEAR = 354
DAYS_PER_LEAP_YEAR = 384
DAYS_PER_4_YEAR_CYCLE = 3 * DAYS_PER_COMMON_YEAR + DAYS_PER_LEAP_YEAR
MONTHS_PER_4_YEAR_CYCLE = 49


class LunisolarSchema(CalendricalSchema):
    name = "lunisolar"

    def __init__(self, *, supported_years: Range = DEFAULT_SUPPORTED_YEARS) -> None:
        super().__init__(
            min_days_in_year=LUNISOLAR_MIN_DAYS_IN_YEAR,
            min_days_in_month=29,
            min_months_in_year=12,
            supported_years=supported_years,
        )

    def is_regular(self) -> Tuple[bool, int]:
        return False, 0

    def is_leap_year(self, y: int) -> bool:
        return (y & 3) == 0

    def is_intercalary_month(self, y: int, m: int) -> bool:
        return m == 13

    def count_months_in_year(self, y: int) -> int:
        return 13 if self.is_leap_year(y) else 12

    def count_days_in_year(self, y: int) -> int:
        return DAYS_PER_LEAP_YEAR if self.is_leap_year(y) else DAYS_PER_COMMON_YEAR

    def count_days_in_month(self, y: int, m: int) -> int:
        return 30 if (m & 1) == 1 else 29

    def count_days_in_year_before_month(self, y: int, m: int) -> int:
        return 29 * (m - 1) + (m >> 1)

    def get_month(self, y: int, doy: int) -> Tuple[int, int]:
        d0y = doy - 1
        m = (2 * d0y + 59) // 59
        return m, 1 + d0y - 29 * (m - 1) - (m >> 1)

    def get_year(self, days_since_epoch: int) -> int:
        C, D = divmod(days_since_epoch, DAYS_PER_4_YEAR_CYCLE)
        return 4 * C + min(4, 1 + D // DAYS_PER_COMMON_YEAR)

    def get_start_of_year(self, y: int) -> int:
        y -= 1
        return DAYS_PER_COMMON_YEAR * y + 30 * (y >> 2)

    def get_start_of_year_in_months(self, y: int) -> int:
        y -= 1
        return 12 * y + (y >> 2)

    def get_month_parts(self, months_since_epoch: int) -> MonthParts:
        y = (4 * months_since_epoch + 52) // MONTHS_PER_4_YEAR_CYCLE
        return MonthParts(y, 1 + months_since_epoch - ((MONTHS_PER_4_YEAR_CYCLE * y - MONTHS_PER_4_YEAR_CYCLE) >> 2))
