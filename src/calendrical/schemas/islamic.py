"""
calendrical.schemas.islamic
---------------------------
Tabular Islamic calendar: a 30-year cycle with 11 leap years, odd months of
30 days, even months of 29 days, the last month gaining a day in leap years.
"""

from __future__ import annotations

from typing import Tuple

from ..core.types import Range
from .base import RegularSchema

DAYS_PER_30_YEAR_CYCLE = 10_631
SUPPORTED_YEARS = Range(-199_999, 200_000)


class TabularIslamicSchema(RegularSchema):
    name = "tabular_islamic"

    def __init__(self, *, supported_years: Range = SUPPORTED_YEARS) -> None:
        super().__init__(
            months_in_year=12,
            min_days_in_year=354,
            min_days_in_month=29,
            supported_years=supported_years,
        )

    def is_leap_year(self, y: int) -> bool:
        return (14 + 11 * y) % 30 < 11

    def is_intercalary_day(self, y: int, m: int, d: int) -> bool:
        return m == 12 and d == 30

    def count_days_in_year(self, y: int) -> int:
        return 355 if self.is_leap_year(y) else 354

    def count_days_in_month(self, y: int, m: int) -> int:
        if (m & 1) == 1 or (m == 12 and self.is_leap_year(y)):
            return 30
        return 29

    def count_days_in_year_before_month(self, y: int, m: int) -> int:
        return 29 * (m - 1) + (m >> 1)

    def get_month(self, y: int, doy: int) -> Tuple[int, int]:
        d0y = doy - 1
        m = (11 * d0y + 330) // 325
        return m, 1 + d0y - 29 * (m - 1) - (m >> 1)

    def get_year(self, days_since_epoch: int) -> int:
        return (30 * days_since_epoch + 10_646) // DAYS_PER_30_YEAR_CYCLE

    def get_start_of_year(self, y: int) -> int:
        return 354 * (y - 1) + (3 + 11 * y) // 30
