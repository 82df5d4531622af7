"""
calendrical.schemas.tropicalia
------------------------------
Tropicalia: a 128-year cycle of 31 leap years, the Julian rule minus one
leap year every 128 years. The mean year (365.2421875 days) is very close
to the tropical year.
"""

from __future__ import annotations

from typing import Tuple

from .base import RegularSchema
from .gregorian import (
    DAYS_PER_4_JULIAN_YEAR_CYCLE,
    DAYS_PER_YEAR_AFTER_FEBRUARY,
    count_days_in_month_gj,
    count_days_in_year_before_month_gj,
    get_month_gj,
)

YEARS_PER_CYCLE = 128
DAYS_PER_128_YEAR_CYCLE = 128 * 365 + 31


def tropicalia_is_leap_year(y: int) -> bool:
    return (y & 3) == 0 and (y & 127) != 0


class TropicalistaSchema(RegularSchema):
    """Years of the 128-year cycle; subclasses lay out the months."""

    def __init__(self, *, min_days_in_month: int, **kwargs) -> None:
        super().__init__(months_in_year=12, min_days_in_year=365, min_days_in_month=min_days_in_month, **kwargs)

    def is_leap_year(self, y: int) -> bool:
        return tropicalia_is_leap_year(y)

    def count_days_in_year(self, y: int) -> int:
        return 366 if tropicalia_is_leap_year(y) else 365

    def get_year(self, days_since_epoch: int) -> int:
        C, D = divmod(days_since_epoch, DAYS_PER_128_YEAR_CYCLE)
        return 1 + YEARS_PER_CYCLE * C + (4 * D + 3) // DAYS_PER_4_JULIAN_YEAR_CYCLE

    def get_start_of_year(self, y: int) -> int:
        y -= 1
        return 365 * y + (y >> 2) - (y >> 7)


class TropicaliaSchema(TropicalistaSchema):
    """Tropicalia with the Gregorian months."""
    name = "tropicalia"

    def __init__(self, **kwargs) -> None:
        super().__init__(min_days_in_month=28, **kwargs)

    def is_intercalary_day(self, y: int, m: int, d: int) -> bool:
        return m == 2 and d == 29

    def count_days_in_month(self, y: int, m: int) -> int:
        return count_days_in_month_gj(tropicalia_is_leap_year(y), m)

    def count_days_in_year_before_month(self, y: int, m: int) -> int:
        return count_days_in_year_before_month_gj(tropicalia_is_leap_year(y), m)

    def count_days_since_epoch(self, y: int, m: int, d: int) -> int:
        if m < 3:
            y -= 1
            m += 9
        else:
            m -= 3
        C = y >> 7
        Y = y & 127
        return -DAYS_PER_YEAR_AFTER_FEBRUARY + DAYS_PER_128_YEAR_CYCLE * C \
            + 365 * Y + (Y >> 2) + (153 * m + 2) // 5 + d - 1

    def get_month(self, y: int, doy: int) -> Tuple[int, int]:
        return get_month_gj(tropicalia_is_leap_year(y), doy)


class Tropicalia3031Schema(TropicalistaSchema):
    """Tropicalia with months alternating 30 and 31 days, the leap day ending the year."""
    name = "tropicalia3031"

    def __init__(self, **kwargs) -> None:
        super().__init__(min_days_in_month=30, **kwargs)

    def is_intercalary_day(self, y: int, m: int, d: int) -> bool:
        return m == 12 and d == 31

    def count_days_in_month(self, y: int, m: int) -> int:
        if m != 12:
            return 31 - (m & 1)
        return 31 if tropicalia_is_leap_year(y) else 30

    def count_days_in_year_before_month(self, y: int, m: int) -> int:
        m -= 1
        return 30 * m + (m >> 1)

    def get_month(self, y: int, doy: int) -> Tuple[int, int]:
        d0y = doy - 1
        m = (2 * d0y + 62) // 61
        return m, 1 + d0y - 30 * (m - 1) - ((m - 1) >> 1)
