"""
calendrical.schemas.gregorian
-----------------------------
Gregorian and Julian schemas.

Day counts use the classical trick of starting the year in March, so that
the leap day is the last day of the (shifted) year and the month lengths
31, 30, 31, 30, 31 follow the pattern floor((153 m + 2) / 5).
"""

from __future__ import annotations

from typing import Tuple

from ..core import mathz
from ..core.types import DateParts
from .base import RegularSchema

DAYS_PER_COMMON_YEAR = 365
DAYS_PER_LEAP_YEAR = 366
DAYS_PER_4_JULIAN_YEAR_CYCLE = 1461
DAYS_PER_400_YEAR_CYCLE = 146_097
# Days from March 1st to the end of February.
DAYS_PER_YEAR_AFTER_FEBRUARY = 306


def gregorian_is_leap_year(y: int) -> bool:
    return (y & 3) == 0 and (y % 100 != 0 or y % 400 == 0)


def gregorian_start_of_year(y: int) -> int:
    y -= 1
    c = y // 100
    return DAYS_PER_COMMON_YEAR * y + (y >> 2) - c + (c >> 2)


def gregorian_year(days_since_epoch: int) -> int:
    # Approximation by the mean year, fixed by comparing with the start of year.
    y = (400 * (days_since_epoch + 2)) // DAYS_PER_400_YEAR_CYCLE
    c = y // 100
    start_of_year_after = DAYS_PER_COMMON_YEAR * y + (y >> 2) - c + (c >> 2)
    return y if days_since_epoch < start_of_year_after else y + 1


def julian_is_leap_year(y: int) -> bool:
    return (y & 3) == 0


def julian_start_of_year(y: int) -> int:
    y -= 1
    return DAYS_PER_COMMON_YEAR * y + (y >> 2)


def julian_year(days_since_epoch: int) -> int:
    return (4 * days_since_epoch + 1464) // DAYS_PER_4_JULIAN_YEAR_CYCLE


def count_days_in_month_gj(leap: bool, m: int) -> int:
    if m != 2:
        return 30 + ((m + (m >> 3)) & 1)
    return 29 if leap else 28


def count_days_in_year_before_month_gj(leap: bool, m: int) -> int:
    if m < 3:
        return 31 * (m - 1)
    return (153 * m - 157) // 5 if leap else (153 * m - 162) // 5


def get_month_gj(leap: bool, doy: int) -> Tuple[int, int]:
    if doy > 60:
        doy -= 61 if leap else 60
        n = (5 * doy + 2) // 153
        return n + 3, doy - (153 * n + 2) // 5 + 1
    if doy < 60:
        return mathz.augmented_divide(doy - 1, 31)
    return (2, 29) if leap else (3, 1)


class GJSchema(RegularSchema):
    """Shared month structure of the Gregorian and Julian calendars."""

    def __init__(self, **kwargs) -> None:
        super().__init__(months_in_year=12, min_days_in_year=365, min_days_in_month=28, **kwargs)

    def is_intercalary_day(self, y: int, m: int, d: int) -> bool:
        return m == 2 and d == 29

    def count_days_in_year(self, y: int) -> int:
        return DAYS_PER_LEAP_YEAR if self.is_leap_year(y) else DAYS_PER_COMMON_YEAR

    def count_days_in_month(self, y: int, m: int) -> int:
        return count_days_in_month_gj(self.is_leap_year(y), m)

    def count_days_in_year_before_month(self, y: int, m: int) -> int:
        return count_days_in_year_before_month_gj(self.is_leap_year(y), m)

    def get_month(self, y: int, doy: int) -> Tuple[int, int]:
        return get_month_gj(self.is_leap_year(y), doy)


class GregorianSchema(GJSchema):
    name = "gregorian"

    def is_leap_year(self, y: int) -> bool:
        return gregorian_is_leap_year(y)

    def count_days_since_epoch(self, y: int, m: int, d: int) -> int:
        if m < 3:
            y -= 1
            m += 9
        else:
            m -= 3
        C, Y = divmod(y, 100)
        return -DAYS_PER_YEAR_AFTER_FEBRUARY + ((DAYS_PER_400_YEAR_CYCLE * C) >> 2) \
            + ((DAYS_PER_4_JULIAN_YEAR_CYCLE * Y) >> 2) + (153 * m + 2) // 5 + d - 1

    def get_date_parts(self, days_since_epoch: int) -> DateParts:
        days = days_since_epoch + DAYS_PER_YEAR_AFTER_FEBRUARY
        C = (4 * days + 3) // DAYS_PER_400_YEAR_CYCLE
        D = days - ((DAYS_PER_400_YEAR_CYCLE * C) >> 2)
        Y = (4 * D + 3) // DAYS_PER_4_JULIAN_YEAR_CYCLE
        d0y = D - ((DAYS_PER_4_JULIAN_YEAR_CYCLE * Y) >> 2)
        m = (5 * d0y + 2) // 153
        d = 1 + d0y - (153 * m + 2) // 5
        if m > 9:
            Y += 1
            m -= 9
        else:
            m += 3
        return DateParts(100 * C + Y, m, d)

    def get_year(self, days_since_epoch: int) -> int:
        return gregorian_year(days_since_epoch)

    def get_start_of_year(self, y: int) -> int:
        return gregorian_start_of_year(y)


class JulianSchema(GJSchema):
    name = "julian"

    def is_leap_year(self, y: int) -> bool:
        return julian_is_leap_year(y)

    def count_days_since_epoch(self, y: int, m: int, d: int) -> int:
        if m < 3:
            y -= 1
            m += 9
        else:
            m -= 3
        return -DAYS_PER_YEAR_AFTER_FEBRUARY + ((DAYS_PER_4_JULIAN_YEAR_CYCLE * y) >> 2) \
            + (153 * m + 2) // 5 + d - 1

    def get_date_parts(self, days_since_epoch: int) -> DateParts:
        days = days_since_epoch + DAYS_PER_YEAR_AFTER_FEBRUARY
        y = (4 * days + 3) // DAYS_PER_4_JULIAN_YEAR_CYCLE
        d0y = days - ((DAYS_PER_4_JULIAN_YEAR_CYCLE * y) >> 2)
        m = (5 * d0y + 2) // 153
        d = 1 + d0y - (153 * m + 2) // 5
        if m > 9:
            y += 1
            m -= 9
        else:
            m += 3
        return DateParts(y, m, d)

    def get_year(self, days_since_epoch: int) -> int:
        return julian_year(days_since_epoch)

    def get_start_of_year(self, y: int) -> int:
        return julian_start_of_year(y)
