"""
calendrical.schemas.perennial
-----------------------------
Perennial reforms of the Gregorian calendar: every date falls on the same
day of the week each year, thanks to one or two days kept outside the week.

All three use the Gregorian leap rule, hence share its start of year and
year search.
"""

from __future__ import annotations

from typing import Tuple

from ..core import mathz
from .base import RegularSchema
from .gregorian import gregorian_is_leap_year, gregorian_start_of_year, gregorian_year


class _GregorianYears(RegularSchema):
    def is_leap_year(self, y: int) -> bool:
        return gregorian_is_leap_year(y)

    def count_days_in_year(self, y: int) -> int:
        return 366 if gregorian_is_leap_year(y) else 365

    def get_start_of_year(self, y: int) -> int:
        return gregorian_start_of_year(y)

    def get_year(self, days_since_epoch: int) -> int:
        return gregorian_year(days_since_epoch)


class PositivistSchema(_GregorianYears):
    """
    Comte's positivist calendar: 13 months of 28 days, the thirteenth month
    ending with the Festival of the Dead (and a leap day in leap years).
    """
    name = "positivist"

    def __init__(self, **kwargs) -> None:
        super().__init__(months_in_year=13, min_days_in_year=365, min_days_in_month=28, **kwargs)

    def is_intercalary_day(self, y: int, m: int, d: int) -> bool:
        return m == 13 and d == 30

    def is_supplementary_day(self, y: int, m: int, d: int) -> bool:
        return m == 13 and d > 28

    def count_days_in_month(self, y: int, m: int) -> int:
        if m < 13:
            return 28
        return 30 if gregorian_is_leap_year(y) else 29

    def count_days_in_year_before_month(self, y: int, m: int) -> int:
        return 28 * (m - 1)

    def get_month(self, y: int, doy: int) -> Tuple[int, int]:
        if doy > 336:
            return 13, doy - 336
        return mathz.augmented_divide(doy - 1, 28)


class InternationalFixedSchema(_GregorianYears):
    """
    International Fixed calendar: 13 months of 28 days, the Year Day closing
    the thirteenth month, the leap day closing the sixth one.
    """
    name = "international_fixed"

    def __init__(self, **kwargs) -> None:
        super().__init__(months_in_year=13, min_days_in_year=365, min_days_in_month=28, **kwargs)

    def is_intercalary_day(self, y: int, m: int, d: int) -> bool:
        return m == 6 and d == 29

    def is_supplementary_day(self, y: int, m: int, d: int) -> bool:
        return d == 29

    def count_days_in_month(self, y: int, m: int) -> int:
        if m == 13 or (m == 6 and gregorian_is_leap_year(y)):
            return 29
        return 28

    def count_days_in_year_before_month(self, y: int, m: int) -> int:
        before = 28 * (m - 1)
        return before + 1 if m > 6 and gregorian_is_leap_year(y) else before

    def get_month(self, y: int, doy: int) -> Tuple[int, int]:
        if gregorian_is_leap_year(y):
            if doy == 169:
                return 6, 29
            if doy > 169:
                doy -= 1
        m, d = mathz.augmented_divide(doy - 1, 28)
        if m == 14:
            return 13, 29
        return m, d


class WorldSchema(_GregorianYears):
    """
    World calendar: four identical quarters of 31, 30 and 30 days; the
    Worldsday ends the year, the leap day ends June.
    """
    name = "world"

    def __init__(self, **kwargs) -> None:
        super().__init__(months_in_year=12, min_days_in_year=365, min_days_in_month=30, **kwargs)

    def is_intercalary_day(self, y: int, m: int, d: int) -> bool:
        return m == 6 and d == 31

    def is_supplementary_day(self, y: int, m: int, d: int) -> bool:
        return d == 31 and (m == 6 or m == 12)

    def count_days_in_month(self, y: int, m: int) -> int:
        if m == 12 or (m == 6 and gregorian_is_leap_year(y)):
            return 31
        return 31 if (m - 1) % 3 == 0 else 30

    def count_days_in_year_before_month(self, y: int, m: int) -> int:
        q, r = divmod(m - 1, 3)
        before = 91 * q + 30 * r + (1 if r > 0 else 0)
        return before + 1 if m > 6 and gregorian_is_leap_year(y) else before

    def get_month(self, y: int, doy: int) -> Tuple[int, int]:
        if gregorian_is_leap_year(y):
            if doy == 183:
                return 6, 31
            if doy > 183:
                doy -= 1
        if doy == 365:
            return 12, 31
        q, r = divmod(doy - 1, 91)
        if r < 31:
            return 3 * q + 1, r + 1
        n, d0 = divmod(r - 31, 30)
        return 3 * q + 2 + n, d0 + 1
