"""
calendrical.schemas.epagomenal
------------------------------
Month structure shared by the Egyptian-style calendars: twelve months of
30 days followed by 5 (or 6) epagomenal days.

Two presentations of the same year:
- 12 months, the epagomenal days being appended to the twelfth month;
- 13 months, the epagomenal days forming a short thirteenth month.

Subclasses supply the leap rule, the start of the year and the year search.
"""

from __future__ import annotations

from typing import Tuple

from ..core import mathz
from .base import RegularSchema


class Epagomenal12Schema(RegularSchema):
    def __init__(self, **kwargs) -> None:
        super().__init__(months_in_year=12, min_days_in_year=365, min_days_in_month=30, **kwargs)

    def is_intercalary_day(self, y: int, m: int, d: int) -> bool:
        return m == 12 and d == 36

    def is_supplementary_day(self, y: int, m: int, d: int) -> bool:
        return m == 12 and d > 30

    def count_days_in_year(self, y: int) -> int:
        return 366 if self.is_leap_year(y) else 365

    def count_days_in_month(self, y: int, m: int) -> int:
        if m < 12:
            return 30
        return 36 if self.is_leap_year(y) else 35

    def count_days_in_year_before_month(self, y: int, m: int) -> int:
        return 30 * (m - 1)

    def get_month(self, y: int, doy: int) -> Tuple[int, int]:
        m, d = mathz.augmented_divide(doy - 1, 30)
        if m == 13:
            return 12, d + 30
        return m, d


class Epagomenal13Schema(RegularSchema):
    def __init__(self, **kwargs) -> None:
        super().__init__(months_in_year=13, min_days_in_year=365, min_days_in_month=5, **kwargs)

    def is_intercalary_day(self, y: int, m: int, d: int) -> bool:
        return m == 13 and d == 6

    def is_supplementary_day(self, y: int, m: int, d: int) -> bool:
        return m == 13

    def count_days_in_year(self, y: int) -> int:
        return 366 if self.is_leap_year(y) else 365

    def count_days_in_month(self, y: int, m: int) -> int:
        if m < 13:
            return 30
        return 6 if self.is_leap_year(y) else 5

    def count_days_in_year_before_month(self, y: int, m: int) -> int:
        return 30 * (m - 1)

    def get_month(self, y: int, doy: int) -> Tuple[int, int]:
        return mathz.augmented_divide(doy - 1, 30)
