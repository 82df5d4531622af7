"""
calendrical.arithmetic.regular
------------------------------
Arithmetic for schemas with a fixed number of months per year.
"""

from __future__ import annotations

from typing import Tuple

from ..core.errors import PreconditionError
from ..core.types import CalendricalProfile, DateParts, MonthParts
from ..schemas.base import LUNAR_MIN_DAYS_IN_MONTH, SOLAR_MIN_DAYS_IN_MONTH, require_profile
from ..segment import CalendricalSegment
from .base import CalendricalArithmetic


class RegularArithmetic(CalendricalArithmetic):
    def __init__(self, segment: CalendricalSegment) -> None:
        super().__init__(segment)
        regular, months_in_year = self.schema.is_regular()
        if not regular:
            raise PreconditionError(f"{self.schema!r} is not regular")
        self.months_in_year = months_in_year

    def add_years(self, y: int, m: int, d: int, years: int) -> Tuple[DateParts, int]:
        y1 = y + years
        self.years_validator.check_overflow(y1)
        return self._truncate(y1, m, d)

    def add_months(self, y: int, m: int, months: int) -> MonthParts:
        q, r = divmod(m - 1 + months, self.months_in_year)
        y1 = y + q
        self.years_validator.check_overflow(y1)
        return MonthParts(y1, 1 + r)

    def count_months_between(self, start: MonthParts, end: MonthParts) -> int:
        return (end.year - start.year) * self.months_in_year + end.month - start.month


class SolarArithmetic(RegularArithmetic):
    """
    Regular arithmetic for a solar profile: no month is shorter than
    28 days, hence adding months or years to a day <= 28 never truncates.
    """
    profile = CalendricalProfile.SOLAR12
    min_days_in_month = SOLAR_MIN_DAYS_IN_MONTH

    def __init__(self, segment: CalendricalSegment) -> None:
        require_profile(segment.schema, self.profile)
        super().__init__(segment)

    def _truncate(self, y: int, m: int, d: int) -> Tuple[DateParts, int]:
        if d <= self.min_days_in_month:
            return DateParts(y, m, d), 0
        return super()._truncate(y, m, d)


class Solar12Arithmetic(SolarArithmetic):
    pass


class Solar13Arithmetic(SolarArithmetic):
    profile = CalendricalProfile.SOLAR13


class LunarArithmetic(SolarArithmetic):
    profile = CalendricalProfile.LUNAR
    min_days_in_month = LUNAR_MIN_DAYS_IN_MONTH
