"""
calendrical.validation.prevalidators
------------------------------------
Pre-validators turn raw (month, day) and day-of-year values into legal ones
for a given year, before they reach a schema.

Each check first compares the value with a bound valid for every year (the
minimum number of months in a year, of days in a month or in a year). Years
can only have more months or days than that minimum, never fewer, so the
exact schema metadata is only consulted when the cheap test fails.

The year itself is not checked here; see validation.ranges.YearsValidator.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ..core.errors import InvalidArgumentError
from ..core.types import CalendricalProfile
from ..schemas.base import (
    LUNAR_MIN_DAYS_IN_MONTH,
    LUNAR_MIN_DAYS_IN_YEAR,
    LUNISOLAR_MIN_DAYS_IN_MONTH,
    LUNISOLAR_MIN_DAYS_IN_YEAR,
    SOLAR_MIN_DAYS_IN_MONTH,
    SOLAR_MIN_DAYS_IN_YEAR,
    CalendricalSchema,
    require_profile,
)
from ..schemas.gregorian import (
    GregorianSchema,
    JulianSchema,
    count_days_in_month_gj,
    gregorian_is_leap_year,
    julian_is_leap_year,
)
from ..schemas.pax import PaxSchema


class PreValidator(ABC):
    """Base class: the check_* predicates decide, the validate_* methods raise."""

    def __init__(self, schema: Optional[CalendricalSchema]) -> None:
        self.schema = schema

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.schema!r})"

    @abstractmethod
    def check_month(self, y: int, m: int) -> bool: ...

    @abstractmethod
    def check_day_of_month(self, y: int, m: int, d: int) -> bool:
        """Assumes that (y, m) is a legal month."""

    @abstractmethod
    def check_day_of_year(self, y: int, doy: int) -> bool: ...

    def check_month_day(self, y: int, m: int, d: int) -> bool:
        return self.check_month(y, m) and self.check_day_of_month(y, m, d)

    def validate_month(self, y: int, m: int, param_name: str = "month") -> None:
        if not self.check_month(y, m):
            raise InvalidArgumentError(param_name, m)

    def validate_day_of_month(self, y: int, m: int, d: int, param_name: str = "day") -> None:
        if not self.check_day_of_month(y, m, d):
            raise InvalidArgumentError(param_name, d)

    def validate_month_day(self, y: int, m: int, d: int, param_name: Optional[str] = None) -> None:
        self.validate_month(y, m, param_name or "month")
        self.validate_day_of_month(y, m, d, param_name or "day")

    def validate_day_of_year(self, y: int, doy: int, param_name: str = "day_of_year") -> None:
        if not self.check_day_of_year(y, doy):
            raise InvalidArgumentError(param_name, doy)


class PlainPreValidator(PreValidator):
    """Works with any schema, using its own lower bounds."""

    def __init__(self, schema: CalendricalSchema) -> None:
        super().__init__(schema)
        self._min_months_in_year = schema.min_months_in_year
        self._min_days_in_month = schema.min_days_in_month
        self._min_days_in_year = schema.min_days_in_year

    def check_month(self, y: int, m: int) -> bool:
        if m < 1:
            return False
        return m <= self._min_months_in_year or m <= self.schema.count_months_in_year(y)

    def check_day_of_month(self, y: int, m: int, d: int) -> bool:
        if d < 1:
            return False
        return d <= self._min_days_in_month or d <= self.schema.count_days_in_month(y, m)

    def check_day_of_year(self, y: int, doy: int) -> bool:
        if doy < 1:
            return False
        return doy <= self._min_days_in_year or doy <= self.schema.count_days_in_year(y)


class _RegularPreValidator(PreValidator):
    months_in_year = 12
    min_days_in_month = SOLAR_MIN_DAYS_IN_MONTH
    min_days_in_year = SOLAR_MIN_DAYS_IN_YEAR
    profiles = (CalendricalProfile.SOLAR12,)

    def __init__(self, schema: CalendricalSchema) -> None:
        require_profile(schema, *self.profiles)
        super().__init__(schema)

    def check_month(self, y: int, m: int) -> bool:
        return 1 <= m <= self.months_in_year

    def check_day_of_month(self, y: int, m: int, d: int) -> bool:
        if d < 1:
            return False
        return d <= self.min_days_in_month or d <= self.schema.count_days_in_month(y, m)

    def check_day_of_year(self, y: int, doy: int) -> bool:
        if doy < 1:
            return False
        return doy <= self.min_days_in_year or doy <= self.schema.count_days_in_year(y)


class Solar12PreValidator(_RegularPreValidator):
    pass


class Solar13PreValidator(_RegularPreValidator):
    months_in_year = 13
    profiles = (CalendricalProfile.SOLAR13,)


class LunarPreValidator(_RegularPreValidator):
    min_days_in_month = LUNAR_MIN_DAYS_IN_MONTH
    min_days_in_year = LUNAR_MIN_DAYS_IN_YEAR
    profiles = (CalendricalProfile.LUNAR,)


class LunisolarPreValidator(PreValidator):
    min_months_in_year = 12

    def __init__(self, schema: CalendricalSchema) -> None:
        require_profile(schema, CalendricalProfile.LUNISOLAR)
        super().__init__(schema)

    def check_month(self, y: int, m: int) -> bool:
        if m < 1:
            return False
        return m <= self.min_months_in_year or m <= self.schema.count_months_in_year(y)

    def check_day_of_month(self, y: int, m: int, d: int) -> bool:
        if d < 1:
            return False
        return d <= LUNISOLAR_MIN_DAYS_IN_MONTH or d <= self.schema.count_days_in_month(y, m)

    def check_day_of_year(self, y: int, doy: int) -> bool:
        if doy < 1:
            return False
        return doy <= LUNISOLAR_MIN_DAYS_IN_YEAR or doy <= self.schema.count_days_in_year(y)


class _GJPreValidator(PreValidator):
    """Gregorian and Julian pre-validators: no schema call at all."""

    @staticmethod
    @abstractmethod
    def is_leap_year(y: int) -> bool: ...

    def check_month(self, y: int, m: int) -> bool:
        return 1 <= m <= 12

    def check_day_of_month(self, y: int, m: int, d: int) -> bool:
        if d < 1:
            return False
        return d <= 28 or d <= count_days_in_month_gj(self.is_leap_year(y), m)

    def check_day_of_year(self, y: int, doy: int) -> bool:
        if doy < 1:
            return False
        return doy <= 365 or (doy == 366 and self.is_leap_year(y))


class GregorianPreValidator(_GJPreValidator):
    is_leap_year = staticmethod(gregorian_is_leap_year)

    def __init__(self, schema: Optional[CalendricalSchema] = None) -> None:
        super().__init__(schema)


class JulianPreValidator(_GJPreValidator):
    is_leap_year = staticmethod(julian_is_leap_year)

    def __init__(self, schema: Optional[CalendricalSchema] = None) -> None:
        super().__init__(schema)


class PaxPreValidator(PreValidator):
    """
    Pax months have 28 days except the leap month Pax (7 days), so the only
    bound valid for every month is a week.
    """

    def __init__(self, schema: Optional[PaxSchema] = None) -> None:
        super().__init__(schema if schema is not None else PaxSchema())

    def check_month(self, y: int, m: int) -> bool:
        if m < 1:
            return False
        return m <= 13 or (m == 14 and self.schema.is_leap_year(y))

    def check_day_of_month(self, y: int, m: int, d: int) -> bool:
        if d < 1 or d > 28:
            return False
        return d <= 7 or not self.schema.is_intercalary_month(y, m)

    def check_day_of_year(self, y: int, doy: int) -> bool:
        if doy < 1:
            return False
        return doy <= 364 or doy <= self.schema.count_days_in_year(y)


GREGORIAN_PREVALIDATOR = GregorianPreValidator()
JULIAN_PREVALIDATOR = JulianPreValidator()


def create_default(schema: CalendricalSchema) -> PreValidator:
    """The most specific pre-validator structurally correct for a schema."""
    if type(schema) is GregorianSchema:
        return GREGORIAN_PREVALIDATOR
    if type(schema) is JulianSchema:
        return JULIAN_PREVALIDATOR
    if isinstance(schema, PaxSchema):
        return PaxPreValidator(schema)

    profile = schema.profile
    if profile is CalendricalProfile.SOLAR12:
        return Solar12PreValidator(schema)
    if profile is CalendricalProfile.SOLAR13:
        return Solar13PreValidator(schema)
    if profile is CalendricalProfile.LUNAR:
        return LunarPreValidator(schema)
    if profile is CalendricalProfile.LUNISOLAR:
        return LunisolarPreValidator(schema)
    return PlainPreValidator(schema)
