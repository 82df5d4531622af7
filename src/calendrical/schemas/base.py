"""
calendrical.schemas.base
------------------------
The conversion contract between calendar parts and day counts.

A schema is a pure function object for one calendar system. The epoch of
every schema (day 0) is the first day of year 1. Schemas perform no input
validation: given illegal parts they return meaningless numbers, checking
legality is the job of calendrical.validation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Tuple

from ..core.errors import PreconditionError
from ..core.types import CalendricalProfile, DateParts, MonthParts, OrdinalParts, Range

DEFAULT_SUPPORTED_YEARS = Range(-999_998, 999_999)

# Lower bounds characterising each profile.
SOLAR_MIN_DAYS_IN_YEAR = 365
SOLAR_MIN_DAYS_IN_MONTH = 28
LUNAR_MIN_DAYS_IN_YEAR = 354
LUNAR_MIN_DAYS_IN_MONTH = 29
LUNISOLAR_MIN_DAYS_IN_YEAR = 353
LUNISOLAR_MIN_DAYS_IN_MONTH = 29


class CalendricalSchema(ABC):
    name: str = "schema"

    def __init__(
        self,
        *,
        min_days_in_year: int,
        min_days_in_month: int,
        min_months_in_year: int,
        supported_years: Range = DEFAULT_SUPPORTED_YEARS,
    ) -> None:
        if min_days_in_year <= 0:
            raise ValueError("min_days_in_year must be positive")
        if min_days_in_month <= 0:
            raise ValueError("min_days_in_month must be positive")
        if min_months_in_year <= 0:
            raise ValueError("min_months_in_year must be positive")
        self._min_days_in_year = min_days_in_year
        self._min_days_in_month = min_days_in_month
        self._min_months_in_year = min_months_in_year
        self._supported_years = supported_years
        self._profile: Optional[CalendricalProfile] = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    # ---------------------------------------------------------
    # Metadata
    # ---------------------------------------------------------
    @property
    def min_days_in_year(self) -> int:
        """A lower bound for count_days_in_year(y), valid for every year."""
        return self._min_days_in_year

    @property
    def min_days_in_month(self) -> int:
        """A lower bound for count_days_in_month(y, m), valid for every month."""
        return self._min_days_in_month

    @property
    def min_months_in_year(self) -> int:
        return self._min_months_in_year

    @property
    def supported_years(self) -> Range:
        return self._supported_years

    @property
    def profile(self) -> CalendricalProfile:
        if self._profile is None:
            self._profile = find_profile(self)
        return self._profile

    @abstractmethod
    def is_regular(self) -> Tuple[bool, int]:
        """(True, months_in_year) for a fixed number of months per year, else (False, 0)."""

    # ---------------------------------------------------------
    # Year, month or day infos
    # ---------------------------------------------------------
    @abstractmethod
    def is_leap_year(self, y: int) -> bool: ...

    def is_intercalary_month(self, y: int, m: int) -> bool:
        return False

    def is_intercalary_day(self, y: int, m: int, d: int) -> bool:
        return False

    def is_supplementary_day(self, y: int, m: int, d: int) -> bool:
        """True for days kept outside the weekly or monthly cycle (blank days, epagomenal days)."""
        return False

    # ---------------------------------------------------------
    # Counting months and days within a year or a month
    # ---------------------------------------------------------
    @abstractmethod
    def count_months_in_year(self, y: int) -> int: ...

    @abstractmethod
    def count_days_in_year(self, y: int) -> int: ...

    @abstractmethod
    def count_days_in_month(self, y: int, m: int) -> int: ...

    @abstractmethod
    def count_days_in_year_before_month(self, y: int, m: int) -> int: ...

    def count_days_in_year_after_month(self, y: int, m: int) -> int:
        return self.count_days_in_year(y) - self.count_days_in_year_before_month(y, m) \
            - self.count_days_in_month(y, m)

    def count_days_in_year_before(self, y: int, m: int, d: int) -> int:
        return self.count_days_in_year_before_month(y, m) + d - 1

    def count_days_in_year_after(self, y: int, m: int, d: int) -> int:
        return self.count_days_in_year(y) - self.count_days_in_year_before_month(y, m) - d

    def count_days_in_month_after(self, y: int, m: int, d: int) -> int:
        return self.count_days_in_month(y, m) - d

    # ---------------------------------------------------------
    # Conversions
    # ---------------------------------------------------------
    def count_days_since_epoch(self, y: int, m: int, d: int) -> int:
        return self.get_start_of_year(y) + self.count_days_in_year_before_month(y, m) + d - 1

    def count_days_since_epoch_ordinal(self, y: int, doy: int) -> int:
        return self.get_start_of_year(y) + doy - 1

    def get_date_parts(self, days_since_epoch: int) -> DateParts:
        y, doy = self.get_year_and_day_of_year(days_since_epoch)
        m, d = self.get_month(y, doy)
        return DateParts(y, m, d)

    def get_ordinal_parts(self, days_since_epoch: int) -> OrdinalParts:
        return OrdinalParts(*self.get_year_and_day_of_year(days_since_epoch))

    @abstractmethod
    def get_year(self, days_since_epoch: int) -> int: ...

    def get_year_and_day_of_year(self, days_since_epoch: int) -> Tuple[int, int]:
        y = self.get_year(days_since_epoch)
        return y, 1 + days_since_epoch - self.get_start_of_year(y)

    @abstractmethod
    def get_month(self, y: int, doy: int) -> Tuple[int, int]:
        """(month, day) of the doy-th day of year y."""

    def get_day_of_year(self, y: int, m: int, d: int) -> int:
        return self.count_days_in_year_before_month(y, m) + d

    # ---------------------------------------------------------
    # Counting days since the epoch
    # ---------------------------------------------------------
    @abstractmethod
    def get_start_of_year(self, y: int) -> int: ...

    def get_end_of_year(self, y: int) -> int:
        return self.get_start_of_year(y) + self.count_days_in_year(y) - 1

    def get_start_of_month(self, y: int, m: int) -> int:
        return self.get_start_of_year(y) + self.count_days_in_year_before_month(y, m)

    def get_end_of_month(self, y: int, m: int) -> int:
        return self.get_start_of_month(y, m) + self.count_days_in_month(y, m) - 1

    # ---------------------------------------------------------
    # Counting months since the epoch
    # ---------------------------------------------------------
    @abstractmethod
    def get_start_of_year_in_months(self, y: int) -> int: ...

    def get_end_of_year_in_months(self, y: int) -> int:
        return self.get_start_of_year_in_months(y) + self.count_months_in_year(y) - 1

    def count_months_since_epoch(self, y: int, m: int) -> int:
        return self.get_start_of_year_in_months(y) + m - 1

    @abstractmethod
    def get_month_parts(self, months_since_epoch: int) -> MonthParts: ...


class RegularSchema(CalendricalSchema):
    """Schema with a fixed number of months per year."""

    def __init__(
        self,
        *,
        months_in_year: int,
        min_days_in_year: int,
        min_days_in_month: int,
        supported_years: Range = DEFAULT_SUPPORTED_YEARS,
    ) -> None:
        super().__init__(
            min_days_in_year=min_days_in_year,
            min_days_in_month=min_days_in_month,
            min_months_in_year=months_in_year,
            supported_years=supported_years,
        )
        self._months_in_year = months_in_year

    @property
    def months_in_year(self) -> int:
        return self._months_in_year

    def is_regular(self) -> Tuple[bool, int]:
        return True, self._months_in_year

    def count_months_in_year(self, y: int) -> int:
        return self._months_in_year

    def get_start_of_year_in_months(self, y: int) -> int:
        return self._months_in_year * (y - 1)

    def count_months_since_epoch(self, y: int, m: int) -> int:
        return self._months_in_year * (y - 1) + m - 1

    def get_month_parts(self, months_since_epoch: int) -> MonthParts:
        y0, m0 = divmod(months_since_epoch, self._months_in_year)
        return MonthParts(y0 + 1, m0 + 1)


def find_profile(schema: CalendricalSchema) -> CalendricalProfile:
    regular, months_in_year = schema.is_regular()

    if schema.min_days_in_year >= SOLAR_MIN_DAYS_IN_YEAR and schema.min_days_in_month >= SOLAR_MIN_DAYS_IN_MONTH:
        if regular and months_in_year == 12:
            return CalendricalProfile.SOLAR12
        if regular and months_in_year == 13:
            return CalendricalProfile.SOLAR13
        return CalendricalProfile.OTHER

    if schema.min_days_in_year >= LUNAR_MIN_DAYS_IN_YEAR and schema.min_days_in_month >= LUNAR_MIN_DAYS_IN_MONTH:
        return CalendricalProfile.LUNAR if regular and months_in_year == 12 else CalendricalProfile.OTHER

    if schema.min_days_in_year >= LUNISOLAR_MIN_DAYS_IN_YEAR and schema.min_days_in_month >= LUNISOLAR_MIN_DAYS_IN_MONTH:
        return CalendricalProfile.OTHER if regular else CalendricalProfile.LUNISOLAR

    return CalendricalProfile.OTHER


def require_profile(schema: CalendricalSchema, *expected: CalendricalProfile) -> None:
    if schema is None:
        raise PreconditionError("A schema is required")
    if schema.profile not in expected:
        names = ", ".join(p.name for p in expected)
        raise PreconditionError(f"{schema!r} has profile {schema.profile.name}, expected {names}")
