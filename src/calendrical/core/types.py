from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


@dataclass(frozen=True, order=True)
class DateParts:
    year: int
    month: int
    day: int

    def deconstruct(self) -> Tuple[int, int, int]:
        return self.year, self.month, self.day

    @property
    def month_parts(self) -> "MonthParts":
        return MonthParts(self.year, self.month)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


@dataclass(frozen=True, order=True)
class OrdinalParts:
    year: int
    day_of_year: int

    def deconstruct(self) -> Tuple[int, int]:
        return self.year, self.day_of_year

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.day_of_year:03d}"


@dataclass(frozen=True, order=True)
class MonthParts:
    year: int
    month: int

    def deconstruct(self) -> Tuple[int, int]:
        return self.year, self.month

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


@dataclass(frozen=True)
class Range:
    """Inclusive interval [min, max] of integers."""
    min: int
    max: int

    def __post_init__(self) -> None:
        if self.min > self.max:
            raise ValueError(f"Require min <= max, got [{self.min}, {self.max}]")

    @classmethod
    def singleton(cls, value: int) -> "Range":
        return cls(value, value)

    @classmethod
    def from_endpoints(cls, endpoints: Tuple[int, int]) -> "Range":
        return cls(*endpoints)

    @property
    def endpoints(self) -> Tuple[int, int]:
        return self.min, self.max

    @property
    def length(self) -> int:
        """Number of integers in the range."""
        return self.max - self.min + 1

    def contains(self, value: int) -> bool:
        return self.min <= value <= self.max

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.contains(value)

    def is_subset_of(self, other: "Range") -> bool:
        return other.min <= self.min and self.max <= other.max

    def __str__(self) -> str:
        return f"[{self.min}, {self.max}]"


class CalendricalProfile(Enum):
    """Structural family of a schema, used to select validators and arithmetic."""
    SOLAR12 = "solar12"
    SOLAR13 = "solar13"
    LUNAR = "lunar"
    LUNISOLAR = "lunisolar"
    OTHER = "other"


class AdditionRule(Enum):
    """
    What to do with the roundoff of an ambiguous addition.

    TRUNCATE  keep the last day of the target month.
    OVERSPILL move to the first day after the truncated date.
    EXACT     move forward by the number of days lost to truncation.
    """
    TRUNCATE = "truncate"
    OVERSPILL = "overspill"
    EXACT = "exact"


@dataclass(frozen=True)
class DateDifference:
    years: int
    months: int
    days: int

    @property
    def is_zero(self) -> bool:
        return self.years == 0 and self.months == 0 and self.days == 0
