"""
calendrical.adjusters
---------------------
Adjusters working on any date type providing a small set of capabilities:

- a day_number property (days since Monday January 1st, year 1 Gregorian);
- a from_day_number class method building a date of the same type;
- a plus_days method returning a date of the same type.

The functions return the concrete type of their argument. SchemaDate is a
minimal implementation of that protocol on top of a schema.
"""

from __future__ import annotations

import functools
from typing import ClassVar, Protocol, Type, TypeVar

from .core import time
from .core.types import DateParts, OrdinalParts
from .schemas.base import CalendricalSchema
from .segment import CalendricalSegment
from .validation import prevalidators

T = TypeVar("T", bound="AffineDate")

MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY, SUNDAY = range(7)


class AffineDate(Protocol):
    @property
    def day_number(self) -> int: ...

    @classmethod
    def from_day_number(cls: Type[T], day_number: int) -> T: ...

    def plus_days(self: T, days: int) -> T: ...


def _check_day_of_week(day_of_week: int) -> None:
    if not 0 <= day_of_week <= 6:
        raise ValueError(f"day_of_week must be in 0..6, got {day_of_week}")


def day_of_week(date: AffineDate) -> int:
    return time.day_of_week(date.day_number)


def previous_day_of_week(date: T, dow: int) -> T:
    _check_day_of_week(dow)
    delta = (dow - day_of_week(date)) % 7
    return date.plus_days(delta - 7 if delta else -7)


def previous_or_same_day_of_week(date: T, dow: int) -> T:
    _check_day_of_week(dow)
    delta = (dow - day_of_week(date)) % 7
    return date if delta == 0 else date.plus_days(delta - 7)


def nearest_day_of_week(date: T, dow: int) -> T:
    """The day of the week dow among the 7 days centred on date."""
    _check_day_of_week(dow)
    delta = (dow - day_of_week(date) + 3) % 7 - 3
    return date.plus_days(delta)


def next_or_same_day_of_week(date: T, dow: int) -> T:
    _check_day_of_week(dow)
    delta = (dow - day_of_week(date)) % 7
    return date.plus_days(delta) if delta else date


def next_day_of_week(date: T, dow: int) -> T:
    _check_day_of_week(dow)
    delta = (dow - day_of_week(date)) % 7
    return date.plus_days(delta if delta else 7)


def days_between(start: AffineDate, end: AffineDate) -> int:
    return end.day_number - start.day_number


@functools.total_ordering
class SchemaDate:
    """
    Date on a schema, stored as a count of days since the schema epoch.

    Subclasses are created with make_date_type(); each one is bound to a
    schema, the day number of that schema's epoch and a segment.
    """

    __slots__ = ("_days",)

    schema: ClassVar[CalendricalSchema]
    epoch: ClassVar[int]
    segment: ClassVar[CalendricalSegment]
    prevalidator: ClassVar[prevalidators.PreValidator]

    def __init__(self, year: int, month: int, day: int) -> None:
        self.segment.years_validator.validate(year)
        self.prevalidator.validate_month_day(year, month, day)
        self._days = self.schema.count_days_since_epoch(year, month, day)

    @classmethod
    def from_days_since_epoch(cls: Type[T], days_since_epoch: int) -> T:
        cls.segment.days_validator.validate(days_since_epoch, "days_since_epoch")
        obj = cls.__new__(cls)
        obj._days = days_since_epoch
        return obj

    @classmethod
    def from_day_number(cls: Type[T], day_number: int) -> T:
        return cls.from_days_since_epoch(day_number - cls.epoch)

    @classmethod
    def from_ordinal(cls: Type[T], year: int, day_of_year: int) -> T:
        cls.segment.years_validator.validate(year)
        cls.prevalidator.validate_day_of_year(year, day_of_year)
        return cls.from_days_since_epoch(cls.schema.count_days_since_epoch_ordinal(year, day_of_year))

    @classmethod
    def today(cls: Type[T]) -> T:
        return cls.from_day_number(time.today())

    @property
    def days_since_epoch(self) -> int:
        return self._days

    @property
    def day_number(self) -> int:
        return self._days + self.epoch

    @property
    def parts(self) -> DateParts:
        return self.schema.get_date_parts(self._days)

    @property
    def ordinal_parts(self) -> OrdinalParts:
        return self.schema.get_ordinal_parts(self._days)

    @property
    def year(self) -> int:
        return self.schema.get_year(self._days)

    @property
    def is_intercalary(self) -> bool:
        return self.schema.is_intercalary_day(*self.parts.deconstruct())

    def plus_days(self: T, days: int) -> T:
        days_since_epoch = self._days + days
        self.segment.days_validator.check_overflow(days_since_epoch)
        return self.from_days_since_epoch(days_since_epoch)

    def start_of_year(self: T) -> T:
        return self.from_days_since_epoch(self.schema.get_start_of_year(self.year))

    def end_of_year(self: T) -> T:
        return self.from_days_since_epoch(self.schema.get_end_of_year(self.year))

    def start_of_month(self: T) -> T:
        y, m, _ = self.parts.deconstruct()
        return self.from_days_since_epoch(self.schema.get_start_of_month(y, m))

    def end_of_month(self: T) -> T:
        y, m, _ = self.parts.deconstruct()
        return self.from_days_since_epoch(self.schema.get_end_of_month(y, m))

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._days == other._days

    def __lt__(self, other: "SchemaDate") -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._days < other._days

    def __hash__(self) -> int:
        return hash((type(self), self._days))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.parts})"


def make_date_type(
    name: str,
    schema: CalendricalSchema,
    epoch: int = time.GREGORIAN_EPOCH,
    segment: CalendricalSegment | None = None,
) -> Type[SchemaDate]:
    """Create a SchemaDate subclass bound to a schema."""
    if segment is None:
        segment = CalendricalSegment.create_maximal(schema)
    return type(
        name,
        (SchemaDate,),
        {
            "__slots__": (),
            "schema": schema,
            "epoch": epoch,
            "segment": segment,
            "prevalidator": prevalidators.create_default(schema),
        },
    )
