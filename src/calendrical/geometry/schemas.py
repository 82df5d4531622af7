"""
calendrical.geometry.schemas
----------------------------
Geometric schemas: day counts computed by evaluating forms.

FormSchema composes a year form with a month form; the last month of the
year absorbs the variable part of the year. LongCycleSchema repeats a
short-cycle schema every years_per_long_cycle years.
"""

from __future__ import annotations

from typing import Protocol

from ..core.types import DateParts
from .forms import MonthForm, YearForm


class GeometricSchema(Protocol):
    def count_days_since_epoch(self, y: int, m: int, d: int) -> int: ...

    def get_date_parts(self, days_since_epoch: int) -> DateParts: ...


class FormSchema:
    def __init__(self, year_form: YearForm, month_form: MonthForm, months_in_year: int) -> None:
        if months_in_year <= 0:
            raise ValueError("months_in_year must be positive")
        self.year_form = year_form
        self.month_form = month_form.with_algebraic_numbering()
        self.months_in_year = months_in_year

    def __repr__(self) -> str:
        return f"FormSchema({self.year_form}, {self.month_form}, {self.months_in_year})"

    def count_days_since_epoch(self, y: int, m: int, d: int) -> int:
        return self.year_form.count_days_before(y) + self.month_form.value_at(m - 1) + d - 1

    def get_date_parts(self, days_since_epoch: int) -> DateParts:
        Y, d0y = self.year_form.divide_with_remainder(days_since_epoch)
        M, d0m = self.month_form.divide_with_remainder(d0y)
        if M >= self.months_in_year:
            # Past the nominal end: the extra days belong to the last month.
            M = self.months_in_year - 1
            d0m = d0y - self.month_form.value_at(M)
        return DateParts(Y + self.year_form.origin.year, M + 1, d0m + 1)


class LongCycleSchema:
    def __init__(self, short_cycle_schema: GeometricSchema, days_per_long_cycle: int, years_per_long_cycle: int) -> None:
        if short_cycle_schema is None:
            raise ValueError("short_cycle_schema is required")
        self.short_cycle_schema = short_cycle_schema
        self.days_per_long_cycle = days_per_long_cycle
        self.years_per_long_cycle = years_per_long_cycle

    def count_days_since_epoch(self, y: int, m: int, d: int) -> int:
        C, Y = divmod(y - 1, self.years_per_long_cycle)
        return self.days_per_long_cycle * C + self.short_cycle_schema.count_days_since_epoch(Y + 1, m, d)

    def get_date_parts(self, days_since_epoch: int) -> DateParts:
        C, D = divmod(days_since_epoch, self.days_per_long_cycle)
        parts = self.short_cycle_schema.get_date_parts(D)
        return DateParts(self.years_per_long_cycle * C + parts.year, parts.month, parts.day)
