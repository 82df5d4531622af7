"""
calendrical.arithmetic.datemath
-------------------------------
Date arithmetic with a configurable addition rule.

The arithmetic layer always truncates and reports a roundoff; DateMath
interprets that roundoff according to an AdditionRule. Additions and
differences must share the same rule (the differences are computed with
the additions), so the rule is fixed at construction.
"""

from __future__ import annotations

from typing import Tuple

from ..core.types import AdditionRule, DateDifference, DateParts
from .base import CalendricalArithmetic


class DateMath:
    def __init__(self, arithmetic: CalendricalArithmetic, rule: AdditionRule = AdditionRule.TRUNCATE) -> None:
        if not isinstance(rule, AdditionRule):
            raise ValueError(f"Unknown addition rule {rule!r}")
        self.arithmetic = arithmetic
        self.schema = arithmetic.schema
        self.rule = rule

    def add_years(self, date: DateParts, years: int) -> DateParts:
        result, roundoff = self.arithmetic.add_years(date.year, date.month, date.day, years)
        return result if roundoff == 0 else self._adjust(result, roundoff)

    def add_months(self, date: DateParts, months: int) -> DateParts:
        result, roundoff = self.arithmetic.add_months_to_date(date.year, date.month, date.day, months)
        return result if roundoff == 0 else self._adjust(result, roundoff)

    def add_days(self, date: DateParts, days: int) -> DateParts:
        return self.arithmetic.add_days_to_date(date.year, date.month, date.day, days)

    def count_years_between(self, start: DateParts, end: DateParts) -> Tuple[int, DateParts]:
        """
        Whole number of years from start to end, together with start plus
        that many years; the latter never goes past end.
        """
        years = end.year - start.year
        new_start = self.add_years(start, years)
        if start < end:
            if new_start > end:
                years -= 1
                new_start = self.add_years(start, years)
        elif new_start < end:
            years += 1
            new_start = self.add_years(start, years)
        return years, new_start

    def count_months_between(self, start: DateParts, end: DateParts) -> Tuple[int, DateParts]:
        months = self.arithmetic.count_months_between(start.month_parts, end.month_parts)
        new_start = self.add_months(start, months)
        if start < end:
            if new_start > end:
                months -= 1
                new_start = self.add_months(start, months)
        elif new_start < end:
            months += 1
            new_start = self.add_months(start, months)
        return months, new_start

    def count_days_between(self, start: DateParts, end: DateParts) -> int:
        sch = self.schema
        return sch.count_days_since_epoch(*end.deconstruct()) - sch.count_days_since_epoch(*start.deconstruct())

    def subtract(self, start: DateParts, end: DateParts) -> DateDifference:
        """Years, then months, then days needed to go from start to end."""
        years, new_start = self.count_years_between(start, end)
        months, new_start = self.count_months_between(new_start, end)
        return DateDifference(years, months, self.count_days_between(new_start, end))

    def _adjust(self, date: DateParts, roundoff: int) -> DateParts:
        # date is the last day of a month.
        if self.rule is AdditionRule.TRUNCATE:
            return date
        if self.rule is AdditionRule.OVERSPILL:
            return self.arithmetic.next_day(*date.deconstruct())
        return self.arithmetic.add_days_to_date(date.year, date.month, date.day, roundoff)
