"""
calendrical.core.time
---------------------
Day numbers: a calendar-independent count of days where 0 is Monday
January 1st, year 1 of the proleptic Gregorian calendar.

A schema's day count is turned into a day number by adding the epoch of the
calendar, i.e. the day number of its first day of year 1.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

# Julian Day Number of day number 0 (0001-01-01 Gregorian, at noon).
JDN_OF_DAY_ZERO = 1721426

# Epochs of the calendars shipped with this package, as day numbers.
GREGORIAN_EPOCH = 0
JULIAN_EPOCH = -2
COPTIC_EPOCH = 103_604
EGYPTIAN_EPOCH = -272_788
FRENCH_REPUBLICAN_EPOCH = 654_414
TABULAR_ISLAMIC_EPOCH = 227_014
POSITIVIST_EPOCH = 653_054


def from_date(d: date) -> int:
    return d.toordinal() - 1


def to_date(day_number: int) -> date:
    """Inverse of from_date; only defined for years 1..9999."""
    return date.fromordinal(day_number + 1)


def today(clock: Optional[date] = None) -> int:
    """Today as a day number (local date)."""
    return from_date(date.today() if clock is None else clock)


def to_jdn(day_number: int) -> int:
    return day_number + JDN_OF_DAY_ZERO


def from_jdn(jdn: int) -> int:
    return jdn - JDN_OF_DAY_ZERO


def day_of_week(day_number: int) -> int:
    """ISO-like weekday, Monday = 0 ... Sunday = 6 (same as date.weekday())."""
    return day_number % 7
