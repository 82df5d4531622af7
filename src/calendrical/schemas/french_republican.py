"""
calendrical.schemas.french_republican
-------------------------------------
French republican calendar with the Romme rule: Gregorian leap years except
for the multiples of 4000.
"""

from __future__ import annotations

from .epagomenal import Epagomenal12Schema, Epagomenal13Schema

DAYS_PER_4000_YEAR_CYCLE = 1_460_969


def french_republican_is_leap_year(y: int) -> bool:
    return (y & 3) == 0 and (y % 100 != 0 or y % 400 == 0) and y % 4000 != 0


def french_republican_start_of_year(y: int) -> int:
    y -= 1
    c = y // 100
    return 365 * y + (y >> 2) - c + (c >> 2) - y // 4000


def french_republican_year(days_since_epoch: int) -> int:
    y = 1 + (4000 * days_since_epoch) // DAYS_PER_4000_YEAR_CYCLE
    while days_since_epoch < french_republican_start_of_year(y):
        y -= 1
    while days_since_epoch >= french_republican_start_of_year(y + 1):
        y += 1
    return y


class _FrenchRepublicanRules:
    def is_leap_year(self, y: int) -> bool:
        return french_republican_is_leap_year(y)

    def get_start_of_year(self, y: int) -> int:
        return french_republican_start_of_year(y)

    def get_year(self, days_since_epoch: int) -> int:
        return french_republican_year(days_since_epoch)


class FrenchRepublican12Schema(_FrenchRepublicanRules, Epagomenal12Schema):
    name = "french_republican12"


class FrenchRepublican13Schema(_FrenchRepublicanRules, Epagomenal13Schema):
    name = "french_republican13"
