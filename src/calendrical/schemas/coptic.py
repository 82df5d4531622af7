"""
calendrical.schemas.coptic
--------------------------
Coptic calendar: a Julian-like leap rule shifted by one year, the leap day
being the sixth epagomenal day of the year preceding a Julian leap year.
"""

from __future__ import annotations

from .epagomenal import Epagomenal12Schema, Epagomenal13Schema


def coptic_is_leap_year(y: int) -> bool:
    return ((y + 1) & 3) == 0


def coptic_start_of_year(y: int) -> int:
    return 365 * (y - 1) + (y >> 2)


def coptic_year(days_since_epoch: int) -> int:
    return (4 * days_since_epoch + 1463) // 1461


class _CopticRules:
    def is_leap_year(self, y: int) -> bool:
        return coptic_is_leap_year(y)

    def get_start_of_year(self, y: int) -> int:
        return coptic_start_of_year(y)

    def get_year(self, days_since_epoch: int) -> int:
        return coptic_year(days_since_epoch)


class Coptic12Schema(_CopticRules, Epagomenal12Schema):
    name = "coptic12"


class Coptic13Schema(_CopticRules, Epagomenal13Schema):
    name = "coptic13"
