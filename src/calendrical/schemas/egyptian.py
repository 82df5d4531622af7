"""
calendrical.schemas.egyptian
----------------------------
Egyptian (wandering) year of exactly 365 days.
"""

from __future__ import annotations

from .epagomenal import Epagomenal12Schema, Epagomenal13Schema

DAYS_PER_WANDERING_YEAR = 365


class _EgyptianRules:
    def is_leap_year(self, y: int) -> bool:
        return False

    def get_start_of_year(self, y: int) -> int:
        return DAYS_PER_WANDERING_YEAR * (y - 1)

    def get_year(self, days_since_epoch: int) -> int:
        return 1 + days_since_epoch // DAYS_PER_WANDERING_YEAR


class Egyptian12Schema(_EgyptianRules, Epagomenal12Schema):
    name = "egyptian12"


class Egyptian13Schema(_EgyptianRules, Epagomenal13Schema):
    name = "egyptian13"
