"""
calendrical.geometry.forms
--------------------------
Quasi-affine forms, the building blocks of closed-form calendar formulae.

A form (a, b, r) with a, b > 0 is the integer function

    value_at(x) = floor((a x + r) / b)

For instance the number of days before year y of the Julian calendar is
(1461, 4, 0) evaluated at y - 1. The forms are immutable; every
transformation returns a new form.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from fractions import Fraction
from typing import Tuple

from ..core.types import DateParts

EPOCH = DateParts(1, 1, 1)


@dataclass(frozen=True)
class QuasiAffineForm:
    a: int
    b: int
    remainder: int

    def __post_init__(self) -> None:
        if self.a <= 0:
            raise ValueError(f"a must be positive, got {self.a}")
        if self.b <= 0:
            raise ValueError(f"b must be positive, got {self.b}")

    def deconstruct(self) -> Tuple[int, int, int]:
        return self.a, self.b, self.remainder

    @property
    def slope(self) -> Fraction:
        return Fraction(self.a, self.b)

    def with_remainder(self, remainder: int) -> "QuasiAffineForm":
        return replace(self, remainder=remainder)

    # ---------------------------------------------------------
    # Evaluation
    # ---------------------------------------------------------
    def value_at(self, x: int) -> int:
        return (self.a * x + self.remainder) // self.b

    def code_at(self, x: int) -> int:
        """Increment value_at(x + 1) - value_at(x), e.g. a month length."""
        return self.value_at(x + 1) - self.value_at(x)

    def codes(self, start: int, count: int) -> Tuple[int, ...]:
        return tuple(self.code_at(x) for x in range(start, start + count))

    def reverse(self) -> "QuasiAffineForm":
        """The form n -> largest x such that value_at(x) <= n."""
        return QuasiAffineForm(self.b, self.a, self.b - 1 - self.remainder)

    def divide(self, n: int) -> int:
        return self.reverse().value_at(n)

    def divide_with_remainder(self, n: int) -> Tuple[int, int]:
        """(x, n - value_at(x)) with x = divide(n)."""
        x = self.divide(n)
        return x, n - self.value_at(x)

    decompose = divide_with_remainder

    def recompose(self, x: int, rem: int) -> int:
        return self.value_at(x) + rem

    # ---------------------------------------------------------
    # Transformations
    # ---------------------------------------------------------
    def apply_vertical_shear(self, k: int) -> "QuasiAffineForm":
        """x -> value_at(x) + k x."""
        return QuasiAffineForm(self.a + k * self.b, self.b, self.remainder)

    def apply_translation(self, t: int) -> "QuasiAffineForm":
        """x -> value_at(x - t) - value_at(-t)."""
        return QuasiAffineForm(self.a, self.b, (self.remainder - self.a * t) % self.b)

    def apply_orthogonal_symmetry(self) -> "QuasiAffineForm":
        """n -> smallest x such that value_at(x) >= n."""
        return QuasiAffineForm(self.b, self.a, self.a - 1 - self.remainder)

    def apply_back_orthogonal_symmetry(self) -> "QuasiAffineForm":
        """n -> largest x such that value_at(x) <= n, i.e. reverse()."""
        return QuasiAffineForm(self.b, self.a, self.b - 1 - self.remainder)

    def apply_oblique_symmetry(self) -> "QuasiAffineForm":
        """x -> x - value_at(x); requires a < b."""
        if self.a >= self.b:
            raise ValueError(f"Oblique symmetry requires a < b, got a={self.a}, b={self.b}")
        return QuasiAffineForm(self.b - self.a, self.b, self.b - 1 - self.remainder)


@dataclass(frozen=True)
class CalendricalForm(QuasiAffineForm):
    origin: DateParts = EPOCH


@dataclass(frozen=True)
class YearForm(CalendricalForm):
    """Days before a year, counted in years since the origin year."""

    def count_days_before(self, y: int) -> int:
        return self.value_at(y - self.origin.year)

    def count_days_in_year(self, y: int) -> int:
        return self.code_at(y - self.origin.year)


class MonthFormNumbering(Enum):
    ALGEBRAIC = "algebraic"
    ORDINAL = "ordinal"
    TROESCH = "troesch"


@dataclass(frozen=True)
class MonthForm(CalendricalForm):
    """
    Days in the year before a month.

    With algebraic numbering months are counted from 0, with ordinal
    numbering from 1.
    """
    numbering: MonthFormNumbering = MonthFormNumbering.ALGEBRAIC

    def _renumbered(self, numbering: MonthFormNumbering, offset: int) -> "MonthForm":
        return MonthForm(
            self.a, self.b, self.remainder - self.a * offset, origin=self.origin, numbering=numbering
        )

    def with_algebraic_numbering(self) -> "MonthForm":
        if self.numbering is MonthFormNumbering.ORDINAL:
            return self._renumbered(MonthFormNumbering.ALGEBRAIC, -1)
        return self

    def with_ordinal_numbering(self) -> "MonthForm":
        if self.numbering is MonthFormNumbering.ALGEBRAIC:
            return self._renumbered(MonthFormNumbering.ORDINAL, 1)
        return self

    def with_troesch_numbering(self, exceptional_month: int) -> "TroeschMonthForm":
        """Renumber so that the exceptional month comes last."""
        offset = exceptional_month + 1 if self.numbering is MonthFormNumbering.ALGEBRAIC else exceptional_month
        return TroeschMonthForm(
            self.a,
            self.b,
            self.remainder - self.a * offset,
            origin=self.origin,
            exceptional_month=exceptional_month,
        )


@dataclass(frozen=True)
class TroeschMonthForm(MonthForm):
    numbering: MonthFormNumbering = MonthFormNumbering.TROESCH
    exceptional_month: int = 0

    def with_algebraic_numbering(self) -> MonthForm:
        return self._renumbered(MonthFormNumbering.ALGEBRAIC, -self.exceptional_month - 1)

    def with_ordinal_numbering(self) -> MonthForm:
        return self._renumbered(MonthFormNumbering.ORDINAL, -self.exceptional_month)

    def with_troesch_numbering(self, exceptional_month: int) -> "TroeschMonthForm":
        if exceptional_month != self.exceptional_month:
            raise ValueError(
                f"Already numbered from exceptional month {self.exceptional_month}, got {exceptional_month}"
            )
        return self
