"""
calendrical.geometry.troesch
----------------------------
Troesch map: a composition of elementary transformations of quasi-affine
forms (a vertical shear, an optional oblique symmetry, a translation and an
orthogonal symmetry) turning the month form of a calendar into a form where
the exceptional month sits at the end of the year.

apply() and apply_back() are the closed forms of the composition; transform()
and transform_back() build it one transformation at a time, and the
walk-through variants return the intermediate forms.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .forms import QuasiAffineForm


@dataclass(frozen=True)
class TroeschMap:
    shear: int
    complement: bool
    translation: int

    def apply(self, form: QuasiAffineForm) -> QuasiAffineForm:
        a, b, r = form.deconstruct()
        S, T = self.shear, self.translation
        if self.complement:
            B = (S + 1) * b - a
            return QuasiAffineForm(b, B, B - 1 - (-1 - r - T * a) % b)
        B = a - S * b
        return QuasiAffineForm(b, B, B - 1 - (r + T * a) % b)

    def apply_back(self, form: QuasiAffineForm) -> QuasiAffineForm:
        a, b, r = form.deconstruct()
        S, T = self.shear, self.translation
        rem = (b - 1 - r - T * b) % a
        if self.complement:
            return QuasiAffineForm(S * a + a - b, a, a - 1 - rem)
        return QuasiAffineForm(S * a + b, a, rem)

    # ---------------------------------------------------------
    # Step by step
    # ---------------------------------------------------------
    def transform(self, form: QuasiAffineForm) -> QuasiAffineForm:
        return self.transform_walkthru(form)[-1]

    def transform_walkthru(self, form: QuasiAffineForm) -> List[QuasiAffineForm]:
        steps = [form.apply_vertical_shear(-self.shear)]
        if self.complement:
            steps.append(steps[-1].apply_oblique_symmetry())
        steps.append(steps[-1].apply_translation(-self.translation).apply_orthogonal_symmetry())
        return steps

    def transform_back(self, form: QuasiAffineForm) -> QuasiAffineForm:
        return self.transform_back_walkthru(form)[-1]

    def transform_back_walkthru(self, form: QuasiAffineForm) -> List[QuasiAffineForm]:
        steps = [form.apply_back_orthogonal_symmetry().apply_translation(self.translation)]
        if self.complement:
            steps.append(steps[-1].apply_oblique_symmetry())
        steps.append(steps[-1].apply_vertical_shear(self.shear))
        return steps
