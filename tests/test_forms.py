# tests/test_forms.py

from fractions import Fraction

import pytest

from calendrical.core.types import DateParts
from calendrical.geometry.forms import (
    MonthForm,
    MonthFormNumbering,
    QuasiAffineForm,
    TroeschMonthForm,
    YearForm,
)

# Days before a month of the Gregorian year counted from March.
MARCH_MONTHS = QuasiAffineForm(153, 5, 2)


def test_rejects_non_positive_coefficients():
    with pytest.raises(ValueError):
        QuasiAffineForm(0, 5, 2)
    with pytest.raises(ValueError):
        QuasiAffineForm(153, 0, 2)


def test_value_and_codes():
    assert [MARCH_MONTHS.value_at(x) for x in range(6)] == [0, 31, 61, 92, 122, 153]
    assert MARCH_MONTHS.codes(0, 11) == (31, 30, 31, 30, 31, 31, 30, 31, 30, 31, 31)
    assert MARCH_MONTHS.slope == Fraction(153, 5)
    assert MARCH_MONTHS.deconstruct() == (153, 5, 2)
    assert MARCH_MONTHS.with_remainder(0).remainder == 0


def test_divide_is_the_inverse_of_value_at():
    for n in range(0, 337):
        x, rem = MARCH_MONTHS.divide_with_remainder(n)
        assert MARCH_MONTHS.value_at(x) <= n < MARCH_MONTHS.value_at(x + 1)
        assert 0 <= rem < MARCH_MONTHS.code_at(x)
        assert MARCH_MONTHS.recompose(x, rem) == n
    assert MARCH_MONTHS.decompose(31) == (1, 0)
    assert MARCH_MONTHS.divide(30) == 0


def test_vertical_shear_and_translation():
    f = QuasiAffineForm(3, 5, 2)
    sheared = f.apply_vertical_shear(30)
    assert sheared == MARCH_MONTHS
    for t in (-3, 0, 1, 7):
        g = MARCH_MONTHS.apply_translation(t)
        for x in range(-10, 10):
            assert g.value_at(x) == MARCH_MONTHS.value_at(x - t) - MARCH_MONTHS.value_at(-t)


def test_symmetries():
    f = QuasiAffineForm(3, 5, 2)
    up = f.apply_orthogonal_symmetry()
    down = f.apply_back_orthogonal_symmetry()
    assert down == f.reverse()
    for n in range(-10, 10):
        lo = min(x for x in range(-40, 40) if f.value_at(x) >= n)
        hi = max(x for x in range(-40, 40) if f.value_at(x) <= n)
        assert up.value_at(n) == lo
        assert down.value_at(n) == hi

    oblique = f.apply_oblique_symmetry()
    for x in range(-10, 10):
        assert oblique.value_at(x) == x - f.value_at(x)
    with pytest.raises(ValueError):
        MARCH_MONTHS.apply_oblique_symmetry()


def test_year_form_counts_from_origin():
    julian = YearForm(1461, 4, 0)
    assert julian.origin == DateParts(1, 1, 1)
    assert julian.count_days_before(1) == 0
    assert julian.count_days_before(5) == 1461
    assert [julian.count_days_in_year(y) for y in range(1, 5)] == [365, 365, 365, 366]


def test_month_form_numbering():
    algebraic = MonthForm(61, 2, 0)
    ordinal = algebraic.with_ordinal_numbering()
    assert ordinal.numbering is MonthFormNumbering.ORDINAL
    for m in range(1, 13):
        assert ordinal.value_at(m) == algebraic.value_at(m - 1)
    assert ordinal.with_algebraic_numbering() == algebraic
    assert algebraic.with_algebraic_numbering() is algebraic


def test_troesch_numbering_puts_the_exceptional_month_last():
    # Algebraic numbering: the argument is shifted by exceptional_month + 1.
    march = MonthForm(153, 5, 2)
    troesch = march.with_troesch_numbering(1)
    assert isinstance(troesch, TroeschMonthForm)
    assert troesch.numbering is MonthFormNumbering.TROESCH
    assert troesch.exceptional_month == 1
    for x in range(12):
        assert troesch.value_at(x) == march.value_at(x - 2)
    assert troesch.with_algebraic_numbering() == march
    assert troesch.with_troesch_numbering(1) is troesch
    with pytest.raises(ValueError):
        troesch.with_troesch_numbering(2)
