# tests/test_schemas.py

from datetime import date

import pytest

import calendrical
from calendrical.core import time
from calendrical.core.types import CalendricalProfile, DateParts, MonthParts, OrdinalParts
from calendrical.schemas.gregorian import GregorianSchema, JulianSchema
from calendrical.schemas.pax import PaxSchema

ALL_NAMES = calendrical.list_schemas()


def _sample_years(sch):
    lo, hi = sch.supported_years.endpoints
    years = set(range(-8, 13)) | {99, 100, 101, 127, 128, 129, 399, 400, 401, 1999, 2000, 2001, 3999, 4000}
    return sorted(y for y in years if lo <= y <= hi)


@pytest.mark.parametrize("name", ALL_NAMES)
def test_walk_every_day_of_sampled_years(name):
    """
    Enumerate the dates of a few years and check that every conversion
    agrees with a plain day counter.
    """
    sch = calendrical.get_schema(name)
    for y in _sample_years(sch):
        n = sch.get_start_of_year(y)
        doy = 0
        months = sch.count_months_in_year(y)
        for m in range(1, months + 1):
            assert sch.count_days_in_year_before_month(y, m) == doy
            for d in range(1, sch.count_days_in_month(y, m) + 1):
                doy += 1
                assert sch.count_days_since_epoch(y, m, d) == n
                assert sch.get_date_parts(n) == DateParts(y, m, d)
                assert sch.get_ordinal_parts(n) == OrdinalParts(y, doy)
                assert sch.get_year(n) == y
                assert sch.get_month(y, doy) == (m, d)
                assert sch.get_day_of_year(y, m, d) == doy
                n += 1
        assert doy == sch.count_days_in_year(y)
        assert n == sch.get_start_of_year(y + 1)
        assert sch.get_end_of_year(y) == n - 1


@pytest.mark.parametrize("name", ALL_NAMES)
def test_month_parts_round_trip(name):
    sch = calendrical.get_schema(name)
    for y in _sample_years(sch):
        start = sch.get_start_of_year_in_months(y)
        assert sch.get_start_of_year_in_months(y + 1) - start == sch.count_months_in_year(y)
        for m in range(1, sch.count_months_in_year(y) + 1):
            months = sch.count_months_since_epoch(y, m)
            assert months == start + m - 1
            assert sch.get_month_parts(months) == MonthParts(y, m)


@pytest.mark.parametrize("name", ALL_NAMES)
def test_lower_bounds_hold(name):
    sch = calendrical.get_schema(name)
    for y in _sample_years(sch):
        assert sch.count_days_in_year(y) >= sch.min_days_in_year
        assert sch.count_months_in_year(y) >= sch.min_months_in_year
        for m in range(1, sch.count_months_in_year(y) + 1):
            assert sch.count_days_in_month(y, m) >= sch.min_days_in_month


@pytest.mark.parametrize("name", ALL_NAMES)
def test_start_and_end_of_month(name):
    sch = calendrical.get_schema(name)
    y = 4 if sch.supported_years.contains(4) else sch.supported_years.min
    for m in range(1, sch.count_months_in_year(y) + 1):
        assert sch.get_start_of_month(y, m) == sch.count_days_since_epoch(y, m, 1)
        last = sch.count_days_in_month(y, m)
        assert sch.get_end_of_month(y, m) == sch.count_days_since_epoch(y, m, last)
        assert sch.count_days_in_month_after(y, m, 1) == last - 1
        assert sch.count_days_in_year_after(y, m, 1) == sch.get_end_of_year(y) - sch.get_start_of_month(y, m)


def test_every_schema_epoch_is_day_zero():
    for name in ALL_NAMES:
        assert calendrical.get_schema(name).count_days_since_epoch(1, 1, 1) == 0


def test_gregorian_matches_datetime():
    sch = GregorianSchema()
    for d in (date(1, 1, 1), date(1582, 10, 15), date(1970, 1, 1), date(2000, 2, 29), date(9999, 12, 31)):
        n = time.from_date(d)
        assert sch.count_days_since_epoch(d.year, d.month, d.day) == n
        assert sch.get_date_parts(n) == DateParts(d.year, d.month, d.day)


def test_gregorian_year_2000():
    sch = GregorianSchema()
    assert sch.is_leap_year(2000)
    assert not sch.is_leap_year(1900)
    assert sch.count_days_in_year(2000) == 366
    assert sch.count_days_in_month(2000, 2) == 29
    assert sch.count_days_since_epoch(2000, 2, 29) == 730_178
    assert sch.get_date_parts(730_178) == DateParts(2000, 2, 29)
    assert sch.is_intercalary_day(2000, 2, 29)
    assert time.day_of_week(sch.count_days_since_epoch(2000, 1, 1)) == 5  # Saturday


def test_gregorian_reform_day():
    """Thursday 4 October 1582 (Julian) was followed by Friday 15 October 1582 (Gregorian)."""
    greg = GregorianSchema().count_days_since_epoch(1582, 10, 15) + time.GREGORIAN_EPOCH
    jul = JulianSchema().count_days_since_epoch(1582, 10, 5) + time.JULIAN_EPOCH
    assert greg == jul
    assert time.day_of_week(greg) == 4  # Friday


def test_epochs_expressed_in_older_calendars():
    jul = JulianSchema()
    greg = GregorianSchema()
    assert jul.count_days_since_epoch(284, 8, 29) + time.JULIAN_EPOCH == time.COPTIC_EPOCH
    assert jul.count_days_since_epoch(622, 7, 16) + time.JULIAN_EPOCH == time.TABULAR_ISLAMIC_EPOCH
    assert jul.count_days_since_epoch(-746, 2, 26) + time.JULIAN_EPOCH == time.EGYPTIAN_EPOCH
    assert greg.count_days_since_epoch(1792, 9, 22) == time.FRENCH_REPUBLICAN_EPOCH
    assert greg.count_days_since_epoch(1789, 1, 1) == time.POSITIVIST_EPOCH


def test_negative_days_belong_to_proleptic_years():
    sch = GregorianSchema()
    assert sch.get_date_parts(-1) == DateParts(0, 12, 31)
    assert sch.is_leap_year(0)
    assert sch.get_start_of_year(0) == -366
    assert sch.get_year(-366) == 0
    assert sch.get_year(-367) == -1


def test_profiles():
    expected = {
        "gregorian": CalendricalProfile.SOLAR12,
        "julian": CalendricalProfile.SOLAR12,
        "coptic12": CalendricalProfile.SOLAR12,
        "coptic13": CalendricalProfile.OTHER,
        "egyptian13": CalendricalProfile.OTHER,
        "positivist": CalendricalProfile.SOLAR13,
        "international_fixed": CalendricalProfile.SOLAR13,
        "world": CalendricalProfile.SOLAR12,
        "tabular_islamic": CalendricalProfile.LUNAR,
        "lunisolar": CalendricalProfile.LUNISOLAR,
        "pax": CalendricalProfile.OTHER,
    }
    for name, profile in expected.items():
        assert calendrical.get_schema(name).profile is profile, name


def test_coptic_leap_years_precede_julian_ones():
    sch = calendrical.get_schema("coptic12")
    assert [y for y in range(1, 13) if sch.is_leap_year(y)] == [3, 7, 11]
    assert sch.count_days_in_month(3, 12) == 36
    assert sch.is_supplementary_day(3, 12, 31)
    assert sch.is_intercalary_day(3, 12, 36)
    assert calendrical.get_schema("coptic13").count_days_in_month(3, 13) == 6


def test_tabular_islamic_cycle():
    sch = calendrical.get_schema("tabular_islamic")
    leaps = [y for y in range(1, 31) if sch.is_leap_year(y)]
    assert leaps == [2, 5, 7, 10, 13, 16, 18, 21, 24, 26, 29]
    assert sch.get_start_of_year(31) == 10_631


def test_french_republican_skips_multiples_of_4000():
    sch = calendrical.get_schema("french_republican12")
    assert sch.is_leap_year(2000)
    assert not sch.is_leap_year(4000)
    assert sch.get_start_of_year(4001) == 1_460_969


def test_perennial_calendars_supplementary_days():
    ifc = calendrical.get_schema("international_fixed")
    assert ifc.get_month(2000, 169) == (6, 29)
    assert ifc.get_month(2000, 366) == (13, 29)
    assert ifc.is_supplementary_day(2001, 13, 29)
    world = calendrical.get_schema("world")
    assert world.get_month(2000, 183) == (6, 31)
    assert world.get_month(2001, 365) == (12, 31)
    assert world.is_intercalary_day(2000, 6, 31)
    positivist = calendrical.get_schema("positivist")
    assert positivist.count_days_in_month(2000, 13) == 30


def test_tropicalia_cycle():
    sch = calendrical.get_schema("tropicalia")
    assert sch.is_leap_year(124)
    assert not sch.is_leap_year(128)
    assert sch.get_start_of_year(129) == 46_751
    assert calendrical.get_schema("tropicalia3031").count_days_in_month(4, 12) == 31


def test_pax_leap_years_and_months():
    sch = PaxSchema()
    assert [y for y in range(1, 31) if sch.is_leap_year(y)] == [6, 12, 18, 24, 30]
    assert sch.is_leap_year(99)
    assert sch.is_leap_year(100)
    assert not sch.is_leap_year(400)
    assert sch.count_months_in_year(6) == 14
    assert sch.count_days_in_month(6, 13) == 7
    assert sch.is_intercalary_month(6, 13)
    assert sch.count_weeks_in_year(6) == 53
    assert sch.get_start_of_year(101) == 364 * 100 + 7 * 18
    assert sch.get_start_of_year_in_months(101) == 1300 + 18


def test_lunisolar_embolismic_year():
    sch = calendrical.get_schema("lunisolar")
    assert sch.is_regular() == (False, 0)
    assert sch.count_months_in_year(4) == 13
    assert sch.count_days_in_year(4) == 384
    assert sch.count_days_in_month(4, 13) == 30
    assert sch.is_intercalary_month(4, 13)
    assert sch.get_start_of_year(5) == 1446


def test_pax_month_of_day_of_year():
    sch = calendrical.get_schema("pax")
    assert sch.get_month(6, 336) == (12, 28)
    assert sch.get_month(6, 343) == (13, 7)
    assert sch.get_month(6, 344) == (14, 1)
    assert sch.get_month(5, 337) == (13, 1)
    assert sch.get_month(5, 364) == (13, 28)
