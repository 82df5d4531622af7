# tests/test_adjusters.py

import pytest

from calendrical import adjusters as adj
from calendrical.core import time
from calendrical.core.errors import CalendarOverflowError, InvalidArgumentError
from calendrical.core.types import DateParts, OrdinalParts, Range
from calendrical.schemas.gregorian import GregorianSchema, JulianSchema
from calendrical.segment import CalendricalSegment

GregorianDate = adj.make_date_type("GregorianDate", GregorianSchema())
JulianDate = adj.make_date_type("JulianDate", JulianSchema(), epoch=time.JULIAN_EPOCH)

SATURDAY_2000 = GregorianDate(2000, 1, 1)


def test_day_of_week():
    assert adj.day_of_week(SATURDAY_2000) == adj.SATURDAY
    assert SATURDAY_2000.day_number == 730_119


def test_next_and_previous():
    d = SATURDAY_2000
    assert adj.next_day_of_week(d, adj.MONDAY) == GregorianDate(2000, 1, 3)
    assert adj.next_day_of_week(d, adj.SATURDAY) == GregorianDate(2000, 1, 8)
    assert adj.next_or_same_day_of_week(d, adj.SATURDAY) is d
    assert adj.next_or_same_day_of_week(d, adj.SUNDAY) == GregorianDate(2000, 1, 2)
    assert adj.previous_day_of_week(d, adj.FRIDAY) == GregorianDate(1999, 12, 31)
    assert adj.previous_day_of_week(d, adj.SATURDAY) == GregorianDate(1999, 12, 25)
    assert adj.previous_or_same_day_of_week(d, adj.SATURDAY) is d
    assert adj.previous_or_same_day_of_week(d, adj.SUNDAY) == GregorianDate(1999, 12, 26)


def test_nearest_day_of_week():
    d = SATURDAY_2000
    assert adj.nearest_day_of_week(d, adj.MONDAY) == GregorianDate(2000, 1, 3)
    assert adj.nearest_day_of_week(d, adj.THURSDAY) == GregorianDate(1999, 12, 30)
    assert adj.nearest_day_of_week(d, adj.SATURDAY) == d


def test_invalid_day_of_week():
    with pytest.raises(ValueError):
        adj.next_day_of_week(SATURDAY_2000, 7)
    with pytest.raises(ValueError):
        adj.previous_day_of_week(SATURDAY_2000, -1)


def test_adjusters_keep_the_date_type():
    d = JulianDate(1582, 10, 5)
    assert d.day_number == GregorianDate(1582, 10, 15).day_number
    assert adj.day_of_week(d) == adj.FRIDAY
    nxt = adj.next_day_of_week(d, adj.SUNDAY)
    assert type(nxt) is JulianDate
    assert nxt.parts == DateParts(1582, 10, 7)
    assert adj.days_between(d, nxt) == 2


def test_schema_date_basics():
    d = GregorianDate(2000, 2, 29)
    assert d.is_intercalary
    assert d.year == 2000
    assert d.ordinal_parts == OrdinalParts(2000, 60)
    assert GregorianDate.from_ordinal(2000, 60) == d
    assert GregorianDate.from_day_number(d.day_number) == d
    assert d.start_of_month() == GregorianDate(2000, 2, 1)
    assert d.end_of_month() == d
    assert d.start_of_year() == GregorianDate(2000, 1, 1)
    assert d.end_of_year() == GregorianDate(2000, 12, 31)
    assert repr(d) == "GregorianDate(2000-02-29)"
    assert d < d.plus_days(1)
    assert len({d, GregorianDate(2000, 2, 29)}) == 1
    assert d != JulianDate(2000, 2, 16)


def test_schema_date_validates_input():
    with pytest.raises(InvalidArgumentError):
        GregorianDate(2001, 2, 29)
    with pytest.raises(InvalidArgumentError):
        GregorianDate(1_000_000, 1, 1)
    with pytest.raises(InvalidArgumentError):
        GregorianDate.from_ordinal(2001, 366)


def test_schema_date_overflow():
    sch = GregorianSchema()
    SmallDate = adj.make_date_type("SmallDate", sch, segment=CalendricalSegment.create(sch, Range(1, 1)))
    last = SmallDate(1, 12, 31)
    with pytest.raises(CalendarOverflowError):
        last.plus_days(1)
    with pytest.raises(InvalidArgumentError):
        SmallDate.from_days_since_epoch(365)


def test_today():
    assert GregorianDate.today().day_number == time.today()
