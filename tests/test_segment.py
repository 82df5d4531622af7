# tests/test_segment.py

import pytest

import calendrical
from calendrical.core.errors import InvalidArgumentError, PreconditionError
from calendrical.core.types import DateParts, MonthParts, OrdinalParts, Range
from calendrical.schemas.gregorian import GregorianSchema
from calendrical.segment import CalendricalSegment, SegmentBuilder


def test_maximal_gregorian_segment():
    sch = calendrical.get_schema("gregorian")
    seg = CalendricalSegment.create_maximal(sch)
    assert seg.supported_years == Range(-999_998, 999_999)
    assert seg.supported_days.min == sch.get_start_of_year(-999_998)
    assert seg.supported_days.max == sch.get_end_of_year(999_999)
    assert seg.min_max_date_parts == (DateParts(-999_998, 1, 1), DateParts(999_999, 12, 31))
    assert seg.min_max_ordinal_parts == (OrdinalParts(-999_998, 1), OrdinalParts(999_999, 365))
    assert seg.min_max_month_parts == (MonthParts(-999_998, 1), MonthParts(999_999, 12))
    assert seg.supported_months == Range(12 * -999_999, 12 * 999_999 - 1)
    assert seg.is_complete


def test_segment_of_four_centuries():
    seg = CalendricalSegment.create(GregorianSchema(), Range(1, 400))
    assert seg.supported_days == Range(0, 146_096)
    assert seg.supported_months == Range(0, 4799)
    assert seg.is_complete
    assert seg.min.year == 1
    assert seg.max.month_parts == MonthParts(400, 12)


def test_years_must_be_supported_by_the_schema():
    with pytest.raises(InvalidArgumentError):
        CalendricalSegment.create(calendrical.get_schema("tabular_islamic"), Range(1, 300_000))


def test_maximal_on_or_after_year1():
    seg = CalendricalSegment.create_maximal_on_or_after_year1(calendrical.get_schema("julian"))
    assert seg.min.date_parts == DateParts(1, 1, 1)
    assert seg.supported_days.min == 0

    sch = GregorianSchema(supported_years=Range(-10, 0))
    with pytest.raises(InvalidArgumentError):
        CalendricalSegment.create_maximal_on_or_after_year1(sch)


def test_pax_maximal_segment_starts_at_year1():
    seg = CalendricalSegment.create_maximal(calendrical.get_schema("pax"))
    assert seg.supported_days.min == 0
    assert seg.max.date_parts.month in (13, 14)


def test_builder_partial_segment():
    builder = SegmentBuilder(GregorianSchema())
    assert not builder.is_buildable
    with pytest.raises(PreconditionError):
        builder.build()

    builder.set_min_days_since_epoch(10)
    assert builder.has_min and not builder.has_max
    builder.set_max_date_parts(DateParts(1, 3, 1))
    seg = builder.build()
    assert seg.min.date_parts == DateParts(1, 1, 11)
    assert seg.supported_days == Range(10, 59)
    assert seg.supported_years == Range.singleton(1)
    assert not seg.is_complete
    assert not seg.min_is_start_of_year
    assert not seg.max_is_end_of_year


def test_builder_ordinal_and_year_endpoints():
    builder = SegmentBuilder(GregorianSchema())
    builder.set_min_ordinal_parts(OrdinalParts(2000, 60))
    builder.set_max_to_end_of_year(2000)
    seg = builder.build()
    assert seg.min.date_parts == DateParts(2000, 2, 29)
    assert seg.max_is_end_of_year
    assert not seg.min_is_start_of_year

    builder.set_min_to_start_of_year(1999)
    assert builder.build().is_complete


def test_builder_rejects_invalid_values():
    builder = SegmentBuilder(GregorianSchema())
    with pytest.raises(InvalidArgumentError):
        builder.set_min_date_parts(DateParts(2001, 2, 29))
    with pytest.raises(InvalidArgumentError):
        builder.set_min_ordinal_parts(OrdinalParts(2001, 366))
    with pytest.raises(InvalidArgumentError):
        builder.set_min_to_start_of_year(1_000_000)
    with pytest.raises(InvalidArgumentError):
        builder.set_max_days_since_epoch(10**12)


def test_builder_keeps_min_before_max():
    builder = SegmentBuilder(GregorianSchema())
    builder.set_max_days_since_epoch(100)
    with pytest.raises(InvalidArgumentError):
        builder.set_min_days_since_epoch(101)
    builder.set_min_days_since_epoch(100)
    seg = builder.build()
    assert seg.supported_days == Range.singleton(100)


def test_set_supported_years_resets_both_ends():
    builder = SegmentBuilder(GregorianSchema())
    builder.set_min_days_since_epoch(1000)
    builder.set_max_days_since_epoch(2000)
    builder.set_supported_years(Range(1, 2))
    seg = builder.build()
    assert seg.supported_days == Range(0, 729)
