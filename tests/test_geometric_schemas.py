# tests/test_geometric_schemas.py

import calendrical
from calendrical.geometry.forms import MonthForm, YearForm
from calendrical.geometry.schemas import FormSchema, LongCycleSchema
from calendrical.schemas.tropicalia import DAYS_PER_128_YEAR_CYCLE


def _assert_same_dates(geometric, schema, days):
    for n in days:
        parts = schema.get_date_parts(n)
        assert geometric.get_date_parts(n) == parts, n
        assert geometric.count_days_since_epoch(*parts.deconstruct()) == n


def test_tabular_islamic_from_forms():
    geo = FormSchema(YearForm(10_631, 30, 14), MonthForm(59, 2, 1), 12)
    _assert_same_dates(geo, calendrical.get_schema("tabular_islamic"), range(-1000, 12_000))


def test_coptic_from_forms():
    geo = FormSchema(YearForm(1461, 4, 1), MonthForm(30, 1, 0), 12)
    _assert_same_dates(geo, calendrical.get_schema("coptic12"), range(-1500, 3000))


def test_egyptian_from_forms():
    geo = FormSchema(YearForm(365, 1, 0), MonthForm(30, 1, 0), 13)
    _assert_same_dates(geo, calendrical.get_schema("egyptian13"), range(-800, 800))


def test_month_form_with_ordinal_numbering_is_accepted():
    geo = FormSchema(YearForm(365, 1, 0), MonthForm(30, 1, 0).with_ordinal_numbering(), 13)
    assert geo.count_days_since_epoch(1, 2, 1) == 30


def test_tropicalia_long_cycle():
    short = FormSchema(YearForm(1461, 4, 0), MonthForm(61, 2, 0), 12)
    geo = LongCycleSchema(short, DAYS_PER_128_YEAR_CYCLE, 128)
    sch = calendrical.get_schema("tropicalia3031")
    cycle = DAYS_PER_128_YEAR_CYCLE
    days = list(range(-400, 400)) + list(range(cycle - 400, cycle + 400)) + list(range(-cycle - 400, -cycle + 400))
    _assert_same_dates(geo, sch, days)
