"""
calendrical.segment
-------------------
Supported range of a schema instance.

A segment is an interval of consecutive days described simultaneously as a
range of day counts, of month counts, of years, and by its two endpoints
in every representation (date parts, ordinal parts, month parts). It is
computed once from a schema and then shared by the validators and the
arithmetic to detect overflows.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from .core.errors import InvalidArgumentError, PreconditionError
from .core.types import DateParts, MonthParts, OrdinalParts, Range
from .schemas.base import CalendricalSchema
from .validation import prevalidators
from .validation.ranges import DaysValidator, MonthsValidator, YearsValidator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Endpoint:
    days_since_epoch: int
    months_since_epoch: int
    date_parts: DateParts
    ordinal_parts: OrdinalParts

    @property
    def year(self) -> int:
        return self.date_parts.year

    @property
    def month_parts(self) -> MonthParts:
        return self.date_parts.month_parts


class CalendricalSegment:
    def __init__(
        self,
        schema: CalendricalSchema,
        min: Endpoint,
        max: Endpoint,
        *,
        min_is_start_of_year: bool,
        max_is_end_of_year: bool,
    ) -> None:
        if schema is None:
            raise PreconditionError("A schema is required")
        if min.days_since_epoch > max.days_since_epoch:
            raise InvalidArgumentError("max", max.days_since_epoch)
        self.schema = schema
        self.min = min
        self.max = max
        self.min_is_start_of_year = min_is_start_of_year
        self.max_is_end_of_year = max_is_end_of_year

        self.supported_days = Range(min.days_since_epoch, max.days_since_epoch)
        self.supported_months = Range(min.months_since_epoch, max.months_since_epoch)
        self.supported_years = Range(min.year, max.year)

        self.years_validator = YearsValidator(self.supported_years)
        self.months_validator = MonthsValidator(self.supported_months)
        self.days_validator = DaysValidator(self.supported_days)

    def __repr__(self) -> str:
        return f"CalendricalSegment({self.schema!r}, {self.min.date_parts} .. {self.max.date_parts})"

    @property
    def is_complete(self) -> bool:
        """True when the segment is made of whole years."""
        return self.min_is_start_of_year and self.max_is_end_of_year

    @property
    def min_max_date_parts(self) -> Tuple[DateParts, DateParts]:
        return self.min.date_parts, self.max.date_parts

    @property
    def min_max_ordinal_parts(self) -> Tuple[OrdinalParts, OrdinalParts]:
        return self.min.ordinal_parts, self.max.ordinal_parts

    @property
    def min_max_month_parts(self) -> Tuple[MonthParts, MonthParts]:
        return self.min.month_parts, self.max.month_parts

    # ---------------------------------------------------------
    # Factories
    # ---------------------------------------------------------
    @classmethod
    def create(cls, schema: CalendricalSchema, years: Range) -> "CalendricalSegment":
        builder = SegmentBuilder(schema)
        builder.set_supported_years(years)
        return builder.build()

    @classmethod
    def create_maximal(cls, schema: CalendricalSchema) -> "CalendricalSegment":
        builder = SegmentBuilder(schema)
        builder.set_min_to_start_of_min_supported_year()
        builder.set_max_to_end_of_max_supported_year()
        return builder.build()

    @classmethod
    def create_maximal_on_or_after_year1(cls, schema: CalendricalSchema) -> "CalendricalSegment":
        builder = SegmentBuilder(schema)
        if not builder.try_set_min_to_start_of_min_supported_year_on_or_after_year1():
            raise InvalidArgumentError("schema", schema, f"{schema!r} supports no year >= 1.")
        builder.set_max_to_end_of_max_supported_year()
        return builder.build()


class SegmentBuilder:
    """
    Incremental construction of a segment.

    Values are validated against the schema layout before being used, the
    endpoints must satisfy min <= max at all times.
    """

    def __init__(self, schema: CalendricalSchema) -> None:
        if schema is None:
            raise PreconditionError("A schema is required")
        self._schema = schema
        self._prevalidator = prevalidators.create_default(schema)
        self._min: Optional[Endpoint] = None
        self._max: Optional[Endpoint] = None

    @property
    def has_min(self) -> bool:
        return self._min is not None

    @property
    def has_max(self) -> bool:
        return self._max is not None

    @property
    def is_buildable(self) -> bool:
        return self.has_min and self.has_max

    def _set_min(self, ep: Endpoint) -> None:
        if self._max is not None and ep.days_since_epoch > self._max.days_since_epoch:
            raise InvalidArgumentError("min", ep.date_parts)
        self._min = ep

    def _set_max(self, ep: Endpoint) -> None:
        if self._min is not None and self._min.days_since_epoch > ep.days_since_epoch:
            raise InvalidArgumentError("max", ep.date_parts)
        self._max = ep

    # ---------------------------------------------------------
    # Builder methods
    # ---------------------------------------------------------
    def set_min_days_since_epoch(self, value: int) -> None:
        self._set_min(self._endpoint_from_days(value))

    def set_max_days_since_epoch(self, value: int) -> None:
        self._set_max(self._endpoint_from_days(value))

    def set_min_date_parts(self, value: DateParts) -> None:
        self._set_min(self._endpoint_from_date_parts(value))

    def set_max_date_parts(self, value: DateParts) -> None:
        self._set_max(self._endpoint_from_date_parts(value))

    def set_min_ordinal_parts(self, value: OrdinalParts) -> None:
        self._set_min(self._endpoint_from_ordinal_parts(value))

    def set_max_ordinal_parts(self, value: OrdinalParts) -> None:
        self._set_max(self._endpoint_from_ordinal_parts(value))

    def set_min_to_start_of_year(self, year: int) -> None:
        self._validate_year(year, "year")
        self._set_min(self._endpoint_at_start_of_year(year))

    def set_max_to_end_of_year(self, year: int) -> None:
        self._validate_year(year, "year")
        self._set_max(self._endpoint_at_end_of_year(year))

    def set_min_to_start_of_min_supported_year(self) -> None:
        self._set_min(self._endpoint_at_start_of_year(self._schema.supported_years.min))

    def set_max_to_end_of_max_supported_year(self) -> None:
        self._set_max(self._endpoint_at_end_of_year(self._schema.supported_years.max))

    def try_set_min_to_start_of_min_supported_year_on_or_after_year1(self) -> bool:
        years = self._schema.supported_years
        if years.max < 1:
            return False
        self._set_min(self._endpoint_at_start_of_year(max(1, years.min)))
        return True

    def set_supported_years(self, years: Range) -> None:
        if not years.is_subset_of(self._schema.supported_years):
            raise InvalidArgumentError(
                "years", years, f"{years} is not a subset of {self._schema.supported_years}."
            )
        # Reset both ends so that the order check cannot fail midway.
        self._min = self._max = None
        self._set_min(self._endpoint_at_start_of_year(years.min))
        self._set_max(self._endpoint_at_end_of_year(years.max))

    def build(self) -> CalendricalSegment:
        if not self.is_buildable:
            raise PreconditionError("Both endpoints must be set before building a segment")
        sch = self._schema
        lo, hi = self._min, self._max
        segment = CalendricalSegment(
            sch,
            lo,
            hi,
            min_is_start_of_year=lo.ordinal_parts.day_of_year == 1,
            max_is_end_of_year=hi.ordinal_parts.day_of_year == sch.count_days_in_year(hi.year),
        )
        logger.debug("built %r, days=%s", segment, segment.supported_days)
        return segment

    # ---------------------------------------------------------
    # Private helpers
    # ---------------------------------------------------------
    def _validate_year(self, year: int, param_name: str) -> None:
        if not self._schema.supported_years.contains(year):
            raise InvalidArgumentError(param_name, year)

    def _supported_days(self) -> Range:
        years = self._schema.supported_years
        return Range(self._schema.get_start_of_year(years.min), self._schema.get_end_of_year(years.max))

    def _endpoint(self, days: int, parts: DateParts, ordinal: OrdinalParts) -> Endpoint:
        return Endpoint(
            days_since_epoch=days,
            months_since_epoch=self._schema.count_months_since_epoch(parts.year, parts.month),
            date_parts=parts,
            ordinal_parts=ordinal,
        )

    def _endpoint_at_start_of_year(self, year: int) -> Endpoint:
        return self._endpoint(
            self._schema.get_start_of_year(year),
            DateParts(year, 1, 1),
            OrdinalParts(year, 1),
        )

    def _endpoint_at_end_of_year(self, year: int) -> Endpoint:
        sch = self._schema
        m = sch.count_months_in_year(year)
        return self._endpoint(
            sch.get_end_of_year(year),
            DateParts(year, m, sch.count_days_in_month(year, m)),
            OrdinalParts(year, sch.count_days_in_year(year)),
        )

    def _endpoint_from_days(self, value: int) -> Endpoint:
        if not self._supported_days().contains(value):
            raise InvalidArgumentError("value", value)
        return self._endpoint(
            value,
            self._schema.get_date_parts(value),
            self._schema.get_ordinal_parts(value),
        )

    def _endpoint_from_date_parts(self, value: DateParts) -> Endpoint:
        y, m, d = value.deconstruct()
        self._validate_year(y, "value")
        self._prevalidator.validate_month_day(y, m, d, "value")
        return self._endpoint(
            self._schema.count_days_since_epoch(y, m, d),
            value,
            OrdinalParts(y, self._schema.get_day_of_year(y, m, d)),
        )

    def _endpoint_from_ordinal_parts(self, value: OrdinalParts) -> Endpoint:
        y, doy = value.deconstruct()
        self._validate_year(y, "value")
        self._prevalidator.validate_day_of_year(y, doy, "value")
        m, d = self._schema.get_month(y, doy)
        return self._endpoint(
            self._schema.count_days_since_epoch_ordinal(y, doy),
            DateParts(y, m, d),
            value,
        )
