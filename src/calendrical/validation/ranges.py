"""
calendrical.validation.ranges
-----------------------------
Range validators.

Two failure kinds are kept apart:
- validate() rejects raw input with InvalidArgumentError;
- check_*() reject the result of a computation with CalendarOverflowError.
"""

from __future__ import annotations

from ..core.errors import CalendarOverflowError, InvalidArgumentError
from ..core.types import Range


class RangeValidator:
    param_name: str = "value"

    def __init__(self, range: Range) -> None:
        self.range = range
        self.min_value = range.min
        self.max_value = range.max

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.range})"

    def validate(self, value: int, param_name: str | None = None) -> None:
        if value < self.min_value or value > self.max_value:
            raise InvalidArgumentError(param_name or self.param_name, value)

    def check_overflow(self, value: int) -> None:
        if value < self.min_value or value > self.max_value:
            raise CalendarOverflowError(f"{self.param_name} {value} is outside {self.range}")

    def check_upper_bound(self, value: int) -> None:
        if value > self.max_value:
            raise CalendarOverflowError(f"{self.param_name} {value} is above {self.max_value}")

    def check_lower_bound(self, value: int) -> None:
        if value < self.min_value:
            raise CalendarOverflowError(f"{self.param_name} {value} is below {self.min_value}")


class YearsValidator(RangeValidator):
    param_name = "year"


class DaysValidator(RangeValidator):
    param_name = "day_number"


class MonthsValidator(RangeValidator):
    param_name = "month_number"


# Wide enough for every supported day count; a negative int & _MASK is
# always larger than any bound below 2**63.
_MASK = (1 << 64) - 1


class FastRangeValidator(RangeValidator):
    """
    Validator for a range [0, max].

    Both bounds are tested with a single comparison by reading the value as
    an unsigned integer: negative values wrap around above max. Values are
    expected to fit in a signed 64-bit integer.
    """

    def __init__(self, max_value: int) -> None:
        if max_value < 0 or max_value > _MASK >> 1:
            raise ValueError(f"max_value must be in [0, 2**63), got {max_value}")
        super().__init__(Range(0, max_value))

    def validate(self, value: int, param_name: str | None = None) -> None:
        if (value & _MASK) > self.max_value:
            raise InvalidArgumentError(param_name or self.param_name, value)

    def check_overflow(self, value: int) -> None:
        if (value & _MASK) > self.max_value:
            raise CalendarOverflowError(f"{self.param_name} {value} is outside {self.range}")
