"""calendrical public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    list_schemas,
    get_schema,
    register_schema,
    schema_info,
    make_segment,
    make_arithmetic,
    make_date_math,
    make_validator,
    today,
)
from .core.errors import (
    CalendricalError,
    InvalidArgumentError,
    CalendarOverflowError,
    PreconditionError,
    UnknownSchemaError,
)
from .core.types import AdditionRule, CalendricalProfile, DateParts, MonthParts, OrdinalParts, Range

__all__ = [
    "list_schemas",
    "get_schema",
    "register_schema",
    "schema_info",
    "make_segment",
    "make_arithmetic",
    "make_date_math",
    "make_validator",
    "today",
    "CalendricalError",
    "InvalidArgumentError",
    "CalendarOverflowError",
    "PreconditionError",
    "UnknownSchemaError",
    "AdditionRule",
    "CalendricalProfile",
    "DateParts",
    "MonthParts",
    "OrdinalParts",
    "Range",
]
