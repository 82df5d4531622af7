from __future__ import annotations

from typing import Any, Dict, List, Optional

from .arithmetic.base import CalendricalArithmetic
from .arithmetic.datemath import DateMath
from .arithmetic.factory import create_default as _create_arithmetic
from .core import time
from .core.registry import SchemaRegistry
from .core.types import AdditionRule, Range
from .schemas.base import CalendricalSchema
from .schemas.specs import ALL_SPECS
from .segment import CalendricalSegment
from .validation import prevalidators

_registry: Optional[SchemaRegistry] = None


def set_registry(reg: SchemaRegistry) -> None:
    global _registry
    _registry = reg


def _reg() -> SchemaRegistry:
    if _registry is None:
        raise RuntimeError("Schema registry not initialized")
    return _registry


def list_schemas() -> List[str]:
    return _reg().list()


def get_schema(name: str) -> CalendricalSchema:
    return _reg().get(name)


def register_schema(name: str, schema: CalendricalSchema, *, overwrite: bool = False) -> None:
    _reg().register(name, schema, overwrite=overwrite)


def schema_info(name: str) -> Dict[str, Any]:
    sch = get_schema(name)
    regular, months_in_year = sch.is_regular()
    spec = ALL_SPECS.get(name)
    return {
        "name": name,
        "description": spec.description if spec else type(sch).__name__,
        "profile": sch.profile.value,
        "regular": regular,
        "months_in_year": months_in_year if regular else None,
        "min_days_in_year": sch.min_days_in_year,
        "min_days_in_month": sch.min_days_in_month,
        "min_months_in_year": sch.min_months_in_year,
        "supported_years": sch.supported_years.endpoints,
        "epoch": spec.epoch if spec else None,
    }


def make_segment(name: str, years: Optional[Range] = None) -> CalendricalSegment:
    sch = get_schema(name)
    if years is None:
        return CalendricalSegment.create_maximal(sch)
    return CalendricalSegment.create(sch, years)


def make_arithmetic(name: str, years: Optional[Range] = None) -> CalendricalArithmetic:
    return _create_arithmetic(make_segment(name, years))


def make_date_math(name: str, rule: AdditionRule = AdditionRule.TRUNCATE) -> DateMath:
    return DateMath(make_arithmetic(name), rule)


def make_validator(name: str) -> prevalidators.PreValidator:
    return prevalidators.create_default(get_schema(name))


def today() -> int:
    """Today as a day number."""
    return time.today()
