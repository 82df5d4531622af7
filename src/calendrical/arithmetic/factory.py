from __future__ import annotations

from ..core.types import CalendricalProfile
from ..segment import CalendricalSegment
from .base import CalendricalArithmetic
from .plain import LunisolarArithmetic, PlainArithmetic
from .regular import LunarArithmetic, RegularArithmetic, Solar12Arithmetic, Solar13Arithmetic


def create_default(segment: CalendricalSegment) -> CalendricalArithmetic:
    """The most specific arithmetic structurally correct for the schema of a segment."""
    profile = segment.schema.profile
    if profile is CalendricalProfile.SOLAR12:
        return Solar12Arithmetic(segment)
    if profile is CalendricalProfile.SOLAR13:
        return Solar13Arithmetic(segment)
    if profile is CalendricalProfile.LUNAR:
        return LunarArithmetic(segment)
    if profile is CalendricalProfile.LUNISOLAR:
        return LunisolarArithmetic(segment)
    regular, _ = segment.schema.is_regular()
    if regular:
        return RegularArithmetic(segment)
    return PlainArithmetic(segment)
