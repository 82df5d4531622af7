"""
calendrical.schemas.specs
-------------------------
Catalogue of the schemas shipped with the package.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from ..core import time
from .base import CalendricalSchema
from .coptic import Coptic12Schema, Coptic13Schema
from .egyptian import Egyptian12Schema, Egyptian13Schema
from .french_republican import FrenchRepublican12Schema, FrenchRepublican13Schema
from .gregorian import GregorianSchema, JulianSchema
from .islamic import TabularIslamicSchema
from .lunisolar import LunisolarSchema
from .pax import PaxSchema
from .perennial import InternationalFixedSchema, PositivistSchema, WorldSchema
from .tropicalia import Tropicalia3031Schema, TropicaliaSchema


@dataclass(frozen=True)
class SchemaSpec:
    """Pure data payload describing how to build a schema."""
    name: str
    factory: Callable[[], CalendricalSchema]
    description: str
    # Day number of the first day of year 1, when the calendar has a
    # conventional epoch.
    epoch: Optional[int] = None

    def build(self) -> CalendricalSchema:
        return self.factory()


ALL_SPECS: Dict[str, SchemaSpec] = {
    s.name: s
    for s in (
        SchemaSpec("gregorian", GregorianSchema, "Proleptic Gregorian calendar", time.GREGORIAN_EPOCH),
        SchemaSpec("julian", JulianSchema, "Proleptic Julian calendar", time.JULIAN_EPOCH),
        SchemaSpec("coptic12", Coptic12Schema, "Coptic calendar, epagomenal days in month 12", time.COPTIC_EPOCH),
        SchemaSpec("coptic13", Coptic13Schema, "Coptic calendar, epagomenal days as month 13", time.COPTIC_EPOCH),
        SchemaSpec("egyptian12", Egyptian12Schema, "Egyptian wandering year, 12 months", time.EGYPTIAN_EPOCH),
        SchemaSpec("egyptian13", Egyptian13Schema, "Egyptian wandering year, 13 months", time.EGYPTIAN_EPOCH),
        SchemaSpec(
            "french_republican12",
            FrenchRepublican12Schema,
            "French republican calendar (Romme rule), 12 months",
            time.FRENCH_REPUBLICAN_EPOCH,
        ),
        SchemaSpec(
            "french_republican13",
            FrenchRepublican13Schema,
            "French republican calendar (Romme rule), 13 months",
            time.FRENCH_REPUBLICAN_EPOCH,
        ),
        SchemaSpec("tabular_islamic", TabularIslamicSchema, "Tabular Islamic calendar", time.TABULAR_ISLAMIC_EPOCH),
        SchemaSpec("positivist", PositivistSchema, "Positivist calendar", time.POSITIVIST_EPOCH),
        SchemaSpec("international_fixed", InternationalFixedSchema, "International Fixed calendar", time.GREGORIAN_EPOCH),
        SchemaSpec("world", WorldSchema, "World calendar", time.GREGORIAN_EPOCH),
        SchemaSpec("tropicalia", TropicaliaSchema, "Tropicalia, Gregorian months"),
        SchemaSpec("tropicalia3031", Tropicalia3031Schema, "Tropicalia, alternating 30/31-day months"),
        SchemaSpec("pax", PaxSchema, "Pax leap-week calendar", time.GREGORIAN_EPOCH - 1),
        SchemaSpec("lunisolar", LunisolarSchema, "Arithmetical lunisolar calendar (4-year cycle)"),
    )
}
