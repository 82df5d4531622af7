from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, List

from .errors import UnknownSchemaError

if TYPE_CHECKING:
    from ..schemas.base import CalendricalSchema


@dataclass
class SchemaRegistry:
    _schemas: Dict[str, "CalendricalSchema"]

    def get(self, name: str) -> "CalendricalSchema":
        if name not in self._schemas:
            raise UnknownSchemaError(f"Unknown schema '{name}'. Available: {sorted(self._schemas)}")
        return self._schemas[name]

    def list(self) -> List[str]:
        return sorted(self._schemas.keys())

    def register(self, name: str, schema: "CalendricalSchema", *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._schemas):
            raise KeyError(f"Schema '{name}' already exists. Use overwrite=True to replace.")
        self._schemas[name] = schema
