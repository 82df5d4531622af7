from __future__ import annotations

import logging

from .core.registry import SchemaRegistry
from .schemas.specs import ALL_SPECS

logger = logging.getLogger(__name__)


def build_registry() -> SchemaRegistry:
    schemas = {}
    for name, spec in ALL_SPECS.items():
        schemas[name] = spec.build()
    logger.debug("registered %s schemas", len(schemas))
    return SchemaRegistry(schemas)
