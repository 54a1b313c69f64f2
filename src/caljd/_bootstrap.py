from __future__ import annotations
import logging

from caljd.core.engine import EngineRegistry
from caljd.engines.specs import ALL_SPECS
from caljd.engines.factory import make_engine

logger = logging.getLogger(__name__)

def build_registry() -> EngineRegistry:
    engines = {}
    for kind, spec in ALL_SPECS.items():
        engines[kind] = make_engine(spec)
    logger.debug("Built calendar registry: %s", sorted(k.value for k in engines))
    return EngineRegistry(engines)
