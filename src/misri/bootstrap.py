from __future__ import annotations

import logging

from misri.core.engine import EngineRegistry
from misri.engines.specs import ALL_SPECS
from misri.engines.factory import make_engine

LOG = logging.getLogger(__name__)

def build_registry() -> EngineRegistry:
    engines = {}
    for name, spec in ALL_SPECS.items():
        engines[name] = make_engine(spec)
    LOG.debug("engine registry built: %s", sorted(engines))
    return EngineRegistry(engines)
