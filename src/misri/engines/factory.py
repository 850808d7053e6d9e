"""
misri.engines.factory
---------------------
Transforms pure data specifications into live, executable Engine objects.
"""

from __future__ import annotations
from misri.core.types import EngineSpec
from misri.engines.tabular import TabularLunarEngine


def make_engine(spec: EngineSpec) -> TabularLunarEngine:
    """The universal entry point."""
    if spec.kind == "tabular":
        return TabularLunarEngine(spec.id, spec.payload)
    raise TypeError(f"Unknown engine kind: {spec.kind!r}")
