from __future__ import annotations

from dataclasses import replace
from fractions import Fraction
from typing import Dict

from ..core.types import EngineId, EngineSpec, TabularParams


# ============================================================
# MISRI CONSTANTS
# ============================================================

# Cycle counting starts one lunar year before 1 Muharram 1 H,
# which falls on JDN 1948439 (Thursday 622-07-15, Julian).
EPOCH_MISRI = 1948084

# 30 lunar years = 10631 days (11 leap years of 355 days).
CYCLE_DAYS = 10631
CYCLE_YEARS = 30

# 8.01 minutes of a day; places the leap years of the cycle.
SHIFT_MISRI = Fraction(801, 6000)

MEAN_MONTH = Fraction(59, 2)

# 1 Muharram 1 H .. 9999-12-31 (Gregorian).
MIN_JDN_MISRI = 1948439
MAX_JDN = 5373484


MISRI_PARAMS = TabularParams(
    epoch_jdn=EPOCH_MISRI,
    cycle_days=CYCLE_DAYS,
    cycle_years=CYCLE_YEARS,
    shift=SHIFT_MISRI,
    mean_month=MEAN_MONTH,
    min_jdn=MIN_JDN_MISRI,
    max_jdn=MAX_JDN,
)

MISRI = EngineSpec(
    kind="tabular",
    id=EngineId("tabular", "misri", "1"),
    payload=MISRI_PARAMS,
    meta={"era": "H", "description": "Fatimid/Misri tabular calendar, astronomical (Thursday) epoch"},
)


def tweak(spec: EngineSpec, *, name: str | None = None, **kwargs) -> EngineSpec:
    """Copy of `spec` with TabularParams fields replaced (and optionally renamed)."""
    out = replace(spec, payload=replace(spec.payload, **kwargs))
    if name is not None:
        out = replace(out, id=replace(out.id, family="custom", name=name))
    return out


ALL_SPECS: Dict[str, EngineSpec] = {
    "misri": MISRI,
}
