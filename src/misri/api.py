from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Any, Callable, Dict, List, Optional, Sequence

from .core.engine import CalendarEngine, EngineRegistry
from .core.errors import InvalidDateError
from .core.time import days_in_month, from_jdn, in_reform_gap, as_int
from .core.types import CalendarDate, CivilDate, DayInfo, EngineSpec, LunarDate
from .attributes.registry import compute_attributes
from .engines.factory import make_engine as _make_engine
from .formatting import format_day

LOG = logging.getLogger(__name__)

DEFAULT_ENGINE = "misri"
_registry: Optional[EngineRegistry] = None

def set_registry(reg: EngineRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> EngineRegistry:
    if _registry is None:
        raise RuntimeError("Engine registry not initialized")
    return _registry

def list_engines() -> List[str]:
    return _reg().list()

def engine_info(engine: str) -> Dict[str, Any]:
    return _reg().get(engine).info()

def make_engine(spec: EngineSpec) -> CalendarEngine:
    return _make_engine(spec)

def register_engine(name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
    """Register under engine.id.name; LunarDate.engine resolves back through that name."""
    if name != engine.id.name:
        raise ValueError(f"engine must be registered under its id name '{engine.id.name}', got '{name}'")
    _reg().register(name, engine, overwrite=overwrite)

# ============================================================
# Day-level API
# ============================================================

def day_info(
    d: CivilDate,
    *,
    engine: str = DEFAULT_ENGINE,
    attributes: Sequence[str] = (),
    debug: bool = False,
) -> DayInfo:
    info = _reg().get(engine).day_info(d, debug=debug)
    if attributes:
        attrs = compute_attributes(info, attributes)
        info = replace(info, attributes=attrs)
    return info

def jdn_to_lunar(jdn: int, *, engine: str = DEFAULT_ENGINE) -> LunarDate:
    return _reg().get(engine).jdn_to_lunar(jdn)

def to_lunar(d: CivilDate, *, engine: str = DEFAULT_ENGINE) -> LunarDate:
    return _reg().get(engine).day_info(d).lunar

def format_date(d: CivilDate, *, engine: str = DEFAULT_ENGINE, weekday: bool = False) -> str:
    """'1 Muharram 1446 H' (or 'Sun 1 Muharram 1446 H' with weekday=True)."""
    return format_day(day_info(d, engine=engine), weekday=weekday)

def today(*, engine: str = DEFAULT_ENGINE, clock: Optional[Callable[[], date]] = None) -> DayInfo:
    """Reads the host clock once (or `clock`, if given) and converts that date."""
    d = (clock or date.today)()
    return day_info(d, engine=engine)

def lunar_date(Y: int, M: int, D: int, *, engine: str = DEFAULT_ENGINE) -> LunarDate:
    """Validated LunarDate tagged with the engine id."""
    eng = _reg().get(engine)
    eng.validate_lunar(Y, M, D)
    return LunarDate(engine=eng.id, year=Y, month=M, day=D)

def to_gregorian(t: LunarDate, *, engine: Optional[str] = None) -> CalendarDate:
    eng = _reg().get(engine) if engine is not None else _reg().get(t.engine.name)
    return eng.to_gregorian(t)

def explain(d: CivilDate, *, engine: str = DEFAULT_ENGINE) -> Dict[str, Any]:
    return _reg().get(engine).explain(d)

# ============================================================
# Month-level API
# ============================================================

def month_bounds(Y: int, M: int, *, engine: str = DEFAULT_ENGINE) -> Dict[str, Any]:
    eng = _reg().get(engine)
    first_jdn = eng.lunar_to_jdn(Y, M, 1)
    n_days = eng.month_length(Y, M)
    last_jdn = eng.lunar_to_jdn(Y, M, n_days)
    return {
        "Y": Y,
        "M": M,
        "days": n_days,
        "first_jdn": first_jdn,
        "last_jdn": last_jdn,
        "first_date": from_jdn(first_jdn),
        "last_date": from_jdn(last_jdn),
    }

def new_year_day(Y: int, *, engine: str = DEFAULT_ENGINE) -> Dict[str, Any]:
    eng = _reg().get(engine)
    jdn = eng.lunar_to_jdn(Y, 1, 1)
    return {"Y": Y, "jdn": jdn, "date": from_jdn(jdn), "year_length": eng.year_length(Y)}

def lunar_month_days(Y: int, M: int, *, engine: str = DEFAULT_ENGINE) -> List[DayInfo]:
    b = month_bounds(Y, M, engine=engine)
    eng = _reg().get(engine)
    return [eng.day_info(from_jdn(j)) for j in range(b["first_jdn"], b["last_jdn"] + 1)]

def civil_month_days(year: int, month: int, *, engine: str = DEFAULT_ENGINE) -> List[DayInfo]:
    """One DayInfo per existing day of a civil month (reform gap skipped)."""
    eng = _reg().get(engine)
    year = as_int("year", year)
    month = as_int("month", month)
    out = []
    for day in range(1, days_in_month(year, month) + 1):
        if in_reform_gap(year, month, day):
            continue
        out.append(eng.day_info(CalendarDate(year, month, day)))
    return out

def month_grid(
    year: int,
    month: int,
    *,
    engine: str = DEFAULT_ENGINE,
    first_weekday: int = 0,
) -> List[List[Optional[DayInfo]]]:
    """
    Weeks of 7 cells for a civil month, padded with None.
    first_weekday uses the 0=Sun..6=Sat convention (default: Sunday first).
    """
    days = civil_month_days(year, month, engine=engine)
    weeks = _to_weeks(days, first_weekday)
    LOG.debug("grid %d-%02d: %d days, %d weeks", year, month, len(days), len(weeks))
    return weeks

def lunar_month_grid(
    Y: int,
    M: int,
    *,
    engine: str = DEFAULT_ENGINE,
    first_weekday: int = 0,
) -> List[List[Optional[DayInfo]]]:
    """Same layout as month_grid, for the days of a lunar month."""
    days = lunar_month_days(Y, M, engine=engine)
    return _to_weeks(days, first_weekday)

def _to_weeks(days: List[DayInfo], first_weekday: int) -> List[List[Optional[DayInfo]]]:
    if not (0 <= first_weekday <= 6):
        raise InvalidDateError(f"first_weekday must be in 0..6, got {first_weekday}")
    pad = (days[0].weekday - first_weekday) % 7
    cells: List[Optional[DayInfo]] = [None] * pad + list(days)
    cells += [None] * (-len(cells) % 7)
    return [cells[i:i + 7] for i in range(0, len(cells), 7)]
