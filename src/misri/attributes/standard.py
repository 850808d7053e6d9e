from __future__ import annotations
from typing import Any, Dict

from .registry import register_attribute
from ..formatting import WEEKDAY_NAMES

def _engine(info):
    # late import: the registry lives in misri.api
    from ..api import _reg
    return _reg().get(info.engine.name)

def weekday(info) -> Dict[str, Any]:
    # Convention: 0=Sun..6=Sat
    return {"weekday": info.weekday, "weekday_name": WEEKDAY_NAMES[info.weekday]}

def jdn(info) -> Dict[str, Any]:
    return {"jdn": info.jdn}

def leap_year(info) -> Dict[str, Any]:
    eng = _engine(info)
    y = info.lunar.year
    return {"leap_year": eng.is_leap_year(y), "year_length": eng.year_length(y)}

def month_length(info) -> Dict[str, Any]:
    t = info.lunar
    return {"month_length": _engine(info).month_length(t.year, t.month)}

register_attribute("weekday", weekday)
register_attribute("jdn", jdn)
register_attribute("leap_year", leap_year)
register_attribute("month_length", month_length)
