from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Literal, Optional, Union
from datetime import date

@dataclass(frozen=True)
class EngineId:
    family: Literal["tabular", "custom"]
    name: str
    version: str

@dataclass(frozen=True)
class CalendarDate:
    """
    Civil date in the historical calendar: Julian up to 1582-10-04,
    Gregorian from 1582-10-15. Month is 1-based.
    """
    year: int
    month: int
    day: int

    @classmethod
    def from_date(cls, d: date) -> "CalendarDate":
        return cls(d.year, d.month, d.day)

    def isoformat(self) -> str:
        sign = "-" if self.year < 0 else ""
        return f"{sign}{abs(self.year):04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return self.isoformat()

CivilDate = Union[date, CalendarDate]

@dataclass(frozen=True)
class LunarDate:
    engine: EngineId
    year: int
    month: int
    day: int

    @property
    def month_name(self) -> str:
        from ..formatting import month_name
        return month_name(self.month)

    def __str__(self) -> str:
        from ..formatting import format_lunar
        return format_lunar(self)

@dataclass(frozen=True)
class DayInfo:
    civil_date: CalendarDate
    jdn: int
    engine: EngineId
    lunar: LunarDate
    weekday: int  # 0=Sun..6=Sat
    attributes: Optional[Dict[str, Any]] = None
    debug: Optional[Dict[str, Any]] = None

@dataclass(frozen=True)
class TabularParams:
    """
    Constants of a 30-year tabular lunar calendar.

    epoch_jdn is the JDN from which cycles are counted; shift is the fractional
    day offset used when locating year boundaries inside a cycle.
    """
    epoch_jdn: int
    cycle_days: int
    cycle_years: int
    shift: Any        # Fraction
    mean_month: Any   # Fraction
    min_jdn: int
    max_jdn: int

    def __post_init__(self) -> None:
        if self.cycle_days <= 0 or self.cycle_years <= 0:
            raise ValueError("cycle_days and cycle_years must be positive")
        if not (0 <= self.shift < 1):
            raise ValueError("shift must be in [0, 1)")
        if self.mean_month <= 0:
            raise ValueError("mean_month must be positive")
        if self.min_jdn > self.max_jdn:
            raise ValueError("Require min_jdn <= max_jdn")

@dataclass(frozen=True)
class EngineSpec:
    """Top-level wrapper for all engine specifications."""
    kind: Literal["tabular"]
    id: EngineId
    payload: TabularParams
    meta: Dict[str, Any]
