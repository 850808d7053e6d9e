from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Protocol

from .errors import RegistryError
from .types import CalendarDate, CivilDate, DayInfo, EngineId, LunarDate

class CalendarEngine(Protocol):
    id: EngineId

    def info(self) -> Dict[str, Any]: ...
    def day_info(self, d: CivilDate, *, debug: bool = False) -> DayInfo: ...
    def jdn_to_lunar(self, jdn: int) -> LunarDate: ...
    def lunar_to_jdn(self, year: int, month: int, day: int) -> int: ...
    def validate_lunar(self, year: int, month: int, day: int) -> None: ...
    def month_length(self, year: int, month: int) -> int: ...
    def year_length(self, year: int) -> int: ...
    def to_gregorian(self, t: LunarDate) -> CalendarDate: ...
    def explain(self, d: CivilDate) -> Dict[str, Any]: ...

@dataclass
class EngineRegistry:
    _engines: Dict[str, CalendarEngine]

    def get(self, name: str) -> CalendarEngine:
        if name not in self._engines:
            raise RegistryError(f"Unknown engine '{name}'. Available: {sorted(self._engines)}")
        return self._engines[name]

    def list(self) -> List[str]:
        return sorted(self._engines.keys())

    def register(self, name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._engines):
            raise RegistryError(f"Engine '{name}' already exists. Use overwrite=True to replace.")
        self._engines[name] = engine
