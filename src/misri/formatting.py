"""Display names and string rendering for lunar dates."""

from __future__ import annotations

from typing import Tuple

from .core.errors import InvalidDateError
from .core.types import DayInfo, LunarDate

MONTH_NAMES: Tuple[str, ...] = (
    "Muharram", "Safar", "Rabi al-Awwal", "Rabi al-Thani",
    "Jumada al-Ula", "Jumada al-Thani", "Rajab", "Shaban",
    "Ramadan", "Shawwal", "Dhu al-Qadah", "Dhu al-Hijjah",
)

WEEKDAY_NAMES: Tuple[str, ...] = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

ERA_SUFFIX = "H"


def month_name(index: int) -> str:
    """1-based lookup into MONTH_NAMES."""
    if not (1 <= index <= len(MONTH_NAMES)):
        raise InvalidDateError(f"month index must be in 1..12, got {index}")
    return MONTH_NAMES[index - 1]


def format_lunar(t: LunarDate) -> str:
    """'<day> <MonthName> <year> H', e.g. '1 Muharram 1446 H'."""
    return f"{t.day} {month_name(t.month)} {t.year} {ERA_SUFFIX}"


def format_day(info: DayInfo, *, weekday: bool = True) -> str:
    s = format_lunar(info.lunar)
    if weekday:
        s = f"{WEEKDAY_NAMES[info.weekday]} {s}"
    return s
