"""misri public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    day_info,
    to_lunar,
    jdn_to_lunar,
    lunar_date,
    format_date,
    today,
    to_gregorian,
    explain,
    list_engines,
    engine_info,
    make_engine,
    register_engine,
    month_bounds,
    new_year_day,
    lunar_month_days,
    civil_month_days,
    month_grid,
    lunar_month_grid,
)
from .core.errors import MisriError, InvalidDateError, DateRangeError, RegistryError
from .core.time import to_jdn, from_jdn, gregorian_to_jdn
from .core.types import CalendarDate, LunarDate, DayInfo
from .formatting import format_lunar, MONTH_NAMES

__all__ = [
    "day_info",
    "to_lunar",
    "jdn_to_lunar",
    "lunar_date",
    "format_date",
    "today",
    "to_gregorian",
    "explain",
    "list_engines",
    "engine_info",
    "make_engine",
    "register_engine",
    "month_bounds",
    "new_year_day",
    "lunar_month_days",
    "civil_month_days",
    "month_grid",
    "lunar_month_grid",
    "MisriError",
    "InvalidDateError",
    "DateRangeError",
    "RegistryError",
    "to_jdn",
    "from_jdn",
    "gregorian_to_jdn",
    "CalendarDate",
    "LunarDate",
    "DayInfo",
    "format_lunar",
    "MONTH_NAMES",
]
