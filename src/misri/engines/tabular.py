"""
misri.engines.tabular
---------------------
Arithmetic lunar calendar on a 30-year intercalation cycle. Maps absolute
Julian Day Numbers to (year, month, day) labels and back.

Within a year, months alternate 30 and 29 days; the twelfth month gains a
30th day in leap years. Year boundaries are located by the mean year
cycle_days / cycle_years, offset by `shift`.
"""

from __future__ import annotations

import logging
import math
from dataclasses import asdict
from fractions import Fraction
from typing import Any, Dict

from ..core.errors import DateRangeError, InvalidDateError
from ..core.time import civil_date, from_jdn, to_jdn, weekday, as_int
from ..core.types import CalendarDate, CivilDate, DayInfo, EngineId, LunarDate, TabularParams

LOG = logging.getLogger(__name__)

# Month boundaries sit 1e-4 day below multiples of mean_month, so a
# boundary never lands on a half day.
MONTH_NUDGE = Fraction(1, 10000)


class TabularLunarEngine:
    def __init__(self, id: EngineId, params: TabularParams):
        self.id = id
        self.p = params
        # Numerator offset of the forward month division: 28.5001 for a 29.5-day month.
        self.month_round = params.mean_month - 1 + MONTH_NUDGE
        self._check_month_layout()

    def _check_month_layout(self) -> None:
        my = self.mean_year
        lengths = [self.month_start_offset(m + 1) - self.month_start_offset(m) for m in range(1, 12)]
        lengths += [y - self.month_start_offset(12) for y in {math.floor(my), math.ceil(my)}]
        if not all(1 <= n <= 30 for n in lengths):
            raise ValueError(
                f"mean_month={self.p.mean_month} gives month lengths {sorted(set(lengths))}; "
                "every month must have 1..30 days"
            )

    @property
    def mean_year(self) -> Fraction:
        return Fraction(self.p.cycle_days, self.p.cycle_years)

    def info(self) -> Dict[str, Any]:
        p = self.p
        return {
            "id": asdict(self.id),
            "kind": "tabular",
            "params": {
                "epoch_jdn": p.epoch_jdn,
                "cycle_days": p.cycle_days,
                "cycle_years": p.cycle_years,
                "shift": str(p.shift),
                "mean_month": str(p.mean_month),
            },
            "supported": {
                "min_jdn": p.min_jdn,
                "max_jdn": p.max_jdn,
                "first_date": from_jdn(p.min_jdn).isoformat(),
                "last_date": from_jdn(p.max_jdn).isoformat(),
            },
        }

    def check_range(self, jdn: int) -> int:
        if not (self.p.min_jdn <= jdn <= self.p.max_jdn):
            raise DateRangeError(
                f"JDN {jdn} outside supported range "
                f"[{self.p.min_jdn}, {self.p.max_jdn}] of engine '{self.id.name}'"
            )
        return jdn

    # ---------------------------------------------------------
    # Year / month structure
    # ---------------------------------------------------------

    def _year_offset(self, year: int) -> int:
        """Days from epoch_jdn to the last day of year-1."""
        cyc, j = divmod(year, self.p.cycle_years)
        return self.p.cycle_days * cyc + math.floor(j * self.mean_year + self.p.shift)

    def new_year_jdn(self, year: int) -> int:
        """JDN of 1 Muharram of `year` (no range check)."""
        return self.p.epoch_jdn + self._year_offset(year) + 1

    def year_length(self, year: int) -> int:
        return self._year_offset(year + 1) - self._year_offset(year)

    def is_leap_year(self, year: int) -> bool:
        return self.year_length(year) > math.floor(self.mean_year)

    def month_start_offset(self, month: int) -> int:
        """Days of the lunar year preceding day 1 of `month` (0 for month 1)."""
        return math.ceil((month - 1) * self.p.mean_month - MONTH_NUDGE)

    def month_length(self, year: int, month: int) -> int:
        if not (1 <= month <= 12):
            raise InvalidDateError(f"lunar month must be in 1..12, got {month}")
        if month == 12:
            return self.year_length(year) - self.month_start_offset(12)
        return self.month_start_offset(month + 1) - self.month_start_offset(month)

    # ---------------------------------------------------------
    # Forward: JDN -> lunar label
    # ---------------------------------------------------------

    def _decompose(self, jdn: int) -> Dict[str, Any]:
        p = self.p
        z = jdn - p.epoch_jdn
        cyc = z // p.cycle_days
        z = z - p.cycle_days * cyc
        z_cycle = z

        j = math.floor((z - p.shift) / self.mean_year)
        year = p.cycle_years * cyc + j
        z = z - math.floor(j * self.mean_year + p.shift)

        raw_month = math.floor((z + self.month_round) / p.mean_month)
        month = min(raw_month, 12)
        day = z - self.month_start_offset(month)
        return {
            "jdn": jdn,
            "cycle": cyc,
            "day_of_cycle": z_cycle,
            "year_in_cycle": j,
            "day_of_year": z,
            "raw_month": raw_month,
            "year": year,
            "month": month,
            "day": day,
        }

    def jdn_to_lunar(self, jdn: int) -> LunarDate:
        jdn = self.check_range(as_int("jdn", jdn))
        parts = self._decompose(jdn)
        if parts["raw_month"] > 12:
            LOG.debug("JDN %d: raw month %d folded into month 12 (day %d)", jdn, parts["raw_month"], parts["day"])
        return LunarDate(engine=self.id, year=parts["year"], month=parts["month"], day=parts["day"])

    # ---------------------------------------------------------
    # Inverse: lunar label -> JDN
    # ---------------------------------------------------------

    def validate_lunar(self, year, month, day) -> None:
        year = as_int("year", year)
        month = as_int("month", month)
        day = as_int("day", day)
        last = self.month_length(year, month)
        if not (1 <= day <= last):
            raise InvalidDateError(f"day must be in 1..{last} for lunar {year}-{month:02d}, got {day}")

    def lunar_to_jdn(self, year: int, month: int, day: int) -> int:
        self.validate_lunar(year, month, day)
        jdn = self.p.epoch_jdn + self._year_offset(year) + self.month_start_offset(month) + day
        return self.check_range(jdn)

    # ---------------------------------------------------------
    # Civil-facing helpers
    # ---------------------------------------------------------

    def day_info(self, d: CivilDate, *, debug: bool = False) -> DayInfo:
        jdn = to_jdn(d)
        lunar = self.jdn_to_lunar(jdn)
        return DayInfo(
            civil_date=civil_date(d),
            jdn=jdn,
            engine=self.id,
            lunar=lunar,
            weekday=weekday(jdn),
            debug=self._decompose(jdn) if debug else None,
        )

    def to_gregorian(self, t: LunarDate) -> CalendarDate:
        return from_jdn(self.lunar_to_jdn(t.year, t.month, t.day))

    def explain(self, d: CivilDate) -> Dict[str, Any]:
        jdn = self.check_range(to_jdn(d))
        out = self._decompose(jdn)
        out["civil_date"] = civil_date(d).isoformat()
        out["folded"] = out["raw_month"] > 12
        out["year_length"] = self.year_length(out["year"])
        LOG.debug("explain %s -> %s", out["civil_date"], out)
        return out
