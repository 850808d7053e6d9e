from __future__ import annotations

import math
import numbers
from datetime import date
from fractions import Fraction

from .errors import DateRangeError, InvalidDateError
from .types import CalendarDate, CivilDate

# Mean Julian year and the Fliegel-Van Flandern month factor.
DAYS_PER_JULIAN_YEAR = Fraction(1461, 4)
MONTH_FACTOR = Fraction(306001, 10000)

# First Gregorian day: 1582-10-15.
REFORM_JDN = 2299161

# date.toordinal() of 0001-01-01 is 1, whose JDN is 1721426.
_ORDINAL_OFFSET = 1721425

_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


# ============================================================
# Historical calendar rules
# ============================================================

def is_leap_year(year: int) -> bool:
    """Julian rule before 1582, Gregorian rule afterwards."""
    if year < 1582:
        return year % 4 == 0
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    """
    Last day label of a month. October 1582 still reports 31;
    use in_reform_gap() for the days that were dropped.
    """
    if not (1 <= month <= 12):
        raise InvalidDateError(f"month must be in 1..12, got {month}")
    if month == 2 and is_leap_year(year):
        return 29
    return _MONTH_DAYS[month - 1]


def in_reform_gap(year: int, month: int, day: int) -> bool:
    """True for 1582-10-05 .. 1582-10-14, which never existed."""
    return year == 1582 and month == 10 and 5 <= day <= 14


def as_int(name: str, v) -> int:
    if isinstance(v, bool) or not isinstance(v, numbers.Integral):
        raise InvalidDateError(f"{name} must be an integer, got {v!r}")
    return int(v)


def validate_civil_date(year, month, day) -> CalendarDate:
    y = as_int("year", year)
    m = as_int("month", month)
    d = as_int("day", day)
    last = days_in_month(y, m)
    if not (1 <= d <= last):
        raise InvalidDateError(f"day must be in 1..{last} for {y}-{m:02d}, got {d}")
    if in_reform_gap(y, m, d):
        raise InvalidDateError(
            f"{y}-{m:02d}-{d:02d} falls in the Gregorian reform gap (1582-10-05 .. 1582-10-14)"
        )
    return CalendarDate(y, m, d)


# ============================================================
# Civil date <-> JDN
# ============================================================

def gregorian_to_jdn(year: int, month: int, day: int) -> int:
    """
    Civil date -> JDN, with the Julian calendar before the 1582 reform.

    Fliegel-Van Flandern style: March starts the computational year, and the
    century correction b is suppressed before the cutover.
    """
    cd = validate_civil_date(year, month, day)
    y, m, day = cd.year, cd.month, cd.day

    if m < 3:
        y -= 1
        m += 12

    a = y // 100
    b = 2 - a + a // 4
    if y < 1583:
        b = 0
    if y == 1582:
        if m > 10:
            b = -10
        if m == 10:
            b = 0
            if day > 4:
                b = -10

    return math.floor(DAYS_PER_JULIAN_YEAR * (y + 4716)) + math.floor(MONTH_FACTOR * (m + 1)) + day + b - 1524


def from_jdn(jdn: int) -> CalendarDate:
    """Meeus inverse of gregorian_to_jdn (Julian fields before REFORM_JDN)."""
    jdn = as_int("jdn", jdn)
    if jdn < 0:
        raise DateRangeError(f"JDN must be non-negative, got {jdn}")

    if jdn >= REFORM_JDN:
        alpha = math.floor((jdn - Fraction(186721625, 100)) / Fraction(3652425, 100))
        a = jdn + 1 + alpha - alpha // 4
    else:
        a = jdn

    b = a + 1524
    c = math.floor((b - Fraction(1221, 10)) / DAYS_PER_JULIAN_YEAR)
    d = math.floor(DAYS_PER_JULIAN_YEAR * c)
    e = math.floor((b - d) / MONTH_FACTOR)

    day = b - d - math.floor(MONTH_FACTOR * e)
    month = e - 1 if e < 14 else e - 13
    year = c - 4716 if month > 2 else c - 4715
    return CalendarDate(year, month, day)


def date_to_jdn(d: date) -> int:
    """datetime.date (proleptic Gregorian) -> JDN."""
    return d.toordinal() + _ORDINAL_OFFSET


def jdn_to_date(jdn: int) -> date:
    """JDN -> datetime.date (proleptic Gregorian)."""
    try:
        return date.fromordinal(jdn - _ORDINAL_OFFSET)
    except (ValueError, OverflowError) as exc:
        raise DateRangeError(f"JDN {jdn} is outside the datetime.date range") from exc


def to_jdn(d: CivilDate) -> int:
    """
    Accepts a datetime.date (converted exactly through its ordinal) or a
    CalendarDate (historical fields, validated).
    """
    if isinstance(d, date):
        return date_to_jdn(d)
    if isinstance(d, CalendarDate):
        return gregorian_to_jdn(d.year, d.month, d.day)
    raise InvalidDateError(f"Expected date or CalendarDate, got {type(d).__name__}")


def civil_date(d: CivilDate) -> CalendarDate:
    """Historical-calendar fields of d."""
    if isinstance(d, CalendarDate):
        return validate_civil_date(d.year, d.month, d.day)
    return from_jdn(to_jdn(d))


def weekday(jdn: int) -> int:
    """0=Sun..6=Sat."""
    return (jdn + 1) % 7
