# tests/test_api.py

from datetime import date

import pytest

import misri
from misri.core.errors import InvalidDateError
from misri.core.types import CalendarDate
from misri.engines.specs import EPOCH_MISRI, MIN_JDN_MISRI, MISRI, tweak
from misri.formatting import MONTH_NAMES, format_lunar, month_name


def test_public_surface():
    assert "misri" in misri.list_engines()
    info = misri.engine_info("misri")
    assert info["params"]["epoch_jdn"] == EPOCH_MISRI
    assert info["supported"]["first_date"] == "0622-07-15"
    assert info["supported"]["last_date"] == "9999-12-31"
    with pytest.raises(KeyError):
        misri.engine_info("nope")


def test_format_date():
    assert misri.format_date(date(2024, 7, 7)) == "1 Muharram 1446 H"
    assert misri.format_date(date(2024, 7, 7), weekday=True) == "Sun 1 Muharram 1446 H"
    assert misri.format_date(date(2018, 9, 10)) == "30 Dhu al-Hijjah 1439 H"


def test_formatting_is_idempotent():
    t = misri.to_lunar(date(2025, 2, 28))
    assert format_lunar(t) == format_lunar(t) == str(t) == "1 Ramadan 1446 H"
    assert t.month_name == "Ramadan"


def test_month_name_bounds():
    assert len(MONTH_NAMES) == 12
    assert month_name(1) == "Muharram"
    assert month_name(12) == "Dhu al-Hijjah"
    for bad in (0, 13):
        with pytest.raises(InvalidDateError):
            month_name(bad)


def test_day_info_attributes():
    info = misri.day_info(date(2024, 7, 7), attributes=("weekday", "jdn", "leap_year", "month_length"))
    assert info.civil_date == CalendarDate(2024, 7, 7)
    assert info.attributes == {
        "weekday": 0,
        "weekday_name": "Sun",
        "jdn": 2460499,
        "leap_year": False,
        "year_length": 354,
        "month_length": 30,
    }
    with pytest.raises(KeyError):
        misri.day_info(date(2024, 7, 7), attributes=("moon_phase",))


def test_day_info_debug():
    info = misri.day_info(date(2024, 7, 7), debug=True)
    assert info.debug["cycle"] == 48
    assert misri.day_info(date(2024, 7, 7)).debug is None


def test_today_reads_clock_once():
    calls = []

    def clock():
        calls.append(1)
        return date(2024, 7, 7)

    info = misri.today(clock=clock)
    assert calls == [1]
    assert (info.lunar.day, info.lunar.month, info.lunar.year) == (1, 1, 1446)


def test_pre_reform_date_objects_are_proleptic():
    # date objects are proleptic Gregorian; CalendarDate fields are Julian before 1582
    g = misri.day_info(date(1000, 1, 6))
    j = misri.day_info(CalendarDate(1000, 1, 1))
    assert g.jdn == j.jdn
    assert g.civil_date == CalendarDate(1000, 1, 1)


def test_to_gregorian_roundtrip():
    t = misri.lunar_date(1446, 9, 1)
    assert misri.to_gregorian(t) == CalendarDate(2025, 2, 28)
    with pytest.raises(InvalidDateError):
        misri.lunar_date(1446, 2, 30)


def test_jdn_to_lunar():
    t = misri.jdn_to_lunar(2460499)
    assert (t.year, t.month, t.day) == (1446, 1, 1)


def test_month_bounds_and_new_year():
    b = misri.month_bounds(1439, 12)
    assert b["days"] == 30
    assert b["last_date"] == CalendarDate(2018, 9, 10)
    assert b["last_jdn"] - b["first_jdn"] == 29

    ny = misri.new_year_day(1446)
    assert ny["date"] == CalendarDate(2024, 7, 7)
    assert ny["year_length"] == 354


def test_lunar_month_days():
    days = misri.lunar_month_days(1446, 1)
    assert len(days) == 30
    assert days[0].civil_date == CalendarDate(2024, 7, 7)
    assert days[-1].civil_date == CalendarDate(2024, 8, 5)
    assert [d.lunar.day for d in days] == list(range(1, 31))


def test_month_grid_sunday_first():
    weeks = misri.month_grid(2024, 7)
    assert len(weeks) == 5
    assert all(len(wk) == 7 for wk in weeks)
    assert weeks[0][0] is None                           # 2024-07-01 is a Monday
    assert weeks[0][1].civil_date == CalendarDate(2024, 7, 1)
    assert weeks[1][0].civil_date == CalendarDate(2024, 7, 7)
    assert str(weeks[1][0].lunar) == "1 Muharram 1446 H"
    cells = [c for wk in weeks for c in wk if c is not None]
    assert len(cells) == 31


def test_month_grid_monday_first():
    weeks = misri.month_grid(2024, 7, first_weekday=1)
    assert weeks[0][0].civil_date == CalendarDate(2024, 7, 1)
    with pytest.raises(InvalidDateError):
        misri.month_grid(2024, 7, first_weekday=7)


def test_civil_month_days_skips_reform_gap():
    days = misri.civil_month_days(1582, 10)
    assert len(days) == 21
    assert days[3].civil_date == CalendarDate(1582, 10, 4)
    assert days[4].civil_date == CalendarDate(1582, 10, 15)
    assert days[4].jdn == days[3].jdn + 1


def test_custom_engine_registration():
    spec = tweak(MISRI, name="misri-plus1", epoch_jdn=EPOCH_MISRI + 1, min_jdn=MIN_JDN_MISRI + 1)
    misri.register_engine("misri-plus1", misri.make_engine(spec), overwrite=True)
    t = misri.to_lunar(date(2024, 7, 8), engine="misri-plus1")
    assert (t.day, t.month, t.year) == (1, 1, 1446)
    assert misri.to_gregorian(t) == CalendarDate(2024, 7, 8)
    with pytest.raises(KeyError):
        misri.register_engine("misri-plus1", misri.make_engine(spec))


def test_registration_name_must_match_engine_id():
    spec = tweak(MISRI, name="misri-y", epoch_jdn=EPOCH_MISRI + 1, min_jdn=MIN_JDN_MISRI + 1)
    with pytest.raises(ValueError):
        misri.register_engine("misri-x", misri.make_engine(spec))
    assert "misri-x" not in misri.list_engines()


def test_lookup_errors_are_registry_errors():
    with pytest.raises(misri.RegistryError) as exc:
        misri.day_info(date(2024, 7, 7), engine="nope")
    assert isinstance(exc.value, KeyError)
    assert str(exc.value).startswith("Unknown engine 'nope'")
    with pytest.raises(misri.RegistryError):
        misri.day_info(date(2024, 7, 7), attributes=("moon_phase",))


def test_lunar_month_grid():
    weeks = misri.lunar_month_grid(1446, 1)
    assert weeks[0][0].civil_date == CalendarDate(2024, 7, 7)   # a Sunday
    assert len(weeks) == 5
    assert all(len(wk) == 7 for wk in weeks)
    cells = [c for wk in weeks for c in wk if c is not None]
    assert [c.lunar.day for c in cells] == list(range(1, 31))
    assert weeks[-1][-1] is None

    monday_first = misri.lunar_month_grid(1446, 1, first_weekday=1)
    assert monday_first[0][:6] == [None] * 6
