# tests/test_simplified.py

import random
from datetime import date, timedelta

import pytest

from kurdcal import CalendarDate, Weekday
from kurdcal.core.errors import CrossEngineError, OutOfRangeError
from kurdcal.engines.months import MONTH_LENGTHS, month_day_from_offset
from kurdcal.engines.simplified import cycle_position, is_simplified_leap_year


def test_nowruz_is_21_march(simplified):
    assert simplified.nowruz(2725) == date(2025, 3, 21)
    assert simplified.nowruz(1700) == date(1000, 3, 21)
    assert simplified.nowruz(3700) == date(3000, 3, 21)


def test_known_conversions(simplified):
    assert simplified.from_gregorian(date(2025, 3, 21)).ymd == (2725, 1, 1)
    assert simplified.from_gregorian(date(2025, 3, 20)).ymd == (2724, 12, 29)
    assert simplified.to_gregorian(simplified.make(2725, 1, 15)) == date(2025, 4, 4)
    assert simplified.to_gregorian(simplified.make(2725, 12, 29)) == date(2026, 3, 20)
    assert simplified.weekday(simplified.make(2725, 1, 1)) == Weekday.FRIDAY


def test_leap_table():
    leap = [2723, 2728, 2732, 2736, 2740, 2744, 2748, 2752]
    common = [2724, 2725, 2726, 2727, 2729, 2730]
    assert all(is_simplified_leap_year(y) for y in leap)
    assert not any(is_simplified_leap_year(y) for y in common)
    assert cycle_position(1) == 1
    assert cycle_position(33) == 33
    assert cycle_position(34) == 1
    # eight leap years in every 33-year block
    assert sum(is_simplified_leap_year(y) for y in range(2707, 2740)) == 8


def test_month_lengths(simplified):
    assert sum(MONTH_LENGTHS) == 365
    assert [simplified.days_in_month(2725, m) for m in range(1, 13)] == [31] * 6 + [30] * 5 + [29]
    assert simplified.days_in_month(2728, 12) == 30
    assert simplified.days_in_year(2725) == 365
    assert simplified.days_in_year(2728) == 366


def test_offsets_to_month_day():
    assert month_day_from_offset(0) == (1, 1)
    assert month_day_from_offset(30) == (1, 31)
    assert month_day_from_offset(31) == (2, 1)
    assert month_day_from_offset(186) == (7, 1)
    assert month_day_from_offset(335) == (11, 30)
    assert month_day_from_offset(336) == (12, 1)
    assert month_day_from_offset(365) == (12, 30)
    with pytest.raises(OutOfRangeError):
        month_day_from_offset(-1)


def test_common_year_spanning_a_gregorian_leap_day(simplified):
    # 2727 is common in the table but 21 Mar 2027 -> 21 Mar 2028 is 366 days
    assert not simplified.is_leap_year(2727)
    assert simplified.span_days(2727) == 366
    d = simplified.from_gregorian(date(2028, 3, 20))
    assert d.ymd == (2727, 12, 30)
    assert simplified.to_gregorian(d) == date(2028, 3, 20)
    assert simplified.max_day(2727, 12) == 30


def test_leap_year_spanning_365_days(simplified):
    assert simplified.is_leap_year(2728)
    assert simplified.span_days(2728) == 365
    last = simplified.make(2728, 12, 30)
    assert simplified.to_gregorian(last) == date(2029, 3, 21)
    assert simplified.from_gregorian(date(2029, 3, 21)).ymd == (2729, 1, 1)


def test_gregorian_roundtrip(simplified):
    random.seed(33)
    eng = simplified
    start = date(1900, 1, 1)
    span = (date(2100, 12, 31) - start).days
    for _ in range(3000):
        g = start + timedelta(days=random.randint(0, span))
        assert eng.to_gregorian(eng.from_gregorian(g)) == g


def test_calendar_roundtrip_over_whole_year(simplified):
    for year in (2723, 2725):
        for m in range(1, 13):
            for d in range(1, simplified.days_in_month(year, m) + 1):
                kd = simplified.make(year, m, d)
                assert simplified.from_gregorian(simplified.to_gregorian(kd)) == kd


def test_day_of_year(simplified):
    assert simplified.day_of_year(simplified.make(2725, 1, 1)) == 1
    assert simplified.day_of_year(simplified.make(2725, 7, 1)) == 187
    assert simplified.day_of_year(simplified.make(2725, 12, 29)) == 365
    assert simplified.day_of_year(simplified.make(2728, 12, 30)) == 366


@pytest.mark.parametrize(
    "ymd",
    [(2725, 12, 30), (2725, 7, 31), (2725, 13, 1), (2725, 0, 1), (2725, 1, 0), (0, 1, 1), (-5, 1, 1)],
)
def test_invalid_dates(simplified, ymd):
    with pytest.raises(OutOfRangeError):
        simplified.make(*ymd)


def test_first_year(simplified):
    # year 1 precedes datetime.date, so stay on day numbers
    first = simplified.make(1, 1, 1)
    assert simplified.from_jdn(simplified.to_jdn(first)) == first
    with pytest.raises(OutOfRangeError):
        simplified.from_jdn(simplified.to_jdn(first) - 1)


def test_rejects_foreign_dates(simplified):
    foreign = CalendarDate(2725, 1, 1, "astronomical", 44.0)
    with pytest.raises(CrossEngineError):
        simplified.to_jdn(foreign)


def test_info(simplified):
    info = simplified.info()
    assert info["kind"] == "simplified"
    assert info["longitude"] is None
    assert info["epoch_offset"] == -700
    assert info["leap_positions"] == [1, 5, 9, 13, 17, 22, 26, 30]


def test_year_info_reports_span_past_nominal_length(simplified):
    info = simplified.year_info(2727)
    assert info["is_leap"] is False
    assert info["days_in_year"] == 365
    assert info["span_days"] == 366
    assert info["last_month_days"] == 30
    assert simplified.days_in_month(2727, 12) == 29
    last = simplified.make(2727, 12, 30)
    assert simplified.day_of_year(last) == info["span_days"]
    assert simplified.year_info(2725)["span_days"] == simplified.year_info(2725)["days_in_year"] == 365
