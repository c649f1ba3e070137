# tests/test_time.py

import random
from datetime import date, datetime, timezone

import pytest

from kurdcal.core import time as kt
from kurdcal.core.errors import OutOfRangeError


def test_jdn_date_roundtrip():
    random.seed(42)
    # Constrain to year 1 - 9999 to avoid datetime out of range
    for _ in range(5000):
        jdn_in = random.randint(1721426, 5373484)
        d = kt.from_jdn(jdn_in)
        assert kt.to_jdn(d) == jdn_in
        assert d.toordinal() + 1721425 == jdn_in


def test_proleptic_years_before_one():
    # 1 BCE (year 0) is a leap year in the proleptic Gregorian calendar
    jdn = kt.ymd_to_jdn(0, 2, 29)
    assert kt.jdn_to_ymd(jdn) == (0, 2, 29)
    assert kt.jdn_to_ymd(jdn + 1) == (0, 3, 1)
    assert kt.jdn_to_ymd(kt.ymd_to_jdn(-699, 3, 21)) == (-699, 3, 21)
    with pytest.raises(OutOfRangeError):
        kt.from_jdn(jdn)


def test_known_epochs():
    assert kt.to_jdn(date(2000, 1, 1)) == 2451545
    assert kt.datetime_utc_to_jd(datetime(1970, 1, 1, tzinfo=timezone.utc)) == 2440587.5
    assert kt.jd_to_datetime_utc(2451545.0) == datetime(2000, 1, 1, 12, tzinfo=timezone.utc)


def test_jd_datetime_roundtrip():
    random.seed(7)
    for _ in range(500):
        jd_in = random.uniform(2400000.5, 2500000.5)
        jd_out = kt.datetime_utc_to_jd(kt.jd_to_datetime_utc(jd_in))
        # 1e-8 days is roughly a millisecond
        assert jd_in == pytest.approx(jd_out, abs=1e-8)


def test_naive_datetime_rejected():
    with pytest.raises(ValueError):
        kt.datetime_utc_to_jd(datetime(2000, 1, 1))


def test_weekday_sunday_zero():
    assert kt.jdn_weekday(kt.to_jdn(date(2025, 3, 20))) == 4  # Thursday
    assert kt.jdn_weekday(kt.to_jdn(date(2025, 3, 23))) == 0  # Sunday
    for d in (date(1999, 12, 31), date(2024, 2, 29), date(1, 1, 1)):
        assert kt.jdn_weekday(kt.to_jdn(d)) == (d.weekday() + 1) % 7
