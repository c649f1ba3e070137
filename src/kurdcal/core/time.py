from __future__ import annotations

import math
from datetime import date, datetime, timedelta, timezone
from typing import Tuple

from .errors import OutOfRangeError

JD_J2000 = 2451545.0
_J2000_UTC = datetime(2000, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


# ============================================================
# Proleptic Gregorian <-> JDN  (Fliegel–Van Flandern)
# ============================================================

def ymd_to_jdn(year: int, month: int, day: int) -> int:
    """Gregorian (year, month, day) -> JDN. Years <= 0 are astronomical (0 = 1 BCE)."""
    a = (14 - month) // 12
    y2 = year + 4800 - a
    m2 = month + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045


def jdn_to_ymd(jdn: int) -> Tuple[int, int, int]:
    """Inverse of ymd_to_jdn."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year, month, day


def to_jdn(d: date) -> int:
    return ymd_to_jdn(d.year, d.month, d.day)


def from_jdn(jdn: int) -> date:
    """JDN -> datetime.date; raises OutOfRangeError outside years 1..9999."""
    y, m, d = jdn_to_ymd(jdn)
    if not (1 <= y <= 9999):
        raise OutOfRangeError(f"Gregorian year {y} (JDN {jdn}) is not representable as datetime.date")
    return date(y, m, d)


def jdn_weekday(jdn: int) -> int:
    """Weekday of a JDN, Sunday=0 .. Saturday=6 (JDN 0 was a Monday)."""
    return (jdn + 1) % 7


# ============================================================
# JD(UTC) <-> aware datetime
# ============================================================

def jd_to_jdn(jd: float) -> int:
    return int(math.floor(jd + 0.5))


def jd_to_datetime_utc(jd: float) -> datetime:
    """JD (UTC) -> timezone-aware datetime, microsecond resolution."""
    try:
        return _J2000_UTC + timedelta(days=jd - JD_J2000)
    except OverflowError as exc:
        raise OutOfRangeError(f"JD {jd} is outside the datetime range") from exc


def datetime_utc_to_jd(dt: datetime) -> float:
    """Aware datetime -> JD (UTC)."""
    if dt.tzinfo is None:
        raise ValueError("datetime must be timezone-aware (UTC)")
    delta = dt.astimezone(timezone.utc) - _J2000_UTC
    return JD_J2000 + delta / timedelta(days=1)


def decimal_year_from_jd(jd: float) -> float:
    """Approximate decimal year using the mean Julian year; adequate for ΔT lookup."""
    return 2000.0 + (jd - JD_J2000) / 365.25
