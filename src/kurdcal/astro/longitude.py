"""
kurdcal.astro.longitude
-----------------------
Resolve a UTC instant to the local calendar day at a reference meridian.

Local mean time runs longitude/15 hours ahead of UTC. An instant exactly on
local midnight belongs to the day that starts there.
"""
from __future__ import annotations

from datetime import date

from ..core.time import from_jdn, jd_to_jdn


def lmt_offset_hours(longitude_deg_east: float) -> float:
    """360° -> 24h, so 1° -> 4 minutes; positive east."""
    return longitude_deg_east / 15.0


def local_mean_jd(jd_utc: float, longitude_deg_east: float) -> float:
    return jd_utc + longitude_deg_east / 360.0


def local_day_jdn(jd_utc: float, longitude_deg_east: float) -> int:
    """JDN of the local civil day containing jd_utc."""
    return jd_to_jdn(local_mean_jd(jd_utc, longitude_deg_east))


def local_day(jd_utc: float, longitude_deg_east: float) -> date:
    return from_jdn(local_day_jdn(jd_utc, longitude_deg_east))
