"""
kurdcal.engines.months
----------------------
Month-length table shared by both engines.

Months 1–6 have 31 days, 7–11 have 30, month 12 has 29 (30 in a leap year).
"""
from __future__ import annotations

from typing import Tuple

from ..core.errors import OutOfRangeError

MONTH_LENGTHS: Tuple[int, ...] = (31, 31, 31, 31, 31, 31, 30, 30, 30, 30, 30, 29)

# Days before each month; months 1..11 together hold 336 days.
_CUMULATIVE: Tuple[int, ...] = tuple(sum(MONTH_LENGTHS[:i]) for i in range(12))
DAYS_BEFORE_LAST_MONTH = _CUMULATIVE[11]


def month_length(month: int, leap: bool) -> int:
    if not (1 <= month <= 12):
        raise OutOfRangeError(f"month must be in 1..12, got {month}")
    if month == 12 and leap:
        return 30
    return MONTH_LENGTHS[month - 1]


def day_of_year(month: int, day: int) -> int:
    """1-based ordinal of (month, day) within its year."""
    return _CUMULATIVE[month - 1] + day


def month_day_from_offset(offset: int) -> Tuple[int, int]:
    """
    0-based day offset from Nowruz -> (month, day).

    Offsets past 335 all land in month 12; the caller bounds the offset by
    the distance to the next Nowruz.
    """
    if offset < 0:
        raise OutOfRangeError(f"day offset must be >= 0, got {offset}")
    for m in range(11, 0, -1):
        if offset >= _CUMULATIVE[m]:
            return m + 1, offset - _CUMULATIVE[m] + 1
    return 1, offset + 1
