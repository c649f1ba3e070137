"""
kurdcal.engines.simplified
--------------------------
Fixed-anchor calendar: every year begins on 21 March of Gregorian year
Y − 700, and leap years follow a 33-year table.

Leap positions (1-based within each 33-year block):
    1, 5, 9, 13, 17, 22, 26, 30

The table and the Gregorian leap rule do not always agree, so the distance
between two 21-March anchors can differ from the table year length:

  * table common, anchors 366 days apart: the Gregorian day before the next
    Nowruz (20 March) is day 30 of month 12, a day the table does not count;
  * table leap, anchors 365 days apart: day 30 of month 12 is valid and
    falls on the next year's Nowruz.

Every Gregorian day therefore maps to exactly one calendar date and back to
itself; only the second case gives one Gregorian day two calendar names.
"""
from __future__ import annotations

from typing import Any, Dict, FrozenSet, Optional

from ..core.time import ymd_to_jdn
from ..core.types import SIMPLIFIED, EngineKind
from .calendar import EPOCH_OFFSET, SolarCalendarEngine

CYCLE_YEARS = 33
LEAP_POSITIONS: FrozenSet[int] = frozenset({1, 5, 9, 13, 17, 22, 26, 30})

NOWRUZ_MONTH = 3
NOWRUZ_DAY = 21


def cycle_position(year: int) -> int:
    """1-based position of `year` in its 33-year block."""
    return ((year - 1) % CYCLE_YEARS) + 1


def is_simplified_leap_year(year: int) -> bool:
    return cycle_position(year) in LEAP_POSITIONS


class FixedNowruzAnchor:
    @property
    def kind(self) -> EngineKind:
        return SIMPLIFIED

    @property
    def longitude(self) -> Optional[float]:
        return None

    def nowruz_jdn(self, year: int) -> int:
        return ymd_to_jdn(year + EPOCH_OFFSET, NOWRUZ_MONTH, NOWRUZ_DAY)

    def is_leap_year(self, year: int) -> bool:
        return is_simplified_leap_year(year)

    def info(self) -> Dict[str, Any]:
        return {
            "anchor": f"{NOWRUZ_DAY} March",
            "leap_rule": f"{CYCLE_YEARS}-year cycle",
            "leap_positions": sorted(LEAP_POSITIONS),
        }


class SimplifiedCalendarEngine(SolarCalendarEngine):
    def __init__(self) -> None:
        super().__init__(FixedNowruzAnchor())
