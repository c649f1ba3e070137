"""
kurdcal.engines.calendar
------------------------
SolarCalendarEngine: calendar <-> Gregorian mapping on top of a NowruzAnchor.

Forward:  JDN = nowruz_jdn(Y) + day_of_year(M, D) − 1
Inverse:  Y is the year whose Nowruz is the latest one not after the JDN;
          (M, D) follow from the day offset.

Gregorian days are carried as integer JDNs throughout so that years before
1 CE need no special handling; datetime.date appears only at the edges.
"""
from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, Optional

from ..core.errors import CrossEngineError, OutOfRangeError
from ..core.time import from_jdn, jdn_to_ymd, jdn_weekday, to_jdn
from ..core.types import CalendarDate, EngineKind, Weekday
from .interfaces import NowruzAnchor
from .months import DAYS_BEFORE_LAST_MONTH, day_of_year, month_day_from_offset, month_length

log = logging.getLogger(__name__)

# Gregorian year = calendar year + EPOCH_OFFSET (calendar 2725 begins in March 2025).
EPOCH_OFFSET = -700


def gregorian_year_of(year: int) -> int:
    return year + EPOCH_OFFSET


class SolarCalendarEngine:
    def __init__(self, anchor: NowruzAnchor) -> None:
        self.anchor = anchor

    # ---------------- identity ----------------

    @property
    def kind(self) -> EngineKind:
        return self.anchor.kind

    @property
    def longitude(self) -> Optional[float]:
        return self.anchor.longitude

    def owns(self, d: CalendarDate) -> bool:
        return d.kind == self.kind and d.longitude == self.longitude

    def _check_owned(self, d: CalendarDate) -> None:
        if not self.owns(d):
            raise CrossEngineError(
                f"date {d} ({d.kind}, lon={d.longitude}) does not belong to this "
                f"{self.kind} engine (lon={self.longitude})"
            )

    def info(self) -> Dict[str, Any]:
        out = {"kind": self.kind, "longitude": self.longitude, "epoch_offset": EPOCH_OFFSET}
        out.update(self.anchor.info())
        return out

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind!r}, longitude={self.longitude!r})"

    # ---------------- year structure ----------------

    @staticmethod
    def _check_year(year: int) -> None:
        if year < 1:
            raise OutOfRangeError(f"year must be >= 1, got {year}")

    def nowruz_jdn(self, year: int) -> int:
        self._check_year(year)
        return self.anchor.nowruz_jdn(year)

    def nowruz(self, year: int) -> date:
        """Gregorian date of month 1, day 1 of `year`."""
        return from_jdn(self.nowruz_jdn(year))

    def is_leap_year(self, year: int) -> bool:
        self._check_year(year)
        return self.anchor.is_leap_year(year)

    def days_in_month(self, year: int, month: int) -> int:
        """
        Nominal month length from the leap status (29 or 30 for month 12).

        Month 12 may accept one more day than this; max_day gives the bound
        that validation uses.
        """
        return month_length(month, self.is_leap_year(year))

    def days_in_year(self, year: int) -> int:
        """
        Nominal year length, 365 or 366, from the leap status.

        span_days is the count of days actually between two Nowruz days and
        is the bound on day_of_year. They differ only in simplified years where
        the fixed anchor and the leap table disagree.
        """
        return sum(self.days_in_month(year, m) for m in range(1, 13))

    def span_days(self, year: int) -> int:
        """Gregorian days from this Nowruz to the next one."""
        return self.nowruz_jdn(year + 1) - self.nowruz_jdn(year)

    def year_info(self, year: int) -> Dict[str, Any]:
        return {
            "year": year,
            "nowruz": self.nowruz(year),
            "next_nowruz": self.nowruz(year + 1),
            "is_leap": self.is_leap_year(year),
            "days_in_year": self.days_in_year(year),
            "span_days": self.span_days(year),
            "last_month_days": self.max_day(year, 12),
        }

    def max_day(self, year: int, month: int) -> int:
        """
        Largest acceptable day number.

        Month 12 also reaches up to the day before the next Nowruz. The two
        agree in the astronomical engine; see SimplifiedCalendarEngine for
        the years where the fixed anchor and the leap table disagree.
        """
        n = self.days_in_month(year, month)
        if month == 12:
            n = max(n, self.span_days(year) - DAYS_BEFORE_LAST_MONTH)
        return n

    def validate(self, year: int, month: int, day: int) -> None:
        self._check_year(year)
        if not (1 <= month <= 12):
            raise OutOfRangeError(f"month must be in 1..12, got {month}")
        hi = self.max_day(year, month)
        if not (1 <= day <= hi):
            raise OutOfRangeError(f"day {day} is out of range for {year}-{month:02d} (1..{hi}, {self.kind})")

    def make(self, year: int, month: int, day: int) -> CalendarDate:
        """Build a date owned by this engine, checking the leap-dependent bound."""
        d = CalendarDate(year, month, day, self.kind, self.longitude)
        self.validate(year, month, day)
        return d

    # ---------------- mapping ----------------

    def to_jdn(self, d: CalendarDate) -> int:
        self._check_owned(d)
        self.validate(d.year, d.month, d.day)
        return self.nowruz_jdn(d.year) + day_of_year(d.month, d.day) - 1

    def from_jdn(self, jdn: int) -> CalendarDate:
        gy, _, _ = jdn_to_ymd(jdn)
        year = gy - EPOCH_OFFSET
        if year < 1:
            raise OutOfRangeError(f"JDN {jdn} precedes calendar year 1")
        start = self.nowruz_jdn(year)
        if jdn < start:
            year -= 1
            if year < 1:
                raise OutOfRangeError(f"JDN {jdn} precedes calendar year 1")
            start = self.nowruz_jdn(year)
        month, day = month_day_from_offset(jdn - start)
        return CalendarDate(year, month, day, self.kind, self.longitude)

    def from_gregorian(self, g: date) -> CalendarDate:
        return self.from_jdn(to_jdn(g))

    def to_gregorian(self, d: CalendarDate) -> date:
        return from_jdn(self.to_jdn(d))

    # ---------------- queries ----------------

    def weekday(self, d: CalendarDate) -> Weekday:
        return Weekday(jdn_weekday(self.to_jdn(d)))

    def day_of_year(self, d: CalendarDate) -> int:
        self._check_owned(d)
        self.validate(d.year, d.month, d.day)
        return day_of_year(d.month, d.day)
