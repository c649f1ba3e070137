from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum, IntEnum
from typing import Literal, Optional, Tuple, Union

from .errors import CrossEngineError, OutOfRangeError
from .time import from_jdn, jd_to_datetime_utc

EngineKind = Literal["simplified", "astronomical"]
SIMPLIFIED: EngineKind = "simplified"
ASTRONOMICAL: EngineKind = "astronomical"
ENGINE_KINDS: Tuple[str, ...] = (SIMPLIFIED, ASTRONOMICAL)

# Static upper bound per month; month 12 reaches 30 only in a long year.
_STATIC_MAX_DAY = (31, 31, 31, 31, 31, 31, 30, 30, 30, 30, 30, 30)


class ReferenceLocation(float, Enum):
    """Named reference meridians (degrees East)."""
    ERBIL = 44.0
    SULAYMANIYAH = 45.0
    TEHRAN = 52.5
    UTC = 0.0


DEFAULT_LOCATION = ReferenceLocation.ERBIL

LongitudeLike = Union[ReferenceLocation, float, int, str]


def validate_longitude(lon: float) -> float:
    lon = float(lon)
    if not math.isfinite(lon) or not (-180.0 <= lon <= 180.0):
        raise OutOfRangeError(f"longitude must be finite and within [-180, 180], got {lon}")
    return lon


def resolve_longitude(value: LongitudeLike) -> float:
    """Accept a ReferenceLocation, its name (case-insensitive) or a number of degrees East."""
    if isinstance(value, ReferenceLocation):
        return float(value.value)
    if isinstance(value, str):
        key = value.strip().upper()
        if key in ReferenceLocation.__members__:
            return float(ReferenceLocation[key].value)
        try:
            return validate_longitude(float(value))
        except ValueError as exc:
            names = ", ".join(m.lower() for m in ReferenceLocation.__members__)
            raise OutOfRangeError(f"Unknown reference location '{value}'. Available: {names}") from exc
    return validate_longitude(value)


class Weekday(IntEnum):
    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6


@dataclass(frozen=True)
class CalendarDate:
    """
    A Kurdish calendar date tagged with the engine that owns it.

    Only the static bounds are checked here; whether month 12 may hold day 30
    depends on the year's leap status and is checked by the owning engine.
    """
    year: int
    month: int
    day: int
    kind: EngineKind = SIMPLIFIED
    longitude: Optional[float] = None

    def __post_init__(self) -> None:
        if self.kind not in ENGINE_KINDS:
            raise ValueError(f"Unknown engine kind '{self.kind}'. Available: {list(ENGINE_KINDS)}")
        if self.kind == SIMPLIFIED:
            if self.longitude is not None:
                raise ValueError("simplified dates carry no reference longitude")
        else:
            if self.longitude is None:
                raise ValueError("astronomical dates require a reference longitude")
            object.__setattr__(self, "longitude", validate_longitude(self.longitude))
        for name in ("year", "month", "day"):
            v = getattr(self, name)
            if isinstance(v, bool) or not isinstance(v, int):
                raise TypeError(f"{name} must be an int, got {type(v).__name__}")
        if self.year < 1:
            raise OutOfRangeError(f"year must be >= 1, got {self.year}")
        if not (1 <= self.month <= 12):
            raise OutOfRangeError(f"month must be in 1..12, got {self.month}")
        if not (1 <= self.day <= _STATIC_MAX_DAY[self.month - 1]):
            raise OutOfRangeError(f"day {self.day} is out of range for month {self.month}")

    @property
    def ymd(self) -> Tuple[int, int, int]:
        return (self.year, self.month, self.day)

    @property
    def is_astronomical(self) -> bool:
        return self.kind == ASTRONOMICAL

    @property
    def engine_key(self) -> Tuple[str, Optional[float]]:
        return (self.kind, self.longitude)

    def _comparable(self, other: "CalendarDate") -> Tuple[int, int, int]:
        if self.kind != other.kind:
            raise CrossEngineError(f"cannot compare a {self.kind} date with a {other.kind} date")
        if self.longitude != other.longitude:
            raise CrossEngineError(
                f"cannot compare astronomical dates at longitudes {self.longitude} and {other.longitude}; "
                "normalize through the Gregorian calendar first"
            )
        return other.ymd

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self.ymd < self._comparable(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self.ymd <= self._comparable(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self.ymd > self._comparable(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self.ymd >= self._comparable(other)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


@dataclass(frozen=True)
class EquinoxRecord:
    """Spring equinox of one Gregorian year, resolved to the local day at one longitude."""
    gregorian_year: int
    longitude: float
    jde: float        # Julian Ephemeris Day (TT)
    jd_utc: float
    local_jdn: int

    @property
    def utc_instant(self) -> datetime:
        return jd_to_datetime_utc(self.jd_utc)

    @property
    def local_date(self) -> date:
        return from_jdn(self.local_jdn)

    @property
    def local_moment(self) -> datetime:
        """Naive local mean time at the reference longitude."""
        return (self.utc_instant + timedelta(hours=self.longitude / 15.0)).replace(tzinfo=None)
