from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, Optional, Tuple, Union

from .arithmetic import DateArithmetic
from .bridge import ConversionBridge
from .config import load_settings
from .core.errors import OutOfRangeError
from .core.types import (
    ASTRONOMICAL,
    SIMPLIFIED,
    CalendarDate,
    EngineKind,
    EquinoxRecord,
    LongitudeLike,
    ReferenceLocation,
    Weekday,
    resolve_longitude,
)
from .culture import DEFAULT_DIALECT, Dialect
from .engines.astronomical import AstronomicalCalendarEngine
from .engines.calendar import SolarCalendarEngine, gregorian_year_of
from .engines.registry import EngineRegistry
from .formatting import format_date as _format_date
from .parsing import parse_date as _parse_date

_registry: Optional[EngineRegistry] = None

YearOrDate = Union[int, CalendarDate]


def set_registry(reg: EngineRegistry) -> None:
    global _registry
    _registry = reg


def get_registry() -> EngineRegistry:
    if _registry is None:
        raise RuntimeError("Engine registry not initialized")
    return _registry


_reg = get_registry


# ============================================================
# Engines
# ============================================================

def _default_longitude(longitude: Optional[LongitudeLike]) -> float:
    if longitude is None:
        return load_settings().default_longitude
    return resolve_longitude(longitude)


def get_engine(kind: EngineKind = SIMPLIFIED, *, longitude: Optional[LongitudeLike] = None) -> SolarCalendarEngine:
    if kind == ASTRONOMICAL:
        return _reg().astronomical(_default_longitude(longitude))
    if longitude is not None:
        raise ValueError("the simplified engine takes no reference longitude")
    return _reg().get(kind)


def astronomical_engine(longitude: Optional[LongitudeLike] = None) -> AstronomicalCalendarEngine:
    return _reg().astronomical(_default_longitude(longitude))


def engine_info(kind: EngineKind = SIMPLIFIED, *, longitude: Optional[LongitudeLike] = None) -> Dict[str, Any]:
    return get_engine(kind, longitude=longitude).info()


# ============================================================
# Construction
# ============================================================

def make_date(
    year: int,
    month: int,
    day: int,
    *,
    kind: EngineKind = SIMPLIFIED,
    longitude: Optional[LongitudeLike] = None,
) -> CalendarDate:
    """A validated calendar date (leap-dependent day bound included)."""
    return get_engine(kind, longitude=longitude).make(year, month, day)


def from_location(location: LongitudeLike, year: int, month: int, day: int) -> CalendarDate:
    """Astronomical date at a named reference location (or any longitude)."""
    return make_date(year, month, day, kind=ASTRONOMICAL, longitude=location)


def from_gregorian(
    d: date,
    *,
    kind: EngineKind = SIMPLIFIED,
    longitude: Optional[LongitudeLike] = None,
) -> CalendarDate:
    if isinstance(d, datetime):
        d = d.date()
    return get_engine(kind, longitude=longitude).from_gregorian(d)


def today(*, kind: EngineKind = SIMPLIFIED, longitude: Optional[LongitudeLike] = None) -> CalendarDate:
    return from_gregorian(date.today(), kind=kind, longitude=longitude)


# ============================================================
# Queries
# ============================================================

def to_gregorian(d: CalendarDate) -> date:
    return _reg().for_date(d).to_gregorian(d)


def weekday(d: CalendarDate) -> Weekday:
    return _reg().for_date(d).weekday(d)


def day_of_year(d: CalendarDate) -> int:
    return _reg().for_date(d).day_of_year(d)


def _engine_and_year(
    y: YearOrDate, kind: EngineKind, longitude: Optional[LongitudeLike]
) -> Tuple[SolarCalendarEngine, int]:
    if isinstance(y, CalendarDate):
        return _reg().for_date(y), y.year
    return get_engine(kind, longitude=longitude), int(y)


def is_leap_year(
    year: YearOrDate,
    *,
    kind: EngineKind = SIMPLIFIED,
    longitude: Optional[LongitudeLike] = None,
) -> bool:
    eng, y = _engine_and_year(year, kind, longitude)
    return eng.is_leap_year(y)


def days_in_month(
    year: YearOrDate,
    month: int,
    *,
    kind: EngineKind = SIMPLIFIED,
    longitude: Optional[LongitudeLike] = None,
) -> int:
    eng, y = _engine_and_year(year, kind, longitude)
    return eng.days_in_month(y, month)


def year_info(
    year: YearOrDate,
    *,
    kind: EngineKind = SIMPLIFIED,
    longitude: Optional[LongitudeLike] = None,
) -> Dict[str, Any]:
    """Nowruz days, leap status, nominal length and actual span of a calendar year."""
    eng, y = _engine_and_year(year, kind, longitude)
    return eng.year_info(y)


def nowruz(
    year: int,
    *,
    kind: EngineKind = SIMPLIFIED,
    longitude: Optional[LongitudeLike] = None,
) -> date:
    """Gregorian date of the first day of calendar year `year`."""
    return get_engine(kind, longitude=longitude).nowruz(year)


def equinox_record(year: int, *, longitude: Optional[LongitudeLike] = None) -> EquinoxRecord:
    return astronomical_engine(longitude).equinox_record(year)


def equinox_moment(
    d: YearOrDate,
    *,
    longitude: Optional[LongitudeLike] = None,
    local: bool = False,
) -> datetime:
    """
    Equinox instant opening a calendar year.

    Accepts a calendar year or an astronomical date on 1/1 (its own longitude
    is used). Returns an aware UTC datetime, or naive local mean time with
    local=True.
    """
    if isinstance(d, CalendarDate):
        if d.kind != ASTRONOMICAL or (d.month, d.day) != (1, 1):
            raise OutOfRangeError("the equinox instant is defined for astronomical dates on month 1, day 1")
        eng = _reg().astronomical(d.longitude)
        year = d.year
    else:
        eng = astronomical_engine(longitude)
        year = int(d)
    return eng.equinox_moment_local(year) if local else eng.equinox_moment_utc(year)


def list_locations() -> Dict[str, float]:
    return {loc.name.lower(): float(loc.value) for loc in ReferenceLocation}


# ============================================================
# Arithmetic and conversion
# ============================================================

def _arith() -> DateArithmetic:
    return DateArithmetic(_reg())


def _bridge() -> ConversionBridge:
    return ConversionBridge(_reg(), default_longitude=load_settings().default_longitude)


def add_days(d: CalendarDate, n: int) -> CalendarDate:
    return _arith().add_days(d, n)


def add_months(d: CalendarDate, n: int) -> CalendarDate:
    return _arith().add_months(d, n)


def add_years(d: CalendarDate, n: int) -> CalendarDate:
    return _arith().add_years(d, n)


def days_difference(a: CalendarDate, b: CalendarDate) -> int:
    return _arith().days_difference(a, b)


def to_astronomical(d: CalendarDate, longitude: Optional[LongitudeLike] = None) -> CalendarDate:
    return _bridge().to_astronomical(d, longitude)


def to_simplified(d: CalendarDate) -> CalendarDate:
    return _bridge().to_simplified(d)


def to_astronomical_recalculated(d: CalendarDate, longitude: Optional[LongitudeLike] = None) -> CalendarDate:
    return _bridge().to_astronomical_recalculated(d, longitude)


def to_standard_date_recalculated(d: CalendarDate) -> CalendarDate:
    return _bridge().to_standard_date_recalculated(d)


# ============================================================
# Cache management
# ============================================================

def clear_equinox_cache() -> None:
    _reg().cache.clear_all()


def clear_equinox_record(year: int, longitude: Optional[LongitudeLike] = None) -> None:
    """Drop the record for calendar year `year` at one longitude; no-op if absent."""
    _reg().cache.clear(gregorian_year_of(year), _default_longitude(longitude))


# ============================================================
# Text
# ============================================================

def format_date(
    d: CalendarDate,
    fmt: Optional[str] = None,
    dialect: Dialect | str = DEFAULT_DIALECT,
    *,
    direction: Optional[str] = None,
) -> str:
    wd = int(weekday(d))
    return _format_date(d, fmt, dialect, direction=direction, weekday=wd)


def parse_date(
    text: str,
    dialect: Dialect | str = DEFAULT_DIALECT,
    *,
    kind: EngineKind = SIMPLIFIED,
    longitude: Optional[LongitudeLike] = None,
) -> CalendarDate:
    return _parse_date(text, get_engine(kind, longitude=longitude), dialect)
