"""
kurdcal.formatting
------------------
Render a calendar date, or a Gregorian date with Kurdish month names, as text.

Standard formats
  d     short numeric      LTR: dd/MM/yyyy    RTL: yyyy/MM/dd
  D     long               LTR: d MMMM yyyy   RTL: yyyy MMMM d
  s     abbreviated long   LTR: d MMM yyyy    RTL: yyyy MMM d
  M, m  month and day      LTR: d MMMM        RTL: MMMM d
  Y, y  month and year     MMMM yyyy
  F, f  weekday + long     LTR: dddd, D       RTL: D، dddd

Anything else is a custom pattern built from
  d dd ddd dddd   day, zero-padded day, weekday abbreviation, weekday name
  M MM MMM MMMM   month, zero-padded month, month abbreviation, month name
  y yy            two-digit year
  yyy yyyy        full year
  'text' "text"   literal
  \\c             literal character c

Digits follow the dialect's script; direction defaults to RTL for Arabic script.
format_gregorian applies the same codes to a datetime.date in one of the
*-gregorian-* dialects and defaults to the long form.
"""
from __future__ import annotations

from datetime import date
from typing import Callable, Dict, List, Optional, Union

from .core.types import CalendarDate
from .culture import DEFAULT_DIALECT, Dialect, Direction, day_name, format_number, month_name

ARABIC_COMMA = "،"
DEFAULT_GREGORIAN_DIALECT = Dialect.SORANI_GREGORIAN_LATIN

# Anything with year, month and day fields.
YMDLike = Union[CalendarDate, date]


def _direction(dialect: Dialect, direction: Optional[str]) -> Direction:
    if direction is None:
        return dialect.direction
    if direction not in ("ltr", "rtl"):
        raise ValueError(f"direction must be 'ltr' or 'rtl', got {direction!r}")
    return direction  # type: ignore[return-value]


def _short(d: YMDLike, weekday: Optional[int], dialect: Dialect, direction: Direction) -> str:
    if direction == "rtl":
        return format_custom(d, "yyyy/MM/dd", dialect)
    return format_custom(d, "dd/MM/yyyy", dialect)


def _long(d: YMDLike, weekday: Optional[int], dialect: Dialect, direction: Direction) -> str:
    if direction == "rtl":
        return format_custom(d, "yyyy MMMM d", dialect)
    return format_custom(d, "d MMMM yyyy", dialect)


def _abbreviated(d: YMDLike, weekday: Optional[int], dialect: Dialect, direction: Direction) -> str:
    if direction == "rtl":
        return format_custom(d, "yyyy MMM d", dialect)
    return format_custom(d, "d MMM yyyy", dialect)


def _month_day(d: YMDLike, weekday: Optional[int], dialect: Dialect, direction: Direction) -> str:
    if direction == "rtl":
        return format_custom(d, "MMMM d", dialect)
    return format_custom(d, "d MMMM", dialect)


def _year_month(d: YMDLike, weekday: Optional[int], dialect: Dialect, direction: Direction) -> str:
    return format_custom(d, "MMMM yyyy", dialect)


def _full(d: YMDLike, weekday: Optional[int], dialect: Dialect, direction: Direction) -> str:
    if weekday is None:
        raise ValueError("the full format needs the weekday")
    name = day_name(weekday, dialect)
    long_date = _long(d, weekday, dialect, direction)
    if direction == "rtl":
        return f"{long_date}{ARABIC_COMMA} {name}"
    return f"{name}, {long_date}"


STANDARD_FORMATS: Dict[str, Callable[[YMDLike, Optional[int], Dialect, Direction], str]] = {
    "d": _short,
    "D": _long,
    "s": _abbreviated,
    "M": _month_day,
    "m": _month_day,
    "Y": _year_month,
    "y": _year_month,
    "F": _full,
    "f": _full,
}


def _token(ch: str, count: int, d: YMDLike, weekday: Optional[int], dialect: Dialect) -> str:
    if ch == "d":
        if count <= 2:
            return format_number(d.day, dialect, width=count)
        if weekday is None:
            raise ValueError(f"pattern '{'d' * count}' needs the weekday")
        return day_name(weekday, dialect, abbreviated=(count == 3))
    if ch == "M":
        if count <= 2:
            return format_number(d.month, dialect, width=count)
        return month_name(d.month, dialect, abbreviated=(count == 3))
    # y
    if count <= 2:
        return format_number(d.year % 100, dialect, width=2)
    return format_number(d.year, dialect)


def format_custom(
    d: YMDLike,
    pattern: str,
    dialect: Dialect | str = DEFAULT_DIALECT,
    *,
    weekday: Optional[int] = None,
) -> str:
    dialect = Dialect.parse(dialect)
    out: List[str] = []
    i, n = 0, len(pattern)
    while i < n:
        ch = pattern[i]
        if ch in "dMy":
            j = i
            while j < n and pattern[j] == ch:
                j += 1
            out.append(_token(ch, j - i, d, weekday, dialect))
            i = j
        elif ch in "'\"":
            end = pattern.find(ch, i + 1)
            if end < 0:
                out.append(ch)
                i += 1
            else:
                out.append(pattern[i + 1:end])
                i = end + 1
        elif ch == "\\" and i + 1 < n:
            out.append(pattern[i + 1])
            i += 2
        else:
            out.append(ch)
            i += 1
    return "".join(out)


def format_date(
    d: CalendarDate,
    fmt: Optional[str] = None,
    dialect: Dialect | str = DEFAULT_DIALECT,
    *,
    direction: Optional[str] = None,
    weekday: Optional[int] = None,
) -> str:
    """
    Format `d` with a standard code or a custom pattern.

    `weekday` (Sunday = 0) is needed only by F/f and ddd/dddd; the api layer
    fills it in from the owning engine.
    """
    dialect = Dialect.parse(dialect)
    fmt = fmt or "d"
    fn = STANDARD_FORMATS.get(fmt)
    if fn is not None:
        return fn(d, weekday, dialect, _direction(dialect, direction))
    return format_custom(d, fmt, dialect, weekday=weekday)


def format_gregorian(
    g: date,
    fmt: Optional[str] = None,
    dialect: Dialect | str = DEFAULT_GREGORIAN_DIALECT,
    *,
    direction: Optional[str] = None,
) -> str:
    """
    Format a Gregorian date with Kurdish month names, long form by default.

        >>> format_gregorian(date(2025, 12, 2), dialect="kurmanji-gregorian-latin")
        '2 Kanûna Êkê 2025'
    """
    dialect = Dialect.parse(dialect)
    if not dialect.is_gregorian:
        raise ValueError(f"{dialect.value} has no Gregorian month names; use a *-gregorian-* dialect")
    weekday = g.isoweekday() % 7
    fmt = fmt or "D"
    fn = STANDARD_FORMATS.get(fmt)
    if fn is not None:
        return fn(g, weekday, dialect, _direction(dialect, direction))
    return format_custom(g, fmt, dialect, weekday=weekday)
