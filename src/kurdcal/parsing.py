"""
kurdcal.parsing
---------------
Read a calendar (year, month, day) triple from text.

Accepted shapes
  numeric   "15/01/2725", "2725-01-15", "2725.1.15", Arabic-Indic digits
  long      "15 Xakelêwe 2725", "2725 خاکەلێوە ١٥", with an optional
            weekday name ("Hênî, 15 Xakelêwe 2725")

Month and weekday names are looked up in the selected dialect only.
A number above 31 is the year. When neither end is, LTR dialects read
day/month/year and RTL dialects read year/month/day.

In a *-gregorian-* dialect the text is a Gregorian date
("15 Kanûnî Duhem 2024"); parse_gregorian returns it as a datetime.date
and parse_date converts it into the engine's calendar.

parse_ymd only reads; parse_date hands the triple to an engine, which
applies the leap-dependent day check.
"""
from __future__ import annotations

import re
from datetime import date
from typing import List, Optional, Tuple

from .core.errors import DateParseError
from .core.types import CalendarDate
from .culture import DAY_NAMES, DEFAULT_DIALECT, MONTH_NAMES, Dialect, normalize_digits
from .engines.calendar import SolarCalendarEngine

_SEP_RE = re.compile(r"[\s/.\-]+")
_INT_RE = re.compile(r"^\d+$")
_PUNCT = " \t,،"

Triple = Tuple[int, int, int]


def _ints(parts: List[str]) -> Optional[List[int]]:
    if not all(_INT_RE.match(p) for p in parts):
        return None
    return [int(p) for p in parts]


def _numeric(text: str, dialect: Dialect) -> Optional[Triple]:
    parts = [p for p in _SEP_RE.split(text) if p]
    if len(parts) != 3:
        return None
    nums = _ints(parts)
    if nums is None:
        return None
    a, b, c = nums
    if a > 31:
        if 1 <= b <= 12:
            return a, b, c
        if 1 <= c <= 12:
            return a, c, b
        return None
    if c > 31:
        if 1 <= b <= 12:
            return c, b, a
        if 1 <= a <= 12:
            return c, a, b
        return None
    if dialect.is_arabic_script:
        return a, b, c
    return c, b, a


def _find_name(text: str, names: Tuple[str, ...]) -> Optional[Tuple[int, int, int]]:
    """(index into names, start, end) of the longest name found in text, case-insensitive."""
    folded = text.casefold()
    best = None
    for i, name in enumerate(names):
        # text arrives with ASCII digits; some abbreviations carry a numeral ("كان٢")
        pos = folded.find(normalize_digits(name).casefold())
        if pos >= 0 and (best is None or len(name) > best[2] - best[1]):
            best = (i, pos, pos + len(name))
    return best


def _strip_weekday(text: str, dialect: Dialect) -> str:
    table = DAY_NAMES[dialect]
    hit = _find_name(text, table.full) or _find_name(text, table.abbreviated)
    if hit is None:
        return text
    _, start, end = hit
    head, tail = text[:start].strip(_PUNCT), text[end:].strip(_PUNCT)
    # Only a leading or trailing weekday is dropped.
    if not head:
        return tail
    if not tail:
        return head
    return text


def _long(text: str, dialect: Dialect) -> Optional[Triple]:
    table = MONTH_NAMES[dialect]
    hit = _find_name(text, table.full) or _find_name(text, table.abbreviated)
    if hit is None:
        return None
    idx, start, end = hit
    before = _strip_weekday(text[:start], dialect).strip(_PUNCT)
    after = _strip_weekday(text[end:], dialect).strip(_PUNCT)
    nums = _ints([before, after])
    if nums is None:
        return None
    first, second = nums
    month = idx + 1
    if first > 31:
        return first, month, second
    if second > 31:
        return second, month, first
    if dialect.is_arabic_script:
        return first, month, second
    return second, month, first


def parse_ymd(text: str, dialect: Dialect | str = DEFAULT_DIALECT) -> Triple:
    """Parse text into (year, month, day) without calendar validation."""
    if text is None or not text.strip():
        raise DateParseError("cannot parse an empty string as a date")
    dialect = Dialect.parse(dialect)
    s = normalize_digits(text.strip())
    out = _numeric(s, dialect) or _long(s, dialect)
    if out is None:
        raise DateParseError(f"unable to parse {text!r} as a date in {dialect.value}")
    return out


def parse_date(
    text: str,
    engine: SolarCalendarEngine,
    dialect: Dialect | str = DEFAULT_DIALECT,
) -> CalendarDate:
    """
    Parse text and build a date owned by `engine` (OutOfRangeError if it does not exist).

    Text in a Gregorian dialect is read as a Gregorian date and converted.
    """
    dialect = Dialect.parse(dialect)
    if dialect.is_gregorian:
        return engine.from_gregorian(parse_gregorian(text, dialect))
    y, m, d = parse_ymd(text, dialect)
    return engine.make(y, m, d)


def parse_gregorian(text: str, dialect: Dialect | str = Dialect.SORANI_GREGORIAN_LATIN) -> date:
    """Parse Gregorian date text with Kurdish month names ("2 Kanûna Êkê 2025")."""
    dialect = Dialect.parse(dialect)
    if not dialect.is_gregorian:
        raise ValueError(f"{dialect.value} has no Gregorian month names; use a *-gregorian-* dialect")
    y, m, d = parse_ymd(text, dialect)
    try:
        return date(y, m, d)
    except ValueError as exc:
        raise DateParseError(f"{text!r} is not a valid Gregorian date: {exc}") from exc
