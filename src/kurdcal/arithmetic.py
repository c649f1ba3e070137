"""
kurdcal.arithmetic
------------------
Day, month and year arithmetic over whichever engine owns a date.

Day shifts go through the Gregorian day number; month and year shifts move
the (year, month) index and clamp the day to the target month.
"""
from __future__ import annotations

from .core.errors import CrossEngineError, OutOfRangeError
from .core.types import CalendarDate
from .engines.registry import EngineRegistry


def _check_same_engine(a: CalendarDate, b: CalendarDate) -> None:
    if a.kind != b.kind:
        raise CrossEngineError(f"cannot combine a {a.kind} date with a {b.kind} date")
    if a.longitude != b.longitude:
        raise CrossEngineError(
            f"cannot combine astronomical dates at longitudes {a.longitude} and {b.longitude}"
        )


class DateArithmetic:
    def __init__(self, registry: EngineRegistry) -> None:
        self.registry = registry

    def add_days(self, d: CalendarDate, n: int) -> CalendarDate:
        eng = self.registry.for_date(d)
        return eng.from_jdn(eng.to_jdn(d) + int(n))

    def add_months(self, d: CalendarDate, n: int) -> CalendarDate:
        eng = self.registry.for_date(d)
        eng.validate(d.year, d.month, d.day)
        index = d.year * 12 + (d.month - 1) + int(n)
        year, month = divmod(index, 12)
        month += 1
        if year < 1:
            raise OutOfRangeError(f"{d} shifted by {n} months precedes year 1")
        day = min(d.day, eng.max_day(year, month))
        return eng.make(year, month, day)

    def add_years(self, d: CalendarDate, n: int) -> CalendarDate:
        return self.add_months(d, 12 * int(n))

    def days_difference(self, a: CalendarDate, b: CalendarDate) -> int:
        """Signed days from b to a (positive when a is later)."""
        _check_same_engine(a, b)
        eng = self.registry.for_date(a)
        return eng.to_jdn(a) - eng.to_jdn(b)
