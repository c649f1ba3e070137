"""
kurdcal.bridge
--------------
Moving dates between the simplified and astronomical engines.

Lossless conversions keep (year, month, day) and only change the engine tag.
Recalculated conversions go through the Gregorian day, so the numbers can
shift by a day or two where 21 March and the equinox day differ.
"""
from __future__ import annotations

from typing import Optional

from .core.types import ASTRONOMICAL, SIMPLIFIED, CalendarDate, LongitudeLike, resolve_longitude
from .engines.registry import EngineRegistry


class ConversionBridge:
    def __init__(self, registry: EngineRegistry, *, default_longitude: Optional[LongitudeLike] = None) -> None:
        self.registry = registry
        if default_longitude is None:
            from .config import load_settings
            default_longitude = load_settings().default_longitude
        self.default_longitude = resolve_longitude(default_longitude)

    def _lon(self, longitude: Optional[LongitudeLike]) -> float:
        return self.default_longitude if longitude is None else resolve_longitude(longitude)

    # ---------------- lossless ----------------

    def to_astronomical(self, d: CalendarDate, longitude: Optional[LongitudeLike] = None) -> CalendarDate:
        """Same numbers, astronomical tag. Not checked against the target year's length."""
        lon = self._lon(longitude)
        if d.kind == ASTRONOMICAL and d.longitude == lon:
            return d
        return CalendarDate(d.year, d.month, d.day, ASTRONOMICAL, lon)

    def to_simplified(self, d: CalendarDate) -> CalendarDate:
        if d.kind == SIMPLIFIED:
            return d
        return CalendarDate(d.year, d.month, d.day, SIMPLIFIED, None)

    # ---------------- via the Gregorian day ----------------

    def to_astronomical_recalculated(
        self, d: CalendarDate, longitude: Optional[LongitudeLike] = None
    ) -> CalendarDate:
        jdn = self.registry.for_date(d).to_jdn(d)
        return self.registry.astronomical(self._lon(longitude)).from_jdn(jdn)

    def to_standard_date_recalculated(self, d: CalendarDate) -> CalendarDate:
        jdn = self.registry.for_date(d).to_jdn(d)
        return self.registry.simplified.from_jdn(jdn)
