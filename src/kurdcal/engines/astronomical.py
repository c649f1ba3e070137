"""
kurdcal.engines.astronomical
----------------------------
Equinox-anchored calendar: year Y begins on the local day, at the engine's
reference longitude, of the March equinox of Gregorian year Y − 700.

Leap status is derived: Y is leap iff the next Nowruz is 366 days later.
"""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, Optional

from ..astro.cache import EquinoxCache
from ..core.types import ASTRONOMICAL, EngineKind, EquinoxRecord, validate_longitude
from .calendar import SolarCalendarEngine, gregorian_year_of

log = logging.getLogger(__name__)


class EquinoxNowruzAnchor:
    def __init__(self, longitude: float, cache: EquinoxCache) -> None:
        self._longitude = validate_longitude(longitude)
        self.cache = cache

    @property
    def kind(self) -> EngineKind:
        return ASTRONOMICAL

    @property
    def longitude(self) -> Optional[float]:
        return self._longitude

    def record(self, year: int) -> EquinoxRecord:
        return self.cache.get_or_compute(gregorian_year_of(year), self._longitude)

    def nowruz_jdn(self, year: int) -> int:
        return self.record(year).local_jdn

    def is_leap_year(self, year: int) -> bool:
        return self.nowruz_jdn(year + 1) - self.nowruz_jdn(year) == 366

    def info(self) -> Dict[str, Any]:
        return {
            "anchor": "local day of the March equinox",
            "leap_rule": "366-day gap between consecutive Nowruz days",
            "delta_t": self.cache.calculator.delta_t,
        }


class AstronomicalCalendarEngine(SolarCalendarEngine):
    def __init__(self, longitude: float, cache: EquinoxCache) -> None:
        super().__init__(EquinoxNowruzAnchor(longitude, cache))
        log.debug("astronomical engine created for longitude %.4f", self.anchor.longitude)

    @property
    def cache(self) -> EquinoxCache:
        return self.anchor.cache

    def equinox_record(self, year: int) -> EquinoxRecord:
        self._check_year(year)
        return self.anchor.record(year)

    def equinox_moment_utc(self, year: int) -> datetime:
        """UTC instant of the equinox that opens calendar year `year`."""
        return self.equinox_record(year).utc_instant

    def equinox_moment_local(self, year: int) -> datetime:
        """The same instant in local mean time at the reference longitude (naive)."""
        return self.equinox_record(year).local_moment
