from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..astro.cache import EquinoxCache
from ..core.types import ASTRONOMICAL, ENGINE_KINDS, SIMPLIFIED, CalendarDate, LongitudeLike, resolve_longitude
from .astronomical import AstronomicalCalendarEngine
from .calendar import SolarCalendarEngine
from .simplified import SimplifiedCalendarEngine


@dataclass
class EngineRegistry:
    """
    Engines sharing one EquinoxCache.

    One simplified engine; astronomical engines are created on first use per
    reference longitude and kept for the registry's lifetime.
    """
    cache: EquinoxCache = field(default_factory=EquinoxCache)
    simplified: SimplifiedCalendarEngine = field(default_factory=SimplifiedCalendarEngine)
    _astro: Dict[float, AstronomicalCalendarEngine] = field(default_factory=dict, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def astronomical(self, longitude: LongitudeLike) -> AstronomicalCalendarEngine:
        lon = resolve_longitude(longitude)
        eng = self._astro.get(lon)
        if eng is None:
            with self._lock:
                eng = self._astro.setdefault(lon, AstronomicalCalendarEngine(lon, self.cache))
        return eng

    def get(self, kind: str, longitude: Optional[LongitudeLike] = None) -> SolarCalendarEngine:
        if kind == SIMPLIFIED:
            return self.simplified
        if kind == ASTRONOMICAL:
            if longitude is None:
                raise ValueError("astronomical engines need a reference longitude")
            return self.astronomical(longitude)
        raise KeyError(f"Unknown engine kind '{kind}'. Available: {list(ENGINE_KINDS)}")

    def for_date(self, d: CalendarDate) -> SolarCalendarEngine:
        """The engine that owns `d`."""
        return self.get(d.kind, d.longitude)

    def list(self) -> List[str]:
        out = [SIMPLIFIED]
        out += [f"{ASTRONOMICAL}@{lon:g}" for lon in sorted(self._astro)]
        return out
