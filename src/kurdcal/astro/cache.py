"""
kurdcal.astro.cache
-------------------
Memoized equinox records keyed by (Gregorian year, reference longitude).

An EquinoxCache is an ordinary object: engines receive one explicitly and
tests build their own. Records are never evicted; clear() and clear_all()
are the only way to release them.
"""
from __future__ import annotations

import logging
import threading
from typing import Dict, Optional, Tuple

from ..core.types import EquinoxRecord, validate_longitude
from .deltat import jde_to_jd_utc
from .equinox import EquinoxCalculator
from .longitude import local_day_jdn

log = logging.getLogger(__name__)

_Key = Tuple[int, float]


class EquinoxCache:
    def __init__(self, calculator: Optional[EquinoxCalculator] = None) -> None:
        if calculator is None:
            from ..config import load_settings
            calculator = EquinoxCalculator(delta_t=load_settings().delta_t)
        self.calculator = calculator
        self._records: Dict[_Key, EquinoxRecord] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    @staticmethod
    def _key(gregorian_year: int, longitude: float) -> _Key:
        return (int(gregorian_year), validate_longitude(longitude))

    def get_or_compute(self, gregorian_year: int, longitude: float) -> EquinoxRecord:
        key = self._key(gregorian_year, longitude)
        rec = self._records.get(key)
        if rec is not None:
            with self._lock:
                self._hits += 1
            return rec

        # Computed outside the lock; a racing thread computes the same value.
        jde = self.calculator.jde(key[0])
        jd_utc = jde_to_jd_utc(jde, self.calculator.delta_t)
        rec = EquinoxRecord(
            gregorian_year=key[0],
            longitude=key[1],
            jde=jde,
            jd_utc=jd_utc,
            local_jdn=local_day_jdn(jd_utc, key[1]),
        )
        with self._lock:
            self._misses += 1
            rec = self._records.setdefault(key, rec)
        log.debug("equinox cache miss year=%d lon=%.4f -> JD(UTC) %.6f", key[0], key[1], rec.jd_utc)
        return rec

    def clear_all(self) -> None:
        with self._lock:
            n = len(self._records)
            self._records.clear()
        log.debug("equinox cache cleared (%d records)", n)

    def clear(self, gregorian_year: int, longitude: float) -> None:
        """Drop one record; a missing key is not an error."""
        key = self._key(gregorian_year, longitude)
        with self._lock:
            removed = self._records.pop(key, None)
        if removed is not None:
            log.debug("equinox cache dropped year=%d lon=%.4f", key[0], key[1])

    def stats(self) -> Dict[str, int]:
        return {"records": len(self._records), "hits": self._hits, "misses": self._misses}

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, key: object) -> bool:
        if not (isinstance(key, tuple) and len(key) == 2):
            return False
        return self._key(*key) in self._records
