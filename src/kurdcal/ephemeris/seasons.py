# ephemeris/seasons.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

from . import require_ephemeris

DEFAULT_KERNEL = "de440s.bsp"  # covers 1849..2150


@dataclass
class SkyfieldEquinoxes:
    """
    March equinox instants from a JPL kernel via skyfield.almanac.seasons.

    The kernel is fetched by skyfield's Loader into `directory` on first use.
    """
    ts: object
    eph: object

    @classmethod
    def load(cls, kernel: str = DEFAULT_KERNEL, directory: Optional[str] = None) -> "SkyfieldEquinoxes":
        require_ephemeris()
        from skyfield.api import Loader

        target = Path(directory) if directory else Path.home() / ".skyfield"
        target.mkdir(parents=True, exist_ok=True)
        load = Loader(str(target))
        return cls(ts=load.timescale(), eph=load(kernel))

    def march_equinoxes_jd_utc(self, year0: int, year1: int) -> Dict[int, float]:
        """{Gregorian year: JD(UTC)} for year0..year1 inclusive."""
        from skyfield import almanac

        t0 = self.ts.utc(year0, 1, 1)
        t1 = self.ts.utc(year1 + 1, 1, 1)
        times, events = almanac.find_discrete(t0, t1, almanac.seasons(self.eph))
        out: Dict[int, float] = {}
        for t, ev in zip(times, events):
            if int(ev) == 0:  # 0 = March equinox
                dt = t.utc_datetime()
                out[dt.year] = float(t.ut1)  # JD(UT1) ~ JD(UTC) within 0.9 s
        return out
