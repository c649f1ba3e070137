from __future__ import annotations

from typing import Optional, Protocol

from ..core.types import EngineKind


class NowruzAnchor(Protocol):
    """
    Where each calendar year begins.

    The simplified and astronomical engines differ only in this capability;
    all month and day arithmetic is shared in SolarCalendarEngine.
    """
    @property
    def kind(self) -> EngineKind: ...

    @property
    def longitude(self) -> Optional[float]: ...

    def nowruz_jdn(self, year: int) -> int:
        """JDN of 1 Xakelêwe (month 1, day 1) of calendar year `year`."""
        ...

    def is_leap_year(self, year: int) -> bool: ...

    def info(self) -> dict: ...
