"""
kurdcal.config
--------------
Process settings read from the environment.

  KURDCAL_LONGITUDE   default reference longitude: degrees East or a preset
                      name (erbil, sulaymaniyah, tehran, utc). Default: erbil.
  KURDCAL_DELTA_T     ΔT model applied to equinox instants: em2006 | none.
  KURDCAL_LOG_LEVEL   level used by setup_logging(). Default: WARNING.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping, Optional

from .core.types import DEFAULT_LOCATION, resolve_longitude

DELTA_T_MODELS = ("em2006", "none")


@dataclass(frozen=True)
class Settings:
    default_longitude: float = float(DEFAULT_LOCATION.value)
    delta_t: str = "em2006"
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.delta_t not in DELTA_T_MODELS:
            raise ValueError(f"Unknown ΔT model '{self.delta_t}'. Available: {list(DELTA_T_MODELS)}")


def settings_from_env(environ: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if environ is None else environ
    kwargs = {}
    lon = env.get("KURDCAL_LONGITUDE", "").strip()
    if lon:
        kwargs["default_longitude"] = resolve_longitude(lon)
    dt = env.get("KURDCAL_DELTA_T", "").strip().lower()
    if dt:
        kwargs["delta_t"] = dt
    lvl = env.get("KURDCAL_LOG_LEVEL", "").strip().upper()
    if lvl:
        kwargs["log_level"] = lvl
    return Settings(**kwargs)


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Settings for this process (read once; call load_settings.cache_clear() to reload)."""
    return settings_from_env()
