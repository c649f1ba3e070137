from __future__ import annotations

import logging

from kurdcal.astro.cache import EquinoxCache
from kurdcal.astro.equinox import EquinoxCalculator
from kurdcal.config import load_settings
from kurdcal.engines.registry import EngineRegistry

log = logging.getLogger(__name__)


def build_registry() -> EngineRegistry:
    settings = load_settings()
    cache = EquinoxCache(EquinoxCalculator(delta_t=settings.delta_t))
    log.debug("registry built (ΔT model %s, default longitude %.4f)", settings.delta_t, settings.default_longitude)
    return EngineRegistry(cache=cache)
