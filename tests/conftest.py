import pytest

import kurdcal
from kurdcal import api
from kurdcal.astro.cache import EquinoxCache
from kurdcal.astro.equinox import EquinoxCalculator
from kurdcal.config import load_settings
from kurdcal.engines.registry import EngineRegistry


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("KURDCAL_LONGITUDE", "KURDCAL_DELTA_T", "KURDCAL_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    load_settings.cache_clear()
    yield
    load_settings.cache_clear()


@pytest.fixture
def eq_cache():
    return EquinoxCache(EquinoxCalculator(delta_t="em2006"))


@pytest.fixture
def registry(eq_cache):
    return EngineRegistry(cache=eq_cache)


@pytest.fixture
def simplified(registry):
    return registry.simplified


@pytest.fixture
def erbil(registry):
    return registry.astronomical(kurdcal.ReferenceLocation.ERBIL)


@pytest.fixture(autouse=True)
def fresh_api_registry(registry):
    """Point the module-level api at this test's registry."""
    old = api._registry
    api.set_registry(registry)
    yield registry
    api.set_registry(old)
