# tests/test_bridge.py

from datetime import date

import pytest

from kurdcal import CalendarDate
from kurdcal.bridge import ConversionBridge
from kurdcal.core.errors import OutOfRangeError


@pytest.fixture
def bridge(registry):
    return ConversionBridge(registry, default_longitude="erbil")


def test_lossless_keeps_numbers(bridge):
    d = CalendarDate(2725, 3, 7)
    a = bridge.to_astronomical(d)
    assert a.ymd == (2725, 3, 7)
    assert a.kind == "astronomical"
    assert a.longitude == 44.0
    assert bridge.to_astronomical(d, "tehran").longitude == 52.5
    assert bridge.to_simplified(a) == d
    assert bridge.to_simplified(d) is d
    assert bridge.to_astronomical(a) is a


def test_lossless_does_not_check_year_length(bridge, erbil):
    # (2728, 12, 30) exists in the simplified table; 2728 is common at Erbil
    d = CalendarDate(2728, 12, 30)
    a = bridge.to_astronomical(d)
    assert a.ymd == (2728, 12, 30)
    assert not erbil.is_leap_year(2728)
    with pytest.raises(OutOfRangeError):
        erbil.to_gregorian(a)


def test_recalculated_goes_through_gregorian(bridge, simplified, erbil):
    s = simplified.make(2725, 1, 1)
    a = bridge.to_astronomical_recalculated(s)
    assert a.ymd == (2725, 1, 2)
    assert erbil.to_gregorian(a) == simplified.to_gregorian(s) == date(2025, 3, 21)

    back = bridge.to_standard_date_recalculated(erbil.make(2725, 1, 1))
    assert back.ymd == (2724, 12, 29)
    assert simplified.to_gregorian(back) == date(2025, 3, 20)


def test_recalculated_between_longitudes(bridge, registry):
    utc = registry.astronomical("utc")
    d = utc.make(2723, 1, 1)  # 20 March 2023
    at_erbil = bridge.to_astronomical_recalculated(d)
    assert at_erbil.ymd == (2722, 12, 30)
    assert bridge.to_astronomical_recalculated(at_erbil, "utc") == d


def test_default_longitude_from_settings(registry, monkeypatch):
    from kurdcal.config import load_settings

    monkeypatch.setenv("KURDCAL_LONGITUDE", "sulaymaniyah")
    load_settings.cache_clear()
    b = ConversionBridge(registry)
    assert b.to_astronomical(CalendarDate(2725, 1, 1)).longitude == 45.0
