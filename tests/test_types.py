# tests/test_types.py

import pytest

from kurdcal import CalendarDate, ReferenceLocation
from kurdcal.core.errors import CrossEngineError, KurdcalError, OutOfRangeError
from kurdcal.core.types import resolve_longitude


def test_static_bounds():
    CalendarDate(2725, 12, 30)
    for ymd in [(2725, 12, 31), (2725, 7, 31), (2725, 0, 1), (2725, 13, 1), (0, 1, 1), (2725, 1, 32)]:
        with pytest.raises(OutOfRangeError):
            CalendarDate(*ymd)
    with pytest.raises(TypeError):
        CalendarDate(2725.0, 1, 1)
    with pytest.raises(TypeError):
        CalendarDate(2725, True, 1)


def test_engine_tags():
    with pytest.raises(ValueError):
        CalendarDate(2725, 1, 1, "lunar")
    with pytest.raises(ValueError):
        CalendarDate(2725, 1, 1, "simplified", 44.0)
    with pytest.raises(ValueError):
        CalendarDate(2725, 1, 1, "astronomical")
    with pytest.raises(OutOfRangeError):
        CalendarDate(2725, 1, 1, "astronomical", 181.0)
    d = CalendarDate(2725, 1, 1, "astronomical", 44)
    assert d.longitude == 44.0
    assert d.is_astronomical
    assert d.engine_key == ("astronomical", 44.0)


def test_equality_includes_the_engine():
    s = CalendarDate(2725, 1, 1)
    a = CalendarDate(2725, 1, 1, "astronomical", 44.0)
    assert s != a
    assert a == CalendarDate(2725, 1, 1, "astronomical", 44.0)
    assert a != CalendarDate(2725, 1, 1, "astronomical", 45.0)
    assert len({s, a, CalendarDate(2725, 1, 1)}) == 2


def test_ordering():
    assert CalendarDate(2725, 1, 1) < CalendarDate(2725, 1, 2) <= CalendarDate(2725, 1, 2)
    assert CalendarDate(2726, 1, 1) > CalendarDate(2725, 12, 29)
    assert sorted([CalendarDate(2725, 3, 1), CalendarDate(2724, 5, 5)])[0].year == 2724
    with pytest.raises(CrossEngineError):
        CalendarDate(2725, 1, 1) < CalendarDate(2725, 1, 2, "astronomical", 44.0)
    with pytest.raises(CrossEngineError):
        CalendarDate(2725, 1, 1, "astronomical", 0.0) >= CalendarDate(2725, 1, 2, "astronomical", 44.0)


def test_str():
    assert str(CalendarDate(725, 3, 7)) == "0725-03-07"


def test_resolve_longitude():
    assert resolve_longitude(ReferenceLocation.TEHRAN) == 52.5
    assert resolve_longitude("Sulaymaniyah") == 45.0
    assert resolve_longitude(" 41.2 ") == pytest.approx(41.2)
    assert resolve_longitude(-10) == -10.0
    for bad in ("atlantis", 190, float("inf")):
        with pytest.raises(OutOfRangeError):
            resolve_longitude(bad)


def test_error_hierarchy():
    assert issubclass(OutOfRangeError, ValueError)
    assert issubclass(CrossEngineError, TypeError)
    assert issubclass(OutOfRangeError, KurdcalError)
