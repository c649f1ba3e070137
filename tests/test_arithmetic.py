# tests/test_arithmetic.py

import random

import pytest

from kurdcal import CalendarDate
from kurdcal.arithmetic import DateArithmetic
from kurdcal.core.errors import CrossEngineError, OutOfRangeError


@pytest.fixture
def arith(registry):
    return DateArithmetic(registry)


def test_add_days_within_and_across_years(arith, erbil):
    d = erbil.make(2724, 1, 15)
    assert arith.add_days(d, -10).ymd == (2724, 1, 5)
    assert arith.add_days(d, -20).ymd == (2723, 12, 24)
    end = erbil.make(2724, 12, 25)
    assert arith.add_days(end, 9).ymd == (2725, 1, 5)
    assert arith.add_days(end, 10).ymd == (2725, 1, 6)
    assert arith.add_days(end, 0) == end


def test_add_days_simplified(arith, simplified):
    d = simplified.make(2724, 12, 25)
    assert arith.add_days(d, 10).ymd == (2725, 1, 6)
    assert arith.add_days(simplified.make(2725, 1, 1), -1).ymd == (2724, 12, 29)
    assert arith.add_days(simplified.make(2725, 1, 1), 365).ymd == (2726, 1, 1)


def test_add_months(arith, erbil, simplified):
    assert arith.add_months(erbil.make(2724, 11, 15), 2).ymd == (2725, 1, 15)
    assert arith.add_months(erbil.make(2725, 6, 31), 1).ymd == (2725, 7, 30)
    assert arith.add_months(simplified.make(2725, 1, 31), 11).ymd == (2725, 12, 29)
    assert arith.add_months(simplified.make(2725, 3, 10), -3).ymd == (2724, 12, 10)
    assert arith.add_months(simplified.make(2725, 3, 10), -27).ymd == (2722, 12, 10)


def test_add_months_keeps_the_engine(arith, erbil):
    out = arith.add_months(erbil.make(2725, 1, 1), 5)
    assert out.kind == "astronomical"
    assert out.longitude == 44.0


def test_add_years_clamps_leap_day(arith, simplified):
    leap_end = simplified.make(2723, 12, 30)
    assert arith.add_years(leap_end, 1).ymd == (2724, 12, 29)
    assert arith.add_years(leap_end, 5).ymd == (2728, 12, 30)
    assert arith.add_years(simplified.make(2725, 4, 4), -25).ymd == (2700, 4, 4)


def test_before_year_one(arith, simplified):
    with pytest.raises(OutOfRangeError):
        arith.add_months(simplified.make(1, 1, 1), -1)
    with pytest.raises(OutOfRangeError):
        arith.add_years(simplified.make(5, 6, 1), -5)


def test_days_difference(arith, simplified, erbil):
    a = simplified.make(2725, 1, 1)
    b = simplified.make(2724, 1, 1)
    assert arith.days_difference(a, b) == 365
    assert arith.days_difference(b, a) == -365
    assert arith.days_difference(erbil.make(2723, 1, 1), erbil.make(2722, 1, 1)) == 366


def test_difference_restores_with_add_days(arith, simplified):
    random.seed(5)
    base = simplified.make(2725, 1, 1)
    for _ in range(200):
        n = random.randint(-3000, 3000)
        moved = arith.add_days(base, n)
        assert arith.days_difference(moved, base) == n
        assert arith.add_days(moved, -n) == base


def test_cross_engine_difference_is_rejected(arith, simplified, erbil, registry):
    with pytest.raises(CrossEngineError):
        arith.days_difference(simplified.make(2725, 1, 1), erbil.make(2725, 1, 1))
    tehran = registry.astronomical("tehran")
    with pytest.raises(CrossEngineError):
        arith.days_difference(erbil.make(2725, 1, 1), tehran.make(2725, 1, 1))


def test_invalid_leap_day_is_rejected(arith):
    bogus = CalendarDate(2725, 12, 30)
    with pytest.raises(OutOfRangeError):
        arith.add_days(bogus, 1)
    with pytest.raises(OutOfRangeError):
        arith.add_months(bogus, 1)
