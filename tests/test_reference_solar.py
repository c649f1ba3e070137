# tests/test_reference_solar.py

import pytest

from kurdcal.astro.equinox import spring_equinox_jde
from kurdcal.reference.solar import T_centuries, equinox_residual_deg, solar_longitude, wrap180, wrap_deg


def test_wrapping():
    assert wrap_deg(-10.0) == pytest.approx(350.0)
    assert wrap_deg(720.5) == pytest.approx(0.5)
    assert wrap180(190.0) == pytest.approx(-170.0)
    assert wrap180(-180.0) == pytest.approx(-180.0)
    assert T_centuries(2451545.0) == 0.0


def test_longitude_near_zero_at_series_equinox():
    for year in (1950, 2000, 2025, 2050):
        assert abs(equinox_residual_deg(spring_equinox_jde(year))) < 0.02


def test_sun_moves_about_one_degree_a_day():
    jde = spring_equinox_jde(2025)
    a = solar_longitude(jde).L_app_deg
    b = solar_longitude(jde + 1.0).L_app_deg
    assert wrap180(b - a) == pytest.approx(0.9856, abs=0.03)


def test_root_matches_series():
    pytest.importorskip("scipy")
    from kurdcal.diagnostics.equinox_check import root_equinox_jde

    for year in (1980, 2025, 2070):
        assert abs(root_equinox_jde(year) - spring_equinox_jde(year)) * 1440.0 < 30.0
