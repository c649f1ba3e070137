import pytest

from kurdcal.astro import deltat


@pytest.mark.parametrize(
    "year, expected, tol",
    [
        (2000.0, 63.86, 1e-9),
        (2010.0, 66.7, 1.0),
        (1900.0, -2.79, 1e-9),
        (1820.0, 12.0, 2.0),
        (1000.0, 1574.2, 1e-9),
    ],
)
def test_known_values(year, expected, tol):
    assert deltat.delta_t_seconds(year) == pytest.approx(expected, abs=tol)


def test_2005_segment_join_is_smooth():
    below = deltat.delta_t_seconds(2005.0 - 1e-9)
    above = deltat.delta_t_seconds(2005.0)
    assert above == pytest.approx(below, abs=0.2)


def test_bridge_term_folded_into_u_polynomial():
    y = 2100.0
    u = (y - 1820.0) / 100.0
    expected = -20.0 + 32.0 * u * u - 0.5628 * (2150.0 - y)
    assert deltat.delta_t_seconds(y) == pytest.approx(expected, abs=1e-9)


def test_tt_utc_inverse():
    jde = 2460754.876917
    jd_utc = deltat.jde_to_jd_utc(jde)
    assert (jde - jd_utc) * 86400.0 == pytest.approx(74.6, abs=1.0)
    assert deltat.jd_utc_to_jde(jd_utc) == pytest.approx(jde, abs=1e-8)


def test_none_model_is_identity():
    assert deltat.jde_to_jd_utc(2451545.0, "none") == 2451545.0


def test_unknown_model():
    with pytest.raises(ValueError):
        deltat.delta_t_days(2451545.0, "iers")
