# reference/solar.py

from __future__ import annotations

import math
from dataclasses import dataclass

from ..core.time import JD_J2000


def wrap_deg(x_deg: float) -> float:
    return x_deg % 360.0


def wrap180(deg: float) -> float:
    """Wrap to [-180, 180)."""
    return (deg + 180.0) % 360.0 - 180.0


def T_centuries(jd_tt: float) -> float:
    """Julian centuries of TT from J2000.0."""
    return (jd_tt - JD_J2000) / 36525.0


@dataclass(frozen=True)
class SolarCoordinates:
    """True and apparent geocentric solar longitude (degrees)."""
    L_true_deg: float
    L_app_deg: float


def solar_longitude(jd_tt: float) -> SolarCoordinates:
    """
    Meeus ch. 25 low-accuracy solar longitude (~0.01 deg).

    Independent of the chapter 27 equinox series, so it can be used to
    cross-check equinox instants by root-finding on L_app = 0.
    """
    T = T_centuries(jd_tt)

    L0 = 280.46646 + 36000.76983 * T + 0.0003032 * T * T
    M = math.radians(357.52911 + 35999.05029 * T - 0.0001537 * T * T)

    # Equation of center
    C = (
        (1.914602 - 0.004817 * T - 0.000014 * T * T) * math.sin(M)
        + (0.019993 - 0.000101 * T) * math.sin(2.0 * M)
        + 0.000289 * math.sin(3.0 * M)
    )
    L_true = wrap_deg(L0 + C)

    # Aberration and leading nutation term
    Omega = math.radians(125.04 - 1934.136 * T)
    L_app = wrap_deg(L_true - 0.00569 - 0.00478 * math.sin(Omega))

    return SolarCoordinates(L_true_deg=L_true, L_app_deg=L_app)


def equinox_residual_deg(jd_tt: float) -> float:
    """Apparent longitude wrapped to [-180, 180); zero at the March equinox."""
    return wrap180(solar_longitude(jd_tt).L_app_deg)
