"""
kurdcal.astro.equinox
---------------------
Spring (March) equinox instants after Meeus, *Astronomical Algorithms*,
2nd ed., chapter 27.

  1. Mean equinox JDE0 from a quartic in the year (Table 27.A before 1000 CE,
     Table 27.B from 1000 CE on).
  2. Periodic correction: S = sum A*cos(B + C*T) over Table 27.C, scaled by
     1/Δλ with Δλ = 1 + 0.0334 cos W + 0.0007 cos 2W, W = 35999.373 T − 2.47.
     JDE = JDE0 + 0.00001 * S / Δλ.
  3. JDE (TT) -> UTC through ΔT (kurdcal.astro.deltat).

Error against modern ephemerides stays well under a minute for 1800–2200.
Outside that band the same expressions are evaluated and degrade smoothly.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Tuple

from ..core.time import JD_J2000, jd_to_datetime_utc
from .deltat import jde_to_jd_utc


# ============================================================
# Published constants
# ============================================================

@dataclass(frozen=True)
class MeanEquinoxPolynomial:
    """JDE0 = c0 + c1*Y + c2*Y^2 + c3*Y^3 + c4*Y^4 with Y = (year − origin)/1000."""
    origin: int
    coeffs: Tuple[float, float, float, float, float]

    def evaluate(self, year: int) -> float:
        y = (year - self.origin) / 1000.0
        acc = 0.0
        for c in reversed(self.coeffs):
            acc = acc * y + c
        return acc


# Table 27.A (years -1000 .. +1000)
MARCH_MEAN_BEFORE_1000 = MeanEquinoxPolynomial(
    origin=0,
    coeffs=(1721139.29189, 365242.13740, 0.06134, 0.00111, -0.00071),
)

# Table 27.B (years +1000 .. +3000)
MARCH_MEAN_FROM_1000 = MeanEquinoxPolynomial(
    origin=2000,
    coeffs=(2451623.80984, 365242.37404, 0.05169, -0.00411, -0.00057),
)


@dataclass(frozen=True)
class PeriodicTerm:
    amplitude: int     # A, units of 0.00001 day before the Δλ scaling
    phase_deg: float   # B
    rate_deg: float    # C, degrees per Julian century


# Table 27.C
PERIODIC_TERMS: Tuple[PeriodicTerm, ...] = tuple(
    PeriodicTerm(a, b, c)
    for a, b, c in (
        (485, 324.96, 1934.136),
        (203, 337.23, 32964.467),
        (199, 342.08, 20.186),
        (182, 27.85, 445267.112),
        (156, 73.14, 45036.886),
        (136, 171.52, 22518.443),
        (77, 222.54, 65928.934),
        (74, 296.72, 3034.906),
        (70, 243.58, 9037.513),
        (58, 119.81, 33718.147),
        (52, 297.17, 150.678),
        (50, 21.02, 2281.226),
        (45, 247.54, 29929.562),
        (44, 325.15, 31555.956),
        (29, 60.93, 4443.417),
        (18, 155.12, 67555.328),
        (17, 288.79, 4562.452),
        (16, 198.04, 62894.029),
        (14, 199.76, 31436.921),
        (12, 95.39, 14577.848),
        (12, 287.11, 31931.756),
        (12, 320.81, 34777.259),
        (9, 227.73, 1222.114),
        (8, 15.45, 16859.074),
    )
)

PERIODIC_UNIT_DAYS = 0.00001


# ============================================================
# Calculation
# ============================================================

def mean_equinox_jde(year: int) -> float:
    """JDE0 of the March equinox (mean, uncorrected)."""
    poly = MARCH_MEAN_BEFORE_1000 if year < 1000 else MARCH_MEAN_FROM_1000
    return poly.evaluate(year)


def periodic_sum(T: float) -> float:
    """S = sum A*cos(B + C*T), T in Julian centuries from J2000."""
    return sum(t.amplitude * math.cos(math.radians(t.phase_deg + t.rate_deg * T)) for t in PERIODIC_TERMS)


def delta_lambda(T: float) -> float:
    W = math.radians(35999.373 * T - 2.47)
    return 1.0 + 0.0334 * math.cos(W) + 0.0007 * math.cos(2.0 * W)


def spring_equinox_jde(year: int) -> float:
    """Julian Ephemeris Day (TT) of the March equinox of a Gregorian year."""
    jde0 = mean_equinox_jde(year)
    T = (jde0 - JD_J2000) / 36525.0
    return jde0 + PERIODIC_UNIT_DAYS * periodic_sum(T) / delta_lambda(T)


def spring_equinox_jd_utc(year: int, *, delta_t: str = "em2006") -> float:
    return jde_to_jd_utc(spring_equinox_jde(year), delta_t)


def spring_equinox_utc(year: int, *, delta_t: str = "em2006") -> datetime:
    """March equinox as an aware UTC datetime (years 1..9999 only)."""
    return jd_to_datetime_utc(spring_equinox_jd_utc(year, delta_t=delta_t))


@dataclass(frozen=True)
class EquinoxCalculator:
    """The equinox function bound to one ΔT model; what EquinoxCache calls on a miss."""
    delta_t: str = "em2006"

    def jde(self, year: int) -> float:
        return spring_equinox_jde(year)

    def jd_utc(self, year: int) -> float:
        return spring_equinox_jd_utc(year, delta_t=self.delta_t)

    def utc_instant(self, year: int) -> datetime:
        return jd_to_datetime_utc(self.jd_utc(year))
