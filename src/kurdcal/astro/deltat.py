"""
kurdcal.astro.deltat
--------------------
ΔT = TT − UT from the Espenak–Meeus (2006) piecewise polynomials.

Each segment is a polynomial in u = (y − origin) / scale, valid for y below
its upper bound. The table reproduces the NASA eclipse-canon expressions;
the 2050–2150 bridge term is folded into the u-polynomial.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

from ..core.time import decimal_year_from_jd


@dataclass(frozen=True)
class DeltaTSegment:
    upper: float                  # exclusive upper bound (decimal year)
    origin: float
    scale: float
    coeffs: Tuple[float, ...]     # c0 + c1*u + c2*u^2 + ...


EM2006_SEGMENTS: Tuple[DeltaTSegment, ...] = (
    DeltaTSegment(-500.0, 1820.0, 100.0, (-20.0, 0.0, 32.0)),
    DeltaTSegment(500.0, 0.0, 100.0,
                  (10583.6, -1014.41, 33.78311, -5.952053, -0.1798452, 0.022174192, 0.0090316521)),
    DeltaTSegment(1600.0, 1000.0, 100.0,
                  (1574.2, -556.01, 71.23472, 0.319781, -0.8503463, -0.005050998, 0.0083572073)),
    DeltaTSegment(1700.0, 1600.0, 1.0, (120.0, -0.9808, -0.01532, 1.0 / 7129.0)),
    DeltaTSegment(1800.0, 1700.0, 1.0, (8.83, 0.1603, -0.0059285, 0.00013336, -1.0 / 1174000.0)),
    DeltaTSegment(1860.0, 1800.0, 1.0,
                  (13.72, -0.332447, 0.0068612, 0.0041116, -0.00037436,
                   0.0000121272, -0.0000001699, 0.000000000875)),
    DeltaTSegment(1900.0, 1860.0, 1.0,
                  (7.62, 0.5737, -0.251754, 0.01680668, -0.0004473624, 1.0 / 233174.0)),
    DeltaTSegment(1920.0, 1900.0, 1.0, (-2.79, 1.494119, -0.0598939, 0.0061966, -0.000197)),
    DeltaTSegment(1941.0, 1920.0, 1.0, (21.20, 0.84493, -0.076100, 0.0020936)),
    DeltaTSegment(1961.0, 1950.0, 1.0, (29.07, 0.407, -1.0 / 233.0, 1.0 / 2547.0)),
    DeltaTSegment(1986.0, 1975.0, 1.0, (45.45, 1.067, -1.0 / 260.0, -1.0 / 718.0)),
    DeltaTSegment(2005.0, 2000.0, 1.0,
                  (63.86, 0.3345, -0.060374, 0.0017275, 0.000651814, 0.00002373599)),
    DeltaTSegment(2050.0, 2000.0, 1.0, (62.92, 0.32217, 0.005589)),
    # -20 + 32u^2 - 0.5628*(2150 - y), rewritten in u = (y - 1820)/100
    DeltaTSegment(2150.0, 1820.0, 100.0, (-205.724, 56.28, 32.0)),
    DeltaTSegment(float("inf"), 1820.0, 100.0, (-20.0, 0.0, 32.0)),
)


def _poly(u: float, coeffs: Sequence[float]) -> float:
    acc = 0.0
    for c in reversed(coeffs):
        acc = acc * u + c
    return acc


def delta_t_seconds(y: float) -> float:
    """ΔT in seconds at decimal year y."""
    for seg in EM2006_SEGMENTS:
        if y < seg.upper:
            return _poly((y - seg.origin) / seg.scale, seg.coeffs)
    raise AssertionError("unreachable")


def delta_t_days(jd: float, model: str = "em2006") -> float:
    if model == "none":
        return 0.0
    if model != "em2006":
        raise ValueError(f"Unknown ΔT model '{model}'")
    return delta_t_seconds(decimal_year_from_jd(jd)) / 86400.0


def jde_to_jd_utc(jde: float, model: str = "em2006") -> float:
    """
    Julian Ephemeris Day (TT) -> JD (UTC, taken as UT).

    Two fixed-point passes, since ΔT is evaluated at the UT instant.
    """
    jd = jde
    for _ in range(2):
        jd = jde - delta_t_days(jd, model)
    return jd


def jd_utc_to_jde(jd_utc: float, model: str = "em2006") -> float:
    return jd_utc + delta_t_days(jd_utc, model)
