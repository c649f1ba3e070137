"""
kurdcal.diagnostics.equinox_check
---------------------------------
Cross-check the series equinox (Meeus ch. 27) against

  * the root of the ch. 25 apparent solar longitude (scipy brentq), and
  * optionally a JPL ephemeris through skyfield (--skyfield).

Differences are printed in seconds (series minus reference).
"""
from __future__ import annotations

import argparse
from typing import Dict, Optional

from kurdcal.astro.deltat import jde_to_jd_utc
from kurdcal.astro.equinox import spring_equinox_jde
from kurdcal.core.time import jd_to_datetime_utc
from kurdcal.reference.solar import equinox_residual_deg


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "kurdcal[diagnostics]"') from e


def _need_scipy_optimize():
    try:
        from scipy import optimize
        return optimize
    except ImportError as e:
        raise RuntimeError('Need scipy. Install: pip install "kurdcal[diagnostics]"') from e


def root_equinox_jde(year: int, *, half_window_days: float = 2.0) -> float:
    """JDE where the reference apparent longitude crosses 0, bracketed around the series value."""
    optimize = _need_scipy_optimize()
    guess = spring_equinox_jde(year)
    return float(
        optimize.brentq(
            equinox_residual_deg,
            guess - half_window_days,
            guess + half_window_days,
            xtol=1e-9,
        )
    )


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Compare series equinoxes with independent references.")
    p.add_argument("--from-year", type=int, default=1900, help="Gregorian year")
    p.add_argument("--to-year", type=int, default=2100)
    p.add_argument("--step", type=int, default=10)
    p.add_argument("--skyfield", action="store_true", help="also compare with a JPL kernel (downloads de440s.bsp)")
    p.add_argument("--kernel-dir", default=None)
    args = p.parse_args(argv)

    np = _need_numpy()
    years = list(range(args.from_year, args.to_year + 1, args.step))

    sky: Optional[Dict[int, float]] = None
    if args.skyfield:
        from kurdcal.ephemeris.seasons import SkyfieldEquinoxes
        sky = SkyfieldEquinoxes.load(directory=args.kernel_dir).march_equinoxes_jd_utc(years[0], years[-1])

    print(f"{'Year':>5s}  {'series (UTC)':<20s}  {'root-ch25 (s)':>13s}" + ("  {:>12s}".format("skyfield (s)") if sky else ""))
    d_root, d_sky = [], []
    for y in years:
        jde = spring_equinox_jde(y)
        jd_utc = jde_to_jd_utc(jde)
        dr = (jde - root_equinox_jde(y)) * 86400.0
        d_root.append(dr)
        line = f"{y:5d}  {jd_to_datetime_utc(jd_utc).strftime('%Y-%m-%d %H:%M:%S'):<20s}  {dr:13.1f}"
        if sky is not None and y in sky:
            ds = (jd_utc - sky[y]) * 86400.0
            d_sky.append(ds)
            line += f"  {ds:12.1f}"
        print(line)

    print()
    a = np.asarray(d_root)
    print(f"vs ch.25 root : mean {a.mean():+.1f} s, rms {np.sqrt((a * a).mean()):.1f} s, max |d| {np.abs(a).max():.1f} s")
    if d_sky:
        b = np.asarray(d_sky)
        print(f"vs skyfield   : mean {b.mean():+.1f} s, rms {np.sqrt((b * b).mean()):.1f} s, max |d| {np.abs(b).max():.1f} s")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
