"""
kurdcal.diagnostics.leap_years
------------------------------
How well the 33-year leap table tracks the equinox: for each year, compare
the table's leap flag with the astronomical one at a reference longitude,
and report the day offset between the two Nowruz anchors.
"""
from __future__ import annotations

import argparse

import kurdcal
from kurdcal.core.time import to_jdn


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "kurdcal[diagnostics]"') from e


def leap_arrays(y0: int, y1: int, longitude: str):
    """(years, table_leap, astro_leap, anchor_offset_days) as numpy arrays."""
    np = _need_numpy()
    years = np.arange(y0, y1 + 1)
    table = np.array([kurdcal.is_leap_year(int(y)) for y in years], dtype=bool)
    astro = np.array(
        [kurdcal.is_leap_year(int(y), kind="astronomical", longitude=longitude) for y in years], dtype=bool
    )
    offset = np.array(
        [
            to_jdn(kurdcal.nowruz(int(y), kind="astronomical", longitude=longitude)) - to_jdn(kurdcal.nowruz(int(y)))
            for y in years
        ],
        dtype=int,
    )
    return years, table, astro, offset


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Compare 33-year table leap years with equinox leap years.")
    p.add_argument("--from-year", type=int, default=2400)
    p.add_argument("--to-year", type=int, default=3100)
    p.add_argument("--location", default="erbil")
    p.add_argument("--list", action="store_true", help="list the years where the flags differ")
    args = p.parse_args(argv)

    np = _need_numpy()
    years, table, astro, offset = leap_arrays(args.from_year, args.to_year, args.location)

    agree = table == astro
    n = len(years)
    print(f"Years {args.from_year}..{args.to_year} at {args.location}: {n}")
    print(f"  table leap years       : {int(table.sum())}")
    print(f"  astronomical leap years: {int(astro.sum())}")
    print(f"  agreement              : {int(agree.sum())}/{n} ({100.0 * agree.mean():.2f}%)")
    print(f"  mean year (table)      : {365.0 + table.mean():.6f} days")
    print(f"  mean year (equinox)    : {365.0 + astro.mean():.6f} days")

    values, counts = np.unique(offset, return_counts=True)
    print("  astronomical - simplified Nowruz (days):")
    for v, c in zip(values, counts):
        print(f"    {int(v):+d}: {int(c)}")

    if args.list:
        bad = years[~agree]
        print("  differing years: " + (", ".join(str(int(y)) for y in bad) if bad.size else "none"))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
