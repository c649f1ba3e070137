from __future__ import annotations

import argparse
from typing import List

import kurdcal
from kurdcal.core.time import to_jdn


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "kurdcal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "kurdcal[diagnostics]"') from e


def _local_hour(year: int, loc: str) -> float:
    m = kurdcal.equinox_moment(year, longitude=loc, local=True)
    return m.hour + m.minute / 60.0 + m.second / 3600.0


def parse_locations(s: str) -> List[str]:
    return [x.strip() for x in s.split(",") if x.strip()]


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Plot the astronomical Nowruz relative to 21 March, and the equinox local hour, per location."
    )
    p.add_argument("--from-year", type=int, default=2600)
    p.add_argument("--to-year", type=int, default=2900)
    p.add_argument("--locations", default="erbil,tehran,utc")
    p.add_argument("--out", default=None, help="save to this file instead of showing a window")
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    years = np.arange(args.from_year, args.to_year + 1)
    fig, (ax0, ax1) = plt.subplots(2, 1, figsize=(11, 7), sharex=True)

    for loc in parse_locations(args.locations):
        offsets = np.array(
            [
                to_jdn(kurdcal.nowruz(int(y), kind="astronomical", longitude=loc)) - to_jdn(kurdcal.nowruz(int(y)))
                for y in years
            ]
        )
        hours = np.array([_local_hour(int(y), loc) for y in years])
        ax0.step(years, offsets, where="mid", label=loc)
        ax1.plot(years, hours, ".", ms=3, label=loc)

    ax0.set_ylabel("Nowruz − 21 March (days)")
    ax0.axhline(0.0, color="0.6", lw=0.8)
    ax0.legend(loc="best")
    ax1.set_ylabel("equinox, local mean time (h)")
    ax1.set_xlabel("Kurdish year")
    ax1.set_ylim(0, 24)
    fig.suptitle("Astronomical vs simplified anchors")
    fig.tight_layout()

    if args.out:
        fig.savefig(args.out, dpi=150)
        print(f"saved {args.out}")
    else:
        plt.show()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
