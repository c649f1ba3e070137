from __future__ import annotations

import argparse
from datetime import date
from typing import List, Tuple

import kurdcal

DEFAULT_COLUMNS: List[Tuple[str, str]] = [
    ("Simplified", "simplified"),
    ("Erbil", "erbil"),
    ("Sulaymaniyah", "sulaymaniyah"),
    ("Tehran", "tehran"),
    ("UTC", "utc"),
]


def mmdd(d: date) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def parse_columns(arg: str) -> List[Tuple[str, str]]:
    """
    Parse columns from CLI.
    Example:
      --columns "Erbil=erbil,Qamishli=41.2,simplified"
    A bare item is used as its own header.
    """
    items = [x.strip() for x in arg.split(",") if x.strip()]
    out: List[Tuple[str, str]] = []
    for it in items:
        if "=" in it:
            name, where = it.split("=", 1)
            out.append((name.strip(), where.strip()))
        else:
            out.append((it.capitalize(), it))
    return out


def nowruz_for(where: str, year: int) -> date:
    if where == "simplified":
        return kurdcal.nowruz(year)
    return kurdcal.nowruz(year, kind="astronomical", longitude=where)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Print Nowruz dates per reference location.")
    p.add_argument("--from-year", type=int, default=2715, help="Kurdish year (default: 2715)")
    p.add_argument("--to-year", type=int, default=2735)
    p.add_argument("--columns", type=str, default="", help='Comma list like "Erbil=erbil,Qamishli=41.2,simplified"')
    p.add_argument("--dates", choices=("mmdd", "iso"), default="mmdd")
    p.add_argument("--leap", action="store_true", help="mark leap years with '*'")
    args = p.parse_args(argv)

    columns = parse_columns(args.columns) if args.columns else DEFAULT_COLUMNS

    def fmt(d: date) -> str:
        return mmdd(d) if args.dates == "mmdd" else d.isoformat()

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = ["Year", "Greg"] + [name for name, _ in columns]
    colw = [5, 5] + [max(11 if args.dates == "iso" else 6, len(h) + 1) for h in headers[2:]]
    print(" ".join(h.ljust(w) for h, w in zip(headers, colw)))
    print(" ".join("-" * w for w in colw))

    disagreements = []
    for Y in range(Y0, Y1 + 1):
        row = [str(Y).ljust(colw[0]), str(Y - 700).ljust(colw[1])]
        seen = set()
        for (_, where), w in zip(columns, colw[2:]):
            d = nowruz_for(where, Y)
            seen.add(d)
            cell = fmt(d)
            if args.leap:
                kind = "simplified" if where == "simplified" else "astronomical"
                lon = None if where == "simplified" else where
                if kurdcal.is_leap_year(Y, kind=kind, longitude=lon):
                    cell += "*"
            row.append(cell.ljust(w))
        if len(seen) > 1:
            disagreements.append(Y)
        print(" ".join(row))

    print()
    print(f"Years where columns disagree: {len(disagreements)} of {Y1 - Y0 + 1}")
    if disagreements:
        print("  " + ", ".join(str(y) for y in disagreements))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
