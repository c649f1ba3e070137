from __future__ import annotations

import argparse
import random
from datetime import date, timedelta
from typing import List

import kurdcal


def parse_date(s: str) -> date:
    y, m, d = s.split("-")
    return date(int(y), int(m), int(d))


def random_date(rng: random.Random, start: date, end: date) -> date:
    span = (end - start).days
    return start + timedelta(days=rng.randint(0, span))


def parse_engines(s: str) -> List[str]:
    # "simplified,erbil,52.5" -> ["simplified", "erbil", "52.5"]
    return [x.strip() for x in s.split(",") if x.strip()]


def roundtrip_test(
    engine: str,
    N: int,
    start: date,
    end: date,
    seed: int,
    *,
    max_failures: int,
) -> int:
    """Gregorian -> Kurdish -> Gregorian on N random days, plus add_days(+n, -n)."""
    rng = random.Random(seed)
    if engine == "simplified":
        kw = {"kind": "simplified"}
    else:
        kw = {"kind": "astronomical", "longitude": engine}
    failures = 0

    for _ in range(N):
        g0 = random_date(rng, start, end)
        k = kurdcal.from_gregorian(g0, **kw)
        back = kurdcal.to_gregorian(k)
        n = rng.randint(-800, 800)
        shifted = kurdcal.add_days(kurdcal.add_days(k, n), -n)
        if back != g0 or kurdcal.to_gregorian(shifted) != g0:
            failures += 1
            print("\nFAIL")
            print("engine:", engine)
            print("g0:", g0)
            print("kurdish:", k)
            print("back:", back)
            print(f"add_days(+{n}, -{n}):", shifted)
            if failures >= max_failures:
                return failures
    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random Gregorian -> Kurdish -> Gregorian round trips.")
    p.add_argument("--engines", default="simplified,erbil,utc")
    p.add_argument("--n", type=int, default=2000)
    p.add_argument("--start", default="1900-01-01")
    p.add_argument("--end", default="2100-12-31")
    p.add_argument("--seed", type=int, default=12345)
    p.add_argument("--max-failures", type=int, default=5)
    args = p.parse_args(argv)

    start, end = parse_date(args.start), parse_date(args.end)
    total = 0
    for eng in parse_engines(args.engines):
        f = roundtrip_test(eng, args.n, start, end, args.seed, max_failures=args.max_failures)
        print(f"{eng:>12s}: {args.n - f}/{args.n} ok")
        total += f
    return 1 if total else 0


if __name__ == "__main__":
    raise SystemExit(main())
