from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys
from datetime import date

from .core.errors import KurdcalError

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

log = logging.getLogger(__name__)


def _parse_ymd(s: str) -> date:
    try:
        return date.fromisoformat(s)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid Gregorian date {s!r}: {exc}") from exc


def _parse_kurdish_ymd(s: str) -> tuple[int, int, int]:
    parts = s.split("-")
    if len(parts) != 3:
        raise argparse.ArgumentTypeError(f"expected Y-M-D, got {s!r}")
    try:
        y, m, d = (int(p) for p in parts)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected Y-M-D, got {s!r}") from exc
    return y, m, d


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _add_engine_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--astronomical", action="store_true", help="use the equinox-anchored calendar")
    p.add_argument(
        "--location",
        default=None,
        help="reference location for --astronomical: erbil, sulaymaniyah, tehran, utc (default: KURDCAL_LONGITUDE or erbil)",
    )
    p.add_argument("--lon", type=float, default=None, help="reference longitude in degrees East (overrides --location)")


def _engine_kwargs(args: argparse.Namespace) -> dict:
    if not args.astronomical:
        return {"kind": "simplified"}
    lon = args.lon if args.lon is not None else args.location
    return {"kind": "astronomical", "longitude": lon}


def _add_text_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--dialect", default="sorani-latin", help="sorani|kurmanji|hawrami + -latin|-arabic, or sorani|kurmanji-gregorian-latin|-arabic for Gregorian month names")
    p.add_argument("--format", dest="fmt", default="F", help="standard code (d, D, M, Y, F) or custom pattern")


def cmd_to_kurdish(argv: list[str]) -> int:
    import kurdcal

    p = argparse.ArgumentParser(prog="kurdcal to-kurdish", description="Gregorian -> Kurdish date")
    p.add_argument("date", type=_parse_ymd, help="YYYY-MM-DD (Gregorian)")
    _add_engine_args(p)
    _add_text_args(p)
    args = p.parse_args(argv)

    d = kurdcal.from_gregorian(args.date, **_engine_kwargs(args))
    print(f"{d}  {kurdcal.format_date(d, args.fmt, args.dialect)}")
    return 0


def cmd_to_gregorian(argv: list[str]) -> int:
    import kurdcal

    p = argparse.ArgumentParser(prog="kurdcal to-gregorian", description="Kurdish -> Gregorian date")
    p.add_argument("date", type=_parse_kurdish_ymd, help="Y-M-D (Kurdish), e.g. 2725-1-1")
    _add_engine_args(p)
    args = p.parse_args(argv)

    y, m, d = args.date
    kd = kurdcal.make_date(y, m, d, **_engine_kwargs(args))
    print(kurdcal.to_gregorian(kd).isoformat())
    return 0


def cmd_equinox(argv: list[str]) -> int:
    import kurdcal

    p = argparse.ArgumentParser(prog="kurdcal equinox", description="March equinox opening a Kurdish year")
    p.add_argument("year", type=int, help="Kurdish year, e.g. 2725")
    p.add_argument("--location", default=None)
    p.add_argument("--lon", type=float, default=None)
    args = p.parse_args(argv)

    lon = args.lon if args.lon is not None else args.location
    rec = kurdcal.equinox_record(args.year, longitude=lon)
    print(f"Kurdish year      : {args.year}")
    print(f"Gregorian year    : {rec.gregorian_year}")
    print(f"Longitude         : {rec.longitude:.4f} E")
    print(f"JDE (TT)          : {rec.jde:.6f}")
    print(f"Equinox (UTC)     : {rec.utc_instant.isoformat(timespec='seconds')}")
    print(f"Equinox (LMT)     : {rec.local_moment.isoformat(timespec='seconds')}")
    print(f"Nowruz (local day): {rec.local_date.isoformat()}")
    return 0


def cmd_info(argv: list[str]) -> int:
    import kurdcal

    p = argparse.ArgumentParser(prog="kurdcal info", description="Year structure of a Kurdish year")
    p.add_argument("year", type=int)
    _add_engine_args(p)
    args = p.parse_args(argv)

    kw = _engine_kwargs(args)
    eng = kurdcal.get_engine(kw["kind"], longitude=kw.get("longitude"))
    info = eng.year_info(args.year)
    print(f"Engine      : {eng.kind}" + (f" @ {eng.longitude:g} E" if eng.longitude is not None else ""))
    print(f"Nowruz      : {info['nowruz'].isoformat()}")
    print(f"Next Nowruz : {info['next_nowruz'].isoformat()}")
    print(f"Leap year   : {'yes' if info['is_leap'] else 'no'}")
    print(f"Days        : {info['days_in_year']}")
    if info["span_days"] != info["days_in_year"]:
        print(f"Span        : {info['span_days']} (month 12 runs to day {info['last_month_days']})")
    return 0


def cmd_parse(argv: list[str]) -> int:
    import kurdcal

    p = argparse.ArgumentParser(prog="kurdcal parse", description="Parse Kurdish date text and show the Gregorian date")
    p.add_argument("text", nargs="+")
    p.add_argument("--dialect", default="sorani-latin")
    _add_engine_args(p)
    args = p.parse_args(argv)

    d = kurdcal.parse_date(" ".join(args.text), args.dialect, **_engine_kwargs(args))
    print(f"{d}  ->  {kurdcal.to_gregorian(d).isoformat()}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    verbose = "--verbose" in argv or "-v" in argv
    argv = [a for a in argv if a not in ("--verbose", "-v")]
    from .logging_setup import setup_logging
    setup_logging("DEBUG" if verbose else None)

    # Shorthand: `kurdcal YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        argv = ["to-kurdish"] + argv

    p = argparse.ArgumentParser(prog="kurdcal", description="Kurdish calendar toolkit CLI. Add -v/--verbose for debug logging.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("to-kurdish", help="Gregorian -> Kurdish date", add_help=False)
    sub.add_parser("to-gregorian", help="Kurdish -> Gregorian date", add_help=False)
    sub.add_parser("equinox", help="March equinox instant and Nowruz day for a Kurdish year", add_help=False)
    sub.add_parser("info", help="Leap status and length of a Kurdish year", add_help=False)
    sub.add_parser("parse", help="Parse Kurdish date text", add_help=False)

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["nowruz-table", "leap-years", "drift-plot", "round-trip", "equinox-check"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    commands = {
        "to-kurdish": cmd_to_kurdish,
        "to-gregorian": cmd_to_gregorian,
        "equinox": cmd_equinox,
        "info": cmd_info,
        "parse": cmd_parse,
    }

    try:
        if args.cmd in commands:
            return commands[args.cmd](rest)

        if args.cmd == "diag":
            tool_map = {
                "nowruz-table": "kurdcal.diagnostics.nowruz_table",
                "leap-years": "kurdcal.diagnostics.leap_years",
                "drift-plot": "kurdcal.diagnostics.drift_plot",
                "round-trip": "kurdcal.diagnostics.round_trip",
                "equinox-check": "kurdcal.diagnostics.equinox_check",
            }
            return _run_module_main(tool_map[args.tool], rest)
    except KurdcalError as exc:
        log.debug("command failed", exc_info=True)
        print(f"kurdcal: error: {exc}", file=sys.stderr)
        return 2

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
