from __future__ import annotations

import argparse
from datetime import date
import importlib
import inspect
import json
import logging
import re
import sys


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


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


def fmt_hours(h: float) -> str:
    """Fractional hours -> HH:MM:SS, with a leading minus for negative hours."""
    sign = "-" if h < 0 else ""
    h = abs(h)
    h_int = int(h)
    m = (h - h_int) * 60
    m_int = int(m)
    s = (m - m_int) * 60
    return f"{sign}{h_int:02d}:{m_int:02d}:{s:05.2f}"


def cmd_calc(argv: list[str]) -> int:
    import solarcalc

    p = argparse.ArgumentParser(prog="solarcalc calc", description="NOAA solar position report as JSON.")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--lat", type=float, required=True, help="Observer latitude in degrees")
    p.add_argument("--lon", type=float, required=True, help="Observer longitude in degrees (positive East)")
    p.add_argument("--day-time", type=float, default=0.5, help="Fraction of the day (0 = midnight, 0.5 = noon)")
    tz = p.add_mutually_exclusive_group(required=True)
    tz.add_argument("--tz", help="Time zone id, e.g. America/New_York (offset resolved for DATE)")
    tz.add_argument("--utc-offset", type=float, help="UTC offset in hours")
    p.add_argument("--dst", action="store_true", help="Shift sunrise/sunset by +1 h")
    p.add_argument("--tilt", type=float, default=45.0, help="Surface tilt for tilted incidence (deg)")
    p.add_argument("--surface-azimuth", type=float, default=10.0, help="Surface azimuth for tilted incidence (deg)")
    args = p.parse_args(argv)

    report = solarcalc.solar_report(
        args.lat, args.lon, args.day_time, args.date,
        time_zone=args.tz,
        utc_offset_hours=args.utc_offset,
        daylight_saving=args.dst,
        surface_tilt=args.tilt,
        surface_azimuth=args.surface_azimuth,
    )
    print(json.dumps(report, indent="\t"))
    return 0


def cmd_day(argv: list[str]) -> int:
    import solarcalc
    from solarcalc.core.time import day_of_year, parse_ymd

    p = argparse.ArgumentParser(prog="solarcalc day", description="Day-of-year model report as JSON.")
    p.add_argument("day", help="Day of year (1-366) or YYYY-MM-DD")
    p.add_argument("--lat", type=float, required=True, help="Observer latitude in degrees")
    p.add_argument("--lon", type=float, required=True, help="Observer longitude in degrees (positive East)")
    p.add_argument("--dst", action="store_true", help="Shift sunrise/sunset by +1 h")
    args = p.parse_args(argv)

    if _DATE_RE.match(args.day):
        day = day_of_year(parse_ymd(args.day))
    elif args.day.isdecimal():
        day = int(args.day)
    else:
        p.error(f"DAY must be a day number or YYYY-MM-DD, got {args.day!r}")
    report = solarcalc.day_of_year_report(day, args.lat, args.lon, args.dst)
    print(json.dumps(report, indent="\t"))
    return 0


def cmd_sun(argv: list[str]) -> int:
    import solarcalc

    p = argparse.ArgumentParser(prog="solarcalc sun", description="Sunrise and sunset, side by side for each model.")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--lat", type=float, required=True)
    p.add_argument("--lon", type=float, required=True)
    p.add_argument("--tz", required=True, help="Time zone id used by the NOAA model")
    args = p.parse_args(argv)

    for name in solarcalc.list_models():
        model = solarcalc.make_model(name, args.lat, args.lon, args.date, time_zone=args.tz)
        try:
            t = model.sunrise_and_sunset()
        except solarcalc.PolarDayOrNightError as e:
            print(f"{name:<12s} {e}")
            continue
        print(f"{name:<12s} rise {fmt_hours(t.sunrise)}  set {fmt_hours(t.sunset)}  length {t.day_length:.4f} h")
    return 0


def cmd_tz(argv: list[str]) -> int:
    from solarcalc.core.time import parse_ymd
    from solarcalc.core.timezones import resolve_utc_offset_seconds
    from datetime import datetime

    p = argparse.ArgumentParser(prog="solarcalc tz", description="UTC offset of a time zone id.")
    p.add_argument("zone", help="Time zone id, e.g. Europe/Paris")
    p.add_argument("--date", default=None, help="YYYY-MM-DD (local noon); default: now")
    args = p.parse_args(argv)

    ref = None
    if args.date is not None:
        d: date = parse_ymd(args.date)
        ref = datetime(d.year, d.month, d.day, 12)
    seconds = resolve_utc_offset_seconds(args.zone, ref)
    print(f"{args.zone}: {seconds:+d} s ({seconds / 3600:+g} h)")
    return 0


def main(argv: list[str] | None = None) -> int:
    from solarcalc.core.errors import SolarCalcError

    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="solarcalc", description="Solar geometry toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging to stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("calc", help="NOAA solar position report (JSON)")
    sub.add_parser("day", help="Day-of-year model report (JSON)")
    sub.add_parser("sun", help="Sunrise/sunset from every registered model")
    sub.add_parser("tz", help="Resolve a time zone id to a UTC offset")
    sub.add_parser("compare", help="NOAA vs day-of-year over a year (diagnostics)")

    args, rest = p.parse_known_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    commands = {
        "calc": cmd_calc,
        "day": cmd_day,
        "sun": cmd_sun,
        "tz": cmd_tz,
    }
    try:
        if args.cmd == "compare":
            return _run_module_main("solarcalc.diagnostics.model_comparison", rest)
        return commands[args.cmd](rest)
    except SolarCalcError as e:
        print(f"solarcalc {args.cmd}: error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
