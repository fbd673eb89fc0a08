#!/usr/bin/env python3
"""
Compare the NOAA chain against the day-of-year fits over one calendar year.

Prints max/RMS differences for equation of time, declination and day length,
and optionally writes a three-panel plot.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

import argparse

from solarcalc.calculator import SolarCalculator
from solarcalc.core.angles import standard_meridian
from solarcalc.core.errors import PolarDayOrNightError
from solarcalc.core.time import date_from_day_of_year, days_in_year
from solarcalc.engines import day_of_year as doy


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "solarcalc[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "solarcalc[diagnostics]"') from e


@dataclass(frozen=True)
class YearSeries:
    days: "np.ndarray"
    eot_noaa: "np.ndarray"
    eot_doy: "np.ndarray"
    decl_noaa: "np.ndarray"
    decl_doy: "np.ndarray"
    len_noaa: "np.ndarray"   # NaN where NOAA has no sunrise
    len_doy: "np.ndarray"


def build_series(np, year: int, latitude: float, longitude: float, utc_offset_hours: float) -> YearSeries:
    n = days_in_year(year)
    days = np.arange(1, n + 1, dtype=int)
    cols = {k: np.empty(n, dtype=float) for k in ("eot_noaa", "eot_doy", "decl_noaa", "decl_doy", "len_noaa", "len_doy")}

    sc = SolarCalculator(latitude, longitude, 0.5, date_from_day_of_year(1, year), utc_offset_hours=utc_offset_hours)
    for i, day in enumerate(days):
        day = int(day)
        sc.set_date(date_from_day_of_year(day, year))

        cols["eot_noaa"][i] = sc.equation_of_time()
        cols["decl_noaa"][i] = sc.solar_declination()
        try:
            cols["len_noaa"][i] = sc.day_length()
        except PolarDayOrNightError:
            cols["len_noaa"][i] = np.nan

        cols["eot_doy"][i] = doy.equation_of_time(day)
        cols["decl_doy"][i] = doy.solar_declination(day)
        cols["len_doy"][i] = doy.day_length(day, latitude)

    return YearSeries(days=days, **cols)


def summarize(np, label: str, a, b, unit: str) -> str:
    d = a - b
    d = d[np.isfinite(d)]
    if d.size == 0:
        return f"{label:<14s}  (no comparable days)"
    rms = float(np.sqrt(np.mean(d * d)))
    worst = float(np.max(np.abs(d)))
    return f"{label:<14s}  max |diff| = {worst:8.3f} {unit}   rms = {rms:8.3f} {unit}"


def plot_series(plt, s: YearSeries, title: str, outbase: str) -> None:
    fig, axes = plt.subplots(3, 1, figsize=(8.4, 8.0), sharex=True, constrained_layout=True)
    panels = [
        ("Equation of time (min)", s.eot_noaa, s.eot_doy),
        ("Declination (deg)", s.decl_noaa, s.decl_doy),
        ("Day length (h)", s.len_noaa, s.len_doy),
    ]
    for ax, (ylabel, a, b) in zip(axes, panels):
        ax.grid(True, color="0.88", linewidth=0.7)
        ax.plot(s.days, a, color="tab:blue", linewidth=1.4, label="NOAA")
        ax.plot(s.days, b, color="tab:red", linewidth=1.0, linestyle="--", label="day-of-year")
        ax.set_ylabel(ylabel)
    axes[0].set_title(title)
    axes[0].legend(frameon=False)
    axes[-1].set_xlabel("Day of year")

    fig.savefig(outbase + ".png", dpi=200)
    print(f"Saved: {outbase}.png")


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Compare NOAA and day-of-year solar models over a year.")
    p.add_argument("--year", type=int, default=2023)
    p.add_argument("--lat", type=float, default=25.4687224, help="Observer latitude in degrees")
    p.add_argument("--lon", type=float, default=-80.37, help="Observer longitude in degrees (positive East)")
    p.add_argument("--utc-offset", type=float, default=None,
                   help="UTC offset in hours for the NOAA chain (default: standard meridian / 15)")
    p.add_argument("--outbase", default=None, help="Write a plot to OUTBASE.png")
    args = p.parse_args(argv)

    np = _need_numpy()

    offset = args.utc_offset if args.utc_offset is not None else standard_meridian(args.lon) / 15.0
    s = build_series(np, args.year, args.lat, args.lon, offset)

    print(f"year={args.year}  lat={args.lat}  lon={args.lon}  utc_offset={offset:+g} h")
    print(summarize(np, "EoT", s.eot_noaa, s.eot_doy, "min"))
    print(summarize(np, "Declination", s.decl_noaa, s.decl_doy, "deg"))
    print(summarize(np, "Day length", s.len_noaa, s.len_doy, "h"))

    if args.outbase:
        plt = _need_matplotlib()
        plot_series(plt, s, f"NOAA vs day-of-year  ({args.lat:.2f}, {args.lon:.2f})  {args.year}", args.outbase)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
