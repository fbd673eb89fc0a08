from __future__ import annotations
from datetime import date, timedelta
from typing import Union
import re

from .errors import InvalidDateError, InvalidDateFormatError, InvalidRangeError

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

JD_1900 = 2415020.5   # JD at 1900-01-01 00:00:00 UTC
JD_J2000 = 2451545.0
_EPOCH_1900 = date(1900, 1, 1)


def parse_ymd(s: str) -> date:
    """Strict YYYY-MM-DD -> date."""
    if not _DATE_RE.match(s):
        raise InvalidDateFormatError(f"date must be in format YYYY-MM-DD, got {s!r}")
    y, m, d = map(int, s.split("-"))
    try:
        return date(y, m, d)
    except ValueError as e:
        raise InvalidDateError(f"invalid date {s!r}: {e}") from e

def coerce_date(d: Union[str, date]) -> date:
    if isinstance(d, date):
        return d
    if isinstance(d, str):
        return parse_ymd(d)
    raise InvalidDateFormatError(f"date must be a YYYY-MM-DD string or datetime.date, got {type(d).__name__}")


def julian_day(d: date, day_time: float, utc_offset_hours: float) -> float:
    """
    Julian Date of local clock time `day_time` on civil date `d`.

    Counts whole days from 1900-01-01 (JD 2415020.5), then shifts by the
    local time of day minus the zone offset.
    """
    days = float((d - _EPOCH_1900).days)
    return days + JD_1900 + (day_time - utc_offset_hours / 24.0)

def julian_century(jd: float) -> float:
    """Julian centuries from J2000.0."""
    return (jd - JD_J2000) / 36525.0


def day_of_year(d: date) -> int:
    return (d - date(d.year, 1, 1)).days + 1

def days_in_year(year: int) -> int:
    return (date(year + 1, 1, 1) - date(year, 1, 1)).days

def date_from_day_of_year(day: int, year: int) -> date:
    """Inverse of day_of_year."""
    n = days_in_year(year)
    if day < 1 or day > n:
        raise InvalidRangeError(f"day must be between 1 and {n} for year {year}, got {day}")
    return date(year, 1, 1) + timedelta(days=day - 1)
