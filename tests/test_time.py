# tests/test_time.py

import pytest
import random
from datetime import date, datetime
from unittest.mock import patch

import pytz

from solarcalc.core import time as st
from solarcalc.core.errors import (
    InvalidDateError,
    InvalidDateFormatError,
    InvalidRangeError,
    UnresolvedTimezoneError,
)
from solarcalc.core.timezones import resolve_utc_offset_seconds


def test_known_epochs():
    assert st.julian_day(date(1900, 1, 1), 0.0, 0.0) == 2415020.5
    # J2000.0 is 2000-01-01 12:00 UTC
    assert st.julian_day(date(2000, 1, 1), 0.5, 0.0) == 2451545.0
    assert st.julian_century(2451545.0) == 0.0
    assert st.julian_century(2451545.0 + 36525.0) == 1.0

def test_julian_day_offset_shifts_to_utc():
    # 12:00 at UTC-5 is 17:00 UTC
    local = st.julian_day(date(2023, 1, 1), 0.5, -5.0)
    utc = st.julian_day(date(2023, 1, 1), 17 / 24, 0.0)
    assert local == pytest.approx(utc, abs=1e-9)

def test_parse_ymd():
    assert st.parse_ymd("2023-01-01") == date(2023, 1, 1)
    with pytest.raises(InvalidDateError):
        st.parse_ymd("2023-13-01")
    with pytest.raises(InvalidDateError):
        st.parse_ymd("2023-04-31")
    for bad in ("2023-1-01", "20230101", "2023-01-01T00:00", " 2023-01-01", ""):
        with pytest.raises(InvalidDateFormatError):
            st.parse_ymd(bad)

def test_coerce_date():
    assert st.coerce_date(date(2020, 2, 29)) == date(2020, 2, 29)
    assert st.coerce_date("2020-02-29") == date(2020, 2, 29)
    with pytest.raises(InvalidDateFormatError):
        st.coerce_date(20200229)

def test_day_of_year_roundtrip():
    random.seed(42)
    for _ in range(500):
        year = random.randint(1901, 2099)
        day = random.randint(1, st.days_in_year(year))
        assert st.day_of_year(st.date_from_day_of_year(day, year)) == day

def test_day_of_year_edges():
    assert st.day_of_year(date(2023, 1, 1)) == 1
    assert st.day_of_year(date(2023, 12, 31)) == 365
    assert st.day_of_year(date(2024, 12, 31)) == 366
    with pytest.raises(InvalidRangeError):
        st.date_from_day_of_year(366, 2023)
    with pytest.raises(InvalidRangeError):
        st.date_from_day_of_year(0, 2024)


# --- time zones ---

def test_new_york_standard_and_daylight_time():
    assert resolve_utc_offset_seconds("America/New_York", datetime(2023, 1, 1, 12)) == -18000
    assert resolve_utc_offset_seconds("America/New_York", datetime(2023, 7, 1, 12)) == -14400

def test_fractional_and_eastern_zones():
    assert resolve_utc_offset_seconds("Asia/Kolkata", datetime(2023, 1, 1, 12)) == 19800
    assert resolve_utc_offset_seconds("UTC", datetime(2023, 1, 1, 12)) == 0

def test_aware_reference_uses_wall_clock():
    from datetime import timezone
    aware = datetime(2023, 7, 1, 12, tzinfo=timezone.utc)
    assert resolve_utc_offset_seconds("Europe/Paris", aware) == 7200

def test_unknown_zone_fails_loudly():
    with pytest.raises(UnresolvedTimezoneError):
        resolve_utc_offset_seconds("Mars/Olympus_Mons", datetime(2023, 1, 1, 12))
    with pytest.raises(LookupError):
        resolve_utc_offset_seconds("Not/AZone")

def test_now_reference():
    with patch("solarcalc.core.timezones.datetime") as mock_dt:
        mock_dt.now.return_value = datetime(2023, 1, 15, 17, 0, tzinfo=pytz.utc)
        assert resolve_utc_offset_seconds("America/New_York") == -18000
