# tests/test_api.py

import json
import pytest

import solarcalc
from solarcalc import DayOfYearModel, SolarCalculator, SolarPositionProvider
from solarcalc.cli import fmt_hours, main
from solarcalc.core.time import parse_ymd


def test_list_models():
    assert solarcalc.list_models() == ["day-of-year", "noaa"]

def test_make_model_returns_providers():
    noaa = solarcalc.make_model("noaa", 25.4687224, -80.37, "2023-06-24", utc_offset_hours=-5)
    fit = solarcalc.make_model("day-of-year", 25.4687224, -80.37, "2023-06-24")
    assert isinstance(noaa, SolarCalculator)
    assert isinstance(fit, DayOfYearModel)
    assert isinstance(noaa, SolarPositionProvider)
    assert isinstance(fit, SolarPositionProvider)

def test_models_roughly_agree_at_mid_latitude():
    noaa = solarcalc.make_model("noaa", 25.4687224, -80.37, "2023-06-24", utc_offset_hours=-5)
    fit = solarcalc.make_model("day-of-year", 25.4687224, -80.37, "2023-06-24", time_zone="ignored")
    assert noaa.solar_declination() == pytest.approx(fit.solar_declination(), abs=0.5)
    assert noaa.equation_of_time() == pytest.approx(fit.equation_of_time(), abs=1.0)
    assert noaa.day_length() == pytest.approx(fit.day_length(), abs=0.1)
    assert noaa.sunrise_and_sunset().sunrise == pytest.approx(fit.sunrise_and_sunset().sunrise, abs=0.25)

def test_unknown_model():
    with pytest.raises(KeyError):
        solarcalc.make_model("spa", 0, 0, "2023-01-01")

def test_register_model():
    def factory(latitude, longitude, date, **kwargs):
        # always mid-winter, whatever date is asked for
        return DayOfYearModel(latitude, longitude, parse_ymd("2023-01-01"))

    solarcalc.register_model("test-fit", factory)
    try:
        with pytest.raises(KeyError):
            solarcalc.register_model("test-fit", factory)
        m = solarcalc.make_model("test-fit", 10, 20, "2023-06-24")
        assert m.latitude == 10
        assert m.day == 1
    finally:
        from solarcalc import api
        api._registry._factories.pop("test-fit", None)

def test_solar_report_matches_calculator():
    rep = solarcalc.solar_report(23.0975036, -82.4206579, 0.5, "2023-01-01", utc_offset_hours=-4)
    assert rep["julian_day"] == pytest.approx(2459946.1666666665, rel=1e-15)
    assert rep["day_length"] == pytest.approx(10.743499619136012, abs=1e-8)

def test_day_of_year_report():
    rep = solarcalc.day_of_year_report(175, 25.4687224, -80.37)
    assert set(rep) >= {"equation_of_time", "declination", "solar_angle", "day_length", "sunrise", "sunset"}
    assert rep["sunset"] - rep["sunrise"] == pytest.approx(rep["day_length"])


# --- CLI ---

def test_fmt_hours():
    assert fmt_hours(8.5) == "08:30:00.00"
    assert fmt_hours(18.25) == "18:15:00.00"
    assert fmt_hours(-0.5) == "-00:30:00.00"
    assert fmt_hours(-17.25) == "-17:15:00.00"

def test_cli_calc(capsys):
    rc = main(["calc", "2023-01-01", "--lat", "23.0975036", "--lon", "-82.4206579", "--utc-offset", "-4"])
    assert rc == 0
    out = json.loads(capsys.readouterr().out)
    assert out["sunrise"] == pytest.approx(8.181706376531688, abs=1e-8)
    assert out["time_zone_offset"] == -4.0

def test_cli_calc_with_zone(capsys):
    rc = main(["calc", "2023-01-01", "--lat", "40.7", "--lon", "-74.0", "--tz", "America/New_York"])
    assert rc == 0
    assert json.loads(capsys.readouterr().out)["time_zone_offset"] == -5.0

def test_cli_reports_validation_errors(capsys):
    rc = main(["calc", "2023-13-01", "--lat", "0", "--lon", "0", "--utc-offset", "0"])
    assert rc == 2
    assert "invalid date" in capsys.readouterr().err

    rc = main(["calc", "2023-01-01", "--lat", "91", "--lon", "0", "--utc-offset", "0"])
    assert rc == 2
    assert "latitude" in capsys.readouterr().err

def test_cli_day(capsys):
    assert main(["day", "175", "--lat", "25.4687224", "--lon", "-80.37"]) == 0
    by_number = json.loads(capsys.readouterr().out)
    assert main(["day", "2023-06-24", "--lat", "25.4687224", "--lon", "-80.37"]) == 0
    by_date = json.loads(capsys.readouterr().out)
    assert by_number == by_date

def test_cli_day_rejects_non_numeric_day(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["day", "abc", "--lat", "0", "--lon", "0"])
    assert exc.value.code == 2
    assert "day number or YYYY-MM-DD" in capsys.readouterr().err

def test_cli_sun(capsys):
    assert main(["sun", "2023-06-24", "--lat", "25.4687224", "--lon", "-80.37", "--tz", "America/New_York"]) == 0
    out = capsys.readouterr().out
    assert "noaa" in out and "day-of-year" in out

def test_cli_sun_polar(capsys):
    assert main(["sun", "2023-06-21", "--lat", "85", "--lon", "0", "--tz", "UTC"]) == 0
    assert "polar day" in capsys.readouterr().out

def test_cli_tz(capsys):
    assert main(["tz", "America/New_York", "--date", "2023-07-01"]) == 0
    assert "-14400 s" in capsys.readouterr().out
    assert main(["tz", "Nowhere/Special"]) == 2
