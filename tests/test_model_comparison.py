# tests/test_model_comparison.py

import pytest

np = pytest.importorskip("numpy")

from solarcalc.diagnostics import model_comparison as mc


def test_build_series_shapes_and_agreement():
    s = mc.build_series(np, 2023, 25.4687224, -80.37, -5.0)
    assert s.days.shape == (365,)
    assert s.days[0] == 1 and s.days[-1] == 365
    assert np.all(np.isfinite(s.len_noaa))
    assert np.max(np.abs(s.decl_noaa - s.decl_doy)) < 2.5
    assert np.max(np.abs(s.eot_noaa - s.eot_doy)) < 2.0
    assert np.max(np.abs(s.len_noaa - s.len_doy)) < 0.2

def test_polar_days_become_nan():
    s = mc.build_series(np, 2024, 80.0, 15.0, 1.0)
    assert s.days.shape == (366,)
    assert np.isnan(s.len_noaa).any()
    assert np.isfinite(s.len_doy).all()

def test_summarize():
    a = np.array([1.0, 2.0, np.nan])
    b = np.array([0.0, 0.0, 0.0])
    line = mc.summarize(np, "x", a, b, "min")
    assert "max |diff| =    2.000 min" in line
    assert "no comparable days" in mc.summarize(np, "x", np.array([np.nan]), np.array([0.0]), "h")

def test_main_prints_summary(capsys):
    assert mc.main(["--year", "2023", "--lat", "0", "--lon", "0"]) == 0
    out = capsys.readouterr().out
    assert "utc_offset=+0 h" in out
    assert "Day length" in out
