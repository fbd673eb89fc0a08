from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional, Union

from .calculator import SolarCalculator
from .core.engine import ModelFactory, ModelRegistry
from .core.time import coerce_date
from .engines import day_of_year as doy
from .engines.interfaces import SolarPositionProvider


def _make_noaa(
    latitude: float,
    longitude: float,
    date: Union[str, date],
    *,
    day_time: float = 0.5,
    time_zone: Optional[str] = None,
    utc_offset_hours: Optional[float] = None,
    daylight_saving: bool = False,
) -> SolarPositionProvider:
    return SolarCalculator(
        latitude, longitude, day_time, date,
        time_zone=time_zone,
        utc_offset_hours=utc_offset_hours,
        daylight_saving=daylight_saving,
    )

def _make_day_of_year(
    latitude: float,
    longitude: float,
    date: Union[str, date],
    *,
    daylight_saving: bool = False,
    **_ignored: Any,
) -> SolarPositionProvider:
    # clock time and zone do not enter the day-of-year fits
    return doy.DayOfYearModel(latitude, longitude, coerce_date(date), daylight_saving)


_registry = ModelRegistry({"noaa": _make_noaa, "day-of-year": _make_day_of_year})

def list_models() -> List[str]:
    return _registry.list()

def register_model(name: str, factory: ModelFactory, *, overwrite: bool = False) -> None:
    _registry.register(name, factory, overwrite=overwrite)

def make_model(name: str, latitude: float, longitude: float, date: Union[str, date], **kwargs: Any) -> SolarPositionProvider:
    """Build a named solar model ("noaa" or "day-of-year") for one location and date."""
    return _registry.get(name)(latitude, longitude, date, **kwargs)


def calculator(
    latitude: float,
    longitude: float,
    day_time: float,
    date: Union[str, date],
    *,
    time_zone: Optional[str] = None,
    utc_offset_hours: Optional[float] = None,
    daylight_saving: bool = False,
) -> SolarCalculator:
    return SolarCalculator(
        latitude, longitude, day_time, date,
        time_zone=time_zone,
        utc_offset_hours=utc_offset_hours,
        daylight_saving=daylight_saving,
    )

def solar_report(
    latitude: float,
    longitude: float,
    day_time: float,
    date: Union[str, date],
    *,
    time_zone: Optional[str] = None,
    utc_offset_hours: Optional[float] = None,
    daylight_saving: bool = False,
    surface_tilt: float = 45.0,
    surface_azimuth: float = 10.0,
) -> Dict[str, Optional[float]]:
    sc = calculator(
        latitude, longitude, day_time, date,
        time_zone=time_zone,
        utc_offset_hours=utc_offset_hours,
        daylight_saving=daylight_saving,
    )
    return sc.to_dict(surface_tilt=surface_tilt, surface_azimuth=surface_azimuth)

def day_of_year_report(day: int, latitude: float, longitude: float, daylight_saving: bool = False) -> Dict[str, float]:
    """Day-of-year model summary for one day."""
    times = doy.sunrise_and_sunset(day, latitude, longitude, daylight_saving)
    return {
        "equation_of_time": doy.equation_of_time(day),
        "declination": doy.solar_declination(day),
        "solar_angle": doy.solar_altitude_angle(day, latitude),
        "solar_zenith": doy.solar_zenith_angle(day, latitude),
        "solar_noon": doy.solar_noon(day, longitude),
        "day_length": doy.day_length(day, latitude),
        "sunrise": times.sunrise,
        "sunset": times.sunset,
    }
