"""
solarcalc.engines.day_of_year
-----------------------------
Single-harmonic approximations keyed by day of year (1..366).

Independent of the Julian-date chain in engines.noaa: no obliquity, no
eccentricity, no time zone beyond the 15-degree standard meridian. Good to a
few minutes for sunrise/sunset at mid latitudes.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from datetime import date

from ..core.angles import check_latitude as _check_latitude
from ..core.angles import check_longitude as _check_longitude
from ..core.angles import clamp_unit, standard_meridian, to_degrees, to_radians
from ..core.errors import InvalidRangeError
from ..core.time import day_of_year
from ..core.types import SunTimes

# Depression of the sun's centre at sunrise/sunset used by this model
SOLAR_DEPRESSION_DEG = -1.15

# Fixed 2-hour-from-noon hour angle of the altitude snapshot
SNAPSHOT_HOUR_ANGLE_DEG = 30.0


def _check_day(day: int) -> None:
    if isinstance(day, bool) or not isinstance(day, numbers.Integral) or not (1 <= day <= 366):
        raise InvalidRangeError(f"day must be an integer between 1 and 366, got {day!r}")


def equation_of_time(day: int) -> float:
    """Equation of time in minutes."""
    _check_day(day)
    p = to_radians((day - 81) * (360.0 / 364))
    return 9.87 * math.sin(2 * p) - 7.53 * math.cos(p) - 1.5 * math.sin(p)

def solar_declination(day: int) -> float:
    """Cooper's declination approximation, degrees."""
    _check_day(day)
    p = (360 / 365.0) * (284 + day)
    return 23.45 * math.sin(to_radians(p))

def solar_noon(day: int, longitude: float) -> float:
    """Clock hour of apparent noon in standard time."""
    _check_longitude(longitude)
    meridian = standard_meridian(longitude)
    return 12.0 + ((meridian - longitude) * 4 + equation_of_time(day)) / 60.0

def solar_altitude_angle(day: int, latitude: float) -> float:
    """
    Solar altitude at a fixed 30 deg hour angle (2 h from apparent noon).

    This is a snapshot, not a general altitude function.
    """
    _check_latitude(latitude)
    delta = to_radians(solar_declination(day))
    h = to_radians(SNAPSHOT_HOUR_ANGLE_DEG)
    phi = to_radians(latitude)
    sin_alt = math.sin(phi) * math.sin(delta) + math.cos(phi) * math.cos(delta) * math.cos(h)
    return to_degrees(math.asin(clamp_unit(sin_alt)))

def solar_zenith_angle(day: int, latitude: float) -> float:
    """Zenith of the altitude snapshot, from sin(altitude) = cos(zenith)."""
    sin_alt = math.sin(to_radians(solar_altitude_angle(day, latitude)))
    return to_degrees(math.acos(clamp_unit(sin_alt)))

def solar_azimuth_angle(day: int, latitude: float, hour_angle: float) -> float:
    """
    Azimuth from the south meridian in degrees, in [-90, 90].

    Uses the altitude snapshot, so it is only consistent at |hour_angle| = 30.
    """
    delta = to_radians(solar_declination(day))
    altitude = to_radians(solar_altitude_angle(day, latitude))
    h = to_radians(hour_angle)
    cos_alt = math.cos(altitude)
    if cos_alt == 0.0:
        return 0.0
    return to_degrees(math.asin(clamp_unit(math.cos(delta) * math.sin(h) / cos_alt)))

def day_length(day: int, latitude: float) -> float:
    """Hours between sunrise and sunset; 0 for polar night, 24 for polar day."""
    _check_latitude(latitude)
    delta = to_radians(solar_declination(day))
    phi = to_radians(latitude)
    h0 = to_radians(SOLAR_DEPRESSION_DEG)

    cos_h = (math.sin(h0) - math.sin(phi) * math.sin(delta)) / (math.cos(phi) * math.cos(delta))
    hour_angle = math.acos(clamp_unit(cos_h))

    return (2.0 * to_degrees(hour_angle)) / 15.0

def sunrise_and_sunset(day: int, latitude: float, longitude: float, daylight_saving: bool = False) -> SunTimes:
    """
    Sunrise and sunset in clock hours of the standard-meridian time zone.

    Accuracy is about +-5 min. daylight_saving adds one hour to both.
    """
    length = day_length(day, latitude)
    noon = solar_noon(day, longitude)

    shift = 1.0 if daylight_saving else 0.0
    return SunTimes(
        sunrise=noon - length / 2.0 + shift,
        sunset=noon + length / 2.0 + shift,
    )

def sunrise_time(day: int, latitude: float, longitude: float, daylight_saving: bool = False) -> float:
    return sunrise_and_sunset(day, latitude, longitude, daylight_saving).sunrise

def sunset_time(day: int, latitude: float, longitude: float, daylight_saving: bool = False) -> float:
    return sunrise_and_sunset(day, latitude, longitude, daylight_saving).sunset


@dataclass(frozen=True)
class DayOfYearModel:
    """SolarPositionProvider over the day-of-year approximations."""
    latitude: float
    longitude: float
    date: date
    daylight_saving: bool = False

    def __post_init__(self) -> None:
        _check_latitude(self.latitude)
        _check_longitude(self.longitude)

    @property
    def day(self) -> int:
        return day_of_year(self.date)

    def equation_of_time(self) -> float:
        return equation_of_time(self.day)

    def solar_declination(self) -> float:
        return solar_declination(self.day)

    def day_length(self) -> float:
        return day_length(self.day, self.latitude)

    def sunrise_and_sunset(self) -> SunTimes:
        return sunrise_and_sunset(self.day, self.latitude, self.longitude, self.daylight_saving)
