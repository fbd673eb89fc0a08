"""
solarcalc.calculator
--------------------
Stateful front-end to the NOAA chain.

A SolarCalculator owns one immutable SolarState. Setters validate first and
then swap in a replaced snapshot, so a rejected value never leaves the
calculator half-updated. Every accessor recomputes its chain from the current
snapshot; hold on to snapshot() if you need a stable view.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime, timedelta
from typing import Any, Dict, Optional, Union

from .core.angles import check_latitude as _check_latitude
from .core.angles import check_longitude as _check_longitude
from .core.errors import InvalidRangeError, PolarDayOrNightError
from .core.time import coerce_date, julian_century, julian_day
from .core.timezones import resolve_utc_offset_seconds
from .core.types import SolarState, SunTimes
from .engines import noaa

log = logging.getLogger(__name__)

MIN_UTC_OFFSET_HOURS = -12.0
MAX_UTC_OFFSET_HOURS = 14.0


# ============================================================
# Validation
# ============================================================

def _check_day_time(day_time: float) -> None:
    if not (0 <= day_time <= 1):
        raise InvalidRangeError(f"day_time must be between 0 and 1, got {day_time}")

def _check_utc_offset(hours: float) -> None:
    if not (MIN_UTC_OFFSET_HOURS <= hours <= MAX_UTC_OFFSET_HOURS):
        raise InvalidRangeError(f"UTC offset must be between -12 and 14 hours, got {hours}")

def validate_state(state: SolarState) -> None:
    _check_latitude(state.latitude)
    _check_longitude(state.longitude)
    _check_day_time(state.day_time)
    _check_utc_offset(state.utc_offset_hours)


def _local_instant(d: date, day_time: float) -> datetime:
    return datetime(d.year, d.month, d.day) + timedelta(days=day_time)

def _zone_offset_hours(zone_id: str, d: date, day_time: float) -> float:
    # resolve at the calculation's own wall-clock time so DST matches the target date
    return resolve_utc_offset_seconds(zone_id, _local_instant(d, day_time)) / 3600


# ============================================================
# Calculator
# ============================================================

class SolarCalculator:
    """
    NOAA solar position for one observer, date and clock time.

    Give exactly one of `time_zone` (an Olson id such as "America/New_York",
    resolved for the given date) or `utc_offset_hours`.

    `daylight_saving` adds one hour to the reported sunrise and sunset. It is
    meant for a directly supplied standard-time offset; a resolved time zone
    already carries DST in its offset.
    """

    def __init__(
        self,
        latitude: float,
        longitude: float,
        day_time: float,
        date: Union[str, date],
        *,
        time_zone: Optional[str] = None,
        utc_offset_hours: Optional[float] = None,
        daylight_saving: bool = False,
    ) -> None:
        if (time_zone is None) == (utc_offset_hours is None):
            raise TypeError("give exactly one of time_zone or utc_offset_hours")

        d = coerce_date(date)
        # range-check before the zone lookup so bad input fails without I/O
        _check_latitude(latitude)
        _check_longitude(longitude)
        _check_day_time(day_time)

        if time_zone is not None:
            utc_offset_hours = _zone_offset_hours(time_zone, d, day_time)

        state = SolarState(
            latitude=float(latitude),
            longitude=float(longitude),
            date=d,
            day_time=float(day_time),
            utc_offset_hours=float(utc_offset_hours),
            daylight_saving=bool(daylight_saving),
            time_zone=time_zone,
        )
        validate_state(state)
        self._state = state

    @classmethod
    def from_state(cls, state: SolarState) -> "SolarCalculator":
        validate_state(state)
        self = cls.__new__(cls)
        self._state = state
        return self

    def __repr__(self) -> str:
        s = self._state
        return (
            f"SolarCalculator(latitude={s.latitude}, longitude={s.longitude}, "
            f"date={s.date.isoformat()!r}, day_time={s.day_time}, "
            f"utc_offset_hours={s.utc_offset_hours}, daylight_saving={s.daylight_saving})"
        )

    def snapshot(self) -> SolarState:
        return self._state

    def _swap(self, **changes: Any) -> None:
        new = replace(self._state, **changes)
        validate_state(new)
        log.debug("SolarCalculator update %s", changes)
        self._state = new

    # ---------------- state ----------------

    @property
    def latitude(self) -> float:
        return self._state.latitude

    @property
    def longitude(self) -> float:
        return self._state.longitude

    @property
    def date(self) -> date:
        return self._state.date

    @property
    def day_time(self) -> float:
        return self._state.day_time

    @property
    def utc_offset_hours(self) -> float:
        return self._state.utc_offset_hours

    @property
    def time_zone(self) -> Optional[str]:
        return self._state.time_zone

    @property
    def daylight_saving(self) -> bool:
        return self._state.daylight_saving

    def set_latitude(self, lat: float) -> None:
        _check_latitude(lat)
        self._swap(latitude=float(lat))

    def set_longitude(self, lon: float) -> None:
        _check_longitude(lon)
        self._swap(longitude=float(lon))

    def set_date(self, d: Union[str, date]) -> None:
        """Changing the date re-resolves a zone-derived offset for the new date."""
        new_date = coerce_date(d)
        changes: Dict[str, Any] = {"date": new_date}
        if self._state.time_zone is not None:
            changes["utc_offset_hours"] = _zone_offset_hours(self._state.time_zone, new_date, self._state.day_time)
        self._swap(**changes)

    def set_day_time(self, day_time: float) -> None:
        _check_day_time(day_time)
        changes: Dict[str, Any] = {"day_time": float(day_time)}
        if self._state.time_zone is not None:
            changes["utc_offset_hours"] = _zone_offset_hours(self._state.time_zone, self._state.date, day_time)
        self._swap(**changes)

    def set_time_zone(self, zone_id: str) -> None:
        hours = _zone_offset_hours(zone_id, self._state.date, self._state.day_time)
        self._swap(utc_offset_hours=hours, time_zone=zone_id)

    def set_utc_offset_hours(self, hours: float) -> None:
        _check_utc_offset(hours)
        self._swap(utc_offset_hours=float(hours), time_zone=None)

    def set_daylight_saving(self, flag: bool) -> None:
        self._swap(daylight_saving=bool(flag))

    # ---------------- time ----------------

    def julian_day(self) -> float:
        s = self._state
        return julian_day(s.date, s.day_time, s.utc_offset_hours)

    def julian_century(self) -> float:
        return julian_century(self.julian_day())

    # ---------------- orbital elements ----------------

    def geom_mean_long_sun(self) -> float:
        return noaa.geom_mean_long_sun(self.julian_century())

    def geom_mean_anom_sun(self) -> float:
        return noaa.geom_mean_anom_sun(self.julian_century())

    def eccent_earth_orbit(self) -> float:
        return noaa.eccent_earth_orbit(self.julian_century())

    def equation_of_time(self) -> float:
        """Minutes."""
        jc = self.julian_century()
        return noaa.equation_of_time(
            noaa.geom_mean_long_sun(jc),
            noaa.geom_mean_anom_sun(jc),
            noaa.eccent_earth_orbit(jc),
        )

    def solar_noon(self) -> float:
        """Apparent noon as a fraction of the local clock day."""
        s = self._state
        return noaa.solar_noon(s.longitude, self.equation_of_time(), s.utc_offset_hours)

    def true_solar_time(self) -> float:
        """Minutes, in [0,1440)."""
        s = self._state
        return noaa.true_solar_time(s.day_time, self.equation_of_time(), s.longitude, s.utc_offset_hours)

    def sun_hour_angle(self) -> float:
        return noaa.sun_hour_angle(self.true_solar_time())

    # ---------------- position ----------------

    def sun_equation_of_center(self) -> float:
        jc = self.julian_century()
        return noaa.sun_equation_of_center(noaa.geom_mean_anom_sun(jc), jc)

    def sun_true_longitude(self) -> float:
        return noaa.sun_true_longitude(self.geom_mean_long_sun(), self.sun_equation_of_center())

    def sun_apparent_longitude(self) -> float:
        return noaa.sun_apparent_longitude(self.sun_true_longitude(), self.julian_century())

    def mean_obliq_ecliptic(self) -> float:
        return noaa.mean_obliquity_ecliptic(self.julian_century())

    def oblique_correction(self) -> float:
        return noaa.oblique_correction(self.mean_obliq_ecliptic(), self.julian_century())

    def solar_declination(self) -> float:
        return noaa.solar_declination(self.oblique_correction(), self.sun_apparent_longitude())

    # ---------------- horizon ----------------

    def hour_angle_sunrise(self) -> float:
        """Raises PolarDayOrNightError when there is no sunrise."""
        return noaa.hour_angle_sunrise(self._state.latitude, self.solar_declination())

    def solar_zenith_angle(self) -> float:
        return noaa.solar_zenith_angle(self._state.latitude, self.solar_declination(), self.sun_hour_angle())

    def solar_azimuth_angle(self) -> float:
        return noaa.solar_azimuth_angle(
            self._state.latitude,
            self.solar_declination(),
            self.solar_zenith_angle(),
            self.sun_hour_angle(),
        )

    def solar_incidence_angle(self) -> float:
        return noaa.solar_incidence_angle(self.solar_zenith_angle())

    def incidence_on_tilted_surface(self, surface_tilt: float, surface_azimuth: float) -> float:
        return noaa.incidence_on_tilted_surface(
            self._state.latitude,
            self.solar_declination(),
            self.sun_hour_angle(),
            surface_tilt,
            surface_azimuth,
        )

    # ---------------- sunrise / sunset ----------------

    def sunrise_and_sunset(self) -> SunTimes:
        """Clock hours; shifted +1 h when daylight_saving is set."""
        times = noaa.sunrise_and_sunset(self.solar_noon(), self.hour_angle_sunrise())
        if self._state.daylight_saving:
            times = SunTimes(sunrise=times.sunrise + 1, sunset=times.sunset + 1)
        return times

    def day_length(self) -> float:
        return self.sunrise_and_sunset().day_length

    def sunrise_time(self) -> float:
        return self.sunrise_and_sunset().sunrise

    def sunset_time(self) -> float:
        return self.sunrise_and_sunset().sunset

    # ---------------- report ----------------

    def to_dict(self, surface_tilt: float = 45.0, surface_azimuth: float = 10.0) -> Dict[str, Optional[float]]:
        """
        Flat JSON-ready report of every derived quantity.

        Sunrise-dependent fields are None on polar day/night.
        """
        try:
            h0: Optional[float] = self.hour_angle_sunrise()
            times: Optional[SunTimes] = self.sunrise_and_sunset()
        except PolarDayOrNightError as e:
            log.debug("No sunrise/sunset: %s", e)
            h0 = None
            times = None

        zenith = self.solar_zenith_angle()
        incidence = self.solar_incidence_angle()
        return {
            "equation_of_time": self.equation_of_time(),
            "declination": self.solar_declination(),
            "solar_angle": incidence,
            "solar_zenith": zenith,
            "day_length": times.day_length if times else None,
            "sunrise": times.sunrise if times else None,
            "sunset": times.sunset if times else None,
            "julian_day": self.julian_day(),
            "julian_century": self.julian_century(),
            "geom_mean_long_sun": self.geom_mean_long_sun(),
            "geom_mean_anom_sun": self.geom_mean_anom_sun(),
            "eccentric_earth_orbit": self.eccent_earth_orbit(),
            "solar_noon": self.solar_noon(),
            "sun_equation_of_center": self.sun_equation_of_center(),
            "sun_true_longitude": self.sun_true_longitude(),
            "sun_apparent_longitude": self.sun_apparent_longitude(),
            "mean_oblique_ecliptic": self.mean_obliq_ecliptic(),
            "oblique_correction": self.oblique_correction(),
            "sun_hour_angle": self.sun_hour_angle(),
            "hour_angle_sunrise": h0,
            "time_zone_offset": self._state.utc_offset_hours,
            "solar_zenith_angle": zenith,
            "true_solar_time": self.true_solar_time(),
            "solar_incidence_angle": incidence,
            "solar_azimuth_angle": self.solar_azimuth_angle(),
            "incidence_on_tilted_surface": self.incidence_on_tilted_surface(surface_tilt, surface_azimuth),
        }
