"""
solarcalc.engines.noaa
----------------------
The NOAA solar calculator chain as pure float functions.

Inputs and outputs are in degrees unless the name says otherwise. Time
arguments are Julian centuries `jc` from J2000.0. Nothing here knows about
dates or time zones; SolarCalculator threads a SolarState through the chain.
"""

from __future__ import annotations

import math

from ..core.angles import clamp_unit, to_degrees, to_radians, wrap_deg, wrap_minutes
from ..core.errors import PolarDayOrNightError
from ..core.types import SunTimes

# Sun's altitude at apparent sunrise: 50' below the horizon (disc radius + refraction)
SUNRISE_ZENITH_DEG = 90.833

# y = tan^2(eps/2), fixed at its J2000 value
EOT_Y = 0.043031509


# ============================================================
# Orbital elements
# ============================================================

def geom_mean_long_sun(jc: float) -> float:
    """Geometric mean longitude of the Sun, wrapped to [0,360)."""
    return wrap_deg(280.46646 + jc * (36000.76983 + jc * 0.0003032))

def geom_mean_anom_sun(jc: float) -> float:
    """Geometric mean anomaly of the Sun (not range-reduced)."""
    return 357.52911 + jc * (35999.05029 - 0.0001537 * jc)

def eccent_earth_orbit(jc: float) -> float:
    return 0.016708634 - jc * (0.000042037 + 0.0000001267 * jc)


# ============================================================
# Equation of time, solar noon, hour angle
# ============================================================

def equation_of_time(geom_mean_long_deg: float, geom_mean_anom_deg: float, eccent: float) -> float:
    """Apparent minus mean solar time, in minutes."""
    y = EOT_Y
    l2 = 2 * to_radians(geom_mean_long_deg)
    m = to_radians(geom_mean_anom_deg)

    long_term = y * math.sin(l2)
    anom_term = 2 * eccent * math.sin(m)
    mixed_term = 4 * eccent * y * math.sin(m) * math.cos(l2)
    y_sq_term = 0.5 * y ** 2 * math.sin(4 * to_radians(geom_mean_long_deg))
    e_sq_term = 1.25 * eccent ** 2 * math.sin(2 * m)

    return 4 * to_degrees(long_term - anom_term + mixed_term - y_sq_term - e_sq_term)

def solar_noon(longitude: float, eot_minutes: float, utc_offset_hours: float) -> float:
    """Local clock time of apparent noon, as a fraction of the day."""
    return (720 - 4 * longitude - eot_minutes + utc_offset_hours * 60) / 1440

def true_solar_time(day_time: float, eot_minutes: float, longitude: float, utc_offset_hours: float) -> float:
    """True solar time in minutes, wrapped to [0,1440)."""
    return wrap_minutes(day_time * 1440 + eot_minutes + 4 * longitude - 60 * utc_offset_hours)

def sun_hour_angle(true_solar_time_min: float) -> float:
    """Hour angle in [-180,180): negative before apparent noon, positive after."""
    return true_solar_time_min / 4 - 180


# ============================================================
# Ecliptic and equatorial position
# ============================================================

def _omega_deg(jc: float) -> float:
    # longitude of the Moon's ascending node, leading nutation term
    return 125.04 - 1934.136 * jc

def sun_equation_of_center(geom_mean_anom_deg: float, jc: float) -> float:
    m = geom_mean_anom_deg
    term1 = math.sin(to_radians(m)) * (1.914602 - jc * (0.004817 + 0.000014 * jc))
    term2 = math.sin(to_radians(2 * m)) * (0.019993 - 0.000101 * jc)
    term3 = math.sin(to_radians(3 * m)) * 0.000289
    return term1 + term2 + term3

def sun_true_longitude(geom_mean_long_deg: float, equation_of_center_deg: float) -> float:
    return geom_mean_long_deg + equation_of_center_deg

def sun_apparent_longitude(true_longitude_deg: float, jc: float) -> float:
    """True longitude corrected for aberration and nutation."""
    return true_longitude_deg - 0.00569 - 0.00478 * math.sin(to_radians(_omega_deg(jc)))

def mean_obliquity_ecliptic(jc: float) -> float:
    arcsec = 21.448 - jc * (46.815 + jc * (0.00059 - jc * 0.001813))
    return 23.0 + (26.0 + arcsec / 60.0) / 60.0

def oblique_correction(mean_obliquity_deg: float, jc: float) -> float:
    return mean_obliquity_deg + 0.00256 * math.cos(to_radians(_omega_deg(jc)))

def solar_declination(oblique_correction_deg: float, apparent_longitude_deg: float) -> float:
    eps = to_radians(oblique_correction_deg)
    lam = to_radians(apparent_longitude_deg)
    return to_degrees(math.asin(math.sin(eps) * math.sin(lam)))


# ============================================================
# Horizon geometry
# ============================================================

def hour_angle_sunrise(latitude: float, declination: float) -> float:
    """
    Hour angle of apparent sunrise (degrees, positive).

    Raises PolarDayOrNightError when the sun stays above (polar day) or
    below (polar night) the sunrise altitude all day.
    """
    phi = to_radians(latitude)
    delta = to_radians(declination)

    cos_h0 = math.cos(to_radians(SUNRISE_ZENITH_DEG)) / (math.cos(phi) * math.cos(delta)) \
        - math.tan(phi) * math.tan(delta)

    if cos_h0 < -1.0:
        raise PolarDayOrNightError("polar_day", cos_h0)
    if cos_h0 > 1.0:
        raise PolarDayOrNightError("polar_night", cos_h0)
    return to_degrees(math.acos(cos_h0))

def solar_zenith_angle(latitude: float, declination: float, hour_angle: float) -> float:
    phi = to_radians(latitude)
    delta = to_radians(declination)
    h = to_radians(hour_angle)

    cos_z = math.sin(phi) * math.sin(delta) + math.cos(phi) * math.cos(delta) * math.cos(h)
    return to_degrees(math.acos(clamp_unit(cos_z)))

def solar_azimuth_angle(latitude: float, declination: float, zenith: float, hour_angle: float) -> float:
    """
    Azimuth clockwise from North, in [0,360).

    The hour-angle sign picks the morning (east) or afternoon (west) branch;
    hour_angle == 0 falls on the morning branch.
    """
    phi = to_radians(latitude)
    delta = to_radians(declination)
    z = to_radians(zenith)

    num = math.sin(phi) * math.cos(z) - math.sin(delta)
    den = math.cos(phi) * math.sin(z)
    # sun exactly overhead or observer on a pole: azimuth undefined, take the meridian
    raw = 0.0 if den == 0.0 else to_degrees(math.acos(clamp_unit(num / den)))

    if hour_angle > 0:
        return wrap_deg(raw + 180)
    return wrap_deg(540 - raw)

def solar_incidence_angle(zenith: float) -> float:
    """Elevation of the sun above the horizontal plane."""
    return 90 - zenith

def incidence_on_tilted_surface(
    latitude: float,
    declination: float,
    hour_angle: float,
    surface_tilt: float,
    surface_azimuth: float,
) -> float:
    """Angle between the sun's rays and the normal of a tilted plane (degrees)."""
    phi = to_radians(latitude)
    delta = to_radians(declination)
    h = to_radians(hour_angle)
    beta = to_radians(surface_tilt)
    gamma = to_radians(surface_azimuth)

    seasonal = math.sin(phi) * math.sin(delta) * math.cos(beta)
    azimuth_term = math.cos(phi) * math.sin(delta) * math.cos(gamma) * math.sin(beta)
    hour_term = math.cos(phi) * math.cos(delta) * math.cos(h) * math.cos(beta)
    hour_azimuth = math.sin(phi) * math.cos(delta) * math.cos(h) * math.sin(beta) * math.cos(gamma)
    decl_azimuth = math.cos(delta) * math.sin(h) * math.sin(beta) * math.sin(gamma)

    cos_theta = seasonal - azimuth_term + hour_term + hour_azimuth + decl_azimuth
    return to_degrees(math.acos(clamp_unit(cos_theta)))


# ============================================================
# Sunrise / sunset
# ============================================================

def sunrise_and_sunset(solar_noon_fraction: float, hour_angle_sunrise_deg: float) -> SunTimes:
    """Clock hours of sunrise and sunset around apparent noon (15 deg per hour)."""
    sunrise = (solar_noon_fraction * 360 - hour_angle_sunrise_deg) / 15
    sunset = (solar_noon_fraction * 360 + hour_angle_sunrise_deg) / 15
    return SunTimes(sunrise=sunrise, sunset=sunset)
