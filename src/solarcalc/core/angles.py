from __future__ import annotations

import math

from .errors import InvalidRangeError
from .types import Degrees, Radians


def to_radians(deg: float) -> Radians:
    return Radians(deg * (math.pi / 180.0))

def to_degrees(rad: float) -> Degrees:
    return Degrees(rad * (180.0 / math.pi))

def wrap_deg(x_deg: float) -> float:
    """Wrap degrees to [0,360)."""
    return x_deg % 360.0

def wrap_minutes(x_min: float) -> float:
    """Wrap minutes of a day to [0,1440)."""
    return x_min % 1440.0

def clamp_unit(x: float) -> float:
    """Clamp to [-1, 1] so rounding noise cannot push acos/asin out of domain."""
    if x > 1.0:
        return 1.0
    if x < -1.0:
        return -1.0
    return x

def standard_meridian(longitude: float) -> int:
    """
    Nearest multiple of 15 degrees (the time-zone meridian for a longitude).

    An exact midpoint (e.g. 7.5 or -7.5) rounds half up, toward +inf.
    """
    return int(math.floor(longitude / 15.0 + 0.5)) * 15


def check_latitude(lat: float) -> None:
    if not (-90 <= lat <= 90):
        raise InvalidRangeError(f"latitude must be between -90 and 90 degrees, got {lat}")

def check_longitude(lon: float) -> None:
    if not (-180 <= lon <= 180):
        raise InvalidRangeError(f"longitude must be between -180 and 180 degrees, got {lon}")
