from __future__ import annotations
from typing import Protocol, runtime_checkable

from ..core.types import SunTimes


@runtime_checkable
class SolarPositionProvider(Protocol):
    """
    What both solar models answer for one location and date.

    Angles are degrees, equation of time is minutes, times are clock hours.
    """
    def equation_of_time(self) -> float: ...
    def solar_declination(self) -> float: ...
    def day_length(self) -> float: ...
    def sunrise_and_sunset(self) -> SunTimes: ...
