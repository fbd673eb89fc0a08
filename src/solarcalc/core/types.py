from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import NewType, Optional

# Unit tags. Public angle outputs are always Degrees; Radians only live inside formulas.
Degrees = NewType("Degrees", float)
Radians = NewType("Radians", float)

@dataclass(frozen=True)
class SolarState:
    """Immutable snapshot of everything the NOAA chain depends on."""
    latitude: float           # degrees, positive North
    longitude: float          # degrees, positive East
    date: date
    day_time: float           # fraction of the day, 0 = midnight, 0.5 = noon
    utc_offset_hours: float
    daylight_saving: bool = False
    time_zone: Optional[str] = None  # zone id the offset was resolved from, if any

@dataclass(frozen=True)
class SunTimes:
    """Sunrise and sunset in hours of local clock time."""
    sunrise: float
    sunset: float

    @property
    def day_length(self) -> float:
        return self.sunset - self.sunrise
