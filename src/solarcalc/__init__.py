"""solarcalc public API.

Keep this surface small: users should mostly interact with names re-exported here.
"""

from .api import (
    calculator,
    solar_report,
    day_of_year_report,
    list_models,
    make_model,
    register_model,
)
from .calculator import SolarCalculator
from .core.errors import (
    SolarCalcError,
    InvalidRangeError,
    InvalidDateFormatError,
    InvalidDateError,
    UnresolvedTimezoneError,
    PolarDayOrNightError,
)
from .core.timezones import resolve_utc_offset_seconds
from .core.types import SolarState, SunTimes
from .engines.day_of_year import DayOfYearModel
from .engines.interfaces import SolarPositionProvider

__all__ = [
    "calculator",
    "solar_report",
    "day_of_year_report",
    "list_models",
    "make_model",
    "register_model",
    "SolarCalculator",
    "DayOfYearModel",
    "SolarPositionProvider",
    "SolarState",
    "SunTimes",
    "resolve_utc_offset_seconds",
    "SolarCalcError",
    "InvalidRangeError",
    "InvalidDateFormatError",
    "InvalidDateError",
    "UnresolvedTimezoneError",
    "PolarDayOrNightError",
]
