class SolarCalcError(Exception):
    """Base error."""

class InvalidRangeError(SolarCalcError, ValueError):
    """Raised when a numeric input falls outside its allowed domain."""

class InvalidDateFormatError(SolarCalcError, ValueError):
    """Raised when a date string does not look like YYYY-MM-DD."""

class InvalidDateError(InvalidDateFormatError):
    """Raised when a YYYY-MM-DD string is not a real calendar date (e.g. month 13)."""

class UnresolvedTimezoneError(SolarCalcError, LookupError):
    """Raised when a timezone id is not known to the timezone database."""

class PolarDayOrNightError(SolarCalcError, ArithmeticError):
    """
    Raised when the sun does not cross the horizon on the given day.

    kind is "polar_day" (sun never sets) or "polar_night" (sun never rises).
    """

    def __init__(self, kind: str, cos_hour_angle: float):
        self.kind = kind
        self.cos_hour_angle = cos_hour_angle
        super().__init__(f"{kind.replace('_', ' ')}: cos(H0) = {cos_hour_angle:.6f} is outside [-1, 1]")

    @property
    def sun_never_sets(self) -> bool:
        return self.kind == "polar_day"
