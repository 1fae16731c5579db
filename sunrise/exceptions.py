"""
SUNRISE Exceptions

Exception hierarchy for the sunrise package. Angle domain failures are not
exceptions: they surface as NaN angles and NaN minute values.
"""

__all__ = [
    "SunriseError",
    "ConfigurationError",
    "EventNotFoundError",
]


class SunriseError(Exception):
    """Base class for all sunrise errors."""


class ConfigurationError(SunriseError):
    """Configuration file missing, unreadable or invalid."""


class EventNotFoundError(SunriseError):
    """No sunrise or sunset found within the day-search limit.

    Raised by the refinement solver when stepping whole days away from a
    polar date never reaches a day on which the sun crosses the horizon.
    """

    def __init__(self, rise: bool, julian_date: float, days_searched: int):
        self.rise = rise
        self.julian_date = julian_date
        self.days_searched = days_searched
        event = "sunrise" if rise else "sunset"
        super().__init__(
            f"No {event} found within {days_searched} days of JD {julian_date}"
        )
