"""
SUNRISE Data Models

Result and location types shared by the solvers and the service facade.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Optional
from zoneinfo import ZoneInfo

from sunrise.angles import Angle
from sunrise.constants import (
    DEFAULT_SITE_LATITUDE,
    DEFAULT_SITE_LONGITUDE,
    DEFAULT_SITE_NAME,
    DEFAULT_SITE_TIMEZONE,
)


class DaylightType(Enum):
    """Daylight regime behind a sunrise or sunset result."""
    NORMAL = "normal"                # Event occurs on the requested day
    POLAR_NIGHT = "polar_night"      # Sun stays below the horizon all day
    MIDNIGHT_SUN = "midnight_sun"    # Sun stays above the horizon all day


@dataclass(frozen=True)
class SunriseDetails:
    """Sun and moon summary for one day at one location.

    For polar days the sunrise and sunset times are the nearest real events
    found by searching forwards or backwards, so they may fall weeks or
    months away from the requested date.
    """
    sunrise_type: DaylightType
    sunset_type: DaylightType
    solar_noon_time: datetime
    sunrise_time: datetime
    sunset_time: datetime
    moon_phase: float          # 0.0 new moon, 0.5 full moon

    @property
    def is_polar(self) -> bool:
        """True when either event was found away from the requested day."""
        return (
            self.sunrise_type is not DaylightType.NORMAL
            or self.sunset_type is not DaylightType.NORMAL
        )

    @property
    def day_length(self) -> Optional[timedelta]:
        """Time between sunrise and sunset, or None on a polar day."""
        if self.is_polar:
            return None
        return self.sunset_time - self.sunrise_time


@dataclass
class ObserverLocation:
    """Observer's location on Earth."""
    latitude: float       # Degrees (negative = South)
    longitude: float      # Degrees (negative = West)
    timezone: str = DEFAULT_SITE_TIMEZONE
    name: str = "Observer"

    @classmethod
    def greenwich(cls) -> "ObserverLocation":
        """Default location at the Royal Observatory, Greenwich."""
        return cls(
            latitude=DEFAULT_SITE_LATITUDE,
            longitude=DEFAULT_SITE_LONGITUDE,
            timezone=DEFAULT_SITE_TIMEZONE,
            name=DEFAULT_SITE_NAME,
        )

    @property
    def latitude_angle(self) -> Angle:
        return Angle(self.latitude)

    @property
    def longitude_angle(self) -> Angle:
        return Angle(self.longitude)

    @property
    def zone(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)
