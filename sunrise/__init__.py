"""
SUNRISE - sunrise, sunset, solar noon and moon phase calculations.

Usage:
    from datetime import datetime
    from zoneinfo import ZoneInfo
    from sunrise import Angle, sunrise_details

    when = datetime(2023, 1, 1, 10, 15, 30, tzinfo=ZoneInfo("Europe/Paris"))
    details = sunrise_details(when, Angle(2.3522), Angle(48.8566))
    print(details.sunrise_time, details.sunset_time)
"""

from sunrise.angles import Angle
from sunrise.config import SunriseConfig, load_config
from sunrise.constants import SUNRISE_VERSION
from sunrise.details import SunriseService, get_service, sunrise_details
from sunrise.events import solar_noon_time, sunrise_set_time
from sunrise.exceptions import ConfigurationError, EventNotFoundError, SunriseError
from sunrise.julian import julian_date
from sunrise.logging_config import get_logger, setup_logging
from sunrise.models import DaylightType, ObserverLocation, SunriseDetails
from sunrise.moon import moon_phase

__version__ = SUNRISE_VERSION

__all__ = [
    "Angle",
    "ConfigurationError",
    "DaylightType",
    "EventNotFoundError",
    "ObserverLocation",
    "SunriseConfig",
    "SunriseDetails",
    "SunriseError",
    "SunriseService",
    "get_logger",
    "get_service",
    "julian_date",
    "load_config",
    "moon_phase",
    "setup_logging",
    "solar_noon_time",
    "sunrise_details",
    "sunrise_set_time",
]
