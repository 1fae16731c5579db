"""
SUNRISE Details Service

Aggregates sunrise, sunset, solar noon and moon phase for one day, either
through the sunrise_details() function or through a SunriseService bound to
a configured observer location.
"""

from datetime import datetime
from typing import Optional, Tuple

from sunrise.angles import Angle
from sunrise.config import SolverConfig, SunriseConfig
from sunrise.constants import (
    EVENT_SEARCH_MAX_DAYS,
    REFINEMENT_MAX_ITERATIONS,
    SOLAR_NOON_MAX_ITERATIONS,
)
from sunrise.events import solar_noon_time, sunrise_set_event
from sunrise.logging_config import get_logger, log_timing
from sunrise.models import DaylightType, ObserverLocation, SunriseDetails
from sunrise.moon import moon_phase

logger = get_logger(__name__)


def sunrise_details(
    date_time: datetime,
    longitude: Angle,
    latitude: Angle,
    max_search_days: int = EVENT_SEARCH_MAX_DAYS,
    max_iterations: int = REFINEMENT_MAX_ITERATIONS,
    noon_iterations: int = SOLAR_NOON_MAX_ITERATIONS,
) -> SunriseDetails:
    """
    Sun and moon summary for the UTC day containing date_time.

    Args:
        date_time: Any instant on the requested day; results use its zone
        longitude: Observer longitude (east positive)
        latitude: Observer latitude
        max_search_days: Maximum number of days searched on polar dates
        max_iterations: Maximum fixed-point passes for sunrise/sunset
        noon_iterations: Maximum fixed-point passes for solar noon

    Returns:
        SunriseDetails with event times in the zone of date_time

    Raises:
        EventNotFoundError: If a polar search exceeds max_search_days
    """
    limits = {"max_search_days": max_search_days, "max_iterations": max_iterations}
    sunrise_time, sunrise_type = sunrise_set_event(True, date_time, latitude, longitude, **limits)
    sunset_time, sunset_type = sunrise_set_event(False, date_time, latitude, longitude, **limits)

    return SunriseDetails(
        sunrise_type=sunrise_type,
        sunset_type=sunset_type,
        solar_noon_time=solar_noon_time(date_time, longitude, max_iterations=noon_iterations),
        sunrise_time=sunrise_time,
        sunset_time=sunset_time,
        moon_phase=moon_phase(date_time),
    )


class SunriseService:
    """
    Sunrise calculations for a fixed observer location.

    Wraps the solvers with the site's coordinates, timezone and solver
    limits, so callers only supply the date.
    """

    def __init__(
        self,
        location: Optional[ObserverLocation] = None,
        solver: Optional[SolverConfig] = None,
    ):
        """
        Initialize sunrise service.

        Args:
            location: Observer location (defaults to Greenwich)
            solver: Solver iteration limits (defaults to SolverConfig())
        """
        self.location = location or ObserverLocation.greenwich()
        self.solver = solver or SolverConfig()

    @classmethod
    def from_config(cls, config: SunriseConfig) -> "SunriseService":
        """Create a service for the configured site and solver limits."""
        return cls(location=config.site.to_location(), solver=config.solver)

    def _get_time(self, when: Optional[datetime] = None) -> datetime:
        """Resolve the request time in the site timezone."""
        zone = self.location.zone
        if when is None:
            return datetime.now(zone)
        if when.tzinfo is None:
            # Naive times are wall-clock times at the site
            return when.replace(tzinfo=zone)
        return when

    def get_details(self, when: Optional[datetime] = None) -> SunriseDetails:
        """Sunrise, sunset, solar noon and moon phase for the day of `when`."""
        when = self._get_time(when)
        with log_timing(logger, f"sunrise_details for {self.location.name}"):
            return sunrise_details(
                when,
                self.location.longitude_angle,
                self.location.latitude_angle,
                max_search_days=self.solver.max_search_days,
                max_iterations=self.solver.refinement_iterations,
                noon_iterations=self.solver.noon_iterations,
            )

    def get_sunrise(self, when: Optional[datetime] = None) -> datetime:
        return self.get_details(when).sunrise_time

    def get_sunset(self, when: Optional[datetime] = None) -> datetime:
        return self.get_details(when).sunset_time

    def get_solar_noon(self, when: Optional[datetime] = None) -> datetime:
        when = self._get_time(when)
        return solar_noon_time(
            when,
            self.location.longitude_angle,
            max_iterations=self.solver.noon_iterations,
        )

    def get_moon_phase(self, when: Optional[datetime] = None) -> float:
        """
        Get moon phase as a fraction of the lunar cycle.

        Returns:
            Float from 0.0 (new) through 0.5 (full) to just under 1.0
        """
        return moon_phase(self._get_time(when))

    def get_daylight_types(self, when: Optional[datetime] = None) -> Tuple[DaylightType, DaylightType]:
        """Daylight regime behind (sunrise, sunset) for the day of `when`."""
        details = self.get_details(when)
        return details.sunrise_type, details.sunset_type


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

_default_service: Optional[SunriseService] = None


def get_service(location: Optional[ObserverLocation] = None) -> SunriseService:
    """Get or create default sunrise service."""
    global _default_service
    if _default_service is None:
        _default_service = SunriseService(location)
    return _default_service
