"""
Station metadata models.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Dict, Any

from ..core import constants
from ..core.date_utils import DateUtils


@dataclass(frozen=True)
class StationInfo:
    """Geophysical metadata for a weather station."""

    station_id: str
    latitude: Optional[float] = constants.DEFAULT_LATITUDE  # degrees
    longitude: Optional[float] = constants.DEFAULT_LONGITUDE  # degrees
    altitude: float = constants.DEFAULT_ALTITUDE  # meters
    timezone: float = constants.DEFAULT_TIMEZONE  # hours from UTC
    day_of_year: Optional[int] = None  # overrides the calendar when set
    region: str = constants.DEFAULT_REGION

    def resolve_day_of_year(self, when: Optional[datetime] = None) -> int:
        """
        Get the day of year used for solar geometry.

        Args:
            when: Moment of the calculation (defaults to now)

        Returns:
            The override if configured, otherwise the station-local ordinal day
        """
        if self.day_of_year is not None:
            return self.day_of_year
        return DateUtils.day_of_year(when, self.timezone)

    @classmethod
    def from_dict(cls, station_id: str, data: Dict[str, Any]) -> "StationInfo":
        return cls(
            station_id=station_id,
            latitude=data.get("latitude"),
            longitude=data.get("longitude"),
            altitude=data.get("altitude", constants.DEFAULT_ALTITUDE),
            timezone=data.get("timezone", constants.DEFAULT_TIMEZONE),
            day_of_year=data.get("day_of_year"),
            region=data.get("region", constants.DEFAULT_REGION),
        )
