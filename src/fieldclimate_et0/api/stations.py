"""
User and station operations for the FieldClimate API.
"""

import logging
from datetime import datetime
from typing import List, Dict, Any

from ..core.date_utils import DateUtils


class StationsAPI:
    """User- and station-related API operations."""

    # Type hints for attributes provided by APIClient base class
    logger: logging.Logger

    def get(self, endpoint: str) -> Any:
        """Method provided by APIClient base class."""
        ...

    def get_user(self) -> Dict[str, Any]:
        """Get the authenticated user's account."""
        self.logger.debug("Fetching user info")
        result = self.get("/user")
        return result if isinstance(result, dict) else {}

    def get_stations(self) -> List[Dict[str, Any]]:
        """Get the stations visible to the user."""
        self.logger.info("Fetching user stations")
        result = self.get("/user/stations")
        if isinstance(result, list):
            return result
        return [result] if isinstance(result, dict) else []

    def get_station(self, station_id: str) -> Dict[str, Any]:
        """Get metadata for one station."""
        self.logger.info(f"Fetching station {station_id}")
        result = self.get(f"/station/{station_id}")
        return result if isinstance(result, dict) else {}

    def get_station_data(
        self,
        station_id: str,
        start: datetime,
        end: datetime
    ) -> Dict[str, Any]:
        """
        Get raw readings for a station between two moments.

        Args:
            station_id: Station identifier
            start: Window start (timezone-aware)
            end: Window end (timezone-aware)

        Returns:
            Payload with a 'data' list of readings
        """
        date_from = DateUtils.to_fieldclimate_format(start)
        date_to = DateUtils.to_fieldclimate_format(end)
        self.logger.info(f"Fetching data for station {station_id} from {date_from} to {date_to}")
        result = self.get(f"/data/{station_id}/data/{date_from}/{date_to}")
        return result if isinstance(result, dict) else {"data": result}
