"""
Station data gateway.

Wraps the FieldClimate API for client-facing actions: caches station
metadata and strips sensitive keys before anything leaves the server.
"""

import logging
from datetime import datetime
from typing import Dict, Any, List, Optional, TYPE_CHECKING

from ..api.helpers import strip_sensitive
from ..core import DateUtils
from .cache import ResponseCache

if TYPE_CHECKING:
    from ..api import FieldClimateAPI


class StationDataGateway:
    """Fetch user, station and reading data from FieldClimate."""

    def __init__(
        self,
        api_client: "FieldClimateAPI",
        cache: Optional[ResponseCache] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize gateway.

        Args:
            api_client: Signed API client
            cache: Response cache for station metadata (no caching when None)
            logger: Logger instance
        """
        self.api_client = api_client
        self.cache = cache or ResponseCache(ttl_seconds=0)
        self.logger = logger or logging.getLogger(__name__)
        self.date_utils = DateUtils(logger)

    def test_connection(self) -> Dict[str, Any]:
        """Check that the keys can list stations."""
        try:
            stations = self.api_client.get_stations()
        except Exception as e:
            self.logger.warning(f"Connection test failed: {e}")
            return {
                "success": False,
                "message": "Falha na conexão. Verifique suas credenciais."
            }
        return {
            "success": True,
            "message": "Conexão estabelecida com sucesso",
            "stationsCount": len(stations)
        }

    def get_user_info(self) -> Dict[str, Any]:
        """Summarize the authenticated user."""
        try:
            user = self.api_client.get_user()
        except Exception as e:
            self.logger.warning(f"User info request failed: {e}")
            return {
                "success": False,
                "message": "Não foi possível verificar informações do usuário"
            }
        return {
            "success": True,
            "stations_count": user.get("stations_count", 0),
            "message": "Usuário autenticado com sucesso"
        }

    def get_stations(self) -> List[Dict[str, Any]]:
        """List the user's stations without sensitive keys."""
        stations = self.cache.get_or_fetch(("stations",), self.api_client.get_stations)
        return strip_sensitive(stations)

    def get_station_info(self, station_id: str) -> Dict[str, Any]:
        """Get one station's metadata without sensitive keys."""
        info = self.cache.get_or_fetch(
            ("station", station_id),
            lambda: self.api_client.get_station(station_id)
        )
        return strip_sensitive(info)

    def get_station_last_data(
        self,
        station_id: str,
        hours_back: float = 24,
        reference_time: Optional[datetime] = None
    ) -> Dict[str, Any]:
        """
        Fetch the most recent readings of a station.

        Readings are never cached.

        Args:
            station_id: Station identifier
            hours_back: Size of the window ending now
            reference_time: End of the window (defaults to now)

        Returns:
            Payload with a 'data' list of readings
        """
        start, end = self.date_utils.get_lookback_range(hours_back, reference_time)
        return self.api_client.get_station_data(station_id, start, end)
