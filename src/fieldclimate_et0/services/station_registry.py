"""
Station metadata lookup.

Loads per-station geophysical constants from a JSON file. Unknown station
identifiers resolve to the documented default (Barra, BA: lat -12.15,
lon -45.00, 400 m, UTC-3).
"""

import json
import logging
from pathlib import Path
from typing import Dict, Any, Optional, Union

from ..core import constants
from ..models import StationInfo


BUNDLED_STATIONS_FILE = Path(__file__).resolve().parent.parent / "data" / "stations.json"

_BUILTIN_DEFAULT: Dict[str, Any] = {
    "latitude": constants.DEFAULT_LATITUDE,
    "longitude": constants.DEFAULT_LONGITUDE,
    "altitude": constants.DEFAULT_ALTITUDE,
    "timezone": constants.DEFAULT_TIMEZONE,
    "region": constants.DEFAULT_REGION,
}


class StationRegistry:
    """Read-only mapping from station identifier to StationInfo."""

    def __init__(
        self,
        stations: Optional[Dict[str, Dict[str, Any]]] = None,
        default: Optional[Dict[str, Any]] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize station registry.

        Args:
            stations: Mapping of station id to metadata dict
            default: Metadata used for unknown station ids
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self._stations = {
            station_id: dict(data) for station_id, data in (stations or {}).items()
        }
        self._default = dict(_BUILTIN_DEFAULT)
        if default:
            self._default.update(default)

    @classmethod
    def from_file(
        cls,
        path: Optional[Union[str, Path]] = None,
        logger: Optional[logging.Logger] = None
    ) -> "StationRegistry":
        """
        Load the registry from a JSON file.

        Expected format:
        {
            "default": {"latitude": ..., "altitude": ...},
            "stations": {"<id>": {"latitude": ..., "longitude": ..., ...}}
        }

        Args:
            path: JSON file; the bundled station table when None

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file is not a JSON object
        """
        file_path = Path(path) if path else BUNDLED_STATIONS_FILE
        if not file_path.exists():
            raise FileNotFoundError(f"Station file not found: {file_path}")

        with open(file_path, "r", encoding="utf-8") as f:
            content = json.load(f)

        if not isinstance(content, dict):
            raise ValueError(f"Station file must contain a JSON object: {file_path}")

        registry = cls(
            stations=content.get("stations", {}),
            default=content.get("default"),
            logger=logger
        )
        registry.logger.debug(f"Loaded {len(registry)} stations from {file_path}")
        return registry

    def get(self, station_id: str) -> StationInfo:
        """
        Get metadata for a station.

        Args:
            station_id: Station identifier

        Returns:
            StationInfo for the station, or the default metadata tagged with station_id
        """
        data = self._stations.get(station_id)
        if data is None:
            self.logger.info(f"Station {station_id} not in registry, using default metadata")
            data = self._default
        return StationInfo.from_dict(station_id, data)

    def __contains__(self, station_id: object) -> bool:
        return station_id in self._stations

    def __len__(self) -> int:
        return len(self._stations)
