"""
Client action dispatcher.

Maps a request body {"action": ..., "stationId": ..., ...} to a service call
and returns an (HTTP status, JSON payload) pair. Failures never propagate to
the caller and never carry API keys.
"""

import logging
import math
from typing import Dict, Any, Optional, Tuple

from ..api import FieldClimateAPI
from ..api.helpers import sanitize_error
from ..core import Config, ActionError
from .cache import ResponseCache
from .et0_service import ET0Service
from .gateway import StationDataGateway
from .station_registry import StationRegistry


MISSING_KEYS_MESSAGE = "API keys not configured"


class ActionHandler:
    """Dispatch client actions to the gateway and the ET0 service."""

    ACTIONS = (
        "testConnection",
        "getUserInfo",
        "getStations",
        "getStationInfo",
        "getStationLastData",
        "calculateET0",
        "calculateHistoricalET0",
    )

    def __init__(
        self,
        config: Config,
        gateway: Optional[StationDataGateway] = None,
        et0_service: Optional[ET0Service] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize action handler.

        Args:
            config: Application configuration
            gateway: Prebuilt gateway (built from config on first use when None)
            et0_service: Prebuilt ET0 service (built from config on first use when None)
            logger: Logger instance
        """
        self.config = config
        self.logger = logger or logging.getLogger(__name__)
        self.gateway = gateway
        self.et0_service = et0_service
        self.cache = ResponseCache(ttl_seconds=config.cache_ttl)

    def _ensure_components(self) -> None:
        if self.gateway is None:
            api_client = FieldClimateAPI(
                public_key=self.config.public_key,
                private_key=self.config.private_key,
                base_url=self.config.api_base_url,
                timeout=self.config.api_timeout,
                max_retries=self.config.api_max_retries,
                verify_ssl=self.config.api_verify_ssl,
                logger=self.logger
            )
            self.gateway = StationDataGateway(api_client, cache=self.cache, logger=self.logger)

        if self.et0_service is None:
            registry = StationRegistry.from_file(self.config.stations_file, logger=self.logger)
            self.et0_service = ET0Service(self.gateway, registry=registry, logger=self.logger)

    def handle(self, body: Optional[Dict[str, Any]]) -> Tuple[int, Any]:
        """
        Execute one client action.

        Args:
            body: Request body with 'action' and action-specific fields

        Returns:
            (status, payload); 200 with the action result, or 500 with
            {"success": False, "message": ...}
        """
        if not self.config.has_credentials:
            self.logger.error("FieldClimate keys are missing from configuration")
            return 500, {"success": False, "message": MISSING_KEYS_MESSAGE}

        body = body if isinstance(body, dict) else {}
        action = body.get("action")

        try:
            self._ensure_components()
            result = self._dispatch(action, body)
        except Exception as e:
            message = sanitize_error(str(e), self.config.public_key, self.config.private_key)
            self.logger.error(f"Action {action!r} failed: {message}")
            return 500, {"success": False, "message": message}

        return 200, result

    def _dispatch(self, action: Optional[str], body: Dict[str, Any]) -> Any:
        if action not in self.ACTIONS:
            raise ActionError(f"Ação não suportada: {action}")

        self.logger.info(f"Handling action {action}")

        if action == "testConnection":
            return self.gateway.test_connection()
        if action == "getUserInfo":
            return self.gateway.get_user_info()
        if action == "getStations":
            return self.gateway.get_stations()

        station_id = body.get("stationId")
        if not station_id:
            raise ActionError(f"stationId é obrigatório para a ação {action}")

        if action == "getStationInfo":
            return self.gateway.get_station_info(station_id)
        if action == "getStationLastData":
            hours_back = self._number(body, "hoursBack", self.config.hours_back)
            return self.gateway.get_station_last_data(station_id, hours_back)
        if action == "calculateET0":
            hours_back = self._number(body, "hoursBack", self.config.hours_back)
            return self.et0_service.calculate_et0(station_id, body.get("date"), hours_back)

        days_back = self._number(body, "daysBack", 7)
        if days_back != int(days_back):
            raise ActionError("daysBack deve ser um número inteiro de dias")
        days_back = int(days_back)
        return self.et0_service.calculate_historical_for_station(station_id, days_back)

    @staticmethod
    def _number(body: Dict[str, Any], key: str, default: float) -> float:
        value = body.get(key)
        if value is None:
            return default
        if isinstance(value, bool):
            raise ActionError(f"{key} deve ser numérico")
        try:
            number = float(value)
        except (TypeError, ValueError):
            raise ActionError(f"{key} deve ser numérico")
        if not math.isfinite(number):
            raise ActionError(f"{key} deve ser finito")
        if number <= 0:
            raise ActionError(f"{key} deve ser positivo")
        return number
