"""
Business logic services for the FieldClimate ET0 proxy.

Services orchestrate API operations and provide higher-level functionality.
"""

from .cache import ResponseCache, CachedResponse
from .station_registry import StationRegistry
from .gateway import StationDataGateway
from .et0_service import ET0Service, seasonal_estimate
from .handler import ActionHandler

__all__ = [
    "ResponseCache",
    "CachedResponse",
    "StationRegistry",
    "StationDataGateway",
    "ET0Service",
    "seasonal_estimate",
    "ActionHandler",
]
