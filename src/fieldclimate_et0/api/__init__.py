"""
API layer for FieldClimate.

Provides the HMAC-signed client and the user/station operations.
"""

from .client import APIClient, DEFAULT_BASE_URL
from .stations import StationsAPI
from . import helpers


class FieldClimateAPI(APIClient, StationsAPI):
    """
    Unified API client for FieldClimate.

    Combines request signing with user and station operations.
    """


__all__ = [
    "APIClient",
    "StationsAPI",
    "FieldClimateAPI",
    "DEFAULT_BASE_URL",
    "helpers",
]
