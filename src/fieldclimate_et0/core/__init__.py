"""
Core utilities for the FieldClimate ET0 proxy.

Provides configuration management, logging, constants and shared exceptions.
"""

from .config import Config
from .logger import setup_logger, LoggerContext
from . import constants
from .date_utils import DateUtils
from .exceptions import NumericDomainError, FieldClimateAPIError, ActionError

__all__ = [
    "Config",
    "setup_logger",
    "LoggerContext",
    "constants",
    "DateUtils",
    "NumericDomainError",
    "FieldClimateAPIError",
    "ActionError",
]
