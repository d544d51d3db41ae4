"""
Data models for the FieldClimate ET0 proxy.

Contains DTOs for station readings, station metadata and ET0 results.
"""

from .readings import MeteorologicalReading, AggregatedParameters
from .station import StationInfo
from .et0 import ET0Result

__all__ = [
    "MeteorologicalReading",
    "AggregatedParameters",
    "StationInfo",
    "ET0Result",
]
