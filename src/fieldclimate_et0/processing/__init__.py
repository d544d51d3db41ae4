"""
Data processing module for the FieldClimate ET0 proxy.

Provides extraction of meteorological aggregates from station readings.
"""

from .extractor import ParameterExtractor

__all__ = [
    "ParameterExtractor",
]
