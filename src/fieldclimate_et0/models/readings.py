"""
Meteorological reading models.

Contains DTOs for raw station readings and their per-period aggregates.
"""

import math
from dataclasses import dataclass, fields
from typing import Optional, Dict, Any, List


def _as_number(value: Any) -> Optional[float]:
    # bool is an int subclass; a flag is never a measurement
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not math.isfinite(value):
        return None
    return float(value)


@dataclass
class MeteorologicalReading:
    """Single timestamped record from a station."""

    date: Optional[str] = None
    air_temperature: Optional[float] = None  # °C
    relative_humidity: Optional[float] = None  # %
    relative_humidity_max: Optional[float] = None  # %
    relative_humidity_min: Optional[float] = None  # %
    solar_radiation: Optional[float] = None  # W/m² or MJ/m²/day, see RadiationModel
    wind_speed: Optional[float] = None  # m/s

    @classmethod
    def from_dict(cls, entry: Dict[str, Any]) -> "MeteorologicalReading":
        """Build a reading from a FieldClimate data entry, ignoring non-numeric values."""
        date = entry.get("date")
        return cls(
            date=date if isinstance(date, str) else None,
            air_temperature=_as_number(entry.get("air_temperature")),
            relative_humidity=_as_number(entry.get("relative_humidity")),
            relative_humidity_max=_as_number(entry.get("relative_humidity_max")),
            relative_humidity_min=_as_number(entry.get("relative_humidity_min")),
            solar_radiation=_as_number(entry.get("solar_radiation")),
            wind_speed=_as_number(entry.get("wind_speed")),
        )


@dataclass
class AggregatedParameters:
    """
    Per-period aggregates consumed by the ET0 method selector.

    None means no reading carried the quantity; zero is a valid value.
    """

    temperatura_media: Optional[float] = None  # °C
    temperatura_maxima: Optional[float] = None  # °C
    temperatura_minima: Optional[float] = None  # °C
    umidade_relativa_med: Optional[float] = None  # %
    umidade_relativa_max: Optional[float] = None  # %
    umidade_relativa_min: Optional[float] = None  # %
    radiacao_solar: Optional[float] = None  # raw units, normalised by the selector
    velocidade_vento_2m: Optional[float] = None  # m/s
    pressao_atmosferica: Optional[float] = None  # kPa

    def available(self) -> List[str]:
        """Names of the fields that carry a value."""
        return [f.name for f in fields(self) if getattr(self, f.name) is not None]

    def has(self, *names: str) -> bool:
        return all(getattr(self, name) is not None for name in names)

    def to_dict(self) -> Dict[str, Optional[float]]:
        return {f.name: getattr(self, f.name) for f in fields(self)}
