"""
Meteorological parameter extraction module.

Reduces a series of station readings to the aggregates used for ET0.
"""

import logging
import statistics
from collections import OrderedDict
from collections.abc import Iterable
from typing import Dict, Any, List, Optional

from ..models import MeteorologicalReading, AggregatedParameters


class ParameterExtractor:
    """Calculate per-period aggregates from station readings."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize parameter extractor.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def extract(self, data: Any) -> AggregatedParameters:
        """
        Aggregate station readings.

        Args:
            data: FieldClimate payload ({"data": [...]}), a list of reading
                  dicts, or a list of MeteorologicalReading objects.

        Returns:
            AggregatedParameters; fields without readings stay None.
            Malformed input yields an all-absent result instead of raising.
        """
        readings = self._to_readings(data)
        if readings is None:
            self.logger.warning("Malformed station data, returning empty parameters")
            return AggregatedParameters()

        temps = [r.air_temperature for r in readings if r.air_temperature is not None]
        humids = [r.relative_humidity for r in readings if r.relative_humidity is not None]
        humids_max = [r.relative_humidity_max for r in readings if r.relative_humidity_max is not None]
        humids_min = [r.relative_humidity_min for r in readings if r.relative_humidity_min is not None]
        solar = [r.solar_radiation for r in readings if r.solar_radiation is not None]
        winds = [r.wind_speed for r in readings if r.wind_speed is not None]

        params = AggregatedParameters()

        if temps:
            params.temperatura_media = statistics.mean(temps)
            params.temperatura_maxima = max(temps)
            params.temperatura_minima = min(temps)
            self.logger.debug(
                f"Temperature: mean={params.temperatura_media:.1f}, "
                f"min={params.temperatura_minima:.1f}, max={params.temperatura_maxima:.1f}"
            )
        else:
            self.logger.debug("No valid temperature values")

        if humids:
            params.umidade_relativa_med = statistics.mean(humids)
            self.logger.debug(f"Humidity mean: {params.umidade_relativa_med:.1f}")

        # Daily extremes only when the station reports them explicitly
        if humids_max and humids_min:
            params.umidade_relativa_max = max(humids_max)
            params.umidade_relativa_min = min(humids_min)

        if solar:
            params.radiacao_solar = statistics.mean(solar)
            self.logger.debug(f"Solar radiation mean: {params.radiacao_solar:.2f}")

        if winds:
            params.velocidade_vento_2m = statistics.mean(winds)
            self.logger.debug(f"Wind speed mean: {params.velocidade_vento_2m:.2f}")

        return params

    def group_by_day(self, data: Any) -> "OrderedDict[str, List[MeteorologicalReading]]":
        """
        Bucket readings by calendar date.

        The date is the part of the reading's 'date' before 'T'
        (or before the space in 'YYYY-MM-DD HH:MM:SS'). Undated readings are skipped.

        Returns:
            Ordered mapping of date -> readings, sorted by date
        """
        readings = self._to_readings(data)
        if readings is None:
            self.logger.warning("Malformed historical data, nothing to group")
            return OrderedDict()

        days: Dict[str, List[MeteorologicalReading]] = {}
        for reading in readings:
            if not reading.date:
                continue
            day = reading.date.split("T")[0].split(" ")[0]
            days.setdefault(day, []).append(reading)

        return OrderedDict(sorted(days.items()))

    @staticmethod
    def _to_readings(data: Any) -> Optional[List[MeteorologicalReading]]:
        if isinstance(data, dict):
            data = data.get("data")
        if data is None or isinstance(data, (str, bytes, dict)):
            return None
        if not isinstance(data, Iterable):
            return None

        readings = []
        for entry in data:
            if isinstance(entry, MeteorologicalReading):
                readings.append(entry)
            elif isinstance(entry, dict):
                readings.append(MeteorologicalReading.from_dict(entry))
        return readings
