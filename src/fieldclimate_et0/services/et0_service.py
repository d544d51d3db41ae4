"""
ET0 calculation service.

Orchestrates fetch -> extraction -> method selection for a station and wraps
the result in the client-facing envelope. When anything in that chain fails
the seasonal estimate is returned instead of an error.
"""

import logging
from datetime import datetime
from typing import Dict, Any, List, Optional, TYPE_CHECKING

from ..algorithms import ET0MethodSelector
from ..core import constants, DateUtils, LoggerContext
from ..models import ET0Result, StationInfo
from ..processing import ParameterExtractor
from .station_registry import StationRegistry

if TYPE_CHECKING:
    from .gateway import StationDataGateway


ET0_UNIT = "mm/dia"


def seasonal_estimate(month: int, region: str = constants.DEFAULT_REGION) -> ET0Result:
    """
    Calendar-based ET0 for when no calculation is possible.

    Args:
        month: Calendar month (1-12)
        region: Region label recorded in the parameters

    Returns:
        4.5 mm/day for October-March, 3.0 for April-June, 2.5 for July-September
    """
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")

    if month >= 10 or month <= 3:
        value = constants.SEASONAL_ET0_WET
    elif month <= 6:
        value = constants.SEASONAL_ET0_DRY_EARLY
    else:
        value = constants.SEASONAL_ET0_DRY_LATE

    return ET0Result(
        value=value,
        method=constants.METHOD_SEASONAL,
        quality=constants.QUALITY_VERY_LOW,
        parameters={
            "mes_do_ano": str(month),
            "regiao": region,
            "fonte": "media_sazonal",
        },
        note=f"Valor estimado baseado na média sazonal da região {region}"
    )


class ET0Service:
    """Compute ET0 for stations and assemble client responses."""

    def __init__(
        self,
        gateway: "StationDataGateway",
        registry: Optional[StationRegistry] = None,
        selector: Optional[ET0MethodSelector] = None,
        extractor: Optional[ParameterExtractor] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize ET0 service.

        Args:
            gateway: Source of station readings
            registry: Station metadata lookup (bundled table when None)
            selector: ET0 method selector
            extractor: Parameter extractor
            logger: Logger instance
        """
        self.gateway = gateway
        self.logger = logger or logging.getLogger(__name__)
        self.registry = registry or StationRegistry.from_file(logger=self.logger)
        self.selector = selector or ET0MethodSelector(logger=self.logger)
        self.extractor = extractor or ParameterExtractor(logger=self.logger)

    def calculate_et0(
        self,
        station_id: str,
        date: Optional[str] = None,
        hours_back: float = 24,
        reference_time: Optional[datetime] = None
    ) -> Dict[str, Any]:
        """
        Calculate today's ET0 for a station from its latest readings.

        Args:
            station_id: Station identifier
            date: Date label for the response (defaults to today, UTC)
            hours_back: Window of readings to aggregate
            reference_time: Moment of the calculation (defaults to now)

        Returns:
            {"success": True, "data": {...}}, falling back to the seasonal
            estimate when the calculation fails
        """
        station = self.registry.get(station_id)
        label = date or DateUtils.iso_date(reference_time)

        try:
            with LoggerContext(self.logger, f"ET0 calculation for {station_id}"):
                raw = self.gateway.get_station_last_data(
                    station_id, hours_back, reference_time=reference_time
                )
                params = self.extractor.extract(raw)
                result = self.selector.select_best_method(params, station, when=reference_time)
        except Exception as e:
            self.logger.error(f"ET0 calculation failed for {station_id}, using seasonal estimate: {e}")
            month = DateUtils.to_station_time(reference_time, station.timezone).month
            result = seasonal_estimate(month, station.region)

        return {"success": True, "data": self.build_envelope(result, label)}

    @staticmethod
    def build_envelope(result: ET0Result, date: str) -> Dict[str, Any]:
        return {
            "value": result.value,
            "unit": ET0_UNIT,
            "date": date,
            "calculated": result.source == "calculated",
            "method": result.method,
            "parameters": dict(result.parameters),
            "data_quality": result.quality,
            "note": result.note,
            "source": result.source,
        }

    def calculate_historical_et0(self, data: Any, station: StationInfo) -> List[Dict[str, Any]]:
        """
        Calculate one ET0 value per calendar day in a batch of readings.

        Days without any temperature reading are skipped.

        Args:
            data: FieldClimate payload or list of dated readings
            station: Station metadata

        Returns:
            List of {date, et0, method, quality, parameters}, ordered by date
        """
        series = []
        for day, readings in self.extractor.group_by_day(data).items():
            params = self.extractor.extract(readings)
            if params.temperatura_maxima is None:
                continue

            try:
                day_of_year = station.day_of_year or datetime.strptime(day, "%Y-%m-%d").timetuple().tm_yday
            except ValueError:
                self.logger.warning(f"Skipping readings with unparseable date {day!r}")
                continue

            result = self.selector.select_best_method(params, station, day_of_year=day_of_year)

            series.append({
                "date": day,
                "et0": result.value,
                "method": result.method,
                "quality": result.quality,
                "parameters": {
                    "Tmax": f"{params.temperatura_maxima:.1f}",
                    "Tmin": f"{params.temperatura_minima:.1f}",
                    "RHmean": "N/A" if params.umidade_relativa_med is None
                    else f"{params.umidade_relativa_med:.0f}",
                    "Rs": "N/A" if params.radiacao_solar is None
                    else f"{params.radiacao_solar:.0f}",
                },
            })

        self.logger.info(f"Calculated historical ET0 for {len(series)} days")
        return series

    def calculate_historical_for_station(
        self,
        station_id: str,
        days_back: int = 7,
        reference_time: Optional[datetime] = None
    ) -> Dict[str, Any]:
        """Fetch the last days_back days of readings and compute daily ET0."""
        station = self.registry.get(station_id)
        raw = self.gateway.get_station_last_data(
            station_id, days_back * 24, reference_time=reference_time
        )
        return {
            "success": True,
            "unit": ET0_UNIT,
            "data": self.calculate_historical_et0(raw, station),
        }
