"""
ET0 method selection.

Chooses the richest estimator the available data supports. Stages are tried
in a fixed order; a stage either returns an ET0Result, returns None when its
inputs are missing, or raises on a numeric failure. The chain moves on while
there is no result yet or the current result is graded 'muito_baixa'.
"""

import logging
import math
from datetime import datetime
from typing import Callable, Dict, List, Optional, Tuple

from ..core import constants
from ..models import AggregatedParameters, StationInfo, ET0Result
from .formulas import ET0Formulas
from .radiation import RadiationModel


Stage = Callable[[AggregatedParameters, StationInfo, int], Optional[ET0Result]]

DEFAULT_MARKER = "(padrão)"


def assess_data_quality(parameters: Dict[str, Optional[str]]) -> str:
    """
    Grade a result by how many input parameters it actually used.

    Args:
        parameters: Parameters consumed by the estimator

    Returns:
        'alta' for 4 or more, 'media' for 2-3, 'baixa' for 1, 'muito_baixa' for none
    """
    count = sum(1 for value in parameters.values() if value is not None)
    if count >= 4:
        return constants.QUALITY_HIGH
    if count >= 2:
        return constants.QUALITY_MEDIUM
    if count >= 1:
        return constants.QUALITY_LOW
    return constants.QUALITY_VERY_LOW


def round_et0(value: float) -> float:
    """Round to the output precision and clamp at zero."""
    return max(0.0, round(value, constants.ET0_DECIMALS))


class ET0MethodSelector:
    """
    Ordered fallback chain over the ET0 estimators.

    Stages, in priority order:
        1. Penman-Monteith FAO-56  (Tmax, Tmin, Rs)         -> alta
        2. Hargreaves-Samani       (Tmax, Tmin, latitude)   -> media
        3. Priestley-Taylor        (Tmax, Tmin, Rs)         -> media
        4. Temperature estimate    (always succeeds)        -> baixa / muito_baixa
    """

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        stages: Optional[List[Tuple[str, Stage]]] = None
    ):
        """
        Initialize the selector.

        Args:
            logger: Logger instance
            stages: (name, stage) pairs replacing the default chain
        """
        self.logger = logger or logging.getLogger(__name__)
        if stages is None:
            stages = [
                (constants.METHOD_PENMAN_MONTEITH, self._penman_monteith_stage),
                (constants.METHOD_HARGREAVES_SAMANI, self._hargreaves_samani_stage),
                (constants.METHOD_PRIESTLEY_TAYLOR, self._priestley_taylor_stage),
                (constants.METHOD_TEMPERATURE, self._temperature_stage),
            ]
        self.stages = stages

    def select_best_method(
        self,
        params: AggregatedParameters,
        station: StationInfo,
        day_of_year: Optional[int] = None,
        when: Optional[datetime] = None
    ) -> ET0Result:
        """
        Estimate ET0 with the best method the data allows.

        Args:
            params: Aggregated meteorological parameters
            station: Station metadata
            day_of_year: Explicit day of year; otherwise taken from the station
                         override or from `when` in station-local time
            when: Moment of the calculation (defaults to now)

        Returns:
            ET0Result with value, method, quality and consumed parameters
        """
        if day_of_year is None:
            day_of_year = station.resolve_day_of_year(when)

        self.logger.debug(
            f"Selecting ET0 method for station {station.station_id}, day {day_of_year}, "
            f"available: {', '.join(params.available()) or 'none'}"
        )

        result: Optional[ET0Result] = None
        for name, stage in self.stages:
            if result is not None and result.quality != constants.QUALITY_VERY_LOW:
                break

            try:
                candidate = stage(params, station, day_of_year)
            except (ArithmeticError, ValueError) as e:
                self.logger.warning(f"ET0 method {name} failed: {e}")
                continue

            if candidate is None:
                self.logger.debug(f"ET0 method {name} skipped: missing data")
                continue

            result = candidate

        if result is None:
            raise RuntimeError("No ET0 method produced a result")

        self.logger.info(
            f"ET0 {result.value:.2f} mm/day via {result.method} (quality {result.quality})"
        )
        return result

    # =========================================================================
    # Stages
    # =========================================================================

    def _penman_monteith_stage(
        self,
        params: AggregatedParameters,
        station: StationInfo,
        day_of_year: int
    ) -> Optional[ET0Result]:
        if not params.has("temperatura_maxima", "temperatura_minima", "radiacao_solar"):
            return None

        rs = RadiationModel.normalize_solar_radiation(params.radiacao_solar)
        rh_pair = params.has("umidade_relativa_max", "umidade_relativa_min")

        value = ET0Formulas.penman_monteith_fao56(
            t_max=params.temperatura_maxima,
            t_min=params.temperatura_minima,
            rs=rs,
            latitude=station.latitude,
            altitude=station.altitude,
            day_of_year=day_of_year,
            rh_mean=None if rh_pair else params.umidade_relativa_med,
            rh_max=params.umidade_relativa_max if rh_pair else None,
            rh_min=params.umidade_relativa_min if rh_pair else None,
            wind_speed=params.velocidade_vento_2m,
            pressure=params.pressao_atmosferica
        )

        used = {
            "temperatura_maxima": f"{params.temperatura_maxima:.1f}",
            "temperatura_minima": f"{params.temperatura_minima:.1f}",
        }
        if rh_pair:
            used["umidade_relativa_max"] = f"{params.umidade_relativa_max:.0f}"
            used["umidade_relativa_min"] = f"{params.umidade_relativa_min:.0f}"
        elif params.umidade_relativa_med is not None:
            used["umidade_relativa"] = f"{params.umidade_relativa_med:.0f}"
        else:
            used["umidade_relativa"] = (
                f"{constants.DEFAULT_RELATIVE_HUMIDITY:.0f} {DEFAULT_MARKER}"
            )
        used["radiacao_solar"] = f"{rs:.2f}"
        if params.velocidade_vento_2m is not None:
            used["velocidade_vento"] = f"{params.velocidade_vento_2m:.1f}"
        else:
            used["velocidade_vento"] = f"{constants.DEFAULT_WIND_SPEED:.1f} {DEFAULT_MARKER}"

        return ET0Result(
            value=round_et0(value),
            method=constants.METHOD_PENMAN_MONTEITH,
            quality=constants.QUALITY_HIGH,
            parameters=used
        )

    def _hargreaves_samani_stage(
        self,
        params: AggregatedParameters,
        station: StationInfo,
        day_of_year: int
    ) -> Optional[ET0Result]:
        if not params.has("temperatura_maxima", "temperatura_minima"):
            return None
        if station.latitude is None:
            return None

        value = ET0Formulas.hargreaves_samani(
            t_max=params.temperatura_maxima,
            t_min=params.temperatura_minima,
            latitude=station.latitude,
            day_of_year=day_of_year
        )

        return ET0Result(
            value=round_et0(value),
            method=constants.METHOD_HARGREAVES_SAMANI,
            quality=constants.QUALITY_MEDIUM,
            parameters={
                "temperatura_maxima": f"{params.temperatura_maxima:.1f}",
                "temperatura_minima": f"{params.temperatura_minima:.1f}",
                "latitude": f"{station.latitude:.2f}",
            }
        )

    def _priestley_taylor_stage(
        self,
        params: AggregatedParameters,
        station: StationInfo,
        day_of_year: int
    ) -> Optional[ET0Result]:
        if not params.has("temperatura_maxima", "temperatura_minima", "radiacao_solar"):
            return None

        t_mean = (params.temperatura_maxima + params.temperatura_minima) / 2
        rs = RadiationModel.normalize_solar_radiation(params.radiacao_solar)
        rn = ET0Formulas.approximate_net_radiation(rs)

        value = ET0Formulas.priestley_taylor(t_mean, rn)

        return ET0Result(
            value=round_et0(value),
            method=constants.METHOD_PRIESTLEY_TAYLOR,
            quality=constants.QUALITY_MEDIUM,
            parameters={
                "temperatura_media": f"{t_mean:.1f}",
                "radiacao_solar": f"{rs:.2f}",
            }
        )

    def _temperature_stage(
        self,
        params: AggregatedParameters,
        station: StationInfo,
        day_of_year: int
    ) -> ET0Result:
        t_mean = ET0Formulas.mean_temperature(
            params.temperatura_maxima,
            params.temperatura_minima,
            params.temperatura_media
        )

        if t_mean is not None and not math.isfinite(t_mean):
            self.logger.warning(f"Ignoring non-finite mean temperature {t_mean}")
            t_mean = None

        if t_mean is None:
            used: Dict[str, str] = {}
            return ET0Result(
                value=round_et0(constants.DEFAULT_ET0),
                method=constants.METHOD_DEFAULT,
                quality=assess_data_quality(used),
                parameters=used,
                note="Sem dados de temperatura; valor típico diário para a região "
                     f"{station.region}"
            )

        used = {"temperatura_estimada": f"{t_mean:.1f}"}
        return ET0Result(
            value=round_et0(ET0Formulas.temperature_estimate(t_mean)),
            method=constants.METHOD_TEMPERATURE,
            quality=assess_data_quality(used),
            parameters=used,
            note=f"Estimativa empírica por temperatura para a região {station.region}"
        )
