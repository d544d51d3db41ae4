"""
Reference evapotranspiration (ET0) formulas.

Implements the estimators used by the method selector, from the full FAO-56
Penman-Monteith combination equation down to a temperature-only estimate.
Every estimator returns mm/day clamped to be non-negative.

References:
    Allen et al. (1998). FAO Irrigation and Drainage Paper 56.
    Hargreaves, G.H., Samani, Z.A. (1985). Reference crop evapotranspiration
    from temperature. Applied Engineering in Agriculture 1(2).
    Priestley, C.H.B., Taylor, R.J. (1972). On the assessment of surface heat
    flux and evaporation using large-scale parameters. Monthly Weather Review 100.
"""

import math
from dataclasses import dataclass
from typing import Optional

from ..core import constants
from ..core.exceptions import NumericDomainError
from .radiation import RadiationModel, require_finite


@dataclass
class PenmanMonteithComponents:
    """Intermediate values of a Penman-Monteith evaluation."""

    et0: float  # mm/day
    t_mean: float  # °C
    es: float  # Mean saturation vapor pressure (kPa)
    ea: float  # Actual vapor pressure (kPa)
    vpd: float  # Vapor pressure deficit (kPa)
    delta: float  # Slope of vapor pressure curve (kPa/°C)
    pressure: float  # kPa
    gamma: float  # Psychrometric constant (kPa/°C)
    rn: float  # Net radiation (MJ m⁻² day⁻¹)
    u2: float  # Wind speed at 2 m (m/s)


class ET0Formulas:
    """Collection of daily ET0 estimators."""

    # =========================================================================
    # SECTION 1: Vapor Pressure
    # =========================================================================

    @staticmethod
    def saturation_vapor_pressure(temperature: float) -> float:
        """
        Saturation vapor pressure at a temperature (Tetens, FAO-56 eq. 11).

        Args:
            temperature: Temperature (°C)

        Returns:
            Saturation vapor pressure (kPa)
        """
        return constants.TETENS_A * math.exp(
            (constants.TETENS_B * temperature) / (temperature + constants.TETENS_C)
        )

    @staticmethod
    def slope_vapor_pressure_curve(t_mean: float) -> float:
        """
        Slope of the saturation vapor pressure curve (FAO-56 eq. 13).

        Returns:
            Δ (kPa/°C)
        """
        es_tmean = ET0Formulas.saturation_vapor_pressure(t_mean)
        return (constants.SLOPE_COEF * es_tmean) / ((t_mean + constants.TETENS_C) ** 2)

    @staticmethod
    def slope_from_saturation(es: float, t_mean: float) -> float:
        """Δ evaluated with a given saturation pressure, e.g. the Tmax/Tmin mean es."""
        return (constants.SLOPE_COEF * es) / ((t_mean + constants.TETENS_C) ** 2)

    @staticmethod
    def actual_vapor_pressure(
        es_tmax: float,
        es_tmin: float,
        rh_mean: Optional[float] = None,
        rh_max: Optional[float] = None,
        rh_min: Optional[float] = None
    ) -> float:
        """
        Actual vapor pressure from relative humidity.

        Uses the RHmax/RHmin pair (FAO-56 eq. 17) when both are present,
        otherwise RHmean (eq. 19), otherwise an assumed 70 % RH.

        Returns:
            ea (kPa)
        """
        es = (es_tmax + es_tmin) / 2
        if rh_max is not None and rh_min is not None:
            return (es_tmin * rh_max / 100 + es_tmax * rh_min / 100) / 2
        if rh_mean is not None:
            return es * rh_mean / 100
        return es * constants.DEFAULT_RELATIVE_HUMIDITY / 100

    @staticmethod
    def psychrometric_constant(pressure: float) -> float:
        """γ = 0.665e-3 · P (kPa/°C)."""
        return constants.PSYCHROMETRIC_COEF * pressure

    # =========================================================================
    # SECTION 2: Penman-Monteith FAO-56
    # =========================================================================

    @staticmethod
    def penman_monteith_fao56(
        t_max: float,
        t_min: float,
        rs: float,
        latitude: float,
        altitude: float,
        day_of_year: int,
        rh_mean: Optional[float] = None,
        rh_max: Optional[float] = None,
        rh_min: Optional[float] = None,
        wind_speed: Optional[float] = None,
        pressure: Optional[float] = None
    ) -> float:
        """
        Daily reference ET0 with the FAO-56 Penman-Monteith equation.

        Args:
            t_max: Maximum temperature (°C)
            t_min: Minimum temperature (°C)
            rs: Solar radiation, already in MJ m⁻² day⁻¹
            latitude: Latitude (degrees)
            altitude: Altitude (meters)
            day_of_year: Julian day of the year
            rh_mean: Mean relative humidity (%), optional
            rh_max: Maximum relative humidity (%), optional
            rh_min: Minimum relative humidity (%), optional
            wind_speed: Wind speed at 2 m (m/s), defaults to 2.0
            pressure: Atmospheric pressure (kPa), derived from altitude if omitted

        Returns:
            ET0 (mm/day)
        """
        return ET0Formulas.penman_monteith_components(
            t_max=t_max,
            t_min=t_min,
            rs=rs,
            latitude=latitude,
            altitude=altitude,
            day_of_year=day_of_year,
            rh_mean=rh_mean,
            rh_max=rh_max,
            rh_min=rh_min,
            wind_speed=wind_speed,
            pressure=pressure
        ).et0

    @staticmethod
    def penman_monteith_components(
        t_max: float,
        t_min: float,
        rs: float,
        latitude: float,
        altitude: float,
        day_of_year: int,
        rh_mean: Optional[float] = None,
        rh_max: Optional[float] = None,
        rh_min: Optional[float] = None,
        wind_speed: Optional[float] = None,
        pressure: Optional[float] = None
    ) -> PenmanMonteithComponents:
        """Same as penman_monteith_fao56() but returns every intermediate value."""
        t_max = require_finite("maximum temperature", t_max)
        t_min = require_finite("minimum temperature", t_min)
        t_mean = (t_max + t_min) / 2

        es_tmax = ET0Formulas.saturation_vapor_pressure(t_max)
        es_tmin = ET0Formulas.saturation_vapor_pressure(t_min)
        es = (es_tmax + es_tmin) / 2
        ea = ET0Formulas.actual_vapor_pressure(es_tmax, es_tmin, rh_mean, rh_max, rh_min)
        vpd = es - ea

        # Δ from the daily mean es rather than es(Tmean)
        delta = ET0Formulas.slope_from_saturation(es, t_mean)

        if pressure is None:
            pressure = RadiationModel.atmospheric_pressure(altitude)
        gamma = ET0Formulas.psychrometric_constant(pressure)

        rn = RadiationModel.net_radiation(rs, t_mean, ea, latitude, altitude, day_of_year)
        g = 0.0  # soil heat flux is negligible at a daily step

        u2 = constants.DEFAULT_WIND_SPEED if wind_speed is None else wind_speed

        numerator = (
            0.408 * delta * (rn - g) +
            gamma * (900 / (t_mean + 273)) * u2 * vpd
        )
        denominator = delta + gamma * (1 + 0.34 * u2)
        if denominator <= 0:
            raise NumericDomainError(f"Invalid Penman-Monteith denominator: {denominator:.4f}")

        return PenmanMonteithComponents(
            et0=max(0.0, numerator / denominator),
            t_mean=t_mean,
            es=es,
            ea=ea,
            vpd=vpd,
            delta=delta,
            pressure=pressure,
            gamma=gamma,
            rn=rn,
            u2=u2
        )

    # =========================================================================
    # SECTION 3: Hargreaves-Samani
    # =========================================================================

    @staticmethod
    def hargreaves_samani(
        t_max: float,
        t_min: float,
        latitude: float,
        day_of_year: int
    ) -> float:
        """
        Temperature-based ET0 (Hargreaves-Samani with kRs = 0.19).

        Raises:
            NumericDomainError: If an input is not finite, t_max < t_min, or the
                radiation term is undefined
        """
        t_max = require_finite("maximum temperature", t_max)
        t_min = require_finite("minimum temperature", t_min)
        t_mean = (t_max + t_min) / 2
        temperature_range = t_max - t_min
        if temperature_range < 0:
            raise NumericDomainError(
                f"Temperature range is negative (Tmax={t_max}, Tmin={t_min})"
            )

        ra = RadiationModel.extraterrestrial_radiation(latitude, day_of_year)

        et0 = (
            constants.HARGREAVES_COEF *
            (t_mean + constants.HARGREAVES_TEMP_OFFSET) *
            math.sqrt(temperature_range) * ra * constants.HARGREAVES_KRS
        )
        return max(0.0, et0)

    # =========================================================================
    # SECTION 4: Priestley-Taylor
    # =========================================================================

    @staticmethod
    def priestley_taylor(t_mean: float, rn: float) -> float:
        """
        Radiation-driven ET0 with a sea-level psychrometric constant.

        Args:
            t_mean: Mean temperature (°C)
            rn: Net radiation (MJ m⁻² day⁻¹)

        Returns:
            ET0 (mm/day)
        """
        t_mean = require_finite("mean temperature", t_mean)
        rn = require_finite("net radiation", rn)
        delta = ET0Formulas.slope_vapor_pressure_curve(t_mean)
        gamma = constants.SEA_LEVEL_PSYCHROMETRIC

        et0 = (
            constants.PRIESTLEY_TAYLOR_ALPHA * (delta / (delta + gamma)) *
            (rn / constants.LATENT_HEAT_VAPORIZATION)
        )
        return max(0.0, et0)

    @staticmethod
    def approximate_net_radiation(rs: float) -> float:
        """Rn ≈ 0.77 · Rs, used where no full radiation balance is computed."""
        return rs * constants.NET_RADIATION_FRACTION

    # =========================================================================
    # SECTION 5: Temperature-only Estimate
    # =========================================================================

    @staticmethod
    def temperature_estimate(t_mean: float) -> float:
        """Empirical semi-arid estimate: ET0 = 0.3 · Tmean, never negative."""
        return max(0.0, constants.TEMPERATURE_ET0_FACTOR * t_mean)

    @staticmethod
    def mean_temperature(
        t_max: Optional[float],
        t_min: Optional[float],
        t_mean: Optional[float] = None
    ) -> Optional[float]:
        """Tmean from the extremes when both exist, else the measured mean."""
        if t_max is not None and t_min is not None:
            return (t_max + t_min) / 2
        return t_mean

