"""
Solar radiation model (FAO-56).

Supplies the radiation terms needed by the Penman-Monteith and
Hargreaves-Samani estimators: extraterrestrial radiation, clear-sky
radiation, net radiation and atmospheric pressure from altitude.

Reference:
    Allen, R.G., Pereira, L.S., Raes, D., Smith, M. (1998). Crop
    evapotranspiration. FAO Irrigation and Drainage Paper 56, chapter 3.
"""

import math
from typing import Optional, Tuple

from ..core import constants
from ..core.exceptions import NumericDomainError


def require_finite(name: str, value: Optional[float]) -> float:
    if value is None:
        raise NumericDomainError(f"{name} is required")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise NumericDomainError(f"{name} must be numeric, got {value!r}")
    if not math.isfinite(value):
        raise NumericDomainError(f"{name} must be finite, got {value}")
    return float(value)


class RadiationModel:
    """Physically derived radiation quantities for daily ET0."""

    # =========================================================================
    # SECTION 1: Solar Geometry
    # =========================================================================

    @staticmethod
    def _validate_inputs(latitude: Optional[float], day_of_year: int) -> Tuple[float, int]:
        lat = require_finite("latitude", latitude)
        if abs(lat) >= 90:
            raise NumericDomainError(
                f"latitude must be strictly between -90 and 90 degrees, got {lat}"
            )
        doy = require_finite("day_of_year", day_of_year)
        if not 1 <= doy <= 366:
            raise NumericDomainError(f"day_of_year must be in 1..366, got {day_of_year}")
        return lat, int(doy)

    @staticmethod
    def solar_declination(day_of_year: int) -> float:
        """
        Calculate solar declination for a given day of the year.

        Args:
            day_of_year: Julian day of the year (1-365/366)

        Returns:
            Solar declination (radians)
        """
        return constants.SOLAR_DECLINATION_AMPLITUDE * math.sin(
            (2 * math.pi / constants.DAYS_IN_YEAR) * day_of_year
            - constants.SOLAR_DECLINATION_PHASE
        )

    @staticmethod
    def inverse_relative_distance(day_of_year: int) -> float:
        """Inverse relative Earth-Sun distance (dimensionless)."""
        return 1 + constants.EARTH_ORBIT_ECCENTRICITY * math.cos(
            2 * math.pi * day_of_year / constants.DAYS_IN_YEAR
        )

    @staticmethod
    def sunset_hour_angle(latitude: float, day_of_year: int) -> float:
        """
        Calculate the sunset hour angle.

        Args:
            latitude: Latitude (degrees)
            day_of_year: Julian day of the year

        Returns:
            Sunset hour angle ωs (radians)

        Raises:
            NumericDomainError: If the sun does not rise or set that day
                                (polar day or night)
        """
        lat, doy = RadiationModel._validate_inputs(latitude, day_of_year)
        phi = math.radians(lat)
        solar_decl = RadiationModel.solar_declination(doy)

        cos_omega = -math.tan(phi) * math.tan(solar_decl)
        if not -1.0 <= cos_omega <= 1.0:
            raise NumericDomainError(
                f"No sunset hour angle at latitude {lat} on day {doy} "
                f"(arccos argument {cos_omega:.4f})"
            )
        return math.acos(cos_omega)

    # =========================================================================
    # SECTION 2: Shortwave Radiation
    # =========================================================================

    @staticmethod
    def extraterrestrial_radiation(latitude: float, day_of_year: int) -> float:
        """
        Calculate extraterrestrial radiation (FAO-56 eq. 21).

        Args:
            latitude: Latitude (degrees, negative in the southern hemisphere)
            day_of_year: Julian day of the year (1-365/366)

        Returns:
            Ra (MJ m⁻² day⁻¹)

        Raises:
            NumericDomainError: For |latitude| >= 90 or polar day/night
        """
        omega_s = RadiationModel.sunset_hour_angle(latitude, day_of_year)
        phi = math.radians(latitude)
        solar_decl = RadiationModel.solar_declination(day_of_year)
        dr = RadiationModel.inverse_relative_distance(day_of_year)

        return (24 * 60 / math.pi) * constants.SOLAR_CONSTANT * dr * (
            omega_s * math.sin(phi) * math.sin(solar_decl) +
            math.cos(phi) * math.cos(solar_decl) * math.sin(omega_s)
        )

    @staticmethod
    def clear_sky_radiation(latitude: float, altitude: float, day_of_year: int) -> float:
        """
        Calculate clear-sky solar radiation (FAO-56 eq. 37).

        Returns:
            Rso (MJ m⁻² day⁻¹)
        """
        alt = require_finite("altitude", altitude)
        ra = RadiationModel.extraterrestrial_radiation(latitude, day_of_year)
        return ra * (constants.CLEAR_SKY_COEF + constants.ALTITUDE_FACTOR * alt)

    @staticmethod
    def convert_solar_radiation_to_daily(solar_radiation_w: float) -> float:
        """Convert mean irradiance in W/m² to MJ m⁻² day⁻¹ (86400 s / 1e6)."""
        return solar_radiation_w * constants.W_M2_TO_MJ_DAY

    @staticmethod
    def normalize_solar_radiation(solar_radiation: float) -> float:
        """
        Bring a raw solar radiation reading to MJ m⁻² day⁻¹.

        Values above 1000 are taken to be W/m² and converted; anything else is
        assumed to already be MJ m⁻² day⁻¹. The threshold is a heuristic: a
        station reporting low W/m² means (e.g. 250) is NOT converted.
        """
        if solar_radiation > constants.SOLAR_RADIATION_W_THRESHOLD:
            return RadiationModel.convert_solar_radiation_to_daily(solar_radiation)
        return solar_radiation

    # =========================================================================
    # SECTION 3: Net Radiation
    # =========================================================================

    @staticmethod
    def net_radiation(
        rs: float,
        t_mean: float,
        ea: float,
        latitude: float,
        altitude: float,
        day_of_year: int,
        albedo: float = constants.DEFAULT_ALBEDO
    ) -> float:
        """
        Calculate daily net radiation at the reference surface.

        Tmax and Tmin for the longwave term are estimated as Tmean ± 10 °C.

        Args:
            rs: Incoming solar radiation (MJ m⁻² day⁻¹)
            t_mean: Mean air temperature (°C)
            ea: Actual vapor pressure (kPa)
            latitude: Latitude (degrees)
            altitude: Altitude (meters)
            day_of_year: Julian day of the year
            albedo: Surface albedo (0.23 for reference grass)

        Returns:
            Rn (MJ m⁻² day⁻¹), never negative
        """
        rs = require_finite("solar radiation", rs)
        t_mean = require_finite("mean temperature", t_mean)
        ea = require_finite("actual vapor pressure", ea)
        if ea < 0:
            raise NumericDomainError(f"actual vapor pressure cannot be negative, got {ea}")

        # Net shortwave radiation
        rns = (1 - albedo) * rs

        rso = RadiationModel.clear_sky_radiation(latitude, altitude, day_of_year)
        if rso <= 0:
            raise NumericDomainError(f"clear-sky radiation must be positive, got {rso:.4f}")
        rs_rso = min(rs / rso, 1.0)

        tmax_k4 = (t_mean + constants.LONGWAVE_TEMPERATURE_SPREAD + constants.KELVIN_OFFSET) ** 4
        tmin_k4 = (t_mean - constants.LONGWAVE_TEMPERATURE_SPREAD + constants.KELVIN_OFFSET) ** 4

        # Net longwave radiation (Stefan-Boltzmann)
        rnl = (
            constants.STEFAN_BOLTZMANN * (tmax_k4 + tmin_k4) / 2 *
            (constants.NLW_CONST_1 - constants.NLW_CONST_2 * math.sqrt(ea)) *
            (constants.NLW_CONST_3 * rs_rso - constants.NLW_CONST_4)
        )

        return max(0.0, rns - rnl)

    # =========================================================================
    # SECTION 4: Atmospheric Pressure
    # =========================================================================

    @staticmethod
    def atmospheric_pressure(altitude: float) -> float:
        """
        Estimate atmospheric pressure from altitude (FAO-56 eq. 7).

        Args:
            altitude: Elevation above sea level (meters)

        Returns:
            Pressure (kPa)
        """
        alt = require_finite("altitude", altitude)
        base = (
            constants.REFERENCE_TEMPERATURE_K - constants.LAPSE_RATE * alt
        ) / constants.REFERENCE_TEMPERATURE_K
        if base <= 0:
            raise NumericDomainError(f"altitude {alt} m is outside the barometric formula range")
        exponent = (constants.GRAVITY * constants.MOLAR_MASS_AIR) / (
            constants.GAS_CONSTANT * constants.LAPSE_RATE
        )
        return constants.SEA_LEVEL_PRESSURE * base ** exponent
