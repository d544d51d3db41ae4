"""
Application-wide constants for ET0 estimation.

This module defines default values and constants used throughout the application.
Formula coefficients are grouped here by the estimator that uses them.
"""

# Physical Constants
LATENT_HEAT_VAPORIZATION = 2.45  # MJ/kg
SOLAR_CONSTANT = 0.0820  # MJ m⁻² min⁻¹
STEFAN_BOLTZMANN = 4.903e-9  # MJ K⁻⁴ m⁻² day⁻¹
KELVIN_OFFSET = 273.16

# Vapor Pressure Constants (Tetens formula)
TETENS_A = 0.6108  # kPa
TETENS_B = 17.27
TETENS_C = 237.3  # °C
SLOPE_COEF = 4098

# Psychrometric Constant Coefficient
PSYCHROMETRIC_COEF = 0.665e-3  # kPa/°C
SEA_LEVEL_PSYCHROMETRIC = 0.066  # kPa/°C

# Reference grass albedo
DEFAULT_ALBEDO = 0.23

# Radiation Constants
CLEAR_SKY_COEF = 0.75
ALTITUDE_FACTOR = 2e-5
W_M2_TO_MJ_DAY = 0.0864
# Above this value a solar radiation reading is taken to be W/m²
SOLAR_RADIATION_W_THRESHOLD = 1000

# Net Longwave Radiation Constants
NLW_CONST_1 = 0.34
NLW_CONST_2 = 0.14
NLW_CONST_3 = 1.35
NLW_CONST_4 = 0.35
# Tmax/Tmin are estimated as Tmean +/- this spread for the longwave term
LONGWAVE_TEMPERATURE_SPREAD = 10.0

# Solar Geometry Constants
EARTH_ORBIT_ECCENTRICITY = 0.033
SOLAR_DECLINATION_AMPLITUDE = 0.409
SOLAR_DECLINATION_PHASE = 1.39  # radians
DAYS_IN_YEAR = 365

# Barometric formula
SEA_LEVEL_PRESSURE = 101.3  # kPa
REFERENCE_TEMPERATURE_K = 293.0
LAPSE_RATE = 0.0065  # K/m
GRAVITY = 9.807  # m/s²
MOLAR_MASS_AIR = 0.0289644  # kg/mol
GAS_CONSTANT = 8.31447  # J/(mol K)

# Penman-Monteith defaults
DEFAULT_WIND_SPEED = 2.0  # m/s at 2 m
DEFAULT_RELATIVE_HUMIDITY = 70.0  # %
DEFAULT_ALTITUDE = 400.0  # m

# Hargreaves-Samani
HARGREAVES_COEF = 0.0023
HARGREAVES_TEMP_OFFSET = 17.8
HARGREAVES_KRS = 0.19

# Priestley-Taylor
PRIESTLEY_TAYLOR_ALPHA = 1.26
NET_RADIATION_FRACTION = 0.77

# Temperature-only fallback
TEMPERATURE_ET0_FACTOR = 0.3
DEFAULT_ET0 = 3.5  # mm/day, typical day when no temperature is available

# Seasonal estimates (mm/day) used when the whole calculation fails
SEASONAL_ET0_WET = 4.5  # October - March
SEASONAL_ET0_DRY_EARLY = 3.0  # April - June
SEASONAL_ET0_DRY_LATE = 2.5  # July - September

# Output precision
ET0_DECIMALS = 2

# Default station (Barra, BA - western Bahia)
DEFAULT_STATION_ID = "031133E8"
DEFAULT_LATITUDE = -12.15
DEFAULT_LONGITUDE = -45.00
DEFAULT_TIMEZONE = -3
DEFAULT_REGION = "oeste_bahia"

# Method identifiers
METHOD_PENMAN_MONTEITH = "penman_monteith_fao56"
METHOD_HARGREAVES_SAMANI = "hargreaves_samani"
METHOD_PRIESTLEY_TAYLOR = "priestley_taylor"
METHOD_TEMPERATURE = "estimativa_temperatura"
METHOD_DEFAULT = "estimativa_padrao"
METHOD_SEASONAL = "estimativa_sazonal"

# Quality grades
QUALITY_HIGH = "alta"
QUALITY_MEDIUM = "media"
QUALITY_LOW = "baixa"
QUALITY_VERY_LOW = "muito_baixa"

# Keys removed from station payloads before they reach a client
SENSITIVE_KEYS = ("api_keys", "private_keys", "tokens")
