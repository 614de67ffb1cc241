# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Range validation for observation parameters.

Every check is written as "value inside the valid range" and negated, so
NaN fails each one. Checks run in a fixed order and the first violation
raises InvalidObservationInput.
"""
from typing import Optional

from timeofday.domain.observation import ObservationInput

MAX_ABS_TIMEZONE_H = 18
MIN_DELTA_UT1_S = -1
MAX_DELTA_UT1_S = 1
MAX_ABS_DELTA_T_S = 8000
MAX_ABS_LATITUDE_DEG = 90
MAX_ABS_LONGITUDE_DEG = 180
MIN_ELEVATION_M = -6500000
MIN_TEMPERATURE_C = -273
MAX_TEMPERATURE_C = 6000
MIN_PRESSURE_MBAR = 0
MAX_PRESSURE_MBAR = 5000
MAX_HORIZON_REFRACTION_DEG = 5


class InvalidObservationInput(ValueError):
    """An observation parameter is outside its valid range.

    Attributes:
        field: Name of the offending ObservationInput field.
        bound: The violated constraint, e.g. "-90 <= latitude_deg <= 90".
    """

    def __init__(self, field: str, bound: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.bound = bound


def check_timezone(timezone_hours: float) -> None:
    if not abs(timezone_hours) <= MAX_ABS_TIMEZONE_H:
        raise InvalidObservationInput(
            "timezone_hours",
            f"-{MAX_ABS_TIMEZONE_H} <= timezone_hours <= {MAX_ABS_TIMEZONE_H}",
            f"The timezone is invalid. It should be between "
            f"-{MAX_ABS_TIMEZONE_H} and {MAX_ABS_TIMEZONE_H}, got {timezone_hours}.",
        )


def check_delta_ut1(delta_ut1_s: float) -> None:
    if not MIN_DELTA_UT1_S < delta_ut1_s < MAX_DELTA_UT1_S:
        raise InvalidObservationInput(
            "delta_ut1_s",
            f"{MIN_DELTA_UT1_S} < delta_ut1_s < {MAX_DELTA_UT1_S}",
            f"The delta UT1 parameter is invalid. It should be between "
            f"{MIN_DELTA_UT1_S} and {MAX_DELTA_UT1_S} seconds, got {delta_ut1_s}.",
        )


def check_delta_t(delta_t_s: Optional[float]) -> None:
    if delta_t_s is not None and not abs(delta_t_s) <= MAX_ABS_DELTA_T_S:
        raise InvalidObservationInput(
            "delta_t_s",
            f"-{MAX_ABS_DELTA_T_S} <= delta_t_s <= {MAX_ABS_DELTA_T_S}",
            f"The delta T parameter is invalid. It should be between "
            f"-{MAX_ABS_DELTA_T_S} and {MAX_ABS_DELTA_T_S} seconds, got {delta_t_s}.",
        )


def check_latitude(latitude_deg: float) -> None:
    if not abs(latitude_deg) <= MAX_ABS_LATITUDE_DEG:
        raise InvalidObservationInput(
            "latitude_deg",
            f"-{MAX_ABS_LATITUDE_DEG} <= latitude_deg <= {MAX_ABS_LATITUDE_DEG}",
            f"The latitude is invalid. It should be between "
            f"-{MAX_ABS_LATITUDE_DEG} and {MAX_ABS_LATITUDE_DEG} degrees, got {latitude_deg}.",
        )


def check_longitude(longitude_deg: float) -> None:
    if not abs(longitude_deg) <= MAX_ABS_LONGITUDE_DEG:
        raise InvalidObservationInput(
            "longitude_deg",
            f"-{MAX_ABS_LONGITUDE_DEG} <= longitude_deg <= {MAX_ABS_LONGITUDE_DEG}",
            f"The longitude is invalid. It should be between "
            f"-{MAX_ABS_LONGITUDE_DEG} and {MAX_ABS_LONGITUDE_DEG} degrees, got {longitude_deg}.",
        )


def check_elevation(elevation_m: float) -> None:
    if not elevation_m >= MIN_ELEVATION_M:
        raise InvalidObservationInput(
            "elevation_m",
            f"elevation_m >= {MIN_ELEVATION_M}",
            f"The elevation is invalid. It should be at least "
            f"{MIN_ELEVATION_M} meters, got {elevation_m}.",
        )


def check_temperature(temperature_c: float) -> None:
    if not MIN_TEMPERATURE_C < temperature_c < MAX_TEMPERATURE_C:
        raise InvalidObservationInput(
            "temperature_c",
            f"{MIN_TEMPERATURE_C} < temperature_c < {MAX_TEMPERATURE_C}",
            f"The temperature is invalid. It should be between "
            f"{MIN_TEMPERATURE_C} and {MAX_TEMPERATURE_C} degrees Celsius, got {temperature_c}.",
        )


def check_pressure(pressure_mbar: float) -> None:
    if not MIN_PRESSURE_MBAR <= pressure_mbar <= MAX_PRESSURE_MBAR:
        raise InvalidObservationInput(
            "pressure_mbar",
            f"{MIN_PRESSURE_MBAR} <= pressure_mbar <= {MAX_PRESSURE_MBAR}",
            f"The atmospheric pressure is invalid. It should be between "
            f"{MIN_PRESSURE_MBAR} and {MAX_PRESSURE_MBAR} millibars, got {pressure_mbar}.",
        )


def check_horizon_refraction(horizon_refraction_deg: Optional[float]) -> None:
    if horizon_refraction_deg is not None and not horizon_refraction_deg <= MAX_HORIZON_REFRACTION_DEG:
        raise InvalidObservationInput(
            "horizon_refraction_deg",
            f"horizon_refraction_deg <= {MAX_HORIZON_REFRACTION_DEG}",
            f"The refraction at the horizon is invalid. It should be at most "
            f"{MAX_HORIZON_REFRACTION_DEG} degrees, got {horizon_refraction_deg}.",
        )


def validate_observation(observation: ObservationInput) -> None:
    """
    Validate every field of an ObservationInput.

    Raises:
        InvalidObservationInput: On the first field outside its range, in
            the order timezone, delta UT1, delta T, latitude, longitude,
            elevation, temperature, pressure, horizon refraction.
    """
    check_timezone(observation.timezone_hours)
    check_delta_ut1(observation.delta_ut1_s)
    check_delta_t(observation.delta_t_s)
    check_latitude(observation.latitude_deg)
    check_longitude(observation.longitude_deg)
    check_elevation(observation.elevation_m)
    check_temperature(observation.temperature_c)
    check_pressure(observation.pressure_mbar)
    check_horizon_refraction(observation.horizon_refraction_deg)
