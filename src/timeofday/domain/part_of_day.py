# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Part-of-day classification from the Sun's topocentric position.

Day while the Sun is above the horizon, Night once it is more than the
twilight elevation below it, and Dawn or Dusk in between depending on
which half of the sky (by astronomical azimuth) the Sun is in.
"""
import logging
from datetime import datetime, timedelta
from enum import Enum
from typing import Optional, Union

from timeofday.domain.observation import (
    DEFAULT_ELEVATION_M,
    DEFAULT_PRESSURE_MBAR,
    DEFAULT_TEMPERATURE_C,
    ObservationInput,
)
from timeofday.domain.solar_position import compute_solar_position
from timeofday.domain.validation import InvalidObservationInput

logger = logging.getLogger(__name__)

CIVIL_TWILIGHT_DEG: float = 6.0
NAUTICAL_TWILIGHT_DEG: float = 12.0
ASTRONOMICAL_TWILIGHT_DEG: float = 18.0

TWILIGHT_ELEVATION_DEG: float = NAUTICAL_TWILIGHT_DEG


class PartOfDay(Enum):
    UNKNOWN = "unknown"
    DAY = "day"
    DAWN = "dawn"
    DUSK = "dusk"
    NIGHT = "night"


def part_of_day_from_position(
    zenith_angle: float,
    astronomical_azimuth: float,
    twilight_elevation_deg: float = TWILIGHT_ELEVATION_DEG,
) -> PartOfDay:
    """
    Classify a topocentric Sun position.

    Args:
        zenith_angle: Topocentric zenith angle (degrees).
        astronomical_azimuth: Azimuth westward from south (degrees).
        twilight_elevation_deg: Depression below the horizon where
            twilight ends (6 civil, 12 nautical, 18 astronomical).

    Returns:
        DAY, NIGHT, DAWN (azimuth > 180) or DUSK.
    """
    if zenith_angle < 90.0:
        return PartOfDay.DAY
    if zenith_angle >= 90.0 + twilight_elevation_deg:
        return PartOfDay.NIGHT
    if astronomical_azimuth > 180.0:
        return PartOfDay.DAWN
    return PartOfDay.DUSK


def _timezone_hours(timezone: Union[float, timedelta]) -> float:
    if isinstance(timezone, timedelta):
        return timezone.total_seconds() / 3600.0
    return timezone


def classify_part_of_day(
    timestamp: datetime,
    timezone: Union[float, timedelta],
    latitude_deg: float,
    longitude_deg: float,
    delta_ut1_s: float = 0.0,
    delta_t_s: Optional[float] = None,
    elevation_m: float = DEFAULT_ELEVATION_M,
    temperature_c: float = DEFAULT_TEMPERATURE_C,
    pressure_mbar: float = DEFAULT_PRESSURE_MBAR,
    horizon_refraction_deg: Optional[float] = None,
    twilight_elevation_deg: float = TWILIGHT_ELEVATION_DEG,
) -> PartOfDay:
    """
    Part of day for an observer, computing the Sun's position first.

    With only time, offset and coordinates the observer is assumed at sea
    level in an average atmosphere (15 C, 1013.25 mbar) and delta T is
    estimated.

    Args:
        timestamp: Local wall-clock time of observation.
        timezone: UTC offset in fractional hours or as a timedelta.
        latitude_deg: Observer latitude (negative south).
        longitude_deg: Observer longitude (negative west).

    Returns:
        The PartOfDay, or PartOfDay.UNKNOWN if any input is out of range.
    """
    observation = ObservationInput(
        timestamp=timestamp,
        timezone_hours=_timezone_hours(timezone),
        latitude_deg=latitude_deg,
        longitude_deg=longitude_deg,
        delta_ut1_s=delta_ut1_s,
        delta_t_s=delta_t_s,
        elevation_m=elevation_m,
        temperature_c=temperature_c,
        pressure_mbar=pressure_mbar,
        horizon_refraction_deg=horizon_refraction_deg,
    )
    try:
        position = compute_solar_position(observation)
    except InvalidObservationInput as e:
        logger.debug("Part of day unknown, invalid %s: %s", e.field, e)
        return PartOfDay.UNKNOWN

    return part_of_day_from_position(
        position.topocentric_zenith_angle,
        position.astronomical_azimuth,
        twilight_elevation_deg,
    )
