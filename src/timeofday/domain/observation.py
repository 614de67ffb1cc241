# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Observation input record.

Describes when and where the Sun is observed, plus the local atmosphere.
Construction does not validate; compute_solar_position validates before
any reduction stage runs.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

DEFAULT_ELEVATION_M: float = 0.0
DEFAULT_TEMPERATURE_C: float = 15.0  # annual average at sea level
DEFAULT_PRESSURE_MBAR: float = 1013.25  # annual average at sea level
DEFAULT_HORIZON_REFRACTION_DEG: float = 0.5667


@dataclass(frozen=True)
class ObservationInput:
    """Place, time and atmosphere of a single solar position calculation."""
    timestamp: datetime  # local wall clock; tzinfo is ignored
    timezone_hours: float  # offset from UTC in fractional hours
    latitude_deg: float  # negative south of the Equator
    longitude_deg: float  # negative west of Greenwich
    delta_ut1_s: float = 0.0
    delta_t_s: Optional[float] = None  # None: estimated from the date
    elevation_m: float = DEFAULT_ELEVATION_M
    temperature_c: float = DEFAULT_TEMPERATURE_C
    pressure_mbar: float = DEFAULT_PRESSURE_MBAR
    horizon_refraction_deg: Optional[float] = None  # None: 0.5667


def resolve_horizon_refraction(horizon_refraction_deg: Optional[float]) -> float:
    """Atmospheric refraction at the horizon, falling back to 0.5667 deg."""
    if horizon_refraction_deg is None:
        return DEFAULT_HORIZON_REFRACTION_DEG
    return horizon_refraction_deg
