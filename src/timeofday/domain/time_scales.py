# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Julian Day and Julian Ephemeris Day/Century/Millennium.

Civil wall-clock time plus UTC offset and delta UT1 give the Julian Day
(Meeus, Astronomical Algorithms, Ch. 7). Delta T shifts it onto the
terrestrial (ephemeris) time axis used by the periodic-term series.
"""

import logging
import math
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from timeofday.domain.validation import check_delta_ut1, check_timezone

logger = logging.getLogger(__name__)

# --------------------------------------------------------------------------- #
# Constants
# --------------------------------------------------------------------------- #

_J2000_JD: float = 2451545.0
"""Julian Date of J2000.0 epoch."""

_DAYS_PER_JULIAN_CENTURY: float = 36525.0

_SECONDS_PER_DAY: float = 86400.0

_GREGORIAN_CUTOVER_JD: float = 2299160.0
"""Uncorrected JDs above this fall after the 1582-10-15 Gregorian reform."""

# Delta T quadratic fit window: 1973-01-01 .. 2017-01-01
_DELTA_T_FIT_START_JD: float = 2441683.5
_DELTA_T_FIT_END_JD: float = 2457754.5


@dataclass(frozen=True)
class TimeScales:
    """Julian time axis values for one observation."""
    julian_day: float
    julian_century: float
    delta_t_s: float
    julian_ephemeris_day: float
    julian_ephemeris_century: float
    julian_ephemeris_millennium: float


# --------------------------------------------------------------------------- #
# Julian Day
# --------------------------------------------------------------------------- #

def julian_day(
    timestamp: datetime,
    timezone_hours: float,
    delta_ut1_s: float = 0.0,
) -> float:
    """Convert a civil wall-clock timestamp to a Julian Day.

    Args:
        timestamp: Local date and time. Any tzinfo is ignored; the offset
            is given by timezone_hours.
        timezone_hours: Offset of the wall clock from UTC in hours.
        delta_ut1_s: UT1 - UTC in seconds.

    Returns:
        Julian Day (UT1).

    Raises:
        InvalidObservationInput: If the timezone or delta UT1 is out of range.
    """
    check_timezone(timezone_hours)
    check_delta_ut1(delta_ut1_s)

    seconds = timestamp.second + timestamp.microsecond / 1e6
    day = timestamp.day + (
        timestamp.hour - timezone_hours
        + (timestamp.minute + (seconds + delta_ut1_s) / 60.0) / 60.0
    ) / 24.0

    year = timestamp.year
    month = timestamp.month
    if month < 3:
        month += 12
        year -= 1

    jd = (math.floor(365.25 * (year + 4716.0))
          + math.floor(30.6001 * (month + 1))
          + day - 1524.5)

    if jd > _GREGORIAN_CUTOVER_JD:
        century = year // 100
        jd += 2 - century + century // 4

    return jd


# --------------------------------------------------------------------------- #
# Ephemeris time
# --------------------------------------------------------------------------- #

def estimate_delta_t(jd: float) -> float:
    """Estimate delta T (TT - UT1) in seconds from a Julian Day.

    Second-degree polynomial fitted to observed values for 1973-2016. An
    approximation only; outside that window the error grows quickly.
    """
    return -0.00000007865 * jd * jd + 0.38682 * jd - 475550


def resolve_delta_t(jd: float, delta_t_s: Optional[float]) -> float:
    """Return the observed delta T, or the fitted estimate when absent."""
    if delta_t_s is not None:
        return delta_t_s

    estimate = estimate_delta_t(jd)
    if _DELTA_T_FIT_START_JD <= jd < _DELTA_T_FIT_END_JD:
        logger.debug("delta T not given, estimated %.3f s for JD %.6f", estimate, jd)
    else:
        logger.debug(
            "delta T not given, estimated %.3f s for JD %.6f "
            "(outside the 1973-2016 fit window)", estimate, jd,
        )
    return estimate


def julian_ephemeris_day(jd: float, delta_t_s: Optional[float] = None) -> float:
    """Julian Ephemeris Day: JD + delta T / 86400."""
    return jd + resolve_delta_t(jd, delta_t_s) / _SECONDS_PER_DAY


def julian_century(jd: float) -> float:
    """Julian centuries since J2000.0."""
    return (jd - _J2000_JD) / _DAYS_PER_JULIAN_CENTURY


def julian_ephemeris_century(jde: float) -> float:
    """Julian ephemeris centuries since J2000.0."""
    return (jde - _J2000_JD) / _DAYS_PER_JULIAN_CENTURY


def julian_ephemeris_millennium(jce: float) -> float:
    """Julian ephemeris millennia since J2000.0."""
    return jce / 10.0


def compute_time_scales(jd: float, delta_t_s: Optional[float] = None) -> TimeScales:
    """Derive every Julian time-axis value from a Julian Day."""
    delta_t = resolve_delta_t(jd, delta_t_s)
    jde = julian_ephemeris_day(jd, delta_t)
    jce = julian_ephemeris_century(jde)
    return TimeScales(
        julian_day=jd,
        julian_century=julian_century(jd),
        delta_t_s=delta_t,
        julian_ephemeris_day=jde,
        julian_ephemeris_century=jce,
        julian_ephemeris_millennium=julian_ephemeris_millennium(jce),
    )
