# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Apparent Sun longitude, sidereal time and geocentric equatorial coordinates.

No external dependencies — only stdlib math/dataclasses.
"""
import math
from dataclasses import dataclass

from timeofday.domain.angles import limit_degrees_0_to_360, to_degrees, to_radians

_J2000_JD: float = 2451545.0
_ABERRATION_CONSTANT_ARCSEC: float = 20.4898


@dataclass(frozen=True)
class EquatorialPosition:
    """Apparent geocentric position of the Sun and Greenwich sidereal time."""
    aberration_correction: float  # degrees
    apparent_sun_longitude: float  # degrees
    greenwich_mean_sidereal_time: float  # degrees, [0, 360)
    greenwich_sidereal_time: float  # degrees
    geocentric_right_ascension: float  # degrees, [0, 360)
    geocentric_declination: float  # degrees


def aberration_correction(earth_radius_vector: float) -> float:
    """Aberration correction in degrees for an Earth-Sun distance in AU."""
    return -_ABERRATION_CONSTANT_ARCSEC / (3600.0 * earth_radius_vector)


def apparent_sun_longitude(
    geocentric_longitude: float,
    longitude_nutation: float,
    aberration: float,
) -> float:
    """Geocentric longitude corrected for nutation and aberration (degrees)."""
    return geocentric_longitude + longitude_nutation + aberration


def greenwich_mean_sidereal_time(jd: float, jc: float) -> float:
    """
    Mean sidereal time at Greenwich in degrees, [0, 360).

        GMST = 280.46061837 + 360.98564736629 * (JD - 2451545)
               + T^2 * (0.000387933 - T / 38710000)
    """
    gmst = (280.46061837 + 360.98564736629 * (jd - _J2000_JD)
            + jc * jc * (0.000387933 - jc / 38710000.0))
    return limit_degrees_0_to_360(gmst)


def greenwich_sidereal_time(
    mean_sidereal_time: float,
    longitude_nutation: float,
    true_obliquity: float,
) -> float:
    """Apparent sidereal time at Greenwich: GMST + delta psi * cos(epsilon)."""
    return mean_sidereal_time + longitude_nutation * math.cos(to_radians(true_obliquity))


def geocentric_right_ascension(
    apparent_longitude: float,
    true_obliquity: float,
    geocentric_latitude: float,
) -> float:
    """Sun geocentric right ascension in degrees, [0, 360)."""
    lam = to_radians(apparent_longitude)
    eps = to_radians(true_obliquity)
    beta = to_radians(geocentric_latitude)
    alpha = math.atan2(
        math.sin(lam) * math.cos(eps) - math.tan(beta) * math.sin(eps),
        math.cos(lam),
    )
    return limit_degrees_0_to_360(to_degrees(alpha))


def geocentric_declination(
    geocentric_latitude: float,
    true_obliquity: float,
    apparent_longitude: float,
) -> float:
    """Sun geocentric declination in degrees."""
    beta = to_radians(geocentric_latitude)
    eps = to_radians(true_obliquity)
    lam = to_radians(apparent_longitude)
    delta = math.asin(
        math.sin(beta) * math.cos(eps)
        + math.cos(beta) * math.sin(eps) * math.sin(lam)
    )
    return to_degrees(delta)


def compute_equatorial_position(
    jd: float,
    jc: float,
    geocentric_longitude: float,
    geocentric_latitude: float,
    earth_radius_vector: float,
    longitude_nutation: float,
    true_obliquity: float,
) -> EquatorialPosition:
    """
    Reduce the geocentric ecliptic position to equatorial coordinates.

    Args:
        jd: Julian Day.
        jc: Julian Century.
        geocentric_longitude: Sun geocentric longitude (degrees).
        geocentric_latitude: Sun geocentric latitude (degrees).
        earth_radius_vector: Earth-Sun distance (AU).
        longitude_nutation: Nutation in longitude (degrees).
        true_obliquity: True obliquity of the ecliptic (degrees).
    """
    aberration = aberration_correction(earth_radius_vector)
    apparent_longitude = apparent_sun_longitude(geocentric_longitude, longitude_nutation, aberration)
    gmst = greenwich_mean_sidereal_time(jd, jc)
    return EquatorialPosition(
        aberration_correction=aberration,
        apparent_sun_longitude=apparent_longitude,
        greenwich_mean_sidereal_time=gmst,
        greenwich_sidereal_time=greenwich_sidereal_time(gmst, longitude_nutation, true_obliquity),
        geocentric_right_ascension=geocentric_right_ascension(
            apparent_longitude, true_obliquity, geocentric_latitude,
        ),
        geocentric_declination=geocentric_declination(
            geocentric_latitude, true_obliquity, apparent_longitude,
        ),
    )
