# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Topocentric observation geometry of the Sun.

Corrects the geocentric equatorial position for the observer's
displacement from the Earth's centre (parallax on the reference
ellipsoid) and for atmospheric refraction, then converts it to zenith
angle and azimuth.

No external dependencies — only stdlib math/dataclasses.
"""
import math
from dataclasses import dataclass

from timeofday.domain.angles import limit_degrees_0_to_360, to_degrees, to_radians

SUN_RADIUS_DEG: float = 0.26667
"""Apparent angular radius of the Sun."""

_EARTH_EQUATORIAL_RADIUS_M: float = 6378140.0
_EARTH_POLAR_RATIO: float = 0.99664719  # b/a of the reference ellipsoid
_SUN_PARALLAX_ARCSEC: float = 8.794  # at 1 AU


@dataclass(frozen=True)
class TopocentricPosition:
    """Sun position as seen by the observer."""
    observer_hour_angle: float  # degrees, [0, 360)
    equatorial_horizontal_parallax: float  # degrees
    right_ascension_parallax: float  # degrees
    topocentric_right_ascension: float  # degrees
    topocentric_declination: float  # degrees
    topocentric_hour_angle: float  # degrees
    topocentric_elevation: float  # degrees, not refraction corrected
    refraction_correction: float  # degrees
    topocentric_elevation_corrected: float  # degrees
    topocentric_zenith_angle: float  # degrees
    astronomical_azimuth: float  # degrees westward from south, [0, 360)
    topocentric_azimuth: float  # degrees eastward from north, [0, 360)


def observer_hour_angle(
    greenwich_sidereal_time: float,
    longitude: float,
    right_ascension: float,
) -> float:
    """Local hour angle of the Sun in degrees, [0, 360)."""
    return limit_degrees_0_to_360(greenwich_sidereal_time + longitude - right_ascension)


def equatorial_horizontal_parallax(earth_radius_vector: float) -> float:
    """Equatorial horizontal parallax of the Sun in degrees."""
    return _SUN_PARALLAX_ARCSEC / (3600.0 * earth_radius_vector)


def right_ascension_parallax_and_topocentric_declination(
    latitude: float,
    elevation: float,
    parallax: float,
    hour_angle: float,
    declination: float,
) -> tuple[float, float]:
    """
    Parallax in right ascension and topocentric declination.

    Args:
        latitude: Observer geodetic latitude (degrees).
        elevation: Observer elevation (m).
        parallax: Equatorial horizontal parallax (degrees).
        hour_angle: Observer local hour angle (degrees).
        declination: Geocentric declination (degrees).

    Returns:
        (delta_alpha, topocentric_declination) in degrees.
    """
    lat = to_radians(latitude)
    xi = to_radians(parallax)
    h = to_radians(hour_angle)
    delta = to_radians(declination)

    u = math.atan(_EARTH_POLAR_RATIO * math.tan(lat))
    x = math.cos(u) + elevation * math.cos(lat) / _EARTH_EQUATORIAL_RADIUS_M
    y = _EARTH_POLAR_RATIO * math.sin(u) + elevation * math.sin(lat) / _EARTH_EQUATORIAL_RADIUS_M

    delta_alpha = math.atan2(
        -x * math.sin(xi) * math.sin(h),
        math.cos(delta) - x * math.sin(xi) * math.cos(h),
    )
    delta_prime = math.atan2(
        (math.sin(delta) - y * math.sin(xi)) * math.cos(delta_alpha),
        math.cos(delta) - x * math.sin(xi) * math.cos(h),
    )
    return to_degrees(delta_alpha), to_degrees(delta_prime)


def topocentric_right_ascension(right_ascension: float, right_ascension_parallax: float) -> float:
    return right_ascension + right_ascension_parallax


def topocentric_hour_angle(hour_angle: float, right_ascension_parallax: float) -> float:
    return hour_angle - right_ascension_parallax


def topocentric_elevation(latitude: float, declination: float, hour_angle: float) -> float:
    """Topocentric elevation angle in degrees, without refraction."""
    lat = to_radians(latitude)
    delta = to_radians(declination)
    h = to_radians(hour_angle)
    return to_degrees(math.asin(
        math.sin(lat) * math.sin(delta) + math.cos(lat) * math.cos(delta) * math.cos(h)
    ))


def atmospheric_refraction(
    pressure: float,
    temperature: float,
    horizon_refraction: float,
    elevation: float,
) -> float:
    """
    Atmospheric refraction correction in degrees.

    Applied while the Sun's upper limb can still be refracted above the
    horizon, i.e. elevation >= -(SUN_RADIUS_DEG + horizon_refraction),
    the boundary included. Zero below that.

    Args:
        pressure: Annual average local pressure (mbar).
        temperature: Annual average local temperature (deg C).
        horizon_refraction: Refraction at the horizon (degrees).
        elevation: Topocentric elevation without refraction (degrees).

    Raises:
        ZeroDivisionError: If elevation is exactly -5.11 deg while the
            refraction branch applies (horizon_refraction >= 4.84 deg).
    """
    refraction = 0.0
    if elevation >= -(SUN_RADIUS_DEG + horizon_refraction):
        tan_argument = to_radians(elevation + 10.3 / (elevation + 5.11))
        refraction = ((pressure / 1010.0) * (283.0 / (273.0 + temperature)) * 1.02
                      / (60.0 * math.tan(tan_argument)))
    return refraction


def refraction_corrected_elevation(elevation: float, refraction: float) -> float:
    return elevation + refraction


def topocentric_zenith_angle(corrected_elevation: float) -> float:
    return 90.0 - corrected_elevation


def astronomical_azimuth(hour_angle: float, latitude: float, declination: float) -> float:
    """Topocentric azimuth measured westward from south, [0, 360)."""
    h = to_radians(hour_angle)
    lat = to_radians(latitude)
    delta = to_radians(declination)
    gamma = math.atan2(
        math.sin(h),
        math.cos(h) * math.sin(lat) - math.tan(delta) * math.cos(lat),
    )
    return limit_degrees_0_to_360(to_degrees(gamma))


def geodesic_azimuth(astronomical: float) -> float:
    """Topocentric azimuth measured eastward from north, [0, 360)."""
    return limit_degrees_0_to_360(astronomical + 180.0)


def compute_topocentric_position(
    latitude: float,
    longitude: float,
    elevation: float,
    pressure: float,
    temperature: float,
    horizon_refraction: float,
    greenwich_sidereal_time: float,
    right_ascension: float,
    declination: float,
    earth_radius_vector: float,
) -> TopocentricPosition:
    """
    Reduce the geocentric equatorial position to the observer's horizon.

    Args:
        latitude: Observer latitude (degrees).
        longitude: Observer longitude (degrees, negative west).
        elevation: Observer elevation (m).
        pressure: Annual average local pressure (mbar).
        temperature: Annual average local temperature (deg C).
        horizon_refraction: Refraction at the horizon (degrees).
        greenwich_sidereal_time: Apparent sidereal time at Greenwich (degrees).
        right_ascension: Geocentric right ascension (degrees).
        declination: Geocentric declination (degrees).
        earth_radius_vector: Earth-Sun distance (AU).

    Returns:
        TopocentricPosition with every intermediate angle.
    """
    hour_angle = observer_hour_angle(greenwich_sidereal_time, longitude, right_ascension)
    parallax = equatorial_horizontal_parallax(earth_radius_vector)
    delta_alpha, topo_declination = right_ascension_parallax_and_topocentric_declination(
        latitude, elevation, parallax, hour_angle, declination,
    )
    topo_hour_angle = topocentric_hour_angle(hour_angle, delta_alpha)
    elevation_angle = topocentric_elevation(latitude, topo_declination, topo_hour_angle)
    refraction = atmospheric_refraction(pressure, temperature, horizon_refraction, elevation_angle)
    corrected = refraction_corrected_elevation(elevation_angle, refraction)
    azimuth = astronomical_azimuth(topo_hour_angle, latitude, topo_declination)

    return TopocentricPosition(
        observer_hour_angle=hour_angle,
        equatorial_horizontal_parallax=parallax,
        right_ascension_parallax=delta_alpha,
        topocentric_right_ascension=topocentric_right_ascension(right_ascension, delta_alpha),
        topocentric_declination=topo_declination,
        topocentric_hour_angle=topo_hour_angle,
        topocentric_elevation=elevation_angle,
        refraction_correction=refraction,
        topocentric_elevation_corrected=corrected,
        topocentric_zenith_angle=topocentric_zenith_angle(corrected),
        astronomical_azimuth=azimuth,
        topocentric_azimuth=geodesic_azimuth(azimuth),
    )
