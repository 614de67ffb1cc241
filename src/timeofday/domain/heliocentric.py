# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Earth heliocentric position and the Sun's geocentric ecliptic coordinates.

Each quantity is a polynomial in the Julian Ephemeris Millennium whose
coefficients are sums of periodic terms A*cos(B + C*tau) over one bucket
of the L, B or R table. NumPy vectorized per bucket.
"""
from dataclasses import dataclass

import numpy as np

from timeofday.domain.angles import limit_degrees_0_to_360, to_degrees
from timeofday.domain.periodic_terms import load_earth_periodic_terms

_SERIES_SCALE: float = 1.0e8


@dataclass(frozen=True)
class HeliocentricPosition:
    """Earth heliocentric and Sun geocentric ecliptic coordinates."""
    earth_heliocentric_longitude: float  # degrees, [0, 360)
    earth_heliocentric_latitude: float  # degrees
    earth_radius_vector: float  # AU
    geocentric_longitude: float  # degrees, [0, 360)
    geocentric_latitude: float  # degrees


def sum_periodic_terms(terms: np.ndarray, jme: float) -> float:
    """Sum A*cos(B + C*jme) over the rows of one (N, 3) bucket."""
    return float(np.sum(terms[:, 0] * np.cos(terms[:, 1] + terms[:, 2] * jme)))


def _evaluate_series(buckets: tuple[np.ndarray, ...], jme: float) -> float:
    """Combine bucket sums as sum(L_i * jme^i) / 1e8."""
    total = 0.0
    for degree, bucket in enumerate(buckets):
        total += sum_periodic_terms(bucket, jme) * jme ** degree
    return total / _SERIES_SCALE


def earth_heliocentric_longitude(jme: float) -> float:
    """Earth heliocentric longitude in degrees, [0, 360)."""
    radians = _evaluate_series(load_earth_periodic_terms().longitude, jme)
    return limit_degrees_0_to_360(to_degrees(radians))


def earth_heliocentric_latitude(jme: float) -> float:
    """Earth heliocentric latitude in degrees."""
    return to_degrees(_evaluate_series(load_earth_periodic_terms().latitude, jme))


def earth_radius_vector(jme: float) -> float:
    """Earth-Sun distance in astronomical units."""
    return _evaluate_series(load_earth_periodic_terms().radius, jme)


def geocentric_longitude(heliocentric_longitude: float) -> float:
    """Sun geocentric longitude: heliocentric + 180, wrapped once into [0, 360)."""
    longitude = heliocentric_longitude + 180.0
    if longitude >= 360.0:
        longitude -= 360.0
    return longitude


def geocentric_latitude(heliocentric_latitude: float) -> float:
    """Sun geocentric latitude: negated heliocentric latitude."""
    return -heliocentric_latitude


def compute_heliocentric_position(jme: float) -> HeliocentricPosition:
    """Evaluate the L, B, R series at a Julian Ephemeris Millennium."""
    longitude = earth_heliocentric_longitude(jme)
    latitude = earth_heliocentric_latitude(jme)
    return HeliocentricPosition(
        earth_heliocentric_longitude=longitude,
        earth_heliocentric_latitude=latitude,
        earth_radius_vector=earth_radius_vector(jme),
        geocentric_longitude=geocentric_longitude(longitude),
        geocentric_latitude=geocentric_latitude(latitude),
    )
