# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Nutation in longitude and obliquity, and the obliquity of the ecliptic.

Uses the 63-term nutation series driven by five fundamental arguments
(Meeus, Astronomical Algorithms, Ch. 22) and the Laskar polynomial for the
mean obliquity.

NumPy vectorized: all 63 series rows are evaluated in a single pass.
"""

from dataclasses import dataclass

import numpy as np

from timeofday.domain.angles import third_degree_polynomial
from timeofday.domain.periodic_terms import load_nutation_series


@dataclass(frozen=True)
class NutationTerms:
    """Fundamental arguments, nutation and obliquity for one epoch."""
    mean_elongation_moon_sun: float  # degrees
    mean_anomaly_sun: float  # degrees
    mean_anomaly_moon: float  # degrees
    moon_argument_of_latitude: float  # degrees
    moon_ascending_node_longitude: float  # degrees
    longitude_nutation: float  # degrees
    obliquity_nutation: float  # degrees
    mean_ecliptic_obliquity: float  # arcseconds
    true_ecliptic_obliquity: float  # degrees


# --------------------------------------------------------------------------- #
# Fundamental arguments (degrees, cubic in Julian Ephemeris Century)
# --------------------------------------------------------------------------- #

def mean_elongation_moon_sun(jce: float) -> float:
    """Mean elongation of the Moon from the Sun (D)."""
    return third_degree_polynomial(1.0 / 189474.0, -0.0019142, 445267.11148, 297.85036, jce)


def mean_anomaly_sun(jce: float) -> float:
    """Mean anomaly of the Sun (M)."""
    return third_degree_polynomial(-1.0 / 300000.0, -0.0001603, 35999.05034, 357.52772, jce)


def mean_anomaly_moon(jce: float) -> float:
    """Mean anomaly of the Moon (M')."""
    return third_degree_polynomial(1.0 / 56250.0, 0.0086972, 477198.867398, 134.96298, jce)


def moon_argument_of_latitude(jce: float) -> float:
    """Moon's argument of latitude (F)."""
    return third_degree_polynomial(1.0 / 327270.0, -0.0036825, 483202.017538, 93.27191, jce)


def moon_ascending_node_longitude(jce: float) -> float:
    """Longitude of the ascending node of the Moon's mean orbit (Omega)."""
    return third_degree_polynomial(1.0 / 450000.0, 0.0020708, -1934.136261, 125.04452, jce)


def fundamental_arguments(jce: float) -> tuple[float, float, float, float, float]:
    """Return (D, M, M', F, Omega) in degrees."""
    return (
        mean_elongation_moon_sun(jce),
        mean_anomaly_sun(jce),
        mean_anomaly_moon(jce),
        moon_argument_of_latitude(jce),
        moon_ascending_node_longitude(jce),
    )


# --------------------------------------------------------------------------- #
# Nutation series
# --------------------------------------------------------------------------- #

def nutation_in_longitude_and_obliquity(
    jce: float,
    arguments: tuple[float, float, float, float, float],
) -> tuple[float, float]:
    """
    Nutation in longitude (delta psi) and obliquity (delta epsilon).

    Args:
        jce: Julian Ephemeris Century.
        arguments: (D, M, M', F, Omega) in degrees.

    Returns:
        (delta_psi, delta_epsilon) in degrees.
    """
    series = load_nutation_series()

    # (63, 5) @ (5,) -> per-row argument, degrees -> radians
    phi = np.radians(series.multipliers @ np.array(arguments, dtype=np.float64))

    longitude_sum = np.sum((series.psi_a + jce * series.psi_b) * np.sin(phi))
    obliquity_sum = np.sum((series.eps_c + jce * series.eps_d) * np.cos(phi))

    return (
        float(longitude_sum / series.unit_divisor),
        float(obliquity_sum / series.unit_divisor),
    )


# --------------------------------------------------------------------------- #
# Obliquity of the ecliptic
# --------------------------------------------------------------------------- #

def mean_ecliptic_obliquity(jme: float) -> float:
    """Mean obliquity of the ecliptic in arcseconds (Laskar, U = JME/10)."""
    u = jme / 10.0
    return (84381.448
            + u * (-4680.93
                   + u * (-1.55
                          + u * (1999.25
                                 + u * (-51.38
                                        + u * (-249.67
                                               + u * (-39.05
                                                      + u * (7.12
                                                             + u * (27.87
                                                                    + u * (5.79
                                                                           + u * 2.45))))))))))


def true_ecliptic_obliquity(obliquity_nutation: float, mean_obliquity_arcsec: float) -> float:
    """True obliquity in degrees: delta epsilon + mean obliquity / 3600."""
    return obliquity_nutation + mean_obliquity_arcsec / 3600.0


def compute_nutation(jce: float, jme: float) -> NutationTerms:
    """Evaluate fundamental arguments, nutation and obliquity."""
    arguments = fundamental_arguments(jce)
    longitude_nutation, obliquity_nutation = nutation_in_longitude_and_obliquity(jce, arguments)
    mean_obliquity = mean_ecliptic_obliquity(jme)
    d, m, m_prime, f, omega = arguments
    return NutationTerms(
        mean_elongation_moon_sun=d,
        mean_anomaly_sun=m,
        mean_anomaly_moon=m_prime,
        moon_argument_of_latitude=f,
        moon_ascending_node_longitude=omega,
        longitude_nutation=longitude_nutation,
        obliquity_nutation=obliquity_nutation,
        mean_ecliptic_obliquity=mean_obliquity,
        true_ecliptic_obliquity=true_ecliptic_obliquity(obliquity_nutation, mean_obliquity),
    )
