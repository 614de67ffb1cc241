# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Periodic-term coefficient tables for the solar position reduction.

Two bundled datasets:
    earth_periodic_terms.json: Earth heliocentric longitude (L), latitude (B)
        and radius vector (R) terms, grouped into polynomial-degree buckets
        of (amplitude, phase, frequency) rows.
    nutation_terms.json: 63 rows pairing five integer multipliers of the
        fundamental arguments with the psi/epsilon coefficients.

Tables are loaded once per process into read-only NumPy arrays and shared
by every calculation.
"""

import json
import logging
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import numpy as np

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent.parent / "data"

# --------------------------------------------------------------------------- #
# Table containers
# --------------------------------------------------------------------------- #


@dataclass(frozen=True)
class EarthPeriodicTerms:
    """Heliocentric series, one (N, 3) array per polynomial degree."""
    longitude: tuple[np.ndarray, ...]
    latitude: tuple[np.ndarray, ...]
    radius: tuple[np.ndarray, ...]


@dataclass(frozen=True)
class NutationSeries:
    """Nutation series as column arrays over the 63 rows."""
    multipliers: np.ndarray  # (63, 5): D, M, M', F, Omega
    psi_a: np.ndarray
    psi_b: np.ndarray
    eps_c: np.ndarray
    eps_d: np.ndarray
    unit_divisor: float  # coefficient units -> degrees


# --------------------------------------------------------------------------- #
# Loading (cached, read-only)
# --------------------------------------------------------------------------- #

_EARTH_TERMS: Optional[EarthPeriodicTerms] = None
_NUTATION_SERIES: Optional[NutationSeries] = None
_LOAD_LOCK = threading.Lock()

_NUTATION_ARG_KEYS = ("D", "M", "Mp", "F", "Om")


def _read_only(values, dtype=np.float64) -> np.ndarray:
    array = np.array(values, dtype=dtype)
    array.setflags(write=False)
    return array


def _read_json(name: str) -> dict:
    with open(_DATA_DIR / name) as f:
        return json.load(f)


def load_earth_periodic_terms() -> EarthPeriodicTerms:
    """Load and cache the L, B, R periodic terms from bundled JSON."""
    global _EARTH_TERMS
    if _EARTH_TERMS is not None:
        return _EARTH_TERMS

    with _LOAD_LOCK:
        if _EARTH_TERMS is None:
            data = _read_json("earth_periodic_terms.json")
            _EARTH_TERMS = EarthPeriodicTerms(
                longitude=tuple(_read_only(bucket) for bucket in data["L"]),
                latitude=tuple(_read_only(bucket) for bucket in data["B"]),
                radius=tuple(_read_only(bucket) for bucket in data["R"]),
            )
            logger.debug(
                "Loaded Earth periodic terms: L=%s B=%s R=%s",
                [len(b) for b in _EARTH_TERMS.longitude],
                [len(b) for b in _EARTH_TERMS.latitude],
                [len(b) for b in _EARTH_TERMS.radius],
            )
    return _EARTH_TERMS


def load_nutation_series() -> NutationSeries:
    """Load and cache the 63-row nutation series from bundled JSON."""
    global _NUTATION_SERIES
    if _NUTATION_SERIES is not None:
        return _NUTATION_SERIES

    with _LOAD_LOCK:
        if _NUTATION_SERIES is None:
            data = _read_json("nutation_terms.json")
            terms = data["terms"]
            _NUTATION_SERIES = NutationSeries(
                multipliers=_read_only(
                    [[term[key] for key in _NUTATION_ARG_KEYS] for term in terms]
                ),
                psi_a=_read_only([term["psi_a"] for term in terms]),
                psi_b=_read_only([term["psi_b"] for term in terms]),
                eps_c=_read_only([term["eps_c"] for term in terms]),
                eps_d=_read_only([term["eps_d"] for term in terms]),
                unit_divisor=float(data["unit_divisor_to_deg"]),
            )
            logger.debug("Loaded %d nutation terms", len(terms))
    return _NUTATION_SERIES
