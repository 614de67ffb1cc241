# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Time of Day

Topocentric position of the Sun (zenith angle and azimuth) for an observer
at a given local time, computed with the NREL Solar Position Algorithm,
and classification of that moment as day, dawn, dusk or night. Includes
Julian time scales, Earth heliocentric periodic terms, nutation and
obliquity, parallax and refraction corrections, fixed-step day sweeps and
CSV export.
"""

from timeofday.domain.angles import (
    to_degrees,
    to_radians,
    limit_degrees_0_to_360,
    third_degree_polynomial,
)
from timeofday.domain.periodic_terms import (
    EarthPeriodicTerms,
    NutationSeries,
    load_earth_periodic_terms,
    load_nutation_series,
)
from timeofday.domain.time_scales import (
    TimeScales,
    julian_day,
    estimate_delta_t,
    julian_ephemeris_day,
    julian_century,
    julian_ephemeris_century,
    julian_ephemeris_millennium,
    compute_time_scales,
)
from timeofday.domain.heliocentric import (
    HeliocentricPosition,
    earth_heliocentric_longitude,
    earth_heliocentric_latitude,
    earth_radius_vector,
    compute_heliocentric_position,
)
from timeofday.domain.nutation import (
    NutationTerms,
    compute_nutation,
)
from timeofday.domain.equatorial import (
    EquatorialPosition,
    compute_equatorial_position,
)
from timeofday.domain.topocentric import (
    TopocentricPosition,
    atmospheric_refraction,
    compute_topocentric_position,
)
from timeofday.domain.validation import (
    InvalidObservationInput,
    validate_observation,
)
from timeofday.domain.observation import ObservationInput
from timeofday.domain.solar_position import (
    SolarPositionResult,
    compute_solar_position,
)
from timeofday.domain.part_of_day import (
    CIVIL_TWILIGHT_DEG,
    NAUTICAL_TWILIGHT_DEG,
    ASTRONOMICAL_TWILIGHT_DEG,
    PartOfDay,
    part_of_day_from_position,
    classify_part_of_day,
)
from timeofday.domain.day_sweep import (
    SweepSample,
    sweep_solar_positions,
)

__all__ = [
    "to_degrees",
    "to_radians",
    "limit_degrees_0_to_360",
    "third_degree_polynomial",
    "EarthPeriodicTerms",
    "NutationSeries",
    "load_earth_periodic_terms",
    "load_nutation_series",
    "TimeScales",
    "julian_day",
    "estimate_delta_t",
    "julian_ephemeris_day",
    "julian_century",
    "julian_ephemeris_century",
    "julian_ephemeris_millennium",
    "compute_time_scales",
    "HeliocentricPosition",
    "earth_heliocentric_longitude",
    "earth_heliocentric_latitude",
    "earth_radius_vector",
    "compute_heliocentric_position",
    "NutationTerms",
    "compute_nutation",
    "EquatorialPosition",
    "compute_equatorial_position",
    "TopocentricPosition",
    "atmospheric_refraction",
    "compute_topocentric_position",
    "InvalidObservationInput",
    "validate_observation",
    "ObservationInput",
    "SolarPositionResult",
    "compute_solar_position",
    "CIVIL_TWILIGHT_DEG",
    "NAUTICAL_TWILIGHT_DEG",
    "ASTRONOMICAL_TWILIGHT_DEG",
    "PartOfDay",
    "part_of_day_from_position",
    "classify_part_of_day",
    "SweepSample",
    "sweep_solar_positions",
]
