# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Solar position pipeline.

Reduces an ObservationInput to the Sun's topocentric zenith angle and
azimuth, following the NREL Solar Position Algorithm (Reda & Andreas
2004, accuracy +/-0.0003 deg):

    validate -> Julian time scales -> Earth heliocentric L, B, R
    -> nutation and obliquity -> apparent equatorial coordinates
    -> parallax, refraction, zenith angle and azimuth

Each stage returns its own frozen record; the result flattens all of
them so every intermediate value can be checked independently.
"""
from dataclasses import dataclass

from timeofday.domain.equatorial import compute_equatorial_position
from timeofday.domain.heliocentric import compute_heliocentric_position
from timeofday.domain.nutation import compute_nutation
from timeofday.domain.observation import ObservationInput, resolve_horizon_refraction
from timeofday.domain.time_scales import compute_time_scales, julian_day
from timeofday.domain.topocentric import compute_topocentric_position
from timeofday.domain.validation import validate_observation


@dataclass(frozen=True)
class SolarPositionResult:
    """Sun position for one observation, with every intermediate value.

    Angles are in degrees unless noted.
    """
    # Resolved inputs
    delta_t_s: float
    horizon_refraction_deg: float

    # Time scales
    julian_day: float
    julian_century: float
    julian_ephemeris_day: float
    julian_ephemeris_century: float
    julian_ephemeris_millennium: float

    # Heliocentric / geocentric ecliptic
    earth_heliocentric_longitude: float
    earth_heliocentric_latitude: float
    earth_radius_vector: float  # AU
    geocentric_longitude: float
    geocentric_latitude: float

    # Nutation and obliquity
    mean_elongation_moon_sun: float
    mean_anomaly_sun: float
    mean_anomaly_moon: float
    moon_argument_of_latitude: float
    moon_ascending_node_longitude: float
    longitude_nutation: float
    obliquity_nutation: float
    mean_ecliptic_obliquity: float  # arcseconds
    true_ecliptic_obliquity: float

    # Geocentric equatorial
    aberration_correction: float
    apparent_sun_longitude: float
    greenwich_mean_sidereal_time: float
    greenwich_sidereal_time: float
    geocentric_right_ascension: float
    geocentric_declination: float

    # Topocentric
    observer_hour_angle: float
    equatorial_horizontal_parallax: float
    right_ascension_parallax: float
    topocentric_right_ascension: float
    topocentric_declination: float
    topocentric_hour_angle: float
    topocentric_elevation: float
    refraction_correction: float
    topocentric_elevation_corrected: float

    # Outputs
    topocentric_zenith_angle: float  # [0, 180]
    astronomical_azimuth: float  # westward from south, [0, 360)
    topocentric_azimuth: float  # eastward from north, [0, 360)


def compute_solar_position(observation: ObservationInput) -> SolarPositionResult:
    """
    Compute the topocentric position of the Sun.

    Args:
        observation: Time, place and atmosphere of the observation.

    Returns:
        SolarPositionResult with zenith angle, azimuths and all
        intermediate quantities.

    Raises:
        InvalidObservationInput: If any field is out of range. Raised
            before any computation takes place.
    """
    validate_observation(observation)

    horizon_refraction = resolve_horizon_refraction(observation.horizon_refraction_deg)
    jd = julian_day(observation.timestamp, observation.timezone_hours, observation.delta_ut1_s)
    times = compute_time_scales(jd, observation.delta_t_s)

    helio = compute_heliocentric_position(times.julian_ephemeris_millennium)
    nutation = compute_nutation(times.julian_ephemeris_century, times.julian_ephemeris_millennium)
    equatorial = compute_equatorial_position(
        jd=times.julian_day,
        jc=times.julian_century,
        geocentric_longitude=helio.geocentric_longitude,
        geocentric_latitude=helio.geocentric_latitude,
        earth_radius_vector=helio.earth_radius_vector,
        longitude_nutation=nutation.longitude_nutation,
        true_obliquity=nutation.true_ecliptic_obliquity,
    )
    topo = compute_topocentric_position(
        latitude=observation.latitude_deg,
        longitude=observation.longitude_deg,
        elevation=observation.elevation_m,
        pressure=observation.pressure_mbar,
        temperature=observation.temperature_c,
        horizon_refraction=horizon_refraction,
        greenwich_sidereal_time=equatorial.greenwich_sidereal_time,
        right_ascension=equatorial.geocentric_right_ascension,
        declination=equatorial.geocentric_declination,
        earth_radius_vector=helio.earth_radius_vector,
    )

    return SolarPositionResult(
        delta_t_s=times.delta_t_s,
        horizon_refraction_deg=horizon_refraction,
        julian_day=times.julian_day,
        julian_century=times.julian_century,
        julian_ephemeris_day=times.julian_ephemeris_day,
        julian_ephemeris_century=times.julian_ephemeris_century,
        julian_ephemeris_millennium=times.julian_ephemeris_millennium,
        earth_heliocentric_longitude=helio.earth_heliocentric_longitude,
        earth_heliocentric_latitude=helio.earth_heliocentric_latitude,
        earth_radius_vector=helio.earth_radius_vector,
        geocentric_longitude=helio.geocentric_longitude,
        geocentric_latitude=helio.geocentric_latitude,
        mean_elongation_moon_sun=nutation.mean_elongation_moon_sun,
        mean_anomaly_sun=nutation.mean_anomaly_sun,
        mean_anomaly_moon=nutation.mean_anomaly_moon,
        moon_argument_of_latitude=nutation.moon_argument_of_latitude,
        moon_ascending_node_longitude=nutation.moon_ascending_node_longitude,
        longitude_nutation=nutation.longitude_nutation,
        obliquity_nutation=nutation.obliquity_nutation,
        mean_ecliptic_obliquity=nutation.mean_ecliptic_obliquity,
        true_ecliptic_obliquity=nutation.true_ecliptic_obliquity,
        aberration_correction=equatorial.aberration_correction,
        apparent_sun_longitude=equatorial.apparent_sun_longitude,
        greenwich_mean_sidereal_time=equatorial.greenwich_mean_sidereal_time,
        greenwich_sidereal_time=equatorial.greenwich_sidereal_time,
        geocentric_right_ascension=equatorial.geocentric_right_ascension,
        geocentric_declination=equatorial.geocentric_declination,
        observer_hour_angle=topo.observer_hour_angle,
        equatorial_horizontal_parallax=topo.equatorial_horizontal_parallax,
        right_ascension_parallax=topo.right_ascension_parallax,
        topocentric_right_ascension=topo.topocentric_right_ascension,
        topocentric_declination=topo.topocentric_declination,
        topocentric_hour_angle=topo.topocentric_hour_angle,
        topocentric_elevation=topo.topocentric_elevation,
        refraction_correction=topo.refraction_correction,
        topocentric_elevation_corrected=topo.topocentric_elevation_corrected,
        topocentric_zenith_angle=topo.topocentric_zenith_angle,
        astronomical_azimuth=topo.astronomical_azimuth,
        topocentric_azimuth=topo.topocentric_azimuth,
    )
