# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Fixed-step sweep of the Sun's position over a time span.

Evaluates the solar position pipeline at regular wall-clock steps for a
fixed observer and classifies each sample.

No external dependencies — only stdlib dataclasses/datetime.
"""
from dataclasses import dataclass, replace
from datetime import datetime, timedelta

from timeofday.domain.observation import ObservationInput
from timeofday.domain.part_of_day import (
    TWILIGHT_ELEVATION_DEG,
    PartOfDay,
    part_of_day_from_position,
)
from timeofday.domain.solar_position import SolarPositionResult, compute_solar_position


@dataclass(frozen=True)
class SweepSample:
    """Sun position and part of day at one sweep step."""
    timestamp: datetime
    position: SolarPositionResult
    part_of_day: PartOfDay


def sweep_solar_positions(
    observation: ObservationInput,
    duration: timedelta,
    step: timedelta,
    twilight_elevation_deg: float = TWILIGHT_ELEVATION_DEG,
) -> list[SweepSample]:
    """
    Sample the Sun's position from observation.timestamp onwards.

    Args:
        observation: Observer, atmosphere and start time.
        duration: Total span to cover; the end point is included when it
            falls on a step.
        step: Time between samples.
        twilight_elevation_deg: Twilight depression used for classification.

    Returns:
        List of SweepSample objects, chronologically ordered.

    Raises:
        ValueError: If step is zero or negative.
        InvalidObservationInput: If the observation is out of range.
    """
    step_seconds = step.total_seconds()
    if step_seconds <= 0:
        raise ValueError(f"Step must be positive, got {step}")

    duration_seconds = duration.total_seconds()
    samples: list[SweepSample] = []

    elapsed = 0.0
    while elapsed <= duration_seconds + 1e-9:
        current_time = observation.timestamp + timedelta(seconds=elapsed)
        position = compute_solar_position(replace(observation, timestamp=current_time))
        samples.append(SweepSample(
            timestamp=current_time,
            position=position,
            part_of_day=part_of_day_from_position(
                position.topocentric_zenith_angle,
                position.astronomical_azimuth,
                twilight_elevation_deg,
            ),
        ))
        elapsed += step_seconds

    return samples
