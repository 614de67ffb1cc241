# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for solar position and part of day.

Usage:
    # Sun position and part of day at one moment
    timeofday --date 2003-10-17T12:30:30 --timezone -7 \\
        --latitude 39.742476 --longitude -105.1786 \\
        --elevation 1830.14 --temperature 11 --pressure 820 --delta-t 67

    # Same, as JSON
    timeofday --date 2016-06-28T12:00 --timezone 3 \\
        --latitude 42.72 --longitude 23.30 --json

    # Sweep a day in 10 minute steps and export to CSV
    timeofday --date 2016-06-28T00:00 --timezone 3 \\
        --latitude 42.72 --longitude 23.30 \\
        --export-csv sofia.csv --duration-hours 24 --step-minutes 10
"""
import argparse
import json
import logging
import sys
from datetime import datetime, timedelta

from timeofday.adapters import CsvSolarPositionExporter
from timeofday.domain.day_sweep import sweep_solar_positions
from timeofday.domain.observation import (
    DEFAULT_ELEVATION_M,
    DEFAULT_PRESSURE_MBAR,
    DEFAULT_TEMPERATURE_C,
    ObservationInput,
)
from timeofday.domain.part_of_day import (
    ASTRONOMICAL_TWILIGHT_DEG,
    CIVIL_TWILIGHT_DEG,
    NAUTICAL_TWILIGHT_DEG,
    PartOfDay,
    part_of_day_from_position,
)
from timeofday.domain.solar_position import SolarPositionResult, compute_solar_position

TWILIGHT_CHOICES: dict[str, float] = {
    'civil': CIVIL_TWILIGHT_DEG,
    'nautical': NAUTICAL_TWILIGHT_DEG,
    'astronomical': ASTRONOMICAL_TWILIGHT_DEG,
}


def position_summary(position: SolarPositionResult, part_of_day: PartOfDay) -> dict:
    """Headline values of a solar position, keyed for JSON output."""
    return {
        'julian_day': position.julian_day,
        'delta_t_s': position.delta_t_s,
        'right_ascension_deg': position.topocentric_right_ascension,
        'declination_deg': position.topocentric_declination,
        'elevation_deg': position.topocentric_elevation_corrected,
        'zenith_angle_deg': position.topocentric_zenith_angle,
        'azimuth_deg': position.topocentric_azimuth,
        'astronomical_azimuth_deg': position.astronomical_azimuth,
        'part_of_day': part_of_day.value,
    }


def run(
    observation: ObservationInput,
    twilight_elevation_deg: float = NAUTICAL_TWILIGHT_DEG,
) -> tuple[SolarPositionResult, PartOfDay]:
    """
    Compute the Sun's position and classify it.

    Returns:
        (position, part_of_day) for the observation.
    """
    position = compute_solar_position(observation)
    part = part_of_day_from_position(
        position.topocentric_zenith_angle,
        position.astronomical_azimuth,
        twilight_elevation_deg,
    )
    return position, part


def _parse_date(value: str) -> datetime:
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid ISO date: {value!r}")


def main():
    parser = argparse.ArgumentParser(
        description="Compute the Sun's position and part of day for an observer"
    )
    parser.add_argument(
        '--date', required=True, type=_parse_date,
        help="Local date and time, ISO 8601 (e.g. 2016-06-28T12:00)"
    )
    parser.add_argument(
        '--timezone', required=True, type=float,
        help="UTC offset in hours (negative west of Greenwich)"
    )
    parser.add_argument(
        '--latitude', required=True, type=float,
        help="Observer latitude in degrees (negative south)"
    )
    parser.add_argument(
        '--longitude', required=True, type=float,
        help="Observer longitude in degrees (negative west)"
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true', default=False,
        help="Enable debug logging"
    )

    observer_group = parser.add_argument_group('observer and atmosphere')
    observer_group.add_argument(
        '--delta-ut1', type=float, default=0.0,
        help="UT1 - UTC in seconds (default: 0)"
    )
    observer_group.add_argument(
        '--delta-t', type=float, default=None,
        help="TT - UT1 in seconds (default: estimated from the date)"
    )
    observer_group.add_argument(
        '--elevation', type=float, default=DEFAULT_ELEVATION_M,
        help=f"Observer elevation in metres (default: {DEFAULT_ELEVATION_M:g})"
    )
    observer_group.add_argument(
        '--temperature', type=float, default=DEFAULT_TEMPERATURE_C,
        help=f"Annual average temperature in C (default: {DEFAULT_TEMPERATURE_C:g})"
    )
    observer_group.add_argument(
        '--pressure', type=float, default=DEFAULT_PRESSURE_MBAR,
        help=f"Annual average pressure in mbar (default: {DEFAULT_PRESSURE_MBAR:g})"
    )
    observer_group.add_argument(
        '--refraction', type=float, default=None,
        help="Atmospheric refraction at the horizon in degrees (default: 0.5667)"
    )
    observer_group.add_argument(
        '--twilight', choices=sorted(TWILIGHT_CHOICES), default='nautical',
        help="Twilight definition used for dawn and dusk (default: nautical)"
    )

    output_group = parser.add_argument_group('output')
    output_group.add_argument(
        '--json', action='store_true', default=False,
        help="Print the result as JSON"
    )
    output_group.add_argument(
        '--export-csv',
        help="Sweep from --date and export samples to CSV"
    )
    output_group.add_argument(
        '--duration-hours', type=float, default=24.0,
        help="Sweep duration in hours (default: 24)"
    )
    output_group.add_argument(
        '--step-minutes', type=float, default=10.0,
        help="Sweep step in minutes (default: 10)"
    )

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    observation = ObservationInput(
        timestamp=args.date,
        timezone_hours=args.timezone,
        latitude_deg=args.latitude,
        longitude_deg=args.longitude,
        delta_ut1_s=args.delta_ut1,
        delta_t_s=args.delta_t,
        elevation_m=args.elevation,
        temperature_c=args.temperature,
        pressure_mbar=args.pressure,
        horizon_refraction_deg=args.refraction,
    )
    twilight = TWILIGHT_CHOICES[args.twilight]

    try:
        position, part = run(observation, twilight_elevation_deg=twilight)

        if args.json:
            print(json.dumps(position_summary(position, part), indent=2))
        else:
            print(f"Zenith angle: {position.topocentric_zenith_angle:.6f} deg")
            print(f"Azimuth:      {position.topocentric_azimuth:.6f} deg")
            print(f"Part of day:  {part.value}")

        if args.export_csv:
            samples = sweep_solar_positions(
                observation,
                duration=timedelta(hours=args.duration_hours),
                step=timedelta(minutes=args.step_minutes),
                twilight_elevation_deg=twilight,
            )
            csv_count = CsvSolarPositionExporter().export(samples, args.export_csv)
            print(f"Exported {csv_count} samples to {args.export_csv}")

    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
