# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
CSV solar position exporter.

Exports sweep samples as CSV, one row per sample.
External dependencies (csv, file I/O) are confined to this adapter.
"""
import csv
import logging

from timeofday.ports.export import SolarPositionExporter
from timeofday.domain.day_sweep import SweepSample

logger = logging.getLogger(__name__)

_HEADER = [
    'timestamp', 'julian_day', 'delta_t_s',
    'right_ascension_deg', 'declination_deg',
    'elevation_deg', 'refraction_deg', 'zenith_angle_deg',
    'astronomical_azimuth_deg', 'azimuth_deg', 'part_of_day',
]


class CsvSolarPositionExporter(SolarPositionExporter):
    """Exports solar position samples to CSV."""

    def export(self, samples: list[SweepSample], path: str) -> int:
        if not samples:
            logger.warning("No samples to export, writing header only to %s", path)

        with open(path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(_HEADER)

            for sample in samples:
                pos = sample.position
                writer.writerow([
                    sample.timestamp.isoformat(),
                    f'{pos.julian_day:.6f}',
                    f'{pos.delta_t_s:.3f}',
                    f'{pos.topocentric_right_ascension:.6f}',
                    f'{pos.topocentric_declination:.6f}',
                    f'{pos.topocentric_elevation_corrected:.6f}',
                    f'{pos.refraction_correction:.6f}',
                    f'{pos.topocentric_zenith_angle:.6f}',
                    f'{pos.astronomical_azimuth:.6f}',
                    f'{pos.topocentric_azimuth:.6f}',
                    sample.part_of_day.value,
                ])

        logger.debug("Exported %d samples to %s", len(samples), path)
        return len(samples)
