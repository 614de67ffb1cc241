# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for the CSV solar position exporter."""
import csv
import logging
from datetime import datetime, timedelta

import pytest


def _samples(hours=1):
    from timeofday.domain.observation import ObservationInput
    from timeofday.domain.day_sweep import sweep_solar_positions

    observation = ObservationInput(
        timestamp=datetime(2016, 6, 28, 12, 0, 0),
        timezone_hours=3.0,
        latitude_deg=42.72275253,
        longitude_deg=23.2992956,
        delta_t_s=67.0,
    )
    return sweep_solar_positions(observation, timedelta(hours=hours), timedelta(minutes=30))


class TestCsvSolarPositionExporter:

    def test_implements_port(self):
        from timeofday.adapters.csv_exporter import CsvSolarPositionExporter
        from timeofday.ports.export import SolarPositionExporter

        assert isinstance(CsvSolarPositionExporter(), SolarPositionExporter)

    def test_returns_count(self, tmp_path):
        from timeofday.adapters.csv_exporter import CsvSolarPositionExporter

        path = str(tmp_path / "sun.csv")
        assert CsvSolarPositionExporter().export(_samples(), path) == 3

    def test_header_and_rows(self, tmp_path):
        from timeofday.adapters.csv_exporter import CsvSolarPositionExporter

        path = tmp_path / "sun.csv"
        samples = _samples()
        CsvSolarPositionExporter().export(samples, str(path))

        with open(path, newline='', encoding='utf-8') as f:
            rows = list(csv.DictReader(f))

        assert len(rows) == 3
        assert rows[0]['timestamp'] == '2016-06-28T12:00:00'
        assert rows[0]['part_of_day'] == 'day'
        assert float(rows[0]['zenith_angle_deg']) == pytest.approx(
            samples[0].position.topocentric_zenith_angle, abs=1e-6,
        )
        assert float(rows[2]['azimuth_deg']) == pytest.approx(
            samples[2].position.topocentric_azimuth, abs=1e-6,
        )

    def test_no_warning_with_samples(self, tmp_path, caplog):
        from timeofday.adapters.csv_exporter import CsvSolarPositionExporter

        with caplog.at_level(logging.WARNING, logger="timeofday.adapters.csv_exporter"):
            CsvSolarPositionExporter().export(_samples(), str(tmp_path / "sun.csv"))

        warnings = [r for r in caplog.records if r.levelno >= logging.WARNING]
        assert len(warnings) == 0, f"No warning expected, got: {warnings}"

    def test_empty_writes_header_and_warns(self, tmp_path, caplog):
        from timeofday.adapters.csv_exporter import CsvSolarPositionExporter

        path = tmp_path / "empty.csv"
        with caplog.at_level(logging.WARNING, logger="timeofday.adapters.csv_exporter"):
            count = CsvSolarPositionExporter().export([], str(path))

        assert count == 0
        lines = path.read_text(encoding='utf-8').splitlines()
        assert len(lines) == 1
        assert lines[0].startswith('timestamp,')
        warnings = [r for r in caplog.records if r.levelno >= logging.WARNING]
        assert any("No samples" in r.message for r in warnings)
