# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for observation input validation."""
import ast
import math
from datetime import datetime

import pytest


def _observation(**overrides):
    from timeofday.domain.observation import ObservationInput

    fields = dict(
        timestamp=datetime(2003, 10, 17, 12, 30, 30),
        timezone_hours=-7.0,
        latitude_deg=39.742476,
        longitude_deg=-105.1786,
        delta_ut1_s=0.0,
        delta_t_s=67.0,
        elevation_m=1830.14,
        temperature_c=11.0,
        pressure_mbar=820.0,
    )
    fields.update(overrides)
    return ObservationInput(**fields)


class TestObservationInput:

    def test_defaults(self):
        from timeofday.domain.observation import ObservationInput

        obs = ObservationInput(
            timestamp=datetime(2016, 6, 10), timezone_hours=0.0,
            latitude_deg=0.0, longitude_deg=0.0,
        )
        assert obs.delta_ut1_s == 0.0
        assert obs.delta_t_s is None
        assert obs.elevation_m == 0.0
        assert obs.temperature_c == 15.0
        assert obs.pressure_mbar == 1013.25
        assert obs.horizon_refraction_deg is None

    def test_frozen(self):
        obs = _observation()
        with pytest.raises(AttributeError):
            obs.latitude_deg = 10.0

    def test_construction_does_not_validate(self):
        obs = _observation(latitude_deg=500.0)
        assert obs.latitude_deg == 500.0

    def test_horizon_refraction_default(self):
        from timeofday.domain.observation import resolve_horizon_refraction

        assert resolve_horizon_refraction(None) == 0.5667
        assert resolve_horizon_refraction(0.0) == 0.0
        assert resolve_horizon_refraction(1.2) == 1.2


class TestValidateObservation:

    def test_reference_observation_valid(self):
        from timeofday.domain.validation import validate_observation

        validate_observation(_observation())

    @pytest.mark.parametrize("overrides, field", [
        (dict(timezone_hours=100.0), "timezone_hours"),
        (dict(delta_ut1_s=-2.0), "delta_ut1_s"),
        (dict(delta_ut1_s=2.0), "delta_ut1_s"),
        (dict(delta_t_s=-67000.0), "delta_t_s"),
        (dict(delta_t_s=67000.0), "delta_t_s"),
        (dict(latitude_deg=-100.0), "latitude_deg"),
        (dict(latitude_deg=100.0), "latitude_deg"),
        (dict(longitude_deg=-200.0), "longitude_deg"),
        (dict(longitude_deg=200.0), "longitude_deg"),
        (dict(elevation_m=-7500000.0), "elevation_m"),
        (dict(temperature_c=-273.15), "temperature_c"),
        (dict(temperature_c=10000.0), "temperature_c"),
        (dict(pressure_mbar=-820.0), "pressure_mbar"),
        (dict(pressure_mbar=8200.0), "pressure_mbar"),
        (dict(horizon_refraction_deg=7.0), "horizon_refraction_deg"),
    ])
    def test_out_of_range(self, overrides, field):
        from timeofday.domain.validation import InvalidObservationInput, validate_observation

        with pytest.raises(InvalidObservationInput) as exc_info:
            validate_observation(_observation(**overrides))
        assert exc_info.value.field == field

    @pytest.mark.parametrize("overrides", [
        dict(timezone_hours=18.0),
        dict(timezone_hours=-18.0),
        dict(delta_t_s=8000.0),
        dict(delta_t_s=-8000.0),
        dict(delta_t_s=None),
        dict(latitude_deg=90.0),
        dict(latitude_deg=-90.0),
        dict(longitude_deg=180.0),
        dict(longitude_deg=-180.0),
        dict(elevation_m=-6500000.0),
        dict(pressure_mbar=0.0),
        dict(pressure_mbar=5000.0),
        dict(horizon_refraction_deg=5.0),
        dict(horizon_refraction_deg=-1.0),
    ])
    def test_inclusive_bounds_accepted(self, overrides):
        from timeofday.domain.validation import validate_observation

        validate_observation(_observation(**overrides))

    @pytest.mark.parametrize("overrides", [
        dict(delta_ut1_s=1.0),
        dict(delta_ut1_s=-1.0),
        dict(temperature_c=-273.0),
        dict(temperature_c=6000.0),
    ])
    def test_exclusive_bounds_rejected(self, overrides):
        from timeofday.domain.validation import InvalidObservationInput, validate_observation

        with pytest.raises(InvalidObservationInput):
            validate_observation(_observation(**overrides))

    @pytest.mark.parametrize("name", [
        "timezone_hours", "delta_ut1_s", "delta_t_s", "latitude_deg", "longitude_deg",
        "elevation_m", "temperature_c", "pressure_mbar", "horizon_refraction_deg",
    ])
    def test_nan_rejected(self, name):
        from timeofday.domain.validation import InvalidObservationInput, validate_observation

        with pytest.raises(InvalidObservationInput) as exc_info:
            validate_observation(_observation(**{name: math.nan}))
        assert exc_info.value.field == name

    def test_first_violation_reported(self):
        from timeofday.domain.validation import InvalidObservationInput, validate_observation

        with pytest.raises(InvalidObservationInput) as exc_info:
            validate_observation(_observation(latitude_deg=100.0, timezone_hours=30.0))
        assert exc_info.value.field == "timezone_hours"

    def test_is_value_error(self):
        from timeofday.domain.validation import validate_observation

        with pytest.raises(ValueError):
            validate_observation(_observation(latitude_deg=100.0))

    def test_message_names_field_and_bound(self):
        from timeofday.domain.validation import InvalidObservationInput, validate_observation

        with pytest.raises(InvalidObservationInput) as exc_info:
            validate_observation(_observation(latitude_deg=100.0))
        assert "latitude" in str(exc_info.value)
        assert "100.0" in str(exc_info.value)
        assert exc_info.value.bound == "-90 <= latitude_deg <= 90"

    def test_signature_annotated_with_observation_input(self):
        import typing
        from timeofday.domain.observation import ObservationInput
        from timeofday.domain.validation import validate_observation

        hints = typing.get_type_hints(validate_observation)
        assert hints['observation'] is ObservationInput
        assert hints['return'] is type(None)


class TestValidationPurity:

    def test_imports_only_stdlib_and_domain(self):
        import timeofday.domain.validation as mod

        allowed = {'typing'}
        with open(mod.__file__) as f:
            tree = ast.parse(f.read())

        for node in ast.walk(tree):
            if isinstance(node, ast.Import):
                for alias in node.names:
                    root = alias.name.split('.')[0]
                    assert root in allowed, f"Disallowed import '{alias.name}'"
            if isinstance(node, ast.ImportFrom):
                if node.module and node.level == 0:
                    root = node.module.split('.')[0]
                    assert root in allowed or root == 'timeofday', (
                        f"Disallowed import from '{node.module}'"
                    )
