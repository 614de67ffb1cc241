# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for angle helpers."""
import ast
import math

import pytest


class TestConversions:

    def test_to_degrees(self):
        from timeofday.domain.angles import to_degrees

        assert to_degrees(math.pi) == pytest.approx(180.0)
        assert to_degrees(-math.pi / 2) == pytest.approx(-90.0)

    def test_to_radians(self):
        from timeofday.domain.angles import to_radians

        assert to_radians(180.0) == pytest.approx(math.pi)
        assert to_radians(0.0) == 0.0

    def test_round_trip(self):
        from timeofday.domain.angles import to_degrees, to_radians

        assert to_degrees(to_radians(123.456)) == pytest.approx(123.456, abs=1e-12)


class TestLimitDegrees:

    def test_in_range_unchanged(self):
        from timeofday.domain.angles import limit_degrees_0_to_360

        assert limit_degrees_0_to_360(45.5) == 45.5
        assert limit_degrees_0_to_360(0.0) == 0.0
        assert limit_degrees_0_to_360(359.999) == 359.999

    def test_negative_wraps_up(self):
        from timeofday.domain.angles import limit_degrees_0_to_360

        assert limit_degrees_0_to_360(-30.0) == pytest.approx(330.0)
        assert limit_degrees_0_to_360(-720.0) == pytest.approx(0.0, abs=1e-9)

    def test_large_wraps_down(self):
        from timeofday.domain.angles import limit_degrees_0_to_360

        assert limit_degrees_0_to_360(725.0) == pytest.approx(5.0, abs=1e-9)
        assert limit_degrees_0_to_360(360.0) == 0.0

    def test_idempotent(self):
        from timeofday.domain.angles import limit_degrees_0_to_360

        for value in (-1234.5, -0.25, 17.0, 360.0, 98765.4321):
            once = limit_degrees_0_to_360(value)
            assert limit_degrees_0_to_360(once) == once

    def test_result_always_in_range(self):
        from timeofday.domain.angles import limit_degrees_0_to_360

        for value in (-1e-15, -359.9999999999, 719.9999999999, 1e9 + 0.5):
            result = limit_degrees_0_to_360(value)
            assert 0.0 <= result < 360.0


class TestThirdDegreePolynomial:

    def test_known_value(self):
        from timeofday.domain.angles import third_degree_polynomial

        # 1*8 + 2*4 + 3*2 + 4
        assert third_degree_polynomial(1.0, 2.0, 3.0, 4.0, 2.0) == 26.0

    def test_zero_argument_is_constant(self):
        from timeofday.domain.angles import third_degree_polynomial

        assert third_degree_polynomial(9.0, 8.0, 7.0, 297.85036, 0.0) == 297.85036


class TestAnglesPurity:

    def test_imports_only_stdlib(self):
        import timeofday.domain.angles as mod

        allowed = {'math'}
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
                    assert root in allowed, f"Disallowed import from '{node.module}'"
