# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for nutation and the obliquity of the ecliptic."""
import pytest

# 2003-10-17 12:30:30 UTC-7 with delta T = 67 s
_JCE = 0.037927819922933584
_JME = _JCE / 10.0


class TestFundamentalArguments:

    def test_constant_terms_at_j2000(self):
        from timeofday.domain.nutation import fundamental_arguments

        assert fundamental_arguments(0.0) == (297.85036, 357.52772, 134.96298, 93.27191, 125.04452)

    def test_order(self):
        from timeofday.domain.nutation import (
            fundamental_arguments,
            mean_anomaly_moon,
            mean_anomaly_sun,
            mean_elongation_moon_sun,
            moon_argument_of_latitude,
            moon_ascending_node_longitude,
        )

        args = fundamental_arguments(_JCE)
        assert args == (
            mean_elongation_moon_sun(_JCE),
            mean_anomaly_sun(_JCE),
            mean_anomaly_moon(_JCE),
            moon_argument_of_latitude(_JCE),
            moon_ascending_node_longitude(_JCE),
        )

    def test_node_regresses(self):
        from timeofday.domain.nutation import moon_ascending_node_longitude

        assert moon_ascending_node_longitude(0.01) < moon_ascending_node_longitude(0.0)


class TestNutation:

    def test_reference_nutation(self):
        from timeofday.domain.nutation import (
            fundamental_arguments,
            nutation_in_longitude_and_obliquity,
        )

        delta_psi, delta_eps = nutation_in_longitude_and_obliquity(_JCE, fundamental_arguments(_JCE))
        assert delta_psi == pytest.approx(-0.00399840, abs=5e-9)
        assert delta_eps == pytest.approx(0.00166657, abs=5e-9)

    def test_nutation_amplitude_bounded(self):
        """Nutation in longitude stays within about 17.2 arcsec."""
        from timeofday.domain.nutation import (
            fundamental_arguments,
            nutation_in_longitude_and_obliquity,
        )

        for jce in (-0.5, -0.1, 0.0, 0.05, 0.2):
            delta_psi, delta_eps = nutation_in_longitude_and_obliquity(jce, fundamental_arguments(jce))
            assert abs(delta_psi) < 20.0 / 3600.0
            assert abs(delta_eps) < 12.0 / 3600.0


class TestObliquity:

    def test_mean_obliquity_at_j2000(self):
        from timeofday.domain.nutation import mean_ecliptic_obliquity

        assert mean_ecliptic_obliquity(0.0) == 84381.448

    def test_true_obliquity_adds_nutation(self):
        from timeofday.domain.nutation import true_ecliptic_obliquity

        assert true_ecliptic_obliquity(0.001, 3600.0) == pytest.approx(1.001)

    def test_reference_true_obliquity(self):
        from timeofday.domain.nutation import compute_nutation

        terms = compute_nutation(_JCE, _JME)
        assert terms.true_ecliptic_obliquity == pytest.approx(23.440465, abs=5e-7)
        assert terms.longitude_nutation == pytest.approx(-0.00399840, abs=5e-9)
        assert terms.obliquity_nutation == pytest.approx(0.00166657, abs=5e-9)

    def test_frozen(self):
        from timeofday.domain.nutation import compute_nutation

        terms = compute_nutation(0.0, 0.0)
        with pytest.raises(AttributeError):
            terms.longitude_nutation = 0.0
