"""
Tests for sphere distance conversion.
"""
import pytest
import math
import numpy as np
from spherical_toolkit.core.distance import (
    EARTH_RADIUS_M,
    to_rad,
    to_meter,
)

EARTH_CIRCUMFERENCE_M = 40_030_174.0


class TestToRadToMeter:
    """Tests for to_rad and to_meter functions."""

    def test_reversible(self):
        rng = np.random.default_rng(3)
        for rad in rng.random(500) * 2 * math.pi:
            assert to_rad(to_meter(rad)) == pytest.approx(rad, abs=1e-10)

    def test_zero(self):
        assert to_rad(0.0) == 0.0
        assert to_meter(0.0) == 0.0

    def test_full_turn(self):
        """A full turn is the Earth's circumference."""
        assert to_meter(2 * math.pi) == pytest.approx(EARTH_CIRCUMFERENCE_M, abs=0.5)
        assert to_rad(EARTH_CIRCUMFERENCE_M) == pytest.approx(2 * math.pi, abs=1e-6)

    def test_one_radius_is_one_radian(self):
        assert to_rad(EARTH_RADIUS_M) == 1.0

    def test_custom_radius(self):
        assert to_rad(500.0, radius=1000.0) == 0.5
        assert to_meter(0.5, radius=1000.0) == 500.0


class TestEarthRadius:
    """Tests for EARTH_RADIUS_M constant."""

    def test_earth_radius_value(self):
        assert EARTH_RADIUS_M == 6371000.0
