"""
Tests for angular arithmetic.
"""
import pytest
import math
import numpy as np
from spherical_toolkit.core.angles import (
    TAU,
    haversin,
    angular_distance,
)


@pytest.fixture
def rng():
    return np.random.default_rng(20240611)


def random_angles(rng, size=500):
    return np.radians(rng.uniform(-180.0, 180.0, size=size))


class TestHaversin:
    """Tests for haversin function."""

    def test_zero(self):
        assert haversin(0.0) == 0.0

    def test_half_turn(self):
        assert haversin(math.pi) == pytest.approx(1.0)

    def test_matches_cosine_identity(self, rng):
        """haversin(a) == (1 - cos a) / 2."""
        for a in random_angles(rng):
            assert haversin(a) == pytest.approx((1 - math.cos(a)) / 2, abs=1e-10)

    def test_vectorised(self, rng):
        angles = random_angles(rng, size=50)
        result = haversin(angles)
        assert result.shape == angles.shape
        np.testing.assert_allclose(result, (1 - np.cos(angles)) / 2, atol=1e-10)


class TestAngularDistance:
    """Tests for angular_distance function."""

    @pytest.mark.parametrize("a1, a2, expected", [
        (0, 45, 45),
        (45, 0, -45),
        (0, 179, 179),
        (0, 181, -179),
        (181, 359, 178),
        (181, 2, -179),
    ])
    def test_known_angles(self, a1, a2, expected):
        """Known differences in degrees, including wrap-around cases."""
        actual = angular_distance(math.radians(a1), math.radians(a2))
        assert actual == pytest.approx(math.radians(expected), abs=1e-10)

    def test_same_angle(self):
        assert angular_distance(1.0, 1.0) == 0.0

    def test_full_turn_offset(self):
        """Angles a full turn apart are the same direction."""
        assert angular_distance(0.5, 0.5 + TAU) == pytest.approx(0.0, abs=1e-10)
        assert angular_distance(0.5, 0.5 - 3 * TAU) == pytest.approx(0.0, abs=1e-10)

    def test_half_turn_is_negative_pi(self):
        """Exactly opposite directions land on the closed end of the range."""
        assert angular_distance(0.0, math.pi) == -math.pi

    def test_range(self, rng):
        """Result should always be in [-π, π)."""
        for a1, a2 in zip(random_angles(rng), random_angles(rng)):
            d = angular_distance(a1, a2)
            assert -math.pi <= d < math.pi

    def test_range_for_large_inputs(self, rng):
        for a1, a2 in rng.uniform(-1e4, 1e4, size=(500, 2)):
            d = angular_distance(a1, a2)
            assert -math.pi <= d < math.pi

    def test_symmetry(self, rng):
        """Swapping the arguments negates the result."""
        for a1, a2 in zip(random_angles(rng), random_angles(rng)):
            total = angular_distance(a1, a2) + angular_distance(a2, a1)
            assert total == pytest.approx(0.0, abs=1e-10)

    def test_nan_propagates(self):
        assert math.isnan(angular_distance(math.nan, 0.0))

    def test_infinity_gives_nan(self):
        assert math.isnan(angular_distance(0.0, math.inf))
