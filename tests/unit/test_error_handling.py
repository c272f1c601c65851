"""
Unit tests for argument validation decorators.
"""
import pytest
import math
from spherical_toolkit.utils.error_handling import (
    require_canonical,
    require_positive,
)
from spherical_toolkit.utils.exceptions import NotCanonicalError, ParameterError


class TestRequireCanonical:
    """Test require_canonical decorator."""

    def test_passes_canonical_values(self):
        @require_canonical('a', 'b')
        def add(a, b):
            return a + b

        assert add(1.0, 2.0) == 3.0

    def test_raises_on_positional(self):
        @require_canonical('az')
        def identity(az):
            return az

        with pytest.raises(NotCanonicalError) as exc_info:
            identity(-0.1)

        assert 'identity' in str(exc_info.value)
        assert exc_info.value.azimuth == -0.1

    def test_raises_on_keyword(self):
        @require_canonical('az')
        def identity(az):
            return az

        with pytest.raises(NotCanonicalError):
            identity(az=2 * math.pi)

    def test_checks_defaults(self):
        @require_canonical('az')
        def with_default(az=10.0):
            return az

        with pytest.raises(NotCanonicalError):
            with_default()

    def test_unchecked_parameters_ignored(self):
        @require_canonical('az')
        def label(az, suffix):
            return f"{az}{suffix}"

        assert label(0.0, -99) == "0.0-99"

    def test_unknown_parameter_name(self):
        with pytest.raises(TypeError):
            @require_canonical('missing')
            def identity(az):
                return az

    def test_preserves_metadata(self):
        @require_canonical('az')
        def documented(az):
            """Docstring."""
            return az

        assert documented.__name__ == 'documented'
        assert documented.__doc__ == "Docstring."


class TestRequirePositive:
    """Test require_positive decorator."""

    def test_passes_positive(self):
        @require_positive('step')
        def halve(step):
            return step / 2

        assert halve(1.0) == 0.5

    @pytest.mark.parametrize("value", [0.0, -1.0, math.nan])
    def test_rejects_non_positive(self, value):
        @require_positive('step')
        def halve(step):
            return step / 2

        with pytest.raises(ParameterError) as exc_info:
            halve(value)

        assert "'step' must be positive" in str(exc_info.value)

    def test_infinity_is_positive(self):
        @require_positive('step')
        def identity(step):
            return step

        assert identity(math.inf) == math.inf
