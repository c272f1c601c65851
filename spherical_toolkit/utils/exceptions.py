"""
Custom exception hierarchy for the spherical toolkit.

All custom exceptions inherit from SphericalToolkitError for easy catching.
"""


class SphericalToolkitError(Exception):
    """Base exception for all spherical toolkit errors."""
    pass


class ConfigurationError(SphericalToolkitError):
    """Configuration-related errors.

    Raised when configuration loading or validation fails.

    Example:
        >>> raise ConfigurationError("Invalid config: 'solver.eps' must be positive")
    """
    pass


class NotCanonicalError(SphericalToolkitError):
    """Azimuth outside the canonical range [0, 2π).

    Attributes:
        azimuth: The offending azimuth (radians)
    """

    def __init__(self, message: str, azimuth: float = None):
        super().__init__(message)
        self.azimuth = azimuth

    def __str__(self):
        base = super().__str__()
        if self.azimuth is not None:
            return f"{base} (azimuth={self.azimuth!r})"
        return base


class NoBracketError(SphericalToolkitError):
    """Interval does not bracket a root.

    Raised when the function has the same sign at both ends of the
    interval, or when the interval bounds are out of order. Callers
    scanning for a root treat this as a signal to move on.

    Attributes:
        x1: Lower bound of the rejected interval
        x2: Upper bound of the rejected interval
    """

    def __init__(self, message: str, x1: float = None, x2: float = None):
        super().__init__(message)
        self.x1 = x1
        self.x2 = x2

    def __str__(self):
        base = super().__str__()
        if self.x1 is not None and self.x2 is not None:
            return f"{base} (interval=[{self.x1!r}, {self.x2!r}])"
        return base


class ParameterError(SphericalToolkitError):
    """Invalid numeric parameter (e.g. non-positive tolerance or step).

    Example:
        >>> raise ParameterError("Tolerance must be positive, got 0.0")
    """
    pass


class NonFiniteValueError(SphericalToolkitError):
    """A function under evaluation returned NaN."""
    pass
