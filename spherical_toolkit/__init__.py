"""
Spherical geometry and numeric helpers.

Angular distance, azimuth conventions and octant naming, sphere
distance conversion, interpolation and bisection root finding.
"""
from spherical_toolkit.core import *  # noqa: F401,F403
from spherical_toolkit.core import __all__ as _core_all
from spherical_toolkit.utils.exceptions import (
    SphericalToolkitError,
    NotCanonicalError,
    NoBracketError,
    ParameterError,
    NonFiniteValueError,
    ConfigurationError,
)

__version__ = "0.1.0"

__all__ = list(_core_all) + [
    'SphericalToolkitError',
    'NotCanonicalError',
    'NoBracketError',
    'ParameterError',
    'NonFiniteValueError',
    'ConfigurationError',
]
