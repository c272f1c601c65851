"""
Core numeric modules for the spherical toolkit.

Contains angular arithmetic, azimuth conventions, sphere distance
conversion, interpolation and root finding.
"""
from spherical_toolkit.core.angles import (
    TAU,
    haversin,
    angular_distance,
)
from spherical_toolkit.core.azimuth import (
    is_canonical,
    canonicalize,
    to_math,
    from_math,
    to_octant_str,
    to_octant,
)
from spherical_toolkit.core.distance import (
    EARTH_RADIUS_M,
    to_rad,
    to_meter,
)
from spherical_toolkit.core.interpolation import (
    lerp,
    bilerp,
)
from spherical_toolkit.core.roots import (
    Sign,
    improve_root,
    first_interval_containing_root,
    find_root,
)

__all__ = [
    'TAU',
    'haversin',
    'angular_distance',
    'is_canonical',
    'canonicalize',
    'to_math',
    'from_math',
    'to_octant_str',
    'to_octant',
    'EARTH_RADIUS_M',
    'to_rad',
    'to_meter',
    'lerp',
    'bilerp',
    'Sign',
    'improve_root',
    'first_interval_containing_root',
    'find_root',
]
