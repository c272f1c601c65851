"""
Azimuth canonicalization and compass/math convention conversion.

Two conventions are supported:
- compass: 0 = north, increasing clockwise
- math: 0 = east, increasing counter-clockwise

Both operate on canonical azimuths, i.e. radians in [0, 2π).
"""
import math

from spherical_toolkit.core.angles import TAU
from spherical_toolkit.utils.error_handling import require_canonical

# Width of one compass octant (45°)
OCTANT_WIDTH = math.pi / 4


def is_canonical(azimuth: float) -> bool:
    """
    Check whether an azimuth lies in [0, 2π).

    2π itself is not canonical, and neither is NaN.

    Example:
        >>> is_canonical(0.0), is_canonical(TAU)
        (True, False)
    """
    return 0.0 <= azimuth < TAU


def canonicalize(azimuth: float) -> float:
    """
    Reduce any angle into [0, 2π).

    Uses a floored remainder, so negative inputs wrap to positive values
    (e.g. -π/2 becomes 3π/2).

    Args:
        azimuth: Angle in radians

    Returns:
        Equivalent canonical angle
    """
    reduced = azimuth % TAU
    # Tiny negative inputs round up to exactly 2π
    if reduced >= TAU:
        return 0.0
    return reduced


@require_canonical('azimuth')
def to_math(azimuth: float) -> float:
    """
    Convert a compass azimuth to the math convention.

    Args:
        azimuth: Canonical compass azimuth (radians)

    Returns:
        Canonical math-convention angle (radians)

    Raises:
        NotCanonicalError: If azimuth is outside [0, 2π)

    Example:
        >>> round(math.degrees(to_math(math.radians(90))), 6)
        270.0
    """
    return canonicalize(TAU - azimuth)


@require_canonical('azimuth')
def from_math(azimuth: float) -> float:
    """
    Convert a math-convention angle to a compass azimuth.

    The reflection is its own inverse, so this is the same mapping as
    to_math.

    Raises:
        NotCanonicalError: If azimuth is outside [0, 2π)
    """
    return to_math(azimuth)


@require_canonical('azimuth')
def to_octant_str(azimuth: float, n: str, e: str, s: str, w: str) -> str:
    """
    Name the compass octant containing an azimuth.

    Octants are centered on the eight compass points, with boundaries at
    odd multiples of 22.5°. Combined labels put the north/south token
    first (``n + e`` for north-east).

    Args:
        azimuth: Canonical compass azimuth (radians)
        n: Token for north
        e: Token for east
        s: Token for south
        w: Token for west

    Returns:
        Octant label built from the given tokens

    Raises:
        NotCanonicalError: If azimuth is outside [0, 2π)

    Example:
        >>> to_octant_str(math.radians(135), "N", "E", "S", "W")
        'SE'
        >>> to_octant_str(math.radians(350), "north", "east", "south", "west")
        'north'
    """
    labels = [n, n + e, e, s + e, s, s + w, w, n + w]
    index = math.floor(azimuth / OCTANT_WIDTH + 0.5) % 8
    return labels[index]


def to_octant(azimuth: float) -> str:
    """Octant label using single-letter English tokens."""
    return to_octant_str(azimuth, "N", "E", "S", "W")
