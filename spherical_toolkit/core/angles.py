"""
Angular arithmetic on the circle.

All angles are in radians.
"""
import math

import numpy as np

TAU = 2 * math.pi


def haversin(x):
    """
    Haversine of an angle, ``sin(x / 2) ** 2``.

    Args:
        x: Angle in radians (scalar or numpy array)

    Returns:
        Haversine value(s) in [0, 1]

    References:
        https://en.wikipedia.org/wiki/Versine#Haversine
    """
    return np.sin(np.asarray(x) / 2) ** 2


def angular_distance(a1: float, a2: float) -> float:
    """
    Signed shortest rotation from a1 to a2.

    Positive results mean a2 lies counter-clockwise of a1 (in the sense of
    increasing angle). Inputs need not be canonical.

    Args:
        a1: Starting angle (radians)
        a2: Target angle (radians)

    Returns:
        Signed difference in [-π, π). Non-finite inputs give NaN.

    Example:
        >>> round(math.degrees(angular_distance(math.radians(181), math.radians(2))), 6)
        -179.0
    """
    shifted = a2 - a1 + math.pi
    if math.isinf(shifted):
        return math.nan

    # fmod truncates toward zero, so the raw result can fall below -π
    diff = math.fmod(shifted, TAU) - math.pi

    if diff < -math.pi:
        return diff + TAU
    return diff
