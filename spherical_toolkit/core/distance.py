"""
Conversion between arc length on the sphere and central angle.
"""

# Earth's radius in meters (mean radius)
EARTH_RADIUS_M = 6371000.0


def to_rad(dist_in_meters: float, radius: float = EARTH_RADIUS_M) -> float:
    """
    Convert an arc length on the sphere's surface to radians.

    Args:
        dist_in_meters: Arc length (meters)
        radius: Sphere radius (meters), defaults to the Earth's mean radius

    Returns:
        Central angle in radians

    Example:
        >>> to_rad(6371000.0)
        1.0
    """
    return dist_in_meters / radius


def to_meter(rad: float, radius: float = EARTH_RADIUS_M) -> float:
    """
    Convert a central angle to the arc length on the sphere's surface.

    Args:
        rad: Central angle in radians
        radius: Sphere radius (meters), defaults to the Earth's mean radius

    Returns:
        Arc length in meters
    """
    return radius * rad
