"""
Linear and bilinear interpolation.

Both functions work element-wise on numpy arrays as well as on scalars.
"""


def lerp(t, start, end):
    """
    Linearly interpolate between start and end.

    Args:
        t: Interpolation parameter; 0 gives start, 1 gives end
        start: Value at t = 0
        end: Value at t = 1

    Returns:
        Interpolated value

    Example:
        >>> lerp(0.5, 0.0, 3.0)
        1.5
    """
    return start * (1.0 - t) + end * t


def bilerp(z00, z10, z01, z11, x, y):
    """
    Bilinearly interpolate on the unit square.

    Corner values are given as ``z<x><y>``, so z10 is the value at
    (x=1, y=0). Interpolation runs along x on both rows, then along y.

    Args:
        z00: Value at (0, 0)
        z10: Value at (1, 0)
        z01: Value at (0, 1)
        z11: Value at (1, 1)
        x: Position along x, in [0, 1]
        y: Position along y, in [0, 1]

    Returns:
        Interpolated value
    """
    bottom = lerp(x, z00, z10)
    top = lerp(x, z01, z11)
    return lerp(y, bottom, top)
