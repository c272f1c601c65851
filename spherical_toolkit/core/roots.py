"""
Root bracketing and bisection for continuous scalar functions.

Typical use is to scan a range for the first sub-interval that contains
a sign change, then refine that sub-interval to the requested tolerance:

    >>> import math
    >>> start = first_interval_containing_root(math.sin, 1.0, 4.0, 1.0)
    >>> improve_root(math.sin, start, start + 1.0, 1e-10)  # doctest: +ELLIPSIS
    3.14159265...
"""
import math
from enum import Enum
from typing import Callable

from spherical_toolkit.utils.logging_config import get_logger
from spherical_toolkit.utils.error_handling import require_positive
from spherical_toolkit.utils.exceptions import (
    NoBracketError,
    NonFiniteValueError,
    ParameterError,
)

logger = get_logger(__name__)

# Tolerance used when probing each scanned sub-interval
SCAN_TOLERANCE = 1e-10

ScalarFunction = Callable[[float], float]


class Sign(Enum):
    """Three-way sign of a function value; exact zero is its own class."""
    NEGATIVE = -1
    ZERO = 0
    POSITIVE = 1

    @classmethod
    def of(cls, value: float) -> "Sign":
        if math.isnan(value):
            raise NonFiniteValueError("Function returned NaN; sign is undefined")
        if value > 0:
            return cls.POSITIVE
        if value < 0:
            return cls.NEGATIVE
        return cls.ZERO


@require_positive('eps')
def improve_root(f: ScalarFunction, x1: float, x2: float, eps: float) -> float:
    """
    Refine a bracketed root of f by bisection.

    Args:
        f: Continuous function, finite on [x1, x2]
        x1: Lower bound of the bracket
        x2: Upper bound of the bracket
        eps: Interval width at which iteration stops (> 0)

    Returns:
        Lower end of the final bracket, within eps of a root

    Raises:
        NoBracketError: If x1 > x2 or f has the same sign at x1 and x2
        ParameterError: If eps is not positive
        NonFiniteValueError: If f returns NaN

    Example:
        >>> round(improve_root(math.sin, 3.1, 3.2, 1e-10), 8)
        3.14159265
    """
    if x1 > x2:
        raise NoBracketError("Interval bounds are out of order", x1=x1, x2=x2)

    sign_lo = Sign.of(f(x1))
    if sign_lo == Sign.of(f(x2)):
        raise NoBracketError("No sign change in interval", x1=x1, x2=x2)

    iterations = 0
    while (x2 - x1) > eps:
        m = (x1 + x2) / 2
        if m <= x1 or m >= x2:
            # Bracket can no longer be split at this magnitude
            break
        if Sign.of(f(m)) == sign_lo:
            x1 = m
        else:
            x2 = m
        iterations += 1

    logger.debug("root_refined", root=x1, width=x2 - x1, iterations=iterations)
    return x1


@require_positive('dx')
def first_interval_containing_root(
    f: ScalarFunction,
    min_x: float,
    max_x: float,
    dx: float,
) -> float:
    """
    Find the start of the first sub-interval of width dx that brackets a root.

    Scans [min_x, max_x) in steps of dx. This is a coarse search; call
    improve_root on [start, start + dx] for a precise root.

    Args:
        f: Continuous function, finite on the scanned range
        min_x: Start of the scanned range
        max_x: End of the scanned range (exclusive)
        dx: Step size (> 0)

    Returns:
        Left edge of the first bracketing sub-interval, or math.inf if
        no sign change was found

    Raises:
        ParameterError: If dx is not positive, or too small to advance
            the scan
    """
    i = min_x
    while i < max_x:
        if i + dx == i:
            raise ParameterError(f"Scan step {dx!r} is below float spacing at x={i!r}")
        try:
            improve_root(f, i, i + dx, SCAN_TOLERANCE)
        except NoBracketError:
            i += dx
            continue
        logger.debug("bracket_found", start=i, end=i + dx)
        return i

    logger.debug("no_bracket_in_range", min_x=min_x, max_x=max_x, dx=dx)
    return math.inf


def find_root(
    f: ScalarFunction,
    min_x: float,
    max_x: float,
    dx: float,
    eps: float = SCAN_TOLERANCE,
) -> float:
    """
    Locate the first root of f in [min_x, max_x) and refine it to eps.

    Raises:
        NoBracketError: If no sub-interval of the range brackets a root
        ParameterError: If dx or eps is not positive
    """
    start = first_interval_containing_root(f, min_x, max_x, dx)
    if math.isinf(start):
        raise NoBracketError("No sign change found in scanned range", x1=min_x, x2=max_x)
    return improve_root(f, start, start + dx, eps)
