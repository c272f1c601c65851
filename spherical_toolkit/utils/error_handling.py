"""
Argument validation decorators for the spherical toolkit.

Keeps precondition checks (canonical azimuths, positive tolerances)
out of the numeric code they guard.
"""
import inspect
from functools import wraps
from typing import Callable, Iterator, Tuple

from spherical_toolkit.utils.logging_config import get_logger
from spherical_toolkit.utils.exceptions import (
    NotCanonicalError,
    ParameterError,
)

logger = get_logger(__name__)


def _bound_values(
    sig: inspect.Signature,
    params: Tuple[str, ...],
    args: tuple,
    kwargs: dict,
) -> Iterator[Tuple[str, float]]:
    bound = sig.bind(*args, **kwargs)
    bound.apply_defaults()
    for name in params:
        yield name, bound.arguments[name]


def _check_params_exist(func: Callable, sig: inspect.Signature, params: Tuple[str, ...]):
    missing = [p for p in params if p not in sig.parameters]
    if missing:
        raise TypeError(
            f"{func.__name__} has no parameter(s) {missing}. "
            f"Available parameters: {list(sig.parameters)}"
        )


def require_canonical(*params: str):
    """
    Decorator to validate that azimuth arguments are canonical.

    Parameters
    ----------
    *params : str
        Names of the parameters holding azimuths (radians)

    Raises
    ------
    NotCanonicalError
        If any named argument lies outside [0, 2π)
    """
    def decorator(func: Callable) -> Callable:
        sig = inspect.signature(func)
        _check_params_exist(func, sig, params)

        @wraps(func)
        def wrapper(*args, **kwargs):
            from spherical_toolkit.core.azimuth import is_canonical

            for name, value in _bound_values(sig, params, args, kwargs):
                if not is_canonical(value):
                    logger.debug(
                        "azimuth_not_canonical",
                        function=func.__name__,
                        parameter=name,
                        value=value,
                    )
                    raise NotCanonicalError(
                        f"{func.__name__}: '{name}' must lie in [0, 2π)",
                        azimuth=value,
                    )
            return func(*args, **kwargs)
        return wrapper
    return decorator


def require_positive(*params: str):
    """
    Decorator to validate that numeric arguments are strictly positive.

    NaN is rejected along with zero and negative values.

    Parameters
    ----------
    *params : str
        Names of the parameters to check

    Raises
    ------
    ParameterError
        If any named argument is not > 0
    """
    def decorator(func: Callable) -> Callable:
        sig = inspect.signature(func)
        _check_params_exist(func, sig, params)

        @wraps(func)
        def wrapper(*args, **kwargs):
            for name, value in _bound_values(sig, params, args, kwargs):
                if not value > 0:
                    raise ParameterError(
                        f"{func.__name__}: '{name}' must be positive, got {value!r}"
                    )
            return func(*args, **kwargs)
        return wrapper
    return decorator
