"""(value, error) calling convention for the easing functions."""

from typing import Optional

from easekit.easing import Easing, get_easing
from easekit.errors import OutOfRangeError


def try_ease(
    easing: Easing | str,
    n: float,
    **params: float,
) -> tuple[float, Optional[OutOfRangeError]]:
    """Evaluate an easing function without raising on bad progress.

    Returns:
        ``(value, None)`` on success, ``(0.0, error)`` when ``n`` is outside
        0.0 to 1.0. Any other error propagates.
    """
    func = get_easing(easing)
    try:
        return func(n, **params), None
    except OutOfRangeError as e:
        return 0.0, e
