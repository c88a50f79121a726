"""Easing functions for shaping animation progress.

Every function takes a normalized progress ratio n (0.0 to 1.0) and returns
a shaped ratio. Elastic and back curves overshoot inside (0, 1) but still
start at 0.0 and end at 1.0. Progress outside the range raises
:class:`~easekit.errors.OutOfRangeError`.
"""

from enum import Enum, auto
from typing import Callable, Optional
import logging
import math
import re

from easekit.errors import check_progress

logger = logging.getLogger(__name__)


class Easing(Enum):
    """Available easing function types."""

    LINEAR = auto()

    # Quadratic
    EASE_IN_QUAD = auto()
    EASE_OUT_QUAD = auto()
    EASE_IN_OUT_QUAD = auto()

    # Cubic
    EASE_IN_CUBIC = auto()
    EASE_OUT_CUBIC = auto()
    EASE_IN_OUT_CUBIC = auto()

    # Quartic
    EASE_IN_QUART = auto()
    EASE_OUT_QUART = auto()
    EASE_IN_OUT_QUART = auto()

    # Quintic
    EASE_IN_QUINT = auto()
    EASE_OUT_QUINT = auto()
    EASE_IN_OUT_QUINT = auto()

    # Sine
    EASE_IN_SINE = auto()
    EASE_OUT_SINE = auto()
    EASE_IN_OUT_SINE = auto()

    # Exponential
    EASE_IN_EXPO = auto()
    EASE_OUT_EXPO = auto()
    EASE_IN_OUT_EXPO = auto()

    # Circular
    EASE_IN_CIRC = auto()
    EASE_OUT_CIRC = auto()
    EASE_IN_OUT_CIRC = auto()

    # Elastic
    EASE_IN_ELASTIC = auto()
    EASE_OUT_ELASTIC = auto()
    EASE_IN_OUT_ELASTIC = auto()

    # Back (overshoot)
    EASE_IN_BACK = auto()
    EASE_OUT_BACK = auto()
    EASE_IN_OUT_BACK = auto()

    # Bounce
    EASE_IN_BOUNCE = auto()
    EASE_OUT_BOUNCE = auto()
    EASE_IN_OUT_BOUNCE = auto()


# Type alias for easing functions. Elastic and back curves accept extra
# keyword parameters, so the signature is left open.
EasingFunc = Callable[..., float]

# Tuning defaults. None or 0.0 selects them.
DEFAULT_AMPLITUDE = 1.0
DEFAULT_PERIOD = 0.3
DEFAULT_IN_OUT_PERIOD = 0.5
DEFAULT_OVERSHOOT = 1.70158
IN_OUT_OVERSHOOT_SCALE = 1.525


def _unset(value: Optional[float]) -> bool:
    return value is None or value == 0.0


def linear(n: float) -> float:
    """Linear interpolation (no easing)."""
    return check_progress(n)


# Quadratic easing
def ease_in_quad(n: float) -> float:
    """Accelerate from zero velocity."""
    n = check_progress(n)
    return n * n


def ease_out_quad(n: float) -> float:
    """Decelerate to zero velocity."""
    n = check_progress(n)
    return -n * (n - 2)


def ease_in_out_quad(n: float) -> float:
    """Accelerate then decelerate."""
    n = check_progress(n)
    if n < 0.5:
        return 2 * n * n
    n = n * 2 - 1
    return -0.5 * (n * (n - 2) - 1)


# Cubic easing
def ease_in_cubic(n: float) -> float:
    """Accelerate from zero velocity (cubic)."""
    n = check_progress(n)
    return pow(n, 3)


def ease_out_cubic(n: float) -> float:
    """Decelerate to zero velocity (cubic)."""
    n = check_progress(n) - 1
    return pow(n, 3) + 1


def ease_in_out_cubic(n: float) -> float:
    """Accelerate then decelerate (cubic)."""
    n = check_progress(n) * 2
    if n < 1:
        return 0.5 * pow(n, 3)
    n -= 2
    return 0.5 * (pow(n, 3) + 2)


# Quartic easing
def ease_in_quart(n: float) -> float:
    """Accelerate from zero velocity (quartic)."""
    n = check_progress(n)
    return pow(n, 4)


def ease_out_quart(n: float) -> float:
    """Decelerate to zero velocity (quartic)."""
    n = check_progress(n) - 1
    return -(pow(n, 4) - 1)


def ease_in_out_quart(n: float) -> float:
    """Accelerate then decelerate (quartic)."""
    n = check_progress(n) * 2
    if n < 1:
        return 0.5 * pow(n, 4)
    n -= 2
    return -0.5 * (pow(n, 4) - 2)


# Quintic easing
def ease_in_quint(n: float) -> float:
    """Accelerate from zero velocity (quintic)."""
    n = check_progress(n)
    return pow(n, 5)


def ease_out_quint(n: float) -> float:
    """Decelerate to zero velocity (quintic)."""
    n = check_progress(n) - 1
    return pow(n, 5) + 1


def ease_in_out_quint(n: float) -> float:
    """Accelerate then decelerate (quintic)."""
    n = check_progress(n) * 2
    if n < 1:
        return 0.5 * pow(n, 5)
    n -= 2
    return 0.5 * (pow(n, 5) + 2)


# Sine easing
def ease_in_sine(n: float) -> float:
    """Accelerate using sine curve."""
    n = check_progress(n)
    if n == 1:
        return 1.0
    return -math.cos(n * math.pi / 2) + 1


def ease_out_sine(n: float) -> float:
    """Decelerate using sine curve."""
    n = check_progress(n)
    return math.sin(n * math.pi / 2)


def ease_in_out_sine(n: float) -> float:
    """Accelerate then decelerate using sine curve.

    Not split in halves: a single cosine covers the whole range.
    """
    n = check_progress(n)
    return -0.5 * (math.cos(math.pi * n) - 1)


# Exponential easing. The endpoint checks are exact comparisons.
def ease_in_expo(n: float) -> float:
    """Accelerate exponentially."""
    n = check_progress(n)
    if n == 0:
        return 0.0
    return pow(2, 10 * (n - 1))


def ease_out_expo(n: float) -> float:
    """Decelerate exponentially."""
    n = check_progress(n)
    if n == 1:
        return 1.0
    return -pow(2, -10 * n) + 1


def ease_in_out_expo(n: float) -> float:
    """Accelerate then decelerate exponentially."""
    n = check_progress(n)
    if n == 0:
        return 0.0
    if n == 1:
        return 1.0
    n *= 2
    if n < 1:
        return 0.5 * pow(2, 10 * (n - 1))
    n -= 1
    return 0.5 * (-pow(2, -10 * n) + 2)


# Circular easing
def ease_in_circ(n: float) -> float:
    """Accelerate along circular curve."""
    n = check_progress(n)
    return -(math.sqrt(1 - n * n) - 1)


def ease_out_circ(n: float) -> float:
    """Decelerate along circular curve."""
    n = check_progress(n) - 1
    return math.sqrt(1 - n * n)


def ease_in_out_circ(n: float) -> float:
    """Accelerate then decelerate along circular curve."""
    n = check_progress(n) * 2
    if n < 1:
        return -0.5 * (math.sqrt(1 - n * n) - 1)
    n -= 2
    return 0.5 * (math.sqrt(1 - n * n) + 1)


# Elastic easing
def _sin(x: float) -> float:
    # math.sin raises on infinite input; let it surface as NaN instead.
    return math.sin(x) if math.isfinite(x) else math.nan


def _elastic_params(
    amplitude: Optional[float],
    period: Optional[float],
    default_period: float,
) -> tuple[float, float, float]:
    """Resolve elastic defaults and derive the phase offset.

    Returns:
        Tuple of (amplitude, period, phase)
    """
    if _unset(period):
        period = default_period
    if _unset(amplitude):
        amplitude = DEFAULT_AMPLITUDE

    if amplitude < 1:
        amplitude = 1.0
        phase = period / 4
    else:
        phase = period / (2 * math.pi) * math.asin(1 / amplitude)
    return amplitude, period, phase


def ease_in_elastic(
    n: float,
    amplitude: Optional[float] = None,
    period: Optional[float] = None,
) -> float:
    """Begin with an increasing wobble, then snap into the destination.

    Args:
        n: Progress (0.0 to 1.0)
        amplitude: Wobble height, defaults to 1.0 when None or 0.0
        period: Wobble length, defaults to 0.3 when None or 0.0
    """
    n = check_progress(n)
    a, p, s = _elastic_params(amplitude, period, DEFAULT_PERIOD)
    if n == 0:
        return 0.0
    if n == 1:
        return 1.0
    n -= 1
    return -(a * pow(2, 10 * n) * _sin((n - s) * (2 * math.pi) / p))


def ease_out_elastic(
    n: float,
    amplitude: Optional[float] = None,
    period: Optional[float] = None,
) -> float:
    """Overshoot the destination, then rubber band back into it.

    Args:
        n: Progress (0.0 to 1.0)
        amplitude: Wobble height, defaults to 1.0 when None or 0.0
        period: Wobble length, defaults to 0.3 when None or 0.0
    """
    n = check_progress(n)
    a, p, s = _elastic_params(amplitude, period, DEFAULT_PERIOD)
    if n == 0:
        return 0.0
    if n == 1:
        return 1.0
    return a * pow(2, -10 * n) * _sin((n - s) * (2 * math.pi / p)) + 1


def ease_in_out_elastic(
    n: float,
    amplitude: Optional[float] = None,
    period: Optional[float] = None,
) -> float:
    """Wobble towards the midpoint, then settle into the destination.

    Args:
        n: Progress (0.0 to 1.0)
        amplitude: Wobble height, defaults to 1.0 when None or 0.0
        period: Wobble length, defaults to 0.5 when None or 0.0
    """
    n = check_progress(n)
    a, p, s = _elastic_params(amplitude, period, DEFAULT_IN_OUT_PERIOD)
    if n == 0:
        return 0.0
    if n == 1:
        return 1.0
    n *= 2
    if n < 1:
        n -= 1
        return -0.5 * (a * pow(2, 10 * n) * _sin((n - s) * 2 * math.pi / p))
    n -= 1
    return a * pow(2, -10 * n) * _sin((n - s) * 2 * math.pi / p) * 0.5 + 1


# Back easing (overshoot)
def ease_in_back(n: float, overshoot: Optional[float] = None) -> float:
    """Back up slightly, then accelerate to the destination."""
    n = check_progress(n)
    s = DEFAULT_OVERSHOOT if _unset(overshoot) else overshoot
    if n == 1:
        return 1.0
    return n * n * ((s + 1) * n - s)


def ease_out_back(n: float, overshoot: Optional[float] = None) -> float:
    """Overshoot the destination a little, then back into it."""
    n = check_progress(n)
    s = DEFAULT_OVERSHOOT if _unset(overshoot) else overshoot
    if n == 0:
        return 0.0
    n -= 1
    return n * n * ((s + 1) * n + s) + 1


def ease_in_out_back(n: float, overshoot: Optional[float] = None) -> float:
    """Overshoot both the start and the destination.

    The overshoot is scaled by 1.525 so each half backs up by a similar
    amount to the single-sided curves.
    """
    n = check_progress(n)
    s = DEFAULT_OVERSHOOT if _unset(overshoot) else overshoot
    s *= IN_OUT_OVERSHOOT_SCALE
    n *= 2
    if n < 1:
        return 0.5 * (n * n * ((s + 1) * n - s))
    n -= 2
    return 0.5 * (n * n * ((s + 1) * n + s) + 2)


# Bounce easing
_BOUNCE_N1 = 7.5625
_BOUNCE_D1 = 2.75


def ease_out_bounce(n: float) -> float:
    """Hit the destination, then bounce to rest."""
    n = check_progress(n)
    if n == 1:
        return 1.0

    if n < 1 / _BOUNCE_D1:
        return _BOUNCE_N1 * n * n
    elif n < 2 / _BOUNCE_D1:
        n -= 1.5 / _BOUNCE_D1
        return _BOUNCE_N1 * n * n + 0.75
    elif n < 2.5 / _BOUNCE_D1:
        n -= 2.25 / _BOUNCE_D1
        return _BOUNCE_N1 * n * n + 0.9375
    else:
        n -= 2.625 / _BOUNCE_D1
        return _BOUNCE_N1 * n * n + 0.984375


def ease_in_bounce(n: float) -> float:
    """Bounce at the start, then jump to the destination."""
    n = check_progress(n)
    return 1 - ease_out_bounce(1 - n)


def ease_in_out_bounce(n: float) -> float:
    """Bounce at both the start and the end."""
    n = check_progress(n)
    if n < 0.5:
        return ease_out_bounce(n * 2) * 0.5
    return ease_out_bounce(n * 2 - 1) * 0.5 + 0.5


# Mapping from enum to function
_EASING_FUNCTIONS: dict[Easing, EasingFunc] = {
    Easing.LINEAR: linear,

    Easing.EASE_IN_QUAD: ease_in_quad,
    Easing.EASE_OUT_QUAD: ease_out_quad,
    Easing.EASE_IN_OUT_QUAD: ease_in_out_quad,

    Easing.EASE_IN_CUBIC: ease_in_cubic,
    Easing.EASE_OUT_CUBIC: ease_out_cubic,
    Easing.EASE_IN_OUT_CUBIC: ease_in_out_cubic,

    Easing.EASE_IN_QUART: ease_in_quart,
    Easing.EASE_OUT_QUART: ease_out_quart,
    Easing.EASE_IN_OUT_QUART: ease_in_out_quart,

    Easing.EASE_IN_QUINT: ease_in_quint,
    Easing.EASE_OUT_QUINT: ease_out_quint,
    Easing.EASE_IN_OUT_QUINT: ease_in_out_quint,

    Easing.EASE_IN_SINE: ease_in_sine,
    Easing.EASE_OUT_SINE: ease_out_sine,
    Easing.EASE_IN_OUT_SINE: ease_in_out_sine,

    Easing.EASE_IN_EXPO: ease_in_expo,
    Easing.EASE_OUT_EXPO: ease_out_expo,
    Easing.EASE_IN_OUT_EXPO: ease_in_out_expo,

    Easing.EASE_IN_CIRC: ease_in_circ,
    Easing.EASE_OUT_CIRC: ease_out_circ,
    Easing.EASE_IN_OUT_CIRC: ease_in_out_circ,

    Easing.EASE_IN_ELASTIC: ease_in_elastic,
    Easing.EASE_OUT_ELASTIC: ease_out_elastic,
    Easing.EASE_IN_OUT_ELASTIC: ease_in_out_elastic,

    Easing.EASE_IN_BACK: ease_in_back,
    Easing.EASE_OUT_BACK: ease_out_back,
    Easing.EASE_IN_OUT_BACK: ease_in_out_back,

    Easing.EASE_IN_BOUNCE: ease_in_bounce,
    Easing.EASE_OUT_BOUNCE: ease_out_bounce,
    Easing.EASE_IN_OUT_BOUNCE: ease_in_out_bounce,
}

# String name mapping, derived from the enum ("ease_out_cubic")
_EASING_BY_NAME: dict[str, Easing] = {e.name.lower(): e for e in Easing}

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def _normalize_name(name: str) -> str:
    """Turn "easeOutCubic", "ease-out-cubic" or "EASE_OUT_CUBIC" into "ease_out_cubic"."""
    name = _CAMEL_BOUNDARY.sub("_", name.strip())
    return name.replace("-", "_").replace(" ", "_").lower()


def get_easing(easing: Easing | str) -> EasingFunc:
    """Get an easing function by enum or name.

    Args:
        easing: Easing enum value or string name (e.g., "ease_out_cubic")

    Returns:
        The easing function

    Raises:
        ValueError: If easing name is not recognized
    """
    if isinstance(easing, str):
        easing_enum = _EASING_BY_NAME.get(_normalize_name(easing))
        if easing_enum is None:
            logger.debug(f"Easing lookup failed: {easing!r}")
            raise ValueError(f"Unknown easing function: {easing}")
        easing = easing_enum

    func = _EASING_FUNCTIONS.get(easing)
    if func is None:
        raise ValueError(f"No function registered for: {easing}")

    return func


def available_easings() -> list[str]:
    """Registered easing names in declaration order."""
    return list(_EASING_BY_NAME)
