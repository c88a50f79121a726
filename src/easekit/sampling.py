"""Evaluate easing curves over evenly spaced progress values."""

from typing import Optional
import logging

import numpy as np
from numpy.typing import NDArray

from easekit.easing import Easing, get_easing
from easekit.settings import get_settings

logger = logging.getLogger(__name__)


def progress_steps(steps: int) -> NDArray[np.float64]:
    """Evenly spaced progress values from 0.0 to 1.0 inclusive."""
    if steps < 2:
        raise ValueError(f"steps must be at least 2, got {steps}")
    return np.linspace(0.0, 1.0, steps, dtype=np.float64)


def sample(
    easing: Easing | str,
    steps: Optional[int] = None,
    **params: float,
) -> NDArray[np.float64]:
    """Sample an easing curve.

    Args:
        easing: Easing enum value or name
        steps: Number of samples, defaults to the configured ``sample_steps``
        **params: Tuning parameters for elastic and back curves

    Returns:
        Array of shaped ratios, one per progress step
    """
    if steps is None:
        steps = get_settings().sample_steps
    func = get_easing(easing)
    progress = progress_steps(steps)
    logger.debug(f"Sampling {easing} at {steps} steps")
    return np.fromiter(
        (func(float(n), **params) for n in progress),
        dtype=np.float64,
        count=steps,
    )


def is_monotonic(values: NDArray[np.float64]) -> bool:
    """Check that a sampled curve never decreases."""
    return bool(np.all(np.diff(values) >= 0))
