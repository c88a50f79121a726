"""Error types shared by the easing functions."""

PROGRESS_MIN = 0.0
PROGRESS_MAX = 1.0


class OutOfRangeError(ValueError):
    """Raised when a progress ratio lies outside ``[0.0, 1.0]``.

    Attributes:
        value: The rejected progress ratio
    """

    def __init__(self, value: float):
        self.value = value
        super().__init__(
            f"`n` must be between {PROGRESS_MIN} and {PROGRESS_MAX}, got {value!r}"
        )


def check_progress(n: float) -> float:
    """Validate a progress ratio.

    Args:
        n: Progress ratio supplied by the caller

    Returns:
        ``n`` as a float

    Raises:
        OutOfRangeError: If ``n < 0.0`` or ``n > 1.0``
    """
    if n < PROGRESS_MIN or n > PROGRESS_MAX:
        raise OutOfRangeError(n)
    return float(n)
