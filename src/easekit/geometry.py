"""Line helpers and value interpolation built on the easing functions."""

from typing import Iterator

from easekit.easing import Easing, get_easing

Point = tuple[float, float]


def get_point_on_line(x1: float, y1: float, x2: float, y2: float, n: float) -> Point:
    """Return the point that has progressed a proportion ``n`` along a line.

    ``n`` is not validated: values below 0.0 or above 1.0 extrapolate past
    the start or end point.

    Args:
        x1: X coordinate of the start point
        y1: Y coordinate of the start point
        x2: X coordinate of the end point
        y2: Y coordinate of the end point
        n: Proportion along the line (0.0 is the start, 1.0 is the end)

    Returns:
        (x, y) of the point

    Example:
        >>> get_point_on_line(0, 0, 6, 6, 0.5)
        (3.0, 3.0)
        >>> get_point_on_line(0, 0, 10, 10, 2.0)
        (20.0, 20.0)
    """
    x = (x2 - x1) * n + x1
    y = (y2 - y1) * n + y1
    return x, y


def get_line(x1: int, y1: int, x2: int, y2: int) -> list[tuple[int, int]]:
    """Return every integer point on a line using Bresenham's algorithm.

    Both endpoints are included and points run from start to end.

    Example:
        >>> get_line(0, 0, 3, 6)
        [(0, 0), (0, 1), (1, 2), (1, 3), (2, 4), (2, 5), (3, 6)]
    """
    x1, y1, x2, y2 = int(x1), int(y1), int(x2), int(y2)
    points = []
    steep = abs(y2 - y1) > abs(x2 - x1)
    if steep:
        x1, y1 = y1, x1
        x2, y2 = y2, x2

    reversed_ = x1 > x2
    if reversed_:
        x1, x2 = x2, x1
        y1, y2 = y2, y1

    dx = x2 - x1
    dy = abs(y2 - y1)
    error = dx // 2
    ystep = 1 if y1 < y2 else -1
    y = y1
    for x in range(x1, x2 + 1):
        points.append((y, x) if steep else (x, y))
        error -= dy
        if error < 0:
            y += ystep
            error += dx

    if reversed_:
        points.reverse()
    return points


def interpolate(
    start: float,
    end: float,
    n: float,
    easing: Easing | str = Easing.LINEAR,
    **params: float,
) -> float:
    """Interpolate between two values using an easing function.

    Args:
        start: Starting value
        end: Ending value
        n: Progress (0.0 to 1.0), validated by the easing function
        easing: Easing function to use
        **params: Tuning parameters for elastic and back curves

    Returns:
        Interpolated value

    Raises:
        OutOfRangeError: If ``n`` is outside 0.0 to 1.0
    """
    eased = get_easing(easing)(n, **params)
    return start + (end - start) * eased


def interpolate_color(
    start: tuple[int, int, int],
    end: tuple[int, int, int],
    n: float,
    easing: Easing | str = Easing.LINEAR,
    **params: float,
) -> tuple[int, int, int]:
    """Interpolate between two RGB colors.

    Args:
        start: Starting RGB color
        end: Ending RGB color
        n: Progress (0.0 to 1.0)
        easing: Easing function to use

    Returns:
        Interpolated RGB color
    """
    eased = get_easing(easing)(n, **params)
    return (
        int(start[0] + (end[0] - start[0]) * eased),
        int(start[1] + (end[1] - start[1]) * eased),
        int(start[2] + (end[2] - start[2]) * eased),
    )


# Keeps 0.999999... from being emitted in addition to the final 1.0
_ROUNDING_SLACK = 1.1102230246251565e-16


def iter_tween(
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    interval: float,
    easing: Easing | str = Easing.LINEAR,
    **params: float,
) -> Iterator[Point]:
    """Yield points along a line, spaced by an eased progress.

    Progress advances by ``interval`` each step. The points for 0.0 and 1.0
    are always the first and last yielded.

    Raises:
        ValueError: If ``interval`` is not in (0.0, 1.0]
    """
    if not 0.0 < interval <= 1.0:
        raise ValueError(f"interval must be in (0.0, 1.0], got {interval!r}")

    func = get_easing(easing)
    yield get_point_on_line(x1, y1, x2, y2, func(0.0, **params))

    n = interval
    while n + _ROUNDING_SLACK < 1.0:
        yield get_point_on_line(x1, y1, x2, y2, func(n, **params))
        n += interval

    yield get_point_on_line(x1, y1, x2, y2, func(1.0, **params))
