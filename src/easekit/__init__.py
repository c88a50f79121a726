"""easekit: easing functions for animation and transition effects."""

from easekit.easing import (
    Easing,
    EasingFunc,
    available_easings,
    get_easing,
    linear,
    ease_in_quad,
    ease_out_quad,
    ease_in_out_quad,
    ease_in_cubic,
    ease_out_cubic,
    ease_in_out_cubic,
    ease_in_quart,
    ease_out_quart,
    ease_in_out_quart,
    ease_in_quint,
    ease_out_quint,
    ease_in_out_quint,
    ease_in_sine,
    ease_out_sine,
    ease_in_out_sine,
    ease_in_expo,
    ease_out_expo,
    ease_in_out_expo,
    ease_in_circ,
    ease_out_circ,
    ease_in_out_circ,
    ease_in_elastic,
    ease_out_elastic,
    ease_in_out_elastic,
    ease_in_back,
    ease_out_back,
    ease_in_out_back,
    ease_in_bounce,
    ease_out_bounce,
    ease_in_out_bounce,
)
from easekit.errors import OutOfRangeError, check_progress
from easekit.geometry import (
    get_line,
    get_point_on_line,
    interpolate,
    interpolate_color,
    iter_tween,
)
from easekit.result import try_ease
from easekit.sampling import is_monotonic, sample

__version__ = "0.1.0"

__all__ = [
    # Registry
    "Easing",
    "EasingFunc",
    "available_easings",
    "get_easing",
    # Easing functions
    "linear",
    "ease_in_quad",
    "ease_out_quad",
    "ease_in_out_quad",
    "ease_in_cubic",
    "ease_out_cubic",
    "ease_in_out_cubic",
    "ease_in_quart",
    "ease_out_quart",
    "ease_in_out_quart",
    "ease_in_quint",
    "ease_out_quint",
    "ease_in_out_quint",
    "ease_in_sine",
    "ease_out_sine",
    "ease_in_out_sine",
    "ease_in_expo",
    "ease_out_expo",
    "ease_in_out_expo",
    "ease_in_circ",
    "ease_out_circ",
    "ease_in_out_circ",
    "ease_in_elastic",
    "ease_out_elastic",
    "ease_in_out_elastic",
    "ease_in_back",
    "ease_out_back",
    "ease_in_out_back",
    "ease_in_bounce",
    "ease_out_bounce",
    "ease_in_out_bounce",
    # Errors
    "OutOfRangeError",
    "check_progress",
    # Geometry
    "get_line",
    "get_point_on_line",
    "interpolate",
    "interpolate_color",
    "iter_tween",
    # Helpers
    "try_ease",
    "sample",
    "is_monotonic",
]
