"""
Command line entry point for easekit.

Lists the available curves, prints sampled curves and points on a line.
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from pydantic import ValidationError

from easekit.easing import available_easings
from easekit.geometry import get_point_on_line
from easekit.sampling import progress_steps, sample
from easekit.settings import get_settings

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="easekit",
        description="Inspect easing curves",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List available easing functions")

    p_sample = sub.add_parser("sample", help="Print a sampled easing curve")
    p_sample.add_argument("name", nargs="?", default=settings.default_easing,
                          help="Easing name, e.g. ease_out_bounce")
    p_sample.add_argument("--steps", type=int, default=settings.sample_steps,
                          help="Number of samples including both ends")
    p_sample.add_argument("--amplitude", type=float, help="Elastic amplitude")
    p_sample.add_argument("--period", type=float, help="Elastic period")
    p_sample.add_argument("--overshoot", type=float, help="Back overshoot")

    p_point = sub.add_parser("point", help="Print the point a proportion along a line")
    for coord in ("x1", "y1", "x2", "y2", "n"):
        p_point.add_argument(coord, type=float)

    return parser


def _tuning_params(args: argparse.Namespace) -> dict[str, float]:
    params = {}
    for key in ("amplitude", "period", "overshoot"):
        value = getattr(args, key)
        if value is not None:
            params[key] = value
    return params


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the CLI and return the process exit code."""
    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"easekit: invalid settings: {e}", file=sys.stderr)
        return 2

    args = build_parser().parse_args(argv)
    setup_logging(args.debug or settings.debug)
    digits = settings.precision

    try:
        if args.command == "list":
            for name in available_easings():
                print(name)
        elif args.command == "sample":
            values = sample(args.name, args.steps, **_tuning_params(args))
            for n, value in zip(progress_steps(args.steps), values):
                print(f"{n:.{digits}f} {value:.{digits}f}")
        elif args.command == "point":
            x, y = get_point_on_line(args.x1, args.y1, args.x2, args.y2, args.n)
            print(f"{x:.{digits}f} {y:.{digits}f}")
    except (ValueError, TypeError) as e:
        logger.debug(f"Command failed: {e}")
        print(f"easekit: {e}", file=sys.stderr)
        return 2

    return 0
