"""
Command line entry point.

Generates a fault-line terrain and saves it as a shaded PNG::

    fault-terrain 512 512 4 1000 --output terrain.png
"""

import argparse
from typing import List, Optional

import structlog

from .config import settings
from .core import ConfigurationError, TerrainEngine
from .logging_config import configure_logging
from .render import open_image, save_png
from .utils.random import set_random_seed

logger = structlog.get_logger()

# Smallest accepted value per positional argument
MINIMUMS = {"width": 5, "height": 5, "threads": 1, "faults": 1}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fault-terrain",
        description="Generate a random terrain with the fault-line method using multiple threads",
    )
    parser.add_argument(
        "width", type=int, nargs="?", default=settings.default_width,
        help=f"Terrain width, minimum 5 (default: {settings.default_width})",
    )
    parser.add_argument(
        "height", type=int, nargs="?", default=settings.default_height,
        help=f"Terrain height, minimum 5 (default: {settings.default_height})",
    )
    parser.add_argument(
        "threads", type=int, nargs="?", default=settings.default_threads,
        help=f"Generator threads, minimum 1 (default: {settings.default_threads})",
    )
    parser.add_argument(
        "faults", type=int, nargs="?", default=settings.default_faults,
        help=f"Number of faults, minimum 1 (default: {settings.default_faults})",
    )
    parser.add_argument(
        "--output", "-o", default=settings.output_path,
        help=f"Output image path (default: {settings.output_path})",
    )
    parser.add_argument(
        "--open", action="store_true", default=settings.open_image,
        help="Open the image once it is saved",
    )
    parser.add_argument(
        "--seed", type=int, default=settings.random_seed,
        help="Seed for the random source",
    )
    parser.add_argument(
        "--log-level", default=settings.log_level,
        help=f"Logging level (default: {settings.log_level})",
    )
    return parser


def clamp_arguments(args: argparse.Namespace) -> argparse.Namespace:
    """Raise positional values below their minimum up to it."""
    for name, minimum in MINIMUMS.items():
        value = getattr(args, name)
        if value < minimum:
            logger.warning("Argument below minimum, clamping", argument=name,
                           value=value, minimum=minimum)
            setattr(args, name, minimum)
    return args


def main(argv: Optional[List[str]] = None) -> int:
    """Run the generator and return a process exit status."""
    args = build_parser().parse_args(argv)
    configure_logging(settings.model_copy(update={"log_level": args.log_level}))
    args = clamp_arguments(args)

    if args.seed is not None:
        set_random_seed(args.seed)

    engine = TerrainEngine()
    try:
        result = engine.generate(args.width, args.height, args.threads, args.faults)
    except ConfigurationError as e:
        logger.error("Invalid configuration", error=str(e))
        return 2

    stats = result.grid.stats()
    logger.info(
        "Terrain statistics",
        min_height=stats.min_height,
        max_height=stats.max_height,
        mean_height=round(stats.mean_height, 2),
    )

    output = save_png(result.grid, args.output)
    if args.open:
        open_image(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
