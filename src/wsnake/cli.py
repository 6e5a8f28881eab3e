"""Command-line entry point for W Snake."""

from __future__ import annotations

import argparse
import logging
import os
from typing import Sequence

from .config import FOOD_STRATEGIES, GameConfig

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wsnake",
        description="Grid snake with a fixed-step simulation loop.",
    )
    parser.add_argument("--grid-size", type=int, default=None, help="cells per side")
    parser.add_argument(
        "--tick-ms",
        type=int,
        default=None,
        help="milliseconds per simulation step (default 115)",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="seed for reproducible food placement"
    )
    parser.add_argument(
        "--food-strategy",
        choices=FOOD_STRATEGIES,
        default=None,
        help=(
            "rejection: re-roll random cells (bounded attempts)\n"
            "exact: draw uniformly from the free cells"
        ),
    )
    parser.add_argument("--mute", action="store_true", help="disable sound effects")
    parser.add_argument(
        "--log-level",
        default=os.getenv("WSNAKE_LOG_LEVEL", "WARNING"),
        choices=LOG_LEVELS,
        type=str.upper,
    )
    return parser


def config_from_args(args: argparse.Namespace) -> GameConfig:
    """Environment defaults, then command-line overrides."""
    base = GameConfig.from_env()
    return GameConfig(
        grid_size=args.grid_size if args.grid_size is not None else base.grid_size,
        tick_ms=args.tick_ms if args.tick_ms is not None else base.tick_ms,
        max_frame_ms=base.max_frame_ms,
        initial_length=base.initial_length,
        points_per_level=base.points_per_level,
        background_count=base.background_count,
        food_strategy=args.food_strategy or base.food_strategy,
        seed=args.seed if args.seed is not None else base.seed,
    )


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    # argparse does not check defaults against choices; WSNAKE_LOG_LEVEL lands here.
    if args.log_level not in LOG_LEVELS:
        parser.error(
            f"WSNAKE_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, "
            f"got {args.log_level!r}"
        )

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        config = config_from_args(args)
    except ValueError as exc:
        parser.error(str(exc))

    logger.info("Starting with %s", config)

    # Imported late so --help works without touching the display.
    from .game import WSnakeGame

    WSnakeGame(config, mute=args.mute).start()


if __name__ == "__main__":
    main()
