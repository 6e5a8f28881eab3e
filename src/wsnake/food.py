"""Food placement on the snake grid."""

from __future__ import annotations

import random
from typing import Sequence

Position = tuple[int, int]


def free_cells(snake: Sequence[Position], grid_size: int) -> list[Position]:
    """Return every grid cell not covered by the snake, row by row."""
    occupied = set(snake)
    return [
        (x, y)
        for y in range(grid_size)
        for x in range(grid_size)
        if (x, y) not in occupied
    ]


def _reroll_position(
    snake: Sequence[Position], grid_size: int, rng: random.Random
) -> Position | None:
    # Re-roll until we land on a free cell, giving up after one try per cell.
    occupied = set(snake)
    for _ in range(grid_size * grid_size):
        candidate = (rng.randrange(grid_size), rng.randrange(grid_size))
        if candidate not in occupied:
            return candidate
    return None


def _exact_position(
    snake: Sequence[Position], grid_size: int, rng: random.Random
) -> Position | None:
    options = free_cells(snake, grid_size)
    if not options:
        return None
    return rng.choice(options)


def spawn_food(
    snake: Sequence[Position],
    grid_size: int,
    rng: random.Random,
    strategy: str = "rejection",
) -> Position | None:
    """Pick a food cell that does not overlap the snake.

    ``"rejection"`` samples the whole grid and gives up after ``grid_size ** 2``
    misses, so a crowded board can report no cell even when a few are left.
    ``"exact"`` draws uniformly from the free cells and only fails on a full
    board. ``None`` means the board is treated as full.
    """

    if strategy == "exact":
        return _exact_position(snake, grid_size, rng)
    if strategy == "rejection":
        return _reroll_position(snake, grid_size, rng)
    raise ValueError(f"Unknown food strategy: {strategy!r}")
