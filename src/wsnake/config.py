"""Centralized configuration and palette definitions for W Snake."""

from __future__ import annotations

import os
from dataclasses import dataclass

import pygame

GRID_SIZE: int = 20
CELL_SIZE: int = 24  # 20 cells * 24 px => 480 px board
BOARD_SIZE: int = GRID_SIZE * CELL_SIZE
MIN_CELL_SIZE: int = 4
# Larger grids would push the board past the fixed window.
MAX_GRID_SIZE: int = BOARD_SIZE // MIN_CELL_SIZE
HUD_HEIGHT: int = 44
WINDOW_WIDTH: int = BOARD_SIZE
WINDOW_HEIGHT: int = BOARD_SIZE + HUD_HEIGHT
FONT_NAME: str = "arial"
FONT_SIZE: int = 20

FPS: int = 120
TICK_MS: int = 115
MAX_FRAME_MS: int = 250  # clamp for stalls (window drag, suspend)
INITIAL_LENGTH: int = 3
POINTS_PER_LEVEL: int = 10

POP_TEXT_LIFE: float = 0.6
BACKGROUND_FADE_TIME: float = 0.8

FOOD_STRATEGIES: tuple[str, ...] = ("rejection", "exact")

DIRECTIONS: dict[str, tuple[int, int]] = {
    "UP": (0, -1),
    "DOWN": (0, 1),
    "LEFT": (-1, 0),
    "RIGHT": (1, 0),
}
KEY_TO_DIRECTION = {
    pygame.K_UP: DIRECTIONS["UP"],
    pygame.K_w: DIRECTIONS["UP"],
    pygame.K_DOWN: DIRECTIONS["DOWN"],
    pygame.K_s: DIRECTIONS["DOWN"],
    pygame.K_LEFT: DIRECTIONS["LEFT"],
    pygame.K_a: DIRECTIONS["LEFT"],
    pygame.K_RIGHT: DIRECTIONS["RIGHT"],
    pygame.K_d: DIRECTIONS["RIGHT"],
}

PALETTE = {
    "board": pygame.Color(4, 10, 18, 148),
    "grid": pygame.Color(210, 229, 255, 20),
    "head": pygame.Color("#7ef064"),
    "body": pygame.Color("#45c64b"),
    "food": pygame.Color("#fff4bb"),
    "food_text": pygame.Color("#121212"),
    "text": pygame.Color(232, 240, 255),
    "hud": pygame.Color(0, 0, 0, 120),
    "pop": pygame.Color(255, 244, 187),
    "button": pygame.Color(126, 240, 100),
    "button_text": pygame.Color(12, 24, 12),
}

# Easy-to-replace background set: top, middle and bottom gradient stops.
BACKGROUNDS: tuple[tuple[pygame.Color, pygame.Color, pygame.Color], ...] = (
    (pygame.Color("#2a4d8f"), pygame.Color("#11172f"), pygame.Color("#090d1f")),
    (pygame.Color("#19392b"), pygame.Color("#245d43"), pygame.Color("#102f24")),
    (pygame.Color("#5f2727"), pygame.Color("#803232"), pygame.Color("#2e1212")),
    (pygame.Color("#7144a6"), pygame.Color("#2f1f50"), pygame.Color("#130a22")),
    (pygame.Color("#0f4c5c"), pygame.Color("#1f6f8b"), pygame.Color("#0a2f3a")),
)


def _env_int(name: str) -> int | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


@dataclass(slots=True)
class GameConfig:
    """Tunables for one simulation; validated on construction."""

    grid_size: int = GRID_SIZE
    tick_ms: int = TICK_MS
    max_frame_ms: int = MAX_FRAME_MS
    initial_length: int = INITIAL_LENGTH
    points_per_level: int = POINTS_PER_LEVEL
    background_count: int = len(BACKGROUNDS)
    food_strategy: str = "rejection"
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {self.tick_ms}")
        if self.max_frame_ms <= 0:
            raise ValueError(
                f"max_frame_ms must be positive, got {self.max_frame_ms}"
            )
        if self.initial_length < 1:
            raise ValueError("initial_length must be at least 1")
        if self.points_per_level < 1:
            raise ValueError("points_per_level must be at least 1")
        if self.background_count < 1:
            raise ValueError("background_count must be at least 1")
        if self.food_strategy not in FOOD_STRATEGIES:
            raise ValueError(
                f"food_strategy must be one of {FOOD_STRATEGIES}, "
                f"got {self.food_strategy!r}"
            )
        if self.grid_size < 2:
            raise ValueError(f"grid_size must be at least 2, got {self.grid_size}")
        if self.grid_size > MAX_GRID_SIZE:
            raise ValueError(
                f"grid_size must be at most {MAX_GRID_SIZE}, got {self.grid_size}"
            )
        head_x, _ = self.start_head
        if head_x >= self.grid_size:
            raise ValueError(
                f"grid_size {self.grid_size} is too small for a snake of "
                f"length {self.initial_length}"
            )

    @property
    def start_head(self) -> tuple[int, int]:
        # Body trails to the left of the head, so keep room for it.
        return (
            max(self.initial_length - 1, self.grid_size // 2 - 2),
            self.grid_size // 2,
        )

    @classmethod
    def from_env(cls) -> "GameConfig":
        """Build a config from WSNAKE_* environment variables."""

        overrides: dict[str, object] = {}
        grid_size = _env_int("WSNAKE_GRID_SIZE")
        if grid_size is not None:
            overrides["grid_size"] = grid_size
        tick_ms = _env_int("WSNAKE_TICK_MS")
        if tick_ms is not None:
            overrides["tick_ms"] = tick_ms
        seed = _env_int("WSNAKE_SEED")
        if seed is not None:
            overrides["seed"] = seed
        strategy = os.getenv("WSNAKE_FOOD_STRATEGY")
        if strategy:
            overrides["food_strategy"] = strategy.strip().lower()
        return cls(**overrides)
