"""W Snake: a grid snake game driven by a fixed-step simulation."""

from .config import GameConfig
from .engine import (
    BackgroundMilestone,
    EndReason,
    FoodEaten,
    GameOver,
    GameState,
    SnakeEngine,
    new_game_state,
)
from .scheduler import TickScheduler

__all__ = [
    "BackgroundMilestone",
    "EndReason",
    "FoodEaten",
    "GameConfig",
    "GameOver",
    "GameState",
    "SnakeEngine",
    "TickScheduler",
    "new_game_state",
]
