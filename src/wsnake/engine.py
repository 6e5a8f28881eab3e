"""Fixed-step snake simulation: state, rules and tick events."""

from __future__ import annotations

import enum
import logging
import random
from dataclasses import dataclass, field

from .config import DIRECTIONS, GameConfig
from .controls import request_direction
from .food import Position, spawn_food

logger = logging.getLogger(__name__)

Direction = tuple[int, int]


class EndReason(enum.Enum):
    WALL = "wall"
    SELF = "self"
    BOARD_FULL = "board_full"


@dataclass(slots=True)
class GameState:
    """Everything the simulation owns; head of the snake is at index 0."""

    snake: list[Position]
    direction: Direction
    pending_direction: Direction
    food: Position | None
    score: int = 0
    running: bool = True
    accumulator: float = 0.0
    background_index: int = 0
    end_reason: EndReason | None = None
    points_per_level: int = field(default=10, repr=False)

    @property
    def head(self) -> Position:
        return self.snake[0]

    @property
    def level(self) -> int:
        return self.score // self.points_per_level + 1


# --- Events -------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class FoodEaten:
    position: Position
    score: int
    level: int


@dataclass(frozen=True, slots=True)
class BackgroundMilestone:
    background_index: int
    score: int


@dataclass(frozen=True, slots=True)
class GameOver:
    reason: EndReason
    score: int


GameEvent = FoodEaten | BackgroundMilestone | GameOver


# --- Rules --------------------------------------------------------------


def hit_wall(pos: Position, grid_size: int) -> bool:
    x, y = pos
    return x < 0 or x >= grid_size or y < 0 or y >= grid_size


def hit_self(snake: list[Position], pos: Position, is_eating: bool) -> bool:
    # The tail moves away this tick unless we grow, so its cell is fair game.
    body = snake if is_eating else snake[:-1]
    return pos in body


def new_game_state(config: GameConfig, rng: random.Random) -> GameState:
    """Build a fresh running state: snake heading right, food placed."""
    head_x, head_y = config.start_head
    snake = [(head_x - i, head_y) for i in range(config.initial_length)]
    state = GameState(
        snake=snake,
        direction=DIRECTIONS["RIGHT"],
        pending_direction=DIRECTIONS["RIGHT"],
        food=None,
        points_per_level=config.points_per_level,
    )
    state.food = spawn_food(snake, config.grid_size, rng, config.food_strategy)
    if state.food is None:
        state.running = False
        state.end_reason = EndReason.BOARD_FULL
    return state


class SnakeEngine:
    """Owns the authoritative GameState and advances it one tick at a time."""

    def __init__(
        self,
        config: GameConfig | None = None,
        *,
        rng: random.Random | None = None,
        state: GameState | None = None,
    ) -> None:
        self.config = config or GameConfig()
        self.rng = rng or random.Random(self.config.seed)
        self.state = state or new_game_state(self.config, self.rng)
        # Level and milestones must use the same step even for injected states.
        self.state.points_per_level = self.config.points_per_level

    def reset(self) -> GameState:
        """Replace the current state with a fresh game (external restart)."""
        self.state = new_game_state(self.config, self.rng)
        logger.debug("Game reset, food at %s", self.state.food)
        return self.state

    def request_direction(self, dx: int, dy: int) -> bool:
        return request_direction(self.state, dx, dy)

    def tick(self) -> list[GameEvent]:
        """Advance the snake by exactly one grid cell."""
        state = self.state
        if not state.running:
            return []

        # Direction is fixed for the whole tick; later input waits for the next one.
        state.direction = state.pending_direction
        hx, hy = state.snake[0]
        dx, dy = state.direction
        new_head = (hx + dx, hy + dy)
        is_eating = new_head == state.food

        if hit_wall(new_head, self.config.grid_size):
            return [self._terminate(EndReason.WALL)]
        if hit_self(state.snake, new_head, is_eating):
            return [self._terminate(EndReason.SELF)]

        state.snake.insert(0, new_head)
        if not is_eating:
            state.snake.pop()
            return []

        state.score += 1
        events: list[GameEvent] = [
            FoodEaten(position=new_head, score=state.score, level=state.level)
        ]
        if state.score % self.config.points_per_level == 0:
            state.background_index = (
                state.background_index + 1
            ) % self.config.background_count
            logger.debug(
                "Milestone at score %d, background %d",
                state.score,
                state.background_index,
            )
            events.append(
                BackgroundMilestone(
                    background_index=state.background_index, score=state.score
                )
            )

        food = spawn_food(
            state.snake, self.config.grid_size, self.rng, self.config.food_strategy
        )
        if food is None:
            state.food = None
            events.append(self._terminate(EndReason.BOARD_FULL))
        else:
            state.food = food
        return events

    def _terminate(self, reason: EndReason) -> GameOver:
        state = self.state
        state.running = False
        state.end_reason = reason
        logger.info("Game over (%s) with score %d", reason.value, state.score)
        return GameOver(reason=reason, score=state.score)
