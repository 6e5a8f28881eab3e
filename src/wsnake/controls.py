"""Keyboard to direction mapping with reversal protection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import DIRECTIONS, KEY_TO_DIRECTION

if TYPE_CHECKING:
    from .engine import GameState

_VALID_DIRECTIONS = frozenset(DIRECTIONS.values())


def is_opposite(a: tuple[int, int], b: tuple[int, int]) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]


def direction_for_key(key: int) -> tuple[int, int] | None:
    """Return the direction bound to a pygame key code, if any."""
    return KEY_TO_DIRECTION.get(key)


def request_direction(state: GameState, dx: int, dy: int) -> bool:
    """Queue a turn for the next tick; return False when it was ignored.

    The request is checked against both the committed and the queued
    direction, so two quick presses inside one tick cannot fold the snake
    back onto itself.
    """

    if not state.running:
        return False
    wanted = (dx, dy)
    if wanted not in _VALID_DIRECTIONS:
        return False
    if is_opposite(wanted, state.direction) or is_opposite(
        wanted, state.pending_direction
    ):
        return False
    state.pending_direction = wanted
    return True
