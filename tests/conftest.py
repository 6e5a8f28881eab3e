import os
import random

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from wsnake.config import GameConfig  # noqa: E402
from wsnake.engine import GameState, SnakeEngine  # noqa: E402


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep WSNAKE_* settings from the developer shell out of the tests."""
    for name in list(os.environ):
        if name.startswith("WSNAKE_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_engine():
    def _make(
        snake,
        direction=(1, 0),
        food=(0, 0),
        *,
        pending=None,
        score=0,
        background_index=0,
        config=None,
        seed=7,
    ):
        state = GameState(
            snake=list(snake),
            direction=direction,
            pending_direction=pending or direction,
            food=food,
            score=score,
            background_index=background_index,
        )
        return SnakeEngine(config or GameConfig(), rng=random.Random(seed), state=state)

    return _make
