"""Tests for the fixed-step accumulator loop."""

import random

import pytest

from wsnake.config import GameConfig
from wsnake.engine import EndReason, GameOver, SnakeEngine
from wsnake.scheduler import TickScheduler


@pytest.fixture
def engine():
    # Food parked in a corner so the snake just glides right.
    engine = SnakeEngine(GameConfig(), rng=random.Random(0))
    engine.state.food = (0, 0)
    return engine


def test_residue_plus_clamped_frame_runs_two_ticks(engine):
    scheduler = TickScheduler(engine)
    engine.state.accumulator = 90.0

    scheduler.advance(250)

    assert engine.state.head == (10, 10)
    assert engine.state.accumulator == pytest.approx(110.0)


def test_huge_frame_is_clamped(engine):
    scheduler = TickScheduler(engine)

    scheduler.advance(10_000)

    # 250 ms at 115 ms per tick => 2 ticks, 20 ms left over.
    assert engine.state.head == (10, 10)
    assert engine.state.accumulator == pytest.approx(20.0)


def test_short_frames_accumulate(engine):
    scheduler = TickScheduler(engine)
    for _ in range(6):
        scheduler.advance(16)
    assert engine.state.head == (8, 10)
    assert engine.state.accumulator == pytest.approx(96.0)

    scheduler.advance(19)
    assert engine.state.head == (9, 10)
    assert engine.state.accumulator == pytest.approx(0.0)


def test_accumulator_stays_below_one_tick(engine):
    scheduler = TickScheduler(engine)
    rng = random.Random(4)
    for _ in range(40):
        engine.state.food = (0, 0)
        scheduler.advance(rng.uniform(0, 400))
        assert 0.0 <= engine.state.accumulator < engine.config.tick_ms
        if not engine.state.running:
            break


def test_negative_delta_is_ignored(engine):
    scheduler = TickScheduler(engine)
    scheduler.advance(-500)
    assert engine.state.accumulator == 0.0
    assert engine.state.head == (8, 10)


def test_first_frame_has_zero_delta(engine):
    scheduler = TickScheduler(engine)

    scheduler.frame(50_000)
    assert engine.state.accumulator == 0.0

    scheduler.frame(50_115)
    assert engine.state.head == (9, 10)


def test_reset_forgets_last_timestamp(engine):
    scheduler = TickScheduler(engine)
    scheduler.frame(1_000)
    scheduler.reset()
    scheduler.frame(90_000)
    assert engine.state.accumulator == 0.0
    assert engine.state.head == (8, 10)


def test_terminated_state_does_not_accumulate(engine):
    scheduler = TickScheduler(engine)
    engine.state.running = False

    assert scheduler.advance(200) == []
    assert engine.state.accumulator == 0.0


def test_termination_mid_drain_stops_ticking():
    state_engine = SnakeEngine(GameConfig(), rng=random.Random(0))
    state = state_engine.state
    state.snake = [(0, 10), (1, 10), (2, 10)]
    state.direction = state.pending_direction = (-1, 0)
    state.food = (5, 5)
    scheduler = TickScheduler(state_engine)

    events = scheduler.advance(250)

    assert events == [GameOver(reason=EndReason.WALL, score=0)]
    assert state.running is False
    assert state.accumulator == 0.0


def test_events_from_drained_ticks_are_returned(engine):
    engine.state.food = (9, 10)
    scheduler = TickScheduler(engine)

    events = scheduler.advance(115)

    assert [type(event).__name__ for event in events] == ["FoodEaten"]
    assert engine.state.score == 1


def test_restart_after_game_over_runs_again():
    engine = SnakeEngine(GameConfig(), rng=random.Random(0))
    engine.state.snake = [(0, 10), (1, 10), (2, 10)]
    engine.state.direction = engine.state.pending_direction = (-1, 0)
    scheduler = TickScheduler(engine)
    scheduler.advance(115)
    assert engine.state.running is False

    engine.reset()
    scheduler.reset()
    engine.state.food = (0, 0)
    scheduler.frame(0)
    scheduler.frame(115)

    assert engine.state.running is True
    assert engine.state.head == (9, 10)
