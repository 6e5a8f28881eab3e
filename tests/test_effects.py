"""Tests for the effect timers (no window needed)."""

import pytest

from wsnake.config import BACKGROUND_FADE_TIME, POP_TEXT_LIFE
from wsnake.effects import (
    BackgroundFade,
    spawn_pop_text,
    update_background_fade,
    update_pop_texts,
)


def test_pop_text_starts_above_cell():
    pops = []
    spawn_pop_text(pops, (3, 4), cell_size=10)
    assert len(pops) == 1
    assert pops[0].text == "+1"
    assert pops[0].x == pytest.approx(35.0)
    assert pops[0].y == pytest.approx(40.0)
    assert pops[0].life == pytest.approx(POP_TEXT_LIFE)


def test_pop_text_rises_and_expires():
    pops = []
    spawn_pop_text(pops, (3, 4), cell_size=10)

    pops = update_pop_texts(pops, 0.1)
    assert len(pops) == 1
    assert pops[0].y < 40.0

    pops = update_pop_texts(pops, POP_TEXT_LIFE)
    assert pops == []


def test_zero_dt_leaves_pops_alone():
    pops = []
    spawn_pop_text(pops, (0, 0))
    assert update_pop_texts(pops, 0.0) is pops


def test_background_fade_progress_and_finish():
    fade = BackgroundFade(from_index=0, to_index=1)
    assert fade.progress == pytest.approx(0.0)

    fade = update_background_fade(fade, BACKGROUND_FADE_TIME / 2)
    assert fade is not None
    assert fade.progress == pytest.approx(0.5)

    assert update_background_fade(fade, BACKGROUND_FADE_TIME) is None


def test_no_fade_stays_none():
    assert update_background_fade(None, 0.5) is None
