"""Visual effect helpers for W Snake: pop text and background fades."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import pygame

from .config import BACKGROUND_FADE_TIME, CELL_SIZE, POP_TEXT_LIFE


@dataclass(slots=True)
class PopText:
    text: str
    x: float
    y: float
    life: float = POP_TEXT_LIFE


@dataclass(slots=True)
class BackgroundFade:
    """Cross-fade from one background index to another."""

    from_index: int
    to_index: int
    timer: float = BACKGROUND_FADE_TIME
    duration: float = BACKGROUND_FADE_TIME

    @property
    def progress(self) -> float:
        if self.duration <= 0:
            return 1.0
        return max(0.0, min(1.0, 1.0 - self.timer / self.duration))


def spawn_pop_text(
    pops: list[PopText],
    cell: tuple[int, int],
    cell_size: int = CELL_SIZE,
    text: str = "+1",
) -> None:
    """Start a short text pulse above the given grid cell."""

    pops.append(
        PopText(
            text=text,
            x=cell[0] * cell_size + cell_size / 2,
            y=cell[1] * cell_size,
        )
    )


def update_pop_texts(pops: list[PopText], dt: float) -> list[PopText]:
    """Float pops upward and discard the finished ones."""

    if dt <= 0:
        return pops
    for pop in pops:
        pop.life = max(0.0, pop.life - dt)
        pop.y -= 40.0 * dt
    return [pop for pop in pops if pop.life > 0]


def update_background_fade(
    fade: BackgroundFade | None, dt: float
) -> BackgroundFade | None:
    """Advance a fade; returns None once it has finished."""

    if fade is None:
        return None
    if dt > 0:
        fade.timer = max(0.0, fade.timer - dt)
    if fade.timer <= 0.0:
        return None
    return fade


def build_gradient(
    size: tuple[int, int], stops: Sequence[pygame.Color]
) -> pygame.Surface:
    """Render a vertical gradient through evenly spaced color stops."""

    width, height = size
    surface = pygame.Surface(size)
    segments = max(1, len(stops) - 1)
    for y in range(height):
        t = y / max(1, height - 1)
        seg = min(segments - 1, int(t * segments))
        local = t * segments - seg
        start = stops[seg]
        end = stops[min(seg + 1, len(stops) - 1)]
        color = (
            int(start.r + (end.r - start.r) * local),
            int(start.g + (end.g - start.g) * local),
            int(start.b + (end.b - start.b) * local),
        )
        pygame.draw.line(surface, color, (0, y), (width, y))
    return surface


def draw_pop_texts(
    surface: pygame.Surface,
    pops: Sequence[PopText],
    font: pygame.font.Font,
    color: pygame.Color,
    offset: tuple[int, int] = (0, 0),
) -> None:
    for pop in pops:
        alpha = int(255 * (pop.life / POP_TEXT_LIFE))
        if alpha <= 0:
            continue
        text = font.render(pop.text, True, color)
        text.set_alpha(alpha)
        rect = text.get_rect(center=(int(pop.x) + offset[0], int(pop.y) + offset[1]))
        surface.blit(text, rect)


def draw_background(
    surface: pygame.Surface,
    backgrounds: Sequence[pygame.Surface],
    index: int,
    fade: BackgroundFade | None,
) -> None:
    """Blit the active background, blending in a pending fade."""

    if fade is None:
        surface.blit(backgrounds[index], (0, 0))
        return
    surface.blit(backgrounds[fade.from_index], (0, 0))
    incoming = backgrounds[fade.to_index].copy()
    incoming.set_alpha(int(255 * fade.progress))
    surface.blit(incoming, (0, 0))
