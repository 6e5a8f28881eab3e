"""W Snake window: frame loop, input, event reactions and drawing."""

from __future__ import annotations

import logging

import pygame

from .audio import AudioEngine
from .config import (
    BACKGROUND_FADE_TIME,
    BACKGROUNDS,
    BOARD_SIZE,
    FONT_NAME,
    FONT_SIZE,
    FPS,
    HUD_HEIGHT,
    MIN_CELL_SIZE,
    PALETTE,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    GameConfig,
)
from .controls import direction_for_key
from .effects import (
    BackgroundFade,
    PopText,
    build_gradient,
    draw_background,
    draw_pop_texts,
    spawn_pop_text,
    update_background_fade,
    update_pop_texts,
)
from .engine import (
    BackgroundMilestone,
    FoodEaten,
    GameEvent,
    GameOver,
    SnakeEngine,
)
from .scheduler import TickScheduler

logger = logging.getLogger(__name__)


class WSnakeGame:
    """Pygame front end around a SnakeEngine and its TickScheduler."""

    def __init__(
        self, config: GameConfig | None = None, *, mute: bool = False
    ) -> None:
        pygame.init()
        self.config = config or GameConfig()
        self.engine = SnakeEngine(self.config)
        self.scheduler = TickScheduler(self.engine)

        # The board keeps roughly the same pixel size whatever the grid is.
        self.cell = max(MIN_CELL_SIZE, BOARD_SIZE // self.config.grid_size)
        self.board_px = self.config.grid_size * self.cell
        self.window = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption("W Snake")
        self.font = pygame.font.SysFont(FONT_NAME, FONT_SIZE, bold=True)
        self.food_font = pygame.font.SysFont(
            FONT_NAME, int(self.cell * 0.82), bold=True
        )
        self.big_font = pygame.font.SysFont(FONT_NAME, FONT_SIZE * 2, bold=True)
        self.audio = AudioEngine(enabled=not mute)

        size = self.window.get_size()
        self.backgrounds = [build_gradient(size, stops) for stops in BACKGROUNDS]
        self.board_layer = self._build_board_layer()
        self.restart_rect = pygame.Rect(0, 0, 160, 44)

        self.pops: list[PopText] = []
        self.fade: BackgroundFade | None = None
        self.shown_background = 0

    # --- Setup ---------------------------------------------------------

    def _build_board_layer(self) -> pygame.Surface:
        """Translucent board fill with faint grid lines, built once."""
        layer = pygame.Surface((self.board_px, self.board_px), pygame.SRCALPHA)
        layer.fill(PALETTE["board"])
        for i in range(1, self.config.grid_size):
            pos = i * self.cell
            pygame.draw.line(layer, PALETTE["grid"], (pos, 0), (pos, self.board_px))
            pygame.draw.line(layer, PALETTE["grid"], (0, pos), (self.board_px, pos))
        return layer

    @property
    def board_origin(self) -> tuple[int, int]:
        width, _ = self.window.get_size()
        return ((width - self.board_px) // 2, HUD_HEIGHT)

    def restart(self) -> None:
        """External restart trigger: fresh state, no carry-over timing."""
        self.engine.reset()
        self.scheduler.reset()
        self.pops = []
        self.fade = None
        self.shown_background = 0
        logger.info("Restarted")

    # --- Input ---------------------------------------------------------

    def handle_events(self) -> bool:
        """Handle window/keyboard/mouse events; return False to quit."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if not self.engine.state.running and self.restart_rect.collidepoint(
                    event.pos
                ):
                    self.restart()
                continue
            if event.type != pygame.KEYDOWN:
                continue

            if not self.engine.state.running:
                if event.key == pygame.K_r:
                    self.restart()
                elif event.key in (pygame.K_q, pygame.K_ESCAPE):
                    return False
                continue

            direction = direction_for_key(event.key)
            if direction is not None:
                self.engine.request_direction(*direction)
        return True

    # --- Engine events ---------------------------------------------------

    def dispatch(self, events: list[GameEvent]) -> None:
        for event in events:
            if isinstance(event, FoodEaten):
                spawn_pop_text(self.pops, event.position, self.cell)
                self.audio.play("pop")
            elif isinstance(event, BackgroundMilestone):
                self.fade = BackgroundFade(
                    from_index=self.shown_background,
                    to_index=event.background_index,
                    timer=BACKGROUND_FADE_TIME,
                )
                self.shown_background = event.background_index
                self.audio.play("milestone")
            elif isinstance(event, GameOver):
                self.audio.play("over")

    def update_effects(self, dt: float) -> None:
        self.pops = update_pop_texts(self.pops, dt)
        self.fade = update_background_fade(self.fade, dt)

    # --- Draw ----------------------------------------------------------

    def _draw_cell(
        self, pos: tuple[int, int], color: pygame.Color, radius: int = 0
    ) -> pygame.Rect:
        ox, oy = self.board_origin
        rect = pygame.Rect(
            ox + pos[0] * self.cell, oy + pos[1] * self.cell, self.cell, self.cell
        )
        radius = min(radius, self.cell // 2)
        pygame.draw.rect(self.window, color, rect, border_radius=radius)
        return rect

    def _draw_food(self, pos: tuple[int, int]) -> None:
        # A literal letter W so the food is unambiguous.
        rect = self._draw_cell(pos, PALETTE["food"])
        glyph = self.food_font.render("W", True, PALETTE["food_text"])
        center = (rect.centerx, rect.centery + 1)
        self.window.blit(glyph, glyph.get_rect(center=center))

    def _draw_hud(self) -> None:
        state = self.engine.state
        width, _ = self.window.get_size()
        hud = pygame.Surface((width, HUD_HEIGHT), pygame.SRCALPHA)
        hud.fill(PALETTE["hud"])
        self.window.blit(hud, (0, 0))
        labels = (
            f"SCORE {state.score}",
            f"LEVEL {state.level}",
            f"BG {state.background_index + 1}",
        )
        slot = width // len(labels)
        for idx, label in enumerate(labels):
            surf = self.font.render(label, True, PALETTE["text"])
            self.window.blit(
                surf, surf.get_rect(center=(slot * idx + slot // 2, HUD_HEIGHT // 2))
            )

    def _draw_game_over(self) -> None:
        state = self.engine.state
        ox, oy = self.board_origin
        overlay = pygame.Surface((self.board_px, self.board_px), pygame.SRCALPHA)
        overlay.fill((5, 5, 15, 170))
        self.window.blit(overlay, (ox, oy))

        cx = ox + self.board_px // 2
        cy = oy + self.board_px // 2
        title = self.big_font.render("Game Over", True, PALETTE["text"])
        self.window.blit(title, title.get_rect(center=(cx, cy - 60)))
        final = self.font.render(f"Final score: {state.score}", True, PALETTE["text"])
        self.window.blit(final, final.get_rect(center=(cx, cy - 16)))

        self.restart_rect.center = (cx, cy + 40)
        pygame.draw.rect(
            self.window, PALETTE["button"], self.restart_rect, border_radius=10
        )
        label = self.font.render("Restart", True, PALETTE["button_text"])
        self.window.blit(label, label.get_rect(center=self.restart_rect.center))

    def draw(self) -> None:
        """Render background, board, snake, food, HUD and overlays."""
        state = self.engine.state
        draw_background(self.window, self.backgrounds, self.shown_background, self.fade)
        self.window.blit(self.board_layer, self.board_origin)

        for idx, segment in enumerate(state.snake):
            color = PALETTE["head"] if idx == 0 else PALETTE["body"]
            self._draw_cell(segment, color, radius=6)
        if state.food is not None:
            self._draw_food(state.food)

        draw_pop_texts(
            self.window, self.pops, self.font, PALETTE["pop"], self.board_origin
        )
        self._draw_hud()
        if not state.running:
            self._draw_game_over()

    # --- Main loop -----------------------------------------------------

    def start(self) -> None:
        """Run the loop: events, drain whole ticks, react, then render."""
        clock = pygame.time.Clock()
        running = True

        while running:
            dt = clock.tick(FPS) / 1000.0
            running = self.handle_events()

            events = self.scheduler.frame(pygame.time.get_ticks())
            self.dispatch(events)
            self.update_effects(dt)

            self.draw()
            pygame.display.flip()

        pygame.quit()
