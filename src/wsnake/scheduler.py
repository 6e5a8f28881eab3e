"""Accumulator loop that turns frame time into whole simulation ticks."""

from __future__ import annotations

from .engine import GameEvent, SnakeEngine


class TickScheduler:
    """Drains fixed ``tick_ms`` steps from wall-clock frame deltas.

    Simulation speed stays independent of the render rate: a slow frame runs
    several ticks, a fast one may run none and keeps the remainder in
    ``state.accumulator`` for later.
    """

    def __init__(self, engine: SnakeEngine) -> None:
        self.engine = engine
        self.tick_ms = engine.config.tick_ms
        self.max_frame_ms = engine.config.max_frame_ms
        self._last_frame_time: float | None = None

    def reset(self) -> None:
        """Forget the previous timestamp so the next frame starts at zero delta."""
        self._last_frame_time = None

    def frame(self, timestamp_ms: float) -> list[GameEvent]:
        if self._last_frame_time is None:
            self._last_frame_time = timestamp_ms
        delta = timestamp_ms - self._last_frame_time
        self._last_frame_time = timestamp_ms
        return self.advance(delta)

    def advance(self, delta_ms: float) -> list[GameEvent]:
        # Clamp giant gaps so a stall does not turn into a burst of catch-up ticks.
        delta = min(max(0.0, float(delta_ms)), float(self.max_frame_ms))

        state = self.engine.state
        if not state.running:
            return []

        state.accumulator += delta
        events: list[GameEvent] = []
        while state.accumulator >= self.tick_ms and state.running:
            events.extend(self.engine.tick())
            state.accumulator -= self.tick_ms

        if not state.running:
            state.accumulator = 0.0
        return events
