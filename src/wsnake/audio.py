"""Procedural sound effects for W Snake."""

from __future__ import annotations

import logging
import math
from array import array
from dataclasses import dataclass
from typing import Dict, Tuple

import pygame

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Tone:
    freq: float
    duration_ms: int
    end_freq: float | None = None  # exponential glide target
    harmonics: Tuple[Tuple[float, float], ...] = ((1.0, 1.0),)
    waveform: str = "triangle"  # "sine", "square", "triangle"
    attack: float = 0.18
    volume: float = 0.5


TONES: Dict[str, Tone] = {
    # Bright blip on every fruit: 700 Hz gliding up to 1 kHz.
    "pop": Tone(freq=700, end_freq=1000, duration_ms=120, attack=0.18, volume=0.6),
    "milestone": Tone(
        freq=523,
        end_freq=1046,
        duration_ms=380,
        harmonics=((1.0, 1.0), (1.5, 0.35), (2.0, 0.2)),
        waveform="sine",
        attack=0.05,
        volume=0.55,
    ),
    "over": Tone(
        freq=220,
        end_freq=90,
        duration_ms=520,
        harmonics=((1.0, 1.0), (0.5, 0.5)),
        waveform="square",
        attack=0.02,
        volume=0.4,
    ),
}


class AudioEngine:
    """Mixer setup plus playback of the synthesized tones."""

    def __init__(self, enabled: bool = True, sample_rate: int = 32000) -> None:
        self.enabled = False
        self.sample_rate = sample_rate
        self.sounds: Dict[str, pygame.mixer.Sound] = {}
        self._channels: int = 1
        if enabled:
            self._init_audio()

    def _init_audio(self) -> None:
        try:
            pygame.mixer.init(frequency=self.sample_rate, size=-16, channels=1)
        except pygame.error as exc:
            logger.warning("Audio disabled, mixer failed to start: %s", exc)
            return

        mixer_info = pygame.mixer.get_init()
        if mixer_info:
            self.sample_rate = mixer_info[0]
            # The mixer may ignore our channel request; sounds must match it.
            self._channels = mixer_info[2]
        self.sounds = {name: self._render(tone) for name, tone in TONES.items()}
        self.enabled = True

    def _render(self, tone: Tone) -> pygame.mixer.Sound:
        """Synthesize a tone with a short attack and exponential decay."""
        return pygame.mixer.Sound(
            buffer=render_samples(tone, self.sample_rate, self._channels)
        )

    def play(self, name: str) -> None:
        if not self.enabled:
            return
        sound = self.sounds.get(name)
        if sound is None:
            return
        try:
            sound.play()
        except pygame.error as exc:
            logger.warning("Audio disabled after playback error: %s", exc)
            self.enabled = False


def render_samples(tone: Tone, sample_rate: int, channels: int = 1) -> array:
    """Return signed 16-bit PCM samples for ``tone``."""

    count = max(1, int(sample_rate * tone.duration_ms / 1000))
    attack = max(1, int(count * tone.attack))
    end_freq = tone.end_freq or tone.freq
    ratio = end_freq / tone.freq
    samples = [0.0] * count
    phase = [0.0] * len(tone.harmonics)

    for idx in range(count):
        progress = idx / count
        freq = tone.freq * ratio**progress

        value = 0.0
        for slot, (mult, weight) in enumerate(tone.harmonics):
            phase[slot] = (phase[slot] + freq * mult / sample_rate) % 1.0
            pos = phase[slot]
            if tone.waveform == "square":
                wave = 1.0 if pos < 0.5 else -1.0
            elif tone.waveform == "triangle":
                wave = 4.0 * abs(pos - 0.5) - 1.0
            else:
                wave = math.sin(2.0 * math.pi * pos)
            value += weight * wave

        if idx < attack:
            env = idx / attack
        else:
            env = math.exp(-5.0 * (idx - attack) / max(1, count - attack))
        samples[idx] = value * env

    peak = max((abs(val) for val in samples), default=1.0) or 1.0
    scale = 32767 * tone.volume / peak
    pcm = array("h")
    for val in samples:
        level = int(max(-32767, min(32767, val * scale)))
        pcm.extend([level] * channels)
    return pcm
