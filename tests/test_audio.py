"""Tests for tone synthesis; playback is not exercised."""

from wsnake.audio import TONES, AudioEngine, Tone, render_samples


def test_pop_tone_length_and_range():
    pcm = render_samples(TONES["pop"], 32000)
    assert len(pcm) == 32000 * 120 // 1000
    assert max(abs(v) for v in pcm) <= 32767
    assert max(abs(v) for v in pcm) > 0


def test_stereo_duplicates_each_sample():
    tone = Tone(freq=440, duration_ms=10, waveform="sine")
    mono = render_samples(tone, 8000, channels=1)
    stereo = render_samples(tone, 8000, channels=2)
    assert len(stereo) == 2 * len(mono)
    assert list(stereo[0::2]) == list(stereo[1::2])


def test_every_tone_renders():
    for name, tone in TONES.items():
        assert len(render_samples(tone, 16000)) > 0, name


def test_disabled_engine_is_silent():
    audio = AudioEngine(enabled=False)
    assert audio.enabled is False
    audio.play("pop")
    audio.play("missing")
