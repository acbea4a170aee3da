"""Metronome click generator driven by BPM and playback position."""

from __future__ import annotations

import math
from collections.abc import MutableSequence

__all__ = ["Metronome", "DEFAULT_FREQUENCY", "ACCENT_FREQUENCY", "CLICK_DURATION_SEC"]

DEFAULT_FREQUENCY = 1000.0
ACCENT_FREQUENCY = 1500.0
CLICK_DURATION_SEC = 0.05
BEATS_PER_BAR = 4.0

_TWO_PI = 2.0 * math.pi


class Metronome:
    """Generates a short decaying sine click on every beat."""

    def __init__(self, sample_rate: float = 44100.0) -> None:
        self.sample_rate = sample_rate
        self.phase = 0.0
        self.active_frames = 0
        self.frequency = DEFAULT_FREQUENCY

    def _click_frames(self) -> int:
        return int(self.sample_rate * CLICK_DURATION_SEC)

    def _next_sample(self) -> float:
        if self.active_frames == 0:
            return 0.0

        envelope = self.active_frames / self._click_frames()
        osc_val = math.sin(self.phase)

        self.phase += _TWO_PI * self.frequency / self.sample_rate
        if self.phase >= _TWO_PI:
            self.phase -= _TWO_PI

        self.active_frames -= 1
        return osc_val * envelope * 0.5

    def process(
        self,
        buffer: MutableSequence[float],
        channels: int,
        current_sample_pos: int,
        bpm: float,
        is_enabled: bool,
    ) -> None:
        """Add clicks to an interleaved buffer starting at ``current_sample_pos``."""
        if not is_enabled or channels <= 0 or bpm <= 0.0:
            return

        frames = len(buffer) // channels
        samples_per_beat = (self.sample_rate * 60.0) / bpm
        click_frames = self._click_frames()

        for frame in range(frames):
            pos = current_sample_pos + frame
            current_beat = math.floor(pos / samples_per_beat)
            prev_beat = math.floor((pos - 1) / samples_per_beat) if pos > 0 else -1

            if current_beat > prev_beat:
                self.active_frames = click_frames
                self.phase = 0.0
                if current_beat % BEATS_PER_BAR == 0.0:
                    self.frequency = ACCENT_FREQUENCY
                else:
                    self.frequency = DEFAULT_FREQUENCY

            sample = self._next_sample()
            start = frame * channels
            for index in range(start, start + channels):
                buffer[index] += sample