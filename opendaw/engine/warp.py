"""Time-stretch stage through which audio clips follow tempo changes."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["TimeStretcher"]


class TimeStretcher:
    """Per-channel time-stretch/pitch-shift stage.

    The stretching itself passes audio through unchanged; the configured
    ratio and pitch scale are recorded for the processing stage.
    """

    def __init__(self, sample_rate: int, channels: int) -> None:
        self.sample_rate = sample_rate
        self.channels = channels
        self.time_ratio = 1.0
        self.pitch_scale = 1.0

    def set_time_ratio(self, ratio: float) -> None:
        """Set the stretch ratio: above 1.0 is slower, below is faster."""
        self.time_ratio = ratio

    def set_pitch_scale(self, scale: float) -> None:
        """Set the pitch scale: above 1.0 is higher, below is lower."""
        self.pitch_scale = scale

    def process(self, input_buffers: Sequence[Sequence[float]]) -> list[list[float]]:
        """Process one block of per-channel buffers and return the output."""
        return [list(buffer) for buffer in input_buffers]

    def flush(self) -> list[list[float]]:
        """Return whatever remains buffered, one list per channel."""
        return [[] for _ in range(self.channels)]

    def update_format(self, sample_rate: int, channels: int) -> None:
        """Change the sample rate and channel count."""
        self.sample_rate = sample_rate
        self.channels = channels