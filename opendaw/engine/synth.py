"""Simple oscillator with waveform selection and an ADSR envelope."""

from __future__ import annotations

import math
from collections.abc import MutableSequence
from dataclasses import dataclass, field
from enum import Enum

__all__ = ["Waveform", "AdsrParams", "AdsrState", "AdsrEnvelope", "Oscillator"]

_TWO_PI = 2.0 * math.pi
_EPSILON = 1e-5


class Waveform(Enum):
    """Oscillator waveform."""

    SINE = "sine"
    SQUARE = "square"
    SAWTOOTH = "sawtooth"


@dataclass
class AdsrParams:
    """Envelope times in seconds and sustain level in 0..1."""

    attack: float = 0.01
    decay: float = 0.1
    sustain: float = 0.5
    release: float = 0.1


class AdsrState(Enum):
    """Current stage of an ADSR envelope."""

    IDLE = "idle"
    ATTACK = "attack"
    DECAY = "decay"
    SUSTAIN = "sustain"
    RELEASE = "release"


@dataclass
class AdsrEnvelope:
    """Linear ADSR envelope advanced one sample at a time."""

    sample_rate: float
    params: AdsrParams = field(default_factory=AdsrParams)
    state: AdsrState = AdsrState.IDLE
    value: float = 0.0

    def note_on(self) -> None:
        self.state = AdsrState.ATTACK

    def note_off(self) -> None:
        if self.state is not AdsrState.IDLE:
            self.state = AdsrState.RELEASE

    @property
    def is_idle(self) -> bool:
        return self.state is AdsrState.IDLE

    def next_value(self) -> float:
        """Advance the envelope by one sample and return its value."""
        params = self.params
        if self.state is AdsrState.IDLE:
            self.value = 0.0
        elif self.state is AdsrState.ATTACK:
            self.value += 1.0 / (params.attack * self.sample_rate + _EPSILON)
            if self.value >= 1.0:
                self.value = 1.0
                self.state = AdsrState.DECAY
        elif self.state is AdsrState.DECAY:
            self.value -= (1.0 - params.sustain) / (
                params.decay * self.sample_rate + _EPSILON
            )
            if self.value <= params.sustain:
                self.value = params.sustain
                self.state = AdsrState.SUSTAIN
        elif self.state is AdsrState.SUSTAIN:
            self.value = params.sustain
        else:
            self.value -= self.value / (params.release * self.sample_rate + _EPSILON)
            if self.value <= 0.0:
                self.value = 0.0
                self.state = AdsrState.IDLE
        return self.value


class Oscillator:
    """Single-voice oscillator shaped by an ADSR envelope."""

    def __init__(self, sample_rate: float) -> None:
        self._sample_rate = sample_rate
        self.frequency = 440.0
        self.phase = 0.0
        self._gate = False
        self.waveform = Waveform.SINE
        self.envelope = AdsrEnvelope(sample_rate)

    @property
    def sample_rate(self) -> float:
        return self._sample_rate

    @sample_rate.setter
    def sample_rate(self, value: float) -> None:
        self._sample_rate = value
        self.envelope.sample_rate = value

    @property
    def is_active(self) -> bool:
        """True while the envelope is still sounding."""
        return not self.envelope.is_idle

    def set_active(self, active: bool) -> None:
        """Open or close the gate, triggering note on/off on a change."""
        if active and not self._gate:
            self.phase = 0.0
            self.envelope.note_on()
        elif not active and self._gate:
            self.envelope.note_off()
        self._gate = active

    def next_sample(self) -> float:
        """Produce one enveloped sample and advance the phase."""
        if self.envelope.is_idle:
            return 0.0

        env_val = self.envelope.next_value()

        if self.waveform is Waveform.SINE:
            osc_val = math.sin(self.phase)
        elif self.waveform is Waveform.SQUARE:
            osc_val = 1.0 if self.phase < math.pi else -1.0
        else:
            osc_val = self.phase / math.pi - 1.0

        self.phase += _TWO_PI * self.frequency / self._sample_rate
        if self.phase >= _TWO_PI:
            self.phase -= _TWO_PI

        return osc_val * env_val

    def process_add(self, buffer: MutableSequence[float], channels: int) -> None:
        """Add generated samples to every channel of an interleaved buffer."""
        if self.envelope.is_idle or channels <= 0:
            return

        frames = len(buffer) // channels
        for frame in range(frames):
            sample = self.next_sample()
            start = frame * channels
            for index in range(start, start + channels):
                buffer[index] += sample