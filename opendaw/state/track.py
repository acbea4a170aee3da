"""State of a single track: mix settings, effects, synth and clips."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from opendaw.state.clip import (
    AudioClip,
    MidiClip,
    _bool_field,
    _field,
    _float_field,
    _int_field,
    _str_field,
)

__all__ = [
    "EffectKind",
    "EffectType",
    "EffectSetting",
    "Waveform",
    "AdsrParams",
    "SynthSetting",
    "TrackType",
    "VocalSynthSetting",
    "Track",
]


class EffectKind(Enum):
    GAIN = "Gain"
    FILTER = "Filter"
    DELAY = "Delay"


@dataclass(frozen=True)
class EffectType:
    """Kind of an effect; delay parameters only apply to the delay kind."""

    kind: EffectKind
    time_ms: float = 0.0
    feedback: float = 0.0
    mix: float = 0.0

    def __post_init__(self) -> None:
        if self.kind is not EffectKind.DELAY and (self.time_ms, self.feedback, self.mix) != (
            0.0,
            0.0,
            0.0,
        ):
            raise ValueError(f"{self.kind.value} effect takes no delay parameters")


def _effect_type_to_value(effect_type: EffectType) -> Any:
    if effect_type.kind is EffectKind.DELAY:
        return {
            "Delay": {
                "time_ms": effect_type.time_ms,
                "feedback": effect_type.feedback,
                "mix": effect_type.mix,
            }
        }
    return effect_type.kind.value


def _effect_type_from_value(value: Any) -> EffectType:
    if value in (EffectKind.GAIN.value, EffectKind.FILTER.value):
        return EffectType(EffectKind(value))
    if isinstance(value, Mapping) and set(value) == {"Delay"}:
        body = value["Delay"]
        return EffectType(
            EffectKind.DELAY,
            _float_field(body, "time_ms"),
            _float_field(body, "feedback"),
            _float_field(body, "mix"),
        )
    raise ValueError(f"unknown effect type: {value!r}")


@dataclass
class EffectSetting:
    """An effect in a track's chain."""

    id: int
    effect_type: EffectType
    is_enabled: bool = True
    last_sent_type: EffectType | None = None

    def _to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "effect_type": _effect_type_to_value(self.effect_type),
            "is_enabled": self.is_enabled,
        }

    @classmethod
    def _from_dict(cls, data: Any) -> EffectSetting:
        return cls(
            id=_int_field(data, "id"),
            effect_type=_effect_type_from_value(_field(data, "effect_type")),
            is_enabled=_bool_field(data, "is_enabled"),
        )


class Waveform(Enum):
    SINE = "Sine"
    SQUARE = "Square"
    SAWTOOTH = "Sawtooth"


@dataclass(frozen=True)
class AdsrParams:
    """Envelope times in seconds and sustain level in 0..1."""

    attack: float = 0.01
    decay: float = 0.1
    sustain: float = 0.5
    release: float = 0.1

    def _to_dict(self) -> dict[str, float]:
        return {
            "attack": self.attack,
            "decay": self.decay,
            "sustain": self.sustain,
            "release": self.release,
        }

    @classmethod
    def _from_dict(cls, data: Any) -> AdsrParams:
        return cls(
            attack=_float_field(data, "attack"),
            decay=_float_field(data, "decay"),
            sustain=_float_field(data, "sustain"),
            release=_float_field(data, "release"),
        )


def _waveform_from_value(value: Any) -> Waveform:
    try:
        return Waveform(value)
    except ValueError:
        raise ValueError(f"unknown waveform: {value!r}") from None


@dataclass
class SynthSetting:
    is_enabled: bool = False
    frequency: float = 440.0
    waveform: Waveform = Waveform.SINE
    adsr: AdsrParams = field(default_factory=AdsrParams)
    last_sent_params: tuple[Waveform, AdsrParams] | None = None

    def _to_dict(self) -> dict[str, Any]:
        return {
            "is_enabled": self.is_enabled,
            "frequency": self.frequency,
            "waveform": self.waveform.value,
            "adsr": self.adsr._to_dict(),
        }

    @classmethod
    def _from_dict(cls, data: Any) -> SynthSetting:
        setting = cls(
            is_enabled=_bool_field(data, "is_enabled"),
            frequency=_float_field(data, "frequency"),
        )
        if "waveform" in data:
            setting.waveform = _waveform_from_value(data["waveform"])
        if "adsr" in data:
            setting.adsr = AdsrParams._from_dict(data["adsr"])
        return setting


class TrackType(Enum):
    NORMAL = "Normal"
    VOCAL_SYNTH = "VocalSynth"


@dataclass
class VocalSynthSetting:
    """Settings for a vocal synthesis engine on a vocal-synth track."""

    is_enabled: bool = False
    singer_id: str | None = None

    def _to_dict(self) -> dict[str, Any]:
        return {"is_enabled": self.is_enabled, "singer_id": self.singer_id}

    @classmethod
    def _from_dict(cls, data: Any) -> VocalSynthSetting:
        singer_id = _field(data, "singer_id")
        if singer_id is not None and not isinstance(singer_id, str):
            raise ValueError("field 'singer_id' must be a string or null")
        return cls(is_enabled=_bool_field(data, "is_enabled"), singer_id=singer_id)


def _list_field(data: Any, key: str) -> list[Any]:
    value = _field(data, key)
    if not isinstance(value, list):
        raise ValueError(f"field '{key}' must be a list")
    return value


class Track:
    """One track of the project."""

    def __init__(
        self,
        track_id: int,
        name: str,
        *,
        volume: float = 1.0,
        pan: float = 0.0,
        is_muted: bool = False,
        is_solo: bool = False,
        is_record_armed: bool = False,
        effects: Iterable[EffectSetting] = (),
        synth: SynthSetting | None = None,
        track_type: TrackType = TrackType.NORMAL,
        vocal_synth: VocalSynthSetting | None = None,
        clips: Iterable[AudioClip] = (),
        midi_clips: Iterable[MidiClip] = (),
    ) -> None:
        self.id = track_id
        self.name = name
        self.volume = volume
        self.pan = pan
        self.is_muted = is_muted
        self.is_solo = is_solo
        self.is_record_armed = is_record_armed
        self.effects: list[EffectSetting] = list(effects)
        self.synth = synth if synth is not None else SynthSetting()
        self.track_type = track_type
        self.vocal_synth = vocal_synth if vocal_synth is not None else VocalSynthSetting()
        self.clips: list[AudioClip] = list(clips)
        self.midi_clips: list[MidiClip] = list(midi_clips)

    def __repr__(self) -> str:
        return f"Track(id={self.id!r}, name={self.name!r})"

    @property
    def volume(self) -> float:
        """Track volume; never below 0.0, boosts above 1.0 allowed."""
        return self._volume

    @volume.setter
    def volume(self, value: float) -> None:
        self._volume = max(value, 0.0)

    @property
    def pan(self) -> float:
        """Pan position from -1.0 (left) to 1.0 (right)."""
        return self._pan

    @pan.setter
    def pan(self, value: float) -> None:
        self._pan = min(max(value, -1.0), 1.0)

    def toggle_mute(self) -> None:
        self.is_muted = not self.is_muted

    def toggle_solo(self) -> None:
        self.is_solo = not self.is_solo

    def toggle_record_arm(self) -> None:
        self.is_record_armed = not self.is_record_armed

    def add_effect(self, effect: EffectSetting) -> None:
        self.effects.append(effect)

    def remove_effect(self, effect_id: int) -> None:
        self.effects = [e for e in self.effects if e.id != effect_id]

    def move_effect(self, from_index: int, to_index: int) -> None:
        """Move an effect within the chain; out-of-range indices do nothing."""
        count = len(self.effects)
        if 0 <= from_index < count and 0 <= to_index < count:
            self.effects.insert(to_index, self.effects.pop(from_index))

    def toggle_synth(self) -> None:
        self.synth.is_enabled = not self.synth.is_enabled

    def set_synth_frequency(self, freq: float) -> None:
        """Set the synth frequency, clamped to 20 Hz .. 20 kHz."""
        self.synth.frequency = min(max(freq, 20.0), 20000.0)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "volume": self.volume,
            "pan": self.pan,
            "is_muted": self.is_muted,
            "is_solo": self.is_solo,
            "is_record_armed": self.is_record_armed,
            "effects": [e._to_dict() for e in self.effects],
            "synth": self.synth._to_dict(),
            "track_type": self.track_type.value,
            "vocal_synth": self.vocal_synth._to_dict(),
            "clips": [c.to_dict() for c in self.clips],
            "midi_clips": [c.to_dict() for c in self.midi_clips],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Track:
        """Build a track from its dictionary form; raise ValueError if malformed."""
        track = cls(
            _int_field(data, "id"),
            _str_field(data, "name"),
            volume=_float_field(data, "volume"),
            pan=_float_field(data, "pan"),
            is_muted=_bool_field(data, "is_muted"),
            is_solo=_bool_field(data, "is_solo"),
            is_record_armed=_bool_field(data, "is_record_armed"),
            effects=[EffectSetting._from_dict(e) for e in _list_field(data, "effects")],
        )
        if "synth" in data:
            track.synth = SynthSetting._from_dict(data["synth"])
        if "track_type" in data:
            try:
                track.track_type = TrackType(data["track_type"])
            except ValueError:
                raise ValueError(f"unknown track type: {data['track_type']!r}") from None
        if "vocal_synth" in data:
            track.vocal_synth = VocalSynthSetting._from_dict(data["vocal_synth"])
        if "clips" in data:
            track.clips = [AudioClip.from_dict(c) for c in _list_field(data, "clips")]
        if "midi_clips" in data:
            track.midi_clips = [MidiClip.from_dict(c) for c in _list_field(data, "midi_clips")]
        return track