"""Audio and MIDI clips placed on a track's timeline."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from opendaw.midi.sequence import Sequence

__all__ = ["AudioClip", "MidiClip"]


def _field(data: Any, key: str) -> Any:
    if not isinstance(data, Mapping):
        raise ValueError(f"expected an object, got {type(data).__name__}")
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"missing field '{key}'") from None


def _float_field(data: Any, key: str) -> float:
    value = _field(data, key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"field '{key}' must be a number")
    return float(value)


def _int_field(data: Any, key: str) -> int:
    value = _field(data, key)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"field '{key}' must be a non-negative integer")
    return value


def _bool_field(data: Any, key: str) -> bool:
    value = _field(data, key)
    if not isinstance(value, bool):
        raise ValueError(f"field '{key}' must be a boolean")
    return value


def _str_field(data: Any, key: str) -> str:
    value = _field(data, key)
    if not isinstance(value, str):
        raise ValueError(f"field '{key}' must be a string")
    return value


def _float_list_field(data: Any, key: str) -> list[float]:
    value = _field(data, key)
    if not isinstance(value, list) or any(
        isinstance(v, bool) or not isinstance(v, (int, float)) for v in value
    ):
        raise ValueError(f"field '{key}' must be a list of numbers")
    return [float(v) for v in value]


@dataclass
class AudioClip:
    """Recorded audio on the timeline with a waveform summary for drawing."""

    id: int
    name: str
    start_pos: float
    length: float
    waveform_summary: list[float] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "start_pos": self.start_pos,
            "length": self.length,
            "waveform_summary": list(self.waveform_summary),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AudioClip:
        """Build a clip from its dictionary form; raise ValueError if malformed."""
        return cls(
            id=_int_field(data, "id"),
            name=_str_field(data, "name"),
            start_pos=_float_field(data, "start_pos"),
            length=_float_field(data, "length"),
            waveform_summary=_float_list_field(data, "waveform_summary"),
        )


@dataclass
class MidiClip:
    """A note sequence placed on the timeline, timed in beats."""

    id: int
    name: str
    start_beat: float
    length_beats: float
    sequence: Sequence = field(default_factory=Sequence)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "start_beat": self.start_beat,
            "length_beats": self.length_beats,
            "sequence": self.sequence.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MidiClip:
        """Build a clip from its dictionary form; raise ValueError if malformed."""
        raw_sequence = _field(data, "sequence")
        if not isinstance(raw_sequence, Mapping):
            raise ValueError("field 'sequence' must be an object")
        try:
            sequence = Sequence.from_dict(dict(raw_sequence))
        except (KeyError, TypeError, ValueError) as exc:
            raise ValueError(f"invalid sequence: {exc}") from exc
        return cls(
            id=_int_field(data, "id"),
            name=_str_field(data, "name"),
            start_beat=_float_field(data, "start_beat"),
            length_beats=_float_field(data, "length_beats"),
            sequence=sequence,
        )