"""Core DAW state: transport, master settings, tracks and the active sequence."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from opendaw.midi.sequence import Sequence
from opendaw.state.clip import _bool_field, _field, _float_field, _int_field
from opendaw.state.track import Track

__all__ = ["DawState"]

_TIMELINE_END = 100.0
_REFERENCE_BPM = 120.0


@dataclass
class DawState:
    """Project-wide state; transport flags and playhead are not persisted."""

    is_playing: bool = False
    is_recording: bool = False
    is_looping: bool = True
    is_metronome_enabled: bool = False
    playhead_pos: float = 0.0
    master_volume: float = 0.8
    is_muted: bool = False
    bpm: float = 120.0
    tracks: list[Track] = field(default_factory=list)
    next_track_id: int = 1
    active_sequence: Sequence = field(default_factory=Sequence)
    is_grid_enabled: bool = True
    grid_resolution: int = 4

    def toggle_mute(self) -> None:
        self.is_muted = not self.is_muted

    def toggle_playback(self) -> None:
        self.is_playing = not self.is_playing

    def toggle_recording(self) -> None:
        self.is_recording = not self.is_recording

    def stop_playback(self) -> None:
        """Stop and return the playhead to the start."""
        self.is_playing = False
        self.playhead_pos = 0.0

    def toggle_loop(self) -> None:
        self.is_looping = not self.is_looping

    def toggle_metronome(self) -> None:
        self.is_metronome_enabled = not self.is_metronome_enabled

    def seek_to(self, pos: float) -> None:
        """Move the playhead, clamped to 0.0 .. 100.0."""
        self.playhead_pos = min(max(pos, 0.0), _TIMELINE_END)

    def tick_playback(self) -> None:
        """Advance the playhead one frame at a BPM-relative speed.

        Past the end it wraps to the start, stopping unless looping.
        """
        if not self.is_playing:
            return
        self.playhead_pos += self.bpm / _REFERENCE_BPM
        if self.playhead_pos > _TIMELINE_END:
            self.playhead_pos = 0.0
            if not self.is_looping:
                self.is_playing = False

    def add_track(self, name: str) -> Track:
        """Append a track with a fresh id, never reusing removed ids."""
        track = Track(self.next_track_id, name)
        self.next_track_id += 1
        self.tracks.append(track)
        return track

    def remove_track(self, track_id: int) -> None:
        self.tracks = [t for t in self.tracks if t.id != track_id]

    def find_track(self, track_id: int) -> Track | None:
        return next((t for t in self.tracks if t.id == track_id), None)

    def to_dict(self) -> dict[str, Any]:
        return {
            "is_looping": self.is_looping,
            "is_metronome_enabled": self.is_metronome_enabled,
            "master_volume": self.master_volume,
            "is_muted": self.is_muted,
            "bpm": self.bpm,
            "tracks": [t.to_dict() for t in self.tracks],
            "next_track_id": self.next_track_id,
            "active_sequence": self.active_sequence.to_dict(),
            "is_grid_enabled": self.is_grid_enabled,
            "grid_resolution": self.grid_resolution,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DawState:
        """Build state from its dictionary form; raise ValueError if malformed."""
        tracks = _field(data, "tracks")
        if not isinstance(tracks, list):
            raise ValueError("field 'tracks' must be a list")
        raw_sequence = _field(data, "active_sequence")
        if not isinstance(raw_sequence, Mapping):
            raise ValueError("field 'active_sequence' must be an object")
        try:
            sequence = Sequence.from_dict(dict(raw_sequence))
        except (KeyError, TypeError, ValueError) as exc:
            raise ValueError(f"invalid active sequence: {exc}") from exc
        return cls(
            is_looping=_bool_field(data, "is_looping"),
            is_metronome_enabled=_bool_field(data, "is_metronome_enabled"),
            master_volume=_float_field(data, "master_volume"),
            is_muted=_bool_field(data, "is_muted"),
            bpm=_float_field(data, "bpm"),
            tracks=[Track.from_dict(t) for t in tracks],
            next_track_id=_int_field(data, "next_track_id"),
            active_sequence=sequence,
            is_grid_enabled=_bool_field(data, "is_grid_enabled"),
            grid_resolution=_int_field(data, "grid_resolution"),
        )