"""Merging project JSON received from the backend into the local state."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from opendaw.state.clip import AudioClip, MidiClip
from opendaw.state.daw import DawState
from opendaw.state.track import Track

__all__ = ["sync_project_state_json"]

_PARSE_ERRORS = (ValueError, TypeError, KeyError)


def _as_bool(value: Any) -> bool | None:
    return value if isinstance(value, bool) else None


def _as_float(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def _as_uint(value: Any) -> int | None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return None
    return value


def _get(container: Any, key: str) -> Any:
    return container.get(key) if isinstance(container, Mapping) else None


def _ids(items: list[Any]) -> set[int]:
    return {i for i in (_as_uint(_get(item, "id")) for item in items) if i is not None}


def _sync_audio_clips(track: Track, clips: list[Any], is_dragging_clip: bool) -> None:
    for clip_val in clips:
        try:
            parsed = AudioClip.from_dict(clip_val)
        except _PARSE_ERRORS:
            continue
        existing = next((c for c in track.clips if c.id == parsed.id), None)
        if existing is None:
            track.clips.append(parsed)
            continue
        existing.name = parsed.name
        if not is_dragging_clip:
            existing.start_pos = parsed.start_pos
        existing.length = parsed.length
    keep = _ids(clips)
    track.clips = [c for c in track.clips if c.id in keep]


def _sync_midi_clips(track: Track, clips: list[Any], is_dragging_clip: bool) -> None:
    for clip_val in clips:
        try:
            parsed = MidiClip.from_dict(clip_val)
        except _PARSE_ERRORS:
            continue
        existing = next((c for c in track.midi_clips if c.id == parsed.id), None)
        if existing is None:
            track.midi_clips.append(parsed)
            continue
        existing.name = parsed.name
        if not is_dragging_clip:
            existing.start_beat = parsed.start_beat
        existing.length_beats = parsed.length_beats
    keep = _ids(clips)
    track.midi_clips = [c for c in track.midi_clips if c.id in keep]


def _sync_track(track: Track, track_val: Mapping[str, Any], is_dragging_clip: bool) -> None:
    if isinstance(name := track_val.get("name"), str):
        track.name = name
    if (volume := _as_float(track_val.get("volume"))) is not None:
        track.volume = volume
    if (pan := _as_float(track_val.get("pan"))) is not None:
        track.pan = pan
    if (muted := _as_bool(track_val.get("is_muted"))) is not None:
        track.is_muted = muted
    if (solo := _as_bool(track_val.get("is_solo"))) is not None:
        track.is_solo = solo
    if (armed := _as_bool(track_val.get("is_record_armed"))) is not None:
        track.is_record_armed = armed
    if isinstance(clips := track_val.get("clips"), list):
        _sync_audio_clips(track, clips, is_dragging_clip)
    if isinstance(midi_clips := track_val.get("midi_clips"), list):
        _sync_midi_clips(track, midi_clips, is_dragging_clip)


def _sync_tracks(state: DawState, tracks: list[Any], is_dragging_clip: bool) -> None:
    for track_val in tracks:
        track_id = _as_uint(_get(track_val, "id"))
        if track_id is None:
            continue
        track = state.find_track(track_id)
        if track is not None:
            _sync_track(track, track_val, is_dragging_clip)
            continue
        try:
            state.tracks.append(Track.from_dict(track_val))
        except _PARSE_ERRORS:
            continue
    keep = _ids(tracks)
    state.tracks = [t for t in state.tracks if t.id in keep]


def sync_project_state_json(state: DawState, is_dragging_clip: bool, json_str: str) -> None:
    """Apply the backend's project JSON to ``state``.

    Fields that are absent or of the wrong type are left untouched; invalid JSON
    is ignored. Tracks and clips missing from the JSON are removed, and while a
    clip is being dragged its local start position is kept.
    """
    try:
        parsed = json.loads(json_str)
    except (json.JSONDecodeError, TypeError):
        return
    if not isinstance(parsed, Mapping):
        return

    if (is_playing := _as_bool(parsed.get("is_playing"))) is not None:
        state.is_playing = is_playing
    if (bpm := _as_float(parsed.get("bpm"))) is not None:
        state.bpm = bpm
    if (volume := _as_float(parsed.get("master_volume"))) is not None:
        state.master_volume = volume

    grid = parsed.get("grid_settings")
    if (is_enabled := _as_bool(_get(grid, "is_enabled"))) is not None:
        state.is_grid_enabled = is_enabled
    if (resolution := _as_uint(_get(grid, "resolution"))) is not None:
        state.grid_resolution = resolution

    if isinstance(tracks := parsed.get("tracks"), list):
        _sync_tracks(state, tracks, is_dragging_clip)