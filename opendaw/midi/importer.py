"""Import of Standard MIDI Files as tracks with MIDI clips."""

from __future__ import annotations

import io
import os
from dataclasses import dataclass, field
from pathlib import Path

import mido

from opendaw.midi.sequence import Sequence
from opendaw.state.clip import MidiClip
from opendaw.state.track import Track

__all__ = ["ImportedMidiData", "read_midi_file", "parse_midi_data", "import_midi_as_tracks"]

_FALLBACK_TICKS_PER_BEAT = 480.0
_UNTERMINATED_NOTE_BEATS = 1.0
_MIN_CLIP_BEATS = 1.0


@dataclass
class ImportedMidiData:
    """One track read from a MIDI file."""

    name: str
    sequence: Sequence = field(default_factory=Sequence)


def _decode_track_name(raw: str) -> str | None:
    try:
        return raw.encode("latin-1").decode("utf-8")
    except (UnicodeEncodeError, UnicodeDecodeError):
        return None


def _read_track(track: mido.MidiTrack, default_name: str, ticks_per_beat: float) -> ImportedMidiData:
    sequence = Sequence()
    name = default_name
    ticks = 0
    active: dict[tuple[int, int], tuple[float, int]] = {}

    for msg in track:
        ticks += msg.time
        beat = ticks / ticks_per_beat

        if msg.type == "track_name":
            decoded = _decode_track_name(msg.name)
            if decoded is not None:
                name = decoded
        elif msg.type == "note_on" and msg.velocity > 0:
            active[(msg.note, msg.channel)] = (beat, msg.velocity)
        elif msg.type in ("note_on", "note_off"):
            started = active.pop((msg.note, msg.channel), None)
            if started is not None:
                start_beat, velocity = started
                duration = beat - start_beat
                if duration > 0.0:
                    sequence.add_note(msg.note, velocity, start_beat, duration)

    for (pitch, _channel), (start_beat, velocity) in active.items():
        sequence.add_note(pitch, velocity, start_beat, _UNTERMINATED_NOTE_BEATS)

    return ImportedMidiData(name, sequence)


def parse_midi_data(data: bytes) -> list[ImportedMidiData]:
    """Parse MIDI file contents into one entry per track.

    Tracks with neither notes nor an explicit name are left out. Notes never
    released get a length of one beat. Raises ValueError on malformed data.
    """
    try:
        midi = mido.MidiFile(file=io.BytesIO(bytes(data)))
    except (EOFError, OSError, ValueError, KeyError, IndexError) as exc:
        raise ValueError(f"invalid MIDI data: {exc}") from exc

    ticks_per_beat = (
        float(midi.ticks_per_beat) if midi.ticks_per_beat > 0 else _FALLBACK_TICKS_PER_BEAT
    )

    imported = []
    for number, track in enumerate(midi.tracks, start=1):
        default_name = f"Track {number}"
        data_for_track = _read_track(track, default_name, ticks_per_beat)
        if data_for_track.sequence.notes or data_for_track.name != default_name:
            imported.append(data_for_track)
    return imported


def read_midi_file(path: str | os.PathLike[str]) -> list[ImportedMidiData]:
    """Read and parse the MIDI file at ``path``."""
    return parse_midi_data(Path(path).read_bytes())


def import_midi_as_tracks(
    path: str | os.PathLike[str], start_id: int
) -> list[tuple[Track, MidiClip]]:
    """Turn each track of a MIDI file into a synth-enabled track and its clip.

    Track and clip ids count up from ``start_id``; each clip is at least a beat long.
    """
    results = []
    for offset, data in enumerate(read_midi_file(path)):
        item_id = start_id + offset
        track = Track(item_id, data.name)
        track.toggle_synth()

        end = max(
            (n.start_beat + n.duration_beats for n in data.sequence.notes), default=0.0
        )
        length_beats = end if end > 0.0 else _MIN_CLIP_BEATS

        clip = MidiClip(item_id, f"{data.name} Clip", 0.0, length_beats)
        clip.sequence = data.sequence
        results.append((track, clip))
    return results