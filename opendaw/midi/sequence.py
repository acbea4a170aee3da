"""Editable collections of MIDI notes, as used by a piano roll."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

__all__ = ["NoteEvent", "Sequence"]


@dataclass
class NoteEvent:
    """A note timed in beats."""

    id: int
    pitch: int
    velocity: int
    start_beat: float
    duration_beats: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> NoteEvent:
        return cls(
            id=int(data["id"]),
            pitch=int(data["pitch"]),
            velocity=int(data["velocity"]),
            start_beat=float(data["start_beat"]),
            duration_beats=float(data["duration_beats"]),
        )


@dataclass
class Sequence:
    """Notes with ids that are never reused, even after removal or clearing."""

    notes: list[NoteEvent] = field(default_factory=list)
    next_note_id: int = 0

    def add_note(
        self, pitch: int, velocity: int, start_beat: float, duration_beats: float
    ) -> int:
        """Add a note and return its newly assigned id."""
        note_id = self.next_note_id
        self.next_note_id += 1
        self.notes.append(NoteEvent(note_id, pitch, velocity, start_beat, duration_beats))
        return note_id

    def remove_note(self, note_id: int) -> bool:
        """Remove the note with ``note_id``; return whether one was removed."""
        before = len(self.notes)
        self.notes = [n for n in self.notes if n.id != note_id]
        return len(self.notes) < before

    def clear(self) -> None:
        """Remove every note; ids keep counting up."""
        self.notes.clear()

    def add_note_event(self, note: NoteEvent) -> None:
        """Add a note that already has an id, keeping future ids unique."""
        if note.id >= self.next_note_id:
            self.next_note_id = note.id + 1
        self.notes.append(note)

    def get_note(self, note_id: int) -> NoteEvent | None:
        return next((n for n in self.notes if n.id == note_id), None)

    def move_note(self, note_id: int, pitch: int, start_beat: float) -> bool:
        note = self.get_note(note_id)
        if note is None:
            return False
        note.pitch = pitch
        note.start_beat = start_beat
        return True

    def resize_note(self, note_id: int, duration_beats: float) -> bool:
        note = self.get_note(note_id)
        if note is None:
            return False
        note.duration_beats = duration_beats
        return True

    def update_velocity(self, note_id: int, velocity: int) -> bool:
        note = self.get_note(note_id)
        if note is None:
            return False
        note.velocity = velocity
        return True

    def to_dict(self) -> dict[str, Any]:
        return {
            "notes": [n.to_dict() for n in self.notes],
            "next_note_id": self.next_note_id,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Sequence:
        return cls(
            notes=[NoteEvent.from_dict(n) for n in data.get("notes", [])],
            next_note_id=int(data.get("next_note_id", 0)),
        )