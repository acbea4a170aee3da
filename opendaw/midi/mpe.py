"""MIDI Polyphonic Expression: per-note bend, pressure and timbre."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["MpeNote", "MpeZone", "TIMBRE_CC", "CHANNEL_COUNT"]

TIMBRE_CC = 74
CHANNEL_COUNT = 16
_DEFAULT_TIMBRE = 64


@dataclass
class MpeNote:
    """Expression state of one sounding note on a member channel."""

    note_number: int
    velocity: int
    pitch_bend: int = 0
    pressure: int = 0
    timbre: int = _DEFAULT_TIMBRE
    release_velocity: int = 0


def _empty_channels() -> list[MpeNote | None]:
    return [None] * CHANNEL_COUNT


@dataclass
class MpeZone:
    """A master channel plus member channels that each carry one note."""

    master_channel: int
    member_channel_count: int
    member_notes: list[MpeNote | None] = field(default_factory=_empty_channels)
    master_pitch_bend: int = 0

    def _is_member(self, channel: int) -> bool:
        return 0 <= channel < CHANNEL_COUNT and channel != self.master_channel

    def _note_on(self, channel: int) -> MpeNote | None:
        return self.member_notes[channel] if self._is_member(channel) else None

    def handle_note_on(self, channel: int, note_number: int, velocity: int) -> None:
        """Start a note on a member channel; velocity 0 is a note-off."""
        if velocity == 0:
            self.handle_note_off(channel, note_number, 0)
            return
        if self._is_member(channel):
            self.member_notes[channel] = MpeNote(note_number, velocity)

    def handle_note_off(self, channel: int, note_number: int, release_velocity: int) -> None:
        """End the note on a member channel."""
        if not self._is_member(channel):
            return
        note = self.member_notes[channel]
        if note is not None:
            note.release_velocity = release_velocity
        self.member_notes[channel] = None

    def handle_pitch_bend(self, channel: int, value: int) -> None:
        """Bend the whole zone on the master channel, or one note otherwise."""
        if channel == self.master_channel:
            self.master_pitch_bend = value
            return
        note = self._note_on(channel)
        if note is not None:
            note.pitch_bend = value

    def handle_pressure(self, channel: int, value: int) -> None:
        note = self._note_on(channel)
        if note is not None:
            note.pressure = value

    def handle_control_change(self, channel: int, controller: int, value: int) -> None:
        """Apply CC74 as the note's timbre; other controllers are ignored."""
        if controller != TIMBRE_CC:
            return
        note = self._note_on(channel)
        if note is not None:
            note.timbre = value