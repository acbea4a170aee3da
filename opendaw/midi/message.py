"""Parsing of raw MIDI bytes into channel messages."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

__all__ = [
    "NoteOff",
    "NoteOn",
    "ControlChange",
    "PitchBend",
    "Unknown",
    "MidiMessage",
    "MidiEvent",
    "parse_message",
]


@dataclass(frozen=True)
class NoteOff:
    channel: int
    note: int
    velocity: int


@dataclass(frozen=True)
class NoteOn:
    channel: int
    note: int
    velocity: int


@dataclass(frozen=True)
class ControlChange:
    channel: int
    controller: int
    value: int


@dataclass(frozen=True)
class PitchBend:
    """14-bit pitch bend value, 8192 at centre."""

    channel: int
    value: int


@dataclass(frozen=True)
class Unknown:
    """A message that is unsupported or incomplete."""

    data: bytes


MidiMessage = Union[NoteOff, NoteOn, ControlChange, PitchBend, Unknown]


def parse_message(data: bytes | bytearray | list[int]) -> MidiMessage:
    """Parse raw MIDI bytes; note-on with velocity 0 becomes note-off."""
    raw = bytes(data)
    if len(raw) < 3:
        return Unknown(raw)

    status, first, second = raw[0], raw[1], raw[2]
    kind = status & 0xF0
    channel = status & 0x0F

    if kind == 0x80:
        return NoteOff(channel, first, second)
    if kind == 0x90:
        if second == 0:
            return NoteOff(channel, first, 0)
        return NoteOn(channel, first, second)
    if kind == 0xB0:
        return ControlChange(channel, first, second)
    if kind == 0xE0:
        return PitchBend(channel, (second << 7) | first)
    return Unknown(raw)


@dataclass(frozen=True)
class MidiEvent:
    """A timestamped raw MIDI message with its parsed form."""

    stamp: int
    message: bytes
    parsed: MidiMessage = field(compare=True)

    @classmethod
    def from_bytes(cls, stamp: int, message: bytes | bytearray | list[int]) -> MidiEvent:
        raw = bytes(message)
        return cls(stamp, raw, parse_message(raw))