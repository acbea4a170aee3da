"""Host/plugin synchronisation of tempo, transport and notes for vocal synths."""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, replace

__all__ = [
    "TempoInfo",
    "TransportInfo",
    "AraNote",
    "AraHostAccess",
    "AraPluginExtension",
    "VocalSynthAraExtension",
    "MockDawHost",
]

_log = logging.getLogger(__name__)

_NOTE_WINDOW_SECONDS = 10.0


@dataclass(frozen=True)
class TempoInfo:
    bpm: float = 120.0
    time_signature_numerator: int = 4
    time_signature_denominator: int = 4


@dataclass(frozen=True)
class TransportInfo:
    is_playing: bool = False
    position_seconds: float = 0.0
    position_beats: float = 0.0


@dataclass(frozen=True)
class AraNote:
    """A note with optional lyric, timed in seconds."""

    start_seconds: float
    duration_seconds: float
    pitch: int
    velocity: int
    lyric: str | None = None


class AraHostAccess(ABC):
    """What a host exposes to a plugin."""

    @abstractmethod
    def get_tempo_info(self) -> TempoInfo:
        """Return the current tempo."""

    @abstractmethod
    def get_transport_info(self) -> TransportInfo:
        """Return the current transport state."""

    @abstractmethod
    def get_notes_in_range(self, start_sec: float, end_sec: float) -> list[AraNote]:
        """Return notes starting in ``[start_sec, end_sec)``."""


class AraPluginExtension(ABC):
    """Callbacks a plugin receives from the host."""

    @abstractmethod
    def on_tempo_changed(self, info: TempoInfo) -> None:
        """Handle a tempo change."""

    @abstractmethod
    def on_transport_changed(self, info: TransportInfo) -> None:
        """Handle a transport change."""

    @abstractmethod
    def on_notes_updated(self, notes: Sequence[AraNote]) -> None:
        """Handle an updated set of notes."""


class VocalSynthAraExtension(AraPluginExtension):
    """Plugin side for a vocal synthesiser, mirroring host state."""

    def __init__(self, host: AraHostAccess) -> None:
        self.host = host
        self.current_tempo = host.get_tempo_info()
        self.current_transport = host.get_transport_info()
        self.cached_notes: dict[int, AraNote] = {}
        self.next_note_id = 0

    def sync_with_host(self) -> None:
        """Pull tempo, transport and nearby notes from the host."""
        new_tempo = self.host.get_tempo_info()
        if new_tempo != self.current_tempo:
            self.on_tempo_changed(new_tempo)

        new_transport = self.host.get_transport_info()
        if new_transport != self.current_transport:
            self.on_transport_changed(new_transport)

        pos = self.current_transport.position_seconds
        self.on_notes_updated(
            self.host.get_notes_in_range(pos, pos + _NOTE_WINDOW_SECONDS)
        )

    def on_tempo_changed(self, info: TempoInfo) -> None:
        self.current_tempo = info
        _log.info("ARA: Tempo updated - BPM: %s", info.bpm)

    def on_transport_changed(self, info: TransportInfo) -> None:
        self.current_transport = info
        _log.info(
            "ARA: Transport updated - Playing: %s, Pos: %.2fs",
            info.is_playing,
            info.position_seconds,
        )

    def on_notes_updated(self, notes: Sequence[AraNote]) -> None:
        self.cached_notes.clear()
        for note in notes:
            self.cached_notes[self.next_note_id] = note
            self.next_note_id += 1
            if note.lyric is not None:
                _log.info("ARA: Note updated - Pitch: %s, Lyric: %s", note.pitch, note.lyric)
            else:
                _log.info("ARA: Note updated - Pitch: %s", note.pitch)


class MockDawHost(AraHostAccess):
    """Thread-safe in-memory host holding tempo, transport and notes."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._tempo = TempoInfo()
        self._transport = TransportInfo()
        self._notes: list[AraNote] = []

    def set_tempo(self, bpm: float) -> None:
        with self._lock:
            self._tempo = replace(self._tempo, bpm=bpm)

    def set_transport(self, is_playing: bool, position_seconds: float) -> None:
        """Set the transport; the beat position follows from the tempo."""
        with self._lock:
            self._transport = TransportInfo(
                is_playing=is_playing,
                position_seconds=position_seconds,
                position_beats=position_seconds * (self._tempo.bpm / 60.0),
            )

    def add_note(self, note: AraNote) -> None:
        with self._lock:
            self._notes.append(note)

    def clear_notes(self) -> None:
        with self._lock:
            self._notes.clear()

    def get_tempo_info(self) -> TempoInfo:
        with self._lock:
            return self._tempo

    def get_transport_info(self) -> TransportInfo:
        with self._lock:
            return self._transport

    def get_notes_in_range(self, start_sec: float, end_sec: float) -> list[AraNote]:
        with self._lock:
            return [n for n in self._notes if start_sec <= n.start_seconds < end_sec]