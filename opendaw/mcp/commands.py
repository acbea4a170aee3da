"""Commands sent from the MCP server to the UI, and the channel carrying them."""

from __future__ import annotations

import queue
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Union

__all__ = [
    "Play",
    "Stop",
    "ToggleLoop",
    "AddTrack",
    "RemoveTrack",
    "SelectTrack",
    "ToggleMute",
    "ToggleSolo",
    "ToggleRecordArm",
    "ToggleGlobalRecord",
    "RequestTrackJson",
    "McpCommand",
    "McpCommandSender",
    "McpCommandReceiver",
    "create_mcp_channel",
]


@dataclass(frozen=True)
class Play:
    pass


@dataclass(frozen=True)
class Stop:
    pass


@dataclass(frozen=True)
class ToggleLoop:
    pass


@dataclass(frozen=True)
class AddTrack:
    pass


@dataclass(frozen=True)
class RemoveTrack:
    track_id: int


@dataclass(frozen=True)
class SelectTrack:
    """Select a track, or clear the selection with None."""

    track_id: int | None


@dataclass(frozen=True)
class ToggleMute:
    track_id: int


@dataclass(frozen=True)
class ToggleSolo:
    track_id: int


@dataclass(frozen=True)
class ToggleRecordArm:
    track_id: int


@dataclass(frozen=True)
class ToggleGlobalRecord:
    pass


@dataclass(frozen=True)
class RequestTrackJson:
    pass


McpCommand = Union[
    Play,
    Stop,
    ToggleLoop,
    AddTrack,
    RemoveTrack,
    SelectTrack,
    ToggleMute,
    ToggleSolo,
    ToggleRecordArm,
    ToggleGlobalRecord,
    RequestTrackJson,
]


class McpCommandSender:
    """Sending end of a bounded command channel."""

    def __init__(self, channel: queue.Queue[McpCommand]) -> None:
        self._channel = channel

    def send(self, command: McpCommand, timeout: float | None = None) -> None:
        """Queue a command, waiting for room; raise TimeoutError on timeout."""
        try:
            self._channel.put(command, timeout=timeout)
        except queue.Full:
            raise TimeoutError("command channel stayed full") from None

    def try_send(self, command: McpCommand) -> bool:
        """Queue a command without waiting; return False if the channel is full."""
        try:
            self._channel.put_nowait(command)
        except queue.Full:
            return False
        return True


class McpCommandReceiver:
    """Receiving end of a bounded command channel."""

    def __init__(self, channel: queue.Queue[McpCommand]) -> None:
        self._channel = channel

    def recv(self, timeout: float | None = None) -> McpCommand:
        """Wait for the next command; raise TimeoutError on timeout."""
        try:
            return self._channel.get(timeout=timeout)
        except queue.Empty:
            raise TimeoutError("no command received") from None

    def try_recv(self) -> McpCommand | None:
        """Return the next command, or None if none is waiting."""
        try:
            return self._channel.get_nowait()
        except queue.Empty:
            return None

    def drain(self) -> Iterator[McpCommand]:
        """Yield waiting commands until the channel is empty."""
        while (command := self.try_recv()) is not None:
            yield command

    def __len__(self) -> int:
        return self._channel.qsize()


def create_mcp_channel(capacity: int) -> tuple[McpCommandSender, McpCommandReceiver]:
    """Create a FIFO channel holding at most ``capacity`` commands."""
    if capacity < 1:
        raise ValueError("channel capacity must be at least 1")
    channel: queue.Queue[McpCommand] = queue.Queue(maxsize=capacity)
    return McpCommandSender(channel), McpCommandReceiver(channel)