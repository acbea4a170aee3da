"""Track add/remove requests arriving over MCP."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from opendaw.mcp.commands import AddTrack, McpCommand, McpCommandSender, RemoveTrack

__all__ = ["TracksHandler"]

_log = logging.getLogger(__name__)


@dataclass
class TracksHandler:
    """Forwards track requests to the UI when a sender is set."""

    sender: McpCommandSender | None = None

    def _forward(self, command: McpCommand) -> None:
        if self.sender is not None:
            self.sender.try_send(command)

    async def add_track(self) -> None:
        """Add a new track."""
        _log.info("MCP: Track added")
        self._forward(AddTrack())

    async def remove_track(self, track_id: int) -> None:
        """Remove the track with ``track_id``."""
        _log.info("MCP: Track removed")
        self._forward(RemoveTrack(track_id))