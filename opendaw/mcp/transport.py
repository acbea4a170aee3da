"""Transport control requests arriving over MCP."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from opendaw.mcp.commands import McpCommand, McpCommandSender, Play, Stop, ToggleLoop

__all__ = ["TransportHandler"]

_log = logging.getLogger(__name__)


@dataclass
class TransportHandler:
    """Forwards play, stop and loop requests to the UI when a sender is set."""

    sender: McpCommandSender | None = None

    def _forward(self, command: McpCommand) -> None:
        if self.sender is not None:
            self.sender.try_send(command)

    async def play(self) -> None:
        """Start playback."""
        _log.info("MCP: Playback started")
        self._forward(Play())

    async def stop(self) -> None:
        """Stop playback."""
        _log.info("MCP: Playback stopped")
        self._forward(Stop())

    async def toggle_loop(self) -> None:
        """Toggle loop playback."""
        _log.info("MCP: Loop toggled")
        self._forward(ToggleLoop())