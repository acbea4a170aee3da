"""MCP server that lets AI agents drive the DAW."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from opendaw.mcp.tracks import TracksHandler
from opendaw.mcp.transport import TransportHandler

__all__ = ["McpServer"]

_log = logging.getLogger(__name__)


@dataclass
class McpServer:
    """Holds the transport and track handlers that serve MCP requests."""

    transport_handler: TransportHandler = field(default_factory=TransportHandler)
    tracks_handler: TracksHandler = field(default_factory=TracksHandler)

    async def run(self) -> None:
        """Start the server."""
        _log.info("MCP Server is starting...")