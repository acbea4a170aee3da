import logging

import pytest

from opendaw.mcp.commands import AddTrack, Play, create_mcp_channel
from opendaw.mcp.server import McpServer
from opendaw.mcp.tracks import TracksHandler
from opendaw.mcp.transport import TransportHandler


def test_mcp_server_creation():
    server = McpServer()
    assert server.transport_handler == TransportHandler()
    assert server.tracks_handler == TracksHandler()


def test_servers_do_not_share_handlers():
    first, second = McpServer(), McpServer()
    assert first.transport_handler is not second.transport_handler
    assert first.tracks_handler is not second.tracks_handler


@pytest.mark.asyncio
async def test_handlers_forward_through_server():
    sender, receiver = create_mcp_channel(10)
    server = McpServer(TransportHandler(sender), TracksHandler(sender))
    await server.transport_handler.play()
    await server.tracks_handler.add_track()
    assert list(receiver.drain()) == [Play(), AddTrack()]


@pytest.mark.asyncio
async def test_run_logs_start(caplog):
    with caplog.at_level(logging.INFO, logger="opendaw.mcp.server"):
        await McpServer().run()
    assert "MCP Server is starting..." in caplog.messages