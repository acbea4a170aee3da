import logging

import pytest

from opendaw.mcp.commands import Play, Stop, ToggleLoop, create_mcp_channel
from opendaw.mcp.transport import TransportHandler


@pytest.mark.asyncio
async def test_transport_handler_play():
    handler = TransportHandler()
    assert await handler.play() is None


@pytest.mark.asyncio
async def test_transport_handler_stop():
    handler = TransportHandler()
    assert await handler.stop() is None


@pytest.mark.asyncio
async def test_transport_handler_toggle_loop():
    handler = TransportHandler()
    assert await handler.toggle_loop() is None


@pytest.mark.asyncio
async def test_commands_are_forwarded_in_order():
    sender, receiver = create_mcp_channel(10)
    handler = TransportHandler(sender)
    await handler.play()
    await handler.toggle_loop()
    await handler.stop()
    assert list(receiver.drain()) == [Play(), ToggleLoop(), Stop()]


@pytest.mark.asyncio
async def test_full_channel_drops_without_error():
    sender, receiver = create_mcp_channel(1)
    handler = TransportHandler(sender)
    await handler.play()
    await handler.stop()
    assert list(receiver.drain()) == [Play()]


@pytest.mark.asyncio
async def test_play_is_logged(caplog):
    with caplog.at_level(logging.INFO, logger="opendaw.mcp.transport"):
        await TransportHandler().play()
    assert "MCP: Playback started" in caplog.messages