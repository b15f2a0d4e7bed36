"""Tests for kalshi_api session_manager."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from kalshi_rest.kalshi_api.client import KalshiConfig
from kalshi_rest.kalshi_api.session_manager import SessionManager

_FACTORY = "kalshi_rest.kalshi_api.session_manager.aiohttp.ClientSession"


@pytest.mark.asyncio
async def test_initialize_creates_session_once():
    manager = SessionManager(KalshiConfig(request_timeout_seconds=15, connect_timeout_seconds=5, sock_read_timeout_seconds=7))
    fake_session = MagicMock()
    fake_session.closed = False

    with patch(_FACTORY, return_value=fake_session) as factory:
        await manager.initialize()
        await manager.initialize()

    factory.assert_called_once()
    timeout = factory.call_args.kwargs["timeout"]
    assert (timeout.total, timeout.connect, timeout.sock_read) == (15, 5, 7)
    assert manager.get_session() is fake_session


@pytest.mark.asyncio
async def test_initialize_replaces_closed_session():
    manager = SessionManager(KalshiConfig())
    stale, fresh = MagicMock(closed=True), MagicMock(closed=False)

    with patch(_FACTORY, side_effect=[stale, fresh]):
        await manager.initialize()
        await manager.initialize()

    assert manager.get_session() is fresh


@pytest.mark.asyncio
async def test_close_releases_session():
    manager = SessionManager(KalshiConfig())
    fake_session = MagicMock(closed=False)
    fake_session.close = AsyncMock()

    with patch(_FACTORY, return_value=fake_session):
        await manager.initialize()
    await manager.close()

    fake_session.close.assert_awaited_once()
    with pytest.raises(RuntimeError):
        manager.get_session()


@pytest.mark.asyncio
async def test_close_without_session_is_noop():
    await SessionManager(KalshiConfig()).close()
