"""Tests for event and series operations."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from kalshi_rest.kalshi_api.client_helpers.event_operations import EventOperations

_EVENT = {"event_ticker": "ABC", "series_ticker": "S", "title": "Event", "mutually_exclusive": True}


@pytest.fixture
def client():
    client = MagicMock()
    client.api_request = AsyncMock()
    return client


@pytest.mark.asyncio
async def test_get_single_event_with_nested_markets(client):
    client.api_request.return_value = {
        "event": _EVENT,
        "markets": [{"ticker": "ABC-1", "event_ticker": "ABC", "status": "open"}],
    }

    event = await EventOperations(client).get_single_event("ABC", with_nested_markets=True)

    assert event.mutually_exclusive is True
    assert [market.ticker for market in event.markets] == ["ABC-1"]
    kwargs = client.api_request.await_args.kwargs
    assert kwargs["params"] == {"with_nested_markets": True}
    assert kwargs["authenticated"] is False


@pytest.mark.asyncio
async def test_get_multiple_events(client):
    client.api_request.return_value = {"events": [_EVENT], "cursor": ""}

    page = await EventOperations(client).get_multiple_events(series_ticker="S")

    assert page.items[0].event_ticker == "ABC"
    assert page.cursor is None


@pytest.mark.asyncio
async def test_get_series(client):
    client.api_request.return_value = {"series": {"ticker": "S", "title": "Series", "contract_url": "https://x"}}

    series = await EventOperations(client).get_series("S")

    assert series.contract_url == "https://x"
    assert series.tags == []
    assert client.api_request.await_args.kwargs["path"] == "/series/S"
