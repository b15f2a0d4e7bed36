"""Tests for fills operations."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from kalshi_rest.data_models import OrderSide
from kalshi_rest.kalshi_api.client_helpers.fills_operations import FillsOperations


class TestBuildParams:
    def test_all_values(self):
        params = FillsOperations._build_params("ABC", "ord-1", 100, 200, 50, "next")
        assert params == {"ticker": "ABC", "order_id": "ord-1", "min_ts": 100, "max_ts": 200, "limit": 50, "cursor": "next"}

    def test_omits_unset_values(self):
        assert FillsOperations._build_params(None, None, None, None, None, "") == {}


@pytest.mark.asyncio
async def test_get_multiple_fills():
    client = MagicMock()
    client.api_request = AsyncMock(
        return_value={
            "cursor": "",
            "fills": [
                {
                    "trade_id": "tr-1",
                    "order_id": "ord-1",
                    "ticker": "ABC",
                    "action": "buy",
                    "side": "yes",
                    "count": 2,
                    "yes_price": 30,
                    "no_price": 70,
                    "is_taker": True,
                    "created_time": "2023-12-01T15:30:00Z",
                }
            ],
        }
    )

    page = await FillsOperations(client).get_multiple_fills(ticker="ABC")

    assert page.cursor is None
    assert page.items[0].side is OrderSide.YES
    client.api_request.assert_awaited_once_with(
        method="GET", path="/portfolio/fills", params={"ticker": "ABC"}, operation_name="get_multiple_fills"
    )
