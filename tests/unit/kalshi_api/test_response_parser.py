"""Tests for kalshi_api response_parser."""

from datetime import datetime, timezone

import pytest

from kalshi_rest.data_models import (
    OrderAction,
    OrderSide,
    OrderStatus,
    OrderType,
    PriceLevel,
    SettlementResult,
)
from kalshi_rest.kalshi_api.exceptions import ResponseFieldInvalidError, ResponseFieldMissingError
from kalshi_rest.kalshi_api.response_parser import ResponseParser


def _market_payload(**overrides):
    payload = {
        "ticker": "INXD-23DEC29-B4700",
        "event_ticker": "INXD-23DEC29",
        "status": "active",
        "market_type": "binary",
        "title": "S&P 500 close",
        "open_time": "2023-12-28T14:30:00Z",
        "close_time": "2023-12-29T21:00:00Z",
        "yes_bid": 4,
        "yes_ask": 6,
        "volume": 1200,
        "result": "",
        "can_close_early": True,
        "cap_strike": 4724.99,
    }
    payload.update(overrides)
    return payload


class TestOrders:
    def test_parse_order(self, order_payload):
        order = ResponseParser.parse_order(order_payload(status="cancelled"))

        assert order.order_id == "ord-1"
        assert order.status is OrderStatus.CANCELED
        assert order.action is OrderAction.BUY
        assert order.side is OrderSide.YES
        assert order.order_type is OrderType.LIMIT
        assert order.created_time == datetime(2023, 12, 1, 15, 30, tzinfo=timezone.utc)
        assert order.remaining_count == 10
        assert order.expiration_time is None

    def test_unknown_status_is_invalid_field(self, order_payload):
        with pytest.raises(ResponseFieldInvalidError) as exc_info:
            ResponseParser.parse_order(order_payload(status="sleeping"), "get_single_order")
        assert exc_info.value.field_name == "status"

    def test_out_of_range_created_time_is_invalid_field(self, order_payload):
        with pytest.raises(ResponseFieldInvalidError) as exc_info:
            ResponseParser.parse_order(order_payload(created_time=1e300), "get_single_order")
        assert exc_info.value.field_name == "created_time"

    def test_missing_type_is_reported_by_wire_name(self, order_payload):
        payload = order_payload()
        del payload["type"]
        with pytest.raises(ResponseFieldMissingError) as exc_info:
            ResponseParser.parse_order(payload)
        assert exc_info.value.field_name == "type"

    def test_cancel_envelope(self, order_payload):
        order, reduced_by = ResponseParser.parse_cancel_envelope(
            {"order": order_payload(status="canceled"), "reduced_by": 10}
        )
        assert order.status is OrderStatus.CANCELED
        assert reduced_by == 10

    def test_cancel_envelope_requires_reduced_by(self, order_payload):
        with pytest.raises(ResponseFieldMissingError):
            ResponseParser.parse_cancel_envelope({"order": order_payload()})

    def test_orders_page_with_empty_cursor(self):
        page = ResponseParser.parse_page({"orders": [], "cursor": ""}, "orders", ResponseParser.parse_order)
        assert page.items == []
        assert page.cursor is None
        assert not page.has_more

    def test_fill(self):
        fill = ResponseParser.parse_fill(
            {
                "trade_id": "tr-1",
                "order_id": "ord-1",
                "ticker": "ABC",
                "action": "sell",
                "side": "no",
                "count": 3,
                "yes_price": 40,
                "no_price": 60,
                "is_taker": False,
                "created_time": "2023-12-01T15:30:00Z",
            }
        )
        assert fill.action is OrderAction.SELL
        assert fill.side is OrderSide.NO
        assert fill.is_taker is False


class TestMarkets:
    def test_parse_market(self):
        market = ResponseParser.parse_market(_market_payload())
        assert market.result is SettlementResult.VOID
        assert market.close_time == datetime(2023, 12, 29, 21, 0, tzinfo=timezone.utc)
        assert market.cap_strike == pytest.approx(4724.99)
        assert market.no_bid is None

    def test_single_event_attaches_top_level_markets(self):
        payload = {
            "event": {"event_ticker": "INXD-23DEC29", "series_ticker": "INXD", "title": "S&P"},
            "markets": [_market_payload()],
        }
        event = ResponseParser.parse_single_event(payload)
        assert event.markets is not None
        assert [m.ticker for m in event.markets] == ["INXD-23DEC29-B4700"]

    def test_single_event_without_markets(self):
        payload = {"event": {"event_ticker": "E", "series_ticker": "S", "title": "T", "strike_date": None}}
        assert ResponseParser.parse_single_event(payload).markets is None

    def test_orderbook_levels_and_null_side(self):
        book = ResponseParser.parse_orderbook({"yes": [[1, 200], [5, 10]], "no": None})
        assert book.yes == [PriceLevel(1, 200), PriceLevel(5, 10)]
        assert book.no == []

    def test_orderbook_rejects_malformed_level(self):
        with pytest.raises(ResponseFieldInvalidError):
            ResponseParser.parse_orderbook({"yes": [[1, 2, 3]]})

    def test_series(self):
        series = ResponseParser.parse_series(
            {
                "ticker": "INXD",
                "title": "S&P daily",
                "frequency": "daily",
                "tags": ["finance"],
                "settlement_sources": [{"url": "https://spglobal.com", "name": "S&P"}],
            }
        )
        assert series.tags == ["finance"]
        assert series.settlement_sources[0].name == "S&P"

    def test_history_page(self):
        page = ResponseParser.parse_page(
            {
                "ticker": "ABC",
                "cursor": "next",
                "history": [
                    {"ts": 1700000000, "yes_price": 5, "yes_bid": 4, "yes_ask": 6, "no_bid": 94, "no_ask": 96, "volume": 1, "open_interest": 2}
                ],
            },
            "history",
            ResponseParser.parse_snapshot,
        )
        assert page.cursor == "next"
        assert page.items[0].ts == 1700000000


class TestExchange:
    def test_schedule(self):
        day = {"open_time": "08:00", "close_time": "03:00"}
        schedule = ResponseParser.parse_exchange_schedule(
            {
                "standard_hours": {name: day for name in ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")},
                "maintenance_windows": [],
            }
        )
        assert schedule.standard_hours.friday.close_time == "03:00"
        assert schedule.maintenance_windows == []

    def test_schedule_missing_day(self):
        with pytest.raises(ResponseFieldMissingError):
            ResponseParser.parse_exchange_schedule({"standard_hours": {"monday": {"open_time": "a", "close_time": "b"}}})


class TestPortfolio:
    def test_login(self):
        assert ResponseParser.parse_login({"member_id": "m1", "token": "t1"}) == ("t1", "m1")

    def test_balance(self):
        assert ResponseParser.parse_balance({"balance": 12345}) == 12345
        with pytest.raises(ResponseFieldInvalidError):
            ResponseParser.parse_balance({"balance": "lots"})

    def test_positions_page(self):
        page = ResponseParser.parse_positions_page(
            {
                "cursor": "",
                "event_positions": [
                    {
                        "event_ticker": "E",
                        "event_exposure": 100,
                        "realized_pnl": 5,
                        "total_cost": 90,
                        "resting_order_count": 1,
                        "fees_paid": 2,
                    }
                ],
                "market_positions": None,
            }
        )
        assert page.event_positions[0].event_exposure == 100
        assert page.market_positions == []
        assert page.cursor is None
