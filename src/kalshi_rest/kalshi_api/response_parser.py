"""Response parsing for Kalshi API."""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Callable, Dict, List, Optional, Tuple, TypeVar

from kalshi_rest.data_models.exchange import WEEKDAYS, DaySchedule, ExchangeSchedule, ExchangeStatus, StandardHours
from kalshi_rest.data_models.market import (
    Event,
    Market,
    Orderbook,
    PriceLevel,
    SettlementResult,
    SettlementSource,
    Series,
    Snapshot,
    Trade,
)
from kalshi_rest.data_models.portfolio import EventPosition, MarketPosition, Page, PositionsPage, Settlement
from kalshi_rest.data_models.trading import Fill, Order, OrderAction, OrderSide, OrderStatus, OrderType

from .exceptions import ResponseFieldInvalidError
from .response_field_parser import (
    ResponseFieldParser,
    as_bool,
    as_int,
    as_required_timestamp,
    as_str,
    as_timestamp,
)

T = TypeVar("T")

_ORDER_CONVERTERS: Dict[str, Callable[[Any], Any]] = {
    "order_id": as_str,
    "ticker": as_str,
    "status": lambda raw: OrderStatus(str(raw).lower()),
    "yes_price": as_int,
    "no_price": as_int,
    "action": lambda raw: OrderAction(str(raw).lower()),
    "side": lambda raw: OrderSide(str(raw).lower()),
    "order_type": lambda raw: OrderType(str(raw).lower()),
    "client_order_id": as_str,
    "created_time": as_timestamp,
    "last_update_time": as_timestamp,
    "expiration_time": as_timestamp,
    "taker_fill_count": as_int,
    "taker_fill_cost": as_int,
    "maker_fill_count": as_int,
    "place_count": as_int,
    "decrease_count": as_int,
    "fcc_cancel_count": as_int,
    "close_cancel_count": as_int,
    "remaining_count": as_int,
    "queue_position": as_int,
    "taker_fees": as_int,
}

_FILL_CONVERTERS: Dict[str, Callable[[Any], Any]] = {
    "action": lambda raw: OrderAction(str(raw).lower()),
    "side": lambda raw: OrderSide(str(raw).lower()),
    "count": as_int,
    "yes_price": as_int,
    "no_price": as_int,
    "is_taker": as_bool,
    "created_time": as_required_timestamp,
}

_MARKET_INT_FIELDS = (
    "settlement_timer_seconds",
    "notional_value",
    "tick_size",
    "yes_bid",
    "yes_ask",
    "no_bid",
    "no_ask",
    "last_price",
    "previous_yes_bid",
    "previous_yes_ask",
    "previous_price",
    "volume",
    "volume_24h",
    "liquidity",
    "open_interest",
    "risk_limit_cents",
)
_MARKET_TIME_FIELDS = (
    "open_time",
    "close_time",
    "expected_expiration_time",
    "expiration_time",
    "latest_expiration_time",
)
_MARKET_CONVERTERS: Dict[str, Callable[[Any], Any]] = {
    **{name: as_int for name in _MARKET_INT_FIELDS},
    **{name: as_timestamp for name in _MARKET_TIME_FIELDS},
    "result": SettlementResult,
    "can_close_early": as_bool,
    "cap_strike": float,
    "floor_strike": float,
}

_SNAPSHOT_CONVERTERS: Dict[str, Callable[[Any], Any]] = {
    name: as_int for name in ("ts", "yes_price", "yes_bid", "yes_ask", "no_bid", "no_ask", "volume", "open_interest")
}

_TRADE_CONVERTERS: Dict[str, Callable[[Any], Any]] = {
    "count": as_int,
    "yes_price": as_int,
    "no_price": as_int,
    "created_time": as_required_timestamp,
}

_SETTLEMENT_CONVERTERS: Dict[str, Callable[[Any], Any]] = {
    "settled_time": as_required_timestamp,
    "yes_count": as_int,
    "yes_total_cost": as_int,
    "no_count": as_int,
    "no_total_cost": as_int,
    "revenue": as_int,
}

_MARKET_POSITION_CONVERTERS: Dict[str, Callable[[Any], Any]] = {
    name: as_int
    for name in ("position", "market_exposure", "realized_pnl", "total_traded", "resting_orders_count", "fees_paid")
}

_EVENT_POSITION_CONVERTERS: Dict[str, Callable[[Any], Any]] = {
    name: as_int for name in ("event_exposure", "realized_pnl", "total_cost", "resting_order_count", "fees_paid")
}


class ResponseParser:
    """Parses Kalshi API responses into data models."""

    # Records

    @staticmethod
    def parse_order(payload: Any, operation: Optional[str] = None) -> Order:
        return ResponseFieldParser.parse_record(
            Order,
            payload,
            record="Order",
            converters=_ORDER_CONVERTERS,
            renames={"order_type": "type"},
            operation=operation,
        )

    @staticmethod
    def parse_fill(payload: Any, operation: Optional[str] = None) -> Fill:
        return ResponseFieldParser.parse_record(Fill, payload, record="Fill", converters=_FILL_CONVERTERS, operation=operation)

    @staticmethod
    def parse_market(payload: Any, operation: Optional[str] = None) -> Market:
        return ResponseFieldParser.parse_record(
            Market, payload, record="Market", converters=_MARKET_CONVERTERS, operation=operation
        )

    @staticmethod
    def parse_event(payload: Any, operation: Optional[str] = None) -> Event:
        def parse_markets(raw: Any) -> List[Market]:
            if not isinstance(raw, list):
                raise TypeError("markets must be a list")
            return [ResponseParser.parse_market(item, operation) for item in raw]

        return ResponseFieldParser.parse_record(
            Event,
            payload,
            record="Event",
            converters={
                "mutually_exclusive": as_bool,
                "strike_date": as_timestamp,
                "markets": parse_markets,
            },
            operation=operation,
        )

    @staticmethod
    def parse_series(payload: Any, operation: Optional[str] = None) -> Series:
        def parse_sources(raw: Any) -> List[SettlementSource]:
            if not isinstance(raw, list):
                raise TypeError("settlement_sources must be a list")
            return [
                ResponseFieldParser.parse_record(SettlementSource, item, record="SettlementSource", operation=operation)
                for item in raw
            ]

        def parse_tags(raw: Any) -> List[str]:
            if not isinstance(raw, list):
                raise TypeError("tags must be a list")
            return [str(tag) for tag in raw]

        return ResponseFieldParser.parse_record(
            Series,
            payload,
            record="Series",
            converters={"tags": parse_tags, "settlement_sources": parse_sources},
            operation=operation,
        )

    @staticmethod
    def parse_orderbook(payload: Any, operation: Optional[str] = None) -> Orderbook:
        """Each side arrives as ``[[price, quantity], ...]`` or null when empty."""
        obj = ResponseFieldParser.require_object(payload, "Orderbook", operation)
        return Orderbook(
            yes=_parse_levels(obj, "yes", operation),
            no=_parse_levels(obj, "no", operation),
        )

    @staticmethod
    def parse_snapshot(payload: Any, operation: Optional[str] = None) -> Snapshot:
        return ResponseFieldParser.parse_record(
            Snapshot, payload, record="Snapshot", converters=_SNAPSHOT_CONVERTERS, operation=operation
        )

    @staticmethod
    def parse_trade(payload: Any, operation: Optional[str] = None) -> Trade:
        return ResponseFieldParser.parse_record(Trade, payload, record="Trade", converters=_TRADE_CONVERTERS, operation=operation)

    @staticmethod
    def parse_settlement(payload: Any, operation: Optional[str] = None) -> Settlement:
        return ResponseFieldParser.parse_record(
            Settlement, payload, record="Settlement", converters=_SETTLEMENT_CONVERTERS, operation=operation
        )

    @staticmethod
    def parse_market_position(payload: Any, operation: Optional[str] = None) -> MarketPosition:
        return ResponseFieldParser.parse_record(
            MarketPosition, payload, record="MarketPosition", converters=_MARKET_POSITION_CONVERTERS, operation=operation
        )

    @staticmethod
    def parse_event_position(payload: Any, operation: Optional[str] = None) -> EventPosition:
        return ResponseFieldParser.parse_record(
            EventPosition, payload, record="EventPosition", converters=_EVENT_POSITION_CONVERTERS, operation=operation
        )

    @staticmethod
    def parse_exchange_status(payload: Any, operation: Optional[str] = None) -> ExchangeStatus:
        return ResponseFieldParser.parse_record(
            ExchangeStatus,
            payload,
            record="ExchangeStatus",
            converters={"exchange_active": as_bool, "trading_active": as_bool},
            operation=operation,
        )

    @staticmethod
    def parse_exchange_schedule(payload: Any, operation: Optional[str] = None) -> ExchangeSchedule:
        obj = ResponseFieldParser.require_object(payload, "ExchangeSchedule", operation)
        hours_raw = ResponseFieldParser.require_object(
            ResponseFieldParser.require_field(obj, "standard_hours", "ExchangeSchedule", operation),
            "StandardHours",
            operation,
        )
        days = {
            day: ResponseFieldParser.parse_record(
                DaySchedule,
                ResponseFieldParser.require_field(hours_raw, day, "StandardHours", operation),
                record="DaySchedule",
                converters={"open_time": as_str, "close_time": as_str},
                operation=operation,
            )
            for day in WEEKDAYS
        }
        windows = ResponseFieldParser.require_list(obj, "maintenance_windows", "ExchangeSchedule", operation)
        return ExchangeSchedule(standard_hours=StandardHours(**days), maintenance_windows=[str(w) for w in windows])

    # Envelopes

    @staticmethod
    def parse_order_envelope(payload: Dict[str, Any], operation: Optional[str] = None) -> Order:
        order_raw = ResponseFieldParser.require_field(payload, "order", "OrderResponse", operation)
        return ResponseParser.parse_order(order_raw, operation)

    @staticmethod
    def parse_cancel_envelope(payload: Dict[str, Any], operation: Optional[str] = None) -> Tuple[Order, int]:
        """Cancel and decrease responses carry the order plus how many contracts were removed."""
        order = ResponseParser.parse_order_envelope(payload, operation)
        reduced_raw = ResponseFieldParser.require_field(payload, "reduced_by", "CancelOrderResponse", operation)
        try:
            reduced_by = as_int(reduced_raw)
        except (TypeError, ValueError) as exc:
            raise ResponseFieldInvalidError("reduced_by", "CancelOrderResponse", reduced_raw, operation) from exc
        return order, reduced_by

    @staticmethod
    def parse_page(
        payload: Dict[str, Any],
        key: str,
        item_parser: Callable[[Any, Optional[str]], T],
        operation: Optional[str] = None,
    ) -> Page[T]:
        items_raw = ResponseFieldParser.require_list(payload, key, f"{key} page", operation)
        items = [item_parser(item, operation) for item in items_raw]
        return Page(items=items, cursor=ResponseFieldParser.normalize_cursor(payload.get("cursor")))

    @staticmethod
    def parse_positions_page(payload: Dict[str, Any], operation: Optional[str] = None) -> PositionsPage:
        event_raw = ResponseFieldParser.require_list(payload, "event_positions", "PositionsResponse", operation)
        market_raw = ResponseFieldParser.require_list(payload, "market_positions", "PositionsResponse", operation)
        return PositionsPage(
            event_positions=[ResponseParser.parse_event_position(item, operation) for item in event_raw],
            market_positions=[ResponseParser.parse_market_position(item, operation) for item in market_raw],
            cursor=ResponseFieldParser.normalize_cursor(payload.get("cursor")),
        )

    @staticmethod
    def parse_single_event(payload: Dict[str, Any], operation: Optional[str] = None) -> Event:
        """Nested markets may come inside the event or beside it at the top level."""
        event = ResponseParser.parse_event(
            ResponseFieldParser.require_field(payload, "event", "EventResponse", operation), operation
        )
        top_level_markets = payload.get("markets")
        if event.markets is None and top_level_markets is not None:
            markets_raw = ResponseFieldParser.require_list(payload, "markets", "EventResponse", operation)
            markets = [ResponseParser.parse_market(item, operation) for item in markets_raw]
            return replace(event, markets=markets)
        return event

    @staticmethod
    def parse_login(payload: Dict[str, Any], operation: Optional[str] = None) -> Tuple[str, str]:
        token = ResponseFieldParser.require_field(payload, "token", "LoginResponse", operation)
        member_id = ResponseFieldParser.require_field(payload, "member_id", "LoginResponse", operation)
        return as_str(token), as_str(member_id)

    @staticmethod
    def parse_balance(payload: Dict[str, Any], operation: Optional[str] = None) -> int:
        raw = ResponseFieldParser.require_field(payload, "balance", "BalanceResponse", operation)
        try:
            return as_int(raw)
        except (TypeError, ValueError) as exc:
            raise ResponseFieldInvalidError("balance", "BalanceResponse", raw, operation) from exc


def _parse_levels(obj: Dict[str, Any], side: str, operation: Optional[str]) -> List[PriceLevel]:
    levels: List[PriceLevel] = []
    for entry in ResponseFieldParser.require_list(obj, side, "Orderbook", operation):
        if not isinstance(entry, list) or len(entry) != 2:
            raise ResponseFieldInvalidError(side, "Orderbook", entry, operation)
        try:
            levels.append(PriceLevel(price=as_int(entry[0]), quantity=as_int(entry[1])))
        except (TypeError, ValueError) as exc:
            raise ResponseFieldInvalidError(side, "Orderbook", entry, operation) from exc
    return levels


__all__ = ["ResponseParser"]
