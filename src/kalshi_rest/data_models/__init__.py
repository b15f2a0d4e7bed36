"""Typed result records for the Kalshi REST client."""

from .exchange import DaySchedule, ExchangeSchedule, ExchangeStatus, StandardHours
from .market import (
    Event,
    Market,
    MarketStatus,
    Orderbook,
    PriceLevel,
    SettlementResult,
    SettlementSource,
    Series,
    Snapshot,
    Trade,
)
from .portfolio import EventPosition, MarketPosition, Page, PositionsPage, Settlement
from .trading import (
    BatchCancelResult,
    BatchOrderResult,
    Fill,
    Order,
    OrderAction,
    OrderRequest,
    OrderSide,
    OrderStatus,
    OrderType,
)

__all__ = [
    "BatchCancelResult",
    "BatchOrderResult",
    "DaySchedule",
    "Event",
    "EventPosition",
    "ExchangeSchedule",
    "ExchangeStatus",
    "Fill",
    "Market",
    "MarketPosition",
    "MarketStatus",
    "Order",
    "OrderAction",
    "OrderRequest",
    "OrderSide",
    "OrderStatus",
    "OrderType",
    "Orderbook",
    "Page",
    "PositionsPage",
    "PriceLevel",
    "Settlement",
    "SettlementResult",
    "SettlementSource",
    "Series",
    "Snapshot",
    "StandardHours",
    "Trade",
]
