"""
Trading-specific data models for the Kalshi REST API.

Orders and fills are value snapshots of exchange state: the client never
mutates them, every call returns a fresh copy. Prices are integer cents.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from kalshi_rest.kalshi_api.client_helpers.errors import KalshiClientError


class OrderStatus(Enum):
    """Order lifecycle status as reported by the exchange"""

    PENDING = "pending"
    RESTING = "resting"  # Accepted and waiting in the order book
    CANCELED = "canceled"
    EXECUTED = "executed"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str) and value.lower() == "cancelled":
            return cls.CANCELED
        return None


class OrderAction(Enum):
    """Order action enumeration"""

    BUY = "buy"
    SELL = "sell"


class OrderSide(Enum):
    """Order side enumeration for yes/no markets"""

    YES = "yes"
    NO = "no"


class OrderType(Enum):
    """Order type enumeration for execution method"""

    MARKET = "market"
    LIMIT = "limit"


@dataclass(frozen=True)
class Order:
    """Snapshot of a single order; ``order_id`` is stable across decreases."""

    order_id: str
    ticker: str
    status: OrderStatus
    yes_price: int
    no_price: int
    action: OrderAction
    side: OrderSide
    order_type: OrderType
    client_order_id: str
    order_group_id: Optional[str] = None
    user_id: Optional[str] = None
    created_time: Optional[datetime] = None
    last_update_time: Optional[datetime] = None
    expiration_time: Optional[datetime] = None
    taker_fill_count: Optional[int] = None
    taker_fill_cost: Optional[int] = None
    maker_fill_count: Optional[int] = None
    place_count: Optional[int] = None
    decrease_count: Optional[int] = None
    fcc_cancel_count: Optional[int] = None
    close_cancel_count: Optional[int] = None
    remaining_count: Optional[int] = None
    queue_position: Optional[int] = None
    taker_fees: Optional[int] = None


@dataclass(frozen=True)
class Fill:
    """An executed slice of an order."""

    trade_id: str
    order_id: str
    ticker: str
    action: OrderAction
    side: OrderSide
    count: int
    yes_price: int
    no_price: int
    is_taker: bool
    created_time: datetime


@dataclass(frozen=True)
class OrderRequest:
    """
    Parameters for submitting an order.

    Limit orders must carry exactly one of ``yes_price``/``no_price``.
    When ``client_order_id`` is omitted a fresh UUID4 is generated at submission.
    """

    action: OrderAction
    count: int
    side: OrderSide
    ticker: str
    order_type: OrderType
    client_order_id: Optional[str] = None
    buy_max_cost: Optional[int] = None
    expiration_ts: Optional[int] = None
    no_price: Optional[int] = None
    sell_position_floor: Optional[int] = None
    yes_price: Optional[int] = None


@dataclass(frozen=True)
class BatchOrderResult:
    """Result for a single order within a batch submission.

    ``order_index`` is the position of the request in the caller's input.
    """

    order_index: int
    order: Optional[Order]
    error: Optional[KalshiClientError]

    @property
    def succeeded(self) -> bool:
        return self.order is not None and self.error is None


@dataclass(frozen=True)
class BatchCancelResult:
    """Result for a single cancellation within a batch."""

    order_index: int
    order_id: str
    order: Optional[Order]
    reduced_by: Optional[int]
    error: Optional[KalshiClientError]

    @property
    def succeeded(self) -> bool:
        return self.order is not None and self.error is None


__all__ = [
    "BatchCancelResult",
    "BatchOrderResult",
    "Fill",
    "Order",
    "OrderAction",
    "OrderRequest",
    "OrderSide",
    "OrderStatus",
    "OrderType",
]
