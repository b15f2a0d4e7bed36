"""Portfolio aggregates and pagination containers."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of a cursor-paginated listing; ``cursor`` is None on the last page."""

    items: List[T]
    cursor: Optional[str] = None

    @property
    def has_more(self) -> bool:
        return self.cursor is not None


@dataclass(frozen=True)
class Settlement:
    """Payout record for a settled market. Costs and revenue in cents."""

    ticker: str
    market_result: str
    settled_time: datetime
    yes_count: int
    yes_total_cost: int
    no_count: int
    no_total_cost: int
    revenue: int


@dataclass(frozen=True)
class MarketPosition:
    ticker: str
    position: int
    market_exposure: int
    realized_pnl: int
    total_traded: int
    resting_orders_count: int
    fees_paid: int


@dataclass(frozen=True)
class EventPosition:
    event_ticker: str
    event_exposure: int
    realized_pnl: int
    total_cost: int
    resting_order_count: int
    fees_paid: int


@dataclass(frozen=True)
class PositionsPage:
    event_positions: List[EventPosition] = field(default_factory=list)
    market_positions: List[MarketPosition] = field(default_factory=list)
    cursor: Optional[str] = None

    @property
    def has_more(self) -> bool:
        return self.cursor is not None


__all__ = ["EventPosition", "MarketPosition", "Page", "PositionsPage", "Settlement"]
