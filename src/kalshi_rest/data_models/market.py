"""Market, event and series snapshots returned by the public Kalshi endpoints."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, NamedTuple, Optional


class SettlementResult(Enum):
    """Outcome assigned to a market when it settles."""

    YES = "yes"
    NO = "no"
    VOID = ""
    ALL_NO = "all_no"
    ALL_YES = "all_yes"


class MarketStatus(Enum):
    """Operational state of a market."""

    INITIALIZED = "initialized"
    ACTIVE = "active"
    OPEN = "open"
    CLOSED = "closed"
    SETTLED = "settled"
    DETERMINED = "determined"
    FINALIZED = "finalized"


@dataclass(frozen=True)
class Market:
    """Descriptive and pricing snapshot of a single market. Prices in cents."""

    ticker: str
    event_ticker: str
    status: str
    title: Optional[str] = None
    subtitle: Optional[str] = None
    market_type: Optional[str] = None
    yes_sub_title: Optional[str] = None
    no_sub_title: Optional[str] = None
    category: Optional[str] = None
    open_time: Optional[datetime] = None
    close_time: Optional[datetime] = None
    expected_expiration_time: Optional[datetime] = None
    expiration_time: Optional[datetime] = None
    latest_expiration_time: Optional[datetime] = None
    settlement_timer_seconds: Optional[int] = None
    response_price_units: Optional[str] = None
    notional_value: Optional[int] = None
    tick_size: Optional[int] = None
    yes_bid: Optional[int] = None
    yes_ask: Optional[int] = None
    no_bid: Optional[int] = None
    no_ask: Optional[int] = None
    last_price: Optional[int] = None
    previous_yes_bid: Optional[int] = None
    previous_yes_ask: Optional[int] = None
    previous_price: Optional[int] = None
    volume: Optional[int] = None
    volume_24h: Optional[int] = None
    liquidity: Optional[int] = None
    open_interest: Optional[int] = None
    result: Optional[SettlementResult] = None
    can_close_early: Optional[bool] = None
    expiration_value: Optional[str] = None
    risk_limit_cents: Optional[int] = None
    strike_type: Optional[str] = None
    cap_strike: Optional[float] = None
    floor_strike: Optional[float] = None
    functional_strike: Optional[str] = None
    rules_primary: Optional[str] = None
    rules_secondary: Optional[str] = None
    settlement_value: Optional[str] = None


@dataclass(frozen=True)
class Event:
    """A group of related markets; ``markets`` is populated only when nested markets were requested."""

    event_ticker: str
    series_ticker: str
    title: str
    sub_title: Optional[str] = None
    category: Optional[str] = None
    mutually_exclusive: Optional[bool] = None
    strike_date: Optional[datetime] = None
    strike_period: Optional[str] = None
    markets: Optional[List[Market]] = None


@dataclass(frozen=True)
class SettlementSource:
    url: str
    name: str


@dataclass(frozen=True)
class Series:
    """A template that recurring events are created from."""

    ticker: str
    title: str
    frequency: Optional[str] = None
    category: Optional[str] = None
    contract_url: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    settlement_sources: List[SettlementSource] = field(default_factory=list)


class PriceLevel(NamedTuple):
    price: int
    quantity: int


@dataclass(frozen=True)
class Orderbook:
    """Resting bids for each side, in the order the exchange returned them."""

    yes: List[PriceLevel] = field(default_factory=list)
    no: List[PriceLevel] = field(default_factory=list)


@dataclass(frozen=True)
class Snapshot:
    """Point-in-time market statistics from the market history endpoint."""

    ts: int
    yes_price: int
    yes_bid: int
    yes_ask: int
    no_bid: int
    no_ask: int
    volume: int
    open_interest: int


@dataclass(frozen=True)
class Trade:
    """A public trade print."""

    trade_id: str
    ticker: str
    taker_side: str
    count: int
    yes_price: int
    no_price: int
    created_time: datetime


__all__ = [
    "Event",
    "Market",
    "MarketStatus",
    "Orderbook",
    "PriceLevel",
    "SettlementResult",
    "SettlementSource",
    "Series",
    "Snapshot",
    "Trade",
]
