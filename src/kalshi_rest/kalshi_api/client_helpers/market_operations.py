"""Handle market discovery, order book, history and trade operations."""

from typing import Iterable, Optional, Union

from kalshi_rest.data_models.market import Market, MarketStatus, Orderbook, Snapshot, Trade
from kalshi_rest.data_models.portfolio import Page

from ..request_builder import path_segment
from ..response_field_parser import ResponseFieldParser
from ..response_parser import ResponseParser
from .base import ClientOperationBase


class MarketOperations(ClientOperationBase):
    """Handle market-related API operations."""

    async def get_single_market(self, ticker: str) -> Market:
        payload = await self.client.api_request(
            method="GET",
            path=f"/markets/{path_segment(ticker)}",
            operation_name="get_single_market",
            authenticated=False,
        )
        market = ResponseFieldParser.require_field(payload, "market", "MarketResponse", "get_single_market")
        return ResponseParser.parse_market(market, "get_single_market")

    async def get_multiple_markets(
        self,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
        event_ticker: Optional[str] = None,
        series_ticker: Optional[str] = None,
        max_close_ts: Optional[int] = None,
        min_close_ts: Optional[int] = None,
        status: Optional[Union[MarketStatus, str]] = None,
        tickers: Optional[Union[str, Iterable[str]]] = None,
    ) -> Page[Market]:
        """List markets; ``tickers`` may be a comma-separated string or an iterable of tickers."""
        if tickers is not None and not isinstance(tickers, str):
            tickers = ",".join(tickers)
        params = {
            "limit": limit,
            "cursor": cursor,
            "event_ticker": event_ticker,
            "series_ticker": series_ticker,
            "max_close_ts": max_close_ts,
            "min_close_ts": min_close_ts,
            "status": status,
            "tickers": tickers,
        }
        payload = await self.client.api_request(
            method="GET",
            path="/markets",
            params=params,
            operation_name="get_multiple_markets",
        )
        return ResponseParser.parse_page(payload, "markets", ResponseParser.parse_market, "get_multiple_markets")

    async def get_market_orderbook(self, ticker: str, depth: Optional[int] = None) -> Orderbook:
        payload = await self.client.api_request(
            method="GET",
            path=f"/markets/{path_segment(ticker)}/orderbook",
            params={"depth": depth},
            operation_name="get_market_orderbook",
        )
        orderbook = ResponseFieldParser.require_field(payload, "orderbook", "OrderbookResponse", "get_market_orderbook")
        return ResponseParser.parse_orderbook(orderbook, "get_market_orderbook")

    async def get_market_history(
        self,
        ticker: str,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
        min_ts: Optional[int] = None,
        max_ts: Optional[int] = None,
    ) -> Page[Snapshot]:
        payload = await self.client.api_request(
            method="GET",
            path=f"/markets/{path_segment(ticker)}/history",
            params={"limit": limit, "cursor": cursor, "min_ts": min_ts, "max_ts": max_ts},
            operation_name="get_market_history",
        )
        return ResponseParser.parse_page(payload, "history", ResponseParser.parse_snapshot, "get_market_history")

    async def get_trades(
        self,
        cursor: Optional[str] = None,
        limit: Optional[int] = None,
        ticker: Optional[str] = None,
        min_ts: Optional[int] = None,
        max_ts: Optional[int] = None,
    ) -> Page[Trade]:
        """Public trade prints, newest first."""
        payload = await self.client.api_request(
            method="GET",
            path="/markets/trades",
            params={"cursor": cursor, "limit": limit, "ticker": ticker, "min_ts": min_ts, "max_ts": max_ts},
            operation_name="get_trades",
            authenticated=False,
        )
        return ResponseParser.parse_page(payload, "trades", ResponseParser.parse_trade, "get_trades")
