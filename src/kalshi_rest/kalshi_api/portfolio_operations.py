"""Portfolio operations for Kalshi API."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from kalshi_rest.data_models.portfolio import Page, PositionsPage, Settlement

if TYPE_CHECKING:
    from .request_builder import RequestBuilder
    from .response_parser import ResponseParser

logger = logging.getLogger(__name__)


class PortfolioOperations:
    """Handles balance, settlement and position queries."""

    def __init__(self, request_builder: RequestBuilder, response_parser: ResponseParser) -> None:
        self._request_builder = request_builder
        self._response_parser = response_parser

    async def get_balance(self) -> int:
        """Available balance in cents."""
        payload = await self._request_builder.request(
            method="GET", path="/portfolio/balance", operation_name="get_balance"
        )
        balance = self._response_parser.parse_balance(payload, "get_balance")
        logger.debug("Portfolio balance: %d cents", balance)
        return balance

    async def get_portfolio_settlements(self, limit: Optional[int] = None, cursor: Optional[str] = None) -> Page[Settlement]:
        payload = await self._request_builder.request(
            method="GET",
            path="/portfolio/settlements",
            params={"limit": limit, "cursor": cursor},
            operation_name="get_portfolio_settlements",
        )
        return self._response_parser.parse_page(
            payload, "settlements", self._response_parser.parse_settlement, "get_portfolio_settlements"
        )

    async def get_user_positions(
        self,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
        settlement_status: Optional[str] = None,
        ticker: Optional[str] = None,
        event_ticker: Optional[str] = None,
    ) -> PositionsPage:
        payload = await self._request_builder.request(
            method="GET",
            path="/portfolio/positions",
            params={
                "limit": limit,
                "cursor": cursor,
                "settlement_status": settlement_status,
                "ticker": ticker,
                "event_ticker": event_ticker,
            },
            operation_name="get_user_positions",
        )
        return self._response_parser.parse_positions_page(payload, "get_user_positions")


__all__ = ["PortfolioOperations"]
