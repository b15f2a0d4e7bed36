"""Handle fills operations."""

from typing import Any, Dict, Optional

from kalshi_rest.data_models.portfolio import Page
from kalshi_rest.data_models.trading import Fill

from ..response_parser import ResponseParser
from .base import ClientOperationBase


class FillsOperations(ClientOperationBase):
    """Handle fills-related API operations."""

    async def get_multiple_fills(
        self,
        ticker: Optional[str] = None,
        order_id: Optional[str] = None,
        min_ts: Optional[int] = None,
        max_ts: Optional[int] = None,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
    ) -> Page[Fill]:
        """Get the account's fills with optional filters."""
        params = self._build_params(ticker, order_id, min_ts, max_ts, limit, cursor)
        payload = await self.client.api_request(
            method="GET",
            path="/portfolio/fills",
            params=params,
            operation_name="get_multiple_fills",
        )
        return ResponseParser.parse_page(payload, "fills", ResponseParser.parse_fill, "get_multiple_fills")

    @staticmethod
    def _build_params(
        ticker: Optional[str],
        order_id: Optional[str],
        min_ts: Optional[int],
        max_ts: Optional[int],
        limit: Optional[int],
        cursor: Optional[str],
    ) -> Dict[str, Any]:
        """Build parameters for fills request."""
        params: Dict[str, Any] = {}
        if ticker:
            params["ticker"] = ticker
        if order_id:
            params["order_id"] = order_id
        if min_ts is not None:
            params["min_ts"] = int(min_ts)
        if max_ts is not None:
            params["max_ts"] = int(max_ts)
        if limit is not None:
            params["limit"] = int(limit)
        if cursor:
            params["cursor"] = cursor
        return params
