"""Handle event and series operations."""

from typing import Optional

from kalshi_rest.data_models.market import Event, Series
from kalshi_rest.data_models.portfolio import Page

from ..request_builder import path_segment
from ..response_field_parser import ResponseFieldParser
from ..response_parser import ResponseParser
from .base import ClientOperationBase


class EventOperations(ClientOperationBase):
    """Handle event and series lookups. These endpoints are public."""

    async def get_single_event(self, event_ticker: str, with_nested_markets: Optional[bool] = None) -> Event:
        payload = await self.client.api_request(
            method="GET",
            path=f"/events/{path_segment(event_ticker)}",
            params={"with_nested_markets": with_nested_markets},
            operation_name="get_single_event",
            authenticated=False,
        )
        return ResponseParser.parse_single_event(payload, "get_single_event")

    async def get_multiple_events(
        self,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
        status: Optional[str] = None,
        series_ticker: Optional[str] = None,
        with_nested_markets: Optional[bool] = None,
    ) -> Page[Event]:
        params = {
            "limit": limit,
            "cursor": cursor,
            "status": status,
            "series_ticker": series_ticker,
            "with_nested_markets": with_nested_markets,
        }
        payload = await self.client.api_request(
            method="GET",
            path="/events",
            params=params,
            operation_name="get_multiple_events",
            authenticated=False,
        )
        return ResponseParser.parse_page(payload, "events", ResponseParser.parse_event, "get_multiple_events")

    async def get_series(self, ticker: str) -> Series:
        payload = await self.client.api_request(
            method="GET",
            path=f"/series/{path_segment(ticker)}",
            operation_name="get_series",
            authenticated=False,
        )
        series = ResponseFieldParser.require_field(payload, "series", "SeriesResponse", "get_series")
        return ResponseParser.parse_series(series, "get_series")
