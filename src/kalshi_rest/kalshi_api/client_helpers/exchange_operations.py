"""Handle exchange status and schedule operations."""

from kalshi_rest.data_models.exchange import ExchangeSchedule, ExchangeStatus

from ..response_field_parser import ResponseFieldParser
from ..response_parser import ResponseParser
from .base import ClientOperationBase


class ExchangeOperations(ClientOperationBase):
    """Handle exchange-wide API operations. None of them need a login."""

    async def get_exchange_status(self) -> ExchangeStatus:
        payload = await self.client.api_request(
            method="GET",
            path="/exchange/status",
            operation_name="get_exchange_status",
            authenticated=False,
        )
        return ResponseParser.parse_exchange_status(payload, "get_exchange_status")

    async def get_exchange_schedule(self) -> ExchangeSchedule:
        payload = await self.client.api_request(
            method="GET",
            path="/exchange/schedule",
            operation_name="get_exchange_schedule",
            authenticated=False,
        )
        schedule = ResponseFieldParser.require_field(payload, "schedule", "ExchangeScheduleResponse", "get_exchange_schedule")
        return ResponseParser.parse_exchange_schedule(schedule, "get_exchange_schedule")

    async def is_exchange_open(self) -> bool:
        """True when both the exchange and trading are active."""
        status = await self.get_exchange_status()
        return status.is_open
