"""Order operations for Kalshi API."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple, Union

from kalshi_rest.data_models.portfolio import Page
from kalshi_rest.data_models.trading import (
    BatchCancelResult,
    BatchOrderResult,
    Order,
    OrderRequest,
    OrderStatus,
)

from .client_helpers.errors import InternalError, KalshiClientError
from .client_helpers.order_validator import OrderValidator
from .exceptions import EmptyBatchError, IncompleteBatchError
from .request_builder import RequestBuilder, path_segment

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from .response_parser import ResponseParser

ORDERS_PATH = "/portfolio/orders"


def order_path(order_id: str) -> str:
    return f"{ORDERS_PATH}/{path_segment(order_id)}"


class OrderOperations:
    """Handles order placement, cancellation, decrease and order queries."""

    def __init__(self, request_builder: RequestBuilder, response_parser: ResponseParser) -> None:
        self._request_builder = request_builder
        self._response_parser = response_parser

    async def create_order(self, order_request: OrderRequest) -> Order:
        """Validate, assign a client order id when missing, and submit the order."""
        self._request_builder.require_authenticated("create_order")
        OrderValidator.validate_order_request(order_request)
        client_order_id = OrderValidator.resolve_client_order_id(order_request.client_order_id)
        payload = OrderValidator.build_order_payload(order_request, client_order_id)
        logger.debug("Creating order with payload: %s", payload)
        response = await self._request_builder.request(
            method="POST", path=ORDERS_PATH, json_payload=payload, operation_name="create_order"
        )
        order = self._response_parser.parse_order_envelope(response, "create_order")
        logger.info(
            "Order %s accepted for %s (client_order_id=%s, status=%s)",
            order.order_id,
            order.ticker,
            order.client_order_id,
            order.status.value,
        )
        return order

    async def cancel_order(self, order_id: str) -> Tuple[Order, int]:
        """Cancel a resting order; returns the order and the quantity removed."""
        self._request_builder.require_authenticated("cancel_order")
        response = await self._request_builder.request(
            method="DELETE", path=order_path(order_id), operation_name="cancel_order"
        )
        order, reduced_by = self._response_parser.parse_cancel_envelope(response, "cancel_order")
        logger.info("Order %s canceled, reduced by %d", order.order_id, reduced_by)
        return order, reduced_by

    async def decrease_order(self, order_id: str, reduce_by: Optional[int] = None, reduce_to: Optional[int] = None) -> Order:
        """
        Shrink a resting order by ``reduce_by`` contracts or down to ``reduce_to``; exactly one is required.

        Posts to ``/portfolio/orders/{order_id}/decrease``, the exchange's decrease route.
        """
        self._request_builder.require_authenticated("decrease_order")
        payload = OrderValidator.validate_decrease(reduce_by, reduce_to)
        response = await self._request_builder.request(
            method="POST",
            path=f"{order_path(order_id)}/decrease",
            json_payload=payload,
            operation_name="decrease_order",
        )
        order = self._response_parser.parse_order_envelope(response, "decrease_order")
        logger.info("Order %s decreased (%s)", order.order_id, payload)
        return order

    async def get_single_order(self, order_id: str) -> Order:
        response = await self._request_builder.request(
            method="GET", path=order_path(order_id), operation_name="get_single_order"
        )
        return self._response_parser.parse_order_envelope(response, "get_single_order")

    async def get_multiple_orders(
        self,
        ticker: Optional[str] = None,
        event_ticker: Optional[str] = None,
        min_ts: Optional[int] = None,
        max_ts: Optional[int] = None,
        status: Optional[Union[OrderStatus, str]] = None,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
    ) -> Page[Order]:
        params = {
            "ticker": ticker,
            "event_ticker": event_ticker,
            "min_ts": min_ts,
            "max_ts": max_ts,
            "status": status,
            "limit": limit,
            "cursor": cursor,
        }
        response = await self._request_builder.request(
            method="GET", path=ORDERS_PATH, params=params, operation_name="get_multiple_orders"
        )
        return self._response_parser.parse_page(
            response, "orders", self._response_parser.parse_order, "get_multiple_orders"
        )

    async def batch_cancel_order(self, order_ids: Sequence[str]) -> List[BatchCancelResult]:
        """
        Cancel several orders concurrently.

        Each cancellation is an independent request. Results line up with
        ``order_ids`` by index regardless of completion order, and a failure
        is reported on its own element without affecting the others.
        """
        order_ids = list(order_ids)
        if not order_ids:
            raise EmptyBatchError("batch_cancel_order")
        self._request_builder.require_authenticated("batch_cancel_order")

        results: List[Optional[BatchCancelResult]] = [None] * len(order_ids)

        async def cancel_at(index: int, order_id: str) -> None:
            try:
                order, reduced_by = await self.cancel_order(order_id)
            except KalshiClientError as exc:
                logger.warning("Batch cancel of order %s (index %d) failed: %s", order_id, index, exc)
                results[index] = BatchCancelResult(
                    order_index=index, order_id=order_id, order=None, reduced_by=None, error=exc
                )
                return
            except Exception as exc:  # policy_guard: allow-broad-except
                error = _unexpected_batch_error("batch_cancel_order", index, exc)
                results[index] = BatchCancelResult(
                    order_index=index, order_id=order_id, order=None, reduced_by=None, error=error
                )
                return
            results[index] = BatchCancelResult(
                order_index=index, order_id=order_id, order=order, reduced_by=reduced_by, error=None
            )

        await asyncio.gather(*(cancel_at(index, order_id) for index, order_id in enumerate(order_ids)))
        return _collect(results, "batch_cancel_order")

    async def batch_create_order(self, order_requests: Sequence[OrderRequest]) -> List[BatchOrderResult]:
        """Submit several orders concurrently; results are aligned with the input by index."""
        order_requests = list(order_requests)
        if not order_requests:
            raise EmptyBatchError("batch_create_order")
        self._request_builder.require_authenticated("batch_create_order")

        results: List[Optional[BatchOrderResult]] = [None] * len(order_requests)

        async def create_at(index: int, order_request: OrderRequest) -> None:
            try:
                order = await self.create_order(order_request)
            except KalshiClientError as exc:
                logger.warning("Batch order for %s (index %d) failed: %s", order_request.ticker, index, exc)
                results[index] = BatchOrderResult(order_index=index, order=None, error=exc)
                return
            except Exception as exc:  # policy_guard: allow-broad-except
                error = _unexpected_batch_error("batch_create_order", index, exc)
                results[index] = BatchOrderResult(order_index=index, order=None, error=error)
                return
            results[index] = BatchOrderResult(order_index=index, order=order, error=None)

        await asyncio.gather(*(create_at(index, request) for index, request in enumerate(order_requests)))
        return _collect(results, "batch_create_order")


def _unexpected_batch_error(operation: str, index: int, exc: Exception) -> InternalError:
    logger.exception("%s element %d raised %s", operation, index, type(exc).__name__)
    error = InternalError(
        f"{operation} element {index} failed unexpectedly: {exc}", operation=operation, order_index=index
    )
    error.__cause__ = exc
    return error


def _collect(results: list, operation: str) -> list:
    missing = [index for index, result in enumerate(results) if result is None]
    if missing:
        logger.error("%s left result slots unfilled: %s", operation, missing)
        raise IncompleteBatchError(operation, missing)
    return results


__all__ = ["ORDERS_PATH", "OrderOperations"]
