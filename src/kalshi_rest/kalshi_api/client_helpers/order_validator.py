"""Order request validation and payload construction."""

from __future__ import annotations

import uuid
from typing import Any, Dict, Mapping, Optional

from kalshi_rest.data_models.trading import OrderRequest, OrderType

from ..exceptions import InvalidOrderCountError, MutuallyExclusiveParametersError

_OPTIONAL_ORDER_FIELDS = (
    "buy_max_cost",
    "expiration_ts",
    "no_price",
    "sell_position_floor",
    "yes_price",
)


class OrderValidator:
    """Local precondition checks run before an order request is sent."""

    @staticmethod
    def require_exactly_one(values: Mapping[str, Any]) -> str:
        """Return the single key whose value is set, or raise naming the whole group."""
        provided = [name for name, value in values.items() if value is not None]
        if len(provided) != 1:
            raise MutuallyExclusiveParametersError(tuple(values.keys()), provided)
        return provided[0]

    @staticmethod
    def validate_order_request(request: OrderRequest) -> None:
        count = request.count
        if isinstance(count, bool) or not isinstance(count, int) or count < 1:
            raise InvalidOrderCountError(count)
        if request.order_type is OrderType.LIMIT:
            OrderValidator.require_exactly_one({"yes_price": request.yes_price, "no_price": request.no_price})

    @staticmethod
    def validate_decrease(reduce_by: Optional[int], reduce_to: Optional[int]) -> Dict[str, int]:
        field_name = OrderValidator.require_exactly_one({"reduce_by": reduce_by, "reduce_to": reduce_to})
        value = reduce_by if field_name == "reduce_by" else reduce_to
        return {field_name: int(value)}

    @staticmethod
    def resolve_client_order_id(client_order_id: Optional[str]) -> str:
        if client_order_id:
            return client_order_id
        return str(uuid.uuid4())

    @staticmethod
    def build_order_payload(request: OrderRequest, client_order_id: str) -> Dict[str, Any]:
        """Wire body for order creation; unset optional fields are omitted."""
        payload: Dict[str, Any] = {
            "action": request.action.value,
            "client_order_id": client_order_id,
            "count": request.count,
            "side": request.side.value,
            "ticker": request.ticker,
            "type": request.order_type.value,
        }
        for name in _OPTIONAL_ORDER_FIELDS:
            value = getattr(request, name)
            if value is not None:
                payload[name] = value
        return payload


__all__ = ["OrderValidator"]
