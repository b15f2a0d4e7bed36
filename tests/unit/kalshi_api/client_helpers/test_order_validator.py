"""Tests for order validation rules."""

import pytest

from kalshi_rest.data_models import OrderAction, OrderRequest, OrderSide, OrderType
from kalshi_rest.kalshi_api.client_helpers.errors import UserInputError
from kalshi_rest.kalshi_api.client_helpers.order_validator import OrderValidator
from kalshi_rest.kalshi_api.exceptions import InvalidOrderCountError, MutuallyExclusiveParametersError


def _request(**overrides):
    values = dict(
        action=OrderAction.BUY,
        count=10,
        side=OrderSide.YES,
        ticker="ABC",
        order_type=OrderType.LIMIT,
        yes_price=5,
    )
    values.update(overrides)
    return OrderRequest(**values)


class TestLimitPriceRule:
    def test_single_price_is_accepted(self):
        OrderValidator.validate_order_request(_request())
        OrderValidator.validate_order_request(_request(yes_price=None, no_price=95))

    def test_both_prices_rejected(self):
        with pytest.raises(MutuallyExclusiveParametersError, match="not both") as exc_info:
            OrderValidator.validate_order_request(_request(no_price=95))
        assert exc_info.value.fields == ("yes_price", "no_price")
        assert isinstance(exc_info.value, UserInputError)

    def test_neither_price_rejected(self):
        with pytest.raises(MutuallyExclusiveParametersError, match="not neither"):
            OrderValidator.validate_order_request(_request(yes_price=None))

    def test_market_orders_need_no_price(self):
        OrderValidator.validate_order_request(_request(order_type=OrderType.MARKET, yes_price=None, buy_max_cost=500))


@pytest.mark.parametrize("count", [0, -1, True, 2.5])
def test_count_must_be_positive_integer(count):
    with pytest.raises(InvalidOrderCountError):
        OrderValidator.validate_order_request(_request(count=count))


class TestDecreaseRule:
    def test_reduce_by(self):
        assert OrderValidator.validate_decrease(3, None) == {"reduce_by": 3}

    def test_reduce_to_zero_is_allowed(self):
        assert OrderValidator.validate_decrease(None, 0) == {"reduce_to": 0}

    @pytest.mark.parametrize("reduce_by, reduce_to", [(None, None), (1, 2)])
    def test_exactly_one_required(self, reduce_by, reduce_to):
        with pytest.raises(MutuallyExclusiveParametersError) as exc_info:
            OrderValidator.validate_decrease(reduce_by, reduce_to)
        assert exc_info.value.fields == ("reduce_by", "reduce_to")


class TestClientOrderId:
    def test_keeps_caller_id(self):
        assert OrderValidator.resolve_client_order_id("mine") == "mine"

    def test_generated_ids_are_distinct_uuids(self):
        first = OrderValidator.resolve_client_order_id(None)
        second = OrderValidator.resolve_client_order_id(None)
        assert first != second
        assert len(first) == 36 and first.count("-") == 4


def test_payload_omits_unset_fields():
    payload = OrderValidator.build_order_payload(_request(), "cid-1")
    assert payload == {
        "action": "buy",
        "client_order_id": "cid-1",
        "count": 10,
        "side": "yes",
        "ticker": "ABC",
        "type": "limit",
        "yes_price": 5,
    }
