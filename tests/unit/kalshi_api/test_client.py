"""Tests for kalshi_api client."""

from unittest.mock import AsyncMock

import pytest

from kalshi_rest.config import ConfigurationError, TradingEnvironment
from kalshi_rest.data_models import OrderAction, OrderType
from kalshi_rest.kalshi_api.client import KalshiClient, KalshiConfig
from kalshi_rest.kalshi_api.client_helpers.errors import UserInputError
from kalshi_rest.kalshi_api.exceptions import NotAuthenticatedError

DEMO_URL = "https://demo-api.kalshi.co/trade-api/v2"
LIVE_URL = "https://trading-api.kalshi.com/trade-api/v2"


def _stub_transport(client, *responses):
    executor = AsyncMock(side_effect=list(responses))
    client._request_builder._executor.execute_request = executor
    return executor


class TestKalshiConfig:
    def test_defaults(self):
        config = KalshiConfig()
        assert config.environment is TradingEnvironment.DEMO
        assert config.resolve_base_url() == DEMO_URL
        assert config.request_timeout_seconds == 30
        assert config.connect_timeout_seconds == 10
        assert config.sock_read_timeout_seconds == 20

    def test_override_is_validated(self):
        assert KalshiConfig(base_url="http://localhost:8080/trade-api/v2/").resolve_base_url() == "http://localhost:8080/trade-api/v2"
        with pytest.raises(ConfigurationError):
            KalshiConfig(base_url="ftp://example.com").resolve_base_url()
        with pytest.raises(ConfigurationError):
            KalshiConfig(base_url="not a url").resolve_base_url()

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("KALSHI_ENVIRONMENT", "prod")
        monkeypatch.setenv("KALSHI_REQUEST_TIMEOUT_SECONDS", "45")

        config = KalshiConfig.from_env()

        assert config.environment is TradingEnvironment.LIVE
        assert config.base_url is None
        assert config.request_timeout_seconds == 45
        assert config.resolve_base_url() == LIVE_URL


class TestKalshiClientInit:
    def test_environment_selects_base_url(self):
        assert KalshiClient().base_url == DEMO_URL
        assert KalshiClient(environment=TradingEnvironment.LIVE).base_url == LIVE_URL

    def test_conflicting_environment(self):
        with pytest.raises(ConfigurationError):
            KalshiClient(KalshiConfig(environment=TradingEnvironment.DEMO), environment=TradingEnvironment.LIVE)

    def test_starts_anonymous(self):
        client = KalshiClient()
        assert client.get_token() is None
        assert client.member_id is None
        assert not client.is_authenticated


class TestAuthenticationFlow:
    @pytest.mark.asyncio
    async def test_login_then_authenticated_request(self):
        client = KalshiClient()
        executor = _stub_transport(client, {"member_id": "m1", "token": "t1"}, {"balance": 500})

        await client.login("trader@example.com", "pw")
        balance = await client.get_balance()

        assert client.get_token() == "Bearer t1"
        assert client.member_id == "m1"
        assert balance == 500
        login_call, balance_call = executor.await_args_list
        assert login_call.args[1] == f"{DEMO_URL}/login"
        assert "Authorization" not in login_call.args[2]["headers"]
        assert balance_call.args[2]["headers"] == {"Authorization": "Bearer t1"}

    @pytest.mark.asyncio
    async def test_logout_clears_token(self):
        client = KalshiClient()
        _stub_transport(client, {"member_id": "m1", "token": "t1"}, {})

        await client.login("a", "b")
        await client.logout()

        assert client.get_token() is None
        assert not client.is_authenticated

    @pytest.mark.asyncio
    async def test_login_from_env(self, monkeypatch):
        monkeypatch.setenv("DEMO_USER_NAME", "demo@example.com")
        monkeypatch.setenv("DEMO_PASSWORD", "pw")
        client = KalshiClient()
        executor = _stub_transport(client, {"member_id": "m1", "token": "t1"})

        await client.login_from_env()

        assert executor.await_args.args[2]["json"] == {"email": "demo@example.com", "password": "pw"}

    @pytest.mark.asyncio
    async def test_portfolio_requires_login(self):
        client = KalshiClient()
        executor = _stub_transport(client)

        with pytest.raises(NotAuthenticatedError):
            await client.get_balance()
        executor.assert_not_awaited()


class TestCreateOrder:
    @pytest.mark.asyncio
    async def test_accepts_wire_strings(self, order_payload):
        client = KalshiClient()
        executor = _stub_transport(client, {"member_id": "m1", "token": "t1"}, {"order": order_payload()})
        await client.login("a", "b")

        order = await client.create_order("buy", None, 10, "yes", "INXD-23DEC29-B4700", "limit", yes_price=5)

        assert order.action is OrderAction.BUY
        assert order.order_type is OrderType.LIMIT
        body = executor.await_args.args[2]["json"]
        assert body["type"] == "limit"
        assert body["yes_price"] == 5
        assert "no_price" not in body
        assert body["client_order_id"]

    @pytest.mark.asyncio
    async def test_rejects_unknown_action(self):
        client = KalshiClient()
        with pytest.raises(UserInputError, match="OrderAction"):
            await client.create_order("hold", None, 1, "yes", "ABC", "market")


class TestLifecycle:
    @pytest.mark.asyncio
    async def test_async_context_manager_opens_and_closes(self):
        client = KalshiClient()
        client._session_manager.initialize = AsyncMock()
        client._session_manager.close = AsyncMock()

        async with client as entered:
            assert entered is client

        client._session_manager.initialize.assert_awaited_once()
        client._session_manager.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_public_endpoint_without_login(self):
        client = KalshiClient()
        executor = _stub_transport(client, {"exchange_active": True, "trading_active": False})

        assert await client.is_exchange_open() is False
        assert executor.await_args.args[2]["headers"] == {}
