"""Async Kalshi REST client - slim coordinator over the operation helpers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple, Union
from urllib.parse import urlparse

from kalshi_rest.config.errors import ConfigurationError
from kalshi_rest.config.runtime import env_seconds, env_str
from kalshi_rest.config.shared import TradingEnvironment, get_kalshi_credentials, get_trading_environment
from kalshi_rest.data_models.exchange import ExchangeSchedule, ExchangeStatus
from kalshi_rest.data_models.market import Event, Market, MarketStatus, Orderbook, Series, Snapshot, Trade
from kalshi_rest.data_models.portfolio import Page, PositionsPage, Settlement
from kalshi_rest.data_models.trading import (
    BatchCancelResult,
    BatchOrderResult,
    Fill,
    Order,
    OrderAction,
    OrderRequest,
    OrderSide,
    OrderStatus,
    OrderType,
)

from .client_helpers.component_initializer import ComponentInitializer
from .client_helpers.errors import KalshiClientError, UserInputError
from .client_helpers.event_operations import EventOperations
from .client_helpers.exchange_operations import ExchangeOperations
from .client_helpers.fills_operations import FillsOperations
from .client_helpers.market_operations import MarketOperations
from .session import Session

__all__ = ["KalshiClient", "KalshiClientError", "KalshiConfig"]

DEFAULT_KALSHI_REQUEST_TIMEOUT_SECONDS = 30
DEFAULT_KALSHI_CONNECT_TIMEOUT_SECONDS = 10
DEFAULT_KALSHI_SOCK_READ_TIMEOUT_SECONDS = 20

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KalshiConfig:
    """Configuration for Kalshi API client."""

    environment: TradingEnvironment = TradingEnvironment.DEMO
    base_url: Optional[str] = None
    request_timeout_seconds: int = DEFAULT_KALSHI_REQUEST_TIMEOUT_SECONDS
    connect_timeout_seconds: int = DEFAULT_KALSHI_CONNECT_TIMEOUT_SECONDS
    sock_read_timeout_seconds: int = DEFAULT_KALSHI_SOCK_READ_TIMEOUT_SECONDS

    @classmethod
    def from_env(cls) -> "KalshiConfig":
        """Build a config from ``KALSHI_*`` environment variables and ``.env`` defaults."""
        return cls(
            environment=get_trading_environment(),
            base_url=env_str("KALSHI_BASE_URL"),
            request_timeout_seconds=env_seconds(
                "KALSHI_REQUEST_TIMEOUT_SECONDS", or_value=DEFAULT_KALSHI_REQUEST_TIMEOUT_SECONDS
            ),
            connect_timeout_seconds=env_seconds(
                "KALSHI_CONNECT_TIMEOUT_SECONDS", or_value=DEFAULT_KALSHI_CONNECT_TIMEOUT_SECONDS
            ),
            sock_read_timeout_seconds=env_seconds(
                "KALSHI_SOCK_READ_TIMEOUT_SECONDS", or_value=DEFAULT_KALSHI_SOCK_READ_TIMEOUT_SECONDS
            ),
        )

    def resolve_base_url(self) -> str:
        """The override when set, otherwise the environment's fixed URL. Trailing slashes are dropped."""
        if not self.base_url:
            return self.environment.base_url
        parsed = urlparse(self.base_url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ConfigurationError.invalid_value("base_url", self.base_url, "Expected an http(s) URL with a host")
        return self.base_url.rstrip("/")


def _coerce_enum(enum_cls, value):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).lower())
    except ValueError as exc:
        allowed = ", ".join(member.value for member in enum_cls)
        raise UserInputError(f"Invalid {enum_cls.__name__} {value!r}; expected one of: {allowed}") from exc


class KalshiClient:
    """
    Client for the Kalshi trading API.

    Holds the base URL and, after ``login``, the bearer token. The HTTP
    session is opened lazily on the first request; use ``async with`` or
    call ``close`` to release it.
    """

    def __init__(self, config: Optional[KalshiConfig] = None, *, environment: Optional[TradingEnvironment] = None) -> None:
        if config is None:
            config = KalshiConfig(environment=environment) if environment is not None else KalshiConfig()
        elif environment is not None and environment is not config.environment:
            raise ConfigurationError(
                f"Conflicting environments: config has {config.environment.value}, argument has {environment.value}"
            )
        self._config = config
        self._session = Session(base_url=config.resolve_base_url())

        components = ComponentInitializer(config).initialize(lambda: self._session)
        self._session_manager = components["session_manager"]
        self._request_builder = components["request_builder"]
        self._response_parser = components["response_parser"]
        self._auth_helper = components["auth_helper"]
        self._order_ops = components["order_ops"]
        self._portfolio_ops = components["portfolio_ops"]
        self._exchange_ops = ExchangeOperations(self)
        self._market_ops = MarketOperations(self)
        self._event_ops = EventOperations(self)
        self._fills_ops = FillsOperations(self)
        logger.debug("Kalshi client configured for %s at %s", config.environment.value, self._session.base_url)

    async def __aenter__(self) -> "KalshiClient":
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def initialize(self) -> None:
        """Open the client's HTTP session."""
        await self._session_manager.initialize()

    async def close(self) -> None:
        """Close the client's HTTP session."""
        await self._session_manager.close()

    # Session state

    @property
    def config(self) -> KalshiConfig:
        return self._config

    @property
    def environment(self) -> TradingEnvironment:
        return self._config.environment

    @property
    def base_url(self) -> str:
        return self._session.base_url

    @property
    def session(self) -> Session:
        return self._session

    @property
    def member_id(self) -> Optional[str]:
        return self._session.member_id

    @property
    def is_authenticated(self) -> bool:
        return self._session.is_authenticated

    def get_token(self) -> Optional[str]:
        """The full ``Authorization`` header value, ``Bearer <token>``, or None before login."""
        return self._session.token

    async def api_request(
        self,
        *,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
        operation_name: Optional[str] = None,
        authenticated: bool = True,
    ) -> Dict[str, Any]:
        """Execute a raw API request relative to the base URL."""
        return await self._request_builder.request(
            method=method,
            path=path,
            params=params,
            json_payload=json,
            operation_name=operation_name,
            authenticated=authenticated,
        )

    # Authentication

    async def login(self, username: str, password: str) -> None:
        self._session = await self._auth_helper.login(self._session, username, password)

    async def login_from_env(self) -> None:
        """Log in with ``<ENV>_USER_NAME`` / ``<ENV>_PASSWORD`` for the configured environment."""
        credentials = get_kalshi_credentials(self._config.environment)
        await self.login(credentials.username, credentials.password)

    async def logout(self) -> None:
        self._session = await self._auth_helper.logout(self._session)

    # Exchange

    async def get_exchange_status(self) -> ExchangeStatus:
        return await self._exchange_ops.get_exchange_status()

    async def get_exchange_schedule(self) -> ExchangeSchedule:
        return await self._exchange_ops.get_exchange_schedule()

    async def is_exchange_open(self) -> bool:
        return await self._exchange_ops.is_exchange_open()

    # Markets, events and series

    async def get_single_market(self, ticker: str) -> Market:
        return await self._market_ops.get_single_market(ticker)

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
        return await self._market_ops.get_multiple_markets(
            limit, cursor, event_ticker, series_ticker, max_close_ts, min_close_ts, status, tickers
        )

    async def get_market_orderbook(self, ticker: str, depth: Optional[int] = None) -> Orderbook:
        return await self._market_ops.get_market_orderbook(ticker, depth)

    async def get_market_history(
        self,
        ticker: str,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
        min_ts: Optional[int] = None,
        max_ts: Optional[int] = None,
    ) -> Page[Snapshot]:
        return await self._market_ops.get_market_history(ticker, limit, cursor, min_ts, max_ts)

    async def get_trades(
        self,
        cursor: Optional[str] = None,
        limit: Optional[int] = None,
        ticker: Optional[str] = None,
        min_ts: Optional[int] = None,
        max_ts: Optional[int] = None,
    ) -> Page[Trade]:
        return await self._market_ops.get_trades(cursor, limit, ticker, min_ts, max_ts)

    async def get_single_event(self, event_ticker: str, with_nested_markets: Optional[bool] = None) -> Event:
        return await self._event_ops.get_single_event(event_ticker, with_nested_markets)

    async def get_multiple_events(
        self,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
        status: Optional[str] = None,
        series_ticker: Optional[str] = None,
        with_nested_markets: Optional[bool] = None,
    ) -> Page[Event]:
        return await self._event_ops.get_multiple_events(limit, cursor, status, series_ticker, with_nested_markets)

    async def get_series(self, ticker: str) -> Series:
        return await self._event_ops.get_series(ticker)

    # Portfolio

    async def get_balance(self) -> int:
        return await self._portfolio_ops.get_balance()

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
        return await self._order_ops.get_multiple_orders(ticker, event_ticker, min_ts, max_ts, status, limit, cursor)

    async def get_single_order(self, order_id: str) -> Order:
        return await self._order_ops.get_single_order(order_id)

    async def get_multiple_fills(
        self,
        ticker: Optional[str] = None,
        order_id: Optional[str] = None,
        min_ts: Optional[int] = None,
        max_ts: Optional[int] = None,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
    ) -> Page[Fill]:
        return await self._fills_ops.get_multiple_fills(ticker, order_id, min_ts, max_ts, limit, cursor)

    async def get_portfolio_settlements(self, limit: Optional[int] = None, cursor: Optional[str] = None) -> Page[Settlement]:
        return await self._portfolio_ops.get_portfolio_settlements(limit, cursor)

    async def get_user_positions(
        self,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
        settlement_status: Optional[str] = None,
        ticker: Optional[str] = None,
        event_ticker: Optional[str] = None,
    ) -> PositionsPage:
        return await self._portfolio_ops.get_user_positions(limit, cursor, settlement_status, ticker, event_ticker)

    # Orders

    async def create_order(
        self,
        action: Union[OrderAction, str],
        client_order_id: Optional[str],
        count: int,
        side: Union[OrderSide, str],
        ticker: str,
        order_type: Union[OrderType, str],
        buy_max_cost: Optional[int] = None,
        expiration_ts: Optional[int] = None,
        no_price: Optional[int] = None,
        sell_position_floor: Optional[int] = None,
        yes_price: Optional[int] = None,
    ) -> Order:
        """Place an order. A limit order needs exactly one of ``yes_price``/``no_price``."""
        request = OrderRequest(
            action=_coerce_enum(OrderAction, action),
            count=count,
            side=_coerce_enum(OrderSide, side),
            ticker=ticker,
            order_type=_coerce_enum(OrderType, order_type),
            client_order_id=client_order_id,
            buy_max_cost=buy_max_cost,
            expiration_ts=expiration_ts,
            no_price=no_price,
            sell_position_floor=sell_position_floor,
            yes_price=yes_price,
        )
        return await self._order_ops.create_order(request)

    async def submit_order(self, order_request: OrderRequest) -> Order:
        return await self._order_ops.create_order(order_request)

    async def cancel_order(self, order_id: str) -> Tuple[Order, int]:
        return await self._order_ops.cancel_order(order_id)

    async def decrease_order(self, order_id: str, reduce_by: Optional[int] = None, reduce_to: Optional[int] = None) -> Order:
        return await self._order_ops.decrease_order(order_id, reduce_by, reduce_to)

    async def batch_cancel_order(self, order_ids: Sequence[str]) -> List[BatchCancelResult]:
        return await self._order_ops.batch_cancel_order(order_ids)

    async def batch_create_order(self, order_requests: Sequence[OrderRequest]) -> List[BatchOrderResult]:
        return await self._order_ops.batch_create_order(order_requests)
