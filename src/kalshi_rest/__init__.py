"""Typed async client for the Kalshi prediction-market REST API."""

from .config import ConfigurationError, TradingEnvironment
from .data_models import (
    BatchCancelResult,
    BatchOrderResult,
    Event,
    ExchangeSchedule,
    ExchangeStatus,
    Fill,
    Market,
    Order,
    OrderAction,
    OrderRequest,
    OrderSide,
    OrderStatus,
    OrderType,
    Page,
    PositionsPage,
)
from .kalshi_api import (
    AuthenticationError,
    ClientRequestError,
    InternalError,
    KalshiClient,
    KalshiClientError,
    KalshiConfig,
    RequestError,
    SerializationError,
    ServerRequestError,
    UserInputError,
)
from .logging_config import setup_logging

__version__ = "0.1.0"

__all__ = [
    "AuthenticationError",
    "BatchCancelResult",
    "BatchOrderResult",
    "ClientRequestError",
    "ConfigurationError",
    "Event",
    "ExchangeSchedule",
    "ExchangeStatus",
    "Fill",
    "InternalError",
    "KalshiClient",
    "KalshiClientError",
    "KalshiConfig",
    "Market",
    "Order",
    "OrderAction",
    "OrderRequest",
    "OrderSide",
    "OrderStatus",
    "OrderType",
    "Page",
    "PositionsPage",
    "RequestError",
    "SerializationError",
    "ServerRequestError",
    "TradingEnvironment",
    "UserInputError",
    "__version__",
    "setup_logging",
]
