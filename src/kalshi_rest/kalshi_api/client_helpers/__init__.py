"""Helper modules for Kalshi API clients."""

from __future__ import annotations

from .base import ClientOperationBase
from .errors import (
    AuthenticationError,
    ClientRequestError,
    InternalError,
    KalshiClientError,
    RequestError,
    SerializationError,
    ServerRequestError,
    UserInputError,
)

__all__ = [
    "AuthenticationError",
    "ClientOperationBase",
    "ClientRequestError",
    "InternalError",
    "KalshiClientError",
    "RequestError",
    "SerializationError",
    "ServerRequestError",
    "UserInputError",
]
