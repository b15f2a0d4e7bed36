"""Async client for the Kalshi trading REST API."""

from .client import KalshiClient, KalshiConfig
from .client_helpers.errors import (
    AuthenticationError,
    ClientRequestError,
    InternalError,
    KalshiClientError,
    RequestError,
    SerializationError,
    ServerRequestError,
    UserInputError,
)
from .exceptions import (
    EmptyBatchError,
    IncompleteBatchError,
    InvalidOrderCountError,
    InvalidRequestPathError,
    MutuallyExclusiveParametersError,
    NotAuthenticatedError,
    ResponseFieldInvalidError,
    ResponseFieldMissingError,
    ResponseNotObjectError,
    UnexpectedStatusError,
)
from .session import Session

__all__ = [
    "AuthenticationError",
    "ClientRequestError",
    "EmptyBatchError",
    "IncompleteBatchError",
    "InternalError",
    "InvalidOrderCountError",
    "InvalidRequestPathError",
    "KalshiClient",
    "KalshiClientError",
    "KalshiConfig",
    "MutuallyExclusiveParametersError",
    "NotAuthenticatedError",
    "RequestError",
    "ResponseFieldInvalidError",
    "ResponseFieldMissingError",
    "ResponseNotObjectError",
    "SerializationError",
    "ServerRequestError",
    "Session",
    "UnexpectedStatusError",
    "UserInputError",
]
