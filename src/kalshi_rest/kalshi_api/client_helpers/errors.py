"""Shared error types for Kalshi API helpers."""

from typing import Any, Optional


class KalshiErrorBase(RuntimeError):
    """Base error that attaches provided keyword fields as attributes."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(message)
        for key, value in kwargs.items():
            setattr(self, key, value)


class KalshiClientError(KalshiErrorBase):
    """Raised when Kalshi REST operations fail."""


class UserInputError(KalshiClientError):
    """Caller violated a precondition; detected locally before any request is sent."""


class AuthenticationError(KalshiClientError):
    """Login failed: transport failure, non-2xx status, or malformed response body."""

    def __init__(self, message: str, *, status_code: Optional[int] = None, **kwargs: Any) -> None:
        super().__init__(message, status_code=status_code, **kwargs)


class RequestError(KalshiClientError):
    """HTTP round trip failed; carries the status and raw body when one was received."""

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
        operation: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, status_code=status_code, body=body, operation=operation, **kwargs)


class SerializationError(RequestError):
    """Response body was not JSON or did not match the expected shape."""


class ClientRequestError(RequestError):
    """Exchange rejected the request with a 4xx status."""


class ServerRequestError(RequestError):
    """Exchange failed with a 5xx status, or the connection failed or timed out."""


class InternalError(KalshiClientError):
    """A state the client treats as unreachable; indicates a defect in the client."""


__all__ = [
    "AuthenticationError",
    "ClientRequestError",
    "InternalError",
    "KalshiClientError",
    "KalshiErrorBase",
    "RequestError",
    "SerializationError",
    "ServerRequestError",
    "UserInputError",
]
