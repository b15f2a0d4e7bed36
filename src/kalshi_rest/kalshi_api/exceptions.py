"""API helpers exception classes."""

from typing import Any, Optional, Sequence

from .client_helpers.errors import InternalError, SerializationError, UserInputError


# Precondition failures
class NotAuthenticatedError(UserInputError):
    """Operation requires a session token; call login first."""

    def __init__(self, operation: str = "") -> None:
        if operation:
            msg = f"Not logged in: {operation} requires an authenticated session"
        else:
            msg = "Not logged in: this operation requires an authenticated session"
        super().__init__(msg, operation=operation)


class MutuallyExclusiveParametersError(UserInputError):
    """Exactly one of a group of parameters must be provided."""

    def __init__(self, fields: Sequence[str], provided: Sequence[str]) -> None:
        names = " / ".join(fields)
        if provided:
            msg = f"Provide exactly one of {names}, not both"
        else:
            msg = f"Provide exactly one of {names}, not neither"
        super().__init__(msg, fields=tuple(fields), provided=tuple(provided))


class InvalidOrderCountError(UserInputError):
    """Order count must be a positive integer."""

    def __init__(self, count: Any) -> None:
        super().__init__(f"Order count must be a positive integer, received: {count!r}", count=count)


class EmptyBatchError(UserInputError):
    """Batch operations need at least one element."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"{operation} requires at least one element", operation=operation)


# Response shape failures
class ResponseFieldMissingError(SerializationError):
    """Response payload lacks a required field."""

    def __init__(self, field_name: str, record: str, operation: Optional[str] = None) -> None:
        super().__init__(
            f"{record} payload missing required field '{field_name}'",
            operation=operation,
            field_name=field_name,
            record=record,
        )


class ResponseFieldInvalidError(SerializationError):
    """Response payload field has a value that cannot be decoded."""

    def __init__(self, field_name: str, record: str, value: Any, operation: Optional[str] = None) -> None:
        super().__init__(
            f"{record} payload field '{field_name}' has invalid value {value!r}",
            operation=operation,
            field_name=field_name,
            record=record,
            value=value,
        )


class ResponseNotObjectError(SerializationError):
    """Response body decoded to something other than a JSON object."""

    def __init__(self, operation: str, body: Optional[str] = None) -> None:
        super().__init__(f"Kalshi response for {operation} was not a JSON object", operation=operation, body=body)


# Defects
class InvalidRequestPathError(InternalError):
    """Request path templates must start with '/'."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Path must begin with '/' for Kalshi requests: {path!r}", path=path)


class UnexpectedStatusError(InternalError):
    """Received an HTTP status that is neither success nor error."""

    def __init__(self, status_code: int, operation: str, body: Optional[str] = None) -> None:
        super().__init__(
            f"Unexpected HTTP status {status_code} for {operation}",
            status_code=status_code,
            operation=operation,
            body=body,
        )


class IncompleteBatchError(InternalError):
    """A batch slot was never filled after all fan-out tasks finished."""

    def __init__(self, operation: str, missing_indexes: Sequence[int]) -> None:
        super().__init__(
            f"{operation} finished without results for indexes {list(missing_indexes)}",
            operation=operation,
            missing_indexes=tuple(missing_indexes),
        )


__all__ = [
    "EmptyBatchError",
    "IncompleteBatchError",
    "InvalidOrderCountError",
    "InvalidRequestPathError",
    "MutuallyExclusiveParametersError",
    "NotAuthenticatedError",
    "ResponseFieldInvalidError",
    "ResponseFieldMissingError",
    "ResponseNotObjectError",
    "UnexpectedStatusError",
]
