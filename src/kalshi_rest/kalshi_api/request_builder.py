"""Request building and execution for Kalshi API."""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Dict, Mapping, Optional, Tuple
from urllib.parse import quote

from .exceptions import InvalidRequestPathError

if TYPE_CHECKING:
    from .request_executor import RequestExecutor
    from .session import Session

logger = logging.getLogger(__name__)


def path_segment(value: Any) -> str:
    """Escape one identifier for use inside a URL path."""
    return quote(str(value), safe="")


class RequestBuilder:
    """Builds authenticated Kalshi requests against the current session and hands them to the executor."""

    def __init__(self, session_provider: Callable[[], Session], executor: RequestExecutor) -> None:
        self._session_provider = session_provider
        self._executor = executor

    @staticmethod
    def build_query(params: Optional[Mapping[str, Any]]) -> Dict[str, str]:
        """Render query parameters, dropping unset values.

        Booleans are sent as ``true``/``false`` and enums as their wire value.
        """
        query: Dict[str, str] = {}
        if not params:
            return query
        for key, value in params.items():
            if value is None:
                continue
            if isinstance(value, bool):
                query[key] = "true" if value else "false"
            elif isinstance(value, Enum):
                query[key] = str(value.value)
            else:
                query[key] = str(value)
        return query

    def require_authenticated(self, operation: str) -> Session:
        session = self._session_provider()
        # Raises NotAuthenticatedError before anything goes on the wire
        session.auth_headers(operation)
        return session

    def build_request_context(
        self,
        *,
        method: str,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        json_payload: Optional[Any] = None,
        operation_name: Optional[str] = None,
        authenticated: bool = True,
    ) -> Tuple[str, str, Dict[str, Any], str]:
        """Build request context from parameters."""
        if not path.startswith("/"):
            raise InvalidRequestPathError(path)

        method_upper = method.upper()
        op = operation_name if operation_name else path
        session = self._session_provider()

        headers: Dict[str, str] = {}
        if authenticated:
            headers.update(session.auth_headers(op))
        if json_payload is not None:
            headers["content-type"] = "application/json"

        request_kwargs: Dict[str, Any] = {"headers": headers}
        query = self.build_query(params)
        if query:
            request_kwargs["params"] = query
        if json_payload is not None:
            request_kwargs["json"] = json_payload

        url = f"{session.base_url}{path}"
        return method_upper, url, request_kwargs, op

    async def execute_request(
        self,
        method_upper: str,
        url: str,
        request_kwargs: Dict[str, Any],
        operation_name: str,
    ) -> Dict[str, Any]:
        """Execute a prepared request."""
        return await self._executor.execute_request(method_upper, url, request_kwargs, operation_name)

    async def request(
        self,
        *,
        method: str,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        json_payload: Optional[Any] = None,
        operation_name: Optional[str] = None,
        authenticated: bool = True,
    ) -> Dict[str, Any]:
        """Build and execute in one step."""
        method_upper, url, kwargs, op = self.build_request_context(
            method=method,
            path=path,
            params=params,
            json_payload=json_payload,
            operation_name=operation_name,
            authenticated=authenticated,
        )
        return await self.execute_request(method_upper, url, kwargs, op)


__all__ = ["RequestBuilder", "path_segment"]
