"""Authentication helpers for Kalshi API."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .client_helpers.errors import AuthenticationError, RequestError

if TYPE_CHECKING:
    from .request_builder import RequestBuilder
    from .response_parser import ResponseParser
    from .session import Session

logger = logging.getLogger(__name__)


class AuthenticationHelper:
    """Exchange credentials for a bearer token and sign out again."""

    def __init__(self, request_builder: RequestBuilder, response_parser: ResponseParser) -> None:
        self._request_builder = request_builder
        self._response_parser = response_parser

    async def login(self, session: Session, username: str, password: str) -> Session:
        """
        Sign in with email and password.

        Args:
            session: Current session; only its base URL is used.
            username: Account email.
            password: Account password.

        Returns:
            A new session carrying the bearer token and member id.

        Raises:
            AuthenticationError: On transport failure, a non-2xx status, or a malformed body.
        """
        try:
            payload = await self._request_builder.request(
                method="POST",
                path="/login",
                json_payload={"email": username, "password": password},
                operation_name="login",
                authenticated=False,
            )
            token, member_id = self._response_parser.parse_login(payload, "login")
        except RequestError as exc:
            logger.warning("Kalshi login failed (status=%s)", exc.status_code)
            raise AuthenticationError(f"Kalshi login failed: {exc}", status_code=exc.status_code) from exc

        logger.info("Logged in to %s as member %s", session.base_url, member_id)
        return session.authenticated(token, member_id)

    async def logout(self, session: Session) -> Session:
        """Sign out remotely, then return a session without credentials."""
        await self._request_builder.request(method="POST", path="/logout", operation_name="logout")
        logger.info("Logged out member %s", session.member_id)
        return session.cleared()


__all__ = ["AuthenticationHelper"]
