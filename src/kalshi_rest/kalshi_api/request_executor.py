"""Request execution and HTTP status classification for Kalshi API."""

import asyncio
import logging
from typing import Any, Dict, Optional, Tuple

import aiohttp
import orjson

from .client_helpers.errors import ClientRequestError, ServerRequestError, SerializationError
from .exceptions import ResponseNotObjectError, UnexpectedStatusError

logger = logging.getLogger(__name__)

HTTP_SUCCESS_RANGE = range(200, 300)
HTTP_CLIENT_ERROR_RANGE = range(400, 500)
HTTP_SERVER_ERROR_RANGE = range(500, 600)
_BODY_PREVIEW_CHARS = 500


class RequestExecutor:
    """Send one HTTP request and turn the status and body into a payload or a typed error.

    Every call is a single round trip; nothing is retried here.
    """

    def __init__(self, session_manager) -> None:
        self._session_manager = session_manager

    async def execute_request(
        self, method_upper: str, url: str, request_kwargs: Dict[str, Any], operation_name: str
    ) -> Dict[str, Any]:
        """Execute the request and return the decoded JSON object."""
        await self._session_manager.initialize()
        session = self._session_manager.get_session()
        logger.debug("Kalshi %s %s (%s)", method_upper, url, operation_name)
        try:
            async with session.request(method_upper, url, **request_kwargs) as response:
                status = response.status
                raw = await response.read()
        except asyncio.TimeoutError as exc:
            logger.warning("Kalshi request %s timed out", operation_name)
            raise ServerRequestError(f"Kalshi request {operation_name} timed out", operation=operation_name) from exc
        except aiohttp.ClientError as exc:
            logger.warning("Kalshi request %s failed: %s", operation_name, exc)
            raise ServerRequestError(f"Kalshi request {operation_name} failed: {exc}", operation=operation_name) from exc
        return classify_response(status, decode_body(raw, status, operation_name), operation_name)


def decode_body(raw: bytes, status: int, operation_name: str) -> str:
    """Decode a response body as UTF-8.

    A success body that is not valid UTF-8 is a serialization failure. Error
    bodies are decoded leniently so the status still decides the error type.
    """
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        text = raw.decode("utf-8", errors="replace")
        if status not in HTTP_SUCCESS_RANGE:
            return text
        raise SerializationError(
            f"Kalshi response for {operation_name} was not valid UTF-8: {_preview(text)}",
            status_code=status,
            body=text,
            operation=operation_name,
        ) from exc


def classify_response(status: int, text: str, operation_name: str) -> Dict[str, Any]:
    """Return the JSON object for a 2xx response, otherwise raise the matching error."""
    if status in HTTP_SUCCESS_RANGE:
        return decode_json_object(text, operation_name, status)

    error_code, error_message = _extract_exchange_error(text)
    detail = error_message if error_message else _preview(text)
    if status in HTTP_CLIENT_ERROR_RANGE:
        logger.warning("Kalshi request %s rejected with %d: %s", operation_name, status, detail)
        raise ClientRequestError(
            f"Kalshi request {operation_name} returned {status}: {detail}",
            status_code=status,
            body=text,
            operation=operation_name,
            error_code=error_code,
        )
    if status in HTTP_SERVER_ERROR_RANGE:
        logger.warning("Kalshi request %s failed server-side with %d: %s", operation_name, status, detail)
        raise ServerRequestError(
            f"Kalshi request {operation_name} returned {status}: {detail}",
            status_code=status,
            body=text,
            operation=operation_name,
            error_code=error_code,
        )

    logger.error(
        "Unexpected HTTP status %d for %s; please report this as a client bug. Body: %s",
        status,
        operation_name,
        _preview(text),
    )
    raise UnexpectedStatusError(status, operation_name, text)


def decode_json_object(text: str, operation_name: str, status: Optional[int] = None) -> Dict[str, Any]:
    """Decode a response body that must be a JSON object; an empty body decodes to ``{}``."""
    if not text or not text.strip():
        return {}
    try:
        payload = orjson.loads(text)
    except orjson.JSONDecodeError as exc:
        raise SerializationError(
            f"Kalshi response for {operation_name} was not JSON: {_preview(text)}",
            status_code=status,
            body=text,
            operation=operation_name,
        ) from exc
    if not isinstance(payload, dict):
        raise ResponseNotObjectError(operation_name, text)
    return payload


def _extract_exchange_error(text: str) -> Tuple[Optional[str], Optional[str]]:
    """Pull ``error.code``/``error.message`` out of an error body when it has that shape."""
    try:
        payload = orjson.loads(text) if text else None
    except orjson.JSONDecodeError:
        return None, None
    if not isinstance(payload, dict):
        return None, None
    error = payload.get("error")
    if not isinstance(error, dict):
        return None, None
    code = error.get("code")
    message = error.get("message")
    return (str(code) if code is not None else None, str(message) if message is not None else None)


def _preview(text: str) -> str:
    if len(text) <= _BODY_PREVIEW_CHARS:
        return text
    return f"{text[:_BODY_PREVIEW_CHARS]}..."


__all__ = ["RequestExecutor", "classify_response", "decode_body", "decode_json_object"]
