"""Lazily opened aiohttp session shared by every request a client makes."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Optional

import aiohttp

if TYPE_CHECKING:
    from .client import KalshiConfig


class SessionManager:
    """Owns one ``aiohttp.ClientSession`` per client, opened on first use."""

    def __init__(self, config: KalshiConfig) -> None:
        self._config = config
        self._http: Optional[aiohttp.ClientSession] = None
        self._lock = asyncio.Lock()

    def _timeout(self) -> aiohttp.ClientTimeout:
        return aiohttp.ClientTimeout(
            total=self._config.request_timeout_seconds,
            connect=self._config.connect_timeout_seconds,
            sock_read=self._config.sock_read_timeout_seconds,
        )

    async def initialize(self) -> None:
        """Open the HTTP session unless a live one already exists."""
        async with self._lock:
            if self._http is None or self._http.closed:
                self._http = aiohttp.ClientSession(timeout=self._timeout())

    async def close(self) -> None:
        async with self._lock:
            http, self._http = self._http, None
            if http is not None:
                await http.close()

    def get_session(self) -> aiohttp.ClientSession:
        if self._http is None:
            raise RuntimeError("HTTP session not initialized")
        return self._http
