"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import os
from typing import Any, Dict

import pytest

from kalshi_rest.config import runtime

_ISOLATED_PREFIXES = ("KALSHI_", "DEMO_", "LIVE_")


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Keep developer .env files and exported credentials out of the tests."""
    for name in list(os.environ):
        if name.startswith(_ISOLATED_PREFIXES):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(runtime, "_DEFAULT_VALUES", {})
    yield
    runtime.reset_default_values()


def make_order_payload(**overrides: Any) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "order_id": "ord-1",
        "user_id": "user-1",
        "ticker": "INXD-23DEC29-B4700",
        "status": "resting",
        "yes_price": 5,
        "no_price": 95,
        "created_time": "2023-12-01T15:30:00Z",
        "action": "buy",
        "side": "yes",
        "type": "limit",
        "client_order_id": "client-1",
        "order_group_id": "",
        "remaining_count": 10,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def order_payload():
    return make_order_payload
