from __future__ import annotations

"""Shared configuration dataclasses consumed across multiple modules."""


from dataclasses import dataclass
from enum import Enum

from .errors import ConfigurationError
from .runtime import env_str

LIVE_BASE_URL = "https://trading-api.kalshi.com/trade-api/v2"
DEMO_BASE_URL = "https://demo-api.kalshi.co/trade-api/v2"

_ENVIRONMENT_ALIASES = {
    "demo": "demo",
    "paper": "demo",
    "live": "live",
    "prod": "live",
    "production": "live",
}


class TradingEnvironment(Enum):
    """Deployment the client talks to; fixed for the lifetime of a client."""

    DEMO = "demo"
    LIVE = "live"

    @property
    def base_url(self) -> str:
        if self is TradingEnvironment.LIVE:
            return LIVE_BASE_URL
        return DEMO_BASE_URL

    @property
    def credential_prefix(self) -> str:
        return self.value.upper()

    @classmethod
    def parse(cls, raw: str) -> "TradingEnvironment":
        normalized = _ENVIRONMENT_ALIASES.get(raw.strip().lower())
        if normalized is None:
            raise ConfigurationError.invalid_value("KALSHI_ENVIRONMENT", raw, "Expected one of: demo, live")
        return cls(normalized)


def get_trading_environment() -> TradingEnvironment:
    raw = env_str("KALSHI_ENVIRONMENT", or_value=TradingEnvironment.DEMO.value)
    assert raw is not None
    return TradingEnvironment.parse(raw)


@dataclass(frozen=True)
class KalshiCredentials:
    username: str
    password: str

    def __repr__(self) -> str:
        return f"KalshiCredentials(username={self.username!r}, password='***')"


def get_kalshi_credentials(environment: TradingEnvironment | None = None) -> KalshiCredentials:
    """Load login credentials for *environment* from ``<ENV>_USER_NAME`` / ``<ENV>_PASSWORD``."""
    target = environment if environment is not None else get_trading_environment()
    prefix = target.credential_prefix
    username = env_str(f"{prefix}_USER_NAME", required=True)
    password = env_str(f"{prefix}_PASSWORD", required=True, strip=False)
    if username is None or password is None:
        raise ConfigurationError.missing_value(f"{prefix}_USER_NAME/{prefix}_PASSWORD")
    return KalshiCredentials(username=username, password=password)


__all__ = [
    "DEMO_BASE_URL",
    "KalshiCredentials",
    "LIVE_BASE_URL",
    "TradingEnvironment",
    "get_kalshi_credentials",
    "get_trading_environment",
]
