"""Shared configuration helpers and dataclasses."""

from .errors import ConfigurationError
from .runtime import (
    env_bool,
    env_int,
    env_seconds,
    env_str,
    reset_default_values,
)
from .shared import (
    KalshiCredentials,
    TradingEnvironment,
    get_kalshi_credentials,
    get_trading_environment,
)

__all__ = [
    "ConfigurationError",
    "KalshiCredentials",
    "TradingEnvironment",
    "env_bool",
    "env_int",
    "env_seconds",
    "env_str",
    "get_kalshi_credentials",
    "get_trading_environment",
    "reset_default_values",
]
