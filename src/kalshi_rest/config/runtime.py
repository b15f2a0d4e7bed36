"""Environment lookups for client settings, with ``.env`` files as a fallback source."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Optional, TypeVar

from .errors import ConfigurationError

T = TypeVar("T")

_TRUE_VALUES = frozenset({"1", "true", "t", "yes", "y", "on"})
_FALSE_VALUES = frozenset({"0", "false", "f", "no", "n", "off"})

_DOTENV_CANDIDATES = (Path(".env"), Path.home() / ".env")

_DEFAULT_VALUES: Optional[dict[str, str]] = None


def _load_default_values() -> dict[str, str]:
    """Read the ``.env`` candidates once; the first file to define a key wins."""
    from .runtime_helpers import DotenvLoader

    global _DEFAULT_VALUES
    if _DEFAULT_VALUES is None:
        merged: dict[str, str] = {}
        for path in _DOTENV_CANDIDATES:
            for key, value in DotenvLoader.load_from_file(path).items():
                merged.setdefault(key, value)
        _DEFAULT_VALUES = merged
    return _DEFAULT_VALUES


def reset_default_values() -> None:
    """Forget cached .env values so the next lookup re-reads the files."""
    global _DEFAULT_VALUES
    _DEFAULT_VALUES = None


def _lookup(name: str, *, strip: bool, allow_blank: bool) -> Optional[str]:
    for raw in (os.getenv(name), _load_default_values().get(name)):
        if raw is None:
            continue
        value = raw.strip() if strip else raw
        if value or allow_blank:
            return value
    return None


def env_str(
    name: str,
    or_value: Optional[str] = None,
    *,
    required: bool = False,
    strip: bool = True,
    allow_blank: bool = False,
) -> Optional[str]:
    """Process environment first, then ``.env`` files, then ``or_value``."""
    value = _lookup(name, strip=strip, allow_blank=allow_blank)
    if value is not None:
        return value
    if required:
        raise ConfigurationError.missing_value(name, "environment variable is not set")
    return or_value


def _coerce(name: str, or_value: Optional[T], required: bool, convert: Callable[[str], T]) -> Optional[T]:
    raw = env_str(name)
    if raw is None:
        if required and or_value is None:
            raise ConfigurationError.missing_value(name, "environment variable is not set")
        return or_value
    return convert(raw)


def env_int(name: str, or_value: Optional[int] = None, *, required: bool = False) -> Optional[int]:
    def convert(raw: str) -> int:
        try:
            return int(raw)
        except ValueError as exc:
            raise ConfigurationError.invalid_value(name, raw, "Expected an integer") from exc

    return _coerce(name, or_value, required, convert)


def env_bool(name: str, or_value: Optional[bool] = None, *, required: bool = False) -> Optional[bool]:
    def convert(raw: str) -> bool:
        lowered = raw.lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
        raise ConfigurationError.invalid_value(name, raw, f"Expected one of: {', '.join(sorted(_TRUE_VALUES | _FALSE_VALUES))}")

    return _coerce(name, or_value, required, convert)


def env_seconds(name: str, or_value: Optional[int] = None, *, required: bool = False) -> Optional[int]:
    """Timeouts and other durations, in whole seconds; must be positive."""
    value = env_int(name, or_value=or_value, required=required)
    if value is not None and value <= 0:
        raise ConfigurationError.invalid_value(name, value, "Must be positive")
    return value
