"""Field parsing utilities for Kalshi API responses."""

from __future__ import annotations

import dataclasses
import math
import re
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Mapping, Optional, Type, TypeVar

from .exceptions import ResponseFieldInvalidError, ResponseFieldMissingError
from .client_helpers.errors import SerializationError

R = TypeVar("R")

# Magnitude above which an epoch value is taken to be milliseconds
MILLISECOND_TIMESTAMP_THRESHOLD = 1e12
# datetime.fromisoformat accepts at most six fractional digits before 3.11
_FRACTION_PATTERN = re.compile(r"(\.\d{6})\d+")


class ResponseFieldParser:
    """Parse individual fields from Kalshi API responses."""

    @staticmethod
    def parse_timestamp(value: Any) -> Optional[datetime]:
        """Convert an RFC 3339 string or epoch number into an aware UTC datetime.

        ``None`` and blank strings map to ``None``. Naive values are taken as UTC.
        """
        if value is None:
            return None
        if isinstance(value, datetime):
            return _to_utc(value)
        if isinstance(value, bool):
            raise ValueError(f"Unsupported timestamp value: {value!r}")
        if isinstance(value, (int, float)):
            return _from_epoch(float(value))
        if not isinstance(value, str):
            raise TypeError(f"Unsupported timestamp type: {type(value)}")

        token = value.strip()
        if not token:
            return None
        try:
            return _from_epoch(float(token))
        except ValueError:  # Not numeric; fall through to ISO parsing
            pass
        normalized = _FRACTION_PATTERN.sub(r"\1", token.replace("Z", "+00:00").replace("z", "+00:00"))
        return _to_utc(datetime.fromisoformat(normalized))

    @staticmethod
    def normalize_cursor(raw: Any) -> Optional[str]:
        """The exchange signals the last page with an empty or absent cursor."""
        if raw is None:
            return None
        cursor = str(raw)
        if not cursor:
            return None
        return cursor

    @staticmethod
    def require_object(payload: Any, record: str, operation: Optional[str] = None) -> Dict[str, Any]:
        if not isinstance(payload, dict):
            raise SerializationError(f"{record} payload must be a JSON object, got {type(payload).__name__}", operation=operation)
        return payload

    @staticmethod
    def require_field(payload: Mapping[str, Any], key: str, record: str, operation: Optional[str] = None) -> Any:
        if key not in payload or payload[key] is None:
            raise ResponseFieldMissingError(key, record, operation)
        return payload[key]

    @staticmethod
    def require_list(payload: Mapping[str, Any], key: str, record: str, operation: Optional[str] = None) -> List[Any]:
        """Return ``payload[key]`` as a list; a missing or null entry is an empty list."""
        value = payload.get(key)
        if value is None:
            return []
        if not isinstance(value, list):
            raise ResponseFieldInvalidError(key, record, value, operation)
        return value

    @staticmethod
    def parse_record(
        cls: Type[R],
        payload: Any,
        *,
        record: str,
        converters: Optional[Mapping[str, Callable[[Any], Any]]] = None,
        renames: Optional[Mapping[str, str]] = None,
        operation: Optional[str] = None,
    ) -> R:
        """
        Build a dataclass instance from a response object.

        Fields without a default must be present and non-null. Keys the
        dataclass does not declare are ignored. ``renames`` maps a field name
        to the wire key when they differ.

        Args:
            cls: Target frozen dataclass.
            payload: Decoded JSON object.
            record: Record name used in error messages.
            converters: Per-field conversion applied to non-null values.
            renames: Field name to wire key overrides.
            operation: Operation name attached to raised errors.
        """
        obj = ResponseFieldParser.require_object(payload, record, operation)
        converters = converters or {}
        renames = renames or {}
        values: Dict[str, Any] = {}
        for field_def in dataclasses.fields(cls):
            wire_key = renames.get(field_def.name, field_def.name)
            required = field_def.default is dataclasses.MISSING and field_def.default_factory is dataclasses.MISSING
            raw = obj.get(wire_key)
            if raw is None:
                if required:
                    raise ResponseFieldMissingError(wire_key, record, operation)
                continue
            converter = converters.get(field_def.name)
            if converter is None:
                values[field_def.name] = raw
                continue
            try:
                values[field_def.name] = converter(raw)
            except (TypeError, ValueError) as exc:
                raise ResponseFieldInvalidError(wire_key, record, raw, operation) from exc
        return cls(**values)


def _to_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _from_epoch(numeric: float) -> datetime:
    if not math.isfinite(numeric):
        raise ValueError(f"Non-finite timestamp value: {numeric!r}")
    if numeric > MILLISECOND_TIMESTAMP_THRESHOLD:
        numeric /= 1000.0
    try:
        return datetime.fromtimestamp(numeric, tz=timezone.utc)
    except (OverflowError, OSError) as exc:
        raise ValueError(f"Timestamp out of range: {numeric!r}") from exc


def as_int(value: Any) -> int:
    """Strict integer conversion; booleans and fractional numbers are rejected."""
    if isinstance(value, bool):
        raise TypeError(f"Expected integer, got {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"Expected integer, got {value!r}")
        return int(value)
    return int(value)


def as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    raise TypeError(f"Expected boolean, got {value!r}")


def as_str(value: Any) -> str:
    if isinstance(value, (dict, list)):
        raise TypeError(f"Expected string, got {type(value).__name__}")
    return str(value)


def as_timestamp(value: Any) -> Optional[datetime]:
    return ResponseFieldParser.parse_timestamp(value)


def as_required_timestamp(value: Any) -> datetime:
    parsed = ResponseFieldParser.parse_timestamp(value)
    if parsed is None:
        raise ValueError("Timestamp value is required")
    return parsed


__all__ = [
    "ResponseFieldParser",
    "as_bool",
    "as_int",
    "as_required_timestamp",
    "as_str",
    "as_timestamp",
]
