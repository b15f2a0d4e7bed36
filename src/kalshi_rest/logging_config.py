"""
Centralized logging configuration for applications built on the client.

The library itself only emits records through module loggers; call
setup_logging once from an application entry point to get:
- Console output on stdout
- Optional file output (truncated on each start unless KALSHI_LOG_APPEND=1)
- Level from the argument or KALSHI_LOG_LEVEL
"""

import logging
import logging.handlers
import sys
import threading
from pathlib import Path
from typing import Optional, Union

from kalshi_rest.config import ConfigurationError, env_bool, env_str

_config_lock = threading.Lock()
_MODULE_LOGGER = logging.getLogger(__name__)
_TECHNICAL_FORMAT = "%(asctime)s%(msecs)03d - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_NOISY_LOGGERS = ("aiohttp", "asyncio", "urllib3")


def _resolve_level(level: Optional[Union[str, int]]) -> int:
    if isinstance(level, int):
        return level
    raw = level if level is not None else env_str("KALSHI_LOG_LEVEL") or "INFO"
    normalized = raw.upper()
    if normalized not in _VALID_LEVELS:
        raise ConfigurationError.invalid_value("log level", raw, f"Must be one of: {', '.join(_VALID_LEVELS)}")
    return getattr(logging, normalized)


def _close_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        try:
            handler.close()
        except OSError as exc:
            _MODULE_LOGGER.debug("Handler close failed: %s", exc)
        logger.removeHandler(handler)


def _build_console_handler(user_friendly: bool) -> logging.Handler:
    if user_friendly:
        formatter = logging.Formatter("%(message)s")
    else:
        formatter = logging.Formatter(_TECHNICAL_FORMAT, _DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    return console_handler


def _build_file_handler(log_file: Path) -> logging.Handler:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    file_mode = "a" if env_bool("KALSHI_LOG_APPEND", or_value=False) else "w"
    handler_cls = getattr(logging.handlers, "WatchedFileHandler", logging.FileHandler)
    file_handler = handler_cls(log_file, mode=file_mode)
    file_handler.setFormatter(logging.Formatter(_TECHNICAL_FORMAT, _DATE_FORMAT))
    return file_handler


def _suppress_noisy_third_parties() -> None:
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def setup_logging(
    level: Optional[Union[str, int]] = None,
    *,
    log_file: Optional[Union[str, Path]] = None,
    user_friendly: bool = False,
) -> None:
    """Configure the root logger; repeated calls replace the previous handlers."""

    with _config_lock:
        resolved_level = _resolve_level(level)
        root_logger = logging.getLogger()
        _close_handlers(root_logger)

        root_logger.addHandler(_build_console_handler(user_friendly))
        if log_file is not None:
            root_logger.addHandler(_build_file_handler(Path(log_file).expanduser()))

        root_logger.setLevel(resolved_level)
        _suppress_noisy_third_parties()


__all__ = ["setup_logging"]
