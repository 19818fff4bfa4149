"""Observability – structlog logger helpers and value masking for config diagnostics."""
from __future__ import annotations

from typing import Any, Iterable

import structlog

DEFAULT_SENSITIVE_KEYS: tuple[str, ...] = (
    "password",
    "secret",
    "key",
    "token",
    "credential",
    "api_key",
    "apikey",
)


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


def is_sensitive_key(key: str, fragments: Iterable[str] = DEFAULT_SENSITIVE_KEYS) -> bool:
    lowered = key.lower()
    return any(fragment.lower() in lowered for fragment in fragments)


def mask_value(value: Any) -> str:
    """Show the first and last two characters only, ``****`` for short values."""
    s = str(value)
    if len(s) <= 4:
        return "****"
    return f"{s[:2]}**...{s[-2:]}"


__all__ = [
    "DEFAULT_SENSITIVE_KEYS",
    "get_logger",
    "is_sensitive_key",
    "mask_value",
]
