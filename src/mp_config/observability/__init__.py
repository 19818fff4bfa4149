"""Observability – structured logging for configuration loading."""
from mp_config.observability.logging import (
    DEFAULT_SENSITIVE_KEYS,
    get_logger,
    is_sensitive_key,
    mask_value,
)

__all__ = [
    "DEFAULT_SENSITIVE_KEYS",
    "get_logger",
    "is_sensitive_key",
    "mask_value",
]
