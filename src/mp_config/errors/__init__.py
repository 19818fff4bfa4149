"""Error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── ConfigurationError
    │   ├── ValidationError       (schema rejected the merged config)
    │   ├── SourceServiceError    (remote service call failed)
    │   ├── SourceLoadError       (a loader produced no mapping)
    │   └── MissingKeysError      (required keys absent after load)
    └── ProbeTimeoutError         (availability probe ran past its timeout)
"""

from mp_config.errors.base import BaseError
from mp_config.errors.config import (
    ConfigurationError,
    MissingKeysError,
    ProbeTimeoutError,
    SourceLoadError,
    SourceServiceError,
    ValidationError,
)

__all__ = [
    "BaseError",
    "ConfigurationError",
    "MissingKeysError",
    "ProbeTimeoutError",
    "SourceLoadError",
    "SourceServiceError",
    "ValidationError",
]
