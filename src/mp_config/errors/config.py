"""Configuration errors – loading, validation and remote source failures."""

from __future__ import annotations

from typing import Any, Sequence

from mp_config.errors.base import BaseError


class ConfigurationError(BaseError):
    """Generic configuration failure, e.g. reading before ``load()``."""

    default_code = "configuration_error"


class ValidationError(ConfigurationError):
    """The merged configuration was rejected by the schema.

    ``errors`` holds one entry per violated field, each a dict with
    ``field``, ``message`` and ``type`` keys.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    @property
    def fields(self) -> list[str]:
        return [e["field"] for e in self.errors]

    def _fields(self) -> dict[str, Any]:
        return {"errors": self.errors}


class SourceServiceError(ConfigurationError):
    """A remote configuration service call failed.

    ``error_code`` carries the service's own error name (for AWS, the
    ``ClientError`` code) so the retry layer can classify the failure.
    """

    default_code = "source_service_error"

    def __init__(
        self,
        message: str,
        *,
        service: str,
        operation: str,
        error_code: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.service = service
        self.operation = operation
        self.error_code = error_code

    def _fields(self) -> dict[str, Any]:
        fields: dict[str, Any] = {"service": self.service, "operation": self.operation}
        if self.error_code is not None:
            fields["error_code"] = self.error_code
        return fields


class SourceLoadError(ConfigurationError):
    """A loader could not produce a mapping at all."""

    default_code = "source_load_error"

    def __init__(self, message: str, *, loader: str, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.loader = loader

    def _fields(self) -> dict[str, Any]:
        return {"loader": self.loader}


class MissingKeysError(ConfigurationError):
    """Keys a caller requires are absent from the loaded configuration."""

    default_code = "missing_keys"

    def __init__(
        self,
        missing_keys: Sequence[str],
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        keys = list(missing_keys)
        super().__init__(
            message or f"Missing required configuration keys: {', '.join(keys)}",
            **kwargs,
        )
        self.missing_keys = keys

    def _fields(self) -> dict[str, Any]:
        return {"missing_keys": self.missing_keys}


class ProbeTimeoutError(BaseError):
    """A bounded operation, such as a loader availability probe, did not finish in time."""

    default_code = "probe_timeout"

    def __init__(self, timeout_seconds: float, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message or f"Operation timed out after {timeout_seconds}s", **kwargs)
        self.timeout_seconds = timeout_seconds

    def _fields(self) -> dict[str, Any]:
        return {"timeout_seconds": self.timeout_seconds}


__all__ = [
    "ConfigurationError",
    "MissingKeysError",
    "ProbeTimeoutError",
    "SourceLoadError",
    "SourceServiceError",
    "ValidationError",
]
