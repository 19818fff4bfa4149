"""Resilience – classify configuration-source failures for retry decisions.

The error *name* is taken, in order, from a ``SourceServiceError.error_code``,
a botocore ``ClientError`` code (``exc.response["Error"]["Code"]``) or the
exception class name, and looked up in fixed tables. Names that are not
listed are treated as non-retryable.
"""
from __future__ import annotations

import enum
from typing import Any

from mp_config.errors import SourceLoadError, SourceServiceError


class ErrorCategory(enum.Enum):
    RATE_LIMITED = "rate_limited"
    NETWORK = "network"
    SERVICE_UNAVAILABLE = "service_unavailable"
    PERMISSION = "permission"
    NOT_FOUND = "not_found"
    CONFIGURATION = "configuration"
    UNKNOWN = "unknown"

    @property
    def retryable(self) -> bool:
        return self in _TRANSIENT


_TRANSIENT = frozenset(
    {ErrorCategory.RATE_LIMITED, ErrorCategory.NETWORK, ErrorCategory.SERVICE_UNAVAILABLE}
)

_NAMES: dict[str, ErrorCategory] = {}
for _category, _names in (
    (
        ErrorCategory.RATE_LIMITED,
        (
            "ThrottlingException",
            "Throttling",
            "TooManyRequestsException",
            "RequestLimitExceeded",
            "SlowDown",
            "ThrottledException",
        ),
    ),
    (
        ErrorCategory.NETWORK,
        (
            "NetworkingError",
            "TimeoutError",
            "RequestTimeout",
            "RequestTimeoutException",
            "EndpointConnectionError",
            "ConnectTimeoutError",
            "ReadTimeoutError",
            "ConnectionClosedError",
            "ConnectionError",
            "ClientConnectorError",
            "ServerDisconnectedError",
        ),
    ),
    (
        ErrorCategory.SERVICE_UNAVAILABLE,
        (
            "ServiceUnavailableException",
            "ServiceUnavailable",
            "InternalServerError",
            "InternalServiceError",
            "InternalFailure",
            "InternalError",
        ),
    ),
    (
        ErrorCategory.PERMISSION,
        (
            "AccessDeniedException",
            "AccessDenied",
            "UnauthorizedOperation",
            "UnrecognizedClientException",
            "InvalidClientTokenId",
            "ExpiredTokenException",
            "NoCredentialsError",
            "CredentialsError",
        ),
    ),
    (
        ErrorCategory.NOT_FOUND,
        (
            "ResourceNotFoundException",
            "ParameterNotFound",
            "NoSuchKey",
            "NoSuchBucket",
        ),
    ),
):
    for _name in _names:
        _NAMES[_name] = _category


def error_name(exc: BaseException) -> str:
    """Best-effort service error name for *exc*."""
    if isinstance(exc, SourceServiceError) and exc.error_code:
        return exc.error_code
    response: Any = getattr(exc, "response", None)
    if isinstance(response, dict):
        code = response.get("Error", {}).get("Code")
        if code:
            return str(code)
    return type(exc).__name__


def classify_error(exc: BaseException) -> ErrorCategory:
    # Mapping-resolution failures are configuration bugs, never transient.
    if isinstance(exc, SourceLoadError):
        return ErrorCategory.CONFIGURATION
    return _NAMES.get(error_name(exc), ErrorCategory.UNKNOWN)


def is_retryable(exc: BaseException) -> bool:
    return classify_error(exc).retryable


__all__ = ["ErrorCategory", "classify_error", "error_name", "is_retryable"]
