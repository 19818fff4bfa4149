"""Resilience – retry, probe timeouts and local fallback for configuration loading."""
from mp_config.resilience.fallback import LocalFallbackPolicy, service_failure
from mp_config.resilience.retry import (
    BoundedJitter,
    ErrorCategory,
    ExponentialBackoff,
    RetryPolicy,
    classify_error,
    is_retryable,
)
from mp_config.resilience.timeouts import ProbeTimeoutError, TimeoutPolicy

__all__ = [
    "BoundedJitter",
    "ErrorCategory",
    "ExponentialBackoff",
    "LocalFallbackPolicy",
    "ProbeTimeoutError",
    "RetryPolicy",
    "TimeoutPolicy",
    "classify_error",
    "is_retryable",
    "service_failure",
]
