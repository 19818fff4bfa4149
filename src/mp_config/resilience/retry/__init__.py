"""Resilience – retry with backoff, jitter and error classification."""
from mp_config.resilience.retry.backoff import BackoffStrategy, ExponentialBackoff
from mp_config.resilience.retry.classifier import ErrorCategory, classify_error, error_name, is_retryable
from mp_config.resilience.retry.jitter import BoundedJitter, JitterStrategy
from mp_config.resilience.retry.policy import RetryPolicy

__all__ = [
    "BackoffStrategy", "BoundedJitter", "ErrorCategory", "ExponentialBackoff",
    "JitterStrategy", "RetryPolicy", "classify_error", "error_name", "is_retryable",
]
