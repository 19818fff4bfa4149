"""Resilience – RetryPolicy for network-backed configuration loaders."""
from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, TypeVar

from mp_config.observability import get_logger
from mp_config.resilience.retry.backoff import BackoffStrategy, ExponentialBackoff
from mp_config.resilience.retry.classifier import classify_error, is_retryable
from mp_config.resilience.retry.jitter import BoundedJitter, JitterStrategy

T = TypeVar("T")
logger = get_logger(__name__)


class RetryPolicy:
    """Bounded retry with backoff, jitter and an error classifier.

    Non-retryable errors and the error of the final attempt propagate
    unchanged.
    """

    def __init__(
        self,
        max_attempts: int = 3,
        backoff: BackoffStrategy | None = None,
        jitter: JitterStrategy | None = None,
        should_retry: Callable[[BaseException], bool] = is_retryable,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")
        self.max_attempts = max_attempts
        self.backoff = backoff or ExponentialBackoff()
        self.jitter = jitter or BoundedJitter()
        self.should_retry = should_retry
        self._sleep = sleep

    def delay_for(self, attempt: int) -> float:
        return self.jitter.apply(self.backoff.compute(attempt))

    async def execute_async(
        self,
        func: Callable[[], Awaitable[T]],
        *,
        operation: str | None = None,
    ) -> T:
        """Run *func*, retrying while :attr:`should_retry` accepts the error."""
        attempt = 1
        while True:
            try:
                return await func()
            except Exception as exc:
                if attempt >= self.max_attempts or not self.should_retry(exc):
                    raise
                delay = self.delay_for(attempt)
                logger.warning(
                    "config.retry",
                    operation=operation,
                    attempt=attempt,
                    max_attempts=self.max_attempts,
                    delay_s=round(delay, 3),
                    category=classify_error(exc).value,
                    error=repr(exc),
                )
                await self._sleep(delay)
                attempt += 1


__all__ = ["RetryPolicy"]
