"""Resilience – backoff strategies.

``attempt`` is the 1-based number of the attempt that just failed.
"""
from __future__ import annotations

import abc


class BackoffStrategy(abc.ABC):
    """Compute the wait (seconds) after the *attempt*-th failure."""

    @abc.abstractmethod
    def compute(self, attempt: int) -> float: ...


class ExponentialBackoff(BackoffStrategy):
    """``min(base_delay * 2^(attempt - 1), max_delay)``."""

    def __init__(self, base_delay: float = 1.0, max_delay: float = 30.0) -> None:
        self._base = base_delay
        self._max = max_delay

    def compute(self, attempt: int) -> float:
        return min(self._base * (2 ** max(attempt - 1, 0)), self._max)


__all__ = ["BackoffStrategy", "ExponentialBackoff"]
