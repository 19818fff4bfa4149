"""Resilience – jitter strategies."""
from __future__ import annotations

import abc
import random


class JitterStrategy(abc.ABC):
    """Apply randomness to a backoff delay so retries do not align."""

    @abc.abstractmethod
    def apply(self, delay: float) -> float: ...


class BoundedJitter(JitterStrategy):
    """Uniform in ``[delay * (1 - ratio), delay * (1 + ratio)]``, never below *floor*."""

    def __init__(self, ratio: float = 0.25, floor: float = 0.1) -> None:
        self._ratio = ratio
        self._floor = floor

    def apply(self, delay: float) -> float:
        spread = delay * self._ratio
        return max(self._floor, delay + random.uniform(-spread, spread))


__all__ = ["BoundedJitter", "JitterStrategy"]
