"""Resilience – TimeoutPolicy bounding loader availability probes."""
from __future__ import annotations

import asyncio
import dataclasses
from typing import Awaitable, Callable, TypeVar

from mp_config.errors import ProbeTimeoutError

T = TypeVar("T")


@dataclasses.dataclass(frozen=True)
class TimeoutPolicy:
    timeout_seconds: float = 5.0

    async def execute(self, func: Callable[[], Awaitable[T]]) -> T:
        try:
            return await asyncio.wait_for(func(), timeout=self.timeout_seconds)
        except (asyncio.TimeoutError, TimeoutError) as exc:
            raise ProbeTimeoutError(self.timeout_seconds) from exc


__all__ = ["ProbeTimeoutError", "TimeoutPolicy"]
