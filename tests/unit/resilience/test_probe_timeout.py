"""Unit tests for TimeoutPolicy."""
from __future__ import annotations

import asyncio

import pytest

from mp_config.errors import BaseError
from mp_config.resilience.timeouts import ProbeTimeoutError, TimeoutPolicy


class TestTimeoutPolicy:
    def test_returns_result_in_time(self) -> None:
        async def fast() -> bool:
            return True

        assert asyncio.run(TimeoutPolicy(1.0).execute(fast)) is True

    def test_raises_probe_timeout(self) -> None:
        async def hang() -> bool:
            await asyncio.sleep(5)
            return True

        with pytest.raises(ProbeTimeoutError) as info:
            asyncio.run(TimeoutPolicy(0.01).execute(hang))
        assert info.value.timeout_seconds == 0.01
        assert isinstance(info.value, BaseError)
        assert info.value.code == "probe_timeout"
        assert isinstance(info.value.__cause__, TimeoutError)

    def test_builtin_timeout_error_translated(self) -> None:
        async def socket_timeout() -> bool:
            raise TimeoutError("connect timed out")

        with pytest.raises(ProbeTimeoutError) as info:
            asyncio.run(TimeoutPolicy(1.0).execute(socket_timeout))
        assert info.value.timeout_seconds == 1.0

    def test_other_errors_propagate(self) -> None:
        async def broken() -> bool:
            raise RuntimeError("x")

        with pytest.raises(RuntimeError):
            asyncio.run(TimeoutPolicy(1.0).execute(broken))

    def test_default_is_five_seconds(self) -> None:
        assert TimeoutPolicy().timeout_seconds == 5.0
