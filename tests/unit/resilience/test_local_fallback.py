"""Unit tests for LocalFallbackPolicy."""
from __future__ import annotations

import asyncio

import pytest

from mp_config.errors import SourceLoadError, SourceServiceError, ValidationError
from mp_config.manager import ConfigManager
from mp_config.resilience import LocalFallbackPolicy, RetryPolicy, service_failure
from mp_config.testing import FailingLoader, StaticLoader


async def _no_sleep(delay: float) -> None:
    return None


def _denied() -> SourceServiceError:
    return SourceServiceError(
        "denied", service="SSM", operation="GetParametersByPath", error_code="AccessDeniedException"
    )


def _manager(remote_error: BaseException) -> ConfigManager:
    return ConfigManager(
        loaders=[
            StaticLoader({"PORT": "3000"}, name="EnvironmentLoader"),
            FailingLoader(remote_error, name="SSMParameterStoreLoader", network_backed=True),
        ],
        retry_policy=RetryPolicy(sleep=_no_sleep),
    )


class TestServiceFailure:
    def test_direct(self) -> None:
        err = _denied()
        assert service_failure(err) is err

    def test_as_cause(self) -> None:
        err = _denied()
        assert service_failure(SourceLoadError("x", loader="SSM", cause=err)) is err

    def test_other(self) -> None:
        assert service_failure(SourceLoadError("x", loader="SSM")) is None
        assert service_failure(RuntimeError()) is None


class TestLocalFallbackPolicy:
    def test_no_fallback_on_success(self) -> None:
        manager = ConfigManager(loaders=[StaticLoader({"A": "1"}, name="EnvironmentLoader")])
        policy = LocalFallbackPolicy(manager)
        asyncio.run(policy.execute())
        assert policy.manager is manager
        assert policy.fell_back is False

    def test_falls_back_to_local_loaders(self) -> None:
        policy = LocalFallbackPolicy(_manager(_denied()))
        result = asyncio.run(policy.execute())
        assert policy.fell_back is True
        assert policy.manager.get_all() == {"PORT": "3000"}
        assert [s.loader for s in result.sources] == ["EnvironmentLoader"]
        assert [l.name for l in policy.manager.loaders] == ["EnvironmentLoader"]

    def test_non_service_errors_propagate(self) -> None:
        policy = LocalFallbackPolicy(_manager(RuntimeError("bug")))
        with pytest.raises(SourceLoadError):
            asyncio.run(policy.execute())
        assert policy.fell_back is False

    def test_validation_errors_propagate(self) -> None:
        failing = FailingLoader(ValidationError("bad"), name="EnvironmentLoader")
        policy = LocalFallbackPolicy(ConfigManager(loaders=[failing]))
        with pytest.raises(SourceLoadError):
            asyncio.run(policy.execute())
