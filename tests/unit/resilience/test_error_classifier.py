"""Unit tests for error classification."""
from __future__ import annotations

import pytest

from mp_config.errors import SourceLoadError, SourceServiceError
from mp_config.resilience.retry import ErrorCategory, classify_error, error_name, is_retryable
from mp_config.testing import client_error


class TestErrorName:
    def test_service_error_code(self) -> None:
        exc = SourceServiceError("x", service="S3", operation="GetObject", error_code="SlowDown")
        assert error_name(exc) == "SlowDown"

    def test_client_error_code(self) -> None:
        assert error_name(client_error("ParameterNotFound")) == "ParameterNotFound"

    def test_class_name_fallback(self) -> None:
        assert error_name(TimeoutError()) == "TimeoutError"
        assert error_name(SourceServiceError("x", service="S3", operation="GetObject")) == "SourceServiceError"


class TestClassify:
    @pytest.mark.parametrize(
        "code,category",
        [
            ("ThrottlingException", ErrorCategory.RATE_LIMITED),
            ("TooManyRequestsException", ErrorCategory.RATE_LIMITED),
            ("SlowDown", ErrorCategory.RATE_LIMITED),
            ("RequestTimeout", ErrorCategory.NETWORK),
            ("ServiceUnavailableException", ErrorCategory.SERVICE_UNAVAILABLE),
            ("InternalServiceError", ErrorCategory.SERVICE_UNAVAILABLE),
            ("AccessDeniedException", ErrorCategory.PERMISSION),
            ("AccessDenied", ErrorCategory.PERMISSION),
            ("ResourceNotFoundException", ErrorCategory.NOT_FOUND),
            ("NoSuchKey", ErrorCategory.NOT_FOUND),
            ("BrandNewError", ErrorCategory.UNKNOWN),
        ],
    )
    def test_client_error_codes(self, code: str, category: ErrorCategory) -> None:
        assert classify_error(client_error(code)) is category

    def test_network_exceptions_by_class_name(self) -> None:
        assert classify_error(TimeoutError()) is ErrorCategory.NETWORK
        assert classify_error(ConnectionError()) is ErrorCategory.NETWORK

    def test_source_load_error_is_configuration(self) -> None:
        assert classify_error(SourceLoadError("no mapping", loader="SSM")) is ErrorCategory.CONFIGURATION


class TestIsRetryable:
    @pytest.mark.parametrize("code", ["ThrottlingException", "RequestTimeout", "ServiceUnavailable"])
    def test_transient(self, code: str) -> None:
        assert is_retryable(client_error(code))

    @pytest.mark.parametrize("code", ["AccessDeniedException", "ParameterNotFound", "Mystery"])
    def test_not_transient(self, code: str) -> None:
        assert not is_retryable(client_error(code))

    def test_unknown_exception_fails_closed(self) -> None:
        assert not is_retryable(KeyError("x"))

    def test_category_retryable_flags(self) -> None:
        assert {c for c in ErrorCategory if c.retryable} == {
            ErrorCategory.RATE_LIMITED,
            ErrorCategory.NETWORK,
            ErrorCategory.SERVICE_UNAVAILABLE,
        }
