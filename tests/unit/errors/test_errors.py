"""Unit tests for the configuration error hierarchy."""
from __future__ import annotations

import json

import pytest

from mp_config.errors import (
    BaseError,
    ConfigurationError,
    MissingKeysError,
    ProbeTimeoutError,
    SourceLoadError,
    SourceServiceError,
    ValidationError,
)


class TestHierarchy:
    @pytest.mark.parametrize(
        "exc",
        [
            ValidationError("bad"),
            SourceServiceError("down", service="SSM", operation="GetParametersByPath"),
            SourceLoadError("broken", loader="S3Loader"),
            MissingKeysError(["PORT"]),
        ],
    )
    def test_all_are_configuration_errors(self, exc: BaseError) -> None:
        assert isinstance(exc, ConfigurationError)
        assert isinstance(exc, BaseError)
        assert isinstance(exc, Exception)

    def test_default_codes(self) -> None:
        assert ConfigurationError("x").code == "configuration_error"
        assert ValidationError("x").code == "validation_error"
        assert SourceLoadError("x", loader="l").code == "source_load_error"
        assert MissingKeysError(["A"]).code == "missing_keys"

    def test_timeout_error_sits_beside_configuration_error(self) -> None:
        exc = ProbeTimeoutError(0.5)
        assert isinstance(exc, BaseError)
        assert not isinstance(exc, ConfigurationError)
        assert exc.code == "probe_timeout"
        assert exc.to_dict()["timeout_seconds"] == 0.5
        assert str(exc) == "Operation timed out after 0.5s"

    def test_custom_code_overrides_default(self) -> None:
        assert ConfigurationError("x", code="not_loaded").code == "not_loaded"


class TestBaseError:
    def test_str_is_message(self) -> None:
        assert str(ConfigurationError("Configuration not loaded")) == "Configuration not loaded"

    def test_cause_is_chained(self) -> None:
        root = RuntimeError("socket closed")
        exc = SourceLoadError("failed", loader="S3Loader", cause=root)
        assert exc.cause is root
        assert exc.__cause__ is root

    def test_to_dict_includes_kind_fields(self) -> None:
        exc = SourceServiceError(
            "denied",
            service="SecretsManager",
            operation="GetSecretValue",
            error_code="AccessDeniedException",
        )
        payload = exc.to_dict()
        assert payload["code"] == "source_service_error"
        assert payload["message"] == "denied"
        assert payload["service"] == "SecretsManager"
        assert payload["operation"] == "GetSecretValue"
        assert payload["error_code"] == "AccessDeniedException"
        assert "cause" not in payload

    def test_to_dict_includes_detail_and_cause(self) -> None:
        exc = ConfigurationError("x", detail={"app_env": "qa"}, cause=ValueError("v"))
        payload = exc.to_dict()
        assert payload["detail"] == {"app_env": "qa"}
        assert "ValueError" in payload["cause"]

    def test_to_json_is_valid_json(self) -> None:
        exc = MissingKeysError(["DB_HOST", "DB_PORT"])
        assert json.loads(exc.to_json())["missing_keys"] == ["DB_HOST", "DB_PORT"]


class TestValidationError:
    def test_fields_lists_error_fields(self) -> None:
        exc = ValidationError(
            "invalid",
            errors=[
                {"field": "PORT", "message": "not an int", "type": "int_parsing"},
                {"field": "db.host", "message": "required", "type": "missing"},
            ],
        )
        assert exc.fields == ["PORT", "db.host"]
        assert exc.to_dict()["errors"][0]["type"] == "int_parsing"

    def test_errors_default_empty(self) -> None:
        assert ValidationError("x").errors == []


class TestMissingKeysError:
    def test_default_message_lists_keys(self) -> None:
        exc = MissingKeysError(["A", "B"])
        assert exc.missing_keys == ["A", "B"]
        assert "A, B" in exc.message

    def test_custom_message(self) -> None:
        assert MissingKeysError(["A"], "need A").message == "need A"


class TestSourceServiceError:
    def test_error_code_optional(self) -> None:
        exc = SourceServiceError("x", service="S3", operation="GetObject")
        assert exc.error_code is None
        assert "error_code" not in exc.to_dict()
