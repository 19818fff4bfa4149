"""Validation – pydantic-backed schema checks."""
from mp_config.validation.schema import (
    Schema,
    SchemaValidator,
    ValidationOutcome,
    format_errors,
    safe_validate,
    validate_config,
)

__all__ = [
    "Schema",
    "SchemaValidator",
    "ValidationOutcome",
    "format_errors",
    "safe_validate",
    "validate_config",
]
