"""Validation – schema checks for merged configuration via pydantic."""
from __future__ import annotations

import dataclasses
from typing import Any, Mapping, Protocol, Type, Union, runtime_checkable

import pydantic

from mp_config.errors import ValidationError


@runtime_checkable
class SchemaValidator(Protocol):
    """Anything that turns a raw mapping into a validated mapping or raises."""

    def validate(self, data: Mapping[str, Any]) -> Mapping[str, Any]: ...


Schema = Union[Type[pydantic.BaseModel], pydantic.TypeAdapter, SchemaValidator]


@dataclasses.dataclass(frozen=True)
class ValidationOutcome:
    success: bool
    data: dict[str, Any] | None = None
    errors: tuple[dict[str, Any], ...] = ()

    @property
    def error_messages(self) -> list[str]:
        return [f"{e['field']}: {e['message']}" for e in self.errors]


def _field_errors(exc: pydantic.ValidationError) -> list[dict[str, Any]]:
    return [
        {
            "field": ".".join(str(part) for part in err["loc"]) or "<root>",
            "message": err["msg"],
            "type": err["type"],
        }
        for err in exc.errors()
    ]


def format_errors(errors: list[dict[str, Any]], context: str | None = None) -> str:
    """One header line, then one ``  - field: message`` line per error."""
    header = "Configuration validation failed"
    if context:
        header += f" for {context}"
    lines = [f"{header}:"]
    lines.extend(f"  - {e['field']}: {e['message']}" for e in errors)
    return "\n".join(lines)


def _run(schema: Any, data: Mapping[str, Any]) -> Any:
    if isinstance(schema, type) and issubclass(schema, pydantic.BaseModel):
        return schema.model_validate(dict(data)).model_dump(mode="json")
    if isinstance(schema, pydantic.TypeAdapter):
        return schema.dump_python(schema.validate_python(dict(data)), mode="json")
    if isinstance(schema, SchemaValidator):
        return schema.validate(dict(data))
    raise TypeError(
        f"Unsupported schema type {type(schema).__name__}; expected a pydantic model, "
        "a TypeAdapter or an object with a validate() method"
    )


def validate_config(
    schema: Schema,
    data: Mapping[str, Any],
    context: str | None = None,
) -> dict[str, Any]:
    """Validate *data* against *schema* and return the validated mapping.

    Raises
    ------
    ValidationError
        With one ``{"field", "message", "type"}`` entry per violation.
    """
    try:
        result = _run(schema, data)
    except pydantic.ValidationError as exc:
        errors = _field_errors(exc)
        raise ValidationError(
            format_errors(errors, context),
            errors=errors,
            detail={"context": context} if context else None,
            cause=exc,
        ) from exc
    if not isinstance(result, Mapping):
        errors = [
            {
                "field": "<root>",
                "message": f"schema produced {type(result).__name__}, expected a mapping",
                "type": "mapping_type",
            }
        ]
        raise ValidationError(format_errors(errors, context), errors=errors)
    return dict(result)


def safe_validate(schema: Schema, data: Mapping[str, Any]) -> ValidationOutcome:
    """Like :func:`validate_config` but reports failure instead of raising."""
    try:
        return ValidationOutcome(success=True, data=validate_config(schema, data))
    except ValidationError as exc:
        return ValidationOutcome(success=False, errors=tuple(exc.errors))


__all__ = [
    "Schema",
    "SchemaValidator",
    "ValidationOutcome",
    "format_errors",
    "safe_validate",
    "validate_config",
]
