"""Transforms – string-to-type coercion for merged configuration."""
from __future__ import annotations

import json
import re
from typing import Any, Mapping

_INT = re.compile(r"\d+")
_FLOAT = re.compile(r"\d*\.\d+")


def coerce_value(value: Any) -> Any:
    """Coerce one value.

    ``"true"``/``"false"`` (any case) become bools, unsigned digit strings
    become ints or floats, and strings wrapped in ``{}``/``[]`` are JSON
    decoded when they parse. Nested mappings are coerced recursively. Anything
    else is returned unchanged.
    """
    if isinstance(value, Mapping):
        return coerce_mapping(value)
    if not isinstance(value, str):
        return value

    lowered = value.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    if _INT.fullmatch(value):
        return int(value)
    if _FLOAT.fullmatch(value):
        return float(value)
    if (value.startswith("{") and value.endswith("}")) or (
        value.startswith("[") and value.endswith("]")
    ):
        try:
            return json.loads(value)
        except ValueError:
            return value
    return value


def coerce_mapping(mapping: Mapping[str, Any]) -> dict[str, Any]:
    """Return a new dict with :func:`coerce_value` applied to every value."""
    return {key: coerce_value(value) for key, value in mapping.items()}


__all__ = ["coerce_mapping", "coerce_value"]
