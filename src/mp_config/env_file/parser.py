"""Env file – ``KEY=VALUE`` parser in the AWS ECS environment-file format.

Format rules:

* ``#`` comment lines (after optional leading whitespace) and blank lines
  are ignored
* the first ``=`` separates key and value, lines without ``=`` are ignored
* keys must match ``^[A-Za-z_][A-Za-z0-9_]*$``
* values are literal: no quote stripping, escapes or interpolation
* lines longer than 32 KiB are ignored

See https://docs.aws.amazon.com/AmazonECS/latest/developerguide/use-environment-file.html
"""
from __future__ import annotations

import re
from typing import Mapping

MAX_LINE_LENGTH = 32 * 1024

_VARIABLE_NAME = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_LINE_BREAK = re.compile(r"\r?\n")


class EnvFileParser:
    """Stateless parser/serializer for env-file content."""

    @staticmethod
    def is_valid_variable_name(name: str) -> bool:
        return bool(name) and _VARIABLE_NAME.fullmatch(name) is not None

    @classmethod
    def parse(cls, content: str) -> dict[str, str]:
        result: dict[str, str] = {}
        if not content:
            return result

        for line in _LINE_BREAK.split(content):
            if len(line) > MAX_LINE_LENGTH:
                continue
            if not line.strip() or line.lstrip().startswith("#"):
                continue

            key, sep, value = line.partition("=")
            if not sep or not cls.is_valid_variable_name(key):
                continue
            result[key] = value

        return result

    @classmethod
    def serialize(cls, config: Mapping[str, object]) -> str:
        """Inverse of :meth:`parse`; entries with invalid keys are dropped."""
        return "\n".join(
            f"{key}={value}"
            for key, value in config.items()
            if cls.is_valid_variable_name(key)
        )


__all__ = ["MAX_LINE_LENGTH", "EnvFileParser"]
