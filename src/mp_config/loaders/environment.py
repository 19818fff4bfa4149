"""Loaders – EnvironmentLoader."""
from __future__ import annotations

import os
from typing import Any, Iterable, Mapping

from mp_config.loaders.port import ConfigLoader


class EnvironmentLoader(ConfigLoader):
    """Load configuration from the process environment.

    With a *prefix*, only variables starting with it are kept and the prefix
    is stripped (``APP_PORT`` -> ``PORT``); a variable equal to the bare
    prefix is dropped. *exclude* is matched against the original names.
    """

    kind = "EnvironmentLoader"

    def __init__(
        self,
        prefix: str | None = None,
        exclude: Iterable[str] = (),
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self._prefix = prefix or None
        self._exclude = frozenset(exclude)
        self._environ = environ

    async def is_available(self) -> bool:
        return True

    async def load(self) -> dict[str, Any]:
        environ = os.environ if self._environ is None else self._environ
        result: dict[str, Any] = {}
        for key, value in environ.items():
            if key in self._exclude:
                continue
            if self._prefix is None:
                result[key] = value
                continue
            if not key.startswith(self._prefix):
                continue
            stripped = key[len(self._prefix):]
            if stripped:
                result[stripped] = value
        return result


__all__ = ["EnvironmentLoader"]
