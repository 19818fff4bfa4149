"""Loaders – EnvFileLoader for local ``.env`` files."""
from __future__ import annotations

import asyncio
import os
import pathlib
from typing import Any, Sequence

from mp_config.env_file import EnvFileParser
from mp_config.errors import SourceLoadError
from mp_config.loaders.port import ConfigLoader

DEFAULT_PATHS: tuple[str, ...] = (".env", ".env.local")


class EnvFileLoader(ConfigLoader):
    """Read ``KEY=VALUE`` files in order.

    Missing files are skipped silently; a file that exists but cannot be
    read or decoded raises :class:`SourceLoadError`. With ``override=True``
    later files win, otherwise the first file defining a key wins.
    """

    kind = "EnvFileLoader"

    def __init__(
        self,
        paths: Sequence[str | os.PathLike[str]] | None = None,
        encoding: str = "utf-8",
        override: bool = True,
    ) -> None:
        self._paths = tuple(paths) if paths is not None else DEFAULT_PATHS
        self._encoding = encoding
        self._override = override

    @property
    def paths(self) -> tuple[pathlib.Path, ...]:
        return tuple(self._resolve(p) for p in self._paths)

    async def is_available(self) -> bool:
        return any(self._readable(p) for p in self.paths)

    async def load(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for path in self.paths:
            if not path.exists():
                continue
            try:
                content = await asyncio.to_thread(path.read_text, encoding=self._encoding)
            except (OSError, UnicodeDecodeError, LookupError) as exc:
                raise SourceLoadError(
                    f"Failed to read env file: {path}", loader=self.name, cause=exc
                ) from exc

            parsed = EnvFileParser.parse(content)
            if self._override:
                result.update(parsed)
            else:
                for key, value in parsed.items():
                    result.setdefault(key, value)
        return result

    @staticmethod
    def _resolve(path: str | os.PathLike[str]) -> pathlib.Path:
        p = pathlib.Path(path)
        return p if p.is_absolute() else pathlib.Path.cwd() / p

    @staticmethod
    def _readable(path: pathlib.Path) -> bool:
        return path.is_file() and os.access(path, os.R_OK)


__all__ = ["DEFAULT_PATHS", "EnvFileLoader"]
