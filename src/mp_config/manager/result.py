"""Manager – LoadResult and ConfigSnapshot value objects."""
from __future__ import annotations

import copy
import dataclasses
import json
from datetime import datetime
from typing import Any, Iterator, Mapping

_MISSING: Any = object()


@dataclasses.dataclass(frozen=True)
class SourceInfo:
    """What one loader contributed to a load."""

    loader: str
    keys_loaded: tuple[str, ...]
    duration_ms: float = 0.0


@dataclasses.dataclass(frozen=True)
class LoadResult:
    config: Mapping[str, Any]
    sources: tuple[SourceInfo, ...]
    loaded_at: datetime
    origins: Mapping[str, str] = dataclasses.field(default_factory=dict)

    @property
    def total_keys_loaded(self) -> int:
        return sum(len(s.keys_loaded) for s in self.sources)

    @property
    def override_count(self) -> int:
        return self.total_keys_loaded - len(self.config)


class ConfigSnapshot:
    """Immutable view over one validated configuration.

    The snapshot owns a private deep copy of its data; every accessor that
    hands out a nested structure returns a copy as well.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any]) -> None:
        self._data: dict[str, Any] = copy.deepcopy(dict(data))

    def get(self, key: str, default: Any = None) -> Any:
        value = self._data.get(key, _MISSING)
        if value is _MISSING:
            return default
        return copy.deepcopy(value)

    def get_all(self) -> dict[str, Any]:
        return copy.deepcopy(self._data)

    def keys(self) -> list[str]:
        return list(self._data)

    def to_json(self) -> str:
        return json.dumps(self._data, ensure_ascii=False)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._data))

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConfigSnapshot):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ConfigSnapshot(keys={self.keys()!r})"


__all__ = ["ConfigSnapshot", "LoadResult", "SourceInfo"]
