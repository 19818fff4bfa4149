"""Precedence – ordering loaders and merging their mappings."""
from __future__ import annotations

import dataclasses
from typing import Any, Iterable, Literal, Mapping, Sequence, Tuple, Union

from mp_config.loaders.port import ConfigLoader
from mp_config.observability import get_logger

logger = get_logger(__name__)

NamedStrategy = Literal["aws-first", "local-first"]

# Ascending: later entries load later and win.
AWS_FIRST: tuple[str, ...] = (
    "EnvironmentLoader",
    "EnvFileLoader",
    "S3Loader",
    "SecretsManagerLoader",
    "SSMParameterStoreLoader",
)
LOCAL_FIRST: tuple[str, ...] = tuple(reversed(AWS_FIRST))

_STRATEGIES: dict[str, tuple[str, ...]] = {
    "aws-first": AWS_FIRST,
    "local-first": LOCAL_FIRST,
}

UNKNOWN_NAMED_PRIORITY = -1
UNKNOWN_EXPLICIT_PRIORITY = 0


@dataclasses.dataclass(frozen=True)
class LoaderPrecedence:
    loader: str
    priority: int


PrecedenceSpec = Union[NamedStrategy, Sequence[Union[LoaderPrecedence, Tuple[str, int]]]]


@dataclasses.dataclass(frozen=True)
class MergeResult:
    """Merged mapping plus bookkeeping.

    ``origins`` maps every key to the loader that set it last and
    ``overrides`` lists ``(key, previous_loader, winning_loader)`` triples in
    the order they happened.
    """

    config: dict[str, Any]
    origins: dict[str, str]
    overrides: tuple[tuple[str, str, str], ...] = ()

    @property
    def override_count(self) -> int:
        return len(self.overrides)


class PrecedenceResolver:
    """Turn a precedence strategy or priority list into a loader order and merge loader output.

    Lower priority loads first; anything loaded later overwrites earlier
    keys. Lookups use the loader's ``name`` first, then its ``kind``.
    """

    def __init__(self, spec: PrecedenceSpec = "aws-first") -> None:
        if isinstance(spec, str):
            if spec not in _STRATEGIES:
                raise ValueError(
                    f"Unknown precedence strategy {spec!r}; expected one of {sorted(_STRATEGIES)}"
                )
            self._priorities = {name: i for i, name in enumerate(_STRATEGIES[spec])}
            self._default = UNKNOWN_NAMED_PRIORITY
            self._explicit = False
        else:
            self._priorities = {}
            for entry in spec:
                if isinstance(entry, LoaderPrecedence):
                    self._priorities[entry.loader] = entry.priority
                else:
                    name, priority = entry
                    self._priorities[name] = int(priority)
            self._default = UNKNOWN_EXPLICIT_PRIORITY
            self._explicit = True
        self.spec = spec

    @property
    def priorities(self) -> dict[str, int]:
        return dict(self._priorities)

    def _lookup(self, loader: ConfigLoader) -> int | None:
        for candidate in (loader.name, loader.kind):
            if candidate in self._priorities:
                return self._priorities[candidate]
        return None

    def priority(self, loader: ConfigLoader) -> int:
        found = self._lookup(loader)
        return self._default if found is None else found

    def order(self, loaders: Iterable[ConfigLoader]) -> list[ConfigLoader]:
        """Stable ascending sort by priority."""
        items = list(loaders)
        if self._explicit:
            for loader in items:
                if self._lookup(loader) is None:
                    logger.warning(
                        "config.precedence.unlisted_loader",
                        loader=loader.name,
                        priority=self._default,
                    )
        return sorted(items, key=self.priority)

    @staticmethod
    def merge(pairs: Iterable[tuple[str, Mapping[str, Any]]]) -> MergeResult:
        """Shallow-merge ``(loader_name, mapping)`` pairs in the given order."""
        config: dict[str, Any] = {}
        origins: dict[str, str] = {}
        overrides: list[tuple[str, str, str]] = []
        for name, mapping in pairs:
            for key, value in mapping.items():
                if key in origins:
                    overrides.append((key, origins[key], name))
                config[key] = value
                origins[key] = name
        return MergeResult(config=config, origins=origins, overrides=tuple(overrides))


__all__ = [
    "AWS_FIRST",
    "LOCAL_FIRST",
    "LoaderPrecedence",
    "MergeResult",
    "NamedStrategy",
    "PrecedenceResolver",
    "PrecedenceSpec",
]
