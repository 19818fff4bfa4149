"""Loaders – ConfigLoader port."""
from __future__ import annotations

import abc
from typing import Any, ClassVar


class ConfigLoader(abc.ABC):
    """Port: fetch a flat (or near-flat) key/value mapping from one source.

    Loaders never merge or validate; that is the manager's job.

    ``kind`` is the canonical identifier the named precedence strategies
    know about, ``name`` is the diagnostic identity and may embed the
    resolved target. ``network_backed`` loaders are fetched through the
    retry layer.
    """

    kind: ClassVar[str] = "ConfigLoader"
    network_backed: ClassVar[bool] = False

    @property
    def name(self) -> str:
        return self.kind

    @abc.abstractmethod
    async def is_available(self) -> bool: ...

    @abc.abstractmethod
    async def load(self) -> dict[str, Any]: ...

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r}>"


__all__ = ["ConfigLoader"]
