"""Resilience – LocalFallbackPolicy: reload from local sources when AWS fails."""
from __future__ import annotations

from typing import TYPE_CHECKING

from mp_config.errors import SourceLoadError, SourceServiceError
from mp_config.observability import get_logger

if TYPE_CHECKING:
    from mp_config.manager import ConfigManager, LoadResult

logger = get_logger(__name__)


def service_failure(exc: BaseException) -> SourceServiceError | None:
    """The :class:`SourceServiceError` behind *exc*, directly or as a load-error cause."""
    if isinstance(exc, SourceServiceError):
        return exc
    if isinstance(exc, SourceLoadError) and isinstance(exc.cause, SourceServiceError):
        return exc.cause
    return None


class LocalFallbackPolicy:
    """Loads *manager*; on a remote service failure, retries with local loaders only.

    The fallback manager comes from ``manager.derive()`` with every
    non-network loader of the wrapped manager. Errors that are not service failures,
    and any failure of the fallback load itself, propagate.
    """

    def __init__(self, manager: ConfigManager) -> None:
        self._manager = manager
        self._active = manager
        self._fell_back = False

    @property
    def manager(self) -> ConfigManager:
        """The manager whose snapshot is current (the fallback one after a fallback)."""
        return self._active

    @property
    def fell_back(self) -> bool:
        return self._fell_back

    async def execute(self) -> LoadResult:
        try:
            result = await self._manager.load()
        except (SourceServiceError, SourceLoadError) as exc:
            failure = service_failure(exc)
            if failure is None:
                raise
            local = [loader for loader in self._manager.loaders if not loader.network_backed]
            logger.warning(
                "config.fallback.local",
                service=failure.service,
                operation=failure.operation,
                error_code=failure.error_code,
                loaders=[loader.name for loader in local],
            )
            fallback = self._manager.derive(local)
            result = await fallback.load()
            self._active = fallback
            self._fell_back = True
            return result
        self._active = self._manager
        self._fell_back = False
        return result


__all__ = ["LocalFallbackPolicy", "service_failure"]
