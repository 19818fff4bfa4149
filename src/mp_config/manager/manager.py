"""Manager – ConfigManager, the configuration loading engine."""
from __future__ import annotations

import json
import time
from datetime import datetime, timezone
from typing import Any, Callable, Iterable, Mapping

from mp_config.errors import ConfigurationError, MissingKeysError, ProbeTimeoutError, SourceLoadError
from mp_config.loaders.port import ConfigLoader
from mp_config.manager.result import ConfigSnapshot, LoadResult, SourceInfo
from mp_config.manager.verbose import LoadReporter, VerboseOptions
from mp_config.observability import get_logger
from mp_config.precedence import PrecedenceResolver, PrecedenceSpec
from mp_config.resilience.retry import RetryPolicy
from mp_config.resilience.timeouts import TimeoutPolicy
from mp_config.validation import Schema, validate_config

DESERIALIZE_SOURCE = "deserialize"

_NOT_LOADED = "Configuration not loaded. Call load() first."


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ConfigManager:
    """Load, merge and validate configuration from a set of loaders.

    Loaders run one after the other in precedence order (lowest priority
    first, so the last loader wins on a shared key). Network-backed loaders
    are fetched through *retry_policy*; every availability probe is bounded
    by *availability_timeout* seconds and a probe that times out counts as
    unavailable.

    A failing ``load()`` raises and leaves the previously installed snapshot
    (if any) untouched.

    Parameters
    ----------
    loaders:
        The configuration sources.
    schema:
        A pydantic model, ``TypeAdapter`` or :class:`SchemaValidator` the
        merged mapping must satisfy.
    precedence:
        ``"aws-first"``, ``"local-first"`` or an explicit list of
        ``LoaderPrecedence`` / ``(name, priority)`` entries.
    validate_on_load:
        Run *schema* during ``load()``.
    enable_logging:
        Emit lifecycle events (started, skipped, completed).
    verbose:
        ``True``, a :class:`VerboseOptions` or a mapping of its fields; adds
        per-loader timing and per-key events.
    logger:
        A structlog-style logger; defaults to this module's logger.
    """

    def __init__(
        self,
        loaders: Iterable[ConfigLoader] = (),
        schema: Schema | None = None,
        precedence: PrecedenceSpec = "aws-first",
        validate_on_load: bool = True,
        enable_logging: bool = False,
        verbose: bool | VerboseOptions | Mapping[str, Any] = False,
        logger: Any | None = None,
        retry_policy: RetryPolicy | None = None,
        availability_timeout: float = 5.0,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._loaders: tuple[ConfigLoader, ...] = tuple(loaders)
        self._options: dict[str, Any] = {
            "schema": schema,
            "precedence": precedence,
            "validate_on_load": validate_on_load,
            "enable_logging": enable_logging,
            "verbose": verbose,
            "logger": logger,
            "retry_policy": retry_policy,
            "availability_timeout": availability_timeout,
            "clock": clock,
        }
        self._schema = schema
        self._validate_on_load = validate_on_load
        self._resolver = PrecedenceResolver(precedence)
        self._logger = logger or get_logger(__name__)
        self._verbose = VerboseOptions.coerce(verbose)
        self._reporter = LoadReporter(self._logger, enable_logging, self._verbose)
        self._retry = retry_policy or RetryPolicy()
        self._probe_timeout = TimeoutPolicy(availability_timeout)
        self._clock = clock or _utcnow
        self._state: tuple[LoadResult, ConfigSnapshot] | None = None

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def loaders(self) -> tuple[ConfigLoader, ...]:
        return self._loaders

    @property
    def resolver(self) -> PrecedenceResolver:
        return self._resolver

    @property
    def verbose_options(self) -> VerboseOptions | None:
        return self._verbose

    @property
    def is_loaded(self) -> bool:
        return self._state is not None

    @property
    def load_result(self) -> LoadResult | None:
        return None if self._state is None else self._state[0]

    @property
    def snapshot(self) -> ConfigSnapshot:
        if self._state is None:
            raise ConfigurationError(_NOT_LOADED)
        return self._state[1]

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    async def load(self) -> LoadResult:
        """Run every available loader, merge, validate and install the result."""
        started = time.perf_counter()
        ordered = self._resolver.order(self._loaders)
        self._reporter.started([loader.name for loader in ordered])

        pairs: list[tuple[str, dict[str, Any]]] = []
        sources: list[SourceInfo] = []
        seen: dict[str, str] = {}
        for loader in ordered:
            name = loader.name
            loader_started = time.perf_counter()
            if not await self._probe(loader, name):
                continue
            mapping = await self._fetch(loader, name)
            duration_ms = (time.perf_counter() - loader_started) * 1000
            sources.append(SourceInfo(loader=name, keys_loaded=tuple(mapping), duration_ms=duration_ms))
            self._reporter.loaded(name, mapping, duration_ms, seen)
            seen.update(dict.fromkeys(mapping, name))
            pairs.append((name, mapping))

        merged = self._resolver.merge(pairs)
        self._reporter.completed(
            len(merged.config),
            merged.override_count,
            (time.perf_counter() - started) * 1000,
        )

        config = merged.config
        if self._schema is not None and self._validate_on_load:
            config = validate_config(self._schema, config)

        snapshot = ConfigSnapshot(config)
        result = LoadResult(
            config=snapshot.get_all(),
            sources=tuple(sources),
            loaded_at=self._clock(),
            origins=merged.origins,
        )
        self._state = (result, snapshot)
        return result

    async def _probe(self, loader: ConfigLoader, name: str) -> bool:
        try:
            available = await self._probe_timeout.execute(loader.is_available)
        except ProbeTimeoutError as exc:
            self._logger.warning(
                "config.loader.probe_timeout",
                loader=name,
                timeout_s=exc.timeout_seconds,
            )
            self._reporter.skipped(name, "timeout")
            return False
        except Exception as exc:
            raise SourceLoadError(
                f"Failed to check availability of {name}: {exc}", loader=name, cause=exc
            ) from exc
        if not available:
            self._reporter.skipped(name, "unavailable")
            return False
        return True

    async def _fetch(self, loader: ConfigLoader, name: str) -> dict[str, Any]:
        try:
            if loader.network_backed:
                mapping = await self._retry.execute_async(loader.load, operation=name)
            else:
                mapping = await loader.load()
        except SourceLoadError as exc:
            if exc.loader == name:
                raise
            raise SourceLoadError(
                f"Failed to load configuration from {name}: {exc}", loader=name, cause=exc
            ) from exc
        except Exception as exc:
            raise SourceLoadError(
                f"Failed to load configuration from {name}: {exc}", loader=name, cause=exc
            ) from exc
        if not isinstance(mapping, Mapping):
            raise SourceLoadError(
                f"Loader {name} returned {type(mapping).__name__}, expected a mapping",
                loader=name,
            )
        return dict(mapping)

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------

    def get(self, key: str, default: Any = None) -> Any:
        return self.snapshot.get(key, default)

    def get_all(self) -> dict[str, Any]:
        return self.snapshot.get_all()

    def require(self, *keys: str) -> dict[str, Any]:
        """Return the values of *keys*, raising :class:`MissingKeysError` if any is absent."""
        snapshot = self.snapshot
        missing = [key for key in keys if key not in snapshot]
        if missing:
            raise MissingKeysError(missing)
        return {key: snapshot.get(key) for key in keys}

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------

    def serialize(self) -> str:
        return self.snapshot.to_json()

    @classmethod
    def deserialize(cls, text: str, **options: Any) -> ConfigManager:
        """Build a loaded manager from :meth:`serialize` output.

        No loader is touched. When a ``schema`` option is given the data is
        validated against it first.
        """
        try:
            data = json.loads(text)
        except ValueError as exc:
            raise ConfigurationError(
                f"Cannot deserialize configuration: {exc}", cause=exc
            ) from exc
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Cannot deserialize configuration: expected a JSON object, got {type(data).__name__}"
            )

        manager = cls(**options)
        if manager._schema is not None:
            data = validate_config(manager._schema, data, context="deserialize")
        manager._install(data, DESERIALIZE_SOURCE)
        return manager

    def _install(self, data: Mapping[str, Any], source: str) -> None:
        snapshot = ConfigSnapshot(data)
        result = LoadResult(
            config=snapshot.get_all(),
            sources=(SourceInfo(loader=source, keys_loaded=tuple(snapshot.keys())),),
            loaded_at=self._clock(),
            origins=dict.fromkeys(snapshot.keys(), source),
        )
        self._state = (result, snapshot)

    def derive(self, loaders: Iterable[ConfigLoader]) -> ConfigManager:
        """A fresh, unloaded manager with the same options and other loaders."""
        return type(self)(loaders=loaders, **self._options)

    def __repr__(self) -> str:
        return (
            f"<ConfigManager loaders={[loader.name for loader in self._loaders]!r} "
            f"loaded={self.is_loaded}>"
        )


__all__ = ["DESERIALIZE_SOURCE", "ConfigManager"]
