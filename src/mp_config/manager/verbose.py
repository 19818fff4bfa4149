"""Manager – load diagnostics (lifecycle events, per-key lines, masking)."""
from __future__ import annotations

import dataclasses
from typing import Any, Mapping

from mp_config.observability import DEFAULT_SENSITIVE_KEYS, is_sensitive_key, mask_value


@dataclasses.dataclass(frozen=True)
class VerboseOptions:
    log_keys: bool = True
    log_values: bool = False
    log_overrides: bool = True
    log_timing: bool = True
    mask_values: bool = True
    sensitive_keys: tuple[str, ...] = DEFAULT_SENSITIVE_KEYS

    @classmethod
    def coerce(cls, verbose: bool | VerboseOptions | Mapping[str, Any] | None) -> VerboseOptions | None:
        """``True`` -> defaults, ``False``/``None`` -> off, a mapping -> overrides."""
        if verbose is None or verbose is False:
            return None
        if verbose is True:
            return cls()
        if isinstance(verbose, VerboseOptions):
            return verbose
        options = dict(verbose)
        if "sensitive_keys" in options:
            options["sensitive_keys"] = tuple(options["sensitive_keys"])
        return cls(**options)


class LoadReporter:
    """Emits the structured events of one ``ConfigManager.load()``.

    Lifecycle events go out when logging is enabled or verbose options are
    set; per-loader, per-key and timing events need verbose options.
    """

    def __init__(self, logger: Any, enabled: bool, verbose: VerboseOptions | None) -> None:
        self._logger = logger
        self._verbose = verbose
        self._enabled = enabled or verbose is not None

    @property
    def enabled(self) -> bool:
        return self._enabled

    def display_value(self, key: str, value: Any) -> str | None:
        v = self._verbose
        if v is None or not v.log_values:
            return None
        if v.mask_values or is_sensitive_key(key, v.sensitive_keys):
            return mask_value(value)
        return str(value)

    def started(self, loaders: list[str]) -> None:
        if self._enabled:
            self._logger.info("config.load.started", loaders=loaders)

    def skipped(self, loader: str, reason: str) -> None:
        if self._enabled:
            self._logger.info("config.loader.skipped", loader=loader, reason=reason)

    def loaded(
        self,
        loader: str,
        mapping: Mapping[str, Any],
        duration_ms: float,
        origins: Mapping[str, str],
    ) -> None:
        """Log one loader's contribution; *origins* is the state before it merged."""
        v = self._verbose
        if v is None:
            return
        if v.log_timing:
            self._logger.info(
                "config.loader.loaded",
                loader=loader,
                keys=len(mapping),
                duration_ms=round(duration_ms, 3),
            )
        for key, value in mapping.items():
            previous = origins.get(key)
            if v.log_keys:
                fields: dict[str, Any] = {"loader": loader, "key": key}
                shown = self.display_value(key, value)
                if shown is not None:
                    fields["value"] = shown
                self._logger.debug("config.key.loaded", **fields)
            if previous is not None and v.log_overrides:
                self._logger.debug("config.key.override", loader=loader, key=key, overrides=previous)

    def completed(self, total_keys: int, override_count: int, duration_ms: float) -> None:
        if not self._enabled:
            return
        fields: dict[str, Any] = {"total_keys": total_keys, "overrides": override_count}
        if self._verbose is not None and self._verbose.log_timing:
            fields["duration_ms"] = round(duration_ms, 3)
        self._logger.info("config.load.completed", **fields)


__all__ = ["LoadReporter", "VerboseOptions"]
