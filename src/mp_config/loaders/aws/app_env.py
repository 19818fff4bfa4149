"""AWS loaders – runtime environment and environment-aware path resolution."""
from __future__ import annotations

import os
from typing import Mapping

from mp_config.errors import SourceLoadError

LOCAL_ENV = "local"
PRIMARY_ENV_VAR = "APP_ENV"
SECONDARY_ENV_VAR = "ENVIRONMENT"

DEFAULT_ENVIRONMENT_MAPPING: Mapping[str, str] = {
    "development": "dev",
    "test": "test",
    "production": "production",
}


def resolve_app_env(
    override: str | None = None,
    environ: Mapping[str, str] | None = None,
    primary: str = PRIMARY_ENV_VAR,
    secondary: str = SECONDARY_ENV_VAR,
) -> str:
    """Explicit override, else ``$APP_ENV``, else ``$ENVIRONMENT``, else ``"local"``."""
    if override:
        return override
    env = os.environ if environ is None else environ
    return env.get(primary) or env.get(secondary) or LOCAL_ENV


def build_environment_path(
    base: str,
    mapping: Mapping[str, str],
    app_env: str,
    *,
    loader: str,
) -> str:
    """Return ``"/" + mapping[app_env] + base``.

    Raises :class:`SourceLoadError` listing the known environments when
    *app_env* has no mapping.
    """
    prefix = mapping.get(app_env)
    if not prefix:
        available = ", ".join(mapping) or "<none>"
        raise SourceLoadError(
            f"No environment mapping found for environment '{app_env}'. "
            f"Available environments: {available}",
            loader=loader,
            detail={"app_env": app_env, "available": list(mapping)},
        )
    return f"/{prefix}{base}"


__all__ = [
    "DEFAULT_ENVIRONMENT_MAPPING",
    "LOCAL_ENV",
    "PRIMARY_ENV_VAR",
    "SECONDARY_ENV_VAR",
    "build_environment_path",
    "resolve_app_env",
]
