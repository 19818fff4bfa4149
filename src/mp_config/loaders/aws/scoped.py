"""AWS loaders – base for loaders whose target path depends on the runtime environment."""
from __future__ import annotations

from typing import Any, Mapping

from mp_config.errors import SourceLoadError
from mp_config.loaders.aws.app_env import (
    DEFAULT_ENVIRONMENT_MAPPING,
    LOCAL_ENV,
    build_environment_path,
    resolve_app_env,
)
from mp_config.loaders.aws.session import AwsLoader


class EnvironmentScopedLoader(AwsLoader):
    """Resolves ``/<env prefix><base path>`` and skips itself in ``local``."""

    def __init__(
        self,
        base_path: str,
        region: str | None = None,
        environment_mapping: Mapping[str, str] | None = None,
        app_env: str | None = None,
        session: Any | None = None,
    ) -> None:
        super().__init__(region=region, session=session)
        self._base_path = base_path
        self._mapping = dict(
            environment_mapping if environment_mapping is not None else DEFAULT_ENVIRONMENT_MAPPING
        )
        self._app_env = resolve_app_env(app_env)

    @property
    def app_env(self) -> str:
        return self._app_env

    @property
    def environment_mapping(self) -> dict[str, str]:
        return dict(self._mapping)

    @property
    def name(self) -> str:
        # Must not raise: fall back to the base path when no mapping matches.
        try:
            return f"{self.kind}({self.build_path()})"
        except SourceLoadError:
            return f"{self.kind}({self._base_path})"

    def build_path(self) -> str:
        return build_environment_path(
            self._base_path, self._mapping, self._app_env, loader=f"{self.kind}({self._base_path})"
        )

    async def is_available(self) -> bool:
        if self._app_env == LOCAL_ENV:
            return False
        return await self._has_credentials()


__all__ = ["EnvironmentScopedLoader"]
