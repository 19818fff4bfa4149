"""AWS loaders – shared aiobotocore session handling and error translation."""
from __future__ import annotations

import os
from typing import Any, ClassVar

from mp_config.errors import SourceServiceError
from mp_config.loaders.port import ConfigLoader
from mp_config.observability import get_logger
from mp_config.resilience.retry import error_name

logger = get_logger(__name__)

DEFAULT_REGION = "us-east-1"


def _require_aiobotocore() -> Any:
    try:
        import aiobotocore.session  # noqa: PLC0415
        return aiobotocore.session
    except ImportError as exc:
        raise ImportError(
            "aiobotocore is required for the AWS configuration loaders. "
            "Install it with: pip install aiobotocore"
        ) from exc


def resolve_region(region: str | None = None) -> str:
    return region or os.environ.get("AWS_REGION") or os.environ.get("AWS_DEFAULT_REGION") or DEFAULT_REGION


class AwsLoader(ConfigLoader):
    """Base for loaders backed by an AWS service client.

    A pre-built *session* (anything exposing ``create_client`` and an async
    ``get_credentials``) can be injected; otherwise an aiobotocore session
    is created lazily on first use.
    """

    network_backed = True
    service: ClassVar[str] = ""
    client_name: ClassVar[str] = ""

    def __init__(self, region: str | None = None, session: Any | None = None) -> None:
        self._region = resolve_region(region)
        self._session = session

    @property
    def region(self) -> str:
        return self._region

    def _get_session(self) -> Any:
        if self._session is None:
            self._session = _require_aiobotocore().get_session()
        return self._session

    def _client(self) -> Any:
        return self._get_session().create_client(self.client_name, region_name=self._region)

    async def _has_credentials(self) -> bool:
        try:
            credentials = await self._get_session().get_credentials()
        except Exception as exc:  # noqa: BLE001 - any resolution failure means unavailable
            logger.debug("config.aws.credentials_unresolved", loader=self.name, error=repr(exc))
            return False
        return credentials is not None

    async def is_available(self) -> bool:
        return await self._has_credentials()

    def _service_error(self, message: str, operation: str, exc: BaseException) -> SourceServiceError:
        return SourceServiceError(
            message,
            service=self.service,
            operation=operation,
            error_code=error_name(exc),
            cause=exc,
        )


__all__ = ["DEFAULT_REGION", "AwsLoader", "resolve_region"]
