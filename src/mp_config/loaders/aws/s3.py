"""AWS loaders – S3Loader (JSON or env-file objects)."""
from __future__ import annotations

import json
from typing import Any, Literal

from mp_config.env_file import EnvFileParser
from mp_config.errors import SourceLoadError
from mp_config.loaders.aws.session import AwsLoader
from mp_config.resilience.retry import error_name

S3Format = Literal["auto", "json", "env"]

CONFIG_VALUE_KEY = "CONFIG_VALUE"

_MISSING = frozenset({"NoSuchKey", "NoSuchBucket", "404"})
_DENIED = frozenset({"AccessDenied", "403"})


class S3Loader(AwsLoader):
    """Read one object from S3 and parse it as JSON or env-file content.

    A missing bucket or object yields ``{}``. With ``format="auto"`` the
    content is JSON when it starts with ``{`` after leading whitespace.
    """

    kind = "S3Loader"
    service = "S3"
    client_name = "s3"

    def __init__(
        self,
        bucket: str,
        key: str,
        region: str | None = None,
        format: S3Format = "auto",  # noqa: A002
        session: Any | None = None,
    ) -> None:
        super().__init__(region=region, session=session)
        if format not in ("auto", "json", "env"):
            raise ValueError(f"Unsupported S3 content format: {format!r}")
        self._bucket = bucket
        self._key = key
        self._format = format

    @property
    def uri(self) -> str:
        return f"s3://{self._bucket}/{self._key}"

    @property
    def name(self) -> str:
        return f"{self.kind}({self.uri})"

    async def load(self) -> dict[str, Any]:
        content = await self._fetch()
        if not content or not content.strip():
            return {}
        return self.parse_content(content)

    async def _fetch(self) -> str | None:
        try:
            async with self._client() as client:
                response = await client.get_object(Bucket=self._bucket, Key=self._key)
                body = response.get("Body")
                if body is None:
                    return None
                raw = await body.read()
        except Exception as exc:
            code = error_name(exc)
            if code in _MISSING:
                return None
            if code in _DENIED:
                raise self._service_error(
                    f"Access denied when retrieving {self.uri}. "
                    "Check AWS credentials and permissions.",
                    "GetObject",
                    exc,
                ) from exc
            raise self._service_error(
                f"Failed to retrieve {self.uri}: {exc}", "GetObject", exc
            ) from exc
        return raw.decode("utf-8") if isinstance(raw, bytes) else str(raw)

    def parse_content(self, content: str) -> dict[str, Any]:
        fmt = self.detect_format(content) if self._format == "auto" else self._format
        if fmt == "json":
            return self._parse_json(content)
        return EnvFileParser.parse(content)

    @staticmethod
    def detect_format(content: str) -> Literal["json", "env"]:
        return "json" if content.lstrip().startswith("{") else "env"

    def _parse_json(self, content: str) -> dict[str, Any]:
        try:
            parsed = json.loads(content)
        except ValueError as exc:
            raise SourceLoadError(
                f"Failed to parse JSON from {self.uri}: {exc}", loader=self.name, cause=exc
            ) from exc
        if isinstance(parsed, dict):
            return parsed
        return {CONFIG_VALUE_KEY: parsed}


__all__ = ["CONFIG_VALUE_KEY", "S3Format", "S3Loader"]
