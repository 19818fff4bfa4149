"""Testing fakes – in-memory loaders and an aiobotocore-shaped AWS session."""
from __future__ import annotations

from typing import Any, Mapping

from botocore.exceptions import ClientError

from mp_config.loaders.port import ConfigLoader


def client_error(
    code: str,
    operation: str = "Operation",
    message: str | None = None,
    status: int = 400,
) -> ClientError:
    """A botocore ``ClientError`` carrying *code*, as the AWS clients raise it."""
    return ClientError(
        {
            "Error": {"Code": code, "Message": message or code},
            "ResponseMetadata": {"HTTPStatusCode": status},
        },
        operation,
    )


class StaticLoader(ConfigLoader):
    """Loader returning a fixed mapping.

    ``kind`` defaults to *name*, so a ``StaticLoader(name="SSMParameterStoreLoader")``
    sorts like the real SSM loader under the named precedence strategies.

    Usage::

        loader = StaticLoader({"PORT": "3000"}, name="EnvironmentLoader")
        assert await loader.load() == {"PORT": "3000"}
    """

    def __init__(
        self,
        data: Mapping[str, Any] | None = None,
        name: str = "StaticLoader",
        kind: str | None = None,
        available: bool = True,
        network_backed: bool = False,
    ) -> None:
        self._data = dict(data or {})
        self._name = name
        self.kind = kind or name  # type: ignore[misc]
        self.network_backed = network_backed  # type: ignore[misc]
        self.available = available
        self.load_calls = 0
        self.probe_calls = 0

    @property
    def name(self) -> str:
        return self._name

    async def is_available(self) -> bool:
        self.probe_calls += 1
        return self.available

    async def load(self) -> dict[str, Any]:
        self.load_calls += 1
        return dict(self._data)

    def seed(self, key: str, value: Any) -> StaticLoader:
        self._data[key] = value
        return self


class FailingLoader(StaticLoader):
    """Loader whose first *fail_times* loads raise *error* (every load when ``None``)."""

    def __init__(
        self,
        error: BaseException,
        name: str = "FailingLoader",
        kind: str | None = None,
        fail_times: int | None = None,
        then: Mapping[str, Any] | None = None,
        available: bool = True,
        network_backed: bool = False,
    ) -> None:
        super().__init__(then, name=name, kind=kind, available=available, network_backed=network_backed)
        self._error = error
        self._fail_times = fail_times

    async def load(self) -> dict[str, Any]:
        self.load_calls += 1
        if self._fail_times is None or self.load_calls <= self._fail_times:
            raise self._error
        return dict(self._data)


class FakeStreamingBody:
    def __init__(self, data: bytes) -> None:
        self._data = data

    async def read(self) -> bytes:
        return self._data


class FakeAwsClient:
    """In-memory stand-in for the S3, Secrets Manager and SSM clients.

    Seed it with :meth:`put_object`, :meth:`put_secret` and
    :meth:`put_parameter`; queue failures with :meth:`fail_with`. Every call
    is recorded in :attr:`calls` as ``(method, kwargs)``.
    """

    def __init__(self, page_size: int = 10) -> None:
        self.objects: dict[tuple[str, str], bytes] = {}
        self.secrets: dict[str, str | None] = {}
        self.parameters: dict[str, str | None] = {}
        self.page_size = page_size
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self._failures: dict[str, list[BaseException]] = {}

    async def __aenter__(self) -> FakeAwsClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        return None

    # ------------------------------------------------------------------
    # Test-setup helpers
    # ------------------------------------------------------------------

    def put_object(self, bucket: str, key: str, body: str | bytes) -> FakeAwsClient:
        self.objects[(bucket, key)] = body.encode("utf-8") if isinstance(body, str) else body
        return self

    def put_secret(self, name: str, value: str | None) -> FakeAwsClient:
        self.secrets[name] = value
        return self

    def put_parameter(self, name: str, value: str | None) -> FakeAwsClient:
        self.parameters[name] = value
        return self

    def fail_with(self, method: str, *errors: BaseException) -> FakeAwsClient:
        """Raise *errors*, one per call and in order, before answering *method* normally."""
        self._failures.setdefault(method, []).extend(errors)
        return self

    def _record(self, method: str, kwargs: dict[str, Any]) -> None:
        self.calls.append((method, kwargs))
        queued = self._failures.get(method)
        if queued:
            raise queued.pop(0)

    # ------------------------------------------------------------------
    # Client API
    # ------------------------------------------------------------------

    async def get_object(self, **kwargs: Any) -> dict[str, Any]:
        self._record("get_object", kwargs)
        bucket, key = kwargs["Bucket"], kwargs["Key"]
        if not any(b == bucket for b, _ in self.objects):
            raise client_error("NoSuchBucket", "GetObject", status=404)
        if (bucket, key) not in self.objects:
            raise client_error("NoSuchKey", "GetObject", status=404)
        return {"Body": FakeStreamingBody(self.objects[(bucket, key)])}

    async def get_secret_value(self, **kwargs: Any) -> dict[str, Any]:
        self._record("get_secret_value", kwargs)
        secret_id = kwargs["SecretId"]
        if secret_id not in self.secrets:
            raise client_error("ResourceNotFoundException", "GetSecretValue")
        value = self.secrets[secret_id]
        response: dict[str, Any] = {"Name": secret_id}
        if value is not None:
            response["SecretString"] = value
        return response

    async def get_parameters_by_path(self, **kwargs: Any) -> dict[str, Any]:
        self._record("get_parameters_by_path", kwargs)
        path = kwargs["Path"].rstrip("/") + "/"
        names = sorted(n for n in self.parameters if n.startswith(path))
        start = int(kwargs.get("NextToken") or 0)
        page = names[start:start + self.page_size]
        parameters = []
        for name in page:
            param: dict[str, Any] = {"Name": name, "Type": "String"}
            if self.parameters[name] is not None:
                param["Value"] = self.parameters[name]
            parameters.append(param)
        response: dict[str, Any] = {"Parameters": parameters}
        if start + self.page_size < len(names):
            response["NextToken"] = str(start + self.page_size)
        return response


class FakeAwsSession:
    """Session double: hands out one :class:`FakeAwsClient` and fixed credentials."""

    def __init__(
        self,
        client: FakeAwsClient | None = None,
        credentials: Any = "fake-credentials",
        credentials_error: BaseException | None = None,
    ) -> None:
        self.client = client or FakeAwsClient()
        self.credentials = credentials
        self.credentials_error = credentials_error
        self.created: list[tuple[str, str | None]] = []

    def create_client(self, service_name: str, region_name: str | None = None, **_: Any) -> FakeAwsClient:
        self.created.append((service_name, region_name))
        return self.client

    async def get_credentials(self) -> Any:
        if self.credentials_error is not None:
            raise self.credentials_error
        return self.credentials


__all__ = [
    "FailingLoader",
    "FakeAwsClient",
    "FakeAwsSession",
    "FakeStreamingBody",
    "StaticLoader",
    "client_error",
]
