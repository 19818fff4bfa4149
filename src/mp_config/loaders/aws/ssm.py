"""AWS loaders – SSMParameterStoreLoader."""
from __future__ import annotations

from typing import Any, Mapping

from mp_config.loaders.aws.scoped import EnvironmentScopedLoader
from mp_config.resilience.retry import error_name

DEFAULT_PARAMETER_PATH = "/mp-config"

_MISSING = frozenset({"ParameterNotFound", "ResourceNotFoundException"})
_INVALID_PATH = frozenset({"InvalidFilterKey", "InvalidFilterValue"})


def parameter_key(name: str | None, path: str) -> str | None:
    """``/dev/app/database/host`` under ``/dev/app`` -> ``DATABASE_HOST``."""
    if not name:
        return None
    key = name[len(path):] if name.startswith(path) else name
    if key.startswith("/"):
        key = key[1:]
    return key.replace("/", "_").upper() or None


class SSMParameterStoreLoader(EnvironmentScopedLoader):
    """Read every parameter under ``/<env prefix><parameter_path>``, recursively."""

    kind = "SSMParameterStoreLoader"
    service = "SSM"
    client_name = "ssm"

    def __init__(
        self,
        parameter_path: str = DEFAULT_PARAMETER_PATH,
        region: str | None = None,
        environment_mapping: Mapping[str, str] | None = None,
        with_decryption: bool = True,
        app_env: str | None = None,
        session: Any | None = None,
    ) -> None:
        super().__init__(
            parameter_path,
            region=region,
            environment_mapping=environment_mapping,
            app_env=app_env,
            session=session,
        )
        self._with_decryption = with_decryption

    def build_parameter_path(self) -> str:
        return self.build_path()

    async def load(self) -> dict[str, Any]:
        path = self.build_parameter_path()
        result: dict[str, Any] = {}
        try:
            async with self._client() as client:
                next_token: str | None = None
                while True:
                    kwargs: dict[str, Any] = {
                        "Path": path,
                        "Recursive": True,
                        "WithDecryption": self._with_decryption,
                    }
                    if next_token:
                        kwargs["NextToken"] = next_token
                    response = await client.get_parameters_by_path(**kwargs)

                    parameters = response.get("Parameters")
                    if parameters is None:
                        break
                    # An empty page may still carry a NextToken.
                    for param in parameters:
                        key = parameter_key(param.get("Name"), path)
                        value = param.get("Value")
                        if key and value is not None:
                            result[key] = value

                    next_token = response.get("NextToken")
                    if not next_token:
                        break
        except Exception as exc:
            code = error_name(exc)
            if code in _MISSING:
                return {}
            if code == "AccessDeniedException":
                message = (
                    f"Access denied when retrieving parameters from path '{path}'. "
                    "Check AWS credentials and permissions."
                )
            elif code in _INVALID_PATH:
                message = f"Invalid parameter path '{path}'. Check path format."
            else:
                message = f"Failed to retrieve parameters from path '{path}' in AWS SSM Parameter Store: {exc}"
            raise self._service_error(message, "GetParametersByPath", exc) from exc
        return result


__all__ = ["DEFAULT_PARAMETER_PATH", "SSMParameterStoreLoader", "parameter_key"]
