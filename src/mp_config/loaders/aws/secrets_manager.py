"""AWS loaders – SecretsManagerLoader."""
from __future__ import annotations

import json
from typing import Any, Mapping

from mp_config.loaders.aws.scoped import EnvironmentScopedLoader
from mp_config.resilience.retry import error_name

SECRET_VALUE_KEY = "SECRET_VALUE"
DEFAULT_SECRET_NAME = "/mp-config"


class SecretsManagerLoader(EnvironmentScopedLoader):
    """Read one secret at ``/<env prefix><secret_name>``.

    A JSON object secret becomes the mapping; any other JSON value or a plain
    string is wrapped under ``SECRET_VALUE``. A missing secret yields ``{}``.
    """

    kind = "SecretsManagerLoader"
    service = "SecretsManager"
    client_name = "secretsmanager"

    def __init__(
        self,
        secret_name: str = DEFAULT_SECRET_NAME,
        region: str | None = None,
        environment_mapping: Mapping[str, str] | None = None,
        app_env: str | None = None,
        session: Any | None = None,
    ) -> None:
        super().__init__(
            secret_name,
            region=region,
            environment_mapping=environment_mapping,
            app_env=app_env,
            session=session,
        )

    def build_secret_name(self) -> str:
        return self.build_path()

    async def load(self) -> dict[str, Any]:
        secret_id = self.build_secret_name()
        try:
            async with self._client() as client:
                response = await client.get_secret_value(SecretId=secret_id)
        except Exception as exc:
            code = error_name(exc)
            if code == "ResourceNotFoundException":
                return {}
            if code == "AccessDeniedException":
                message = (
                    f"Access denied when retrieving secret '{secret_id}'. "
                    "Check AWS credentials and permissions."
                )
            elif code == "InvalidRequestException":
                message = f"Invalid request when retrieving secret '{secret_id}'. Check secret name format."
            else:
                message = f"Failed to retrieve secret '{secret_id}' from AWS Secrets Manager: {exc}"
            raise self._service_error(message, "GetSecretValue", exc) from exc

        secret = response.get("SecretString")
        if not secret:
            return {}
        return self.parse_secret(secret)

    @staticmethod
    def parse_secret(secret: str) -> dict[str, Any]:
        try:
            parsed = json.loads(secret)
        except ValueError:
            return {SECRET_VALUE_KEY: secret}
        if isinstance(parsed, dict):
            return parsed
        return {SECRET_VALUE_KEY: parsed}


__all__ = ["DEFAULT_SECRET_NAME", "SECRET_VALUE_KEY", "SecretsManagerLoader"]
