"""Factory – build a ConfigManager and its loaders from plain option objects."""
from __future__ import annotations

import dataclasses
from typing import Any, Literal, Mapping, Sequence

from mp_config.loaders import (
    ConfigLoader,
    EnvFileLoader,
    EnvironmentLoader,
    S3Loader,
    SecretsManagerLoader,
    SSMParameterStoreLoader,
)
from mp_config.loaders.aws.secrets_manager import DEFAULT_SECRET_NAME
from mp_config.loaders.aws.ssm import DEFAULT_PARAMETER_PATH
from mp_config.manager import ConfigManager, VerboseOptions
from mp_config.precedence import PrecedenceSpec
from mp_config.resilience.retry import RetryPolicy
from mp_config.validation import Schema


@dataclasses.dataclass(frozen=True)
class EnvironmentOptions:
    prefix: str | None = None
    exclude: tuple[str, ...] = ()


@dataclasses.dataclass(frozen=True)
class EnvFileOptions:
    paths: tuple[str, ...] | None = None
    encoding: str = "utf-8"
    override: bool = True


@dataclasses.dataclass(frozen=True)
class S3Options:
    bucket: str
    key: str
    region: str | None = None
    format: Literal["auto", "json", "env"] = "auto"


@dataclasses.dataclass(frozen=True)
class SecretsManagerOptions:
    secret_name: str = DEFAULT_SECRET_NAME
    region: str | None = None
    environment_mapping: Mapping[str, str] | None = None


@dataclasses.dataclass(frozen=True)
class SSMOptions:
    parameter_path: str = DEFAULT_PARAMETER_PATH
    region: str | None = None
    environment_mapping: Mapping[str, str] | None = None
    with_decryption: bool = True


@dataclasses.dataclass(frozen=True)
class ConfigManagerOptions:
    """Everything :func:`create_config_manager` needs.

    A loader is created for each source section that is set; ``None``
    leaves the source out. The environment and ``.env`` sources are on by
    default. ``app_env`` and ``session`` are shared by the AWS loaders;
    ``logger`` replaces the manager's default structlog logger.
    """

    environment: EnvironmentOptions | None = dataclasses.field(default_factory=EnvironmentOptions)
    env_file: EnvFileOptions | None = dataclasses.field(default_factory=EnvFileOptions)
    s3: S3Options | None = None
    secrets_manager: SecretsManagerOptions | None = None
    ssm: SSMOptions | None = None
    schema: Schema | None = None
    precedence: PrecedenceSpec = "aws-first"
    validate_on_load: bool = True
    enable_logging: bool = False
    verbose: bool | VerboseOptions = False
    retry_policy: RetryPolicy | None = None
    availability_timeout: float = 5.0
    app_env: str | None = None
    session: Any | None = None
    extra_loaders: Sequence[ConfigLoader] = ()
    logger: Any | None = None


def build_loaders(options: ConfigManagerOptions) -> list[ConfigLoader]:
    loaders: list[ConfigLoader] = []
    if options.environment is not None:
        loaders.append(
            EnvironmentLoader(prefix=options.environment.prefix, exclude=options.environment.exclude)
        )
    if options.env_file is not None:
        loaders.append(
            EnvFileLoader(
                paths=options.env_file.paths,
                encoding=options.env_file.encoding,
                override=options.env_file.override,
            )
        )
    if options.s3 is not None:
        loaders.append(
            S3Loader(
                options.s3.bucket,
                options.s3.key,
                region=options.s3.region,
                format=options.s3.format,
                session=options.session,
            )
        )
    if options.secrets_manager is not None:
        loaders.append(
            SecretsManagerLoader(
                secret_name=options.secrets_manager.secret_name,
                region=options.secrets_manager.region,
                environment_mapping=options.secrets_manager.environment_mapping,
                app_env=options.app_env,
                session=options.session,
            )
        )
    if options.ssm is not None:
        loaders.append(
            SSMParameterStoreLoader(
                parameter_path=options.ssm.parameter_path,
                region=options.ssm.region,
                environment_mapping=options.ssm.environment_mapping,
                with_decryption=options.ssm.with_decryption,
                app_env=options.app_env,
                session=options.session,
            )
        )
    loaders.extend(options.extra_loaders)
    return loaders


def create_config_manager(options: ConfigManagerOptions | None = None) -> ConfigManager:
    """Build the loaders described by *options* and a manager over them (not loaded yet)."""
    options = options or ConfigManagerOptions()
    return ConfigManager(
        loaders=build_loaders(options),
        schema=options.schema,
        precedence=options.precedence,
        validate_on_load=options.validate_on_load,
        enable_logging=options.enable_logging,
        verbose=options.verbose,
        retry_policy=options.retry_policy,
        availability_timeout=options.availability_timeout,
        logger=options.logger,
    )


__all__ = [
    "ConfigManagerOptions",
    "EnvFileOptions",
    "EnvironmentOptions",
    "S3Options",
    "SSMOptions",
    "SecretsManagerOptions",
    "build_loaders",
    "create_config_manager",
]
