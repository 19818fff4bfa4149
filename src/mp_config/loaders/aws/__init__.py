"""AWS loaders – S3, Secrets Manager and SSM Parameter Store via aiobotocore."""
from mp_config.loaders.aws.app_env import (
    DEFAULT_ENVIRONMENT_MAPPING,
    LOCAL_ENV,
    build_environment_path,
    resolve_app_env,
)
from mp_config.loaders.aws.s3 import CONFIG_VALUE_KEY, S3Loader
from mp_config.loaders.aws.scoped import EnvironmentScopedLoader
from mp_config.loaders.aws.secrets_manager import SECRET_VALUE_KEY, SecretsManagerLoader
from mp_config.loaders.aws.session import DEFAULT_REGION, AwsLoader, resolve_region
from mp_config.loaders.aws.ssm import SSMParameterStoreLoader

__all__ = [
    "CONFIG_VALUE_KEY",
    "DEFAULT_ENVIRONMENT_MAPPING",
    "DEFAULT_REGION",
    "LOCAL_ENV",
    "SECRET_VALUE_KEY",
    "AwsLoader",
    "EnvironmentScopedLoader",
    "S3Loader",
    "SSMParameterStoreLoader",
    "SecretsManagerLoader",
    "build_environment_path",
    "resolve_app_env",
    "resolve_region",
]
