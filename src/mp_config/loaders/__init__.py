"""Loaders – one adapter per configuration source."""
from mp_config.loaders.aws import S3Loader, SecretsManagerLoader, SSMParameterStoreLoader
from mp_config.loaders.env_file import EnvFileLoader
from mp_config.loaders.environment import EnvironmentLoader
from mp_config.loaders.port import ConfigLoader

__all__ = [
    "ConfigLoader",
    "EnvFileLoader",
    "EnvironmentLoader",
    "S3Loader",
    "SSMParameterStoreLoader",
    "SecretsManagerLoader",
]
