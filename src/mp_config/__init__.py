"""mp-config – multi-source configuration loading.

Typical use::

    from mp_config import ConfigManager, EnvironmentLoader, SSMParameterStoreLoader

    manager = ConfigManager(
        loaders=[EnvironmentLoader(prefix="APP_"), SSMParameterStoreLoader("/my-service")],
        precedence="aws-first",
    )
    await manager.load()
    port = manager.get("PORT", "8080")
"""
from mp_config.env_file import EnvFileParser
from mp_config.errors import (
    BaseError,
    ConfigurationError,
    MissingKeysError,
    SourceLoadError,
    SourceServiceError,
    ValidationError,
)
from mp_config.factory import ConfigManagerOptions, create_config_manager
from mp_config.loaders import (
    ConfigLoader,
    EnvFileLoader,
    EnvironmentLoader,
    S3Loader,
    SecretsManagerLoader,
    SSMParameterStoreLoader,
)
from mp_config.manager import ConfigManager, ConfigSnapshot, LoadResult, SourceInfo, VerboseOptions
from mp_config.precedence import LoaderPrecedence, PrecedenceResolver
from mp_config.resilience import LocalFallbackPolicy, RetryPolicy
from mp_config.transforms import coerce_mapping
from mp_config.validation import safe_validate, validate_config

__version__ = "0.1.0"

__all__ = [
    "BaseError",
    "ConfigLoader",
    "ConfigManager",
    "ConfigManagerOptions",
    "ConfigSnapshot",
    "ConfigurationError",
    "EnvFileLoader",
    "EnvFileParser",
    "EnvironmentLoader",
    "LoadResult",
    "LoaderPrecedence",
    "LocalFallbackPolicy",
    "MissingKeysError",
    "PrecedenceResolver",
    "RetryPolicy",
    "S3Loader",
    "SSMParameterStoreLoader",
    "SecretsManagerLoader",
    "SourceInfo",
    "SourceLoadError",
    "SourceServiceError",
    "ValidationError",
    "VerboseOptions",
    "__version__",
    "coerce_mapping",
    "create_config_manager",
    "safe_validate",
    "validate_config",
]
