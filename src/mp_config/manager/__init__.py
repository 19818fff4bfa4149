"""Manager – configuration loading engine and its result types."""
from mp_config.manager.manager import DESERIALIZE_SOURCE, ConfigManager
from mp_config.manager.result import ConfigSnapshot, LoadResult, SourceInfo
from mp_config.manager.verbose import LoadReporter, VerboseOptions

__all__ = [
    "DESERIALIZE_SOURCE",
    "ConfigManager",
    "ConfigSnapshot",
    "LoadReporter",
    "LoadResult",
    "SourceInfo",
    "VerboseOptions",
]
