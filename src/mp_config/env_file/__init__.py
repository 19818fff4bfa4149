"""Env file – AWS ECS-compatible ``KEY=VALUE`` parsing."""
from mp_config.env_file.parser import MAX_LINE_LENGTH, EnvFileParser

__all__ = ["MAX_LINE_LENGTH", "EnvFileParser"]
