"""Configuration loading, schema, and defaults."""

from gitclean.config.loader import ConfigError, load_config
from gitclean.config.schema import CheckConfig, GitCleanConfig, OutputConfig

__all__ = [
    "CheckConfig",
    "ConfigError",
    "GitCleanConfig",
    "OutputConfig",
    "load_config",
]
