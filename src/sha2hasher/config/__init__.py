"""Configuration models and loaders for sha2hasher."""

from .loader import CONFIG_ENV_VAR, ConfigError, DEFAULT_CONFIG_PATH, dump_example_config, load_config
from .models import HasherSettings, HashingConfig, LoggingConfig, SidecarConfig

__all__ = [
    "CONFIG_ENV_VAR",
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "HasherSettings",
    "HashingConfig",
    "LoggingConfig",
    "SidecarConfig",
    "dump_example_config",
    "load_config",
]
