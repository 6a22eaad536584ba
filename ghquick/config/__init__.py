# ghquick Configuration Module
# Handles YAML-based configuration loading, validation, and defaults

from ghquick.config.defaults import DEFAULT_CONFIG, generate_default_config
from ghquick.config.loader import (
    ACCOUNT_ENV,
    ConfigError,
    get_config_path,
    load_config,
    save_config,
    write_default_config,
)
from ghquick.config.schema import (
    GhQuickConfig,
    GitConfig,
    IdentityConfig,
    OutputConfig,
    RemoteConfig,
)

__all__ = [
    # Schema
    "GhQuickConfig",
    "IdentityConfig",
    "RemoteConfig",
    "GitConfig",
    "OutputConfig",
    # Loader
    "ACCOUNT_ENV",
    "ConfigError",
    "load_config",
    "save_config",
    "get_config_path",
    "write_default_config",
    # Defaults
    "DEFAULT_CONFIG",
    "generate_default_config",
]
