# ghquick Configuration Loader
# Load, save, and manage YAML configuration files

import os
from pathlib import Path
from typing import Mapping, Optional

import yaml
from pydantic import ValidationError

from ghquick.config.defaults import DEFAULT_CONFIG, generate_default_config
from ghquick.config.schema import GhQuickConfig

ACCOUNT_ENV = "GITHUB_USERNAME"
CONFIG_ENV = "GHQUICK_CONFIG"


class ConfigError(Exception):
    """Configuration file could not be read or validated."""


def get_config_dir() -> Path:
    """Get the ghquick configuration directory."""
    return Path.home() / ".config" / "ghquick"


def get_config_path() -> Path:
    """Get the path to the configuration file."""
    # Allow override via environment variable
    env_path = os.environ.get(CONFIG_ENV)
    if env_path:
        return Path(env_path).expanduser()
    return get_config_dir() / "config.yaml"


def load_config(
    config_path: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> GhQuickConfig:
    """
    Load configuration from YAML file and environment.

    A missing file yields defaults. The account name from the
    environment takes precedence over the file.

    Args:
        config_path: Optional path to config file. Uses default if not provided.
        environ: Environment mapping (defaults to os.environ).

    Returns:
        GhQuickConfig: Validated configuration object.

    Raises:
        ConfigError: If the file is not valid YAML or fails validation.
    """
    if config_path is None:
        config_path = get_config_path()
    if environ is None:
        environ = os.environ

    data: dict = {}
    if config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML syntax in {config_path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration file must contain a mapping: {config_path}")

    merged = _merge_with_defaults(data)

    account = environ.get(ACCOUNT_ENV)
    if account:
        merged["identity"]["account"] = account

    try:
        return GhQuickConfig.model_validate(merged)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_path}:\n{e}") from e


def save_config(config: GhQuickConfig, config_path: Optional[Path] = None) -> Path:
    """
    Save configuration to YAML file.

    Args:
        config: Configuration object to save.
        config_path: Optional path to config file. Uses default if not provided.

    Returns:
        Path: Path where config was saved.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json")

    with open(config_path, "w", encoding="utf-8") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False, allow_unicode=True)

    return config_path


def write_default_config(
    config_path: Optional[Path] = None,
    *,
    account: str = "",
    force: bool = False,
) -> tuple[Path, bool]:
    """
    Write the default configuration file.

    Args:
        config_path: Optional path to config file.
        account: Account name to pre-fill.
        force: Overwrite an existing file.

    Returns:
        Tuple of (config_path, was_written).
    """
    if config_path is None:
        config_path = get_config_path()

    if config_path.exists() and not force:
        return config_path, False

    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(generate_default_config(account), encoding="utf-8")
    return config_path, True


def _merge_with_defaults(data: dict) -> dict:
    """Merge loaded data with default values for missing keys."""
    result = {section: dict(values) for section, values in DEFAULT_CONFIG.items()}

    for section, values in data.items():
        if section not in result:
            result[section] = values
        elif values is None:
            continue
        elif isinstance(values, dict):
            result[section] = {**result[section], **values}
        else:
            raise ConfigError(f"Section '{section}' must be a mapping, got: {values!r}")

    return result
