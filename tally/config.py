"""Configuration file management for tally."""

import os
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

from tally.domain.report import DEFAULT_RECENT_LIMIT

DEFAULT_DATA_FILE = "transactions.csv"
DATA_FILE_ENV_VAR = "TALLY_DATA_FILE"


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "tally" / "config.toml"


def default_config() -> dict[str, Any]:
    """Get the default configuration values."""
    return {
        "data_file": DEFAULT_DATA_FILE,
        "recent_limit": DEFAULT_RECENT_LIMIT,
    }


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    save_config(default_config(), config_path)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file, merged over the defaults.

    A missing config file yields the defaults.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        tomllib.TOMLDecodeError: If the config file is not valid TOML.
    """
    if config_path is None:
        config_path = get_config_path()

    config = default_config()
    if not config_path.exists():
        return config

    with open(config_path, "rb") as f:
        config.update(tomllib.load(f))
    return config


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to TOML file.

    Args:
        config: Configuration dictionary.
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(config_path, 0o600)


def get_data_path(override: str | Path | None = None, config: dict[str, Any] | None = None) -> Path:
    """Resolve the primary data file path.

    Precedence: explicit override, TALLY_DATA_FILE, config ``data_file``,
    then ``transactions.csv`` in the working directory.

    Args:
        override: Path given on the command line.
        config: Loaded configuration. If None, it is loaded from disk.

    Returns:
        Path to the primary data file.
    """
    if override:
        return Path(override).expanduser()

    env_path = os.environ.get(DATA_FILE_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()

    if config is None:
        config = load_config()
    return Path(str(config.get("data_file") or DEFAULT_DATA_FILE)).expanduser()


def get_recent_limit(config: dict[str, Any]) -> int:
    """Get the number of recent transactions shown in summaries."""
    value = config.get("recent_limit", DEFAULT_RECENT_LIMIT)
    return value if isinstance(value, int) and value >= 0 else DEFAULT_RECENT_LIMIT
