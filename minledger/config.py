"""Configuration file management for minledger."""

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tomli_w

from minledger.store.ledger import DEFAULT_STORAGE_KEY, CorruptDataPolicy

DEFAULT_CONFIG: dict[str, Any] = {
    "storage_key": DEFAULT_STORAGE_KEY,
    "on_corrupt": CorruptDataPolicy.RESEED.value,
    "currency": "$",
    "log_level": "WARNING",
}


@dataclass(frozen=True)
class Settings:
    """Resolved configuration values."""

    storage_key: str = DEFAULT_STORAGE_KEY
    on_corrupt: CorruptDataPolicy = CorruptDataPolicy.RESEED
    currency: str = "$"
    log_level: str = "WARNING"


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
    return get_xdg_config_home() / "minledger" / "config.toml"


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    save_config(dict(DEFAULT_CONFIG), config_path)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        FileNotFoundError: If config file doesn't exist.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "rb") as f:
        return tomllib.load(f)


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


def build_settings(config: dict[str, Any]) -> Settings:
    """Resolve a config dictionary into Settings, filling in defaults.

    Raises:
        ValueError: If a value is invalid.
    """
    merged = {**DEFAULT_CONFIG, **config}

    try:
        on_corrupt = CorruptDataPolicy(merged["on_corrupt"])
    except ValueError:
        choices = ", ".join(p.value for p in CorruptDataPolicy)
        raise ValueError(f"on_corrupt must be one of: {choices}") from None

    storage_key = merged["storage_key"]
    if not isinstance(storage_key, str) or not storage_key:
        raise ValueError("storage_key must be a non-empty string")

    return Settings(
        storage_key=storage_key,
        on_corrupt=on_corrupt,
        currency=str(merged["currency"]),
        log_level=str(merged["log_level"]).upper(),
    )


def load_settings(config_path: Path | None = None) -> Settings:
    """Load settings, using defaults when no config file exists.

    Raises:
        ValueError: If the config file holds invalid values.
        tomllib.TOMLDecodeError: If the config file is not valid TOML.
    """
    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        return Settings()

    return build_settings(load_config(config_path))
