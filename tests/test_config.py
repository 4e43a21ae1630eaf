"""Tests for minledger.config."""

import stat
from pathlib import Path

import pytest

from minledger.config import (
    Settings,
    build_settings,
    create_default_config,
    get_config_path,
    load_config,
    load_settings,
    save_config,
)
from minledger.store.ledger import CorruptDataPolicy


class TestConfigPath:
    """Tests for get_config_path."""

    def test_uses_xdg_config_home(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should respect XDG_CONFIG_HOME."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        assert get_config_path() == tmp_path / "minledger" / "config.toml"


class TestConfigFile:
    """Tests for creating, saving and loading the config file."""

    def test_default_config_round_trip(self, tmp_path: Path) -> None:
        """Should write defaults that load back unchanged."""
        config_path = tmp_path / "minledger" / "config.toml"

        create_default_config(config_path)

        assert load_config(config_path) == {
            "storage_key": "minimal-expense-tracker",
            "on_corrupt": "reseed",
            "currency": "$",
            "log_level": "WARNING",
        }

    def test_owner_only_permissions(self, tmp_path: Path) -> None:
        """Should restrict the config file to its owner."""
        config_path = tmp_path / "config.toml"

        save_config({"currency": "€"}, config_path)

        assert stat.S_IMODE(config_path.stat().st_mode) == 0o600

    def test_load_missing_raises(self, tmp_path: Path) -> None:
        """Should raise when the file doesn't exist."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.toml")


class TestSettings:
    """Tests for build_settings and load_settings."""

    def test_defaults(self) -> None:
        """Should fill in every default."""
        assert build_settings({}) == Settings()

    def test_overrides(self) -> None:
        """Should apply configured values."""
        settings = build_settings({"on_corrupt": "empty", "currency": "£", "log_level": "debug"})

        assert settings.on_corrupt is CorruptDataPolicy.EMPTY
        assert settings.currency == "£"
        assert settings.log_level == "DEBUG"

    def test_invalid_policy(self) -> None:
        """Should reject unknown corrupt-data policies."""
        with pytest.raises(ValueError, match="on_corrupt"):
            build_settings({"on_corrupt": "explode"})

    def test_invalid_storage_key(self) -> None:
        """Should reject empty storage keys."""
        with pytest.raises(ValueError, match="storage_key"):
            build_settings({"storage_key": ""})

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        """Should not require a config file."""
        assert load_settings(tmp_path / "missing.toml") == Settings()

    def test_loads_file(self, tmp_path: Path) -> None:
        """Should read settings from the config file."""
        config_path = tmp_path / "config.toml"
        save_config({"storage_key": "other-key"}, config_path)

        assert load_settings(config_path).storage_key == "other-key"
