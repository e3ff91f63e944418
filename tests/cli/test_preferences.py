"""Tests for CLI preference management."""

import pytest
from pathlib import Path

from walletgen.cli.utils.config import ConfigError, ConfigManager, Preferences
from walletgen.wallet import ExportFormat


class TestConfigManager:
    """Tests for ConfigManager."""

    def test_default_config_dir(self):
        """Default config dir is ~/.walletgen."""
        manager = ConfigManager()
        assert manager.config_dir == Path.home() / ".walletgen"

    def test_custom_config_dir(self):
        """Custom config dir is respected."""
        custom = Path("/tmp/custom-walletgen")
        manager = ConfigManager(custom)
        assert manager.config_dir == custom
        assert manager.db_path == custom / "history.db"

    def test_missing_file_yields_defaults(self, config_dir):
        """Loading without a config file returns defaults."""
        manager = ConfigManager()
        assert manager.exists() is False
        prefs = manager.load()
        assert prefs == Preferences()
        assert prefs.output_format == ExportFormat.CSV
        assert prefs.default_wallet_count == "10"

    def test_save_and_load(self, config_dir):
        """Preferences can be saved and loaded."""
        manager = ConfigManager()
        prefs = Preferences(
            output_format=ExportFormat.JSON,
            default_wallet_count="25",
            include_public_keys=True,
            save_to_history=True,
        )
        manager.save(prefs)
        assert manager.exists()
        assert manager.load() == prefs

    def test_numeric_count_in_yaml_kept_as_text(self, config_dir):
        """A bare YAML integer count is read back as text."""
        config_dir.mkdir(parents=True)
        (config_dir / "config.yaml").write_text("default_wallet_count: 42\n")
        assert ConfigManager().load().default_wallet_count == "42"

    def test_invalid_format_raises(self, config_dir):
        """Unknown output format raises ConfigError."""
        config_dir.mkdir(parents=True)
        (config_dir / "config.yaml").write_text("output_format: xml\n")
        with pytest.raises(ConfigError, match="expected csv or json"):
            ConfigManager().load()

    def test_non_mapping_raises(self, config_dir):
        """A YAML list is not a valid config."""
        config_dir.mkdir(parents=True)
        (config_dir / "config.yaml").write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="expected a mapping"):
            ConfigManager().load()

    def test_empty_file_yields_defaults(self, config_dir):
        config_dir.mkdir(parents=True)
        (config_dir / "config.yaml").write_text("")
        assert ConfigManager().load() == Preferences()


class TestEnvironmentOverrides:
    """Tests for WALLETGEN_* environment overrides."""

    def test_env_overrides_file(self, config_dir, monkeypatch):
        ConfigManager().save(Preferences())
        monkeypatch.setenv("WALLETGEN_OUTPUT_FORMAT", "JSON")
        monkeypatch.setenv("WALLETGEN_DEFAULT_COUNT", "7")
        monkeypatch.setenv("WALLETGEN_INCLUDE_PUBLIC_KEYS", "yes")
        monkeypatch.setenv("WALLETGEN_SAVE_TO_HISTORY", "1")
        prefs = ConfigManager().load()
        assert prefs.output_format == ExportFormat.JSON
        assert prefs.default_wallet_count == "7"
        assert prefs.include_public_keys is True
        assert prefs.save_to_history is True

    def test_unrecognised_bool_uses_default(self, config_dir, monkeypatch, caplog):
        monkeypatch.setenv("WALLETGEN_INCLUDE_PUBLIC_KEYS", "ture")
        with caplog.at_level("WARNING"):
            prefs = ConfigManager().load()
        assert prefs.include_public_keys is False
        assert "Unrecognised boolean value" in caplog.text
