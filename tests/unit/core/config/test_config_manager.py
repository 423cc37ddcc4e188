"""
Tests for ConfigManager and the configuration models.
"""

import sys
from pathlib import Path

import pytest

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from gravefinder.core.config import ConfigManager, GraveFinderConfig
from gravefinder.exceptions import (
    ConfigurationValidationError,
    InvalidConfigurationError,
    MissingConfigurationError,
)


@pytest.mark.unit
class TestLoadConfig:
    def test_defaults_without_file(self, config_manager):
        config = config_manager.load_config()

        assert config.general.data_file == Path("assets/cemeteries.txt")
        assert config.general.backup_enabled is True
        assert config.general.logging.level.value == "INFO"
        assert config.search.default_cemetery is None
        assert config.search.include_placeholders is False

    def test_reads_toml(self, config_manager, config_file):
        config_file.write_text(
            '[general]\ndata_file = "/srv/graves.txt"\nbackup_enabled = false\n\n'
            "[search]\ndefault_cemetery = 1\n",
            encoding="utf-8",
        )

        config = config_manager.load_config()

        assert config.general.data_file == Path("/srv/graves.txt")
        assert config.general.backup_enabled is False
        assert config.search.default_cemetery == 1

    def test_config_is_cached(self, config_manager):
        assert config_manager.load_config() is config_manager.load_config()

    def test_environment_overrides_file(self, config_manager, config_file, monkeypatch):
        config_file.write_text('[general]\ndata_file = "/srv/graves.txt"\n', encoding="utf-8")
        monkeypatch.setenv("GRAVEFINDER_DATA_FILE", "/tmp/other.txt")
        monkeypatch.setenv("GRAVEFINDER_LOGGING_LEVEL", "DEBUG")
        monkeypatch.setenv("GRAVEFINDER_LOGGING_OUTPUT", "console, file")
        monkeypatch.setenv("GRAVEFINDER_INCLUDE_PLACEHOLDERS", "true")

        config = config_manager.load_config()

        assert config.general.data_file == Path("/tmp/other.txt")
        assert config.general.logging.level.value == "DEBUG"
        assert config.general.logging.output == ["console", "file"]
        assert config.search.include_placeholders is True

    def test_invalid_toml(self, config_manager, config_file):
        config_file.write_text("[general\n", encoding="utf-8")

        with pytest.raises(InvalidConfigurationError, match="Invalid TOML syntax"):
            config_manager.load_config()

    def test_invalid_values(self, config_manager, config_file):
        config_file.write_text('[general.logging]\nformat = "xml"\n', encoding="utf-8")

        with pytest.raises(ConfigurationValidationError) as exc_info:
            config_manager.load_config()

        assert any("format" in error for error in exc_info.value.errors)

    def test_blank_data_file(self, config_manager, config_file):
        config_file.write_text('[general]\ndata_file = "  "\n', encoding="utf-8")

        with pytest.raises(MissingConfigurationError, match="general.data_file"):
            config_manager.load_config()

    def test_unknown_section_rejected(self, config_manager, config_file):
        config_file.write_text("[providers]\nname = 1\n", encoding="utf-8")

        with pytest.raises(ConfigurationValidationError):
            config_manager.load_config()

    def test_negative_default_cemetery_rejected(self, config_manager, config_file):
        config_file.write_text("[search]\ndefault_cemetery = -1\n", encoding="utf-8")

        with pytest.raises(ConfigurationValidationError):
            config_manager.load_config()


@pytest.mark.unit
class TestSaveAndExport:
    def test_export_round_trip(self, config_manager, temp_dir):
        export_path = temp_dir / "exported" / "gravefinder.toml"

        config_manager.export_config(export_path)

        with open(export_path, "rb") as f:
            data = tomllib.load(f)
        assert data["general"]["data_file"] == "assets/cemeteries.txt"
        assert "default_cemetery" not in data["search"]
        assert ConfigManager(export_path).load_config() == config_manager.load_config()

    def test_save_config(self, config_manager, config_file):
        config = GraveFinderConfig()
        config.search.include_placeholders = True

        config_manager.save_config(config)

        assert ConfigManager(config_file).load_config().search.include_placeholders is True

    def test_reset_config(self, config_manager, config_file):
        config_file.write_text("[search]\ndefault_cemetery = 2\n", encoding="utf-8")

        config = config_manager.reset_config()

        assert config.search.default_cemetery is None
        assert ConfigManager(config_file).load_config().search.default_cemetery is None
