"""
Configuration manager for Grave Finder.

Reads the TOML configuration file, applies GRAVEFINDER_* environment
overrides and validates the result into a GraveFinderConfig.
"""

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

import tomli_w
from pydantic import ValidationError

from ...exceptions.config import (
    ConfigurationValidationError,
    InvalidConfigurationError,
    MissingConfigurationError,
)
from ...utils.error_handling import FileOperationHandler
from .models import GraveFinderConfig, GraveFinderSettings

DEFAULT_CONFIG_DIR = Path.home() / ".config" / "gravefinder"


@dataclass
class EnvironmentOverride:
    """Copies set environment settings into one configuration section."""

    config_section: Dict[str, Any]
    settings: GraveFinderSettings

    def apply_if_set(self, setting_name: str, config_key: str) -> None:
        value = getattr(self.settings, setting_name, None)
        if value is not None:
            self.config_section[config_key] = value

    def apply_string_if_set(self, setting_name: str, config_key: str) -> None:
        value = getattr(self.settings, setting_name, None)
        if value:
            self.config_section[config_key] = value


class ConfigManager:
    """Loads, saves, exports and resets the Grave Finder configuration."""

    def __init__(self, config_file: Optional[Path] = None):
        """
        Args:
            config_file: Path to a config file. Defaults to ~/.config/gravefinder/config.toml
        """
        self.config_file = Path(config_file) if config_file else DEFAULT_CONFIG_DIR / "config.toml"
        self._config: Optional[GraveFinderConfig] = None

    def load_config(self) -> GraveFinderConfig:
        """Load and validate configuration from file and environment."""
        if self._config is not None:
            return self._config

        config_data: Dict[str, Any] = {}
        if self.config_file.exists():
            config_data = self._load_toml_file()

        config_data = self._apply_env_overrides(config_data)
        data_file = config_data["general"].get("data_file")
        if data_file is not None and not str(data_file).strip():
            raise MissingConfigurationError("general.data_file", str(self.config_file))

        try:
            self._config = GraveFinderConfig(**config_data)
        except ValidationError as e:
            raise ConfigurationValidationError(
                [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()]
            ) from e
        return self._config

    def _load_toml_file(self) -> Dict[str, Any]:
        def load_toml_content(f):
            try:
                return tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise InvalidConfigurationError(
                    str(self.config_file), f"Invalid TOML syntax: {e}", "valid TOML format"
                ) from e

        return FileOperationHandler.safe_file_operation(
            file_path=self.config_file,
            operation=load_toml_content,
            mode="rb",
            file_type="configuration file",
            operation_name="read",
            default_on_missing={},
        )

    def _apply_env_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        settings = GraveFinderSettings()

        general = config_data.setdefault("general", {})
        override = EnvironmentOverride(general, settings)
        override.apply_string_if_set("gravefinder_data_file", "data_file")
        override.apply_if_set("gravefinder_backup_enabled", "backup_enabled")

        logging_config = general.setdefault("logging", {})
        override = EnvironmentOverride(logging_config, settings)
        override.apply_string_if_set("gravefinder_logging_level", "level")
        override.apply_string_if_set("gravefinder_logging_format", "format")
        override.apply_string_if_set("gravefinder_logging_file_path", "file_path")
        if settings.gravefinder_logging_output:
            logging_config["output"] = [o.strip() for o in settings.gravefinder_logging_output.split(",")]

        search = config_data.setdefault("search", {})
        override = EnvironmentOverride(search, settings)
        override.apply_if_set("gravefinder_default_cemetery", "default_cemetery")
        override.apply_if_set("gravefinder_include_placeholders", "include_placeholders")

        return config_data

    def _to_toml_dict(self, config: GraveFinderConfig) -> Dict[str, Any]:
        return _remove_none_values(config.model_dump(exclude_unset=False, mode="json"))

    def save_config(self, config: Optional[GraveFinderConfig] = None) -> None:
        if config is None:
            config = self.load_config()
        self.export_config(self.config_file, config)
        self._config = config

    def export_config(self, file_path: Path, config: Optional[GraveFinderConfig] = None) -> None:
        """Write the configuration (default: the loaded one) to a TOML file."""
        config_dict = self._to_toml_dict(config or self.load_config())
        Path(file_path).parent.mkdir(parents=True, exist_ok=True)

        def write_toml_content(f):
            tomli_w.dump(config_dict, f)

        FileOperationHandler.safe_file_operation(
            file_path=file_path,
            operation=write_toml_content,
            mode="wb",
            file_type="configuration file",
            operation_name="write",
        )

    def reset_config(self) -> GraveFinderConfig:
        """Overwrite the configuration file with defaults."""
        config = GraveFinderConfig()
        self.save_config(config)
        return config


def _remove_none_values(data):
    """TOML has no null, so drop None values recursively."""
    if isinstance(data, dict):
        return {k: _remove_none_values(v) for k, v in data.items() if v is not None}
    if isinstance(data, list):
        return [_remove_none_values(item) for item in data if item is not None]
    return data
