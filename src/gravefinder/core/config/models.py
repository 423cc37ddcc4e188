"""
Configuration models for Grave Finder.

Pydantic models validate the TOML configuration file; GraveFinderSettings
reads the GRAVEFINDER_* environment variables that override it.
"""

from enum import Enum
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gravefinder.constants import (
    DEFAULT_DATA_FILE,
    DEFAULT_LOG_BACKUP_COUNT,
    DEFAULT_LOG_FILE_SIZE_BYTES,
    MIN_LOG_FILE_SIZE_BYTES,
)


class LogLevel(str, Enum):
    """Valid logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.INFO, description="Logging level")
    format: str = Field("console", description="Log format: console, json, rich")
    output: List[str] = Field(["console"], description="Log outputs: console, file")
    file_path: Optional[Path] = Field(None, description="Log file path")
    max_file_size: int = Field(
        DEFAULT_LOG_FILE_SIZE_BYTES,
        ge=MIN_LOG_FILE_SIZE_BYTES,
        description="Maximum log file size in bytes",
    )
    backup_count: int = Field(
        DEFAULT_LOG_BACKUP_COUNT,
        ge=1,
        le=20,
        description="Number of rotated log files to keep",
    )

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        if v not in ["console", "json", "rich"]:
            raise ValueError("format must be one of: console, json, rich")
        return v

    @field_validator("output")
    @classmethod
    def validate_output(cls, v: List[str]) -> List[str]:
        valid_outputs = {"console", "file"}
        for output in v:
            if output not in valid_outputs:
                raise ValueError(f"output must contain only: {', '.join(sorted(valid_outputs))}")
        return v


class GeneralConfig(BaseModel):
    """General application configuration."""

    data_file: Path = Field(Path(DEFAULT_DATA_FILE), description="Registry document to read and write")
    backup_enabled: bool = Field(True, description="Keep a .bak copy of the document on every save")
    logging: LoggingConfig = Field(default_factory=LoggingConfig, description="Logging configuration")

    @field_validator("data_file")
    @classmethod
    def expand_data_file(cls, v: Path) -> Path:
        return Path(v).expanduser()


class SearchConfig(BaseModel):
    """Defaults for the search and list commands."""

    default_cemetery: Optional[int] = Field(None, ge=0, description="Cemetery searched when none is given")
    include_placeholders: bool = Field(False, description="Show graves with neither name nor dates")


class GraveFinderConfig(BaseModel):
    """Main Grave Finder configuration model."""

    general: GeneralConfig = Field(default_factory=GeneralConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)

    model_config = {
        "extra": "forbid",
        "validate_assignment": True,
        "str_strip_whitespace": True,
    }


class GraveFinderSettings(BaseSettings):
    """Settings that can be overridden by environment variables."""

    gravefinder_data_file: Optional[str] = Field(None, alias="GRAVEFINDER_DATA_FILE")
    gravefinder_backup_enabled: Optional[bool] = Field(None, alias="GRAVEFINDER_BACKUP_ENABLED")

    gravefinder_logging_level: Optional[str] = Field(None, alias="GRAVEFINDER_LOGGING_LEVEL")
    gravefinder_logging_format: Optional[str] = Field(None, alias="GRAVEFINDER_LOGGING_FORMAT")
    gravefinder_logging_output: Optional[str] = Field(None, alias="GRAVEFINDER_LOGGING_OUTPUT")
    gravefinder_logging_file_path: Optional[str] = Field(None, alias="GRAVEFINDER_LOGGING_FILE_PATH")

    gravefinder_default_cemetery: Optional[int] = Field(None, alias="GRAVEFINDER_DEFAULT_CEMETERY")
    gravefinder_include_placeholders: Optional[bool] = Field(None, alias="GRAVEFINDER_INCLUDE_PLACEHOLDERS")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )
