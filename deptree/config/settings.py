"""
Application settings and configuration management.
"""

from typing import List
from pydantic_settings import BaseSettings
from pydantic import Field, field_validator
from enum import Enum

from ..core.exceptions import HostVersionError
from ..core.versions import parse_major_minor


class LogLevel(str, Enum):
    """Log level enumeration."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Settings(BaseSettings):
    """Dependency tree extraction settings with environment variable support."""

    # Application settings
    app_name: str = Field(default="deptree", description="Application name")
    log_level: LogLevel = Field(default=LogLevel.INFO, description="Logging level")
    log_dir: str = Field(default="logs", description="Directory for log files")
    enable_file_logging: bool = Field(default=False, description="Write JSON log files to log_dir")

    # Host build tool settings
    host_name: str = Field(default="Gradle", description="Host build tool name used in diagnostics")
    minimum_host_version: str = Field(default="2.14", description="Minimum supported host version")
    unspecified_version: str = Field(default="unspecified", description="Host sentinel for a missing project version")
    tree_model_name: str = Field(default="DependencyTreeModel", description="Model name answered by the builder")

    # Processing settings
    max_workers: int = Field(default=1, description="Configurations resolved concurrently")

    model_config = {
        "env_prefix": "DEPTREE_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore"
    }

    @field_validator("minimum_host_version")
    @classmethod
    def _check_minimum_host_version(cls, value: str) -> str:
        try:
            parse_major_minor(value)
        except HostVersionError as e:
            raise ValueError(e.message) from e
        return value

    def minimum_major_minor(self) -> tuple:
        """Get the minimum host version as a (major, minor) pair."""
        return parse_major_minor(self.minimum_host_version)

    def get_logging_config(self) -> dict:
        """Get keyword arguments for setup_logging."""
        return {
            "log_level": self.log_level.value,
            "log_dir": self.log_dir,
            "enable_file": self.enable_file_logging,
        }

    def validate_settings(self) -> List[str]:
        """Validate settings and return list of warnings."""
        warnings = []

        if self.max_workers < 1:
            warnings.append("max_workers must be at least 1 - falling back to sequential processing")

        if self.max_workers > 8:
            warnings.append("High worker count may overload the host resolution engine")

        return warnings


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get application settings."""
    return settings


def reload_settings() -> Settings:
    """Reload settings from environment."""
    global settings
    settings = Settings()
    return settings
