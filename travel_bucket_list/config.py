"""
Configuration management for the Travel Bucket List planner.

This module handles loading configuration from environment variables
(optionally via a .env file): logging, where persisted state lives, and the
default planner settings used before the user has saved any of their own.
"""

import os
from dataclasses import dataclass, field
from enum import Enum

from dotenv import load_dotenv
from loguru import logger
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()


class LogLevel(str, Enum):
    """Log levels supported by the system."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class SystemConfig(BaseModel):
    """System-wide configuration."""

    log_level: LogLevel = Field(default=LogLevel.INFO, description="Logging level")
    log_file: str | None = Field(default=None, description="Optional log file path")
    environment: str = Field(
        default="development",
        description="Environment (development, test, production)",
    )

    @classmethod
    def from_env(cls) -> "SystemConfig":
        """Create a SystemConfig from environment variables."""
        return cls(
            log_level=LogLevel(os.getenv("LOG_LEVEL", "INFO").upper()),
            log_file=os.getenv("LOG_FILE") or None,
            environment=os.getenv("ENVIRONMENT", "development"),
        )


class StorageConfig(BaseModel):
    """Configuration for persisted planner state."""

    data_dir: str = Field(
        default=".bucket_list", description="Directory holding one JSON file per key"
    )
    undo_window_seconds: float = Field(
        default=5.0, description="How long a deleted trip can be restored"
    )
    save_retry_attempts: int = Field(
        default=3, description="Attempts made for a failing write"
    )

    @field_validator("save_retry_attempts")
    @classmethod
    def validate_attempts(cls, value: int) -> int:
        """At least one write attempt is always made."""
        if value < 1:
            raise ValueError(f"save_retry_attempts must be >= 1, got {value}")
        return value

    @classmethod
    def from_env(cls) -> "StorageConfig":
        """Create a StorageConfig from environment variables."""
        return cls(
            data_dir=os.getenv("DATA_DIR", ".bucket_list"),
            undo_window_seconds=float(os.getenv("UNDO_WINDOW_SECONDS", "5")),
            save_retry_attempts=int(os.getenv("SAVE_RETRY_ATTEMPTS", "3")),
        )


class DefaultsConfig(BaseModel):
    """Defaults applied when no settings or savings have been persisted."""

    annual_leave_days: int = Field(default=25, description="Leave days per year")
    timeline_start_year: int = Field(default=2025, description="First timeline year")
    timeline_end_year: int = Field(default=2035, description="Last timeline year")
    total_saved: float = Field(default=0, description="Amount saved so far")
    monthly_saving: float = Field(default=500, description="Saving rate per month")
    traveller_label: str = Field(
        default="Joe & Sophie", description="Who the plan belongs to"
    )

    @classmethod
    def from_env(cls) -> "DefaultsConfig":
        """Create a DefaultsConfig from environment variables."""
        return cls(
            annual_leave_days=int(os.getenv("ANNUAL_LEAVE_DAYS", "25")),
            timeline_start_year=int(os.getenv("TIMELINE_START_YEAR", "2025")),
            timeline_end_year=int(os.getenv("TIMELINE_END_YEAR", "2035")),
            total_saved=float(os.getenv("TOTAL_SAVED", "0")),
            monthly_saving=float(os.getenv("MONTHLY_SAVING", "500")),
            traveller_label=os.getenv("TRAVELLER_LABEL", "Joe & Sophie"),
        )


@dataclass
class PlannerConfig:
    """Main configuration class for the planner."""

    system: SystemConfig = field(default_factory=SystemConfig.from_env)
    storage: StorageConfig = field(default_factory=StorageConfig.from_env)
    defaults: DefaultsConfig = field(default_factory=DefaultsConfig.from_env)

    class ConfigurationError(Exception):
        """Exception raised for configuration validation errors."""

        pass

    def validate(self, raise_error: bool = False) -> bool:
        """
        Validate the entire configuration.

        Args:
            raise_error: If True, raise ConfigurationError instead of returning False

        Returns:
            True if configuration is valid, False otherwise

        Raises:
            ConfigurationError: If raise_error is True and validation fails
        """
        try:
            if self.defaults.annual_leave_days < 0:
                raise ValueError("Annual leave days cannot be negative")

            if self.defaults.timeline_start_year > self.defaults.timeline_end_year:
                raise ValueError("Timeline start year is after the end year")

            if self.storage.undo_window_seconds < 0:
                raise ValueError("Undo window cannot be negative")

            return True

        except ValueError as e:
            logger.error(f"Configuration validation failed: {e!s}")

            if raise_error:
                raise self.ConfigurationError(
                    f"Configuration validation failed: {e!s}"
                ) from e

            return False


# Global configuration instance
config = PlannerConfig()


def initialize_config(
    custom_config_path: str | None = None,
    validate: bool = True,
    raise_on_error: bool = False,
) -> PlannerConfig:
    """
    Initialize and validate the configuration.

    Args:
        custom_config_path: Path to a custom .env file to load
        validate: Whether to validate the configuration
        raise_on_error: Whether to raise an exception on validation failure

    Returns:
        Initialized and validated configuration object

    Raises:
        PlannerConfig.ConfigurationError: If validation fails and
            raise_on_error is True
        FileNotFoundError: If custom_config_path is provided but does not exist
    """
    if custom_config_path:
        if not os.path.exists(custom_config_path):
            error_msg = f"Custom configuration file not found: {custom_config_path}"
            logger.error(error_msg)
            raise FileNotFoundError(error_msg)

        logger.info(f"Loading custom configuration from {custom_config_path}")
        load_dotenv(custom_config_path, override=True)

        # Reload into the shared object so modules holding `config` see updates
        config.system = SystemConfig.from_env()
        config.storage = StorageConfig.from_env()
        config.defaults = DefaultsConfig.from_env()

    if validate:
        is_valid = config.validate(raise_error=raise_on_error)
        if not is_valid:
            logger.warning(
                "Configuration validation failed. Planner defaults may be "
                "unusable; check ANNUAL_LEAVE_DAYS and the TIMELINE_* variables."
            )

    return config
