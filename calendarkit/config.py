"""
Configuration management using Pydantic models loaded from YAML.
"""

import logging
from pathlib import Path
from typing import Optional

import pendulum
import yaml
from pydantic import BaseModel, Field, field_validator

from .domain.exceptions import ConfigError, ConfigFileNotFoundError
from .domain.models import WeekNumbering, WorkPattern

logger = logging.getLogger(__name__)

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ScheduleDefaults(BaseModel):
    """Default work pattern for schedule generation."""
    work_days: int = 5
    off_days: int = 2

    @field_validator("work_days")
    @classmethod
    def validate_work_days(cls, value: int) -> int:
        """Ensure at least one working day per cycle."""
        if value < 1:
            raise ValueError(f"work_days must be at least 1, got {value}")
        return value

    @field_validator("off_days")
    @classmethod
    def validate_off_days(cls, value: int) -> int:
        """Ensure days off are not negative."""
        if value < 0:
            raise ValueError(f"off_days must not be negative, got {value}")
        return value

    def get_pattern(self) -> WorkPattern:
        """Get the defaults as a WorkPattern."""
        return WorkPattern(work_days=self.work_days, off_days=self.off_days)


class AppConfig(BaseModel):
    """Library configuration."""
    timezone: str = "UTC"
    week_numbering: WeekNumbering = WeekNumbering.JANUARY_FIRST
    log_level: str = "INFO"
    schedule: ScheduleDefaults = Field(default_factory=ScheduleDefaults)

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, value: str) -> str:
        """Ensure the timezone exists in the tz database."""
        try:
            pendulum.timezone(value)
        except (ValueError, KeyError) as exc:
            raise ValueError(f"Unknown timezone: {value!r}") from exc
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Normalize the log level name."""
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {value!r}")
        return level

    @classmethod
    def load_from_yaml(cls, config_path: Path) -> "AppConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to the YAML config file

        Returns:
            AppConfig instance

        Raises:
            ConfigFileNotFoundError: If config file doesn't exist
            ConfigError: If the file is not valid YAML or not a mapping
            pydantic.ValidationError: If a setting has an invalid value
        """
        if not config_path.exists():
            raise ConfigFileNotFoundError(
                f"Config file not found: {config_path}\n"
                f"Please create a calendarkit.yaml file or use the defaults."
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ConfigError("Config file must contain a mapping at the root level.")

        return cls(**data)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "AppConfig":
        """
        Load configuration from an explicit path or the default location.

        Without a path, ``calendarkit.yaml`` is looked up via
        ``get_default_config_path``; if no such file exists the built-in
        defaults are returned.

        Raises:
            ConfigFileNotFoundError: If an explicit ``config_path`` doesn't exist
            ConfigError: If the file is not valid YAML or not a mapping
        """
        if config_path is not None:
            return cls.load_from_yaml(config_path)

        default_path = get_default_config_path()
        if not default_path.exists():
            logger.debug("No config file at %s, using defaults", default_path)
            return cls()

        logger.debug("Loading config from %s", default_path)
        return cls.load_from_yaml(default_path)


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    # Look for calendarkit.yaml in current directory
    current_dir = Path.cwd()
    config_path = current_dir / "calendarkit.yaml"

    if not config_path.exists():
        # Try in the project root (parent of calendarkit/)
        project_root = Path(__file__).parent.parent
        config_path = project_root / "calendarkit.yaml"

    return config_path
