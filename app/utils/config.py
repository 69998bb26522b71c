"""
Configuration management for dirqd.

Uses pydantic-settings to load daemon defaults from environment variables
and .env files, and a frozen pydantic model for the per-run queue
configuration supplied on the command line.
"""

from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from loguru import logger
from pydantic_settings import BaseSettings, SettingsConfigDict

from domains.file_queue.models import Disposition
from domains.file_queue.processors.matcher import validate_pattern


class Settings(BaseSettings):
    """Daemon settings loaded from environment."""

    # Logging
    log: str = "DEBUG"

    # Command execution (unset means wait forever)
    command_timeout: Optional[float] = None

    # Watch Configuration
    use_polling: bool = False
    poll_interval: float = 1.0

    model_config = SettingsConfigDict(
        env_prefix="DIRQD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("log")
    @classmethod
    def log_level_must_exist(cls, value: str) -> str:
        level = value.strip().upper()
        try:
            logger.level(level)
        except ValueError:
            raise ValueError(f"Unknown log level {value!r}") from None
        return level

    def get_log_level(self) -> str:
        """Normalised loguru level name."""
        return self.log.strip().upper()


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


class QueueConfig(BaseModel):
    """Validated, read-only configuration for one daemon run."""

    model_config = ConfigDict(frozen=True)

    directory: Path
    command: List[str]
    pattern: str = "*"
    processed_queue: Optional[Path] = None
    delete_on_success: bool = False
    error_queue: Optional[Path] = None
    delete_on_error: bool = False
    command_timeout: Optional[float] = None

    @field_validator("directory")
    @classmethod
    def directory_must_exist(cls, value: Path) -> Path:
        if not value.is_dir():
            raise ValueError(f"Directory {value} does not exist or is not a directory")
        return value

    @field_validator("command")
    @classmethod
    def command_must_not_be_empty(cls, value: List[str]) -> List[str]:
        if not value or not value[0]:
            raise ValueError("A command to invoke must be given")
        return value

    @field_validator("pattern")
    @classmethod
    def pattern_must_be_valid_glob(cls, value: str) -> str:
        if not value:
            raise ValueError("Pattern must not be empty")
        validate_pattern(value)
        return value

    @field_validator("command_timeout")
    @classmethod
    def timeout_must_be_positive(cls, value: Optional[float]) -> Optional[float]:
        if value is not None and value <= 0:
            raise ValueError("Command timeout must be greater than zero")
        return value

    @model_validator(mode="after")
    def check_dispositions(self) -> "QueueConfig":
        # Exactly one option of each pair
        if (self.error_queue is None) == (not self.delete_on_error):
            raise ValueError("Either -E/--error-queue or --delete-on-error must be specified")
        if (self.processed_queue is None) == (not self.delete_on_success):
            raise ValueError("Either -P/--processed-queue or --delete must be specified")
        return self

    @property
    def success_destination(self) -> Disposition:
        """Where files go after the command exits 0."""
        return Disposition(target=None if self.delete_on_success else self.processed_queue)

    @property
    def failure_destination(self) -> Disposition:
        """Where files go after a failed invocation."""
        return Disposition(target=None if self.delete_on_error else self.error_queue)
