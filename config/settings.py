"""
Centralized configuration for the mock lifecycle demo.

This module uses Pydantic Settings to load and validate environment variables.
Every value has a default, so importing it never requires a .env file.

Usage:
    from config import settings
    print(settings.demo_dir)

Environment Variables:
    MOCK_LIFECYCLE_AUTOSPEC_STATIC  Autospec static mocks (default: true)
    MOCK_LIFECYCLE_DEMO_DIR         Directory holding the demo modules
    MOCK_LIFECYCLE_PYTEST_ARGS      Extra pytest arguments for demo runs
    MOCK_LIFECYCLE_LOG_LEVEL        Logging level for the CLI
"""

import logging
import shlex
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="MOCK_LIFECYCLE_",
        extra="ignore",
    )

    # =========================================================================
    # Mock creation
    # =========================================================================
    autospec_static: bool = True

    # =========================================================================
    # Demo runs
    # =========================================================================
    demo_dir: str = "demos"
    pytest_args: str = "-q"

    # =========================================================================
    # Logging
    # =========================================================================
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {value!r}")
        return level

    def pytest_arg_list(self) -> List[str]:
        """Split pytest_args the way a shell would."""
        return shlex.split(self.pytest_args)


# Singleton instance for global settings
settings = Settings()
