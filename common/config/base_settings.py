"""
Base settings class for environment configuration.

Uses Pydantic Settings for automatic environment variable loading.
Extend this class for application-specific settings.

Example:
    from common.config import BaseAppSettings

    class Settings(BaseAppSettings):
        SEED_SAMPLE_USERS: bool = True

    settings = Settings()
    print(settings.STORAGE_BACKEND)
"""

import logging
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


STORAGE_BACKENDS = ("memory", "file")


class BaseAppSettings(BaseSettings):
    """
    Base settings class with common configuration options.

    Automatically loads values from environment variables.
    Extend this class for application-specific settings.
    """

    # ==========================================================================
    # Storage Settings
    # ==========================================================================
    STORAGE_BACKEND: str = "memory"  # "memory" or "file"
    STORAGE_PATH: Optional[str] = None  # JSON file used by the "file" backend

    # ==========================================================================
    # Authentication Settings
    # ==========================================================================
    BCRYPT_ROUNDS: int = 12
    REQUIRE_STRONG_SECRETS: bool = False

    # ==========================================================================
    # Runtime Settings
    # ==========================================================================
    DEBUG: bool = False
    ENVIRONMENT: str = "development"  # development, staging, production
    LOG_LEVEL: str = "INFO"

    # ==========================================================================
    # Pydantic Settings Configuration
    # ==========================================================================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="allow",  # Allow app-specific settings
        case_sensitive=True,
    )

    def get_log_level(self) -> int:
        """Resolve LOG_LEVEL to a logging level, DEBUG forcing debug output."""
        if self.DEBUG:
            return logging.DEBUG
        level = logging.getLevelName(self.LOG_LEVEL.upper())
        return level if isinstance(level, int) else logging.INFO

    def validate_required(self) -> None:
        """
        Validate that required settings are configured.

        Raises:
            ValueError: If required settings are missing
        """
        errors = []

        if self.STORAGE_BACKEND not in STORAGE_BACKENDS:
            errors.append(
                f"STORAGE_BACKEND must be one of {', '.join(STORAGE_BACKENDS)}"
            )

        if self.STORAGE_BACKEND == "file" and not self.STORAGE_PATH:
            errors.append("STORAGE_PATH is required when using the file storage backend")

        if not 4 <= self.BCRYPT_ROUNDS <= 31:
            errors.append("BCRYPT_ROUNDS must be between 4 and 31")

        if errors:
            raise ValueError("Configuration errors:\n- " + "\n- ".join(errors))
