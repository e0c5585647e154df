"""
Application settings.

Loads configuration from environment variables using pydantic-settings.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # User-data backend
    backend_base_url: str = Field(
        default="http://localhost:8000",
        description="Base URL of the backend serving /user_data/{id}",
    )
    backend_timeout_seconds: float = Field(
        default=10.0, gt=0, description="Total timeout for one backend request"
    )

    # Earnings policy
    earnings_freeze_at_term: bool = Field(
        default=True,
        description="Stop accruing earnings once the plan term has elapsed",
    )

    # Application
    environment: str = "production"
    log_level: str = "INFO"
    log_file: str | None = None  # e.g. logs/dashboard.log

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator('backend_base_url')
    @classmethod
    def validate_backend_url(cls, v: str) -> str:
        """Validate backend URL scheme and drop the trailing slash."""
        if not v.startswith(('http://', 'https://')):
            raise ValueError(
                'BACKEND_BASE_URL must start with http:// or https://'
            )
        return v.rstrip('/')

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level name."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f'Invalid log level: {v}. Must be one of {LOG_LEVELS}')
        return level


# Global settings instance
settings = Settings()
