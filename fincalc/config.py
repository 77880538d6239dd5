"""Application configuration management using Pydantic Settings."""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ALLOWED_ENVS = {"development", "testing", "production"}
ALLOWED_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
PLACEHOLDER_SECRET_KEY = "your-secret-key-here-change-in-production"


class Settings(BaseSettings):
    """Calculator service settings loaded from the environment or ``.env``."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # Application Environment
    app_env: str = Field(default="development", alias="APP_ENV")

    # Flask Configuration
    secret_key: str = Field(..., alias="SECRET_KEY")
    flask_app: str = Field(default="wsgi.py", alias="FLASK_APP")
    flask_env: str = Field(default="development", alias="FLASK_ENV")

    # Logging Configuration
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @field_validator("secret_key")
    @classmethod
    def validate_secret_key(cls, v: str) -> str:
        """Reject an empty or placeholder SECRET_KEY."""
        if not v or v == PLACEHOLDER_SECRET_KEY:
            raise ValueError("SECRET_KEY must be set to a secure value")
        return v

    @field_validator("app_env")
    @classmethod
    def validate_app_env(cls, v: str) -> str:
        if v not in ALLOWED_ENVS:
            raise ValueError(f"APP_ENV must be one of {ALLOWED_ENVS}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Accept any casing and store the level upper-cased."""
        level = v.upper()
        if level not in ALLOWED_LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {ALLOWED_LOG_LEVELS}")
        return level


def get_settings(env_file: Optional[str] = None) -> Settings:
    """Load settings, optionally from a specific env file."""
    if env_file is not None:
        return Settings(_env_file=env_file)
    return Settings()


_settings: Optional[Settings] = None


def get_global_settings() -> Settings:
    """Get or create the process-wide settings instance."""
    global _settings
    if _settings is None:
        _settings = get_settings()
    return _settings


def reset_global_settings() -> None:
    """Drop the cached settings so the next access reloads them."""
    global _settings
    _settings = None
