"""
Configuration management for the pager settings service
"""


import threading

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from pager_for_content_type.infrastructure.utilities.constants import FormSettings


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # Database configuration
    database_url: str = Field(
        default="sqlite:///data/pager_settings.db", description="Database connection URL"
    )

    # Application settings
    log_level: str = Field(default="INFO", description="Logging level")
    environment: str = Field(
        default="development", description="Application environment"
    )

    # Pager settings storage
    config_namespace: str = Field(
        default=FormSettings.CONFIG_NAME,
        description="Namespace of the pager configuration object",
        min_length=1,
    )


_settings_instance: Settings | None = None
_settings_lock = threading.Lock()


def get_config() -> Settings:
    """Get the global settings instance, ensuring thread safety."""
    global _settings_instance
    if _settings_instance is None:
        with _settings_lock:
            if _settings_instance is None:
                _settings_instance = Settings()
    return _settings_instance


def reset_config() -> None:
    """Drop the cached settings so the next get_config() re-reads the environment."""
    global _settings_instance
    with _settings_lock:
        _settings_instance = None
