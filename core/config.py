"""
Configuration management using Pydantic Settings.
Follows Single Responsibility Principle - only handles configuration.

The request gateway takes its base endpoint as a constructor argument.
Settings only feed the defaults built by the DI container, the singleton
getters and the scripts.
"""

from functools import lru_cache

from pydantic import Field  # type: ignore
from pydantic_settings import BaseSettings, SettingsConfigDict  # type: ignore

from core.constants import (
    DEFAULT_AUDIO_PLAYER_COMMAND,
    HTTP_CONNECT_TIMEOUT,
    HTTP_POOL_TIMEOUT,
    HTTP_READ_TIMEOUT,
    HTTP_WRITE_TIMEOUT,
)


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="SightGuide Client", alias="APP_NAME")
    app_version: str = Field(default="1.0.0", alias="APP_VERSION")
    debug: bool = Field(default=False, alias="DEBUG")

    # Backend
    base_url: str = Field(
        default="http://192.168.3.38:8080", alias="SIGHTGUIDE_BASE_URL"
    )
    http_connect_timeout: float = Field(
        default=HTTP_CONNECT_TIMEOUT, alias="HTTP_CONNECT_TIMEOUT"
    )
    http_read_timeout: float = Field(default=HTTP_READ_TIMEOUT, alias="HTTP_READ_TIMEOUT")
    http_write_timeout: float = Field(
        default=HTTP_WRITE_TIMEOUT, alias="HTTP_WRITE_TIMEOUT"
    )
    http_pool_timeout: float = Field(default=HTTP_POOL_TIMEOUT, alias="HTTP_POOL_TIMEOUT")

    # Storage
    # Downloaded label audio is written here before playback
    temp_dir: str = Field(default="/tmp/sightguide_audio", alias="TEMP_DIR")
    # Local voice recordings waiting to be uploaded
    recordings_dir: str = Field(default="recordings", alias="RECORDINGS_DIR")

    # Audio playback
    audio_player_command: str = Field(
        default=DEFAULT_AUDIO_PLAYER_COMMAND, alias="AUDIO_PLAYER_COMMAND"
    )
    audio_player_timeout_seconds: int = Field(
        default=120, alias="AUDIO_PLAYER_TIMEOUT_SECONDS"
    )

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    # Log format: "console" (colored, human-readable) or "json" (for log aggregation)
    log_format: str = Field(default="console", alias="LOG_FORMAT")
    # File logging (logs/app.log and logs/error.log) is off for a client library
    log_file_enabled: bool = Field(default=False, alias="LOG_FILE_ENABLED")
    script_log_level: str = Field(default="INFO", alias="SCRIPT_LOG_LEVEL")


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Using lru_cache to ensure single instance (Singleton pattern).
    """
    return Settings()
