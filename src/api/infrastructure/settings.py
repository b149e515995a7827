"""Application settings using pydantic-settings.

Settings are loaded from environment variables with sensible defaults
for development.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["debug", "info", "warning", "error", "critical"]


class Settings(BaseSettings):
    """Logistics model settings.

    Environment variables:
        LOGISTICS_APP_NAME: Application name (default: Logistics Canonical Model)
        LOGISTICS_DEBUG: Debug mode (default: false)
        LOGISTICS_LOG_LEVEL: Minimum log level (default: info)
        LOGISTICS_FORCE_COLOR: Colored console logs outside a TTY (default: false)
    """

    model_config = SettingsConfigDict(
        env_prefix="LOGISTICS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = Field(
        default="Logistics Canonical Model", description="Application name"
    )
    debug: bool = Field(default=False, description="Debug mode")
    log_level: LogLevel = Field(default="info", description="Minimum log level")
    force_color: bool = Field(
        default=False,
        description="Render colored console logs even when not attached to a TTY",
    )

    @property
    def effective_log_level(self) -> LogLevel:
        """Debug mode always logs at debug level."""
        return "debug" if self.debug else self.log_level


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
