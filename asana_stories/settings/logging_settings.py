from __future__ import annotations

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from asana_stories.utils.pydantic_advanced_settings import CustomizedSettings


class AsanaLoggingSettings(CustomizedSettings):
    """
    Settings for the package logger.
    These fields will be loaded from environment variables in .env:
      - ASANA_LOG_LEVEL
      - ASANA_LOG_FILE_PATH
      - ASANA_LOG_ENABLE_FILE_LOGGING
    """

    level: str = Field(default="INFO", description="Log level of the package logger")
    file_path: str = Field(default="asana_stories.log", description="Log file path")
    enable_file_logging: bool = Field(default=False)
    max_bytes: int = Field(default=10 * 1024 * 1024)
    backup_count: int = Field(default=5)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="asana_log_",
        extra="ignore",
    )
