from pydantic_settings import SettingsConfigDict
from pydantic import Field, HttpUrl
from typing import Optional

from enum import Enum

from asana_stories.utils.pydantic_advanced_settings import CustomizedSettings


DEFAULT_BASE_URL = "https://app.asana.com/api/1.0"


class AsanaClientBackend(Enum):
    HTTP = "http"
    IN_MEMORY = "in_memory"


class AsanaConnectionSettings(CustomizedSettings):
    token: Optional[str] = Field(
        default=None,
        description="Asana personal access token or OAuth bearer token",
    )
    base_url: HttpUrl = Field(
        default=DEFAULT_BASE_URL,
        description="Asana API root (e.g., https://app.asana.com/api/1.0)",
    )
    timeout: Optional[float] = Field(
        default=None,
        description="Seconds to wait for the server; no timeout when unset",
    )
    user_agent: str = Field(default="asana-stories")
    backend: AsanaClientBackend = Field(
        default=AsanaClientBackend.HTTP,
        description="Which client the container builds",
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_prefix="asana_", extra="ignore"
    )

    @property
    def api_root(self) -> str:
        """Base URL without the trailing slash pydantic adds to bare hosts.

        Returns:
            str: The API root used to build request URLs.
        """
        return str(self.base_url).rstrip("/")
