from __future__ import annotations

from asana_stories import DEFAULT_PATH
from asana_stories.settings.asana_settings import AsanaConnectionSettings
from asana_stories.settings.logging_settings import AsanaLoggingSettings

ASANA_SETTINGS = AsanaConnectionSettings(_env_file=f"{DEFAULT_PATH}/.env")
LOGGING_SETTINGS = AsanaLoggingSettings(_env_file=f"{DEFAULT_PATH}/.env")
