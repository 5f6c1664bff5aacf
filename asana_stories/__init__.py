from __future__ import annotations

__version__ = "1.4.2"
__name__ = "asana_stories"

import os
from pathlib import Path

DEFAULT_PATH = Path(os.path.realpath(__file__)).parents[1]


from chromatrace import LoggingConfig, LoggingSettings

from asana_stories.settings import LOGGING_SETTINGS as _log_settings

logging_config = LoggingConfig(
    settings=LoggingSettings(
        application_level=_log_settings.level,
        enable_tracing=True,
        ignore_nan_trace=True,
        log_level=_log_settings.level,
        file_path=_log_settings.file_path,
        enable_file_logging=_log_settings.enable_file_logging,
        max_bytes=_log_settings.max_bytes,
        backup_count=_log_settings.backup_count,
    )
)
LOGGER = logging_config.get_logger(__name__)


__all__ = ["__version__", "__name__", "LOGGER", "DEFAULT_PATH"]
