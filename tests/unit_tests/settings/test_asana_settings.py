"""Tests for AsanaConnectionSettings."""

import json
import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from asana_stories.settings.asana_settings import AsanaClientBackend
from asana_stories.settings.asana_settings import AsanaConnectionSettings
from asana_stories.utils.pydantic_advanced_settings import CONFIG_FILE_ENV


class TestAsanaConnectionSettings(unittest.TestCase):
    def setUp(self) -> None:
        self.temp_dir = tempfile.TemporaryDirectory()
        self.missing_config = str(Path(self.temp_dir.name) / "missing.json")

    def tearDown(self) -> None:
        self.temp_dir.cleanup()

    def test_defaults(self) -> None:
        with patch.dict(os.environ, {CONFIG_FILE_ENV: self.missing_config}):
            os.environ.pop("ASANA_TOKEN", None)
            os.environ.pop("ASANA_BASE_URL", None)
            os.environ.pop("ASANA_BACKEND", None)
            settings = AsanaConnectionSettings(_env_file=None)

        self.assertIsNone(settings.token)
        self.assertEqual(settings.api_root, "https://app.asana.com/api/1.0")
        self.assertEqual(settings.backend, AsanaClientBackend.HTTP)

    def test_reads_environment(self) -> None:
        env = {
            CONFIG_FILE_ENV: self.missing_config,
            "ASANA_TOKEN": "from-env",
            "ASANA_BASE_URL": "https://asana.example.com/api/1.0/",
            "ASANA_TIMEOUT": "12.5",
        }
        with patch.dict(os.environ, env):
            settings = AsanaConnectionSettings(_env_file=None)

        self.assertEqual(settings.token, "from-env")
        self.assertEqual(settings.timeout, 12.5)
        self.assertEqual(settings.api_root, "https://asana.example.com/api/1.0")

    def test_reads_json_config_file(self) -> None:
        config_path = Path(self.temp_dir.name) / "asana.json"
        config_path.write_text(
            json.dumps({"token": "from-json", "backend": "in_memory"}),
            encoding="utf-8",
        )
        with patch.dict(os.environ, {CONFIG_FILE_ENV: str(config_path)}):
            os.environ.pop("ASANA_TOKEN", None)
            os.environ.pop("ASANA_BACKEND", None)
            settings = AsanaConnectionSettings(_env_file=None)

        self.assertEqual(settings.token, "from-json")
        self.assertEqual(settings.backend, AsanaClientBackend.IN_MEMORY)

    def test_environment_wins_over_json_config_file(self) -> None:
        config_path = Path(self.temp_dir.name) / "asana.json"
        config_path.write_text(json.dumps({"token": "from-json"}), encoding="utf-8")
        env = {CONFIG_FILE_ENV: str(config_path), "ASANA_TOKEN": "from-env"}
        with patch.dict(os.environ, env):
            settings = AsanaConnectionSettings(_env_file=None)

        self.assertEqual(settings.token, "from-env")

    def test_init_arguments_win(self) -> None:
        with patch.dict(os.environ, {"ASANA_TOKEN": "from-env"}):
            settings = AsanaConnectionSettings(token="explicit", _env_file=None)

        self.assertEqual(settings.token, "explicit")


if __name__ == "__main__":
    unittest.main()
