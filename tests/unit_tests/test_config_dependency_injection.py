from __future__ import annotations

import unittest

from asana_stories.adapters.clients.asana_client import AsanaClient
from asana_stories.adapters.clients.in_memory_client import InMemoryAsanaClient
from asana_stories.adapters.repositories.asana.story_repository import (
    AsanaStoryRepository,
)
from asana_stories.config_dependency_injection import configure_container
from asana_stories.settings import ASANA_SETTINGS
from asana_stories.settings.asana_settings import AsanaConnectionSettings
from asana_stories.use_cases.interfaces.asana_client_interface import (
    AsanaClientInterface,
)
from asana_stories.use_cases.interfaces.story_repository_interface import (
    StoryRepositoryInterface,
)


class TestConfigureContainer(unittest.TestCase):
    def test_http_backend(self):
        settings = AsanaConnectionSettings(token="t", backend="http", _env_file=None)
        container = configure_container(settings)

        repository = container[StoryRepositoryInterface]

        self.assertIsInstance(repository, AsanaStoryRepository)
        self.assertIsInstance(repository.client, AsanaClient)
        self.assertIs(repository.client, container[AsanaClientInterface])
        self.assertIs(repository, container[StoryRepositoryInterface])

    def test_in_memory_backend(self):
        settings = AsanaConnectionSettings(backend="in_memory", _env_file=None)
        container = configure_container(settings)

        self.assertIsInstance(container[AsanaClientInterface], InMemoryAsanaClient)


    def test_defaults_to_module_settings(self):
        container = configure_container()

        self.assertIs(container[AsanaConnectionSettings], ASANA_SETTINGS)


if __name__ == "__main__":
    unittest.main()
