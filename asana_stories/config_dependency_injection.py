"""Dependency injection configuration for the Asana stories client."""

from __future__ import annotations

from typing import Optional

from lagom import Container, Singleton

from asana_stories import LOGGER
from asana_stories.adapters.clients.asana_client import AsanaClient
from asana_stories.adapters.clients.in_memory_client import InMemoryAsanaClient
from asana_stories.adapters.repositories.asana.story_repository import (
    AsanaStoryRepository,
)
from asana_stories.settings import ASANA_SETTINGS
from asana_stories.settings.asana_settings import AsanaClientBackend
from asana_stories.settings.asana_settings import AsanaConnectionSettings
from asana_stories.use_cases.interfaces.asana_client_interface import (
    AsanaClientInterface,
)
from asana_stories.use_cases.interfaces.story_repository_interface import (
    StoryRepositoryInterface,
)


def build_client(settings: AsanaConnectionSettings) -> AsanaClientInterface:
    """Build the client selected by the settings.

    Args:
        settings: Asana connection settings

    Returns:
        The HTTP client, or the in-memory one when ``backend`` asks for it
    """
    if settings.backend == AsanaClientBackend.IN_MEMORY:
        LOGGER.warning("Using the in-memory Asana client; nothing reaches Asana")
        return InMemoryAsanaClient()
    return AsanaClient(settings)


def configure_container(settings: Optional[AsanaConnectionSettings] = None) -> Container:
    """Configure the dependency injection container.

    Args:
        settings: Settings to register; ``ASANA_SETTINGS`` when omitted

    Returns:
        Configured Lagom container
    """
    container = Container()

    container[AsanaConnectionSettings] = settings if settings is not None else ASANA_SETTINGS

    # Bind INTERFACE -> ADAPTER
    container[AsanaClientInterface] = Singleton(
        lambda c: build_client(c[AsanaConnectionSettings])
    )
    container[StoryRepositoryInterface] = Singleton(
        lambda c: AsanaStoryRepository(c[AsanaClientInterface])
    )

    LOGGER.info("Container configured successfully")
    return container
