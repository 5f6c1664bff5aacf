"""Interfaces the story binding depends on."""

from asana_stories.use_cases.interfaces.asana_client_interface import AsanaClientInterface
from asana_stories.use_cases.interfaces.story_repository_interface import (
    StoryRepositoryInterface,
)

__all__ = [
    "AsanaClientInterface",
    "StoryRepositoryInterface",
]
