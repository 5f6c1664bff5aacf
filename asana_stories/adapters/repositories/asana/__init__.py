from asana_stories.adapters.repositories.asana.story_repository import (
    AsanaStoryRepository,
)

__all__ = ["AsanaStoryRepository"]
