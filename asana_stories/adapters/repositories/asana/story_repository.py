"""Asana story repository.

This module binds the story endpoints of the Asana API to typed models.
"""

from __future__ import annotations

from typing import List
from typing import Optional
from typing import Tuple

from asana_stories import LOGGER
from asana_stories.entities.pagination import NextPage
from asana_stories.entities.pagination import Options
from asana_stories.entities.story import Story
from asana_stories.entities.story import StoryBase
from asana_stories.entities.task import Task
from asana_stories.use_cases.interfaces.asana_client_interface import (
    AsanaClientInterface,
)
from asana_stories.use_cases.interfaces.story_repository_interface import (
    StoryRepositoryInterface,
)


class AsanaStoryRepository(StoryRepositoryInterface):
    """Repository for the stories attached to Asana tasks.

    Holds no state besides the client. Each method issues exactly one request
    and lets any client error propagate unchanged.
    """

    def __init__(self, client: AsanaClientInterface):
        """Initialize the story repository.

        Args:
            client: Shared client that performs the HTTP calls.
        """
        self.client = client

    def list_stories(
        self, task_id: str, *options: Options
    ) -> Tuple[List[Story], Optional[NextPage]]:
        """List the stories attached to a task.

        Args:
            task_id: Global id of the task.
            *options: Query options such as ``fields``, ``limit`` or ``offset``.

        Returns:
            The stories in server order and the cursor of the next page, or
            ``None`` when there is none.
        """
        LOGGER.debug(f"Listing stories for task {task_id}")

        data, next_page = self.client.get(f"/tasks/{task_id}/stories", None, *options)
        stories = [Story.from_raw_story(raw_story) for raw_story in data or []]
        return stories, next_page

    def create_comment(self, task_id: str, content: StoryBase) -> Story:
        """Add a comment story to a task.

        Args:
            task_id: Global id of the task.
            content: Text of the comment and whether to pin it.

        Returns:
            The created story, with the id, creator and creation time assigned
            by the server.
        """
        LOGGER.info(f"Creating comment for task {task_id}")

        data = self.client.post(f"/tasks/{task_id}/stories", content)
        return Story.from_raw_story(data)

    def update_story(self, story_id: str, content: StoryBase) -> Story:
        """Update a story and return its full record.

        Only comment stories can have their text updated, and only comment and
        attachment stories can be pinned. Only one of ``text`` and
        ``html_text`` can be specified.

        Args:
            story_id: Global id of the story.
            content: Fields to change; unset fields are left untouched.

        Returns:
            The full updated story.
        """
        LOGGER.info(f"Updating story {story_id}")

        data = self.client.put(f"/stories/{story_id}", content)
        return Story.from_raw_story(data)

    def stories_for_task(
        self, task: Task, *options: Options
    ) -> Tuple[List[Story], Optional[NextPage]]:
        LOGGER.debug(f"Listing stories for {task.name!r}")
        return self.list_stories(task.id, *options)

    def comment_on_task(self, task: Task, content: StoryBase) -> Story:
        LOGGER.info(f"Creating comment for task {task.name!r}")
        return self.create_comment(task.id, content)

    def update(self, story: Story, content: StoryBase) -> Story:
        return self.update_story(story.id, content)
