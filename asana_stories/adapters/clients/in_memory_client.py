"""In-memory Asana client for development and testing purposes."""

from __future__ import annotations

import re
from datetime import datetime
from datetime import timezone
from itertools import count
from typing import Any, Dict, List, Optional, Tuple

from asana_stories import LOGGER
from asana_stories.entities.constants import ResourceType
from asana_stories.entities.constants import StorySource
from asana_stories.entities.constants import StoryType
from asana_stories.entities.pagination import NextPage
from asana_stories.entities.pagination import Options
from asana_stories.use_cases.interfaces.asana_client_interface import (
    AsanaClientInterface,
)
from asana_stories.utils.exceptions import InvalidRequestError
from asana_stories.utils.exceptions import NotFoundError

TASK_STORIES_PATH = re.compile(r"^/?tasks/(?P<task_id>[^/]+)/stories$")
STORY_PATH = re.compile(r"^/?stories/(?P<story_id>[^/]+)$")


class InMemoryAsanaClient(AsanaClientInterface):
    """Stand-in for the Asana API that keeps stories in a dictionary.

    Only the story routes are served. Every call is appended to ``calls`` as
    ``(method, path, query, body)`` so tests can assert on what was sent.
    """

    def __init__(self, author: Optional[Dict[str, Any]] = None):
        LOGGER.info("Initializing in-memory Asana client")
        self.author = author or {"gid": "1", "name": "In Memory", "resource_type": ResourceType.USER.value}
        self.tasks: Dict[str, Dict[str, Any]] = {}
        self.stories: Dict[str, Dict[str, Any]] = {}
        self.task_stories: Dict[str, List[str]] = {}
        self.calls: List[Tuple[str, str, Dict[str, str], Any]] = []
        self._ids = count(1000)

    def add_task(self, task_id: str, name: str = "") -> Dict[str, Any]:
        task = {"gid": task_id, "name": name, "resource_type": ResourceType.TASK.value}
        self.tasks[task_id] = task
        self.task_stories.setdefault(task_id, [])
        return task

    def add_story(self, task_id: str, **fields: Any) -> Dict[str, Any]:
        """Attach a story to a task as if the server had generated it."""
        task = self._task(task_id)
        story = {
            "gid": str(next(self._ids)),
            "created_at": datetime.now(timezone.utc).isoformat(),
            "created_by": self.author,
            "target": task,
            "source": StorySource.API.value,
            "type": StoryType.SYSTEM.value,
            "hearted": False,
            "hearts": [],
            "num_hearts": 0,
        }
        story.update(fields)
        self.stories[story["gid"]] = story
        self.task_stories[task_id].append(story["gid"])
        return story

    def get(
        self,
        path: str,
        query: Optional[Dict[str, Any]] = None,
        *options: Options,
    ) -> Tuple[Any, Optional[NextPage]]:
        params = dict(query or {})
        params.update(Options.merge(*options))
        self.calls.append(("GET", path, params, None))

        match = TASK_STORIES_PATH.match(path)
        if match is None:
            raise self._not_found(path)
        task_id = match.group("task_id")
        self._task(task_id)

        story_ids = self.task_stories[task_id]
        start = self._page_number(params, "offset", 0)
        limit = self._page_number(params, "limit", len(story_ids))
        page = [dict(self.stories[gid]) for gid in story_ids[start:start + limit]]

        next_page = None
        if start + limit < len(story_ids):
            offset = str(start + limit)
            next_page = NextPage(
                offset=offset,
                path=f"/tasks/{task_id}/stories?limit={limit}&offset={offset}",
            )
        return page, next_page

    def post(self, path: str, body: Any = None, *options: Options) -> Any:
        payload = self._payload(body)
        self.calls.append(("POST", path, Options.merge(*options), payload))

        match = TASK_STORIES_PATH.match(path)
        if match is None:
            raise self._not_found(path)
        story = self.add_story(
            match.group("task_id"),
            **{**payload, "type": StoryType.COMMENT.value},
        )
        LOGGER.info(f"In-memory comment {story['gid']} created")
        return dict(story)

    def put(self, path: str, body: Any = None, *options: Options) -> Any:
        payload = self._payload(body)
        self.calls.append(("PUT", path, Options.merge(*options), payload))

        match = STORY_PATH.match(path)
        if match is None or match.group("story_id") not in self.stories:
            raise self._not_found(path)
        story = self.stories[match.group("story_id")]
        story.update(payload)
        return dict(story)

    def _task(self, task_id: str) -> Dict[str, Any]:
        if task_id not in self.tasks:
            raise self._not_found(f"/tasks/{task_id}")
        return self.tasks[task_id]

    @staticmethod
    def _page_number(params: Dict[str, str], name: str, default: int) -> int:
        # Offsets handed out here are numbers; any other cursor is one Asana never issued.
        if name not in params:
            return default
        try:
            return int(params[name])
        except ValueError:
            raise InvalidRequestError(
                400, [{"message": f"{name}: Invalid value {params[name]!r}"}]
            ) from None

    @staticmethod
    def _payload(body: Any) -> Dict[str, Any]:
        if body is None:
            return {}
        if hasattr(body, "to_payload"):
            return body.to_payload()
        return dict(body)

    @staticmethod
    def _not_found(path: str) -> NotFoundError:
        return NotFoundError(404, [{"message": f"{path}: Not Found"}])
