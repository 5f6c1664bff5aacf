from __future__ import annotations

from abc import ABC
from abc import abstractmethod
from typing import List
from typing import Optional
from typing import Tuple

from asana_stories.entities.pagination import NextPage
from asana_stories.entities.pagination import Options
from asana_stories.entities.story import Story
from asana_stories.entities.story import StoryBase


class StoryRepositoryInterface(ABC):
    @abstractmethod
    def list_stories(
        self, task_id: str, *options: Options
    ) -> Tuple[List[Story], Optional[NextPage]]:
        pass

    @abstractmethod
    def create_comment(self, task_id: str, content: StoryBase) -> Story:
        pass

    @abstractmethod
    def update_story(self, story_id: str, content: StoryBase) -> Story:
        pass
