from __future__ import annotations

from enum import Enum


class StoryType(Enum):
    """Story categories reported by Asana in the ``type`` field."""
    COMMENT = "comment"
    SYSTEM = "system"


class StorySource(Enum):
    """Product surfaces a story can originate from."""
    WEB = "web"
    EMAIL = "email"
    MOBILE = "mobile"
    API = "api"
    UNKNOWN = "unknown"


class ResourceType(Enum):
    TASK = "task"
    USER = "user"
    STORY = "story"
