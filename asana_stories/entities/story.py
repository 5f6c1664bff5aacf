from __future__ import annotations

from datetime import datetime
from typing import Any
from typing import Dict
from typing import List
from typing import Optional

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

from asana_stories.entities.constants import StoryType
from asana_stories.entities.task import Task
from asana_stories.entities.user import User
from asana_stories.utils.exceptions import EmptyResponseError


class StoryBase(BaseModel):
    """Text of a story, as used when creating or editing a comment.

    All fields are optional. A field left as ``None`` is not sent, so an update
    only touches what the caller set. ``text`` and ``html_text`` must not both
    be set on one update; Asana rejects such requests.
    """

    # Human-readable text, without the creator's name. Editable only on comments.
    # Not stable for system stories: wording such as "assigned to ..." may change.
    text: Optional[str] = Field(default=None)

    # Only returned when requested through opt_fields.
    html_text: Optional[str] = Field(default=None)

    is_pinned: Optional[bool] = Field(default=None)

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_payload(self) -> Dict[str, Any]:
        """Convert the content fields to the JSON body Asana expects."""
        return self.model_dump(
            mode="json",
            by_alias=True,
            exclude_none=True,
            include=set(StoryBase.model_fields),
        )


class Story(StoryBase):
    """An activity associated with a task.

    Stories are generated whenever users act on a task (creating it, assigning
    it, moving it between projects). Comments are a user-generated form of
    story. Apart from comment text and pinning, stories are read-only.
    """

    id: Optional[str] = Field(default=None, alias="gid")
    created_at: Optional[datetime] = Field(default=None)
    hearted: Optional[bool] = Field(
        default=None,
        description="True if the story is hearted by the authorized user.",
    )
    hearts: List[User] = Field(default_factory=list)
    num_hearts: Optional[int] = Field(default=None)
    created_by: Optional[User] = Field(default=None)
    target: Optional[Task] = Field(
        default=None,
        description="Object the story is attached to; currently always a task.",
    )
    source: Optional[str] = Field(
        default=None,
        description="Component of the product the user used to trigger the story.",
    )
    type: Optional[str] = Field(default=None)

    @property
    def is_comment(self) -> bool:
        return self.type == StoryType.COMMENT.value

    @classmethod
    def from_raw_story(cls, raw_story: Optional[Dict[str, Any]]) -> "Story":
        """Create from the ``data`` member of an API response.

        Raises:
            EmptyResponseError: If there is no story to decode.
        """
        if not raw_story or not isinstance(raw_story, dict):
            raise EmptyResponseError(f"Expected a story, got {raw_story!r}")
        return cls.model_validate(raw_story)
