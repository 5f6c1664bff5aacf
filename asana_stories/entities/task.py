from __future__ import annotations

from typing import Optional

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field


class Task(BaseModel):
    """Compact Asana task reference. Only the fields stories need are kept."""

    id: Optional[str] = Field(default=None, alias="gid")
    name: Optional[str] = Field(default=None)
    resource_type: Optional[str] = Field(default=None)

    model_config = ConfigDict(populate_by_name=True, extra="ignore")
