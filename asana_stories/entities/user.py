from __future__ import annotations

from typing import Optional

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field


class User(BaseModel):
    """Compact Asana user reference as it appears inside other resources."""

    id: Optional[str] = Field(default=None, alias="gid")
    name: Optional[str] = Field(default=None)
    email: Optional[str] = Field(default=None)
    resource_type: Optional[str] = Field(default=None)

    model_config = ConfigDict(populate_by_name=True, extra="ignore")
