from __future__ import annotations

from typing import Any
from typing import Dict
from typing import List
from typing import Optional

from pydantic import BaseModel
from pydantic import Field


class NextPage(BaseModel):
    """Cursor for the next page of a listing. Treat ``offset`` as opaque."""

    offset: str
    path: Optional[str] = Field(default=None)
    uri: Optional[str] = Field(default=None)

    @classmethod
    def from_raw(cls, raw_next_page: Optional[Dict[str, Any]]) -> Optional["NextPage"]:
        if not raw_next_page or not raw_next_page.get("offset"):
            return None
        return cls.model_validate(raw_next_page)


class Options(BaseModel):
    """Query options accepted by every Asana request."""

    pretty: Optional[bool] = Field(default=None, description="opt_pretty")
    fields: Optional[List[str]] = Field(
        default=None,
        description="opt_fields, e.g. ['text', 'html_text']",
    )
    expand: Optional[List[str]] = Field(default=None, description="opt_expand")
    limit: Optional[int] = Field(default=None)
    offset: Optional[str] = Field(default=None)

    def to_query(self) -> Dict[str, str]:
        """Convert the options that are set to query parameters."""
        query = {}
        if self.pretty:
            query["opt_pretty"] = "true"
        if self.fields:
            query["opt_fields"] = ",".join(self.fields)
        if self.expand:
            query["opt_expand"] = ",".join(self.expand)
        if self.limit is not None:
            query["limit"] = str(self.limit)
        if self.offset:
            query["offset"] = self.offset
        return query

    @classmethod
    def merge(cls, *options: Optional["Options"]) -> Dict[str, str]:
        """Merge several options into one query; later options win."""
        query: Dict[str, str] = {}
        for option in options:
            if option is not None:
                query.update(option.to_query())
        return query
