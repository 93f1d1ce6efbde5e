"""
Note management schemas.

These schemas define the API contracts for note CRUD operations and the
pin toggle.
"""

import uuid
from datetime import datetime
from typing import Annotated, List, Optional

from pydantic import ConfigDict, Field, StrictBool, field_validator

from .common import CamelModel, RequestModel

Tag = Annotated[str, Field(min_length=1)]


class NoteCreate(RequestModel):
    """Note creation request schema."""

    title: str = Field(min_length=1, description="Note title")
    content: str = Field(min_length=1, description="Note content")
    tags: List[Tag] = Field(default_factory=list, description="Note tags, in order")

    @field_validator("tags", mode="before")
    @classmethod
    def default_tags(cls, v):
        """Treat an explicit null like an omitted list."""
        return [] if v is None else v

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Groceries",
                "content": "Milk, eggs, coffee",
                "tags": ["home", "shopping"],
            }
        }
    )


class NoteUpdate(RequestModel):
    """Note update request schema; only the fields sent are applied."""

    title: Optional[str] = Field(default=None, description="Note title, ignored when empty")
    content: Optional[str] = Field(default=None, description="Note content, ignored when empty")
    tags: Optional[List[Tag]] = Field(default=None, description="Replacement tag list")
    is_pinned: Optional[StrictBool] = Field(default=None, description="Pin flag, JSON boolean only")

    def changes(self) -> dict:
        """Fields present in the request with a non-null value.

        An empty title or content counts as not sent, so the other fields of
        the same edit are still applied.
        """
        data = self.model_dump(exclude_unset=True, exclude_none=True)
        for field in ("title", "content"):
            if data.get(field) == "":
                del data[field]
        return data

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"title": "Groceries (weekend)", "isPinned": True}
        }
    )


class NotePinUpdate(RequestModel):
    """Pin toggle request schema."""

    is_pinned: bool = Field(description="New pin state")

    model_config = ConfigDict(json_schema_extra={"example": {"isPinned": True}})


class NoteResponse(CamelModel):
    """Note response schema."""

    id: uuid.UUID = Field(description="Note unique identifier")
    title: str
    content: str
    tags: List[str]
    is_pinned: bool
    user_id: uuid.UUID = Field(description="Owner ID")
    created_on: datetime = Field(description="Creation timestamp")
    updated_at: datetime = Field(description="Last update timestamp")

    model_config = ConfigDict(from_attributes=True)


class NoteEnvelope(CamelModel):
    """Single note plus status message."""

    error: bool = False
    note: NoteResponse
    message: str


class NoteListResponse(CamelModel):
    """All notes of the caller, pinned first."""

    error: bool = False
    notes: List[NoteResponse]
