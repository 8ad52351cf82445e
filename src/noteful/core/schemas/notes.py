"""
Note schemas.

As with folders, required-field checks live in the service; these schemas
only enforce types (``folder_id`` is coerced to an integer, so ``"1"`` is
accepted and ``"abc"`` is a 400).
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from ..sanitize import clean_content, escape_text


class NoteCreate(BaseModel):
    """Note creation request schema."""

    note_name: Optional[str] = Field(default=None, description="Note name")
    content: Optional[str] = Field(default=None, description="Note content, inline HTML allowed")
    folder_id: Optional[int] = Field(default=None, description="Id of the owning folder")
    modified: Optional[datetime] = Field(
        default=None, description="Modification time, defaults to now"
    )

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={
            "example": {
                "note_name": "Dogs",
                "content": "Corgis are <strong>great</strong>.",
                "folder_id": 1,
                "modified": "2019-01-03T00:00:00.000Z",
            }
        },
    )


class NoteUpdate(BaseModel):
    """Note update request schema - any subset of the fields."""

    note_name: Optional[str] = Field(default=None, description="Note name")
    content: Optional[str] = Field(default=None, description="Note content")
    folder_id: Optional[int] = Field(default=None, description="Id of the owning folder")

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={"example": {"note_name": "Cats"}},
    )


class NoteResponse(BaseModel):
    """Note response schema."""

    id: int = Field(description="Note id")
    note_name: str = Field(description="Note name, HTML-escaped")
    modified: datetime = Field(description="Last modification time (UTC)")
    content: str = Field(description="Note content, sanitized")
    folder_id: int = Field(description="Id of the owning folder")

    model_config = ConfigDict(from_attributes=True)

    @field_validator("note_name")
    @classmethod
    def escape_note_name(cls, v):
        return escape_text(v)

    @field_validator("content")
    @classmethod
    def sanitize_content(cls, v):
        return clean_content(v)

    @field_serializer("modified")
    def serialize_modified(self, value: datetime) -> str:
        # 2029-01-22T16:28:32.615Z
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
