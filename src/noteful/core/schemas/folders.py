"""
Folder schemas.

Request fields are all optional at the schema level: presence is checked by
the service so the error messages match the API contract instead of
FastAPI's generic 422 body.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..sanitize import escape_text


class FolderCreate(BaseModel):
    """Folder creation request schema."""

    folder_name: Optional[str] = Field(default=None, description="Folder name")

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={"example": {"folder_name": "Important"}},
    )


class FolderUpdate(BaseModel):
    """Folder update request schema."""

    folder_name: Optional[str] = Field(default=None, description="New folder name")

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={"example": {"folder_name": "Super important"}},
    )


class FolderResponse(BaseModel):
    """Folder response schema."""

    id: int = Field(description="Folder id")
    folder_name: str = Field(description="Folder name, HTML-escaped")

    model_config = ConfigDict(from_attributes=True)

    @field_validator("folder_name")
    @classmethod
    def escape_folder_name(cls, v):
        """Rows written outside the API are escaped here too."""
        return escape_text(v)
