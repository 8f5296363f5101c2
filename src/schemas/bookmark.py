"""Pydantic schemas for bookmark endpoints."""
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BookmarkCreate(BaseModel):
    """Schema for creating a new bookmark."""

    title: str = Field(..., min_length=1, max_length=500)
    link: str = Field(..., min_length=1)
    description: str | None = None


class BookmarkUpdate(BaseModel):
    """
    Schema for updating an existing bookmark.

    Only fields present in the request body are applied. The owner is not
    part of this schema, so ownership can never change through an update.
    """

    title: str | None = Field(default=None, min_length=1, max_length=500)
    link: str | None = Field(default=None, min_length=1)
    description: str | None = None

    @field_validator("title", "link")
    @classmethod
    def reject_null(cls, v: str | None) -> str:
        """Title and link may be omitted but not cleared."""
        if v is None:
            raise ValueError("must not be null")
        return v


class BookmarkResponse(BaseModel):
    """Schema for bookmark responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int = Field(serialization_alias="userId")
    title: str
    link: str
    description: str | None
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")
