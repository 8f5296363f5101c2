"""Pydantic schemas for user endpoints."""
from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, EmailStr, Field, field_validator


class UserUpdate(BaseModel):
    """Schema for updating the current user's profile. All fields optional."""

    email: EmailStr | None = None
    first_name: str | None = Field(
        default=None,
        max_length=255,
        validation_alias=AliasChoices("firstName", "first_name"),
    )
    last_name: str | None = Field(
        default=None,
        max_length=255,
        validation_alias=AliasChoices("lastName", "last_name"),
    )

    @field_validator("email")
    @classmethod
    def reject_null_email(cls, v: str | None) -> str:
        """Email may be omitted but not cleared."""
        if v is None:
            raise ValueError("must not be null")
        return v


class UserResponse(BaseModel):
    """Response model for user info. The password hash is never exposed."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    first_name: str | None = Field(serialization_alias="firstName")
    last_name: str | None = Field(serialization_alias="lastName")
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")
