"""Pydantic schemas for signup and signin."""
from pydantic import BaseModel, EmailStr, Field, field_validator

# bcrypt refuses passwords longer than 72 bytes
MAX_PASSWORD_BYTES = 72


class AuthCredentials(BaseModel):
    """Email and password submitted to signup and signin."""

    email: EmailStr
    password: str = Field(..., min_length=1)

    @field_validator("password")
    @classmethod
    def limit_password_bytes(cls, v: str) -> str:
        """Measure the limit in UTF-8 bytes, not characters."""
        if len(v.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"must be at most {MAX_PASSWORD_BYTES} bytes when UTF-8 encoded")
        return v


class AccessTokenResponse(BaseModel):
    """Access token issued after a successful signup or signin."""

    access_token: str
