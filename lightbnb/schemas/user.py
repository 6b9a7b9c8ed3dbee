"""
Pydantic schemas for users.
Covers user creation input and the user row returned by lookups.
"""

from pydantic import BaseModel, EmailStr, Field, ConfigDict, field_validator


def normalize_email(email: str) -> str:
    """Emails are unique case-insensitively; every read and write goes through this."""
    return email.strip().lower()


class UserBase(BaseModel):
    """Base user schema with common fields."""

    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="User's display name"
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        """Validate and clean name."""
        if not v.strip():
            raise ValueError("Name cannot be empty")
        return v.strip()


class UserCreate(UserBase):
    """Schema for creating a new user. The password must already be hashed."""

    email: EmailStr = Field(..., description="User's email address")

    password: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Password hash, stored as given"
    )

    @field_validator("email", mode="after")
    @classmethod
    def lowercase_email(cls, v):
        return normalize_email(v)


class User(UserBase):
    """User row as stored in the users table."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    password: str
