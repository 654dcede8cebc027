"""Profile Pydantic schemas for API request/response models."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from skillswap.models.profile import Availability


def normalize_skills(skills: list[str]) -> list[str]:
    """Trim skill labels, drop blanks and exact duplicates.

    Insertion order is preserved and the first occurrence wins, matching the
    add-skill behaviour of the profile forms.

    Args:
        skills: Raw skill labels.

    Returns:
        list[str]: Cleaned skill labels.
    """
    cleaned: list[str] = []
    for skill in skills:
        label = skill.strip()
        if label and label not in cleaned:
            cleaned.append(label)
    return cleaned


def _strip_optional(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


class ProfileBase(BaseModel):
    """Base profile fields shared across schemas."""

    location: str | None = Field(default=None, max_length=255, description="Free-text location")
    bio: str | None = Field(default=None, description="Short introduction")
    avatar_url: str | None = Field(default=None, description="URL to the member's avatar image")
    skills_offered: list[str] = Field(default_factory=list, description="Skills the member can teach")
    skills_wanted: list[str] = Field(default_factory=list, description="Skills the member wants to learn")
    availability: str = Field(default=Availability.FLEXIBLE.value, max_length=50, description="When the member is available")
    is_public: bool = Field(default=True, description="Whether other members can see the profile")

    @field_validator("skills_offered", "skills_wanted")
    @classmethod
    def clean_skills(cls, value: list[str]) -> list[str]:
        return normalize_skills(value)

    @field_validator("location", "bio", "avatar_url")
    @classmethod
    def blank_to_none(cls, value: str | None) -> str | None:
        return _strip_optional(value)


class ProfileCreate(ProfileBase):
    """Schema for creating the caller's profile.

    name and email default to the values supplied by the auth provider.
    """

    name: str | None = Field(default=None, max_length=255, description="Display name")
    email: str | None = Field(default=None, max_length=255, description="Contact email")

    @field_validator("name", "email")
    @classmethod
    def strip_identity(cls, value: str | None) -> str | None:
        return _strip_optional(value)


class ProfileUpdate(BaseModel):
    """Schema for updating a profile.

    All fields are optional for partial updates.
    """

    model_config = ConfigDict(from_attributes=True)

    name: str | None = Field(default=None, min_length=1, max_length=255, description="New display name")
    email: str | None = Field(default=None, min_length=1, max_length=255, description="New contact email")
    location: str | None = Field(default=None, max_length=255, description="New location")
    bio: str | None = Field(default=None, description="New bio")
    avatar_url: str | None = Field(default=None, description="New avatar URL")
    skills_offered: list[str] | None = Field(default=None, description="Replacement offered skills")
    skills_wanted: list[str] | None = Field(default=None, description="Replacement wanted skills")
    availability: str | None = Field(default=None, max_length=50, description="New availability")
    is_public: bool | None = Field(default=None, description="New visibility")

    @field_validator("skills_offered", "skills_wanted")
    @classmethod
    def clean_skills(cls, value: list[str] | None) -> list[str] | None:
        return normalize_skills(value) if value is not None else None

    @field_validator("name", "email")
    @classmethod
    def strip_required(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value


class ProfileResponse(ProfileBase):
    """Schema for profile API responses."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID = Field(description="Profile unique identifier")
    user_id: UUID = Field(description="Associated auth user ID")
    name: str = Field(description="Display name")
    email: str = Field(description="Contact email")
    created_at: datetime = Field(description="Profile creation timestamp")
    updated_at: datetime = Field(description="Last update timestamp")

    @field_validator("skills_offered", "skills_wanted", mode="before")
    @classmethod
    def null_skills(cls, value: list[str] | None) -> list[str]:
        return value or []

    @field_validator("availability", mode="before")
    @classmethod
    def null_availability(cls, value: str | None) -> str:
        return value or Availability.FLEXIBLE.value

    @field_validator("is_public", mode="before")
    @classmethod
    def null_visibility(cls, value: bool | None) -> bool:
        # Row policies only expose is_public = true, so NULL reads as private
        return bool(value)


class ProfileSummary(BaseModel):
    """Counterpart profile embedded in skill request listings."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID = Field(description="Profile unique identifier")
    user_id: UUID = Field(description="Associated auth user ID")
    name: str = Field(description="Display name")
    avatar_url: str | None = Field(default=None, description="Avatar image URL")
    location: str | None = Field(default=None, description="Free-text location")
