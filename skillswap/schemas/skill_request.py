"""Skill request Pydantic schemas for API request/response models."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from skillswap.models.skill_request import SkillRequestStatus
from skillswap.schemas.profile import ProfileSummary


class SkillRequestCreate(BaseModel):
    """Schema for proposing a skill exchange to another member.

    Blank fields are let through here and rejected by the service so that
    nothing is inserted for an incomplete request.
    """

    to_profile_id: UUID = Field(description="Profile of the member receiving the request")
    skill_offered: str = Field(default="", max_length=255, description="One of the sender's offered skills")
    skill_wanted: str = Field(default="", max_length=255, description="One of the receiver's offered skills")
    message: str = Field(default="", max_length=2000, description="Message to the receiver")

    @field_validator("skill_offered", "skill_wanted", "message")
    @classmethod
    def strip_text(cls, value: str) -> str:
        return value.strip()


class SkillRequestResponse(BaseModel):
    """Schema for skill request API responses."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID = Field(description="Request unique identifier")
    from_user_id: UUID = Field(description="Auth user ID of the sender")
    to_user_id: UUID = Field(description="Auth user ID of the receiver")
    message: str = Field(description="Message from the sender")
    skill_offered: str = Field(description="Skill the sender offers")
    skill_wanted: str = Field(description="Skill the sender wants to learn")
    status: SkillRequestStatus = Field(description="Current request status")
    created_at: datetime = Field(description="Request creation timestamp")
    updated_at: datetime = Field(description="Last update timestamp")


class SkillRequestWithProfile(SkillRequestResponse):
    """Skill request joined with the counterpart's profile.

    Incoming requests carry from_profile, sent requests carry to_profile.
    """

    from_profile: ProfileSummary | None = Field(default=None, description="Sender profile")
    to_profile: ProfileSummary | None = Field(default=None, description="Receiver profile")
