"""Dashboard Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field

from skillswap.schemas.profile import ProfileResponse
from skillswap.schemas.skill_request import SkillRequestWithProfile


class DashboardStats(BaseModel):
    """Counts derived from the member's requests and profile."""

    pending_incoming: int = Field(default=0, description="Incoming requests awaiting a response")
    incoming_total: int = Field(default=0, description="All incoming requests")
    sent_total: int = Field(default=0, description="All sent requests")
    total_requests: int = Field(default=0, description="Incoming plus sent requests")
    accepted: int = Field(default=0, description="Accepted requests in either direction")
    skills_offered: int = Field(default=0, description="Number of offered skills")
    skills_wanted: int = Field(default=0, description="Number of wanted skills")


class DashboardResponse(BaseModel):
    """Everything the dashboard page shows for the current member."""

    model_config = ConfigDict(from_attributes=True)

    profile: ProfileResponse
    incoming: list[SkillRequestWithProfile] = Field(default_factory=list)
    sent: list[SkillRequestWithProfile] = Field(default_factory=list)
    recent_activity: list[SkillRequestWithProfile] = Field(default_factory=list)
    stats: DashboardStats
