"""Dashboard aggregation service."""

from typing import Any

from skillswap.core.config import get_settings
from skillswap.models.skill_request import SkillRequestStatus
from skillswap.schemas.auth import UserContext
from skillswap.schemas.dashboard import DashboardResponse, DashboardStats
from skillswap.services.browse_service import row_created_at
from skillswap.services.profile_service import ProfileService
from skillswap.services.skill_request_service import SkillRequestService


def compute_stats(
    profile: dict[str, Any],
    incoming: list[dict[str, Any]],
    sent: list[dict[str, Any]],
) -> DashboardStats:
    """Derive dashboard counts from the profile and request lists."""
    accepted = SkillRequestStatus.ACCEPTED.value
    return DashboardStats(
        pending_incoming=sum(1 for r in incoming if r["status"] == SkillRequestStatus.PENDING.value),
        incoming_total=len(incoming),
        sent_total=len(sent),
        total_requests=len(incoming) + len(sent),
        accepted=sum(1 for r in incoming + sent if r["status"] == accepted),
        skills_offered=len(profile.get("skills_offered") or []),
        skills_wanted=len(profile.get("skills_wanted") or []),
    )


class DashboardService:
    """Joins a member's profile with their incoming and sent requests."""

    def __init__(self) -> None:
        """Initialize dashboard service."""
        self.profiles = ProfileService()
        self.requests = SkillRequestService()
        self.settings = get_settings()

    async def get_dashboard(self, user: UserContext) -> DashboardResponse:
        """Build the dashboard for the current member.

        Args:
            user: The authenticated principal.

        Returns:
            DashboardResponse: Profile, request lists, activity feed and stats.

        Raises:
            ProfileRequiredError: If the member has not created a profile.
        """
        profile = await self.profiles.get_own_profile(user)
        incoming = await self.requests.list_incoming(user)
        sent = await self.requests.list_sent(user)

        recent = sorted(incoming + sent, key=row_created_at, reverse=True)
        recent = recent[: self.settings.dashboard_recent_limit]

        return DashboardResponse(
            profile=profile,
            incoming=incoming,
            sent=sent,
            recent_activity=recent,
            stats=compute_stats(profile, incoming, sent),
        )
