"""Dashboard API routes."""

from fastapi import APIRouter

from skillswap.api.deps import CurrentUser
from skillswap.schemas.dashboard import DashboardResponse
from skillswap.services.dashboard_service import DashboardService

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get(
    "",
    response_model=DashboardResponse,
    summary="Get my dashboard",
    description=(
        "Returns the caller's profile, incoming and sent requests and summary counts. "
        "Responds 404 with error type profile_required when no profile exists yet."
    ),
)
async def get_dashboard(user: CurrentUser) -> DashboardResponse:
    """Get the authenticated user's dashboard."""
    service = DashboardService()
    return await service.get_dashboard(user)
