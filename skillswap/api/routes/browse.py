"""Member directory API routes."""

from typing import Annotated

from fastapi import APIRouter, Query

from skillswap.schemas.browse import ALL_AVAILABILITY, BrowseFilters, BrowseResponse, BrowseSort
from skillswap.schemas.profile import ProfileResponse
from skillswap.services.browse_service import BrowseService

router = APIRouter(prefix="/browse", tags=["browse"])


@router.get(
    "",
    response_model=BrowseResponse,
    summary="Browse members",
    description="Search and filter public profiles.",
)
async def browse_profiles(
    search: Annotated[str, Query(description="Name or skill substring")] = "",
    location: Annotated[str, Query(description="Location substring")] = "",
    availability: Annotated[str, Query(description="Availability value or 'all'")] = ALL_AVAILABILITY,
    sort: Annotated[BrowseSort, Query(description="Sort order")] = BrowseSort.NEWEST,
) -> BrowseResponse:
    """Filter and sort public profiles.

    Returns:
        BrowseResponse: Matching profiles with match and total counts.
    """
    filters = BrowseFilters(search=search, location=location, availability=availability, sort=sort)
    service = BrowseService()
    result = await service.browse(filters)
    return BrowseResponse(**result)


@router.get(
    "/featured",
    response_model=list[ProfileResponse],
    summary="Featured members",
    description="Newest public profiles for the landing page.",
)
async def featured_profiles(
    limit: Annotated[int | None, Query(ge=1, le=50, description="Number of profiles")] = None,
) -> list[ProfileResponse]:
    """List the newest public profiles."""
    service = BrowseService()
    profiles = await service.featured(limit)
    return [ProfileResponse(**profile) for profile in profiles]
