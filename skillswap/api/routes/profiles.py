"""Profile API routes."""

from uuid import UUID

from fastapi import APIRouter, status

from skillswap.api.deps import CurrentUser, OptionalUser
from skillswap.schemas.profile import ProfileCreate, ProfileResponse, ProfileUpdate
from skillswap.services.profile_service import ProfileService

router = APIRouter(prefix="/profiles", tags=["profiles"])


@router.post(
    "",
    response_model=ProfileResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create my profile",
    description="Creates the authenticated user's profile. Fails with 409 if one already exists.",
)
async def create_my_profile(data: ProfileCreate, user: CurrentUser) -> ProfileResponse:
    """Create the authenticated user's profile.

    Args:
        data: Profile fields.
        user: The authenticated user context.

    Returns:
        ProfileResponse: The created profile.

    Raises:
        ProfileExistsError: 409 if the user already has a profile.
    """
    service = ProfileService()
    profile = await service.create_profile(user, data)
    return ProfileResponse(**profile)


@router.get(
    "/me",
    response_model=ProfileResponse,
    summary="Get current user's profile",
    description="Returns the authenticated user's profile, public or not.",
)
async def get_my_profile(user: CurrentUser) -> ProfileResponse:
    """Get the authenticated user's profile.

    Raises:
        ProfileRequiredError: 404 with error type profile_required if none exists.
    """
    service = ProfileService()
    profile = await service.get_own_profile(user)
    return ProfileResponse(**profile)


@router.put(
    "/me",
    response_model=ProfileResponse,
    summary="Update current user's profile",
    description="Updates the authenticated user's profile with provided fields.",
)
async def update_my_profile(data: ProfileUpdate, user: CurrentUser) -> ProfileResponse:
    """Update the authenticated user's profile.

    Args:
        data: Fields to update.
        user: The authenticated user context.

    Returns:
        ProfileResponse: The updated profile data.
    """
    service = ProfileService()
    profile = await service.update_profile(user, data)
    return ProfileResponse(**profile)


@router.get(
    "/{profile_id}",
    response_model=ProfileResponse,
    summary="Get a profile",
    description="Returns a public profile, or the caller's own profile. Private profiles of others are reported as not found.",
)
async def get_profile(profile_id: UUID, user: OptionalUser) -> ProfileResponse:
    """Get a profile by ID.

    Args:
        profile_id: The profile's UUID.
        user: The authenticated user context, if any.

    Returns:
        ProfileResponse: The profile data.
    """
    service = ProfileService()
    profile = await service.get_profile(profile_id, user)
    return ProfileResponse(**profile)
