"""Authentication API routes."""

from fastapi import APIRouter

from skillswap.api.deps import AccessToken, CurrentUser
from skillswap.schemas.auth import AuthenticatedResponse, LogoutResponse
from skillswap.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get(
    "/me",
    response_model=AuthenticatedResponse,
    summary="Get current user",
    description="Get the authenticated user's identity from the JWT token.",
)
async def get_current_user_info(user: CurrentUser) -> AuthenticatedResponse:
    """Get the current principal.

    Args:
        user: The authenticated user context.

    Returns:
        AuthenticatedResponse: User ID, email, name and role.
    """
    return AuthenticatedResponse.for_user(user)


@router.post(
    "/logout",
    response_model=LogoutResponse,
    summary="Sign out",
    description="Revoke the session behind the bearer token.",
)
async def logout(user: CurrentUser, token: AccessToken) -> LogoutResponse:
    """Sign out the authenticated user.

    Args:
        user: The authenticated user context.
        token: The raw bearer token to revoke.

    Returns:
        LogoutResponse: Sign-out confirmation.
    """
    service = AuthService()
    result = await service.logout(token)
    return LogoutResponse(**result)
