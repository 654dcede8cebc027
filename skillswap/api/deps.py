"""FastAPI dependency injection functions."""

from typing import Annotated

from fastapi import Depends, Header, HTTPException, status

from skillswap.api.middleware.auth import AuthError, AuthErrorCode, decode_jwt
from skillswap.schemas.auth import UserContext


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def extract_bearer_token(authorization: str) -> str:
    """Pull the token out of a "Bearer <token>" header value.

    Args:
        authorization: The Authorization header value.

    Returns:
        str: The raw token.

    Raises:
        HTTPException: 401 if the header is missing or malformed.
    """
    if not authorization:
        raise _unauthorized("Authorization header required")

    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise _unauthorized("Invalid authorization header format. Expected: Bearer <token>")

    return parts[1]


async def get_access_token(
    authorization: Annotated[str, Header(description="Bearer token")] = "",
) -> str:
    """Return the raw bearer token from the Authorization header."""
    return extract_bearer_token(authorization)


async def get_current_user(
    authorization: Annotated[str, Header(description="Bearer token")] = "",
) -> UserContext:
    """Extract and validate the current principal from the Authorization header.

    Use this for endpoints that require authentication.

    Args:
        authorization: The Authorization header value (Bearer token).

    Returns:
        UserContext: The authenticated user's context.

    Raises:
        HTTPException: 401 if token is missing, invalid, or expired.
    """
    token = extract_bearer_token(authorization)

    try:
        payload = decode_jwt(token)
        return payload.to_user_context()

    except AuthError as e:
        if e.code == AuthErrorCode.TOKEN_EXPIRED:
            raise _unauthorized("Token has expired") from e
        raise _unauthorized(e.message) from e

    except ValueError as e:
        # sub claim is not a UUID
        raise _unauthorized("Invalid token subject") from e


async def get_optional_user(
    authorization: Annotated[str | None, Header()] = None,
) -> UserContext | None:
    """Extract the current principal if an Authorization header is present.

    Public reads (browse, public profiles) work anonymously. A header that is
    present but invalid is still rejected.

    Args:
        authorization: Optional Authorization header value.

    Returns:
        UserContext | None: The user context if authenticated, None otherwise.
    """
    if not authorization:
        return None

    return await get_current_user(authorization)


CurrentUser = Annotated[UserContext, Depends(get_current_user)]
OptionalUser = Annotated[UserContext | None, Depends(get_optional_user)]
AccessToken = Annotated[str, Depends(get_access_token)]
