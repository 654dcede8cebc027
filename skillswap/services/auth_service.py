"""Authentication business logic service."""

import logging

from skillswap.core.supabase import create_auth_client

logger = logging.getLogger(__name__)


class AuthService:
    """Thin wrapper around the Supabase Auth provider."""

    def __init__(self) -> None:
        """Initialize auth service with an isolated Supabase client."""
        self.client = create_auth_client()

    async def logout(self, access_token: str) -> dict[str, str]:
        """Sign the user out by revoking the session behind the token.

        Args:
            access_token: User's access token.

        Returns:
            dict: Logout response.
        """
        try:
            self.client.auth.admin.sign_out(access_token)
            logger.info("User signed out")
        except Exception as e:
            # The client drops its token either way
            logger.error("Sign-out failed: %s", str(e))

        return {"message": "Signed out successfully"}
