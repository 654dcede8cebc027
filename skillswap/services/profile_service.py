"""Profile directory business logic service."""

import logging
from datetime import datetime, timezone
from typing import Any
from uuid import UUID

from postgrest.exceptions import APIError as PostgrestAPIError

from skillswap.api.middleware.error_handler import (
    NotFoundError,
    ProfileExistsError,
    ProfileRequiredError,
    ValidationError,
)
from skillswap.core.supabase import fetch_single, get_supabase_client
from skillswap.models.profile import ProfileCreate as ProfileInsert
from skillswap.models.profile import ProfileUpdate as ProfileChanges
from skillswap.schemas.auth import UserContext
from skillswap.schemas.profile import ProfileCreate, ProfileUpdate

logger = logging.getLogger(__name__)

# Postgres unique_violation, raised when two creates race past the lookup
UNIQUE_VIOLATION_CODE = "23505"

NULLABLE_FIELDS = frozenset({"location", "bio", "avatar_url"})


def can_view_profile(profile: dict[str, Any], viewer: UserContext | None) -> bool:
    """Check the read policy: public profiles for everyone, private for the owner.

    Args:
        profile: The profile row.
        viewer: The principal reading it, or None when anonymous.

    Returns:
        bool: True if the viewer may see the profile.
    """
    if profile.get("is_public"):
        return True
    return viewer is not None and str(profile.get("user_id")) == str(viewer.user_id)


class ProfileService:
    """Service for creating, reading and updating member profiles."""

    def __init__(self) -> None:
        """Initialize profile service with Supabase client."""
        self.client = get_supabase_client()

    async def find_profile_by_user_id(self, user_id: UUID) -> dict[str, Any] | None:
        """Get the profile owned by a user, ignoring visibility.

        Args:
            user_id: The auth user ID.

        Returns:
            dict | None: The profile data or None if the user has no profile.
        """
        return fetch_single(
            self.client.table("profiles")
            .select("*")
            .eq("user_id", str(user_id))
        )

    async def get_own_profile(self, user: UserContext) -> dict[str, Any]:
        """Get the caller's profile regardless of visibility.

        Args:
            user: The authenticated principal.

        Returns:
            dict: The profile data.

        Raises:
            ProfileRequiredError: If the caller has not created a profile yet.
        """
        profile = await self.find_profile_by_user_id(user.user_id)
        if not profile:
            raise ProfileRequiredError()
        return profile

    async def create_profile(self, user: UserContext, data: ProfileCreate) -> dict[str, Any]:
        """Create the caller's profile.

        A principal owns at most one profile. The existing-profile lookup runs
        first so a second attempt inserts nothing.

        Args:
            user: The authenticated principal.
            data: Profile fields. name and email default to the auth identity.

        Returns:
            dict: The created profile data.

        Raises:
            ProfileExistsError: If the caller already has a profile.
            ValidationError: If no name or email is available.
        """
        existing = await self.find_profile_by_user_id(user.user_id)
        if existing:
            logger.info("Profile already exists for user %s", user.user_id)
            raise ProfileExistsError()

        name = data.name or user.name
        email = data.email or user.email
        if not name:
            raise ValidationError("Name is required")
        if not email:
            raise ValidationError("Email is required")

        profile_data: ProfileInsert = {
            **data.model_dump(exclude={"name", "email"}),
            "user_id": str(user.user_id),
            "name": name,
            "email": email,
        }

        try:
            response = self.client.table("profiles").insert(profile_data).execute()
        except PostgrestAPIError as e:
            if e.code == UNIQUE_VIOLATION_CODE:
                raise ProfileExistsError() from e
            raise

        profile = response.data[0]
        logger.info("Created profile %s for user %s", profile["id"], user.user_id)
        return profile

    async def get_profile(
        self,
        profile_id: UUID,
        viewer: UserContext | None = None,
    ) -> dict[str, Any]:
        """Get a profile by profile ID as seen by a viewer.

        Private profiles are only returned to their owner. For anyone else
        they look exactly like a profile that does not exist.

        Args:
            profile_id: The profile's UUID.
            viewer: The principal reading the profile, or None.

        Returns:
            dict: The profile data.

        Raises:
            NotFoundError: If missing or not visible to the viewer.
        """
        profile = fetch_single(
            self.client.table("profiles")
            .select("*")
            .eq("id", str(profile_id))
        )

        if not profile or not can_view_profile(profile, viewer):
            raise NotFoundError("Profile not found")

        return profile

    async def update_profile(self, user: UserContext, data: ProfileUpdate) -> dict[str, Any]:
        """Update the caller's profile.

        Args:
            user: The authenticated principal; only their own row is touched.
            data: The fields to update.

        Returns:
            dict: The updated profile data.

        Raises:
            ProfileRequiredError: If the caller has no profile.
        """
        update_data: ProfileChanges = {
            key: value
            for key, value in data.model_dump(exclude_unset=True).items()
            if value is not None or key in NULLABLE_FIELDS
        }

        if not update_data:
            return await self.get_own_profile(user)

        update_data["updated_at"] = datetime.now(timezone.utc).isoformat()

        response = (
            self.client.table("profiles")
            .update(update_data)
            .eq("user_id", str(user.user_id))
            .execute()
        )

        if not response.data:
            raise ProfileRequiredError()

        return response.data[0]

    async def list_public_profiles(self, limit: int | None = None) -> list[dict[str, Any]]:
        """List public profiles, newest first.

        Args:
            limit: Optional maximum number of rows.

        Returns:
            list[dict]: Public profile rows.
        """
        query = (
            self.client.table("profiles")
            .select("*")
            .eq("is_public", True)
            .order("created_at", desc=True)
        )

        if limit is not None:
            query = query.limit(limit)

        response = query.execute()
        return response.data or []
