"""Browse and search over public member profiles."""

from datetime import datetime, timezone
from typing import Any

from skillswap.core.config import get_settings
from skillswap.schemas.browse import ALL_AVAILABILITY, BrowseFilters, BrowseSort
from skillswap.services.profile_service import ProfileService

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


def row_created_at(row: dict[str, Any]) -> datetime:
    """Parse a row's created_at; rows without a parsable one sort as oldest."""
    value = row.get("created_at")
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    if not value:
        return _EPOCH
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return _EPOCH
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)


def matches_search(profile: dict[str, Any], term: str) -> bool:
    """Case-insensitive substring match on name, offered or wanted skills."""
    if not term:
        return True
    needle = term.lower()
    if needle in (profile.get("name") or "").lower():
        return True
    skills = (profile.get("skills_offered") or []) + (profile.get("skills_wanted") or [])
    return any(needle in skill.lower() for skill in skills)


def matches_location(profile: dict[str, Any], location: str) -> bool:
    """Case-insensitive substring match on location; no location never matches a filter."""
    if not location:
        return True
    value = profile.get("location")
    return bool(value) and location.lower() in value.lower()


def matches_availability(profile: dict[str, Any], availability: str) -> bool:
    """Exact case-insensitive availability match, or the 'all' sentinel."""
    if not availability or availability.lower() == ALL_AVAILABILITY:
        return True
    return (profile.get("availability") or "").lower() == availability.lower()


def sort_profiles(profiles: list[dict[str, Any]], sort: BrowseSort) -> list[dict[str, Any]]:
    """Order profiles; ties keep their incoming order."""
    if sort == BrowseSort.NEWEST:
        return sorted(profiles, key=row_created_at, reverse=True)
    if sort == BrowseSort.OLDEST:
        return sorted(profiles, key=row_created_at)
    if sort == BrowseSort.NAME:
        return sorted(profiles, key=lambda p: (p.get("name") or "").casefold())
    if sort == BrowseSort.SKILLS:
        return sorted(profiles, key=lambda p: len(p.get("skills_offered") or []), reverse=True)
    return list(profiles)


def filter_profiles(profiles: list[dict[str, Any]], filters: BrowseFilters) -> list[dict[str, Any]]:
    """Apply search, location and availability filters, then sort.

    Args:
        profiles: Snapshot of public profiles.
        filters: Filters and sort order.

    Returns:
        list[dict]: Matching profiles in the requested order.
    """
    matched = [
        profile
        for profile in profiles
        if matches_search(profile, filters.search)
        and matches_location(profile, filters.location)
        and matches_availability(profile, filters.availability)
    ]
    return sort_profiles(matched, filters.sort)


class BrowseService:
    """Service backing the member directory and landing page."""

    def __init__(self) -> None:
        """Initialize browse service."""
        self.profiles = ProfileService()
        self.settings = get_settings()

    async def browse(self, filters: BrowseFilters) -> dict[str, Any]:
        """Filter the full set of public profiles.

        The whole public set is loaded and filtered in memory.

        Args:
            filters: Filters and sort order.

        Returns:
            dict: profiles, count of matches and total public profiles.
        """
        snapshot = await self.profiles.list_public_profiles()
        matched = filter_profiles(snapshot, filters)
        return {
            "profiles": matched,
            "count": len(matched),
            "total": len(snapshot),
        }

    async def featured(self, limit: int | None = None) -> list[dict[str, Any]]:
        """Return the newest public profiles for the landing page.

        Args:
            limit: Number of profiles, defaults to the configured limit.

        Returns:
            list[dict]: Public profile rows.
        """
        return await self.profiles.list_public_profiles(limit=limit or self.settings.browse_featured_limit)
