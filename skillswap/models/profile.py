"""Profile model type definitions for database operations."""

from datetime import datetime
from enum import Enum
from typing import TypedDict
from uuid import UUID


class Availability(str, Enum):
    """Recognised availability values.

    The column is free text and is not strictly validated; these are the
    values offered by the profile forms.
    """

    FLEXIBLE = "flexible"
    WEEKENDS = "weekends"
    EVENINGS = "evenings"
    WEEKDAYS = "weekdays"
    LIMITED = "limited"


class Profile(TypedDict):
    """Profile table row representation.

    Represents a member profile stored in the profiles table.
    Maps directly to the database schema.
    """

    id: UUID
    user_id: UUID
    name: str
    email: str
    location: str | None
    bio: str | None
    avatar_url: str | None
    skills_offered: list[str]
    skills_wanted: list[str]
    availability: str
    is_public: bool
    created_at: datetime
    updated_at: datetime


class ProfileCreate(TypedDict, total=False):
    """Insert payload for a new profile.

    user_id, name and email are required; other fields fall back to the
    column defaults. IDs are sent as strings.
    """

    user_id: str
    name: str
    email: str
    location: str | None
    bio: str | None
    avatar_url: str | None
    skills_offered: list[str]
    skills_wanted: list[str]
    availability: str
    is_public: bool


class ProfileUpdate(TypedDict, total=False):
    """Update payload for a profile.

    All fields are optional for partial updates; updated_at is an ISO string.
    """

    name: str
    email: str
    location: str | None
    bio: str | None
    avatar_url: str | None
    skills_offered: list[str]
    skills_wanted: list[str]
    availability: str
    is_public: bool
    updated_at: str
