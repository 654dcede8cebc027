"""Skill request model type definitions for database operations."""

from datetime import datetime
from enum import Enum
from typing import TypedDict
from uuid import UUID


class SkillRequestStatus(str, Enum):
    """Skill request status values matching the database check constraint."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    DECLINED = "declined"
    # Reserved: no operation moves a request here yet
    COMPLETED = "completed"


# Statuses each state may move to through respond_to_request
ALLOWED_TRANSITIONS: dict[SkillRequestStatus, frozenset[SkillRequestStatus]] = {
    SkillRequestStatus.PENDING: frozenset(
        {SkillRequestStatus.ACCEPTED, SkillRequestStatus.DECLINED}
    ),
    SkillRequestStatus.ACCEPTED: frozenset(),
    SkillRequestStatus.DECLINED: frozenset(),
    SkillRequestStatus.COMPLETED: frozenset(),
}


class SkillRequest(TypedDict):
    """Skill request table row representation.

    A proposal from one member to another to exchange specific skills.
    Both parties are referenced by their auth user id, not Profile.id.
    """

    id: UUID
    from_user_id: UUID
    to_user_id: UUID
    message: str
    skill_offered: str
    skill_wanted: str
    status: SkillRequestStatus
    created_at: datetime
    updated_at: datetime


class SkillRequestCreate(TypedDict):
    """Insert payload for a new skill request; IDs and status as strings."""

    from_user_id: str
    to_user_id: str
    message: str
    skill_offered: str
    skill_wanted: str
    status: str
