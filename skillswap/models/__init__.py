"""Database model type definitions."""

from skillswap.models.profile import Availability, Profile
from skillswap.models.skill_request import (
    ALLOWED_TRANSITIONS,
    SkillRequest,
    SkillRequestStatus,
)

__all__ = [
    "Availability",
    "Profile",
    "SkillRequest",
    "SkillRequestStatus",
    "ALLOWED_TRANSITIONS",
]
