"""Skill request lifecycle service."""

import logging
from datetime import datetime, timezone
from typing import Any
from uuid import UUID

from skillswap.api.middleware.error_handler import (
    AuthorizationError,
    NotFoundError,
    ProfileRequiredError,
    RequestConflictError,
    ValidationError,
)
from skillswap.core.config import get_settings
from skillswap.core.supabase import fetch_single, get_supabase_client
from skillswap.models.skill_request import ALLOWED_TRANSITIONS, SkillRequestStatus
from skillswap.models.skill_request import SkillRequestCreate as SkillRequestInsert
from skillswap.schemas.auth import UserContext
from skillswap.schemas.skill_request import SkillRequestCreate
from skillswap.services.profile_service import ProfileService, can_view_profile

logger = logging.getLogger(__name__)

PROFILE_SUMMARY_COLUMNS = "id, user_id, name, avatar_url, location, is_public"
INCOMING_SELECT = f"*, from_profile:profiles!skill_requests_from_user_id_fkey({PROFILE_SUMMARY_COLUMNS})"
SENT_SELECT = f"*, to_profile:profiles!skill_requests_to_user_id_fkey({PROFILE_SUMMARY_COLUMNS})"

RESPONSE_DECISIONS = frozenset({SkillRequestStatus.ACCEPTED, SkillRequestStatus.DECLINED})
REQUIRED_FIELDS = ("message", "skill_offered", "skill_wanted")


def is_party(request: dict[str, Any], user: UserContext) -> bool:
    """Check whether the user sent or received the request."""
    user_id = str(user.user_id)
    return str(request.get("from_user_id")) == user_id or str(request.get("to_user_id")) == user_id


def _hide_private_counterpart(
    requests: list[dict[str, Any]],
    key: str,
    viewer: UserContext,
) -> list[dict[str, Any]]:
    # A private counterpart profile is not readable by the viewer
    for request in requests:
        profile = request.get(key)
        if profile and not can_view_profile(profile, viewer):
            request[key] = None
    return requests


class SkillRequestService:
    """Service for sending and answering skill exchange requests.

    A request starts as pending and only its receiver may move it to
    accepted or declined.
    """

    def __init__(self) -> None:
        """Initialize skill request service with Supabase client."""
        self.client = get_supabase_client()
        self.settings = get_settings()
        self.profiles = ProfileService()

    async def send_request(self, sender: UserContext, data: SkillRequestCreate) -> dict[str, Any]:
        """Propose a skill exchange to another member.

        Args:
            sender: The authenticated principal sending the request.
            data: Receiver profile, skills and message.

        Returns:
            dict: The created request data, status pending.

        Raises:
            ValidationError: If a field is blank, the receiver is the sender,
                or a skill is not on the relevant profile.
            ProfileRequiredError: If the sender has no profile.
            NotFoundError: If the receiver profile is missing or private.
        """
        missing = [field for field in REQUIRED_FIELDS if not getattr(data, field)]
        if missing:
            raise ValidationError(
                "Please fill in all fields",
                details=[
                    {"loc": [field], "msg": "Field is required", "type": "missing"}
                    for field in missing
                ],
            )

        sender_profile = await self.profiles.find_profile_by_user_id(sender.user_id)
        if not sender_profile:
            raise ProfileRequiredError("Create your profile before sending requests")

        receiver_profile = await self.profiles.get_profile(data.to_profile_id, sender)

        if str(receiver_profile["user_id"]) == str(sender.user_id):
            raise ValidationError("You cannot send a request to yourself")

        if data.skill_offered not in (sender_profile.get("skills_offered") or []):
            raise ValidationError(f"'{data.skill_offered}' is not one of your offered skills")

        if data.skill_wanted not in (receiver_profile.get("skills_offered") or []):
            raise ValidationError(f"'{data.skill_wanted}' is not offered by {receiver_profile['name']}")

        request_data: SkillRequestInsert = {
            "from_user_id": str(sender.user_id),
            "to_user_id": str(receiver_profile["user_id"]),
            "message": data.message,
            "skill_offered": data.skill_offered,
            "skill_wanted": data.skill_wanted,
            "status": SkillRequestStatus.PENDING.value,
        }

        response = self.client.table("skill_requests").insert(request_data).execute()

        request = response.data[0]
        logger.info(
            "Skill request %s sent from %s to %s",
            request["id"],
            sender.user_id,
            receiver_profile["user_id"],
        )
        return request

    async def get_request(self, viewer: UserContext, request_id: UUID) -> dict[str, Any]:
        """Get a request visible to one of its parties.

        Args:
            viewer: The authenticated principal.
            request_id: The request's UUID.

        Returns:
            dict: The request data.

        Raises:
            NotFoundError: If missing or the viewer is not a party.
        """
        request = fetch_single(
            self.client.table("skill_requests")
            .select("*")
            .eq("id", str(request_id))
        )

        if not request or not is_party(request, viewer):
            raise NotFoundError("Request not found")

        return request

    async def respond_to_request(
        self,
        receiver: UserContext,
        request_id: UUID,
        decision: SkillRequestStatus,
    ) -> dict[str, Any]:
        """Accept or decline a received request.

        Args:
            receiver: The authenticated principal; must be the request's receiver.
            request_id: The request's UUID.
            decision: accepted or declined.

        Returns:
            dict: The updated request data.

        Raises:
            ValidationError: If the decision is not accepted/declined.
            NotFoundError: If the request is missing or not visible.
            AuthorizationError: If the caller sent rather than received it.
            RequestConflictError: If the request is no longer pending and
                the transition guard is enabled.
        """
        if decision not in RESPONSE_DECISIONS:
            raise ValidationError("Requests can only be accepted or declined")

        request = await self.get_request(receiver, request_id)

        if str(request["to_user_id"]) != str(receiver.user_id):
            raise AuthorizationError("Only the recipient can respond to this request")

        current = SkillRequestStatus(request["status"])
        if decision not in ALLOWED_TRANSITIONS[current]:
            if self.settings.request_transition_guard:
                raise RequestConflictError(f"Request has already been {current.value}")
            logger.info(
                "Overwriting %s request %s with %s",
                current.value,
                request_id,
                decision.value,
            )

        response = (
            self.client.table("skill_requests")
            .update({
                "status": decision.value,
                "updated_at": datetime.now(timezone.utc).isoformat(),
            })
            .eq("id", str(request_id))
            .eq("to_user_id", str(receiver.user_id))
            .execute()
        )

        if not response.data:
            raise NotFoundError("Request not found")

        logger.info("Skill request %s %s by %s", request_id, decision.value, receiver.user_id)
        return response.data[0]

    async def list_incoming(self, user: UserContext) -> list[dict[str, Any]]:
        """List requests received by the user, newest first, with sender profiles.

        Args:
            user: The authenticated principal.

        Returns:
            list[dict]: Requests with a from_profile entry.
        """
        response = (
            self.client.table("skill_requests")
            .select(INCOMING_SELECT)
            .eq("to_user_id", str(user.user_id))
            .order("created_at", desc=True)
            .execute()
        )

        return _hide_private_counterpart(response.data or [], "from_profile", user)

    async def list_sent(self, user: UserContext) -> list[dict[str, Any]]:
        """List requests sent by the user, newest first, with receiver profiles.

        Args:
            user: The authenticated principal.

        Returns:
            list[dict]: Requests with a to_profile entry.
        """
        response = (
            self.client.table("skill_requests")
            .select(SENT_SELECT)
            .eq("from_user_id", str(user.user_id))
            .order("created_at", desc=True)
            .execute()
        )

        return _hide_private_counterpart(response.data or [], "to_profile", user)
