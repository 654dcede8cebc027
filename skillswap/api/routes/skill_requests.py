"""Skill request API routes."""

from uuid import UUID

from fastapi import APIRouter, status

from skillswap.api.deps import CurrentUser
from skillswap.models.skill_request import SkillRequestStatus
from skillswap.schemas.skill_request import (
    SkillRequestCreate,
    SkillRequestResponse,
    SkillRequestWithProfile,
)
from skillswap.services.skill_request_service import SkillRequestService

router = APIRouter(prefix="/requests", tags=["requests"])


@router.post(
    "",
    response_model=SkillRequestResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Send a skill request",
    description="Proposes a skill exchange to another member. The request starts as pending.",
)
async def send_request(data: SkillRequestCreate, user: CurrentUser) -> SkillRequestResponse:
    """Send a skill exchange request.

    Args:
        data: Receiver profile, skills and message.
        user: The authenticated user context.

    Returns:
        SkillRequestResponse: The created request.
    """
    service = SkillRequestService()
    request = await service.send_request(user, data)
    return SkillRequestResponse(**request)


@router.get(
    "/incoming",
    response_model=list[SkillRequestWithProfile],
    summary="List received requests",
)
async def list_incoming_requests(user: CurrentUser) -> list[SkillRequestWithProfile]:
    """List requests received by the authenticated user, newest first."""
    service = SkillRequestService()
    requests = await service.list_incoming(user)
    return [SkillRequestWithProfile(**r) for r in requests]


@router.get(
    "/sent",
    response_model=list[SkillRequestWithProfile],
    summary="List sent requests",
)
async def list_sent_requests(user: CurrentUser) -> list[SkillRequestWithProfile]:
    """List requests sent by the authenticated user, newest first."""
    service = SkillRequestService()
    requests = await service.list_sent(user)
    return [SkillRequestWithProfile(**r) for r in requests]


@router.get(
    "/{request_id}",
    response_model=SkillRequestResponse,
    summary="Get a request",
    description="Returns a request the caller sent or received.",
)
async def get_request(request_id: UUID, user: CurrentUser) -> SkillRequestResponse:
    """Get a single request visible to the caller."""
    service = SkillRequestService()
    request = await service.get_request(user, request_id)
    return SkillRequestResponse(**request)


@router.post(
    "/{request_id}/accept",
    response_model=SkillRequestResponse,
    summary="Accept a request",
    description="Accepts a received request. Only the recipient may respond.",
)
async def accept_request(request_id: UUID, user: CurrentUser) -> SkillRequestResponse:
    """Accept a received skill request.

    Raises:
        AuthorizationError: 403 if the caller is not the recipient.
        RequestConflictError: 409 if the request is no longer pending.
    """
    service = SkillRequestService()
    request = await service.respond_to_request(user, request_id, SkillRequestStatus.ACCEPTED)
    return SkillRequestResponse(**request)


@router.post(
    "/{request_id}/decline",
    response_model=SkillRequestResponse,
    summary="Decline a request",
    description="Declines a received request. Only the recipient may respond.",
)
async def decline_request(request_id: UUID, user: CurrentUser) -> SkillRequestResponse:
    """Decline a received skill request."""
    service = SkillRequestService()
    request = await service.respond_to_request(user, request_id, SkillRequestStatus.DECLINED)
    return SkillRequestResponse(**request)
