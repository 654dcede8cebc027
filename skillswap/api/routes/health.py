"""Liveness, readiness and auth probes."""

import time
from typing import Any, Awaitable, Callable

from fastapi import APIRouter, Response, status

from skillswap.api.deps import CurrentUser
from skillswap.core.supabase import check_database_connection
from skillswap.schemas.auth import AuthenticatedResponse
from skillswap.schemas.common import CheckResult, HealthResponse, ReadinessResponse

router = APIRouter(tags=["health"])

Probe = Callable[[], Awaitable[dict[str, Any]]]


async def run_probe(name: str, probe: Probe) -> CheckResult:
    """Time a probe and turn its result into a CheckResult."""
    start_time = time.perf_counter()
    result = await probe()
    latency_ms = (time.perf_counter() - start_time) * 1000
    return CheckResult(
        name=name,
        healthy=result["healthy"],
        latency_ms=round(latency_ms, 2),
        error=result.get("error"),
    )


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Liveness check",
    description="Returns 200 while the process is serving; dependencies are not checked.",
)
async def health_check() -> HealthResponse:
    return HealthResponse()


@router.get(
    "/health/ready",
    response_model=ReadinessResponse,
    responses={503: {"description": "The database is unreachable"}},
    summary="Readiness check",
    description="Checks that the profiles and skill_requests tables answer.",
)
async def readiness_check(response: Response) -> ReadinessResponse:
    """Run readiness probes, responding 503 if any fails."""
    readiness = ReadinessResponse.from_checks(
        [await run_probe("database", check_database_connection)]
    )
    if any(not check.healthy for check in readiness.checks):
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return readiness


@router.get(
    "/health/auth",
    response_model=AuthenticatedResponse,
    summary="Authenticated health check",
    description="Verifies that bearer tokens are accepted.",
    responses={401: {"description": "Missing or invalid token"}},
)
async def authenticated_check(user: CurrentUser) -> AuthenticatedResponse:
    """Echo the principal decoded from the bearer token."""
    return AuthenticatedResponse.for_user(user)
