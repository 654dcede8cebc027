"""Schemas shared by health checks and error responses."""

from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

API_VERSION = "0.1.0"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class HealthStatus(str, Enum):
    """Health check status values."""

    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"


class HealthResponse(BaseModel):
    """Liveness: the process is up and serving."""

    status: HealthStatus = Field(default=HealthStatus.HEALTHY, description="Current health status")
    timestamp: datetime = Field(default_factory=_utcnow, description="Check timestamp")
    version: str = Field(default=API_VERSION, description="API version")


class CheckResult(BaseModel):
    """Outcome of one readiness probe."""

    name: str = Field(description="Probe name")
    healthy: bool = Field(description="Whether the probe succeeded")
    latency_ms: float | None = Field(default=None, description="Probe duration in milliseconds")
    error: str | None = Field(default=None, description="Failure reason")


class ReadinessResponse(BaseModel):
    """Readiness: every backing service answered."""

    status: HealthStatus = Field(description="Overall readiness status")
    timestamp: datetime = Field(default_factory=_utcnow, description="Check timestamp")
    checks: list[CheckResult] = Field(default_factory=list, description="Individual probe results")

    @classmethod
    def from_checks(cls, checks: list[CheckResult]) -> "ReadinessResponse":
        """Healthy only when every probe is."""
        healthy = all(check.healthy for check in checks)
        return cls(
            status=HealthStatus.HEALTHY if healthy else HealthStatus.UNHEALTHY,
            checks=checks,
        )


class ErrorDetail(BaseModel):
    """One field-level or contextual error entry."""

    loc: list[str] | None = Field(default=None, description="Field path, e.g. ['message']")
    msg: str = Field(description="Human-readable error message")
    type: str = Field(description="Error type identifier")


class ErrorResponse(BaseModel):
    """Body of every error response.

    Clients show ``message`` and branch on ``error``; ``profile_required``
    sends the member to profile creation.
    """

    model_config = ConfigDict(from_attributes=True)

    error: str = Field(description="Error type")
    message: str = Field(description="Human-readable error description")
    details: list[ErrorDetail] | None = Field(default=None, description="Additional error details")
    request_id: str | None = Field(default=None, description="X-Request-ID of the failed request")
    timestamp: datetime = Field(default_factory=_utcnow, description="Error timestamp")

    @classmethod
    def from_exception(
        cls,
        error_type: str,
        message: str,
        details: list[dict[str, Any]] | None = None,
        request_id: str | None = None,
    ) -> "ErrorResponse":
        """Build a response from the attributes of a raised error.

        Args:
            error_type: Error type, e.g. ``not_found``.
            message: Message shown to the user.
            details: Raw detail dicts; ``msg`` and ``type`` get defaults.
            request_id: Request ID for tracing.

        Returns:
            ErrorResponse: The response body.
        """
        return cls(
            error=error_type,
            message=message,
            details=[
                ErrorDetail(
                    loc=detail.get("loc"),
                    msg=detail.get("msg", str(detail)),
                    type=detail.get("type", "error"),
                )
                for detail in details
            ] if details else None,
            request_id=request_id,
        )
