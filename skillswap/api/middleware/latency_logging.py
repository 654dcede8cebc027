"""Per-request access log with latency-based level escalation."""

import logging
import time
from typing import Callable

from fastapi import Request, Response

logger = logging.getLogger(__name__)

SLOW_REQUEST_THRESHOLD_MS = 1000
VERY_SLOW_REQUEST_THRESHOLD_MS = 3000

HEALTH_CHECK_PATHS = frozenset({"/health", "/health/ready"})


def access_log_level(path: str, status_code: int, latency_ms: float) -> tuple[int, str]:
    """Pick the log level and message prefix for a finished request.

    Args:
        path: Request path.
        status_code: Response status, 500 if the handler raised.
        latency_ms: Time spent in the handler chain.

    Returns:
        tuple: logging level and a prefix for the message.
    """
    if path in HEALTH_CHECK_PATHS:
        return logging.DEBUG, ""
    if status_code >= 500:
        return logging.ERROR, ""
    if latency_ms > VERY_SLOW_REQUEST_THRESHOLD_MS:
        return logging.ERROR, "VERY SLOW REQUEST: "
    if latency_ms > SLOW_REQUEST_THRESHOLD_MS:
        return logging.WARNING, "SLOW REQUEST: "
    if status_code >= 400:
        return logging.WARNING, ""
    return logging.INFO, ""


async def latency_logging_middleware(request: Request, call_next: Callable) -> Response:
    """Log method, path, status and latency of every request.

    Args:
        request: The incoming request.
        call_next: The next middleware/handler in the chain.

    Returns:
        Response: The response from the handler.
    """
    start_time = time.perf_counter()
    status_code = 500

    try:
        response = await call_next(request)
        status_code = response.status_code
        return response
    finally:
        latency_ms = (time.perf_counter() - start_time) * 1000
        path = request.url.path
        level, prefix = access_log_level(path, status_code, latency_ms)

        logger.log(
            level,
            "%s%s %s - %s - %.2fms",
            prefix,
            request.method,
            path,
            status_code,
            latency_ms,
            extra={
                "method": request.method,
                "path": path,
                "status_code": status_code,
                "latency_ms": round(latency_ms, 2),
            },
        )
