"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from skillswap.api.middleware.error_handler import (
    APIError,
    api_error_handler,
    error_handler_middleware,
)
from skillswap.api.middleware.latency_logging import latency_logging_middleware
from skillswap.api.routes import auth, browse, dashboard, health, profiles, skill_requests
from skillswap.core.config import Settings, get_settings
from skillswap.schemas.common import API_VERSION

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

API_V1_ROUTERS = (auth.router, profiles.router, browse.router, skill_requests.router, dashboard.router)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Log startup configuration and shutdown."""
    settings = get_settings()
    logger.info("Starting %s in %s mode", settings.app_name, settings.app_env)
    if settings.request_transition_guard:
        logger.info("Request transition guard enabled: only pending requests can be answered")

    yield

    logger.info("Shutting down %s", settings.app_name)


def build_api_router() -> APIRouter:
    """Mount the versioned routers under /api/v1."""
    api_v1_router = APIRouter(prefix="/api/v1")
    for router in API_V1_ROUTERS:
        api_v1_router.include_router(router)
    return api_v1_router


def add_middleware(app: FastAPI, settings: Settings) -> None:
    """Install middleware; the last one added runs first on a request."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(BaseHTTPMiddleware, dispatch=latency_logging_middleware)
    app.add_middleware(BaseHTTPMiddleware, dispatch=error_handler_middleware)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        FastAPI: Configured application instance.
    """
    settings = get_settings()

    app = FastAPI(
        title="SkillSwap API",
        description="Members list the skills they teach and want to learn, then trade them.",
        version=API_VERSION,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
    )

    add_middleware(app, settings)
    app.add_exception_handler(APIError, api_error_handler)

    app.include_router(health.router)
    app.include_router(build_api_router())

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "skillswap.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
