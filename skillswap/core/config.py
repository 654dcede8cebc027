"""Application configuration management using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables or ``.env``.

    Only the Supabase URL and secret key are required. Access tokens are
    verified with the ES256 signing key when present, otherwise with the
    legacy HS256 secret.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="skillswap-backend", description="Application name")
    app_env: str = Field(default="development", description="Environment (development/staging/production)")
    debug: bool = Field(default=False, description="Enable debug mode and the OpenAPI docs")

    # Server
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8080, description="Server port")
    cors_origins: str = Field(
        default="http://localhost:3000",
        description="Comma-separated list of allowed CORS origins",
    )

    # Supabase
    supabase_url: str = Field(..., description="Supabase project URL")
    supabase_secret_key: str = Field(..., description="Supabase secret key; bypasses row-level security")
    supabase_signing_key_jwk: str = Field(default="", description="Signing key JWK (JSON) for ES256 tokens")
    supabase_jwt_secret: str = Field(default="", description="Legacy JWT secret for HS256 tokens")
    jwt_audience: str = Field(default="authenticated", description="Expected aud claim")

    # Skill exchange
    request_transition_guard: bool = Field(
        default=False,
        description="Reject accept/decline on requests that are no longer pending; off keeps last-write-wins",
    )
    browse_featured_limit: int = Field(default=8, ge=1, description="Profiles shown on the landing page")
    dashboard_recent_limit: int = Field(default=10, ge=1, description="Entries in the dashboard activity feed")

    @model_validator(mode="after")
    def require_verification_key_in_production(self) -> "Settings":
        """Refuse to start a production server that cannot verify tokens."""
        if self.is_production and not (self.supabase_signing_key_jwk or self.supabase_jwt_secret):
            raise ValueError("SUPABASE_SIGNING_KEY_JWK or SUPABASE_JWT_SECRET is required in production")
        return self

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins string into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings singleton.

    Call get_settings.cache_clear() to reload settings.
    """
    return Settings()
