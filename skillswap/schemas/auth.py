"""Authentication schemas: token claims and the request principal."""

from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class UserContext(BaseModel):
    """The authenticated principal for a request.

    Services receive it explicitly; it is never read from ambient state.
    """

    model_config = ConfigDict(from_attributes=True)

    user_id: UUID = Field(description="Auth user ID from the sub claim")
    email: str | None = Field(default=None, description="Email claim")
    name: str | None = Field(default=None, description="Display name from user metadata")
    role: str | None = Field(default=None, description="Role claim, usually 'authenticated'")


class TokenPayload(BaseModel):
    """Claims of a Supabase access token."""

    sub: str = Field(description="Auth user ID")
    email: str | None = Field(default=None)
    role: str | None = Field(default=None)
    exp: int = Field(description="Expiration timestamp (Unix epoch)")
    iat: int = Field(description="Issued at timestamp (Unix epoch)")
    aud: str | None = Field(default=None)
    iss: str | None = Field(default=None)
    user_metadata: dict[str, Any] = Field(default_factory=dict, description="Data attached at signup")

    @property
    def display_name(self) -> str | None:
        """Name given at signup; OAuth providers store it as full_name."""
        return self.user_metadata.get("name") or self.user_metadata.get("full_name")

    def to_user_context(self) -> UserContext:
        """Build the request principal.

        Raises:
            ValueError: If sub is not a UUID.
        """
        return UserContext(
            user_id=UUID(self.sub),
            email=self.email,
            name=self.display_name,
            role=self.role,
        )


class AuthenticatedResponse(BaseModel):
    """Identity echoed back to an authenticated caller."""

    authenticated: bool = Field(default=True)
    user_id: str = Field(description="Authenticated user ID")
    email: str | None = Field(default=None)
    name: str | None = Field(default=None)
    role: str | None = Field(default=None)

    @classmethod
    def for_user(cls, user: UserContext) -> "AuthenticatedResponse":
        return cls(user_id=str(user.user_id), email=user.email, name=user.name, role=user.role)


class LogoutResponse(BaseModel):
    """Response schema for sign-out."""

    message: str = Field(description="Sign-out status message")
