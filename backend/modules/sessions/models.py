"""
Sessions module data models.
"""

from pydantic import BaseModel, Field

from modules.accounts.models import UserDto


class TokenClaims(BaseModel):
    """Minimal identity carried inside access and refresh tokens."""

    id: str = Field(..., description="User ID")
    email: str = Field(..., description="User's email address")
    is_activated: bool = Field(default=False)

    model_config = {"frozen": True}

    @classmethod
    def from_user(cls, user: UserDto) -> "TokenClaims":
        return cls(id=user.id, email=user.email, is_activated=user.is_activated)


class TokenPair(BaseModel):
    """A freshly signed access/refresh token pair."""

    access_token: str
    refresh_token: str

    model_config = {"frozen": True}


class SessionRecord(BaseModel):
    """The refresh token currently stored for a user."""

    user_id: str
    refresh_token: str


class AuthResult(BaseModel):
    """Response for signup, sign-in and refresh."""

    access_token: str
    refresh_token: str
    user: UserDto
