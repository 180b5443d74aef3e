"""
Identity module interface.

This is the operation surface offered to a transport layer. Each method
returns a success payload or raises a subclass of IdentityError.
"""

from typing import Protocol, runtime_checkable

from modules.accounts.models import PasswordChange, ProfileUpdate, UserDto
from modules.registration.models import RegCodeDto
from modules.sessions.models import AuthResult, TokenClaims


@runtime_checkable
class IIdentityService(Protocol):
    """Interface for the end-user identity lifecycle."""

    async def send_registration_code(self, email: str) -> RegCodeDto: ...

    async def verify_registration_code(self, email: str, code: str) -> RegCodeDto: ...

    async def sign_up(self, email: str, password: str) -> AuthResult: ...

    async def activate(self, activation_link: str) -> UserDto: ...

    async def sign_in(self, email: str, password: str) -> AuthResult: ...

    async def refresh(self, refresh_token: str) -> AuthResult: ...

    async def logout(self, refresh_token: str) -> None: ...

    async def authenticate(self, access_token: str) -> TokenClaims: ...

    async def update_profile(self, fields: ProfileUpdate, user_id: str) -> UserDto: ...

    async def update_password(self, change: PasswordChange, user_id: str) -> UserDto: ...
