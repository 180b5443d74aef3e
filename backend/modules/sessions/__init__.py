"""
Sessions module.

Issues, rotates and revokes access/refresh token pairs.

Public API:
- ISessionIssuer: Interface for session operations
- ISessionStore, ITokenSigner: Collaborator contracts
- AuthResult, TokenClaims, TokenPair, SessionRecord: Models
- UnauthorizedError: The single error for every token failure
"""

from .interfaces import ISessionIssuer, ISessionStore, ITokenSigner
from .models import AuthResult, SessionRecord, TokenClaims, TokenPair
from .exceptions import UnauthorizedError

__all__ = [
    # Interfaces
    "ISessionIssuer",
    "ISessionStore",
    "ITokenSigner",
    # Models
    "AuthResult",
    "SessionRecord",
    "TokenClaims",
    "TokenPair",
    # Exceptions
    "UnauthorizedError",
]
