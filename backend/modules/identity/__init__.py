"""
Identity module.

The public operation surface: registration codes, signup, activation,
sign-in, refresh, logout and profile maintenance.

Public API:
- IIdentityService: Interface for identity operations
- IdentityService: Implementation composed from injected collaborators
- create_identity_service: Factory wiring the production adapters
"""

from .interfaces import IIdentityService
from .service import IdentityService, create_identity_service

__all__ = [
    "IIdentityService",
    "IdentityService",
    "create_identity_service",
]
