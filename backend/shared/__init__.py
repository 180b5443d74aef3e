"""
Shared infrastructure for the identity backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes
- messages: User-facing message catalog
- addresses: Email normalisation for lookups

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, reset_client_cache
from .exceptions import (
    IdentityError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    ExternalServiceError,
)
from .messages import render_message
from .addresses import normalize_email

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "reset_client_cache",
    "IdentityError",
    "NotFoundError",
    "ValidationError",
    "AuthenticationError",
    "ExternalServiceError",
    "render_message",
    "normalize_email",
]
