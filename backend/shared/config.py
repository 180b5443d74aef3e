"""
Centralized configuration for the identity backend.

All settings are loaded from environment variables with sensible defaults.
Collaborator-specific settings are namespaced (e.g., JWT_*, SMTP_*, SUPABASE_*).
"""

from functools import lru_cache
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Identity Backend"
    app_version: str = "0.1.0"
    debug: bool = False

    # Supabase
    supabase_url: str = ""
    supabase_service_role_key: str = ""

    # Token signing
    jwt_access_secret: str = ""
    jwt_refresh_secret: str = ""
    jwt_algorithm: str = "HS256"
    access_token_ttl_minutes: int = 30
    refresh_token_ttl_days: int = 30

    # Registration gate
    registration_code_ttl_seconds: int = 60
    registration_code_length: int = 6

    # Outbound mail (unset host = log-only dev mode)
    smtp_host: Optional[str] = None
    smtp_port: int = 587
    smtp_user: Optional[str] = None
    smtp_password: Optional[str] = None
    smtp_use_tls: bool = True
    mail_from: Optional[str] = None
    mail_from_name: str = "Identity Backend"

    # User-facing error messages
    message_locale: str = "en"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
