"""
JWT token signing.

Access and refresh tokens are HS256 JWTs signed with separate secrets and
lifetimes. Each token carries a random ``jti`` so two pairs issued in the
same second still differ.
"""

import logging
import uuid
from datetime import timedelta
from typing import Optional

import jwt

from shared.clock import Clock, utc_now
from shared.config import Settings
from .models import TokenClaims, TokenPair

logger = logging.getLogger(__name__)

ACCESS = "access"
REFRESH = "refresh"


class JWTTokenSigner:
    """ITokenSigner backed by PyJWT."""

    def __init__(
        self,
        access_secret: str,
        refresh_secret: str,
        access_ttl: timedelta = timedelta(minutes=30),
        refresh_ttl: timedelta = timedelta(days=30),
        algorithm: str = "HS256",
        clock: Clock = utc_now,
    ):
        if not access_secret or not refresh_secret:
            raise ValueError("Both access and refresh signing secrets are required")
        self._secrets = {ACCESS: access_secret, REFRESH: refresh_secret}
        self._ttls = {ACCESS: access_ttl, REFRESH: refresh_ttl}
        self._algorithm = algorithm
        self._clock = clock

    @classmethod
    def from_settings(cls, settings: Settings, clock: Clock = utc_now) -> "JWTTokenSigner":
        return cls(
            access_secret=settings.jwt_access_secret,
            refresh_secret=settings.jwt_refresh_secret,
            access_ttl=timedelta(minutes=settings.access_token_ttl_minutes),
            refresh_ttl=timedelta(days=settings.refresh_token_ttl_days),
            algorithm=settings.jwt_algorithm,
            clock=clock,
        )

    def issue_pair(self, claims: TokenClaims) -> TokenPair:
        return TokenPair(
            access_token=self._encode(claims, ACCESS),
            refresh_token=self._encode(claims, REFRESH),
        )

    def validate_access(self, token: str) -> Optional[TokenClaims]:
        return self._decode(token, ACCESS)

    def validate_refresh(self, token: str) -> Optional[TokenClaims]:
        return self._decode(token, REFRESH)

    def _encode(self, claims: TokenClaims, token_type: str) -> str:
        now = self._clock()
        payload = {
            "sub": claims.id,
            "email": claims.email,
            "is_activated": claims.is_activated,
            "type": token_type,
            "jti": uuid.uuid4().hex,
            "iat": int(now.timestamp()),
            "exp": int((now + self._ttls[token_type]).timestamp()),
        }
        return jwt.encode(payload, self._secrets[token_type], algorithm=self._algorithm)

    def _decode(self, token: str, token_type: str) -> Optional[TokenClaims]:
        try:
            payload = jwt.decode(
                token,
                self._secrets[token_type],
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp", "type"]},
            )
        except jwt.ExpiredSignatureError:
            logger.debug("Rejected expired %s token", token_type)
            return None
        except jwt.InvalidTokenError as e:
            logger.debug("Rejected invalid %s token: %s", token_type, e)
            return None

        if payload.get("type") != token_type:
            return None

        return TokenClaims(
            id=payload["sub"],
            email=payload.get("email", ""),
            is_activated=payload.get("is_activated", False),
        )
