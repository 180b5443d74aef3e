"""Tests for JWT token signing."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from shared.config import Settings
from modules.sessions.interfaces import ITokenSigner
from modules.sessions.models import TokenClaims
from modules.sessions.tokens import JWTTokenSigner


CLAIMS = TokenClaims(id="user-123", email="a@x.com", is_activated=True)


class TestJWTTokenSigner:
    def test_implements_interface(self, signer):
        assert isinstance(signer, ITokenSigner)

    def test_requires_secrets(self):
        with pytest.raises(ValueError):
            JWTTokenSigner(access_secret="", refresh_secret="x")

    def test_from_settings(self):
        settings = Settings(
            _env_file=None,
            jwt_access_secret="a",
            jwt_refresh_secret="r",
            access_token_ttl_minutes=5,
        )
        signer = JWTTokenSigner.from_settings(settings)
        pair = signer.issue_pair(CLAIMS)
        payload = jwt.decode(pair.access_token, "a", algorithms=["HS256"])
        assert payload["exp"] - payload["iat"] == 5 * 60

    def test_issue_pair_round_trips_claims(self, signer):
        pair = signer.issue_pair(CLAIMS)

        assert signer.validate_access(pair.access_token) == CLAIMS
        assert signer.validate_refresh(pair.refresh_token) == CLAIMS

    def test_access_and_refresh_use_separate_secrets(self, signer, settings):
        pair = signer.issue_pair(CLAIMS)

        jwt.decode(pair.access_token, settings.jwt_access_secret, algorithms=["HS256"])
        jwt.decode(pair.refresh_token, settings.jwt_refresh_secret, algorithms=["HS256"])
        with pytest.raises(jwt.InvalidSignatureError):
            jwt.decode(pair.refresh_token, settings.jwt_access_secret, algorithms=["HS256"])

    def test_tokens_are_not_interchangeable(self, signer):
        """An access token must not validate as a refresh token and vice versa."""
        pair = signer.issue_pair(CLAIMS)
        assert signer.validate_refresh(pair.access_token) is None
        assert signer.validate_access(pair.refresh_token) is None

    def test_lifetimes_differ(self, signer, settings):
        pair = signer.issue_pair(CLAIMS)
        access = jwt.decode(pair.access_token, settings.jwt_access_secret, algorithms=["HS256"])
        refresh = jwt.decode(pair.refresh_token, settings.jwt_refresh_secret, algorithms=["HS256"])

        assert access["exp"] - access["iat"] == 30 * 60
        assert refresh["exp"] - refresh["iat"] == 30 * 24 * 60 * 60
        assert access["type"] == "access"
        assert refresh["type"] == "refresh"

    def test_pairs_are_unique(self, signer):
        """Two pairs issued at the same instant should still differ."""
        first = signer.issue_pair(CLAIMS)
        second = signer.issue_pair(CLAIMS)
        assert first.refresh_token != second.refresh_token
        assert first.access_token != second.access_token

    def test_expired_refresh_token(self, make_signer):
        signer = make_signer(timedelta(days=-31))
        pair = signer.issue_pair(CLAIMS)

        assert signer.validate_refresh(pair.refresh_token) is None
        assert signer.validate_access(pair.access_token) is None

    def test_tampered_token(self, signer):
        pair = signer.issue_pair(CLAIMS)
        assert signer.validate_refresh(pair.refresh_token + "x") is None

    def test_garbage_token(self, signer):
        assert signer.validate_refresh("not-a-jwt") is None

    def test_token_signed_with_other_secret(self, signer):
        now = datetime.now(timezone.utc)
        forged = jwt.encode(
            {
                "sub": "user-123",
                "type": "refresh",
                "exp": int((now + timedelta(hours=1)).timestamp()),
            },
            "wrong-secret",
            algorithm="HS256",
        )
        assert signer.validate_refresh(forged) is None

    def test_missing_type_claim(self, signer, settings):
        now = datetime.now(timezone.utc)
        token = jwt.encode(
            {"sub": "user-123", "exp": int((now + timedelta(hours=1)).timestamp())},
            settings.jwt_refresh_secret,
            algorithm="HS256",
        )
        assert signer.validate_refresh(token) is None
