# =============================================================================
# tests/test_auth.py - Token Verification Tests
# =============================================================================
# Tokens are signed locally with the HS256 test secret from conftest.py.
# =============================================================================

import time

import pytest
from fastapi import HTTPException
from jose import jwt

from app.auth.dependencies import decode_user
from app.config import get_settings


def make_token(secret: str, **claims) -> str:
    payload = {
        "sub": "user_123",
        "email": "owner@example.com",
        "aud": "authenticated",
        "exp": int(time.time()) + 3600,
        "iat": int(time.time()),
    }
    payload.update(claims)
    return jwt.encode({k: v for k, v in payload.items() if v is not None}, secret, algorithm="HS256")


@pytest.fixture
def settings():
    return get_settings()


class TestDecodeUser:

    def test_valid_token(self, settings):
        user = decode_user(make_token(settings.SUPABASE_JWT_SECRET), settings)

        assert user.id == "user_123"
        assert user.email == "owner@example.com"

    def test_expired_token(self, settings):
        token = make_token(settings.SUPABASE_JWT_SECRET, exp=int(time.time()) - 60)

        with pytest.raises(HTTPException) as exc_info:
            decode_user(token, settings)

        assert exc_info.value.status_code == 401
        assert exc_info.value.detail == "Token has expired"

    def test_wrong_secret(self, settings):
        token = make_token("some-other-secret-value")

        with pytest.raises(HTTPException) as exc_info:
            decode_user(token, settings)

        assert exc_info.value.status_code == 401

    def test_wrong_audience(self, settings):
        token = make_token(settings.SUPABASE_JWT_SECRET, aud="anon")

        with pytest.raises(HTTPException):
            decode_user(token, settings)

    def test_missing_subject(self, settings):
        token = make_token(settings.SUPABASE_JWT_SECRET, sub=None)

        with pytest.raises(HTTPException) as exc_info:
            decode_user(token, settings)

        assert exc_info.value.detail == "Invalid token: missing user ID"
