"""
Unit tests for backend/auth.py

Covers Supabase access token validation, API key parsing, and the
optional-user dependency used by the screen endpoints.
"""

import time

import jwt
import pytest
from fastapi import HTTPException
from unittest.mock import patch

from backend import auth
from backend.settings import Settings

SECRET = "test-jwt-secret-at-least-32-bytes-long"


@pytest.fixture(autouse=True)
def auth_settings():
    settings = Settings(
        environment="test",
        supabase_jwt_secret=SECRET,
        api_keys="sk_test_abc123,sk_live_xyz",
        _env_file=None,
    )
    with patch("backend.auth.get_settings", return_value=settings):
        yield settings


def _token(sub="user-abc", aud="authenticated", secret=SECRET, exp_offset=3600, **extra):
    payload = {"sub": sub, "aud": aud, "exp": int(time.time()) + exp_offset, **extra}
    if sub is None:
        payload.pop("sub")
    return jwt.encode(payload, secret, algorithm="HS256")


@pytest.mark.unit
class TestValidateJwt:

    def test_valid_token(self):
        assert auth.validate_jwt(f"Bearer {_token()}") == "user-abc"

    def test_missing_bearer_prefix(self):
        with pytest.raises(HTTPException) as exc:
            auth.validate_jwt(_token())
        assert exc.value.status_code == 401

    def test_wrong_secret(self):
        with pytest.raises(HTTPException) as exc:
            auth.validate_jwt(f"Bearer {_token(secret='another-secret-that-is-32-bytes-long')}")
        assert exc.value.status_code == 401

    def test_wrong_audience(self):
        with pytest.raises(HTTPException) as exc:
            auth.validate_jwt(f"Bearer {_token(aud='anon')}")
        assert exc.value.status_code == 401

    def test_expired(self):
        with pytest.raises(HTTPException) as exc:
            auth.validate_jwt(f"Bearer {_token(exp_offset=-60)}")
        assert exc.value.detail == "Token expired"

    def test_missing_sub(self):
        with pytest.raises(HTTPException) as exc:
            auth.validate_jwt(f"Bearer {_token(sub=None)}")
        assert exc.value.detail == "Token missing user ID"

    def test_secret_not_configured(self, auth_settings):
        auth_settings.supabase_jwt_secret = ""
        with pytest.raises(HTTPException) as exc:
            auth.validate_jwt(f"Bearer {_token()}")
        assert exc.value.status_code == 500


@pytest.mark.unit
class TestValidateApiKey:

    def test_simple_key_is_admin(self):
        assert auth.validate_api_key("sk_test_abc123") == "admin"

    def test_key_with_user(self):
        assert auth.validate_api_key("sk_live_xyz:user_42") == "user_42"

    def test_invalid_key(self):
        with pytest.raises(HTTPException) as exc:
            auth.validate_api_key("nope")
        assert exc.value.status_code == 401

    def test_no_keys_configured(self, auth_settings):
        auth_settings.api_keys = ""
        with pytest.raises(HTTPException):
            auth.validate_api_key("sk_test_abc123")


@pytest.mark.unit
class TestDependencies:

    @pytest.mark.asyncio
    async def test_current_user_requires_credentials(self):
        with pytest.raises(HTTPException) as exc:
            await auth.get_current_user(None, None)
        assert exc.value.status_code == 401

    @pytest.mark.asyncio
    async def test_api_key_takes_precedence(self):
        user = await auth.get_current_user(f"Bearer {_token()}", "sk_test_abc123:key-user")
        assert user == "key-user"

    @pytest.mark.asyncio
    async def test_optional_user_none_when_anonymous(self):
        assert await auth.get_optional_user(None, None) is None

    @pytest.mark.asyncio
    async def test_optional_user_none_on_bad_token(self):
        assert await auth.get_optional_user("Bearer garbage", None) is None

    @pytest.mark.asyncio
    async def test_optional_user_returns_sub(self):
        assert await auth.get_optional_user(f"Bearer {_token()}", None) == "user-abc"
