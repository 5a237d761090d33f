"""
Tests for admin authentication
"""

from datetime import timedelta
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient
from jose import jwt
from sqlalchemy import update

from app.auth import (
    ALGORITHM,
    create_access_token,
    decode_access_token,
    hash_password,
    require_admin,
    verify_password,
)
from app.exceptions import AuthenticationError, AuthorizationError, InvalidTokenError, TokenExpiredError
from app.middleware.rate_limit import limiter
from app.models.admin_user import AdminUser
from app.services.auth_service import authenticate_admin, create_admin
from conftest import ADMIN_EMAIL, ADMIN_PASSWORD, SECRET_KEY
from main import create_app


class TestPasswordHashing:
    def test_hash_and_verify(self):
        hashed = hash_password("s3cret")
        assert hashed != "s3cret"
        assert verify_password("s3cret", hashed)
        assert not verify_password("wrong", hashed)


class TestTokens:
    def test_round_trip(self):
        token = create_access_token({"sub": "admin@example.com"}, SECRET_KEY, timedelta(minutes=5))
        assert decode_access_token(token, SECRET_KEY) == "admin@example.com"
        assert jwt.get_unverified_header(token)["alg"] == ALGORITHM

    def test_requires_subject(self):
        with pytest.raises(ValueError):
            create_access_token({}, SECRET_KEY, timedelta(minutes=5))

    def test_expired(self):
        token = create_access_token({"sub": "admin@example.com"}, SECRET_KEY, timedelta(minutes=-1))
        with pytest.raises(TokenExpiredError):
            decode_access_token(token, SECRET_KEY)

    def test_wrong_key(self):
        token = create_access_token({"sub": "admin@example.com"}, "other-key", timedelta(minutes=5))
        with pytest.raises(InvalidTokenError):
            decode_access_token(token, SECRET_KEY)


class TestTokenRoute:
    def test_login_and_me(self, client):
        response = client.post("/api/auth/token", data={"username": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
        assert response.status_code == 200
        token = response.json()
        assert token["token_type"] == "bearer"
        assert token["expires_in"] == 3600

        me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token['access_token']}"})
        assert me.status_code == 200
        assert me.json()["email"] == ADMIN_EMAIL
        assert me.json()["last_login_at"] is not None

    def test_wrong_password(self, client):
        response = client.post("/api/auth/token", data={"username": ADMIN_EMAIL, "password": "nope"})
        assert response.status_code == 401
        assert response.json()["error"]["error_code"] == "AUTH_INVALID_CREDENTIALS"

    def test_unknown_admin_token(self, client):
        token = create_access_token({"sub": "ghost@example.com"}, SECRET_KEY, timedelta(minutes=5))
        response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    def test_expired_token(self, client):
        token = create_access_token({"sub": ADMIN_EMAIL}, SECRET_KEY, timedelta(minutes=-1))
        response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401
        assert response.json()["error"]["error_code"] == "AUTH_TOKEN_EXPIRED"


class TestAuthService:
    async def test_create_admin_is_idempotent(self, database):
        assert await create_admin("Editor@Example.com", "pw", database) is not None
        assert await create_admin("editor@example.com", "pw", database) is None

    async def test_authenticate_admin(self, database):
        await create_admin("editor@example.com", "pw", database)
        admin = await authenticate_admin("EDITOR@example.com", "pw", database)
        assert admin.email == "editor@example.com"
        assert admin.last_login_at is not None


class TestLoginRateLimit:
    def test_limit_comes_from_app_settings(self, test_settings):
        limited = test_settings.model_copy(update={"rate_limit_enabled": True, "login_rate_limit": "1/minute"})
        limiter.reset()

        with TestClient(create_app(limited)) as client:
            credentials = {"username": ADMIN_EMAIL, "password": ADMIN_PASSWORD}
            first = client.post("/api/auth/token", data=credentials)
            second = client.post("/api/auth/token", data=credentials)

        limiter.reset()
        limiter.enabled = False
        assert first.status_code == 200
        assert second.status_code == 429
        assert second.json()["error"]["error_code"] == "RATE_LIMIT_EXCEEDED"


class TestAdminDependency:
    @staticmethod
    def _request(settings, database):
        state = SimpleNamespace(settings=settings, database=database)
        return SimpleNamespace(app=SimpleNamespace(state=state))

    async def test_active_admin_is_returned(self, test_settings, database):
        await create_admin("editor@example.com", "pw", database)
        token = create_access_token({"sub": "editor@example.com"}, SECRET_KEY, timedelta(minutes=5))

        admin = await require_admin(self._request(test_settings, database), token)

        assert admin.email == "editor@example.com"

    async def test_deactivated_admin_is_forbidden(self, test_settings, database):
        await create_admin("editor@example.com", "pw", database)
        async with database.session() as db:
            async with db.begin():
                await db.execute(
                    update(AdminUser).where(AdminUser.email == "editor@example.com").values(is_active=False)
                )
        token = create_access_token({"sub": "editor@example.com"}, SECRET_KEY, timedelta(minutes=5))

        with pytest.raises(AuthorizationError):
            await require_admin(self._request(test_settings, database), token)

    async def test_missing_token_is_unauthenticated(self, test_settings, database):
        with pytest.raises(AuthenticationError):
            await require_admin(self._request(test_settings, database), None)
