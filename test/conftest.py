"""
Pytest configuration and fixtures for the content & membership API tests
"""

import os
import sys
from datetime import timedelta

import pytest
from fastapi.testclient import TestClient

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))  # noqa: PTH100, PTH118, PTH119, PTH120

from app.auth import create_access_token
from app.config import Settings
from app.database import Database
from main import create_app

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "adminpassword"
SECRET_KEY = "test-secret-key"


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Settings pointing at a throwaway SQLite file (one per test)."""
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        environment="test",
        secret_key=SECRET_KEY,
        admin_email=ADMIN_EMAIL,
        admin_password=ADMIN_PASSWORD,
        rate_limit_enabled=False,
        create_schema_on_startup=True,
    )


@pytest.fixture
async def database(test_settings):
    """
    An initialised Database with every table created, for repository tests
    that run without the HTTP layer.
    """
    db = Database.from_settings(test_settings)
    db.init()
    await db.create_all()
    yield db
    await db.dispose()


@pytest.fixture
def client(test_settings):
    """TestClient over a fresh app; the lifespan creates tables and the bootstrap admin."""
    app = create_app(test_settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_headers() -> dict:
    access_token = create_access_token({"sub": ADMIN_EMAIL}, SECRET_KEY, timedelta(minutes=30))
    return {"Authorization": f"Bearer {access_token}"}


def blog_payload(slug: str = "hello", translations=None, **fields) -> dict:
    payload = {
        "slug": slug,
        "status": "published",
        "translations": translations
        if translations is not None
        else [
            {"language": "fr", "title": "Bonjour"},
            {"language": "en", "title": "Hello"},
        ],
    }
    payload.update(fields)
    return payload


def event_payload(slug: str = "conf", start_date: str = "2030-05-01T09:00:00+00:00", translations=None, **fields) -> dict:
    payload = {
        "slug": slug,
        "start_date": start_date,
        "status": "published",
        "translations": translations
        if translations is not None
        else [
            {"language": "fr", "title": "Conférence"},
            {"language": "en", "title": "Conference"},
        ],
    }
    payload.update(fields)
    return payload


def resource_payload(slug: str = "guide", translations=None, **fields) -> dict:
    payload = {
        "slug": slug,
        "file_url": f"/files/{slug}.pdf",
        "status": "published",
        "translations": translations
        if translations is not None
        else [
            {"language": "fr", "title": "Guide", "type": "guide"},
            {"language": "en", "title": "Guide", "type": "guide"},
        ],
    }
    payload.update(fields)
    return payload
