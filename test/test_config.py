"""
Tests for application settings
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from app.config import DEFAULT_SECRET_KEY, Settings


class TestSecretKey:
    def test_default_key_allowed_in_development(self):
        settings = Settings(environment="development", secret_key=DEFAULT_SECRET_KEY)
        assert settings.secret_key == DEFAULT_SECRET_KEY

    def test_default_key_rejected_in_production(self):
        with pytest.raises(PydanticValidationError):
            Settings(environment="production", secret_key=DEFAULT_SECRET_KEY)

    def test_empty_key_rejected_in_production(self):
        with pytest.raises(PydanticValidationError):
            Settings(environment="production", secret_key="")

    def test_private_key_accepted_in_production(self):
        settings = Settings(environment="production", secret_key="a-long-private-value")
        assert settings.is_production


class TestDatabaseUrl:
    def test_built_from_parts(self):
        settings = Settings(database_url=None, db_user="gbc", db_password="pw", db_host="db", db_port=5433, db_name="site")
        assert settings.sqlalchemy_url == "postgresql+asyncpg://gbc:pw@db:5433/site"

    def test_explicit_url_wins(self):
        settings = Settings(database_url="sqlite+aiosqlite:///local.db")
        assert settings.sqlalchemy_url == "sqlite+aiosqlite:///local.db"
