"""
Tests for the health endpoint and application wiring
"""

from app.config import Settings
from app.database import Database
from main import create_app


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "OK"
        assert data["environment"] == "test"
        assert data["database"] == "ok"
        assert data["uptime"] >= 0
        assert "timestamp" in data

    def test_security_headers_and_request_id(self, client):
        response = client.get("/health", headers={"X-Request-ID": "abc-123"})
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"
        assert response.headers["X-Request-ID"] == "abc-123"

    def test_cors_allows_frontend(self, client):
        response = client.options(
            "/api/blog",
            headers={"Origin": "http://localhost:5173", "Access-Control-Request-Method": "GET"},
        )
        assert response.headers["access-control-allow-origin"] == "http://localhost:5173"


class TestDatabaseLifecycle:
    def test_ping_before_init_is_false(self):
        import asyncio

        database = Database("sqlite+aiosqlite:///unused.db")
        assert asyncio.run(database.ping()) is False

    def test_pool_options_only_for_server_databases(self):
        settings = Settings(database_url="postgresql+asyncpg://u:p@db:5432/gbc", db_pool_size=5)
        database = Database.from_settings(settings)
        assert not database.is_sqlite
        assert database.pool_size == 5
        assert Database("sqlite+aiosqlite:///x.db").is_sqlite

    def test_create_app_uses_given_database(self, test_settings):
        database = Database.from_settings(test_settings)
        app = create_app(test_settings, database)
        assert app.state.database is database
        assert app.state.settings is test_settings
