import logging
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from app.config import Settings, settings as default_settings
from app.database import Database
from app.exception_handlers import register_exception_handlers
from app.middleware.logging import StructuredLoggingMiddleware, setup_structured_logging
from app.middleware.rate_limit import configure_rate_limiting
from app.middleware.security_headers import SecurityHeadersMiddleware
from app.routes import auth, blog, events, i18n, members, resources
from app.services.auth_service import ensure_bootstrap_admin

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the connection pool on startup and release it on shutdown."""
    settings: Settings = app.state.settings
    database: Database = app.state.database

    logger.info(f"Starting {settings.app_name} ({settings.environment})")
    database.init()
    if settings.create_schema_on_startup:
        await database.create_all()
        logger.info("Database tables created (if not existing).")
    await ensure_bootstrap_admin(settings, database)

    yield

    logger.info("Shutting down the application...")
    await database.dispose()


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """Create the FastAPI application."""
    settings = settings or default_settings
    database = database or Database.from_settings(settings)

    app = FastAPI(
        title=settings.app_name,
        description="Content and membership API for the Green Building Council site",
        debug=settings.debug,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database
    app.state.started_at = time.monotonic()

    # Middleware (last added runs first)
    app.add_middleware(SecurityHeadersMiddleware, enable_hsts=settings.is_production)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "X-Request-ID"],
    )
    app.add_middleware(StructuredLoggingMiddleware)

    register_exception_handlers(app)
    configure_rate_limiting(app, settings)

    # Include routers
    app.include_router(auth.router, prefix="/api/auth", tags=["Auth"])
    app.include_router(blog.router, prefix="/api/blog", tags=["Blog"])
    app.include_router(events.router, prefix="/api/events", tags=["Events"])
    app.include_router(resources.router, prefix="/api/resources", tags=["Resources"])
    app.include_router(members.router, prefix="/api/members", tags=["Members"])
    app.include_router(i18n.router, prefix="/api/i18n", tags=["i18n"])

    @app.get("/health", tags=["Health"])
    async def health(request: Request):
        """Liveness probe. Reports database reachability without failing on it."""
        database_ok = await request.app.state.database.ping()
        return {
            "status": "OK",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "uptime": round(time.monotonic() - request.app.state.started_at, 3),
            "environment": settings.environment,
            "database": "ok" if database_ok else "unavailable",
        }

    return app


setup_structured_logging(
    log_level=default_settings.log_level,
    json_format=default_settings.log_json,
    debug_sql=default_settings.debug,
)

app = create_app()


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=default_settings.port, reload=default_settings.debug)
