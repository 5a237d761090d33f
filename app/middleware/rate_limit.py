"""
Rate Limiting

slowapi limiter shared by the routes that accept anonymous writes
(membership signup) or credentials (token issue).
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from app.config import Settings, settings

# Limits are applied per route with @limiter.limit; there is no global default
limiter = Limiter(
    key_func=get_remote_address,
    storage_uri="memory://",
    enabled=settings.rate_limit_enabled,
)

# Replaced by configure_rate_limiting with the settings the app was built from
_active_limits = {
    "signup": settings.signup_rate_limit,
    "login": settings.login_rate_limit,
}


def signup_limit() -> str:
    return _active_limits["signup"]


def login_limit() -> str:
    return _active_limits["login"]


def configure_rate_limiting(app, app_settings: Settings) -> None:
    """Attach the limiter to the app; the 429 handler lives in ``register_exception_handlers``."""
    _active_limits["signup"] = app_settings.signup_rate_limit
    _active_limits["login"] = app_settings.login_rate_limit
    limiter.enabled = app_settings.rate_limit_enabled
    app.state.limiter = limiter
