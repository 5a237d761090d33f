from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv
from typing import Optional

load_dotenv()

# Development-only signing key; refused when environment is "production"
DEFAULT_SECRET_KEY = "change-me-in-production"


class Settings(BaseSettings):
    # Application settings
    app_name: str = "Green Building Council API"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"
    port: int = 3001

    # Database settings
    db_host: str = "localhost"
    db_port: int = 5432
    db_name: str = "tunisiagbc"
    db_user: str = "postgres"
    db_password: str = ""
    database_url: Optional[str] = None

    # Connection pool
    db_pool_size: int = 20
    db_max_overflow: int = 0
    db_pool_timeout: float = 2.0
    db_pool_recycle: int = 1800
    create_schema_on_startup: bool = True

    # Security settings
    secret_key: str = DEFAULT_SECRET_KEY
    access_token_expire_minutes: int = 60
    admin_email: Optional[str] = None
    admin_password: Optional[str] = None

    # CORS settings
    frontend_url: str = "http://localhost:5173"

    # i18n
    default_language: str = "fr"
    supported_languages: list[str] = ["fr", "en", "ar"]

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    # Rate limiting
    rate_limit_enabled: bool = True
    signup_rate_limit: str = "10/minute"
    login_rate_limit: str = "5/minute"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @model_validator(mode="after")
    def check_production_secret(self) -> "Settings":
        if self.is_production and (not self.secret_key or self.secret_key == DEFAULT_SECRET_KEY):
            raise ValueError("SECRET_KEY must be set to a private value in production")
        return self

    @property
    def sqlalchemy_url(self) -> str:
        if self.database_url:
            return self.database_url
        return (
            f"postgresql+asyncpg://{self.db_user}:{self.db_password}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
        )

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


settings = Settings()
