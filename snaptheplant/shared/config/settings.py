# 📄 File: snaptheplant/shared/config/settings.py
#
# 🧭 Purpose (Layman Explanation):
# Every knob SnapThePlant can be tuned with (ports, database, Stripe keys, trial length)
# read once from the environment or a .env file.
#
# 🧪 Purpose (Technical Summary):
# pydantic-settings model: typed fields with defaults, enum-like choices normalized by
# field validators, and derived properties (async DB URL, CORS list, storage choice).
# Settings objects are passed explicitly into the application factory and
# every component built at startup; nothing reads them at import time.
#
# 🔗 Dependencies:
# - pydantic, pydantic-settings
# - pydantic-settings reads .env (python-dotenv under the hood)
#
# 🔄 Connected Modules / Calls From:
# - snaptheplant.main (application factory)
# - snaptheplant.shared.core.container (service wiring)
# - snaptheplant.background_jobs (worker startup)

from functools import lru_cache
from typing import List, Optional

from pydantic import Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from snaptheplant import __description__, __title__, __version__

_CHOICES = {
    "ENVIRONMENT": ["development", "staging", "production", "test"],
    "STORAGE_BACKEND": ["auto", "memory", "sql"],
    "SESSION_BACKEND": ["memory", "redis"],
    "LOG_FORMAT": ["json", "text"],
}


class Settings(BaseSettings):
    """Typed process configuration; environment variables win over .env entries."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # =========================================================================
    # APPLICATION
    # =========================================================================

    APP_NAME: str = Field(default=__title__, description="Application name")
    APP_VERSION: str = Field(default=__version__, description="Application version")
    APP_DESCRIPTION: str = Field(default=__description__, description="Application description")
    ENVIRONMENT: str = Field(default="development", description="development, staging, production or test")
    DEBUG: bool = Field(default=False, description="Debug mode flag")
    LOG_LEVEL: str = Field(default="INFO", description="Root log level")
    LOG_FORMAT: str = Field(default="json", description="Log output format (json or text)")
    LOG_FILE: Optional[str] = Field(None, description="Optional log file path")

    # =========================================================================
    # HTTP SERVER
    # =========================================================================

    HOST: str = Field(default="0.0.0.0", description="Bind address")
    PORT: int = Field(default=8000, description="Bind port")
    RELOAD: bool = Field(default=False, description="Auto-reload on changes")
    WORKERS: int = Field(default=1, description="uvicorn worker processes")

    CORS_ORIGINS: str = Field(
        default="http://localhost:3000,http://localhost:5173",
        description="Comma-separated browser origins"
    )
    CORS_ALLOW_CREDENTIALS: bool = Field(default=True, description="Let browsers send the session cookie cross-origin")

    # =========================================================================
    # STORAGE CONFIGURATION
    # =========================================================================

    STORAGE_BACKEND: str = Field(
        default="auto",
        description="Repository backend: memory, sql, or auto (sql when DATABASE_URL is set)"
    )
    DATABASE_URL: Optional[str] = Field(None, description="SQLAlchemy async database URL")
    DB_AUTO_CREATE_TABLES: bool = Field(
        default=False,
        description="Create tables on startup instead of relying on Alembic"
    )
    DB_ECHO: bool = Field(default=False, description="Echo SQL statements")
    DB_POOL_SIZE: int = Field(default=10, description="Persistent connections per process")
    DB_MAX_OVERFLOW: int = Field(default=20, description="Connections allowed beyond the pool size")
    DB_POOL_TIMEOUT: int = Field(default=30, description="Seconds to wait for a pooled connection")
    DB_POOL_RECYCLE: int = Field(default=3600, description="Seconds before a pooled connection is replaced")

    # =========================================================================
    # SESSION CONFIGURATION
    # =========================================================================

    SESSION_BACKEND: str = Field(default="memory", description="Session store: memory or redis")
    SESSION_COOKIE_NAME: str = Field(default="sid", description="Session cookie name")
    SESSION_TTL_SECONDS: int = Field(default=7 * 24 * 3600, description="Session lifetime")
    SESSION_COOKIE_SECURE: bool = Field(default=False, description="Send cookie over HTTPS only")

    REDIS_URL: str = Field(default="redis://localhost:6379/0", description="Redis used for sessions")
    REDIS_MAX_CONNECTIONS: int = Field(default=20, description="Max pooled Redis connections")

    # =========================================================================
    # CELERY / BACKGROUND JOBS
    # =========================================================================

    CELERY_BROKER_URL: str = Field(
        default="redis://localhost:6379/1",
        description="Broker for the trial sweep worker"
    )
    CELERY_RESULT_BACKEND: str = Field(
        default="redis://localhost:6379/2",
        description="Where Celery stores task results"
    )

    TRIAL_SWEEP_ENABLED: bool = Field(
        default=True,
        description="Run the trial expiry sweep inside the API process"
    )
    TRIAL_SWEEP_INTERVAL_SECONDS: float = Field(
        default=3600.0,
        description="Seconds between trial sweep ticks"
    )

    # =========================================================================
    # SUBSCRIPTIONS & QUOTAS
    # =========================================================================

    TRIAL_DURATION_DAYS: int = Field(default=3, description="Self-service trial length")
    LIFETIME_PRICE_CENTS: int = Field(default=4999, description="Lifetime purchase price in cents")
    PAYMENT_CURRENCY: str = Field(default="usd", description="Payment currency")

    # =========================================================================
    # PLANT IDENTIFICATION API
    # =========================================================================

    PLANT_ID_API_KEY: Optional[str] = Field(None, description="Plant.id key (identification disabled when empty)")
    PLANT_ID_API_URL: str = Field(
        default="https://api.plant.id/v2/identify",
        description="Plant.id identify endpoint"
    )
    PLANT_ID_TIMEOUT: int = Field(default=30, description="Plant.id request timeout (seconds)")
    MAX_IMAGE_SIZE: int = Field(default=10 * 1024 * 1024, description="Maximum upload size (bytes)")

    # =========================================================================
    # PAYMENTS (STRIPE)
    # =========================================================================

    STRIPE_SECRET_KEY: Optional[str] = Field(None, description="Stripe key (payments disabled when empty)")
    STRIPE_WEBHOOK_SECRET: Optional[str] = Field(None, description="Stripe webhook signing secret")
    STRIPE_PRICE_ID: Optional[str] = Field(None, description="Stripe monthly price ID")

    # =========================================================================
    # EMAIL (SENDGRID)
    # =========================================================================

    SENDGRID_API_KEY: Optional[str] = Field(None, description="SendGrid key (emails are skipped when empty)")
    SENDGRID_FROM_EMAIL: str = Field(
        default="noreply@snaptheplant.com",
        description="Default sender address"
    )
    PUBLIC_BASE_URL: str = Field(
        default="https://snaptheplant.com",
        description="Public site URL used in email links"
    )
    PRO_PACK_DOWNLOAD_PATH: str = Field(
        default="/pro-pack/snaptheplant-pro.zip",
        description="Pro Pack download path"
    )

    # =========================================================================
    # ANALYTICS
    # =========================================================================

    ANALYTICS_LOG_DIR: str = Field(default="analytics_logs", description="Analytics log directory")

    # =========================================================================
    # SEEDED ACCOUNTS
    # =========================================================================

    ADMIN_USERNAME: str = Field(default="admin", description="Seeded admin username")
    ADMIN_EMAIL: str = Field(default="admin@snaptheplant.com", description="Seeded admin email")
    ADMIN_PASSWORD: Optional[str] = Field(None, description="Seeded admin password (seeding disabled when empty)")
    SEED_DEMO_USER: bool = Field(default=False, description="Seed the demo user on startup")

    # =========================================================================
    # VALIDATORS
    # =========================================================================

    @field_validator("ENVIRONMENT", "STORAGE_BACKEND", "SESSION_BACKEND", "LOG_FORMAT")
    @classmethod
    def validate_choice(cls, v: str, info: ValidationInfo) -> str:
        allowed = _CHOICES[info.field_name]
        if v.lower() not in allowed:
            raise ValueError(f"{info.field_name} must be one of {allowed}")
        return v.lower()

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed:
            raise ValueError(f"Log level must be one of {allowed}")
        return v.upper()

    @field_validator("CORS_ORIGINS")
    @classmethod
    def validate_cors_origins(cls, v: str) -> str:
        origins = [origin.strip() for origin in v.split(",") if origin.strip()]
        for origin in origins:
            if not origin.startswith(("http://", "https://", "*")):
                raise ValueError(f"Invalid CORS origin format: {origin}")
        return v

    # =========================================================================
    # DERIVED VALUES
    # =========================================================================

    @property
    def use_sql_storage(self) -> bool:
        """Whether repositories should be backed by the relational database."""
        if self.STORAGE_BACKEND == "sql":
            return True
        if self.STORAGE_BACKEND == "memory":
            return False
        return bool(self.DATABASE_URL)

    @property
    def async_database_url(self) -> Optional[str]:
        """DATABASE_URL with a plain ``postgresql://`` scheme switched to asyncpg."""
        if self.DATABASE_URL and self.DATABASE_URL.startswith("postgresql://"):
            return self.DATABASE_URL.replace("postgresql://", "postgresql+asyncpg://", 1)
        return self.DATABASE_URL

    @property
    def cors_origins_list(self) -> List[str]:
        """CORS_ORIGINS split on commas."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def pro_pack_download_url(self) -> str:
        return f"{self.PUBLIC_BASE_URL.rstrip('/')}{self.PRO_PACK_DOWNLOAD_PATH}"

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    @property
    def is_testing(self) -> bool:
        return self.ENVIRONMENT == "test"


# ============================================================================
# CACHED ACCESSOR
# ============================================================================

@lru_cache()
def get_settings() -> Settings:
    """Settings from the process environment, parsed once."""
    return Settings()
