from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "Veloria Studio API"
    app_env: str = "development"  # development, testing, production
    debug: bool = False
    enable_openapi: bool = True
    api_prefix: str = "/api"

    # Security
    log_user_emails: bool = False
    csp_production: str = "default-src 'self'; frame-ancestors 'none'"

    # Database
    database_url: str
    database_migrations_url: str | None = None
    database_pool_size: int = 5
    database_max_overflow: int = 10
    database_ssl_mode: str = "prefer"  # disable, prefer, require, verify-ca, verify-full
    database_statement_cache_size: int = 100

    # Shutdown
    shutdown_grace_period: int = 30

    # Auth
    jwt_secret_key: str
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24
    argon2_time_cost: int = 3
    argon2_memory_cost: int = 65536
    argon2_parallelism: int = 1

    @field_validator("jwt_secret_key")
    @classmethod
    def validate_jwt_secret(cls, v: str) -> str:
        if v == "change-this-to-a-secure-random-string":
            raise ValueError(
                "JWT_SECRET_KEY must be changed from default value. "
                "Generate a secure secret with: openssl rand -hex 32"
            )
        if len(v) < 32:
            raise ValueError("JWT_SECRET_KEY must be at least 32 characters")
        return v

    # CORS
    cors_origins: list[str] = [
        "https://veloria.in",
        "http://localhost:3000",
        "http://localhost:5173",
    ]

    @field_validator("cors_origins")
    @classmethod
    def validate_cors_origins(cls, v: list[str]) -> list[str]:
        """Reject wildcards, credentials are allowed on every origin."""
        for origin in v:
            if origin == "*":
                raise ValueError(
                    "CORS wildcard '*' is not allowed when allow_credentials=True. "
                    "Specify explicit origins instead."
                )
        return v

    # Metrics
    metrics_api_key: str | None = None

    # Email (Resend)
    resend_api_key: str | None = None  # If not set, emails are logged but not sent
    email_from: str = "Veloria Team <hello@veloria.in>"
    admin_email: str = "admin@veloria.in"
    email_send_timeout_seconds: int = 10
    meeting_video_link: str = "https://zoom.us/j/example"
    meeting_phone_number: str = "+1234567890"

    # Redis (optional - app works without it)
    redis_url: str | None = None
    redis_pool_size: int = 10
    finance_cache_ttl_seconds: int = 60

    # Rate Limiting
    global_rate_limit_per_second: int = 10
    global_rate_limit_burst: int = 20


@lru_cache
def get_settings() -> Settings:
    return Settings()


class ClientSettings(BaseSettings):
    """Settings for the dashboard client library (``VELORIA_*`` variables)."""

    model_config = SettingsConfigDict(
        env_prefix="VELORIA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_url: str = "http://localhost:5000/api"
    storage_path: str | None = None  # None keeps browser-style storage in memory
    request_timeout: float = 15.0
    calendar_retry_limit: int = 3  # failed attempts before the calendar gives up
    calendar_retry_delay: float = 2.0


@lru_cache
def get_client_settings() -> ClientSettings:
    return ClientSettings()
