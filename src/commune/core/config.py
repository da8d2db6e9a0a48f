from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Width of the stored code column. otp_length may not exceed it.
OTP_MAX_LENGTH = 10


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "Commune Back Office"
    app_env: str = "development"  # development, testing, production
    debug: bool = False
    enable_openapi: bool = True

    # Security
    log_user_emails: bool = False  # Keep False in production (GDPR)

    # Database
    database_url: str
    database_pool_size: int = 5
    database_max_overflow: int = 10

    # Tokens
    jwt_secret_key: str
    jwt_algorithm: str = "HS256"
    jwt_issuer: str = "commune-apartments"
    jwt_audience: str = "commune-users"
    access_token_expire_minutes: int = 60 * 24 * 7
    # When True, every request reloads the principal and rejects non-active ones.
    token_recheck_principal_status: bool = False

    # One-time passwords
    otp_length: int = 6
    otp_expire_minutes: int = 10
    otp_max_attempts: int = 3
    otp_resend_cooldown_seconds: int = 60

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

    @field_validator("otp_length")
    @classmethod
    def validate_otp_length(cls, v: int) -> int:
        if not 4 <= v <= OTP_MAX_LENGTH:
            raise ValueError(f"OTP_LENGTH must be between 4 and {OTP_MAX_LENGTH}")
        return v

    @field_validator("cors_origins")
    @classmethod
    def validate_cors_origins(cls, v: list[str]) -> list[str]:
        """Reject wildcards, credentials are allowed on CORS requests."""
        for origin in v:
            if origin == "*":
                raise ValueError(
                    "CORS wildcard '*' is not allowed when allow_credentials=True. "
                    "Specify explicit origins instead."
                )
        return v

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Metrics
    metrics_api_key: str | None = None  # If set, /metrics requires this key

    # Email (Resend)
    resend_api_key: str | None = None  # If not set, codes are not delivered
    email_from: str = "noreply@commune.example"
    email_send_timeout_seconds: int = 10

    # Rate limiting storage for slowapi (in-memory when unset)
    redis_url: str | None = None


@lru_cache
def get_settings() -> Settings:
    return Settings()
