"""
Settings for the backend domain core.

Tunable values (TOTP provisioning, backup code shape, conflict retries) are
read from the environment with the ``BACKEND_DOMAIN_`` prefix.
"""
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DomainSettings(BaseSettings):
    """Domain settings that can be overridden per deployment."""

    model_config = SettingsConfigDict(
        env_prefix="BACKEND_DOMAIN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application
    app_name: str = Field(default="backend-domain")
    environment: str = Field(default="development")

    # TOTP provisioning
    totp_issuer: str = Field(default="BackendApp")
    totp_digits: int = Field(default=6)
    totp_period: int = Field(default=30)

    # Backup codes
    backup_code_count: int = Field(default=10)
    backup_code_length: int = Field(default=8)

    # Optimistic concurrency
    conflict_retry_attempts: int = Field(default=3)

    @field_validator("totp_digits")
    @classmethod
    def validate_totp_digits(cls, v: int) -> int:
        if v < 6 or v > 8:
            raise ValueError("totp_digits must be between 6 and 8")
        return v

    @field_validator("totp_period", "backup_code_count", "backup_code_length", "conflict_retry_attempts")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("value must be a positive integer")
        return v

    @field_validator("totp_issuer")
    @classmethod
    def validate_issuer(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("totp_issuer must not be empty")
        if ":" in v:
            raise ValueError("totp_issuer must not contain ':'")
        return v.strip()

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment.lower() == "production"


@lru_cache()
def get_settings() -> DomainSettings:
    """Get cached settings instance."""
    return DomainSettings()
