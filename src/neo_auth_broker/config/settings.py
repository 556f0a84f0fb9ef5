"""Broker settings loaded from the environment."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AuthBrokerSettings(BaseSettings):
    """Global authentication broker settings."""

    model_config = SettingsConfigDict(
        env_prefix="NEO_AUTH_BROKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Registry behaviour
    warn_on_provider_replace: bool = Field(
        default=True,
        description="Log a warning when a registration replaces an existing provider",
    )
    log_session_updates: bool = Field(
        default=False,
        description="Debug-log every sessions update routed through the broker",
    )

    # Allowed extensions storage
    storage_key_separator: str = Field(
        default="-",
        description="Separator between provider id and account name in storage keys",
    )
    max_allowed_extensions: int = Field(
        default=1000,
        ge=1,
        description="Upper bound on allow list entries read back from storage",
    )

    @field_validator("storage_key_separator")
    @classmethod
    def validate_separator(cls, v: str) -> str:
        """Separator must be non-empty."""
        if not v:
            raise ValueError("storage_key_separator cannot be empty")
        return v


@lru_cache()
def get_settings() -> AuthBrokerSettings:
    """Get cached broker settings."""
    return AuthBrokerSettings()
