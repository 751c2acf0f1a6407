"""
Application settings using Pydantic Settings.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        # Prefer local overrides while keeping .env as the default source
        env_file=(".env.local", ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Azure Storage
    azure_storage_account_name: str | None = None
    azure_storage_account_key: SecretStr | None = None
    azure_storage_container: str | None = None
    azure_storage_path_prefix: str | None = Field(
        None, description="Prefix prepended to every artifact path"
    )
    azure_storage_endpoint_suffix: str = "core.windows.net"

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "text"] = "json"

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, value: object) -> object:
        """Accept log level names in any case."""
        return value.upper() if isinstance(value, str) else value

    @property
    def azure_account_key_str(self) -> str | None:
        """Get Azure Storage account key as string."""
        if self.azure_storage_account_key:
            return self.azure_storage_account_key.get_secret_value()
        return None


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
