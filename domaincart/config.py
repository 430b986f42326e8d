"""Configuration loading for the domain cart.

This module provides centralized configuration management:
- Load settings from environment variables and .env files
- Validate configuration using pydantic
- Provide typed access to all settings
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment.

    Uses pydantic-settings for environment variable handling with
    .env file support via python-dotenv.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Cart configuration
    num_required: int = Field(
        default=5,
        description="Number of domains required before purchase is enabled",
    )

    # Availability backend configuration
    availability_backend: Literal["rdap", "static"] = Field(
        default="rdap",
        description="Availability lookup backend type",
    )
    rdap_base_url: str = Field(
        default="https://rdap.org",
        description="RDAP bootstrap/redirect service base URL",
    )
    rdap_timeout_seconds: float = Field(
        default=5.0,
        description="Timeout for a single RDAP lookup in seconds",
    )
    static_unavailable_domains: str = Field(
        default="",
        description="Comma-separated domains reported as taken by the static backend",
    )
    static_latency_seconds: float = Field(
        default=0.0,
        description="Simulated lookup latency for the static backend",
    )

    # Notification configuration
    notification_backend: Literal["stdout"] = Field(
        default="stdout",
        description="Notification backend type",
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    # Development
    debug: bool = Field(
        default=False,
        description="Enable debug mode with verbose logging",
    )

    @field_validator("num_required")
    @classmethod
    def validate_num_required(cls, v: int) -> int:
        """Ensure the target cart size is positive."""
        if v <= 0:
            raise ValueError("num_required must be positive")
        return v

    @field_validator("rdap_timeout_seconds")
    @classmethod
    def validate_rdap_timeout(cls, v: float) -> float:
        """Ensure lookup timeout is positive."""
        if v <= 0:
            raise ValueError("rdap_timeout_seconds must be positive")
        return v

    @field_validator("static_latency_seconds")
    @classmethod
    def validate_static_latency(cls, v: float) -> float:
        """Ensure simulated latency is non-negative."""
        if v < 0:
            raise ValueError("static_latency_seconds must be non-negative")
        return v

    @property
    def static_unavailable(self) -> frozenset[str]:
        """Parsed static_unavailable_domains, lower-cased."""
        return frozenset(
            d.strip().lower()
            for d in self.static_unavailable_domains.split(",")
            if d.strip()
        )


def load_settings(env_file: str | None = None) -> Settings:
    """Load application settings from environment.

    Args:
        env_file: Optional path to .env file. If not provided,
                 uses the default .env in the current directory.

    Returns:
        Validated Settings instance.

    Raises:
        ValidationError: If settings validation fails.
    """
    if env_file:
        return Settings(_env_file=env_file)  # type: ignore[call-arg]
    return Settings()


__all__ = ["Settings", "load_settings"]
