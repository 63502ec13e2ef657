"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.rfc822.domain.grammar import DEFAULT_MAX_LENGTH, DEFAULT_MIN_LENGTH
from app.rfc822.domain.services.email_validation_policy import EmailValidationOptions


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_env: str = Field(default="development")
    debug: bool = Field(default=False)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")

    # Email validation
    email_min_length: int = Field(default=DEFAULT_MIN_LENGTH, ge=0)
    email_max_length: int = Field(default=DEFAULT_MAX_LENGTH, ge=0)
    email_invalid_message: str = Field(default="is an invalid email")

    @model_validator(mode="after")
    def _check_length_bounds(self) -> "Settings":
        if self.email_min_length > self.email_max_length:
            raise ValueError("email_min_length must not exceed email_max_length")
        return self

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"

    def default_validation_options(self) -> EmailValidationOptions:
        """Build validation options from the configured bounds and message."""
        return EmailValidationOptions.within(
            self.email_min_length,
            self.email_max_length,
            message=self.email_invalid_message,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
