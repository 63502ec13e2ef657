"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from app.core.config import Settings


class TestSettings:
    """Tests for Settings defaults and environment loading."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the built-in defaults."""
        for name in ("EMAIL_MIN_LENGTH", "EMAIL_MAX_LENGTH", "EMAIL_INVALID_MESSAGE"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.email_min_length == 3
        assert settings.email_max_length == 384
        assert settings.email_invalid_message == "is an invalid email"

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test loading bounds from the environment."""
        monkeypatch.setenv("EMAIL_MIN_LENGTH", "6")
        monkeypatch.setenv("EMAIL_MAX_LENGTH", "100")

        settings = Settings(_env_file=None)

        assert settings.email_min_length == 6
        assert settings.email_max_length == 100

    def test_inverted_bounds_rejected(self) -> None:
        """Test that minimum above maximum fails validation."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, email_min_length=10, email_max_length=5)

    def test_default_validation_options(self) -> None:
        """Test conversion into EmailValidationOptions."""
        settings = Settings(
            _env_file=None,
            email_min_length=5,
            email_max_length=50,
            email_invalid_message="not an email",
        )

        options = settings.default_validation_options()

        assert options.minimum == 5
        assert options.maximum == 50
        assert options.message == "not an email"

    def test_environment_flags(self) -> None:
        """Test environment helper properties."""
        assert Settings(_env_file=None, app_env="production").is_production is True
        assert Settings(_env_file=None, app_env="development").is_development is True
