"""Unit tests for EmailValidator and EmailValidationOptions."""

import pytest

from app.rfc822.domain.services.email_validation_policy import (
    INVALID_EMAIL,
    TOO_LONG,
    TOO_SHORT,
    WRONG_LENGTH,
    EmailValidationOptions,
    EmailValidator,
    EmailViolation,
    ValidationEvent,
)


@pytest.fixture
def validator() -> EmailValidator:
    """Create a validator with default options."""
    return EmailValidator()


class TestEmailValidationOptions:
    """Tests for option defaults and bound checking."""

    def test_defaults(self) -> None:
        """Test the default policy."""
        options = EmailValidationOptions()

        assert options.minimum == 3
        assert options.maximum == 384
        assert options.exact is None
        assert options.message == "is an invalid email"
        assert options.allow_none is False
        assert options.on is ValidationEvent.SAVE
        assert options.condition is None

    def test_within(self) -> None:
        """Test building options from a range."""
        options = EmailValidationOptions.within(5, 10, allow_none=True)

        assert options.minimum == 5
        assert options.maximum == 10
        assert options.allow_none is True

    def test_minimum_above_maximum_raises(self) -> None:
        """Test that an empty range is rejected."""
        with pytest.raises(ValueError, match="must not exceed"):
            EmailValidationOptions(minimum=10, maximum=5)

    @pytest.mark.parametrize(
        "kwargs",
        [{"minimum": -1}, {"maximum": -1}, {"exact": -1}],
    )
    def test_negative_bounds_raise(self, kwargs: dict) -> None:
        """Test that negative bounds are rejected."""
        with pytest.raises(ValueError):
            EmailValidationOptions(**kwargs)


class TestValidate:
    """Tests for EmailValidator.validate."""

    def test_valid_address(self, validator: EmailValidator) -> None:
        """Test that a valid address yields no violations."""
        assert validator.validate("a@b.c") == []
        assert validator.is_valid("user@sub.example.com") is True

    def test_invalid_syntax(self, validator: EmailValidator) -> None:
        """Test the syntax violation."""
        assert validator.validate("user@@example.com") == [
            EmailViolation(INVALID_EMAIL, "is an invalid email")
        ]

    def test_too_short(self, validator: EmailValidator) -> None:
        """Test the minimum-length violation message."""
        assert validator.validate("ab") == [
            EmailViolation(TOO_SHORT, "is too short (minimum is 3 characters)")
        ]

    def test_too_long(self, validator: EmailValidator) -> None:
        """Test the maximum-length violation message."""
        assert validator.validate("a" * 381 + "@b.c") == [
            EmailViolation(TOO_LONG, "is too long (maximum is 384 characters)")
        ]

    def test_longest_allowed_address(self, validator: EmailValidator) -> None:
        """Test that an address of exactly the maximum length passes."""
        assert validator.validate("a" * 380 + "@b.c") == []

    def test_length_violation_skips_syntax_check(self, validator: EmailValidator) -> None:
        """Test that oversized garbage reports only the length violation."""
        violations = validator.validate("\\" * 5000)

        assert [v.code for v in violations] == [TOO_LONG]

    def test_none_is_invalid_by_default(self, validator: EmailValidator) -> None:
        """Test that a missing value is rejected."""
        assert [v.code for v in validator.validate(None)] == [INVALID_EMAIL]

    def test_none_skipped_with_allow_none(self) -> None:
        """Test that allow_none bypasses validation."""
        validator = EmailValidator(EmailValidationOptions(allow_none=True))

        assert validator.validate(None) == []
        assert validator.is_valid(None) is True

    def test_allow_none_still_checks_empty_string(self) -> None:
        """Test that allow_none does not cover the empty string."""
        validator = EmailValidator(EmailValidationOptions(allow_none=True))

        assert [v.code for v in validator.validate("")] == [TOO_SHORT]

    def test_exact_length(self) -> None:
        """Test the exact-length option."""
        validator = EmailValidator(EmailValidationOptions(exact=5))

        assert validator.validate("a@b.c") == []
        assert validator.validate("ab@c.d") == [
            EmailViolation(WRONG_LENGTH, "is the wrong length (should be 5 characters)")
        ]

    def test_exact_length_still_checks_syntax(self) -> None:
        """Test that a correct length does not excuse bad syntax."""
        validator = EmailValidator(EmailValidationOptions(exact=5))

        assert [v.code for v in validator.validate("a@@bc")] == [INVALID_EMAIL]

    def test_custom_messages(self) -> None:
        """Test overriding messages."""
        validator = EmailValidator(
            EmailValidationOptions(
                minimum=6,
                message="doesn't look like an email",
                too_short="needs {count}+ characters",
            )
        )

        assert validator.validate("a@b.c")[0].message == "needs 6+ characters"
        assert validator.validate("abc@@def")[0].message == "doesn't look like an email"


class TestAppliesTo:
    """Tests for lifecycle and condition gating."""

    def test_save_applies_to_every_event(self, validator: EmailValidator) -> None:
        """Test that the default event covers create and update."""
        assert validator.applies_to(ValidationEvent.CREATE) is True
        assert validator.applies_to(ValidationEvent.UPDATE) is True
        assert validator.applies_to(ValidationEvent.SAVE) is True

    def test_create_only(self) -> None:
        """Test that a create-only validation is skipped on update."""
        validator = EmailValidator(EmailValidationOptions(on=ValidationEvent.CREATE))

        assert validator.applies_to(ValidationEvent.CREATE) is True
        assert validator.applies_to(ValidationEvent.UPDATE) is False

    def test_condition_receives_record(self) -> None:
        """Test that the condition decides using the record."""
        validator = EmailValidator(
            EmailValidationOptions(condition=lambda record: record["signup_step"] > 2)
        )

        assert validator.applies_to(ValidationEvent.SAVE, {"signup_step": 3}) is True
        assert validator.applies_to(ValidationEvent.SAVE, {"signup_step": 1}) is False

    def test_event_checked_before_condition(self) -> None:
        """Test that an inactive event short-circuits the condition."""
        calls: list[object] = []
        validator = EmailValidator(
            EmailValidationOptions(
                on=ValidationEvent.UPDATE,
                condition=lambda record: calls.append(record) or True,
            )
        )

        assert validator.applies_to(ValidationEvent.CREATE, "record") is False
        assert calls == []
