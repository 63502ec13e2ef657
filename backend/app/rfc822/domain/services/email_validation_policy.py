"""Email validation policy combining the length guard and the RFC 822 grammar.

Describes how a host model validates an email attribute:
- Length bounds (minimum/maximum or an exact length) checked first
- RFC 822 syntax checked only when the length is acceptable
- Optional skipping of absent values, lifecycle gating and a record condition

The policy produces violation codes and messages; turning them into
user-facing errors is left to the caller.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from app.rfc822.domain.grammar import (
    DEFAULT_MAX_LENGTH,
    DEFAULT_MIN_LENGTH,
    is_valid_email_length,
    is_valid_email_syntax,
)

INVALID_EMAIL = "invalid_email"
TOO_SHORT = "too_short"
TOO_LONG = "too_long"
WRONG_LENGTH = "wrong_length"


class ValidationEvent(Enum):
    """Lifecycle points at which a validation can be active."""

    SAVE = "save"      # Active on every save, create or update
    CREATE = "create"
    UPDATE = "update"


@dataclass(frozen=True)
class EmailViolation:
    """A single failed check.

    Attributes:
        code: Machine-readable violation code (e.g., "too_short").
        message: Human-readable message with bounds interpolated.
    """

    code: str
    message: str


@dataclass(frozen=True)
class EmailValidationOptions:
    """Recognized options for validating an email attribute.

    Attributes:
        minimum: Inclusive minimum length in characters.
        maximum: Inclusive maximum length in characters.
        exact: Required exact length; overrides minimum/maximum when set.
        message: Message for a syntax violation.
        too_short: Template for a minimum violation, formatted with ``count``.
        too_long: Template for a maximum violation, formatted with ``count``.
        wrong_length: Template for an exact-length violation.
        allow_none: Skip validation entirely when the value is None.
        on: Lifecycle event at which the validation is active.
        condition: Callable receiving the record; validation runs only
            when it returns a truthy value.
    """

    minimum: int = DEFAULT_MIN_LENGTH
    maximum: int = DEFAULT_MAX_LENGTH
    exact: Optional[int] = None
    message: str = "is an invalid email"
    too_short: str = "is too short (minimum is {count} characters)"
    too_long: str = "is too long (maximum is {count} characters)"
    wrong_length: str = "is the wrong length (should be {count} characters)"
    allow_none: bool = False
    on: ValidationEvent = ValidationEvent.SAVE
    condition: Optional[Callable[[Any], bool]] = None

    def __post_init__(self) -> None:
        """Reject bounds that could never be satisfied."""
        if self.minimum < 0 or self.maximum < 0:
            raise ValueError("Length bounds must be non-negative")
        if self.minimum > self.maximum:
            raise ValueError(
                f"minimum ({self.minimum}) must not exceed maximum ({self.maximum})"
            )
        if self.exact is not None and self.exact < 0:
            raise ValueError("Exact length must be non-negative")

    @classmethod
    def within(cls, minimum: int, maximum: int, **kwargs: Any) -> "EmailValidationOptions":
        """Build options from an inclusive length range.

        Args:
            minimum: Inclusive lower bound.
            maximum: Inclusive upper bound.
            **kwargs: Any other recognized option.

        Returns:
            EmailValidationOptions with the given range.
        """
        return cls(minimum=minimum, maximum=maximum, **kwargs)


class EmailValidator:
    """Applies EmailValidationOptions to candidate values.

    Stateless apart from its options, so one instance may be shared freely.
    """

    def __init__(self, options: Optional[EmailValidationOptions] = None) -> None:
        self._options = options or EmailValidationOptions()

    @property
    def options(self) -> EmailValidationOptions:
        return self._options

    def applies_to(self, event: ValidationEvent, record: Any = None) -> bool:
        """Decide whether validation should run for a lifecycle event.

        Args:
            event: The event being performed (CREATE or UPDATE, or SAVE).
            record: The object being validated, passed to the condition.

        Returns:
            True if the validation is active for this event and record.
        """
        if self._options.on is not ValidationEvent.SAVE and self._options.on is not event:
            return False
        if self._options.condition is not None:
            return bool(self._options.condition(record))
        return True

    def validate(self, value: Optional[str]) -> list[EmailViolation]:
        """Check a value and collect violations.

        The length check runs first. A length violation is reported on its
        own and the syntax check is skipped.

        Args:
            value: Candidate string, or None when the attribute is absent.

        Returns:
            A list of violations, empty when the value is acceptable.
        """
        if value is None:
            if self._options.allow_none:
                return []
            return [EmailViolation(INVALID_EMAIL, self._options.message)]

        length_violation = self._check_length(value)
        if length_violation is not None:
            return [length_violation]

        if not is_valid_email_syntax(value):
            return [EmailViolation(INVALID_EMAIL, self._options.message)]
        return []

    def is_valid(self, value: Optional[str]) -> bool:
        return not self.validate(value)

    def _check_length(self, value: str) -> Optional[EmailViolation]:
        opts = self._options
        if opts.exact is not None:
            if len(value) != opts.exact:
                return EmailViolation(WRONG_LENGTH, opts.wrong_length.format(count=opts.exact))
            return None

        if is_valid_email_length(value, opts.minimum, opts.maximum):
            return None
        if len(value) < opts.minimum:
            return EmailViolation(TOO_SHORT, opts.too_short.format(count=opts.minimum))
        return EmailViolation(TOO_LONG, opts.too_long.format(count=opts.maximum))
