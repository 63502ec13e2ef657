"""Domain services implementing email validation rules.

- EmailValidator / EmailValidationOptions: Length and RFC 822 syntax policy
"""

from app.rfc822.domain.services.email_validation_policy import (
    EmailValidationOptions,
    EmailValidator,
    EmailViolation,
    ValidationEvent,
)

__all__ = [
    "EmailValidationOptions",
    "EmailValidator",
    "EmailViolation",
    "ValidationEvent",
]
