"""Application layer - use cases and orchestration.

This layer contains:
- DTOs: Data Transfer Objects for API input/output
- Use Cases: Application services that orchestrate domain logic
- Validators: Pydantic field hooks for RFC 822 email attributes
- Exceptions: Application-level error types
"""

from app.rfc822.application.dto import (
    EmailAddressDTO,
    EmailPolicyDTO,
    EmailValidationResultDTO,
    EmailViolationDTO,
    ValidateEmailRequest,
)
from app.rfc822.application.exceptions import (
    ApplicationError,
    EmailLengthError,
    InvalidEmailError,
    InvalidValidationOptionsError,
)
from app.rfc822.application.use_cases import ParseEmailUseCase, ValidateEmailUseCase
from app.rfc822.application.validators import RFC822Email, rfc822_email_validator

__all__ = [
    # DTOs
    "ValidateEmailRequest",
    "EmailViolationDTO",
    "EmailValidationResultDTO",
    "EmailAddressDTO",
    "EmailPolicyDTO",
    # Use Cases
    "ValidateEmailUseCase",
    "ParseEmailUseCase",
    # Validators
    "RFC822Email",
    "rfc822_email_validator",
    # Exceptions
    "ApplicationError",
    "InvalidEmailError",
    "EmailLengthError",
    "InvalidValidationOptionsError",
]
