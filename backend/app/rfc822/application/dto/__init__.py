"""Data transfer objects for application layer."""

from app.rfc822.application.dto.email_dto import (
    EmailAddressDTO,
    EmailPolicyDTO,
    EmailValidationResultDTO,
    EmailViolationDTO,
    ValidateEmailRequest,
)

__all__ = [
    "ValidateEmailRequest",
    "EmailViolationDTO",
    "EmailValidationResultDTO",
    "EmailAddressDTO",
    "EmailPolicyDTO",
]
