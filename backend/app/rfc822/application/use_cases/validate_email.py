"""Use cases for checking and parsing candidate email addresses.

Orchestrates:
- Per-request overrides of the configured EmailValidationOptions
- Length and syntax checks via EmailValidator
- Local-part/domain extraction via the EmailAddress value object
"""

from dataclasses import replace
from typing import Optional

from app.core.logging import get_logger
from app.rfc822.application.dto.email_dto import (
    EmailAddressDTO,
    EmailValidationResultDTO,
    EmailViolationDTO,
    ValidateEmailRequest,
)
from app.rfc822.application.exceptions import (
    EmailLengthError,
    InvalidEmailError,
    InvalidValidationOptionsError,
)
from app.rfc822.domain.services.email_validation_policy import (
    INVALID_EMAIL,
    EmailValidationOptions,
    EmailValidator,
)
from app.rfc822.domain.value_objects.email_address import EmailAddress

logger = get_logger(__name__)


def _options_for(
    base: EmailValidationOptions, request: ValidateEmailRequest
) -> EmailValidationOptions:
    """Merge request overrides into the base options.

    Raises:
        InvalidValidationOptionsError: If the merged bounds are inconsistent.
    """
    overrides: dict[str, object] = {}
    if request.minimum is not None:
        overrides["minimum"] = request.minimum
    if request.maximum is not None:
        overrides["maximum"] = request.maximum
    if request.exact is not None:
        overrides["exact"] = request.exact
    if request.allow_none is not None:
        overrides["allow_none"] = request.allow_none

    try:
        return replace(base, **overrides)
    except ValueError as e:
        raise InvalidValidationOptionsError(str(e)) from e


class ValidateEmailUseCase:
    """Application service reporting whether a candidate address is acceptable.

    Rejection is an ordinary outcome here: the result carries the
    violations instead of raising.
    """

    def __init__(self, options: Optional[EmailValidationOptions] = None) -> None:
        """Initialize the use case.

        Args:
            options: Base options; request overrides are applied on top.
        """
        self._options = options or EmailValidationOptions()

    async def execute(self, request: ValidateEmailRequest) -> EmailValidationResultDTO:
        """Execute the validation.

        Args:
            request: ValidateEmailRequest with the candidate and overrides.

        Returns:
            EmailValidationResultDTO with the verdict and violations.

        Raises:
            InvalidValidationOptionsError: If the override bounds are inconsistent.
        """
        validator = EmailValidator(_options_for(self._options, request))
        violations = validator.validate(request.email)

        if violations:
            logger.debug(
                f"Rejected email candidate ({len(request.email or '')} chars): "
                f"{', '.join(v.code for v in violations)}"
            )

        return EmailValidationResultDTO(
            email=request.email,
            valid=not violations,
            violations=[EmailViolationDTO.model_validate(v) for v in violations],
        )


class ParseEmailUseCase:
    """Application service splitting a valid address into local-part and domain."""

    def __init__(self, options: Optional[EmailValidationOptions] = None) -> None:
        self._validator = EmailValidator(options)

    async def execute(self, email: str) -> EmailAddressDTO:
        """Execute the parse.

        Args:
            email: Candidate address.

        Returns:
            EmailAddressDTO with the captured parts.

        Raises:
            EmailLengthError: If the address is outside the length bounds.
            InvalidEmailError: If the address does not match the grammar.
        """
        violations = self._validator.validate(email)
        for violation in violations:
            if violation.code != INVALID_EMAIL:
                raise EmailLengthError(email, violation.code, violation.message)

        try:
            address = EmailAddress(email)
        except ValueError as e:
            raise InvalidEmailError(email) from e

        return EmailAddressDTO(
            email=address.value,
            local_part=address.local_part,
            domain=address.domain,
        )
