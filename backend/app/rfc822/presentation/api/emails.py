"""Email validation API endpoints.

- POST /api/emails/validate - Verdict with violations for a candidate
- POST /api/emails/parse - Split a valid address into local-part and domain
- GET /api/emails/policy - Length bounds and message currently in effect
"""

from typing import Annotated

from fastapi import APIRouter, Body, Depends, HTTPException, status

from app.core.config import get_settings
from app.rfc822.application.dto.email_dto import (
    EmailAddressDTO,
    EmailPolicyDTO,
    EmailValidationResultDTO,
    ValidateEmailRequest,
)
from app.rfc822.application.exceptions import (
    EmailLengthError,
    InvalidEmailError,
    InvalidValidationOptionsError,
)
from app.rfc822.application.use_cases.validate_email import (
    ParseEmailUseCase,
    ValidateEmailUseCase,
)
from app.rfc822.domain.services.email_validation_policy import EmailValidationOptions

router = APIRouter()


def get_validation_options() -> EmailValidationOptions:
    """Validation options derived from application settings."""
    return get_settings().default_validation_options()


@router.post("/emails/validate", response_model=EmailValidationResultDTO)
async def validate_email(
    request: ValidateEmailRequest,
    options: EmailValidationOptions = Depends(get_validation_options),
) -> EmailValidationResultDTO:
    """Check a candidate address against the length and syntax rules.

    An unacceptable address is not an error here; the response reports
    ``valid: false`` with the violations.

    Args:
        request: Candidate address and optional bound overrides.
        options: Configured validation options (injected).

    Returns:
        EmailValidationResultDTO with the verdict.

    Raises:
        HTTPException: 400 if the override bounds are inconsistent.
    """
    use_case = ValidateEmailUseCase(options)

    try:
        return await use_case.execute(request)
    except InvalidValidationOptionsError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        ) from e


@router.post("/emails/parse", response_model=EmailAddressDTO)
async def parse_email(
    email: Annotated[str, Body(embed=True, description="Address to split")],
    options: EmailValidationOptions = Depends(get_validation_options),
) -> EmailAddressDTO:
    """Split a valid address at its separating '@'.

    Args:
        email: Candidate address.
        options: Configured validation options (injected).

    Returns:
        EmailAddressDTO with local-part and domain.

    Raises:
        HTTPException: 400 if the address is invalid or has a bad length.
    """
    use_case = ParseEmailUseCase(options)

    try:
        return await use_case.execute(email)
    except (InvalidEmailError, EmailLengthError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"code": e.code, "message": e.message},
        ) from e


@router.get("/emails/policy", response_model=EmailPolicyDTO)
async def get_policy(
    options: EmailValidationOptions = Depends(get_validation_options),
) -> EmailPolicyDTO:
    """Report the validation policy in effect."""
    return EmailPolicyDTO(
        minimum=options.minimum,
        maximum=options.maximum,
        message=options.message,
    )
