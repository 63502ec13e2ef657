"""Liveness and readiness endpoints.

- GET /api/health - Process is up
- GET /api/ready - Grammar matches a known address and the configured
  length bounds admit it; 503 otherwise
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from app.rfc822.domain.grammar import ADDRESS_PATTERN, is_valid_email_length
from app.rfc822.domain.services.email_validation_policy import EmailValidationOptions
from app.rfc822.presentation.api.emails import get_validation_options

# Shortest plausible address; every sane configuration must accept it
_REFERENCE_ADDRESS = "a@b.c"

router = APIRouter()


class HealthResponse(BaseModel):
    """Liveness payload."""

    status: str
    checked_at: datetime


class ReadinessResponse(BaseModel):
    """Readiness payload with the bounds that were checked."""

    status: str
    minimum: int
    maximum: int


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Report that the process is serving requests."""
    return HealthResponse(status="healthy", checked_at=datetime.now(timezone.utc))


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(
    options: EmailValidationOptions = Depends(get_validation_options),
) -> ReadinessResponse:
    """Check that validation can accept a well-formed address.

    Args:
        options: Configured validation options (injected).

    Returns:
        ReadinessResponse with the active bounds.

    Raises:
        HTTPException: 503 if the grammar or the bounds reject the
            reference address.
    """
    if ADDRESS_PATTERN.match(_REFERENCE_ADDRESS.encode("ascii")) is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Address pattern rejects a well-formed address",
        )
    if not is_valid_email_length(_REFERENCE_ADDRESS, options.minimum, options.maximum):
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=(
                f"Length bounds {options.minimum}..{options.maximum} "
                f"reject a {len(_REFERENCE_ADDRESS)}-character address"
            ),
        )

    return ReadinessResponse(status="ready", minimum=options.minimum, maximum=options.maximum)
