"""Data Transfer Objects for email validation requests and responses.

These DTOs represent the external contract for validation operations exposed
through the API layer. They are decoupled from the domain objects.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ValidateEmailRequest(BaseModel):
    """Request payload for checking a candidate address.

    The length bounds are optional overrides of the configured policy.
    """

    email: Optional[str] = Field(description="Candidate address to check")
    minimum: Optional[int] = Field(default=None, ge=0, description="Override minimum length")
    maximum: Optional[int] = Field(default=None, ge=0, description="Override maximum length")
    exact: Optional[int] = Field(default=None, ge=0, description="Require an exact length")
    allow_none: Optional[bool] = Field(
        default=None,
        description="Override whether a missing address is accepted"
    )


class EmailViolationDTO(BaseModel):
    """A single failed check."""

    model_config = ConfigDict(from_attributes=True)

    code: str = Field(description="Violation code (invalid_email, too_short, too_long, wrong_length)")
    message: str = Field(description="Human-readable message")


class EmailValidationResultDTO(BaseModel):
    """Verdict for a candidate address."""

    email: Optional[str] = Field(description="The candidate as submitted")
    valid: bool = Field(description="Whether every check passed")
    violations: list[EmailViolationDTO] = Field(default_factory=list)


class EmailAddressDTO(BaseModel):
    """A valid address split at its separating '@'."""

    email: str = Field(description="The address as submitted")
    local_part: str = Field(description="Portion before the '@'")
    domain: str = Field(description="Portion after the '@'")


class EmailPolicyDTO(BaseModel):
    """The validation policy currently in effect."""

    minimum: int = Field(description="Inclusive minimum length")
    maximum: int = Field(description="Inclusive maximum length")
    message: str = Field(description="Message reported for a syntax violation")
