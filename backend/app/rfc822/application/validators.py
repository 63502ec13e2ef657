"""Pydantic field validators backed by the RFC 822 email policy.

Lets models declare an RFC 822 email field through pydantic's own
validation hooks:

    class SignupForm(BaseModel):
        email: RFC822Email
        backup_email: Optional[RFC822Email] = None
        work_email: Annotated[str, rfc822_email_validator(EmailValidationOptions(maximum=64))]

Violations surface as pydantic errors whose ``type`` is the violation code
(invalid_email, too_short, too_long, wrong_length).

The lifecycle event is read from the validation context, so a validator
declared with ``on=ValidationEvent.CREATE`` only runs for:

    SignupForm.model_validate(data, context={"event": ValidationEvent.CREATE})

Without an event in the context the model is treated as being saved. The
``condition`` option receives the fields validated before this one.
"""

from typing import Annotated, Any, Optional

from pydantic import AfterValidator, ValidationInfo
from pydantic_core import PydanticCustomError

from app.rfc822.domain.services.email_validation_policy import (
    EmailValidationOptions,
    EmailValidator,
    ValidationEvent,
)


def _event_from(context: Any) -> ValidationEvent:
    if isinstance(context, dict) and "event" in context:
        return ValidationEvent(context["event"])
    return ValidationEvent.SAVE


def rfc822_email_validator(options: Optional[EmailValidationOptions] = None) -> AfterValidator:
    """Build an AfterValidator enforcing the given email options.

    Args:
        options: Validation options; defaults to the 3..384 character policy.

    Returns:
        An AfterValidator usable in ``Annotated`` field types.
    """
    validator = EmailValidator(options)

    def _check(value: str, info: ValidationInfo) -> str:
        if not validator.applies_to(_event_from(info.context), info.data):
            return value

        violations = validator.validate(value)
        if violations:
            violation = violations[0]
            raise PydanticCustomError(violation.code, violation.message)
        return value

    return AfterValidator(_check)


RFC822Email = Annotated[str, rfc822_email_validator()]
