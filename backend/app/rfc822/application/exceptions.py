"""Application-layer exceptions for use case error handling.

These exceptions represent rejected input detected during use case
execution. They are designed to be caught and mapped to appropriate HTTP
responses by the presentation layer.
"""


class ApplicationError(Exception):
    """Base class for all application-layer exceptions."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class InvalidEmailError(ApplicationError):
    """Raised when an email address fails the RFC 822 syntax check."""

    def __init__(self, email: str) -> None:
        super().__init__(
            message=f"Invalid email address: {email}",
            code="INVALID_EMAIL"
        )
        self.email = email


class EmailLengthError(ApplicationError):
    """Raised when an email address falls outside the allowed length bounds."""

    _CODES = {
        "too_short": "EMAIL_TOO_SHORT",
        "too_long": "EMAIL_TOO_LONG",
        "wrong_length": "EMAIL_WRONG_LENGTH",
    }

    def __init__(self, email: str, violation: str, detail: str) -> None:
        super().__init__(
            message=f"Email address {detail}",
            code=self._CODES.get(violation, "EMAIL_LENGTH")
        )
        self.email = email
        self.violation = violation


class InvalidValidationOptionsError(ApplicationError):
    """Raised when requested length bounds can never be satisfied."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            message=f"Invalid validation options: {reason}",
            code="INVALID_OPTIONS"
        )
        self.reason = reason
