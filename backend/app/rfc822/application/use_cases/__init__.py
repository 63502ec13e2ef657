"""Application use cases for orchestrating domain logic."""

from app.rfc822.application.use_cases.validate_email import (
    ParseEmailUseCase,
    ValidateEmailUseCase,
)

__all__ = [
    "ValidateEmailUseCase",
    "ParseEmailUseCase",
]
