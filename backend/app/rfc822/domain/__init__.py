# Domain layer - pure validation rules, no framework dependencies

from app.rfc822.domain.grammar import (
    ADDRESS_PATTERN,
    DEFAULT_MAX_LENGTH,
    DEFAULT_MIN_LENGTH,
    is_valid_email_length,
    is_valid_email_syntax,
    match_address,
)

__all__ = [
    # Compiled grammar
    "ADDRESS_PATTERN",
    "DEFAULT_MIN_LENGTH",
    "DEFAULT_MAX_LENGTH",
    # Predicates
    "is_valid_email_syntax",
    "is_valid_email_length",
    "match_address",
]
