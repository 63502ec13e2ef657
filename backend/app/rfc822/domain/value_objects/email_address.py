"""EmailAddress value object for validated RFC 822 addresses."""

from dataclasses import dataclass, field

from app.rfc822.domain.grammar import match_address


@dataclass(frozen=True)
class EmailAddress:
    """Immutable value object representing a syntactically valid address.

    Only the grammar is enforced here; length bounds are a policy concern
    handled by EmailValidator before construction. The value is stored
    exactly as given, without case folding or trimming.

    Attributes:
        value: The validated email address string.
        local_part: The portion before the separating '@'.
        domain: The portion after the separating '@'.
    """

    value: str
    local_part: str = field(init=False, repr=False, compare=False)
    domain: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate email syntax and capture its parts."""
        parts = match_address(self.value)
        if parts is None:
            raise ValueError(f"Invalid email address: {self.value}")
        object.__setattr__(self, "local_part", parts[0])
        object.__setattr__(self, "domain", parts[1])

    def __str__(self) -> str:
        return self.value
