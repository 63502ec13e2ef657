"""RFC 822 address grammar compiled into a single anchored pattern.

The productions follow RFC 822 section 6.1 (addr-spec) and are expressed as
hexadecimal byte ranges, since the grammar is defined over octets rather than
Unicode code points. Candidates are encoded as UTF-8 before matching so any
non-ASCII character surfaces as bytes >= 0x80 and is rejected wherever the
grammar excludes that range.

The pattern is built once at import time and is read-only afterwards. A
fragment that fails to compile raises ``re.error`` during import.
"""

import re
from typing import Final, Optional

DEFAULT_MIN_LENGTH: Final[int] = 3
DEFAULT_MAX_LENGTH: Final[int] = 384

# ==============================================================================
# LEAF PRODUCTIONS
# ==============================================================================

# Any octet except CR, '"', '\' and the high-bit range
QTEXT: Final[str] = r"[^\x0d\x22\x5c\x80-\xff]"

# Any octet except CR, '[', '\', ']' and the high-bit range
DTEXT: Final[str] = r"[^\x0d\x5b-\x5d\x80-\xff]"

# One or more octets excluding CTLs, SPACE and specials ()<>@,;:\".[]
ATOM: Final[str] = (
    r"[^\x00-\x20\x22\x28\x29\x2c\x2e\x3a-\x3c\x3e\x40\x5b-\x5d\x7f-\xff]+"
)

QUOTED_PAIR: Final[str] = r"\x5c[\x00-\x7f]"

# ==============================================================================
# COMPOSITE PRODUCTIONS
# ==============================================================================

DOMAIN_LITERAL: Final[str] = rf"\x5b(?:{DTEXT}|{QUOTED_PAIR})*\x5d"
QUOTED_STRING: Final[str] = rf"\x22(?:{QTEXT}|{QUOTED_PAIR})*\x22"

DOMAIN_REF: Final[str] = ATOM
SUB_DOMAIN: Final[str] = rf"(?:{DOMAIN_REF}|{DOMAIN_LITERAL})"
WORD: Final[str] = rf"(?:{ATOM}|{QUOTED_STRING})"

DOMAIN: Final[str] = rf"{SUB_DOMAIN}(?:\x2e{SUB_DOMAIN})*"
LOCAL_PART: Final[str] = rf"{WORD}(?:\x2e{WORD})*"

ADDR_SPEC: Final[str] = rf"({LOCAL_PART})\x40({DOMAIN})"


def _compile_address_pattern() -> "re.Pattern[bytes]":
    # \Z is end of input only; $ would tolerate a trailing newline
    return re.compile(rf"\A{ADDR_SPEC}\Z".encode("ascii"))


ADDRESS_PATTERN: Final["re.Pattern[bytes]"] = _compile_address_pattern()


def _to_octets(candidate: str) -> bytes:
    # surrogatepass keeps lone surrogates as high-bit octets instead of raising
    return candidate.encode("utf-8", "surrogatepass")


def match_address(candidate: str) -> Optional[tuple[str, str]]:
    """Match a candidate against the addr-spec production.

    Args:
        candidate: The string to check.

    Returns:
        A ``(local_part, domain)`` tuple when the whole string is a valid
        address, None otherwise.
    """
    match = ADDRESS_PATTERN.match(_to_octets(candidate))
    if match is None:
        return None
    # A successful match only ever contains ASCII octets
    return match.group(1).decode("ascii"), match.group(2).decode("ascii")


def is_valid_email_syntax(candidate: str) -> bool:
    """Check whether the entire candidate is an RFC 822 addr-spec.

    Args:
        candidate: The string to check, possibly empty.

    Returns:
        True if the string matches with nothing left over, False otherwise.
    """
    return ADDRESS_PATTERN.match(_to_octets(candidate)) is not None


def is_valid_email_length(
    candidate: str,
    minimum: int = DEFAULT_MIN_LENGTH,
    maximum: int = DEFAULT_MAX_LENGTH,
) -> bool:
    """Check that the candidate length lies within inclusive bounds.

    This is cheaper than the syntax match and should run first to keep
    pathological input away from the regex engine.

    Args:
        candidate: The string to check.
        minimum: Inclusive lower bound in characters.
        maximum: Inclusive upper bound in characters.

    Returns:
        True if ``minimum <= len(candidate) <= maximum``.
    """
    return minimum <= len(candidate) <= maximum
