"""Domain value objects for RFC 822 address handling.

- EmailAddress: Validated email addresses exposing local-part and domain
"""

from app.rfc822.domain.value_objects.email_address import EmailAddress

__all__ = ["EmailAddress"]
