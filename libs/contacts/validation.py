"""Email syntax validation.

The check is intentionally permissive: a local part, a single ``@`` and a
dotted domain, with no whitespace anywhere. Domain existence, TLD legitimacy
and full RFC 5322 grammar are out of scope.
"""

import re

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def is_valid_email(value: str) -> bool:
    """Return ``True`` if ``value`` looks like an email address."""
    return EMAIL_PATTERN.fullmatch(value) is not None
