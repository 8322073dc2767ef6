"""Contact lookup service.

Composes ``is_valid_email`` and ``ContactStore`` into a single decision
chain returning a tagged ``LookupResult``. Failures are ordinary return
values; the transport layer decides how to present them.
"""

from typing import Tuple

from .models import Contact, LookupOutcome, LookupQuery, LookupResult
from .store import ContactStore
from .validation import is_valid_email


class ContactLookupService:
    """Answer "find by email" and "list all" queries over a contact store."""

    def __init__(self, store: ContactStore):
        self.store = store

    def lookup_by_email(self, query: LookupQuery) -> LookupResult:
        """Resolve ``query.email`` to a contact.

        First matching rule wins:
        1. absent or empty email -> ``MISSING_PARAMETER``
        2. malformed email -> ``INVALID_FORMAT``
        3. no stored contact -> ``NOT_FOUND``, otherwise ``FOUND``
        """
        email = query.email
        if not email:
            return LookupResult.failure(LookupOutcome.MISSING_PARAMETER)

        if not is_valid_email(email):
            return LookupResult.failure(LookupOutcome.INVALID_FORMAT)

        contact = self.store.find_by_email(email)
        if contact is None:
            return LookupResult.failure(LookupOutcome.NOT_FOUND)
        return LookupResult.hit(contact)

    def list_all(self) -> Tuple[Contact, ...]:
        return self.store.all()
