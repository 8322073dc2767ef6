"""In-memory contact store.

The store is built once at process start and never changes afterwards, so
concurrent readers need no locking. Construction enforces the record
invariants: every email is non-empty and unique under case-insensitive
comparison.
"""

import json
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from .models import Contact


class ContactStoreError(ValueError):
    """Raised when seed data violates the contact invariants."""


def fold_email(email: str) -> str:
    """Normalize an email for case-insensitive comparison."""
    return email.casefold()


SEED_CONTACTS: Tuple[Contact, ...] = (
    Contact("John", "Doe", "+1-555-123-4567", "john.doe@example.com"),
    Contact("Sarah", "Smith", "+1-555-234-5678", "sarah.smith@example.com"),
    Contact("Mike", "Johnson", "+1-555-345-6789", "mike.johnson@example.com"),
    Contact("Emily", "Brown", "+1-555-456-7890", "emily.brown@example.com"),
    Contact("David", "Wilson", "+1-555-567-8901", "david.wilson@example.com"),
)


class ContactStore:
    """Read-only, insertion-ordered collection of contacts."""

    def __init__(self, contacts: Iterable[Contact]):
        self._contacts: Tuple[Contact, ...] = tuple(contacts)

        seen = set()
        for position, contact in enumerate(self._contacts):
            if not contact.email:
                raise ContactStoreError(f"Contact #{position} has an empty email")
            key = fold_email(contact.email)
            if key in seen:
                raise ContactStoreError(f"Duplicate contact email: {contact.email}")
            seen.add(key)

    def __len__(self) -> int:
        return len(self._contacts)

    def __iter__(self) -> Iterator[Contact]:
        return iter(self._contacts)

    def all(self) -> Tuple[Contact, ...]:
        """Return every contact in insertion order."""
        return self._contacts

    def emails(self) -> List[str]:
        """Return stored emails in insertion order."""
        return [contact.email for contact in self._contacts]

    def find_by_email(self, email: str) -> Optional[Contact]:
        """Find a contact by email, ignoring case.

        Returns the first match in insertion order, or ``None``.
        """
        key = fold_email(email)
        for contact in self._contacts:
            if fold_email(contact.email) == key:
                return contact
        return None


SEED_FIELDS = ("firstName", "lastName", "phoneNumber", "email")


def load_contacts(path: Union[str, Path]) -> List[Contact]:
    """Load contacts from a JSON file holding an array of contact objects.

    Parameters
    - path: File containing ``[{"firstName": ..., "lastName": ...,
      "phoneNumber": ..., "email": ...}, ...]``

    Raises
    - ``ContactStoreError`` if the document is not an array of objects whose
      four contact fields are all present and all strings.
    - ``OSError`` / ``json.JSONDecodeError`` for unreadable files.
    """
    with open(path, "r", encoding="utf-8") as f:
        records = json.load(f)

    if not isinstance(records, list):
        raise ContactStoreError(f"Seed file {path} must contain a JSON array")

    contacts = []
    for position, record in enumerate(records):
        if not isinstance(record, dict):
            raise ContactStoreError(f"Seed record #{position} is not an object")
        for field in SEED_FIELDS:
            if field not in record:
                raise ContactStoreError(f"Seed record #{position} is missing field '{field}'")
            if not isinstance(record[field], str):
                raise ContactStoreError(f"Seed record #{position} field '{field}' must be a string")
        contacts.append(Contact.from_dict(record))
    return contacts


def create_contact_store(seed_file: Optional[Union[str, Path]] = None) -> ContactStore:
    """Build the store from ``seed_file`` or, if not given, the built-in seed."""
    if seed_file:
        return ContactStore(load_contacts(seed_file))
    return ContactStore(SEED_CONTACTS)
