"""Contact domain models."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Contact:
    """A person's name, phone number, and email address."""
    first_name: str
    last_name: str
    phone_number: str
    email: str

    def to_dict(self) -> Dict[str, Any]:
        """Wire representation with camelCase keys."""
        return {
            "firstName": self.first_name,
            "lastName": self.last_name,
            "phoneNumber": self.phone_number,
            "email": self.email,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Contact":
        """Build a contact from its camelCase wire representation.

        Raises ``KeyError`` when one of the four fields is missing.
        """
        return cls(
            first_name=data["firstName"],
            last_name=data["lastName"],
            phone_number=data["phoneNumber"],
            email=data["email"],
        )


@dataclass(frozen=True)
class LookupQuery:
    """One caller request: the email exactly as supplied, if any."""
    email: Optional[str] = None


class LookupOutcome(str, Enum):
    """Lookup outcome tags."""
    FOUND = "found"
    MISSING_PARAMETER = "missing_parameter"
    INVALID_FORMAT = "invalid_format"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class LookupResult:
    """Tagged lookup outcome.

    ``contact`` is set only when ``outcome`` is ``LookupOutcome.FOUND``.
    """
    outcome: LookupOutcome
    contact: Optional[Contact] = None

    @property
    def found(self) -> bool:
        return self.outcome is LookupOutcome.FOUND

    @classmethod
    def hit(cls, contact: Contact) -> "LookupResult":
        return cls(LookupOutcome.FOUND, contact)

    @classmethod
    def failure(cls, outcome: LookupOutcome) -> "LookupResult":
        if outcome is LookupOutcome.FOUND:
            raise ValueError("A failure result cannot carry the FOUND outcome")
        return cls(outcome)
