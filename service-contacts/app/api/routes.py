"""API routes for contacts service."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
import structlog

from libs.common.metrics import MetricsCollector
from libs.contacts.lookup import ContactLookupService
from libs.contacts.models import Contact, LookupOutcome, LookupQuery

logger = structlog.get_logger("contacts_service.api")

router = APIRouter()

# Status code and message for each failed lookup outcome
FAILURE_RESPONSES = {
    LookupOutcome.MISSING_PARAMETER: (400, "Email parameter is required"),
    LookupOutcome.INVALID_FORMAT: (400, "Invalid email format"),
    LookupOutcome.NOT_FOUND: (404, "Contact not found"),
}


class ContactResponse(BaseModel):
    """Contact details as returned to clients."""
    firstName: str = Field(..., description="First name")
    lastName: str = Field(..., description="Last name")
    phoneNumber: str = Field(..., description="Phone number, free-form")
    email: str = Field(..., description="Email address")

    @classmethod
    def from_contact(cls, contact: Contact) -> "ContactResponse":
        return cls(**contact.to_dict())


class ErrorResponse(BaseModel):
    """Error body for failed requests."""
    error: str = Field(..., description="Error message")


def get_lookup_service(request: Request) -> ContactLookupService:
    """Get lookup service from application state."""
    return request.app.state.lookup_service


def get_metrics(request: Request) -> MetricsCollector:
    """Get metrics collector from application state."""
    return request.app.state.metrics_collector


@router.get(
    "/contacts/by-email",
    response_model=ContactResponse,
    operation_id="getContactByEmail",
    summary="Get contact by email address",
    responses={
        400: {"model": ErrorResponse, "description": "Missing or malformed email"},
        404: {"model": ErrorResponse, "description": "Contact not found"},
    },
)
async def get_contact_by_email(
    email: Optional[str] = Query(None, description="Email address to look up (case-insensitive)"),
    lookup_service: ContactLookupService = Depends(get_lookup_service),
    metrics_collector: MetricsCollector = Depends(get_metrics),
):
    """Look up a single contact by email."""
    result = lookup_service.lookup_by_email(LookupQuery(email=email))
    metrics_collector.record_contact_lookup(result.outcome.value)

    if not result.found:
        status_code, message = FAILURE_RESPONSES[result.outcome]
        logger.debug("Contact lookup failed", outcome=result.outcome.value)
        return JSONResponse(status_code=status_code, content={"error": message})

    logger.debug("Contact lookup completed")
    return ContactResponse.from_contact(result.contact)


@router.get(
    "/contacts",
    response_model=List[ContactResponse],
    operation_id="getAllContacts",
    summary="Get all contacts",
)
async def list_contacts(
    lookup_service: ContactLookupService = Depends(get_lookup_service),
):
    """List every contact in store order."""
    contacts = lookup_service.list_all()
    logger.debug("Contacts listed", count=len(contacts))
    return [ContactResponse.from_contact(contact) for contact in contacts]
