"""Contact form component."""

from practicals.components.contact.component import (
    EMAIL_PATTERN,
    MSG_SEND_FAILED,
    MSG_SENT,
    build_contact_email,
    run_send,
    validate_contact,
)
from practicals.components.contact.models import ContactAddresses, ContactInput, ContactOutput
from practicals.components.contact.ports import ContactMailerPort, ContactRulesPort

__all__ = [
    "run_send",
    "validate_contact",
    "build_contact_email",
    "EMAIL_PATTERN",
    "MSG_SENT",
    "MSG_SEND_FAILED",
    "ContactAddresses",
    "ContactInput",
    "ContactOutput",
    "ContactMailerPort",
    "ContactRulesPort",
]
