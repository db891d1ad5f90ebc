"""
Contact form component.

Validates a visitor's message and forwards it by email. Validation errors
are keyed by field so the form can show each next to its input.
"""

from __future__ import annotations

import html
import logging
import re

from practicals.core.ports.email import EmailAddress, EmailMessage, EmailStatus

from .models import ContactAddresses, ContactInput, ContactOutput
from .ports import ContactMailerPort, ContactRulesPort

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]{2,}$", re.IGNORECASE)

MSG_SENT = "Thanks! Your message has been sent."
MSG_SEND_FAILED = "Failed to send message. Please try again later."


def validate_contact(
    inp: ContactInput,
    min_name_length: int = 2,
    min_message_length: int = 10,
) -> dict[str, str]:
    errors: dict[str, str] = {}
    if not inp.name or len(inp.name.strip()) < min_name_length:
        errors["name"] = f"Please enter your full name (min {min_name_length} characters)."
    if not inp.email or not EMAIL_PATTERN.match(inp.email):
        errors["email"] = "Please enter a valid email address."
    if not inp.message or len(inp.message.strip()) < min_message_length:
        errors["message"] = f"Please write a message (min {min_message_length} characters)."
    return errors


def build_contact_email(inp: ContactInput, addresses: ContactAddresses) -> EmailMessage:
    name = inp.name or ""
    email = inp.email or ""
    body_html = (
        "<h2>New Portfolio Contact</h2>\n"
        f"<p><strong>Name:</strong> {html.escape(name)}</p>\n"
        f"<p><strong>Email:</strong> {html.escape(email)}</p>\n"
        "<p><strong>Message:</strong></p>\n"
        f'<p style="white-space:pre-line">{html.escape(inp.message or "")}</p>'
    )
    body_text = f"Name: {name}\nEmail: {email}\n\n{inp.message or ''}"
    return EmailMessage(
        recipient=EmailAddress(addresses.recipient),
        subject=f"New message from {name}",
        body_html=body_html,
        body_text=body_text,
        sender=EmailAddress(addresses.sender, addresses.sender_display_name),
        reply_to=EmailAddress(email),
    )


def run_send(
    inp: ContactInput,
    mailer: ContactMailerPort,
    rules: ContactRulesPort,
    addresses: ContactAddresses,
) -> ContactOutput:
    errors = validate_contact(inp, rules.get_min_name_length(), rules.get_min_message_length())
    if errors:
        return ContactOutput(success=False, errors=errors)

    result = mailer.send(build_contact_email(inp, addresses))
    if not result.delivered:
        logger.error("Email send error: %s", result.error)
        return ContactOutput(success=False, message=MSG_SEND_FAILED, delivery_failed=True)

    preview_id = result.message_id if result.status == EmailStatus.SKIPPED else None
    return ContactOutput(success=True, message=MSG_SENT, preview_id=preview_id)
