"""
Dev Email Adapter.

Logs emails instead of sending. Used for local development, tests, and
whenever no SMTP relay is configured for the contact form.

Key behaviors:
- Logs email details through the module logger
- Returns SKIPPED status (not SENT)
- Stores emails in memory for test assertions
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import uuid4

from practicals.core.ports.email import EmailMessage, EmailResult, EmailStatus

logger = logging.getLogger(__name__)


@dataclass
class SentEmail:
    """Record of a logged email for test assertions."""

    id: str
    recipient: str
    subject: str
    body_html: str
    body_text: str
    sender: str | None
    reply_to: str | None
    logged_at: datetime


@dataclass
class DevEmailAdapter:
    """Dev email adapter that logs instead of sending."""

    sent_emails: list[SentEmail] = field(default_factory=list)

    log_level: int = logging.INFO
    log_body: bool = True
    body_preview_length: int = 100

    def send(self, message: EmailMessage) -> EmailResult:
        message_id = f"dev-{uuid4().hex[:12]}"
        sender_str = str(message.sender) if message.sender else None
        reply_to_str = str(message.reply_to) if message.reply_to else None

        self.sent_emails.append(
            SentEmail(
                id=message_id,
                recipient=str(message.recipient),
                subject=message.subject,
                body_html=message.body_html,
                body_text=message.body_text,
                sender=sender_str,
                reply_to=reply_to_str,
                logged_at=datetime.now(UTC),
            )
        )

        self._log_email(
            recipient=str(message.recipient),
            subject=message.subject,
            body_html=message.body_html,
            message_id=message_id,
            sender=sender_str,
        )

        return EmailResult(
            status=EmailStatus.SKIPPED,
            message_id=message_id,
            recipient=str(message.recipient),
            error="Dev mode - email logged, not sent",
        )

    def _log_email(
        self,
        recipient: str,
        subject: str,
        body_html: str,
        message_id: str,
        sender: str | None = None,
    ) -> None:
        parts = [f"EMAIL (dev): To={recipient}", f"Subject={subject}"]

        if sender:
            parts.append(f"From={sender}")

        if self.log_body and body_html:
            preview = body_html[: self.body_preview_length]
            if len(body_html) > self.body_preview_length:
                preview += "..."
            parts.append(f"Body={preview}")

        parts.append(f"MessageID={message_id}")
        logger.log(self.log_level, ", ".join(parts))

    # --- Test Helper Methods ---

    def get_last_email(self) -> SentEmail | None:
        return self.sent_emails[-1] if self.sent_emails else None

    def get_emails_to(self, recipient: str) -> list[SentEmail]:
        return [e for e in self.sent_emails if e.recipient == recipient]

    def clear(self) -> None:
        self.sent_emails.clear()

    @property
    def email_count(self) -> int:
        return len(self.sent_emails)
