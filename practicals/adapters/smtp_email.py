"""
SMTP Email Adapter.

Sends contact-form mail through an SMTP relay. STARTTLS is used on plain
connections when the server offers it; `secure=True` opens an implicit TLS
connection instead.
"""

from __future__ import annotations

import logging
import smtplib
from dataclasses import dataclass
from email.message import EmailMessage as MimeMessage
from email.utils import make_msgid

from practicals.core.ports.email import EmailAddress, EmailMessage, EmailResult

logger = logging.getLogger(__name__)


@dataclass
class SMTPEmailAdapter:
    host: str
    port: int = 587
    username: str | None = None
    password: str | None = None
    secure: bool = False
    default_sender: EmailAddress | None = None
    timeout_seconds: float = 30.0

    def _connect(self) -> smtplib.SMTP:
        if self.secure:
            return smtplib.SMTP_SSL(self.host, self.port, timeout=self.timeout_seconds)
        conn = smtplib.SMTP(self.host, self.port, timeout=self.timeout_seconds)
        conn.ehlo()
        if conn.has_extn("starttls"):
            conn.starttls()
            conn.ehlo()
        return conn

    def build_mime(self, message: EmailMessage) -> MimeMessage:
        mime = MimeMessage()
        sender = message.sender or self.default_sender
        if sender is not None:
            mime["From"] = str(sender)
        mime["To"] = str(message.recipient)
        mime["Subject"] = message.subject
        if message.reply_to is not None:
            mime["Reply-To"] = str(message.reply_to)
        for key, value in message.headers.items():
            mime[key] = value
        mime["Message-ID"] = make_msgid()

        mime.set_content(message.body_text or "This message requires an HTML-capable client.")
        if message.body_html:
            mime.add_alternative(message.body_html, subtype="html")
        return mime

    def send(self, message: EmailMessage) -> EmailResult:
        recipient = str(message.recipient)
        mime = self.build_mime(message)
        try:
            with self._connect() as conn:
                if self.username and self.password:
                    conn.login(self.username, self.password)
                conn.send_message(mime)
        except (smtplib.SMTPException, OSError) as e:
            logger.exception("SMTP send to %s failed", recipient)
            return EmailResult.failed(recipient, str(e))

        logger.info("Email sent to %s via %s:%s", recipient, self.host, self.port)
        return EmailResult.success(recipient, message_id=mime["Message-ID"])
