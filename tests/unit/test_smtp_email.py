import smtplib

import pytest

from practicals.adapters.smtp_email import SMTPEmailAdapter
from practicals.core.ports.email import EmailAddress, EmailMessage, EmailStatus


@pytest.fixture
def message() -> EmailMessage:
    return EmailMessage(
        recipient=EmailAddress("owner@example.com"),
        subject="New message from Ada",
        body_html="<p>Hi</p>",
        sender=EmailAddress("site@example.com", "Portfolio Contact"),
        reply_to=EmailAddress("ada@example.com"),
    )


def test_build_mime_headers(message):
    mime = SMTPEmailAdapter(host="smtp.example.com").build_mime(message)
    assert mime["To"] == "owner@example.com"
    assert "site@example.com" in mime["From"]
    assert "Portfolio Contact" in mime["From"]
    assert mime["Reply-To"] == "ada@example.com"
    assert mime["Subject"] == "New message from Ada"
    assert mime["Message-ID"]
    assert mime.is_multipart()


def test_build_mime_uses_default_sender():
    adapter = SMTPEmailAdapter(
        host="smtp.example.com", default_sender=EmailAddress("noreply@example.com")
    )
    mime = adapter.build_mime(
        EmailMessage(
            recipient=EmailAddress("a@example.com"),
            subject="S",
            body_html="",
            body_text="plain",
        )
    )
    assert mime["From"] == "noreply@example.com"
    assert not mime.is_multipart()


class _FakeSMTP:
    sent: list = []

    def __init__(self, host, port, timeout=None):
        self.host = host
        self.logged_in = None

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def ehlo(self):
        pass

    def has_extn(self, name):
        return False

    def login(self, user, password):
        self.logged_in = (user, password)

    def send_message(self, mime):
        _FakeSMTP.sent.append(mime)


def test_send_success(monkeypatch, message):
    _FakeSMTP.sent = []
    monkeypatch.setattr(smtplib, "SMTP", _FakeSMTP)
    adapter = SMTPEmailAdapter(host="smtp.example.com", username="u", password="p")

    result = adapter.send(message)

    assert result.status == EmailStatus.SENT
    assert result.message_id
    assert len(_FakeSMTP.sent) == 1


def test_send_failure_returns_failed_result(monkeypatch, message):
    def refuse(*args, **kwargs):
        raise ConnectionRefusedError("connection refused")

    monkeypatch.setattr(smtplib, "SMTP", refuse)
    result = SMTPEmailAdapter(host="smtp.example.com").send(message)

    assert result.status == EmailStatus.FAILED
    assert result.delivered is False
    assert "connection refused" in (result.error or "")
