"""
Contact form component unit tests.
"""

from __future__ import annotations

import pytest

from practicals.adapters.dev_email import DevEmailAdapter
from practicals.components.contact import (
    MSG_SEND_FAILED,
    MSG_SENT,
    ContactAddresses,
    ContactInput,
    build_contact_email,
    run_send,
    validate_contact,
)
from practicals.core.ports.email import EmailMessage, EmailResult


class MockRules:
    def get_min_name_length(self) -> int:
        return 2

    def get_min_message_length(self) -> int:
        return 10


class FailingMailer:
    def send(self, message: EmailMessage) -> EmailResult:
        return EmailResult.failed(str(message.recipient), "connection refused")


class RecordingMailer:
    def __init__(self) -> None:
        self.sent: list[EmailMessage] = []

    def send(self, message: EmailMessage) -> EmailResult:
        self.sent.append(message)
        return EmailResult.success(str(message.recipient), "smtp-1")


ADDRESSES = ContactAddresses(sender="site@example.com", recipient="owner@example.com")
GOOD = ContactInput("Ada Lovelace", "ada@example.com", "Hello, I'd like to talk.")


class TestValidateContact:
    def test_valid(self) -> None:
        assert validate_contact(GOOD) == {}

    def test_all_fields_invalid(self) -> None:
        errors = validate_contact(ContactInput(" A ", "ada@example.c", "short"))
        assert set(errors) == {"name", "email", "message"}

    def test_email_is_case_insensitive(self) -> None:
        assert validate_contact(ContactInput("Ada", "ADA@EXAMPLE.COM", "long enough text")) == {}

    @pytest.mark.parametrize("email", ["", "ada", "ada@example", "a b@example.com", "ada@@x.io"])
    def test_bad_emails(self, email: str) -> None:
        assert "email" in validate_contact(ContactInput("Ada", email, "long enough text"))


class TestBuildEmail:
    def test_escapes_html(self) -> None:
        msg = build_contact_email(
            ContactInput("<b>Eve</b>", "eve@example.com", "<script>x</script> hi"),
            ADDRESSES,
        )
        assert msg.subject == "New message from <b>Eve</b>"
        assert "&lt;b&gt;Eve&lt;/b&gt;" in msg.body_html
        assert "<script>" not in msg.body_html
        assert msg.reply_to is not None
        assert msg.reply_to.email == "eve@example.com"
        assert str(msg.sender) == '"Portfolio Contact" <site@example.com>'


class TestRunSend:
    def test_validation_errors_do_not_send(self) -> None:
        mailer = RecordingMailer()
        out = run_send(ContactInput("", "", ""), mailer, MockRules(), ADDRESSES)
        assert not out.success
        assert mailer.sent == []

    def test_smtp_success(self) -> None:
        mailer = RecordingMailer()
        out = run_send(GOOD, mailer, MockRules(), ADDRESSES)
        assert out.success
        assert out.message == MSG_SENT
        assert out.preview_id is None
        assert mailer.sent[0].recipient.email == "owner@example.com"

    def test_dev_adapter_returns_preview_id(self) -> None:
        mailer = DevEmailAdapter()
        out = run_send(GOOD, mailer, MockRules(), ADDRESSES)
        assert out.success
        assert out.preview_id is not None
        assert out.preview_id.startswith("dev-")
        assert mailer.email_count == 1

    def test_delivery_failure(self) -> None:
        out = run_send(GOOD, FailingMailer(), MockRules(), ADDRESSES)
        assert not out.success
        assert out.delivery_failed
        assert out.message == MSG_SEND_FAILED
