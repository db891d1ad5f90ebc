"""
Chat models.
"""

from __future__ import annotations

from dataclasses import dataclass

from practicals.domain.entities import ChatMessage, ChatSummary, ChatUser


@dataclass(frozen=True)
class SendMessageInput:
    sender_id: str
    recipient_id: str
    text: str | None


@dataclass(frozen=True)
class RegisterChatUserInput:
    display_name: str | None
    email: str | None
    uid: str | None = None


@dataclass(frozen=True)
class ChatWithUser:
    """A chat summary with the other participant resolved."""

    chat: ChatSummary
    other_user: ChatUser


@dataclass
class ChatOutput:
    """`error_code` is one of validation, not_found, conflict."""

    success: bool
    message: ChatMessage | None = None
    user: ChatUser | None = None
    error: str | None = None
    error_code: str | None = None
