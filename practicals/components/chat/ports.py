from __future__ import annotations

from typing import Protocol

from practicals.domain.entities import ChatMessage, ChatSummary, ChatUser


class ChatRepoPort(Protocol):
    def save_user(self, user: ChatUser) -> ChatUser: ...

    def get_user(self, uid: str) -> ChatUser | None: ...

    def list_users(self, limit: int = 50) -> list[ChatUser]: ...

    def add_message(self, message: ChatMessage) -> ChatMessage: ...

    def list_messages(self, chat_id: str) -> list[ChatMessage]:
        """Oldest first."""
        ...

    def save_chat(self, chat: ChatSummary) -> ChatSummary: ...

    def list_chats_for(self, uid: str) -> list[ChatSummary]:
        """Most recently updated first."""
        ...
