"""
Chat component.

One-to-one conversations. A chat is identified by the sorted pair of
participant ids; every message sent also refreshes the chat's summary so
chat lists can be ordered by recent activity.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta
from uuid import uuid4

from practicals.core.ports.time import TimePort
from practicals.domain.entities import ChatMessage, ChatSummary, ChatUser, LastMessage

from .models import ChatOutput, ChatWithUser, RegisterChatUserInput, SendMessageInput
from .ports import ChatRepoPort

SEARCH_POOL_SIZE = 50
SEARCH_RESULT_LIMIT = 10
TIMESTAMP_GAP = timedelta(minutes=5)
UNKNOWN_SENDER = "Unknown"

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
# "_" joins the pair in a chat id, so uids may not contain it
UID_PATTERN = re.compile(r"[A-Za-z0-9-]+")


# --- Pure Functions ---


def chat_id(a: str, b: str) -> str:
    return "_".join(sorted((a, b)))


def should_show_timestamp(previous: ChatMessage | None, message: ChatMessage) -> bool:
    """Show a timestamp on the first message, on sender change, or after a gap."""
    if previous is None:
        return True
    if previous.sender_id != message.sender_id:
        return True
    return message.timestamp - previous.timestamp > TIMESTAMP_GAP


def format_message_time(ts: datetime, now: datetime) -> str:
    """Today as HH:MM, earlier days as "Mon D, HH:MM"."""
    if ts.date() == now.date():
        return f"{ts:%H:%M}"
    return f"{ts:%b} {ts.day}, {ts:%H:%M}"


def format_relative(ts: datetime, now: datetime) -> str:
    seconds = (now - ts).total_seconds()
    minutes = int(seconds // 60)
    hours = int(seconds // 3600)
    days = int(seconds // 86400)
    if minutes < 1:
        return "Now"
    if minutes < 60:
        return f"{minutes}m"
    if hours < 24:
        return f"{hours}h"
    if days < 7:
        return f"{days}d"
    return f"{ts.month}/{ts.day}/{ts.year}"


def filter_users(users: list[ChatUser], term: str, exclude_uid: str) -> list[ChatUser]:
    needle = term.strip().lower()
    candidates = [u for u in users if u.uid != exclude_uid]
    if needle:
        candidates = [
            u for u in candidates if needle in u.display_name.lower() or needle in u.email.lower()
        ]
    return candidates[:SEARCH_RESULT_LIMIT]


# --- Shell Functions ---


def run_register_user(inp: RegisterChatUserInput, repo: ChatRepoPort, time: TimePort) -> ChatOutput:
    display_name = (inp.display_name or "").strip()
    email = (inp.email or "").strip().lower()
    if not display_name:
        return ChatOutput(success=False, error="Display name is required", error_code="validation")
    if not EMAIL_PATTERN.match(email):
        return ChatOutput(success=False, error="A valid email is required", error_code="validation")

    uid = inp.uid or uuid4().hex
    if not UID_PATTERN.fullmatch(uid):
        return ChatOutput(
            success=False,
            error="User id may only contain letters, digits and hyphens",
            error_code="validation",
        )
    if repo.get_user(uid) is not None:
        return ChatOutput(success=False, error="User id is already taken", error_code="conflict")

    user = ChatUser(
        uid=uid,
        display_name=display_name,
        email=email,
        created_at=time.now_utc(),
    )
    return ChatOutput(success=True, user=repo.save_user(user))


def run_send_message(inp: SendMessageInput, repo: ChatRepoPort, time: TimePort) -> ChatOutput:
    text = (inp.text or "").strip()
    if not text:
        return ChatOutput(success=False, error="Message cannot be empty", error_code="validation")

    if repo.get_user(inp.recipient_id) is None:
        return ChatOutput(success=False, error="User not found", error_code="not_found")

    sender = repo.get_user(inp.sender_id)
    now = time.now_utc()
    cid = chat_id(inp.sender_id, inp.recipient_id)

    message = repo.add_message(
        ChatMessage(
            chat_id=cid,
            text=text,
            sender_id=inp.sender_id,
            sender_name=sender.display_name if sender and sender.display_name else UNKNOWN_SENDER,
            timestamp=now,
        )
    )
    repo.save_chat(
        ChatSummary(
            id=cid,
            participants=[inp.sender_id, inp.recipient_id],
            last_message=LastMessage(text=text, sender_id=inp.sender_id, timestamp=now),
            last_updated=now,
        )
    )
    return ChatOutput(success=True, message=message)


def run_list_messages(user_id: str, other_id: str, repo: ChatRepoPort) -> list[ChatMessage]:
    return repo.list_messages(chat_id(user_id, other_id))


def run_list_chats(user_id: str, repo: ChatRepoPort) -> list[ChatWithUser]:
    """Chats whose other participant no longer exists are skipped."""
    result: list[ChatWithUser] = []
    for chat in repo.list_chats_for(user_id):
        other_id = next((p for p in chat.participants if p != user_id), None)
        if other_id is None:
            continue
        other = repo.get_user(other_id)
        if other is not None:
            result.append(ChatWithUser(chat=chat, other_user=other))
    return result


def run_search_users(user_id: str, term: str, repo: ChatRepoPort) -> list[ChatUser]:
    return filter_users(repo.list_users(SEARCH_POOL_SIZE), term, user_id)
