"""
Chat component unit tests.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from practicals.adapters.clock import FixedClock
from practicals.components.chat import (
    RegisterChatUserInput,
    SendMessageInput,
    chat_id,
    format_message_time,
    format_relative,
    run_list_chats,
    run_list_messages,
    run_register_user,
    run_search_users,
    run_send_message,
    should_show_timestamp,
)
from practicals.domain.entities import ChatMessage, ChatSummary, ChatUser

NOW = datetime(2025, 5, 20, 15, 30, tzinfo=UTC)

# --- Mock Implementations ---


class MockChatRepo:
    def __init__(self) -> None:
        self.users: dict[str, ChatUser] = {}
        self.messages: list[ChatMessage] = []
        self.chats: dict[str, ChatSummary] = {}

    def save_user(self, user: ChatUser) -> ChatUser:
        self.users[user.uid] = user
        return user

    def get_user(self, uid: str) -> ChatUser | None:
        return self.users.get(uid)

    def list_users(self, limit: int = 50) -> list[ChatUser]:
        return list(self.users.values())[:limit]

    def add_message(self, message: ChatMessage) -> ChatMessage:
        self.messages.append(message)
        return message

    def list_messages(self, chat_id: str) -> list[ChatMessage]:
        return sorted(
            (m for m in self.messages if m.chat_id == chat_id), key=lambda m: m.timestamp
        )

    def save_chat(self, chat: ChatSummary) -> ChatSummary:
        self.chats[chat.id] = chat
        return chat

    def list_chats_for(self, uid: str) -> list[ChatSummary]:
        found = [c for c in self.chats.values() if uid in c.participants]
        return sorted(found, key=lambda c: c.last_updated, reverse=True)


@pytest.fixture
def repo() -> MockChatRepo:
    r = MockChatRepo()
    r.save_user(ChatUser(uid="alice", display_name="Alice", email="alice@example.com"))
    r.save_user(ChatUser(uid="bob", display_name="Bob", email="bob@example.com"))
    r.save_user(ChatUser(uid="carol", display_name="Carol", email="carol@school.edu"))
    return r


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(NOW)


def _msg(sender: str, at: datetime) -> ChatMessage:
    return ChatMessage(chat_id="a_b", text="hi", sender_id=sender, sender_name=sender, timestamp=at)


# --- Pure functions ---


def test_chat_id_is_order_independent() -> None:
    assert chat_id("bob", "alice") == "alice_bob"
    assert chat_id("alice", "bob") == "alice_bob"


class TestShouldShowTimestamp:
    def test_first_message(self) -> None:
        assert should_show_timestamp(None, _msg("a", NOW))

    def test_sender_change(self) -> None:
        assert should_show_timestamp(_msg("a", NOW), _msg("b", NOW))

    def test_gap(self) -> None:
        prev = _msg("a", NOW)
        assert not should_show_timestamp(prev, _msg("a", NOW + timedelta(minutes=5)))
        assert should_show_timestamp(prev, _msg("a", NOW + timedelta(minutes=5, seconds=1)))


class TestFormatting:
    def test_message_time_today(self) -> None:
        assert format_message_time(NOW.replace(hour=9, minute=5), NOW) == "09:05"

    def test_message_time_other_day(self) -> None:
        assert format_message_time(NOW - timedelta(days=2), NOW) == "May 18, 15:30"

    @pytest.mark.parametrize(
        ("delta", "expected"),
        [
            (timedelta(seconds=30), "Now"),
            (timedelta(minutes=5), "5m"),
            (timedelta(hours=3), "3h"),
            (timedelta(days=6, hours=23), "6d"),
            (timedelta(days=8), "5/12/2025"),
        ],
    )
    def test_relative(self, delta: timedelta, expected: str) -> None:
        assert format_relative(NOW - delta, NOW) == expected


# --- Shell functions ---


class TestRegisterUser:
    def test_register(self, repo: MockChatRepo, clock: FixedClock) -> None:
        out = run_register_user(RegisterChatUserInput("  Dev ", "DEV@example.com"), repo, clock)
        assert out.success
        assert out.user is not None
        assert out.user.email == "dev@example.com"
        assert repo.get_user(out.user.uid) is not None

    def test_requires_name_and_email(self, repo: MockChatRepo, clock: FixedClock) -> None:
        no_name = run_register_user(RegisterChatUserInput("", "x@y.io"), repo, clock)
        assert no_name.error_code == "validation"
        bad_email = run_register_user(RegisterChatUserInput("X", "nope"), repo, clock)
        assert bad_email.error_code == "validation"

    @pytest.mark.parametrize("uid", ["a_b", "has space", "caf\u00e9"])
    def test_rejects_uid_outside_charset(
        self, repo: MockChatRepo, clock: FixedClock, uid: str
    ) -> None:
        out = run_register_user(RegisterChatUserInput("X", "x@y.io", uid), repo, clock)
        assert out.error_code == "validation"
        assert repo.get_user(uid) is None

    def test_taken_uid_keeps_existing_profile(self, repo: MockChatRepo, clock: FixedClock) -> None:
        out = run_register_user(RegisterChatUserInput("Mallory", "m@x.io", "alice"), repo, clock)
        assert out.error_code == "conflict"
        assert repo.get_user("alice").display_name == "Alice"


class TestMessaging:
    def test_send_updates_summary(self, repo: MockChatRepo, clock: FixedClock) -> None:
        out = run_send_message(SendMessageInput("bob", "alice", "  hello  "), repo, clock)
        assert out.success
        assert out.message is not None
        assert out.message.chat_id == "alice_bob"
        assert out.message.text == "hello"
        assert out.message.sender_name == "Bob"

        chat = repo.chats["alice_bob"]
        assert chat.last_message is not None
        assert chat.last_message.text == "hello"
        assert chat.last_updated == NOW

    def test_blank_message(self, repo: MockChatRepo, clock: FixedClock) -> None:
        out = run_send_message(SendMessageInput("bob", "alice", "   "), repo, clock)
        assert out.error_code == "validation"
        assert repo.messages == []

    def test_unknown_recipient(self, repo: MockChatRepo, clock: FixedClock) -> None:
        out = run_send_message(SendMessageInput("bob", "zed", "hi"), repo, clock)
        assert out.error_code == "not_found"

    def test_messages_ascending(self, repo: MockChatRepo, clock: FixedClock) -> None:
        run_send_message(SendMessageInput("alice", "bob", "first"), repo, clock)
        clock.advance(minutes=1)
        run_send_message(SendMessageInput("bob", "alice", "second"), repo, clock)
        texts = [m.text for m in run_list_messages("alice", "bob", repo)]
        assert texts == ["first", "second"]

    def test_chats_newest_first_skipping_missing_users(
        self, repo: MockChatRepo, clock: FixedClock
    ) -> None:
        run_send_message(SendMessageInput("alice", "bob", "hi bob"), repo, clock)
        clock.advance(minutes=1)
        run_send_message(SendMessageInput("alice", "carol", "hi carol"), repo, clock)

        chats = run_list_chats("alice", repo)
        assert [c.other_user.uid for c in chats] == ["carol", "bob"]

        del repo.users["carol"]
        assert [c.other_user.uid for c in run_list_chats("alice", repo)] == ["bob"]


class TestSearchUsers:
    def test_excludes_self(self, repo: MockChatRepo) -> None:
        assert [u.uid for u in run_search_users("alice", "", repo)] == ["bob", "carol"]

    def test_matches_name_or_email(self, repo: MockChatRepo) -> None:
        assert [u.uid for u in run_search_users("alice", "SCHOOL", repo)] == ["carol"]
        assert [u.uid for u in run_search_users("alice", "bo", repo)] == ["bob"]

    def test_caps_results(self, repo: MockChatRepo) -> None:
        for i in range(15):
            repo.save_user(ChatUser(uid=f"u{i}", display_name=f"User {i}", email=f"u{i}@x.io"))
        assert len(run_search_users("alice", "user", repo)) == 10
