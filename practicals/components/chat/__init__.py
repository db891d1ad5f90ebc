"""
Chat component.

One-to-one messaging between registered chat users.
"""

from practicals.components.chat.component import (
    SEARCH_POOL_SIZE,
    SEARCH_RESULT_LIMIT,
    TIMESTAMP_GAP,
    UNKNOWN_SENDER,
    chat_id,
    filter_users,
    format_message_time,
    format_relative,
    run_list_chats,
    run_list_messages,
    run_register_user,
    run_search_users,
    run_send_message,
    should_show_timestamp,
)
from practicals.components.chat.models import (
    ChatOutput,
    ChatWithUser,
    RegisterChatUserInput,
    SendMessageInput,
)
from practicals.components.chat.ports import ChatRepoPort

__all__ = [
    # Component
    "run_register_user",
    "run_send_message",
    "run_list_messages",
    "run_list_chats",
    "run_search_users",
    # Pure functions
    "chat_id",
    "filter_users",
    "format_message_time",
    "format_relative",
    "should_show_timestamp",
    # Constants
    "SEARCH_POOL_SIZE",
    "SEARCH_RESULT_LIMIT",
    "TIMESTAMP_GAP",
    "UNKNOWN_SENDER",
    # Models
    "ChatOutput",
    "ChatWithUser",
    "RegisterChatUserInput",
    "SendMessageInput",
    # Ports
    "ChatRepoPort",
]
