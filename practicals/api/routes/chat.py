"""One-to-one chat between registered chat users."""

from fastapi import APIRouter, Depends, HTTPException, status

from practicals.adapters.clock import SystemClock
from practicals.adapters.sqlite.repos import SQLiteChatRepo
from practicals.api.deps import get_chat_repo, get_chat_user, get_clock
from practicals.api.schemas import (
    ChatMessageResponse,
    ChatSummaryResponse,
    ChatUserRequest,
    ChatUserResponse,
    LastMessageResponse,
    SendMessageRequest,
)
from practicals.components.chat import (
    ChatOutput,
    RegisterChatUserInput,
    SendMessageInput,
    format_message_time,
    format_relative,
    run_list_chats,
    run_list_messages,
    run_register_user,
    run_search_users,
    run_send_message,
    should_show_timestamp,
)
from practicals.domain.entities import ChatMessage, ChatUser

router = APIRouter()


def _user_response(user: ChatUser) -> ChatUserResponse:
    return ChatUserResponse(uid=user.uid, display_name=user.display_name, email=user.email)


def _message_response(
    message: ChatMessage, previous: ChatMessage | None, clock: SystemClock
) -> ChatMessageResponse:
    return ChatMessageResponse(
        id=message.id,
        chat_id=message.chat_id,
        text=message.text,
        sender_id=message.sender_id,
        sender_name=message.sender_name,
        timestamp=message.timestamp,
        show_timestamp=should_show_timestamp(previous, message),
        time_label=format_message_time(
            message.timestamp.astimezone(), clock.now_utc().astimezone()
        ),
    )


_ERROR_STATUS = {"not_found": status.HTTP_404_NOT_FOUND, "conflict": status.HTTP_409_CONFLICT}


def _raise_for(result: ChatOutput) -> None:
    code = _ERROR_STATUS.get(result.error_code or "", status.HTTP_400_BAD_REQUEST)
    raise HTTPException(status_code=code, detail=result.error)


@router.post("/users", response_model=ChatUserResponse, status_code=201)
def register_user(
    data: ChatUserRequest,
    repo: SQLiteChatRepo = Depends(get_chat_repo),
    clock: SystemClock = Depends(get_clock),
) -> ChatUserResponse:
    result = run_register_user(
        RegisterChatUserInput(display_name=data.display_name, email=data.email, uid=data.uid),
        repo,
        clock,
    )
    if not result.success:
        _raise_for(result)
    assert result.user is not None
    return _user_response(result.user)


@router.get("/me", response_model=ChatUserResponse)
def whoami(user: ChatUser = Depends(get_chat_user)) -> ChatUserResponse:
    return _user_response(user)


@router.get("/users/search", response_model=list[ChatUserResponse])
def search_users(
    q: str = "",
    user: ChatUser = Depends(get_chat_user),
    repo: SQLiteChatRepo = Depends(get_chat_repo),
) -> list[ChatUserResponse]:
    return [_user_response(u) for u in run_search_users(user.uid, q, repo)]


@router.get("/chats", response_model=list[ChatSummaryResponse])
def list_chats(
    user: ChatUser = Depends(get_chat_user),
    repo: SQLiteChatRepo = Depends(get_chat_repo),
    clock: SystemClock = Depends(get_clock),
) -> list[ChatSummaryResponse]:
    now = clock.now_utc()
    out: list[ChatSummaryResponse] = []
    for item in run_list_chats(user.uid, repo):
        chat = item.chat
        last = chat.last_message
        out.append(
            ChatSummaryResponse(
                id=chat.id,
                participants=chat.participants,
                last_message=(
                    LastMessageResponse(
                        text=last.text, sender_id=last.sender_id, timestamp=last.timestamp
                    )
                    if last
                    else None
                ),
                last_updated=chat.last_updated,
                relative_time=format_relative(chat.last_updated, now),
                other_user=_user_response(item.other_user),
            )
        )
    return out


@router.get("/messages/{other_id}", response_model=list[ChatMessageResponse])
def list_messages(
    other_id: str,
    user: ChatUser = Depends(get_chat_user),
    repo: SQLiteChatRepo = Depends(get_chat_repo),
    clock: SystemClock = Depends(get_clock),
) -> list[ChatMessageResponse]:
    messages = run_list_messages(user.uid, other_id, repo)
    return [
        _message_response(m, messages[i - 1] if i else None, clock)
        for i, m in enumerate(messages)
    ]


@router.post("/messages/{other_id}", response_model=ChatMessageResponse, status_code=201)
def send_message(
    other_id: str,
    data: SendMessageRequest,
    user: ChatUser = Depends(get_chat_user),
    repo: SQLiteChatRepo = Depends(get_chat_repo),
    clock: SystemClock = Depends(get_clock),
) -> ChatMessageResponse:
    result = run_send_message(
        SendMessageInput(sender_id=user.uid, recipient_id=other_id, text=data.text), repo, clock
    )
    if not result.success:
        _raise_for(result)
    assert result.message is not None
    return _message_response(result.message, None, clock)
