from datetime import UTC, date, datetime
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


def utcnow() -> datetime:
    return datetime.now(UTC)


# --- Student admin ---

class Student(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    name: str
    email: str
    phone: str | None = None
    course: str
    fee_paid: bool = False
    joined_at: datetime = Field(default_factory=utcnow)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

# --- Authentication portal ---

class Account(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    first_name: str
    last_name: str
    email: str
    password_hash: str
    phone: str | None = None
    date_of_birth: date | None = None
    is_active: bool = True
    last_login: datetime | None = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

# --- Chat ---

class ChatUser(BaseModel):
    uid: str
    display_name: str
    email: str
    created_at: datetime = Field(default_factory=utcnow)

class ChatMessage(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    chat_id: str
    text: str
    sender_id: str
    sender_name: str
    timestamp: datetime = Field(default_factory=utcnow)

class LastMessage(BaseModel):
    text: str
    sender_id: str
    timestamp: datetime

class ChatSummary(BaseModel):
    id: str
    participants: list[str]
    last_message: LastMessage | None = None
    last_updated: datetime = Field(default_factory=utcnow)
