from datetime import date, datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Wire models use the camelCase field names the browser clients expect."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MessageResponse(BaseModel):
    message: str


# --- Log viewer ---
class LogFileResponse(CamelModel):
    name: str
    size: int
    size_formatted: str
    modified: datetime


class LogListResponse(CamelModel):
    success: bool = True
    files: list[LogFileResponse]


class LogPageResponse(LogFileResponse):
    lines: list[str]
    total_lines: int
    current_page: int
    total_pages: int
    lines_per_page: int
    has_search: bool
    search_term: str


class LogReadResponse(CamelModel):
    success: bool = True
    file: LogPageResponse


# --- Kids calculator ---
class KidsCalculateRequest(CamelModel):
    number1: str | float | None = None
    number2: str | float | None = None
    operation: str | None = None


class KidsCalculateResponse(CamelModel):
    result: float
    symbol: str
    expression: str


# --- Tax form ---
class TaxCalculateRequest(CamelModel):
    primary_income: str | float | None = None
    secondary_income: str | float | None = None
    primary_source: str | None = None
    secondary_source: str | None = None


class TaxResultResponse(CamelModel):
    primary_income: float
    secondary_income: float
    total_income: float
    primary_income_formatted: str
    secondary_income_formatted: str
    total_income_formatted: str
    primary_source: str
    secondary_source: str
    calculation_date: str


# --- Resumes ---
class ResumeResponse(CamelModel):
    name: str
    original_name: str
    size: str
    upload_date: str


class ResumeListResponse(CamelModel):
    uploaded_files: list[ResumeResponse]
    total_uploads: int


class ResumeUploadResponse(CamelModel):
    success: bool = True
    message: str
    filename: str


class ResumeClearResponse(CamelModel):
    success: bool = True
    message: str
    count: int


# --- Library portal ---
class LibraryLoginRequest(CamelModel):
    username: str | None = None
    email: str | None = None


class LibrarySessionResponse(CamelModel):
    name: str
    email: str
    login_time: datetime
    session_id: str
    is_active: bool


class LibrarySessionViewResponse(CamelModel):
    success: bool = True
    user: LibrarySessionResponse
    duration: str
    login_time_formatted: str


# --- Contact ---
class ContactRequest(CamelModel):
    name: str | None = None
    email: str | None = None
    message: str | None = None


# --- Students ---
class StudentResponse(CamelModel):
    id: UUID
    name: str
    email: str
    phone: str | None = None
    course: str
    fee_paid: bool
    joined_at: datetime
    created_at: datetime
    updated_at: datetime


class StudentPageResponse(CamelModel):
    items: list[StudentResponse]
    total: int
    page: int
    pages: int


# --- Small demos ---
class WeatherResponse(CamelModel):
    city: str
    report: str | None
    found: bool
    message: str


class ClockResponse(CamelModel):
    greeting: str
    date: str
    time: str


class KeypadStateModel(CamelModel):
    display: str = "0"
    previous_value: float | None = None
    operation: str | None = None
    waiting_for_operand: bool = False


class KeypadPressRequest(CamelModel):
    state: KeypadStateModel = KeypadStateModel()
    key: str


class TodoRequest(CamelModel):
    text: str | None = None


class TodoResponse(CamelModel):
    id: int
    text: str


class NavPageResponse(CamelModel):
    key: str
    label: str
    icon: str


class NavigationResponse(CamelModel):
    is_open: bool
    current: str
    pages: list[NavPageResponse]


class RepUpdateRequest(CamelModel):
    action: str | None = None
    count: Any = None


class RepCountResponse(CamelModel):
    exercise: str
    count: int


class SiteStatusResponse(CamelModel):
    status: str
    timestamp: str
    version: str


# --- Authentication portal ---
class AccountUserResponse(CamelModel):
    id: UUID
    first_name: str
    last_name: str
    full_name: str
    email: str
    phone: str | None = None
    date_of_birth: date | None = None
    is_active: bool
    last_login: datetime | None = None
    created_at: datetime


class AuthData(CamelModel):
    token: str | None = None
    user: AccountUserResponse


class AuthResponse(CamelModel):
    success: bool = True
    message: str
    data: AuthData


class ProfileResponse(CamelModel):
    success: bool = True
    data: AccountUserResponse


# --- Chat ---
class ChatUserRequest(CamelModel):
    display_name: str | None = None
    email: str | None = None
    uid: str | None = None


class ChatUserResponse(CamelModel):
    uid: str
    display_name: str
    email: str


class SendMessageRequest(CamelModel):
    text: str | None = None


class ChatMessageResponse(CamelModel):
    id: UUID
    chat_id: str
    text: str
    sender_id: str
    sender_name: str
    timestamp: datetime
    show_timestamp: bool = True
    time_label: str = ""


class LastMessageResponse(CamelModel):
    text: str
    sender_id: str
    timestamp: datetime


class ChatSummaryResponse(CamelModel):
    id: str
    participants: list[str]
    last_message: LastMessageResponse | None = None
    last_updated: datetime
    relative_time: str
    other_user: ChatUserResponse
