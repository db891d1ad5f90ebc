import logging
import os
import sqlite3
from functools import lru_cache
from pathlib import Path
from typing import Annotated, Any
from uuid import UUID

from fastapi import Depends, Header, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer

from practicals.adapters.auth.crypto import JWTAuthAdapter
from practicals.adapters.auth.session_store import InMemorySessionStore
from practicals.adapters.clock import SystemClock
from practicals.adapters.dev_email import DevEmailAdapter
from practicals.adapters.fs.filestore import FileSystemStore
from practicals.adapters.memory.stores import (
    InMemoryRepStore,
    InMemoryTodoStore,
    NavigationStateHolder,
)
from practicals.adapters.smtp_email import SMTPEmailAdapter
from practicals.adapters.sqlite.repos import (
    SQLiteAccountRepo,
    SQLiteChatRepo,
    SQLiteStudentRepo,
)
from practicals.api.auth_utils import decode_access_token
from practicals.app_shell.rate_limit import RateLimiter
from practicals.components.contact import ContactAddresses
from practicals.components.students import StudentService
from practicals.core.ports.email import EmailPort
from practicals.domain.entities import Account, ChatUser
from practicals.rules.loader import load_rules
from practicals.rules.models import Rules

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Raised from dependencies to answer with a flat JSON body instead of `{detail}`."""

    def __init__(self, status_code: int, content: dict[str, Any]) -> None:
        super().__init__(content.get("message", ""))
        self.status_code = status_code
        self.content = content


# --- Settings ---
def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in ("1", "true", "yes")


class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.data_dir = Path(os.environ.get("PRACTICALS_DATA_DIR", "./data"))
        self.db_path = str(self.data_dir / "practicals.db")
        self.logs_dir = self.data_dir / "logs"
        self.uploads_dir = self.data_dir / "uploads"
        self.rules_path = Path(
            os.environ.get("PRACTICALS_RULES_PATH", str(self.base_dir / "rules.yaml"))
        )
        self.port = int(os.environ.get("PORT", "3000"))

        # Contact form mail transport
        self.smtp_host = os.environ.get("SMTP_HOST")
        self.smtp_port = int(os.environ.get("SMTP_PORT", "587"))
        self.smtp_user = os.environ.get("SMTP_USER")
        self.smtp_pass = os.environ.get("SMTP_PASS")
        self.smtp_secure = _env_flag("SMTP_SECURE")
        self.from_email = os.environ.get("FROM_EMAIL")
        self.to_email = os.environ.get("TO_EMAIL")

    @property
    def smtp_configured(self) -> bool:
        return bool(self.smtp_host and self.smtp_user and self.smtp_pass)


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def get_rules(settings: Settings = Depends(get_settings)) -> Rules:
    return load_rules(settings.rules_path)


class LogViewerRulesAdapter:
    def __init__(self, rules: Rules):
        self._rules = rules.logs

    def get_allowed_extensions(self) -> list[str]:
        return self._rules.allowed_extensions

    def get_default_page_size(self) -> int:
        return self._rules.default_page_size


class UploadRulesAdapter:
    def __init__(self, rules: Rules):
        self._rules = rules.uploads

    def get_max_bytes(self) -> int:
        return self._rules.max_upload_bytes

    def get_allowed_mime_types(self) -> list[str]:
        return self._rules.allowlist_mime_types

    def get_allowed_extensions(self) -> list[str]:
        return self._rules.allowlist_extensions

    def get_filename_prefix(self) -> str:
        return self._rules.filename_prefix


class StudentRulesAdapter:
    def __init__(self, rules: Rules):
        self._rules = rules.students

    def get_default_page_size(self) -> int:
        return self._rules.default_page_size

    def get_max_page_size(self) -> int:
        return self._rules.max_page_size

    def get_name_length(self) -> tuple[int, int]:
        return self._rules.name.min, self._rules.name.max


class ContactRulesAdapter:
    def __init__(self, rules: Rules):
        self._rules = rules.contact

    def get_min_name_length(self) -> int:
        return self._rules.min_name_length

    def get_min_message_length(self) -> int:
        return self._rules.min_message_length


class AccountRulesAdapter:
    def __init__(self, rules: Rules):
        self._rules = rules.accounts

    def get_password_min_length(self) -> int:
        return self._rules.password_hashing.min_length

    def get_name_length(self) -> tuple[int, int]:
        return self._rules.name.min, self._rules.name.max

    def get_minimum_age_years(self) -> int:
        return self._rules.minimum_age_years

    def get_token_ttl_minutes(self) -> int:
        return self._rules.token_ttl_minutes


def get_log_rules(rules: Rules = Depends(get_rules)) -> LogViewerRulesAdapter:
    return LogViewerRulesAdapter(rules)


def get_upload_rules(rules: Rules = Depends(get_rules)) -> UploadRulesAdapter:
    return UploadRulesAdapter(rules)


def get_student_rules(rules: Rules = Depends(get_rules)) -> StudentRulesAdapter:
    return StudentRulesAdapter(rules)


def get_contact_rules(rules: Rules = Depends(get_rules)) -> ContactRulesAdapter:
    return ContactRulesAdapter(rules)


def get_account_rules(rules: Rules = Depends(get_rules)) -> AccountRulesAdapter:
    return AccountRulesAdapter(rules)


# --- Repos ---
def get_student_repo(settings: Settings = Depends(get_settings)) -> SQLiteStudentRepo:
    return SQLiteStudentRepo(settings.db_path)


def get_account_repo(settings: Settings = Depends(get_settings)) -> SQLiteAccountRepo:
    return SQLiteAccountRepo(settings.db_path)


def get_chat_repo(settings: Settings = Depends(get_settings)) -> SQLiteChatRepo:
    return SQLiteChatRepo(settings.db_path)


# --- File stores ---
def get_log_store(settings: Settings = Depends(get_settings)) -> FileSystemStore:
    return FileSystemStore(base_path=str(settings.logs_dir))


def get_upload_store(settings: Settings = Depends(get_settings)) -> FileSystemStore:
    return FileSystemStore(base_path=str(settings.uploads_dir))


# Time adapter for deterministic time operations
_clock_instance: SystemClock | None = None


def get_clock() -> SystemClock:
    """Get clock singleton."""
    global _clock_instance
    if _clock_instance is None:
        _clock_instance = SystemClock()
    return _clock_instance


# --- Component Services ---
def get_student_service(
    repo: SQLiteStudentRepo = Depends(get_student_repo),
    clock: SystemClock = Depends(get_clock),
    rules: StudentRulesAdapter = Depends(get_student_rules),
) -> StudentService:
    return StudentService(repo=repo, time=clock, rules=rules)


def get_auth_adapter() -> JWTAuthAdapter:
    return JWTAuthAdapter()


# --- In-memory state (process lifetime) ---
_session_store_instance: InMemorySessionStore | None = None
_todo_store_instance: InMemoryTodoStore | None = None
_rep_store_instance: InMemoryRepStore | None = None
_nav_state_instance: NavigationStateHolder | None = None
_dev_email_instance: DevEmailAdapter | None = None
_rate_limiter_instance: RateLimiter | None = None


def get_session_store() -> InMemorySessionStore:
    """Library portal sessions."""
    global _session_store_instance
    if _session_store_instance is None:
        _session_store_instance = InMemorySessionStore()
    return _session_store_instance


def get_todo_store() -> InMemoryTodoStore:
    global _todo_store_instance
    if _todo_store_instance is None:
        _todo_store_instance = InMemoryTodoStore()
    return _todo_store_instance


def get_rep_store() -> InMemoryRepStore:
    global _rep_store_instance
    if _rep_store_instance is None:
        _rep_store_instance = InMemoryRepStore()
    return _rep_store_instance


def get_nav_state() -> NavigationStateHolder:
    global _nav_state_instance
    if _nav_state_instance is None:
        _nav_state_instance = NavigationStateHolder()
    return _nav_state_instance


def get_dev_email_adapter() -> DevEmailAdapter:
    global _dev_email_instance
    if _dev_email_instance is None:
        _dev_email_instance = DevEmailAdapter()
    return _dev_email_instance


def get_rate_limiter(rules: Rules = Depends(get_rules)) -> RateLimiter:
    global _rate_limiter_instance
    if _rate_limiter_instance is None:
        _rate_limiter_instance = RateLimiter(rules.rate_limits, get_clock())
    return _rate_limiter_instance


def reset_state() -> None:
    """Drop all in-memory state. Used between tests."""
    global _session_store_instance, _todo_store_instance, _rep_store_instance
    global _nav_state_instance, _dev_email_instance, _rate_limiter_instance
    _session_store_instance = None
    _todo_store_instance = None
    _rep_store_instance = None
    _nav_state_instance = None
    _dev_email_instance = None
    _rate_limiter_instance = None


# --- Contact mail ---
def get_email_adapter(settings: Settings = Depends(get_settings)) -> EmailPort:
    """SMTP when fully configured, otherwise the logging dev adapter."""
    if settings.smtp_configured:
        return SMTPEmailAdapter(
            host=str(settings.smtp_host),
            port=settings.smtp_port,
            username=settings.smtp_user,
            password=settings.smtp_pass,
            secure=settings.smtp_secure,
        )
    return get_dev_email_adapter()


def get_contact_addresses(
    settings: Settings = Depends(get_settings),
    rules: Rules = Depends(get_rules),
) -> ContactAddresses:
    sender = settings.from_email or settings.smtp_user or rules.contact.fallback_address
    return ContactAddresses(
        sender=sender,
        recipient=settings.to_email or sender,
        sender_display_name=rules.contact.sender_display_name,
    )


def client_ip(request: Request) -> str:
    return request.client.host if request.client else "unknown"


# --- Database availability (auth portal) ---
def require_database(repo: SQLiteAccountRepo = Depends(get_account_repo)) -> None:
    try:
        repo.ping()
    except sqlite3.Error as e:
        logger.error("Database connection error: %s", e)
        raise ApiError(
            status.HTTP_503_SERVICE_UNAVAILABLE,
            {
                "success": False,
                "message": "Database not available. Please check the data directory.",
                "error": "DATABASE_CONNECTION_FAILED",
            },
        ) from e


# --- Auth ---
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login", auto_error=False)


def _unauthorized(message: str) -> ApiError:
    return ApiError(status.HTTP_401_UNAUTHORIZED, {"success": False, "message": message})


async def get_current_account(
    token: Annotated[str | None, Depends(oauth2_scheme)],
    _db: None = Depends(require_database),
    repo: SQLiteAccountRepo = Depends(get_account_repo),
) -> Account:
    if not token:
        raise _unauthorized("No token, authorization denied")

    payload = decode_access_token(token)
    if not payload:
        raise _unauthorized("Token is not valid")

    account_id = payload.get("sub")
    if account_id is None or not isinstance(account_id, str):
        raise _unauthorized("Token is not valid")

    try:
        account = repo.get_by_id(UUID(account_id))
    except ValueError:
        account = None
    if account is None:
        raise _unauthorized("Token is not valid")

    if not account.is_active:
        raise ApiError(
            status.HTTP_403_FORBIDDEN, {"success": False, "message": "Account is deactivated"}
        )

    return account


def get_chat_user(
    x_user_id: Annotated[str | None, Header()] = None,
    repo: SQLiteChatRepo = Depends(get_chat_repo),
) -> ChatUser:
    """The chat caller, named by the X-User-Id header."""
    if not x_user_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")
    user = repo.get_user(x_user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unknown user")
    return user
