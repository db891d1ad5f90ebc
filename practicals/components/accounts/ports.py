from __future__ import annotations

from typing import Any, Protocol
from uuid import UUID

from practicals.domain.entities import Account


class AccountRepoPort(Protocol):
    def save(self, account: Account) -> Account: ...

    def get_by_id(self, account_id: UUID) -> Account | None: ...

    def get_by_email(self, email: str) -> Account | None: ...


class AuthAdapterPort(Protocol):
    def hash_password(self, plain: str) -> str: ...

    def verify_password(self, plain: str, hashed: str) -> bool: ...

    def create_token(self, user_id: Any, ttl_minutes: int) -> str: ...


class AccountRulesPort(Protocol):
    def get_password_min_length(self) -> int: ...

    def get_name_length(self) -> tuple[int, int]: ...

    def get_minimum_age_years(self) -> int: ...

    def get_token_ttl_minutes(self) -> int: ...
