from datetime import timedelta
from typing import Any

from practicals.api.auth_utils import (
    create_access_token,
    decode_access_token,
    get_password_hash,
    verify_password,
)


class JWTAuthAdapter:
    """Auth adapter for the authentication portal: argon2 hashes, HS256 bearer tokens."""

    def hash_password(self, password: str) -> str:
        return get_password_hash(password)

    def verify_password(self, plain: str, hashed: str) -> bool:
        return verify_password(plain, hashed)

    def create_token(self, user_id: Any, ttl_minutes: int) -> str:
        return create_access_token({"sub": str(user_id)}, timedelta(minutes=ttl_minutes))

    def validate_token(self, token: str) -> str | None:
        payload = decode_access_token(token)
        sub = payload.get("sub") if payload else None
        return sub if isinstance(sub, str) else None
