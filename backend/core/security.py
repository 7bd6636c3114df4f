from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any

from jose import jwt

from core.config import settings


class TokenNotConfiguredError(RuntimeError):
    """Raised when a token operation is attempted without JWT_SECRET_KEY."""


def _secret() -> str:
    if not settings.jwt_secret_key:
        raise TokenNotConfiguredError("JWT_SECRET_KEY is not configured")
    return settings.jwt_secret_key


def create_access_token(*, user_id: int, expires_minutes: int = 60) -> str:
    # Issuing tokens belongs to the identity service; this exists for tooling and tests.
    now = datetime.now(timezone.utc)
    payload: dict[str, Any] = {
        "sub": str(user_id),
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(minutes=expires_minutes)).timestamp()),
    }
    return jwt.encode(payload, _secret(), algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> dict[str, Any]:
    return jwt.decode(token, _secret(), algorithms=[settings.jwt_algorithm])
