"""Bearer tokens whose ``sub`` claim carries the opaque owner id."""

from datetime import datetime, timedelta, timezone

import jwt

from booking.core import config

REQUIRED_CLAIMS = ["sub", "exp"]


def create_access_token(owner_id: str, expires_minutes: int | None = None) -> str:
    issued_at = datetime.now(timezone.utc)
    expire = issued_at + timedelta(minutes=expires_minutes or config.JWT_EXPIRES_MINUTES)
    payload = {"sub": owner_id, "exp": expire, "iat": issued_at}
    return jwt.encode(payload, config.JWT_SECRET_KEY, algorithm=config.JWT_ALGORITHM)


def decode_access_token(token: str) -> dict:
    return jwt.decode(
        token,
        config.JWT_SECRET_KEY,
        algorithms=[config.JWT_ALGORITHM],
        options={"require": REQUIRED_CLAIMS},
    )
