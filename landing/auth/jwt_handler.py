from datetime import datetime, timedelta, timezone

import jwt

from landing.core import config

TOKEN_TYPE = "admin"


def create_access_token(user_id: int, email: str, expires_minutes: int | None = None) -> str:
    issued_at = datetime.now(timezone.utc)
    lifetime = timedelta(minutes=expires_minutes or config.JWT_EXPIRES_MINUTES)
    payload = {
        "sub": email,
        "uid": user_id,
        "typ": TOKEN_TYPE,
        "iat": issued_at,
        "exp": issued_at + lifetime,
    }
    return jwt.encode(payload, config.JWT_SECRET_KEY, algorithm=config.JWT_ALGORITHM)


def decode_access_token(token: str) -> dict:
    payload = jwt.decode(
        token,
        config.JWT_SECRET_KEY,
        algorithms=[config.JWT_ALGORITHM],
        options={"require": ["sub", "uid", "exp"]},
    )
    if payload.get("typ") != TOKEN_TYPE:
        raise jwt.InvalidTokenError("Unexpected token type")
    return payload
