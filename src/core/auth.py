from __future__ import annotations

from collections.abc import Mapping
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt
from src.core.config import get_settings


class TokenError(Exception):
    """Raised when a token cannot be decoded or validated."""


def create_access_token(
    claims: Mapping[str, Any],
    *,
    expires_delta: timedelta | None = None,
) -> str:
    """Sign the given claims into a JWT access token.

    Claims are taken as supplied by the caller; only ``iat`` and ``exp`` are
    set here and always override caller values.
    """
    settings = get_settings()

    now = datetime.now(UTC)
    ttl = expires_delta or timedelta(seconds=settings.access_token_ttl_seconds)
    payload = dict(claims)
    payload["iat"] = int(now.timestamp())
    payload["exp"] = int((now + ttl).timestamp())

    return jwt.encode(payload, settings.access_token_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> dict[str, Any]:
    """Decode and validate a JWT access token."""
    settings = get_settings()

    try:
        return jwt.decode(
            token,
            settings.access_token_secret,
            algorithms=[settings.jwt_algorithm],
            # Caller-chosen claims are opaque: only signature and expiry are enforced
            options={
                "require": ["exp"],
                "verify_aud": False,
                "verify_sub": False,
                "verify_jti": False,
            },
        )
    except jwt.PyJWTError as exc:
        raise TokenError("Invalid token") from exc
