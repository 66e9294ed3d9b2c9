from datetime import timedelta

import jwt
import pytest
from src.core.auth import TokenError, create_access_token, decode_access_token
from src.core.config import get_settings


def test_create_and_decode_token_roundtrip() -> None:
    claims = {"email": "user@example.com", "name": "Uma User"}
    token = create_access_token(claims)

    payload = decode_access_token(token)

    assert payload["email"] == "user@example.com"
    assert payload["name"] == "Uma User"


def test_token_expires_after_one_day() -> None:
    payload = decode_access_token(create_access_token({"email": "user@example.com"}))

    assert payload["exp"] - payload["iat"] == 86400


def test_caller_supplied_expiry_is_overridden() -> None:
    payload = decode_access_token(create_access_token({"email": "user@example.com", "exp": 1}))

    assert payload["exp"] > 1


def test_decode_rejects_token_signed_with_other_secret() -> None:
    settings = get_settings()
    forged = jwt.encode(
        {"email": "user@example.com", "exp": 9999999999},
        "not-the-shared-secret",
        algorithm=settings.jwt_algorithm,
    )

    with pytest.raises(TokenError):
        decode_access_token(forged)


def test_decode_rejects_expired_token() -> None:
    token = create_access_token({"email": "user@example.com"}, expires_delta=timedelta(seconds=-30))

    with pytest.raises(TokenError):
        decode_access_token(token)


def test_decode_rejects_token_without_expiry() -> None:
    settings = get_settings()
    token = jwt.encode(
        {"email": "user@example.com"},
        settings.access_token_secret,
        algorithm=settings.jwt_algorithm,
    )

    with pytest.raises(TokenError):
        decode_access_token(token)
