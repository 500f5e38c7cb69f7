from __future__ import annotations

import pytest

from userapi.shared.config import AppConfig, JwtConfig, SecurityConfig
from userapi.shared.logging import sanitize_message
from userapi.shared.middleware.request_logger import sanitize_headers


def test_security_config_splits_origins() -> None:
    config = SecurityConfig(ALLOWED_ORIGINS="https://a.example, https://b.example")

    assert config.allowed_origins == ["https://a.example", "https://b.example"]


def test_flags_parse_strings() -> None:
    config = AppConfig(LEGACY_ERROR_STATUS="yes", DEBUG_LOGGING="0")

    assert config.legacy_error_status is True
    assert config.debug_logging is False


def test_production_refuses_default_secret() -> None:
    with pytest.raises(SystemExit):
        AppConfig(APP_ENV="production", jwt=JwtConfig(JWT_SECRET="dev"))


def test_negative_expiry_is_invalid() -> None:
    with pytest.raises(ValueError):
        JwtConfig(JWT_EXPIRES_IN=-1)


@pytest.mark.parametrize(
    ("message", "leaked"),
    [
        ("login attempt password=hunter2", "hunter2"),
        ("body={'password': 'hunter2', 'password2': 'hunter2'}", "hunter2"),
        ("Authorization: JWT eyJhbGciOiJIUzI1NiJ9.eyJfaWQiOjF9.c2lnbmF0dXJl", "eyJfaWQiOjF9"),
        ("token eyJhbGciOiJIUzI1NiJ9.eyJfaWQiOjF9.c2lnbmF0dXJl issued", "eyJfaWQiOjF9"),
        ("db postgresql://app:s3cret@db:5432/users", "s3cret"),
    ],
)
def test_sanitize_message_redacts_secrets(message: str, leaked: str) -> None:
    assert leaked not in sanitize_message(message)


def test_sanitize_headers_hashes_authorization() -> None:
    headers = sanitize_headers({"Authorization": "JWT abc", "Accept": "application/json"})

    assert headers["Authorization"].startswith("<hashed:")
    assert headers["Accept"] == "application/json"
