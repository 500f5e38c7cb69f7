from __future__ import annotations

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from userapi.application.services.tokens import JwtTokenIssuer
from userapi.domain.users.entities import UserIdentity
from userapi.shared.errors import AuthenticationError
from userapi.tests.fakes import TEST_SECRET

IDENTITY = UserIdentity(id=7, username="alice")


def test_verify_inverts_issue() -> None:
    issuer = JwtTokenIssuer(TEST_SECRET, expires_in=3600)

    assert issuer.verify(issuer.issue(IDENTITY)) == IDENTITY


def test_token_carries_identity_and_expiry_claims() -> None:
    token = JwtTokenIssuer(TEST_SECRET, expires_in=60).issue(IDENTITY)

    claims = jwt.decode(token, TEST_SECRET, algorithms=["HS256"])

    assert claims["_id"] == 7
    assert claims["userName"] == "alice"
    assert claims["exp"] - claims["iat"] == 60


def test_zero_expiry_issues_token_without_exp() -> None:
    token = JwtTokenIssuer(TEST_SECRET, expires_in=0).issue(IDENTITY)

    claims = jwt.decode(token, TEST_SECRET, algorithms=["HS256"])

    assert set(claims) == {"_id", "userName"}


def test_expired_token_is_rejected() -> None:
    issued_at = datetime.now(UTC) - timedelta(hours=2)
    token = JwtTokenIssuer(TEST_SECRET, expires_in=3600, clock=lambda: issued_at).issue(IDENTITY)

    with pytest.raises(AuthenticationError, match="expired"):
        JwtTokenIssuer(TEST_SECRET, expires_in=3600).verify(token)


def test_verify_checks_expiry_against_injected_clock() -> None:
    now = datetime(2030, 1, 1, tzinfo=UTC)
    issuer = JwtTokenIssuer(TEST_SECRET, expires_in=60, clock=lambda: now)
    token = issuer.issue(IDENTITY)

    assert issuer.verify(token) == IDENTITY

    now += timedelta(seconds=61)

    with pytest.raises(AuthenticationError, match="expired"):
        issuer.verify(token)


def test_non_numeric_exp_is_rejected() -> None:
    token = jwt.encode(
        {"_id": 7, "userName": "alice", "exp": "tomorrow"}, TEST_SECRET, algorithm="HS256"
    )

    with pytest.raises(AuthenticationError):
        JwtTokenIssuer(TEST_SECRET).verify(token)


def test_token_from_other_secret_is_rejected() -> None:
    foreign = JwtTokenIssuer("another-secret-0123456789abcdef012345").issue(IDENTITY)

    with pytest.raises(AuthenticationError):
        JwtTokenIssuer(TEST_SECRET).verify(foreign)


@pytest.mark.parametrize(
    "token",
    [
        "not-a-token",
        jwt.encode({"foo": "bar"}, TEST_SECRET, algorithm="HS256"),
        jwt.encode({"_id": "7", "userName": "alice"}, TEST_SECRET, algorithm="HS256"),
    ],
)
def test_malformed_tokens_are_rejected(token: str) -> None:
    with pytest.raises(AuthenticationError):
        JwtTokenIssuer(TEST_SECRET).verify(token)


def test_empty_secret_is_refused() -> None:
    with pytest.raises(ValueError):
        JwtTokenIssuer("")
