"""Stateless session tokens signed with a shared secret."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt

from userapi.domain.users.entities import UserIdentity
from userapi.domain.users.repositories import TokenIssuer
from userapi.shared.errors import AuthenticationError

# Claim names kept compatible with tokens issued to existing clients.
ID_CLAIM = "_id"
USERNAME_CLAIM = "userName"


class JwtTokenIssuer(TokenIssuer):
    """Issue and verify HS256 JWTs carrying a :class:`UserIdentity`.

    ``expires_in`` is in seconds; ``None`` or ``0`` issues tokens without an
    ``exp`` claim, which stay valid for as long as the secret does. Tokens
    are never stored, so there is no way to revoke one before it expires.
    ``clock`` supplies "now" for both stamping and checking ``exp``.
    """

    def __init__(
        self,
        secret: str,
        *,
        expires_in: int | None = None,
        algorithm: str = "HS256",
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        if not secret:
            raise ValueError("JWT secret must not be empty")
        self._secret = secret
        self._expires_in = expires_in or None
        self._algorithm = algorithm
        self._clock = clock or (lambda: datetime.now(UTC))

    def issue(self, identity: UserIdentity) -> str:
        claims: dict[str, Any] = {ID_CLAIM: identity.id, USERNAME_CLAIM: identity.username}
        if self._expires_in is not None:
            now = self._clock()
            claims["iat"] = now
            claims["exp"] = now + timedelta(seconds=self._expires_in)
        return jwt.encode(claims, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> UserIdentity:
        try:
            # Time claims are checked against self._clock below, not the wall clock.
            data: dict[str, Any] = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"verify_exp": False, "verify_iat": False, "verify_nbf": False},
            )
        except jwt.InvalidTokenError as e:
            raise AuthenticationError("Invalid token") from e

        expires_at = data.get("exp")
        if expires_at is not None:
            if not isinstance(expires_at, int | float) or isinstance(expires_at, bool):
                raise AuthenticationError("Invalid token")
            if self._clock().timestamp() >= expires_at:
                raise AuthenticationError("Token expired")

        user_id = data.get(ID_CLAIM)
        username = data.get(USERNAME_CLAIM)
        if not isinstance(user_id, int) or isinstance(user_id, bool) or not isinstance(username, str):
            raise AuthenticationError("Invalid token")
        return UserIdentity(id=user_id, username=username)
