# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Request gate for routes that need a signed session token.

Clients send ``Authorization: JWT <token>``. Verification only checks the
signature (and expiry, when the token has one); it never touches the user
store, so a token stays usable after its user is gone until it expires.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar, cast

from flask import g, request

from userapi.domain.users.entities import UserIdentity
from userapi.domain.users.repositories import TokenIssuer
from userapi.shared.errors import AuthenticationError
from userapi.shared.logging import logger

AUTH_SCHEME = "jwt"

F = TypeVar("F", bound=Callable[..., Any])


class TokenAuthenticator:
    def __init__(self, tokens: TokenIssuer, *, scheme: str = AUTH_SCHEME) -> None:
        self._tokens = tokens
        self._scheme = scheme.lower()

    def authenticate(self, authorization: str | None) -> UserIdentity:
        if not authorization:
            raise AuthenticationError("Missing authorization token")

        scheme, _, token = authorization.strip().partition(" ")
        token = token.strip()
        if scheme.lower() != self._scheme or not token:
            raise AuthenticationError("Unsupported authorization scheme")

        return self._tokens.verify(token)

    def required(self, view: F) -> F:
        @wraps(view)
        def inner(*args: Any, **kwargs: Any) -> Any:
            try:
                identity = self.authenticate(request.headers.get("Authorization"))
            except AuthenticationError as exc:
                logger.warning(f"Auth failed ({exc.message}) on {request.method} {request.path}")
                raise

            g.identity = identity
            g.user_id = identity.id
            logger.debug(f"Auth OK: user={identity.id} {request.method} {request.path}")
            return view(*args, **kwargs)

        return cast(F, inner)


def current_identity() -> UserIdentity:
    """Identity attached by :meth:`TokenAuthenticator.required`."""
    return cast(UserIdentity, g.identity)
