# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets

from userapi.domain.users.entities import UserIdentity
from userapi.domain.users.exceptions import InvalidCredentialsError
from userapi.domain.users.repositories import PasswordHasher, TokenIssuer, UserRepository
from userapi.shared.errors import ValidationError


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: TokenIssuer,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher
        # Checked against for unknown users so both failure paths hash once.
        self._dummy_hash = password_hasher.hash(secrets.token_urlsafe(16))

    def authenticate(self, username: str, password: str) -> UserIdentity:
        if not username or not password:
            raise ValidationError("User name and password are required")

        user = self._users.find_by_username(username)
        if user is None:
            self._password_hasher.verify(password, self._dummy_hash)
            raise InvalidCredentialsError()

        if not self._password_hasher.verify(password, user.password_hash):
            raise InvalidCredentialsError()

        return user.identity()

    def execute(self, username: str, password: str) -> tuple[UserIdentity, str]:
        identity = self.authenticate(username, password)
        return identity, self._tokens.issue(identity)
