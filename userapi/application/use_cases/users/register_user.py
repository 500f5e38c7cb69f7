# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from userapi.domain.users.entities import User
from userapi.domain.users.exceptions import UserAlreadyExistsError
from userapi.domain.users.repositories import PasswordHasher, UserRepository
from userapi.shared.errors import ValidationError
from userapi.shared.logging import logger


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(
        self, username: str, password: str, password_confirmation: str | None = None
    ) -> User:
        if not username or not username.strip():
            raise ValidationError("User name is required")
        if not password:
            raise ValidationError("Password is required")
        if password_confirmation is not None and password_confirmation != password:
            raise ValidationError("Passwords do not match")

        if self._users.find_by_username(username):
            raise UserAlreadyExistsError()

        hashed = self._password_hasher.hash(password)
        user = User(id=0, username=username, password_hash=hashed, created_at=datetime.now(UTC))
        persisted = self._users.add(user)
        logger.info(f"users.register: created user_id={persisted.id}")
        return persisted
