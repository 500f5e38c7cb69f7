# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import ListKind, User, UserIdentity


class UserRepository(Protocol):
    def find_by_username(self, username: str) -> User | None: ...
    def find_by_id(self, user_id: int) -> User | None: ...
    def add(self, user: User) -> User: ...


class UserListRepository(Protocol):
    """Membership sets keyed by (user, kind).

    Every method returns ``None`` when the user does not exist.
    """

    def items(self, user_id: int, kind: ListKind) -> list[str] | None: ...
    def add_item(self, user_id: int, kind: ListKind, item_id: str) -> list[str] | None: ...
    def remove_item(self, user_id: int, kind: ListKind, item_id: str) -> list[str] | None: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class TokenIssuer(Protocol):
    def issue(self, identity: UserIdentity) -> str: ...
    def verify(self, token: str) -> UserIdentity: ...
