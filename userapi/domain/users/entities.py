# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum


@dataclass(slots=True, frozen=True)
class User:

    id: int
    username: str
    password_hash: str
    created_at: datetime

    def identity(self) -> UserIdentity:
        return UserIdentity(id=self.id, username=self.username)


@dataclass(slots=True, frozen=True)
class UserIdentity:
    """The authenticated caller: what a session token carries."""

    id: int
    username: str


class ListKind(StrEnum):
    """Per-user membership sets of opaque item ids."""

    FAVOURITES = "favourites"
    HISTORY = "history"
