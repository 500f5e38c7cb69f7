# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .users.entities import ListKind, User, UserIdentity
from .users.exceptions import (
    InvalidCredentialsError,
    UserAlreadyExistsError,
    UserNotFoundError,
)

__all__ = [
    "InvalidCredentialsError",
    "ListKind",
    "User",
    "UserAlreadyExistsError",
    "UserIdentity",
    "UserNotFoundError",
]
