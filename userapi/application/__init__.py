# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .services import JwtTokenIssuer, WerkzeugPasswordHasher
from .use_cases.users import LoginUserUseCase, RegisterUserUseCase, UserListUseCase

__all__ = [
    "JwtTokenIssuer",
    "LoginUserUseCase",
    "RegisterUserUseCase",
    "UserListUseCase",
    "WerkzeugPasswordHasher",
]
