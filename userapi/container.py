# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Application dependency container."""

from __future__ import annotations

from functools import cached_property

from userapi.application.services.password_hashing import WerkzeugPasswordHasher
from userapi.application.services.tokens import JwtTokenIssuer
from userapi.application.use_cases.users.login_user import LoginUserUseCase
from userapi.application.use_cases.users.register_user import RegisterUserUseCase
from userapi.application.use_cases.users.user_lists import UserListUseCase
from userapi.domain.users.entities import ListKind
from userapi.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserListRepository,
    SqlAlchemyUserRepository,
)
from userapi.interfaces.http.auth import TokenAuthenticator
from userapi.interfaces.http.controllers.auth_controller import AuthController
from userapi.interfaces.http.controllers.lists_controller import UserListsController
from userapi.interfaces.http.controllers.misc_controller import MiscController
from userapi.shared.config import AppConfig


class Container:
    def __init__(self, config: AppConfig) -> None:
        self._config = config

    @property
    def config(self) -> AppConfig:
        return self._config

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher()

    @cached_property
    def token_issuer(self) -> JwtTokenIssuer:
        jwt_config = self._config.jwt
        return JwtTokenIssuer(
            jwt_config.secret,
            expires_in=jwt_config.expires_in,
            algorithm=jwt_config.algorithm,
        )

    @cached_property
    def token_authenticator(self) -> TokenAuthenticator:
        return TokenAuthenticator(self.token_issuer)

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository()

    @cached_property
    def user_list_repository(self) -> SqlAlchemyUserListRepository:
        return SqlAlchemyUserListRepository()

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.token_issuer,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def favourites_use_case(self) -> UserListUseCase:
        return UserListUseCase(lists=self.user_list_repository, kind=ListKind.FAVOURITES)

    @cached_property
    def history_use_case(self) -> UserListUseCase:
        return UserListUseCase(lists=self.user_list_repository, kind=ListKind.HISTORY)

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
        )

    @cached_property
    def lists_controller(self) -> UserListsController:
        return UserListsController(
            lists=[self.favourites_use_case, self.history_use_case],
            authenticator=self.token_authenticator,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController()
