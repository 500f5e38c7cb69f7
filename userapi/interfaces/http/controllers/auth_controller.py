# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from userapi.application.use_cases.users.login_user import LoginUserUseCase
from userapi.application.use_cases.users.register_user import RegisterUserUseCase
from userapi.interfaces.http.dto.auth import (
    LoginRequestDTO,
    LoginSuccessDTO,
    MessageDTO,
    RegisterRequestDTO,
)
from userapi.shared.errors.validation import raise_validation_error
from userapi.shared.logging import logger


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case

    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        user = self._register_use_case.execute(dto.username, dto.password, dto.password2)

        logger.info(f"auth.register: ok user_id={user.id}")
        payload = MessageDTO(message=f"User {user.username} successfully registered")
        return jsonify(payload.model_dump()), 200

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        identity, token = self._login_use_case.execute(dto.username, dto.password)

        logger.info(f"auth.login: ok user_id={identity.id}")
        return jsonify(LoginSuccessDTO(token=token).model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("user_auth", __name__, url_prefix="/api/user")
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        return bp
