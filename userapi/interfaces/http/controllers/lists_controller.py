# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Sequence

from flask import Blueprint, Response, jsonify

from userapi.application.use_cases.users.user_lists import UserListUseCase
from userapi.interfaces.http.auth import TokenAuthenticator, current_identity


class UserListsController:
    """``/api/user/<kind>`` routes for every list kind, all token-protected."""

    def __init__(
        self,
        *,
        lists: Sequence[UserListUseCase],
        authenticator: TokenAuthenticator,
    ) -> None:
        self._lists = list(lists)
        self._authenticator = authenticator

    @staticmethod
    def _get_view(use_case: UserListUseCase) -> Callable[[], Response]:
        def view() -> Response:
            return jsonify(use_case.get(current_identity().id))

        return view

    @staticmethod
    def _add_view(use_case: UserListUseCase) -> Callable[[str], Response]:
        def view(item_id: str) -> Response:
            return jsonify(use_case.add(current_identity().id, item_id))

        return view

    @staticmethod
    def _remove_view(use_case: UserListUseCase) -> Callable[[str], Response]:
        def view(item_id: str) -> Response:
            return jsonify(use_case.remove(current_identity().id, item_id))

        return view

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("user_lists", __name__, url_prefix="/api/user")
        guard = self._authenticator.required
        for use_case in self._lists:
            kind = use_case.kind.value
            bp.add_url_rule(
                f"/{kind}",
                endpoint=f"{kind}_get",
                view_func=guard(self._get_view(use_case)),
                methods=["GET"],
            )
            bp.add_url_rule(
                f"/{kind}/<item_id>",
                endpoint=f"{kind}_add",
                view_func=guard(self._add_view(use_case)),
                methods=["PUT"],
            )
            bp.add_url_rule(
                f"/{kind}/<item_id>",
                endpoint=f"{kind}_remove",
                view_func=guard(self._remove_view(use_case)),
                methods=["DELETE"],
            )
        return bp
