# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from flask import Blueprint, Response, jsonify

from userapi.infrastructure.health import database_status


class MiscController:
    def __init__(self, *, probe: Callable[[], dict[str, Any]] = database_status) -> None:
        self._probe = probe

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/api/health", view_func=self.health, methods=["GET"])
        return bp

    def health(self) -> tuple[Response, int]:
        status = self._probe()
        return jsonify(status), 200 if status.get("ok") else 503
