# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask
from flask_cors import CORS

from userapi.container import Container
from userapi.infrastructure.db import init_db
from userapi.shared.config import AppConfig, load_config
from userapi.shared.logging import logger, setup_logging
from userapi.shared.middleware.error_handler import configure_error_handling
from userapi.shared.middleware.request_logger import configure_request_logging

CORS_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
CORS_HEADERS = ["Content-Type", "Authorization"]


def create_app(config: AppConfig | None = None) -> Flask:
    config = config or load_config()
    setup_logging(debug_mode=config.debug_logging)
    init_db()

    container = Container(config)

    app = Flask(__name__)
    app.extensions["userapi.container"] = container
    configure_error_handling(app, config)
    configure_request_logging(app, debug_mode=config.debug_logging)

    origins = config.security.allowed_origins
    # flask-cors echoes the request origin for a list; a bare "*" sends the wildcard.
    CORS(
        app,
        resources={r"/api/*": {"origins": "*" if origins == ["*"] else origins}},
        methods=CORS_METHODS,
        allow_headers=CORS_HEADERS,
    )
    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.lists_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Frame-Options", "DENY")
        if config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security", "max-age=31536000; includeSubDomains"
            )
        return resp

    if config.jwt.expires_in == 0:
        logger.warning("JWT_EXPIRES_IN=0: session tokens will not expire")
    logger.info("Flask app initialized")
    return app
