# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Flask, Response, g, jsonify, request
from werkzeug.exceptions import HTTPException, MethodNotAllowed

from userapi.shared.logging import logger

from .base import AppError, AuthenticationError

# Legacy clients saw 422 for every failure except a rejected token (401).
LEGACY_ERROR_STATUS = HTTPStatus.UNPROCESSABLE_ENTITY


def resolve_status(error: AppError, *, legacy: bool = False) -> HTTPStatus:
    if legacy and not isinstance(error, AuthenticationError):
        return LEGACY_ERROR_STATUS
    return error.status


def handle_app_error(error: AppError, *, legacy: bool = False) -> tuple[Response, HTTPStatus]:
    response = jsonify(error.to_dict())
    return response, resolve_status(error, legacy=legacy)


def handle_http_error(exc: HTTPException, *, legacy: bool = False) -> tuple[Response, int]:
    """Render werkzeug routing errors (404, 405, ...) in the JSON error shape."""
    status = exc.code or HTTPStatus.INTERNAL_SERVER_ERROR
    response = jsonify(
        {
            "message": exc.description or exc.name,
            "error": exc.name.lower().replace(" ", "_"),
        }
    )
    if legacy:
        return response, LEGACY_ERROR_STATUS
    if isinstance(exc, MethodNotAllowed) and exc.valid_methods:
        response.headers["Allow"] = ", ".join(exc.valid_methods)
    return response, status


def register_error_handler(
    app: Flask,
    *,
    legacy_status: bool = False,
    debug_mode: bool = False,
    default_status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR,
) -> None:
    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        logger.warning(
            f"Handled application error {exc.code} on {request.method} {request.path}"
        )
        return handle_app_error(exc, legacy=legacy_status)

    @app.errorhandler(HTTPException)
    def _handle_http(exc: HTTPException):
        return handle_http_error(exc, legacy=legacy_status)

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        user_id = getattr(g, "user_id", None)

        if debug_mode:
            logger.exception(
                f"Unhandled exception: {request.method} {request.path} "
                f"user={user_id}, body_size={len(request.data)}"
            )
        else:
            logger.error(f"Error: {type(exc).__name__} on {request.method} {request.path}")

        response = jsonify({"message": "Internal server error", "error": "internal_error"})
        return response, LEGACY_ERROR_STATUS if legacy_status else default_status
