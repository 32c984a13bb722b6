# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Flask, Response, g, jsonify, request
from werkzeug.exceptions import HTTPException

from useraccounts.shared.logging import logger

from .base import AppError

_INTERNAL_ERROR = {"error": "internal_error", "message": "Internal server error"}


def handle_app_error(error: AppError) -> tuple[Response, HTTPStatus]:
    return jsonify(error.to_dict()), error.status


def register_error_handler(
    app: Flask,
    *,
    debug_mode: bool = False,
    default_status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR,
) -> None:
    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        if exc.status >= HTTPStatus.INTERNAL_SERVER_ERROR:
            logger.error(f"{request.method} {request.path} failed: {exc.code}")
        else:
            logger.info(f"{request.method} {request.path} rejected: {exc.code} ({int(exc.status)})")
        return handle_app_error(exc)

    @app.errorhandler(HTTPException)
    def _handle_http(exc: HTTPException):
        return exc

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        # the response never carries exception text; details stay in the log
        if debug_mode:
            logger.opt(exception=exc).error(
                f"unhandled error on {request.method} {request.path} user={g.get('user_id')}"
            )
        else:
            logger.error(f"unhandled {type(exc).__name__} on {request.method} {request.path}")
        return jsonify(_INTERNAL_ERROR), default_status
