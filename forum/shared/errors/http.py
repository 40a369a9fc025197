# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Flask, Response, jsonify, request

from forum.shared.logging import logger

from .base import AppError


def handle_app_error(error: AppError) -> tuple[Response, HTTPStatus]:
    return jsonify(error.to_dict()), error.status


def register_error_handler(app: Flask) -> None:
    """Render every `AppError` raised by a view as its JSON payload."""

    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        where = f"{request.method} {request.path}"
        if exc.is_server_fault:
            logger.error(f"{exc.code} on {where} context={dict(exc.context or {})}")
        else:
            logger.info(f"{exc.code} ({int(exc.status)}) on {where}")
        return handle_app_error(exc)
