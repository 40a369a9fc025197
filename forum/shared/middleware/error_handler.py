# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask, g, jsonify, request
from werkzeug.exceptions import HTTPException

from forum.shared.config import load_config
from forum.shared.errors import register_error_handler
from forum.shared.logging import logger
from forum.shared.middleware.rate_limit import client_ip


def _http_error_code(exc: HTTPException) -> str:
    return (exc.name or "http_error").lower().replace(" ", "_")


def configure_error_handling(app: Flask) -> None:
    """JSON bodies for every failure: application errors, HTTP errors, crashes."""
    debug_mode = load_config().debug_logging
    register_error_handler(app)

    @app.errorhandler(HTTPException)
    def _handle_http(exc: HTTPException):
        return jsonify({"error": _http_error_code(exc)}), exc.code or 500

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        if debug_mode:
            logger.opt(exception=exc).error(
                f"Unhandled exception on {request.method} {request.path} "
                f"from {client_ip(request)}, user={getattr(g, 'user_id', None)}"
            )
        else:
            logger.error(f"Unhandled {type(exc).__name__} on {request.method} {request.path}")
        return jsonify({"error": "internal_error"}), 500


__all__ = ["configure_error_handling"]
