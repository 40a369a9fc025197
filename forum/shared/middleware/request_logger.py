# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re
import secrets
import time

from flask import Flask, Response, g, request

from forum.shared.config import load_config
from forum.shared.logging import (
    clear_correlation_id,
    get_correlation_id,
    logger,
    set_correlation_id,
)
from forum.shared.middleware.rate_limit import client_ip

REQUEST_ID_HEADER = "X-Request-ID"
_REQUEST_ID_RE = re.compile(r"^[A-Za-z0-9._-]{1,64}$")
_HIDDEN_HEADERS = frozenset({"authorization", "cookie", "set-cookie"})


def _incoming_request_id() -> str:
    supplied = request.headers.get(REQUEST_ID_HEADER, "")
    # Client ids end up in every log line; anything odd is replaced.
    return supplied if _REQUEST_ID_RE.match(supplied) else secrets.token_hex(6)


def _visible_headers() -> dict[str, str]:
    return {
        name: "<hidden>" if name.lower() in _HIDDEN_HEADERS else value
        for name, value in request.headers.items()
    }


def configure_request_logging(app: Flask) -> None:
    debug_mode = load_config().debug_logging

    @app.before_request
    def _open_request() -> None:
        set_correlation_id(_incoming_request_id())
        g.request_started = time.perf_counter()
        line = f"--> {request.method} {request.path} from {client_ip(request)}"
        if debug_mode:
            line += f" headers={_visible_headers()} body_size={request.content_length or 0}"
        logger.info(line)

    @app.after_request
    def _close_request(response: Response) -> Response:
        elapsed = time.perf_counter() - g.get("request_started", time.perf_counter())
        logger.info(
            f"<-- {request.method} {request.path} {response.status_code} "
            f"{elapsed * 1000:.1f}ms user={g.get('user_id')}"
        )
        response.headers[REQUEST_ID_HEADER] = get_correlation_id()
        return response

    @app.teardown_request
    def _teardown(exc: BaseException | None) -> None:
        if exc is not None:
            logger.opt(exception=exc if debug_mode else None).error(
                f"request failed: {type(exc).__name__} on {request.method} {request.path}"
            )
        clear_correlation_id()


__all__ = ["REQUEST_ID_HEADER", "configure_request_logging"]
