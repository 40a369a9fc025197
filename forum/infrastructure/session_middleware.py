# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import hashlib
from collections.abc import Callable
from dataclasses import dataclass
from functools import wraps
from typing import Any

from flask import Request, g, request

from forum.application.use_cases.users.resolve_session import ResolveSessionUseCase
from forum.domain.users.entities import User
from forum.domain.users.exceptions import UnauthorizedError
from forum.infrastructure.audit import AuditAction, audit_log
from forum.shared.errors import handle_app_error
from forum.shared.logging import logger
from forum.shared.middleware.rate_limit import client_ip


@dataclass(slots=True, frozen=True)
class AuthenticatedRequest:
    request: Request
    user: User
    token: str


def _token_fingerprint(token: str) -> str:
    return hashlib.sha256(token.encode()).hexdigest()[:8]


class SessionAuthenticator:
    def __init__(self, *, resolve_session: ResolveSessionUseCase, cookie_name: str) -> None:
        self._resolve_session = resolve_session
        self._cookie_name = cookie_name

    @property
    def cookie_name(self) -> str:
        return self._cookie_name

    def authenticate(self, req: Request) -> AuthenticatedRequest:
        token = req.cookies.get(self._cookie_name, "")
        if not token:
            logger.info(f"auth: no session cookie on {req.method} {req.path}")
            raise UnauthorizedError()

        user = self._resolve_session.execute(token)
        if user is None:
            logger.info(
                f"auth: session <hash:{_token_fingerprint(token)}> unknown or expired "
                f"on {req.method} {req.path}"
            )
            audit_log(AuditAction.SESSION_REJECTED, ip_address=client_ip(req), success=False)
            raise UnauthorizedError(clear_cookie=True)

        g.user = user
        g.user_id = user.id
        logger.debug(f"auth: ok user={user.id} {req.method} {req.path}")
        return AuthenticatedRequest(request=req, user=user, token=token)

    def required(self, func: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                self.authenticate(request)
            except UnauthorizedError as exc:
                response, status = handle_app_error(exc)
                if exc.clear_cookie:
                    response.delete_cookie(self._cookie_name, path="/")
                return response, status
            return func(*args, **kwargs)

        return wrapper


__all__ = ["AuthenticatedRequest", "SessionAuthenticator"]
