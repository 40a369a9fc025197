# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, g, jsonify, request
from pydantic import ValidationError

from forum.application.use_cases.users.login_user import LoginUserUseCase
from forum.application.use_cases.users.logout_user import LogoutUserUseCase
from forum.application.use_cases.users.register_user import RegisterUserUseCase
from forum.domain.users.exceptions import InvalidCredentialsError
from forum.infrastructure.audit import AuditAction, audit_log
from forum.infrastructure.session_middleware import SessionAuthenticator
from forum.interfaces.http.dto.auth import (
    AuthSuccessDTO,
    LoginRequestDTO,
    LoginSuccessDTO,
    RegisterRequestDTO,
    RegisterSuccessDTO,
    UserDTO,
)
from forum.shared.errors.validation import raise_validation_error
from forum.shared.logging import logger
from forum.shared.middleware.rate_limit import client_ip, rate_limit


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        logout_use_case: LogoutUserUseCase,
        authenticator: SessionAuthenticator,
        cookie_secure: bool = False,
        cookie_samesite: str = "Lax",
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._logout_use_case = logout_use_case
        self._authenticator = authenticator
        self._cookie_secure = cookie_secure
        self._cookie_samesite = cookie_samesite

    @rate_limit(limit=5, window_seconds=60.0)
    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        user = self._register_use_case.execute(dto.username, dto.email, dto.password)

        audit_log(
            AuditAction.REGISTER,
            user_id=user.id,
            ip_address=client_ip(request),
            details={"username": user.username},
        )
        logger.info(f"auth.register: ok user_id={user.id}")
        return jsonify(RegisterSuccessDTO(user_id=user.id).model_dump()), 201

    @rate_limit(limit=10, window_seconds=60.0)
    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        ip_address = client_ip(request)
        try:
            session = self._login_use_case.execute(dto.identifier, dto.password)
        except InvalidCredentialsError as exc:
            audit_log(
                AuditAction.LOGIN_FAILED,
                ip_address=ip_address,
                details={"reason": type(exc).__name__},
                success=False,
            )
            raise

        audit_log(AuditAction.LOGIN_SUCCESS, user_id=session.user_id, ip_address=ip_address)

        response = jsonify(LoginSuccessDTO(expires_at=session.expires_at).model_dump(mode="json"))
        response.set_cookie(
            self._authenticator.cookie_name,
            session.token,
            expires=session.expires_at,
            path="/",
            httponly=True,
            samesite=self._cookie_samesite,
            secure=self._cookie_secure,
        )
        logger.info(f"auth.login: ok user_id={session.user_id}")
        return response, 200

    def logout(self) -> tuple[Response, int]:
        token = request.cookies.get(self._authenticator.cookie_name, "")
        self._logout_use_case.execute(token)

        audit_log(AuditAction.LOGOUT, ip_address=client_ip(request))

        response = jsonify(AuthSuccessDTO().model_dump())
        response.delete_cookie(
            self._authenticator.cookie_name,
            path="/",
            secure=self._cookie_secure,
            samesite=self._cookie_samesite,
        )
        logger.info("auth.logout: ok")
        return response, 200

    def me(self) -> tuple[Response, int]:
        return jsonify(UserDTO.from_domain(g.user).model_dump(mode="json")), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api/auth")
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/logout", view_func=self.logout, methods=["DELETE"])
        bp.add_url_rule("/me", view_func=self._authenticator.required(self.me), methods=["GET"])
        return bp
