# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from forum.shared.errors.base import DomainError, ValidationError


class CredentialValidationError(ValidationError):
    """A registration field violated its format rules."""

    field: str = "unknown"

    def __init__(self) -> None:
        super().__init__(code=f"invalid_{self.field}", context={"field": self.field})


class InvalidEmailError(CredentialValidationError):
    field = "email"


class InvalidUsernameError(CredentialValidationError):
    field = "username"


class InvalidPasswordError(CredentialValidationError):
    field = "password"


class DuplicateCredentialError(DomainError):
    default_code = "duplicate_credential"
    default_status = HTTPStatus.CONFLICT

    def __init__(self, field: str | None = None) -> None:
        super().__init__(context={"field": field} if field else None)


class InvalidCredentialsError(DomainError):
    default_code = "invalid_credentials"
    default_status = HTTPStatus.UNAUTHORIZED

    def __init__(self) -> None:
        super().__init__()


class UserNotFoundError(InvalidCredentialsError):
    """Unknown login identifier; reported to clients exactly like a wrong password."""


class UnauthorizedError(DomainError):
    default_code = "unauthorized"
    default_status = HTTPStatus.UNAUTHORIZED

    def __init__(self, *, clear_cookie: bool = False) -> None:
        super().__init__()
        self.clear_cookie = clear_cookie
