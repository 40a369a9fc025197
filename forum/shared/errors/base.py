# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, ClassVar


@dataclass(slots=True)
class AppError(Exception):
    """Error that maps onto an HTTP response: `code` is the public error id."""

    code: str
    status: HTTPStatus = HTTPStatus.BAD_REQUEST
    context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.code)

    @property
    def is_server_fault(self) -> bool:
        return self.status >= HTTPStatus.INTERNAL_SERVER_ERROR

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.code}
        if self.context:
            payload["context"] = dict(self.context)
        return payload


class DomainError(AppError):
    """Business rule violation; subclasses pin their public code and status."""

    default_code: ClassVar[str] = "domain_error"
    default_status: ClassVar[HTTPStatus] = HTTPStatus.BAD_REQUEST

    def __init__(self, *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(self.default_code, self.default_status, context)


class ValidationError(AppError):
    def __init__(
        self, code: str = "validation_error", *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__(code, HTTPStatus.UNPROCESSABLE_ENTITY, context)


class InfrastructureError(AppError):
    def __init__(
        self, code: str = "infrastructure_error", *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__(code, HTTPStatus.INTERNAL_SERVER_ERROR, context)


class StorageFailureError(InfrastructureError):
    """The backing store could not complete `operation`."""

    def __init__(self, operation: str) -> None:
        super().__init__("storage_failure", context={"operation": operation})
