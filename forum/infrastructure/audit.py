# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Audit trail for authentication and content events, written to the application log."""

from __future__ import annotations

from enum import Enum
from typing import Any

from forum.shared.logging import logger


class AuditAction(str, Enum):
    REGISTER = "register"
    LOGIN_SUCCESS = "login_success"
    LOGIN_FAILED = "login_failed"
    LOGOUT = "logout"
    SESSION_REJECTED = "session_rejected"
    POST_CREATED = "post_created"
    POST_UPDATED = "post_updated"
    POST_DELETED = "post_deleted"
    COMMENT_CREATED = "comment_created"


_SENSITIVE_KEYS = ("password", "token", "session", "secret", "hash", "cookie")


def _redact(details: dict[str, Any]) -> dict[str, Any]:
    return {
        key: "***REDACTED***" if any(marker in key.lower() for marker in _SENSITIVE_KEYS) else value
        for key, value in details.items()
    }


def audit_log(
    action: AuditAction,
    *,
    user_id: int | None = None,
    ip_address: str | None = None,
    details: dict[str, Any] | None = None,
    success: bool = True,
) -> None:
    fields = {"user_id": user_id, "ip": ip_address, "success": success, **_redact(details or {})}
    rendered = " ".join(f"{key}={value}" for key, value in fields.items() if value is not None)
    logger.log("INFO" if success else "WARNING", f"AUDIT {action.value} {rendered}")


__all__ = ["AuditAction", "audit_log"]
