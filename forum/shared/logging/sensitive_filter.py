# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re
from typing import Any

_REDACTED = "***REDACTED***"


def _assignment(key: str, value: str = r"[^'\"\s,;}]+") -> re.Pattern[str]:
    return re.compile(rf"(\b{key}\s*[:=]\s*['\"]?)({value})", re.IGNORECASE)


_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (_assignment(r"password(?:_hash)?"), rf"\1{_REDACTED}"),
    (_assignment(r"secret[_-]?key"), rf"\1{_REDACTED}"),
    (_assignment(r"token", r"[A-Za-z0-9_\-.]{16,}"), rf"\1{_REDACTED}"),
    (_assignment(r"session[_-]?id", r"[A-Za-z0-9_\-.]{16,}"), rf"\1{_REDACTED}"),
    # Werkzeug hashes, e.g. scrypt:32768:8:1$salt$digest
    (re.compile(r"\b(?:scrypt|pbkdf2:[a-z0-9]+):[^\s'\"]+"), _REDACTED),
    (re.compile(r"(\w+://[^:/\s]+:)[^@\s]+@"), rf"\1{_REDACTED}@"),
    (re.compile(r"(cookie\s*:\s*)[^\n]+", re.IGNORECASE), rf"\1{_REDACTED}"),
    # Keep the domain so log readers can still tell users apart roughly.
    (re.compile(r"[A-Za-z0-9._%+-]+@([A-Za-z0-9.-]+\.[A-Za-z]{2,})"), r"***@\1"),
)


def sanitize_message(message: str) -> str:
    for pattern, replacement in _RULES:
        message = pattern.sub(replacement, message)
    return message


def sanitize_record(record: dict[str, Any]) -> bool:
    record["message"] = sanitize_message(record["message"])
    return True


__all__ = ["sanitize_message", "sanitize_record"]
